import logging
import logging.config
from pathlib import Path

import click

import pyoras

logger = logging.getLogger(__name__)

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(levelname)s %(name)s: %(message)s",
        },
    },
    "handlers": {
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
    },
    "loggers": {
        "pyoras": {"handlers": ["default"], "level": "INFO", "propagate": False},
    },
}


def load_manifest(path: Path) -> "pyoras.oci.Manifest":
    logger.debug("Reading manifest from %s", path)
    try:
        return pyoras.oci.Manifest.from_json(path.read_bytes())
    except pyoras.oci.DecodeError as e:
        raise click.ClickException(f"{path}: {e}") from e


@click.group()
@click.option("-d", "--debug", help="Debug output", is_flag=True)
def cli(debug: bool = False):
    config = LOGGING_CONFIG | {
        "loggers": {
            "pyoras": LOGGING_CONFIG["loggers"]["pyoras"]
            | {"level": "DEBUG" if debug else "INFO"}
        }
    }
    logging.config.dictConfig(config)


@cli.command()
def empty():
    """Print the canonical empty manifest."""
    print(pyoras.oci.Manifest.empty().to_json())


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def inspect(path: Path):
    """Show the content of a manifest file."""
    manifest = load_manifest(path)
    print(f"schemaVersion: {manifest.schemaVersion}")
    print(f"mediaType:     {manifest.mediaType}")
    print(f"artifactType:  {manifest.artifact_type}")
    print(f"config:        {manifest.config.digest if manifest.config else '-'}")
    print(f"subject:       {manifest.subject.digest if manifest.subject else '-'}")
    print(f"layers:        {len(manifest.layers)}")
    for layer in manifest.layers:
        print(f"  {layer.mediaType} {layer.digest} {layer.size}")
    if manifest.annotations:
        print("annotations:")
        for key, value in sorted(manifest.annotations.items()):
            print(f"  {key}={value}")


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def descriptor(path: Path):
    """Print the descriptor of a manifest file in its canonical encoding."""
    manifest = load_manifest(path)
    described = pyoras.oci.ManifestDescriptor.from_manifest(manifest)
    logger.debug("Canonical manifest: %s", manifest.to_json())
    print(described.model_dump_json(exclude_none=True))


if __name__ == "__main__":
    cli()
