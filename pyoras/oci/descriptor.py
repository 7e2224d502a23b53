from __future__ import annotations

from hashlib import sha256
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr

from pyoras.oci.annotations import Annotations
from pyoras.oci.const import (
    DEFAULT_LAYER_MEDIA_TYPE,
    EMPTY_DIGEST,
    EMPTY_MEDIA_TYPE,
    EMPTY_SIZE,
)

if TYPE_CHECKING:
    from pyoras.oci.manifest import Manifest


class Descriptor(BaseModel):
    """
    ref: https://github.com/opencontainers/image-spec/blob/main/descriptor.md
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    mediaType: StrictStr
    digest: StrictStr
    size: StrictInt
    urls: tuple[StrictStr, ...] | None = None
    annotations: Annotations | None = None
    artifactType: StrictStr | None = None

    @classmethod
    def from_data(cls, data: bytes, media_type: str):
        """Describe an in-memory blob"""
        return cls(
            mediaType=media_type,
            digest=f"sha256:{sha256(data).hexdigest()}",
            size=len(data),
        )


class Layer(Descriptor):
    @classmethod
    def from_data(cls, data: bytes, media_type: str = DEFAULT_LAYER_MEDIA_TYPE):
        return super().from_data(data, media_type=media_type)


class Config(Descriptor):
    """
    ref: https://github.com/opencontainers/image-spec/blob/main/manifest.md#image-manifest-property-descriptions
    """

    # Not every producer sets a config media type
    mediaType: StrictStr | None = None

    @classmethod
    def empty(cls) -> Config:
        """Return the config descriptor of the empty JSON object `{}`"""
        return cls(mediaType=EMPTY_MEDIA_TYPE, digest=EMPTY_DIGEST, size=EMPTY_SIZE)

    @property
    def is_empty(self) -> bool:
        return self.mediaType == EMPTY_MEDIA_TYPE and self.digest == EMPTY_DIGEST


class Subject(Descriptor):
    """
    ref: https://github.com/opencontainers/image-spec/blob/main/manifest.md#guidelines-for-artifact-usage
    """


class ManifestDescriptor(Descriptor):
    """The address of a manifest in a registry"""

    @classmethod
    def from_manifest(cls, manifest: Manifest) -> ManifestDescriptor:
        data = manifest.to_json().encode("utf-8")
        return cls.from_data(data, media_type=manifest.mediaType)
