from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    StrictInt,
    StrictStr,
    ValidationError,
    field_validator,
    model_serializer,
)

from pyoras.oci.annotations import Annotations
from pyoras.oci.artifact_type import ArtifactType
from pyoras.oci.const import (
    DEFAULT_ARTIFACT_MEDIA_TYPE,
    EMPTY_DIGEST,
    EMPTY_MEDIA_TYPE,
    EMPTY_SIZE,
    MANIFEST_MEDIA_TYPE,
)
from pyoras.oci.descriptor import Config, Layer, ManifestDescriptor, Subject
from pyoras.oci.errors import DecodeError

logger = logging.getLogger(__name__)


def _decode_error(error: ValidationError) -> DecodeError:
    """Convert the first pydantic error into a DecodeError naming the field"""
    details = error.errors()[0]
    loc = details.get("loc") or ()
    if details["type"] == "json_invalid" or not loc:
        field = None
        message = f"Invalid manifest: {details['msg']}"
    else:
        field = ".".join(str(part) for part in loc)
        message = f"Invalid manifest field '{field}': {details['msg']}"
    logger.debug("Failed to decode manifest: %s", error)
    return DecodeError(message, field=field)


class Manifest(BaseModel):
    """An immutable OCI image manifest

    Updates never modify an instance in place, every `with_*` method returns
    a new manifest.

    `descriptor` is the address of the manifest itself once it is known to the
    caller (e.g. after a push). It is not part of the manifest content and is
    never serialized.

    ref: https://github.com/opencontainers/image-spec/blob/main/manifest.md
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    # Field order is the serialization order
    schemaVersion: StrictInt = 2
    mediaType: StrictStr = MANIFEST_MEDIA_TYPE
    artifactType: StrictStr | None = None
    config: Config | None = None
    subject: Subject | None = None
    layers: tuple[Layer, ...] = ()
    annotations: Annotations = Field(default_factory=Annotations)
    descriptor: ManifestDescriptor | None = Field(exclude=True, default=None)

    @field_validator("layers", mode="before")
    @classmethod
    def _layers(cls, value: Any) -> Any:
        if value is None:
            return ()
        return value

    @field_validator("annotations", mode="before")
    @classmethod
    def _annotations(cls, value: Any) -> Any:
        # Validated into a read-only snapshot, the caller keeps its mapping
        if value is None:
            return {}
        return value

    @model_serializer(mode="wrap")
    def _serialize(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        if not data.get("annotations"):
            data.pop("annotations", None)
        return data

    @classmethod
    def empty(cls) -> Manifest:
        """Return the canonical empty manifest"""
        return cls(
            schemaVersion=2,
            mediaType=MANIFEST_MEDIA_TYPE,
            descriptor=ManifestDescriptor(
                mediaType=EMPTY_MEDIA_TYPE,
                digest=EMPTY_DIGEST,
                size=EMPTY_SIZE,
            ),
            config=Config.empty(),
            layers=(),
        )

    @property
    def artifact_type(self) -> ArtifactType:
        """Return the effective artifact type

        The explicit `artifactType` wins, then the config media type.
        Without either the artifact type is unknown.

        A config with the empty media type resolves to unknown rather than to
        `application/vnd.oci.empty.v1+json`: the empty config carries no type
        information, and OCI requires `artifactType` to be set alongside it.
        """
        if self.artifactType is not None:
            return ArtifactType.from_media_type(self.artifactType)
        if self.config is not None:
            if self.config.mediaType == EMPTY_MEDIA_TYPE:
                # The empty config says nothing about the artifact
                return ArtifactType.unknown()
            return ArtifactType.from_media_type(
                self.config.mediaType or DEFAULT_ARTIFACT_MEDIA_TYPE
            )
        return ArtifactType.unknown()

    def top_level_artifact_type(self) -> ArtifactType | None:
        """Return the explicitly set artifact type, never a derived one"""
        if self.artifactType is not None:
            return ArtifactType.from_media_type(self.artifactType)
        return None

    def _replace(self, **changes: Any) -> Manifest:
        fields = {name: getattr(self, name) for name in type(self).model_fields}
        top_level = self.top_level_artifact_type()
        fields["artifactType"] = top_level.media_type if top_level else None
        fields.update(changes)
        return type(self).model_validate(fields)

    def with_artifact_type(self, artifact_type: ArtifactType | str | None) -> Manifest:
        if isinstance(artifact_type, ArtifactType):
            artifact_type = artifact_type.media_type
        return self._replace(artifactType=artifact_type)

    def with_layers(self, layers: Iterable[Layer]) -> Manifest:
        return self._replace(layers=tuple(layers))

    def with_config(self, config: Config | None) -> Manifest:
        return self._replace(config=config)

    def with_subject(self, subject: Subject | None) -> Manifest:
        return self._replace(subject=subject)

    def with_annotations(self, annotations: Mapping[str, str] | None) -> Manifest:
        return self._replace(annotations=annotations)

    def with_descriptor(self, descriptor: ManifestDescriptor | None) -> Manifest:
        return self._replace(descriptor=descriptor)

    def to_json(self) -> str:
        return self.model_dump_json(exclude_none=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def from_json(cls, data: str | bytes) -> Manifest:
        try:
            return cls.model_validate_json(data)
        except ValidationError as e:
            raise _decode_error(e) from e

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Manifest:
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise _decode_error(e) from e
