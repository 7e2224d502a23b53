from dataclasses import dataclass

from pyoras.oci.const import DEFAULT_ARTIFACT_MEDIA_TYPE


@dataclass(frozen=True, slots=True)
class ArtifactType:
    """The kind of artifact a manifest represents

    ref: https://github.com/opencontainers/image-spec/blob/main/manifest.md#guidelines-for-artifact-usage
    """

    media_type: str

    def __str__(self):
        return self.media_type

    @classmethod
    def from_media_type(cls, media_type: str) -> "ArtifactType":
        return cls(media_type=media_type)

    @classmethod
    def unknown(cls) -> "ArtifactType":
        return cls(media_type=DEFAULT_ARTIFACT_MEDIA_TYPE)

    @property
    def is_unknown(self) -> bool:
        return self.media_type == DEFAULT_ARTIFACT_MEDIA_TYPE
