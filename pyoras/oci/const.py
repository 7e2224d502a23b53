"""OCI media types and well known digests

ref: https://github.com/opencontainers/image-spec/blob/main/media-types.md
"""

MANIFEST_MEDIA_TYPE = "application/vnd.oci.image.manifest.v1+json"
EMPTY_MEDIA_TYPE = "application/vnd.oci.empty.v1+json"
DEFAULT_ARTIFACT_MEDIA_TYPE = "application/vnd.unknown.artifact.v1"
DEFAULT_LAYER_MEDIA_TYPE = "application/vnd.oci.image.layer.v1.tar"

# sha256 of the two byte payload b"{}"
# ref: https://github.com/opencontainers/image-spec/blob/main/manifest.md#guidance-for-an-empty-descriptor
EMPTY_DIGEST = "sha256:44136fa355b3678a1146ad16f7e8649e94fb4fc21fe77e8310c060f61caaff8a"
EMPTY_SIZE = 2
