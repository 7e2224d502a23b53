"""OCI manifest library for Python

This module provides an immutable model of the OCI image manifest,
the document that ties an artifact's config, layers and subject together.
"""
from pyoras.oci.annotations import Annotations
from pyoras.oci.artifact_type import ArtifactType
from pyoras.oci.const import (
    DEFAULT_ARTIFACT_MEDIA_TYPE,
    EMPTY_DIGEST,
    EMPTY_MEDIA_TYPE,
    MANIFEST_MEDIA_TYPE,
)
from pyoras.oci.descriptor import Config, Descriptor, Layer, ManifestDescriptor, Subject
from pyoras.oci.errors import DecodeError, OCIError
from pyoras.oci.manifest import Manifest

__all__ = [
    "Annotations",
    "ArtifactType",
    "Config",
    "DecodeError",
    "DEFAULT_ARTIFACT_MEDIA_TYPE",
    "Descriptor",
    "EMPTY_DIGEST",
    "EMPTY_MEDIA_TYPE",
    "Layer",
    "MANIFEST_MEDIA_TYPE",
    "Manifest",
    "ManifestDescriptor",
    "OCIError",
    "Subject",
]
