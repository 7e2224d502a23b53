from hashlib import sha256

import pytest

from pyoras.oci import EMPTY_MEDIA_TYPE, Annotations, ArtifactType, Config, DecodeError, Descriptor, Layer, Manifest
from pyoras.oci.const import DEFAULT_LAYER_MEDIA_TYPE


def test_layer_from_data():
    layer = Layer.from_data(b"hello")
    assert isinstance(layer, Layer)
    assert layer.mediaType == DEFAULT_LAYER_MEDIA_TYPE
    assert layer.digest == f"sha256:{sha256(b'hello').hexdigest()}"
    assert layer.size == 5


@pytest.mark.parametrize(
    "config,expected",
    [
        (Config.empty(), True),
        (Config(mediaType=EMPTY_MEDIA_TYPE, digest="sha256:a", size=2), False),
        (Config.from_data(b"{}", media_type="application/vnd.example.config.v1+json"), False),
    ],
)
def test_config_is_empty(config, expected):
    assert config.is_empty is expected


def test_config_media_type_is_optional():
    config = Config(digest="sha256:a", size=1)
    assert config.mediaType is None
    assert config.model_dump(exclude_none=True) == {"digest": "sha256:a", "size": 1}


def test_descriptor_ignores_unknown_fields():
    manifest = Manifest.from_json(
        '{"layers": [{"mediaType": "a", "digest": "b", "size": 1, "platform": {"os": "linux"}}]}'
    )
    assert manifest.layers == (Layer(mediaType="a", digest="b", size=1),)


def test_descriptor_size_must_be_an_integer():
    with pytest.raises(DecodeError) as exc_info:
        Manifest.from_json('{"config": {"mediaType": "a", "digest": "b", "size": true}}')
    assert exc_info.value.field == "config.size"


def test_descriptor_is_frozen():
    descriptor = Descriptor(mediaType="a", digest="b", size=1)
    with pytest.raises(ValueError):
        descriptor.size = 2


def test_artifact_type():
    assert str(ArtifactType.from_media_type("application/vnd.a")) == "application/vnd.a"
    assert not ArtifactType.from_media_type("application/vnd.a").is_unknown
    assert ArtifactType.unknown().is_unknown
    assert ArtifactType.unknown() == ArtifactType.unknown()


def test_descriptor_annotations_are_read_only():
    descriptor = Descriptor(mediaType="a", digest="b", size=1, annotations={"k": "v"})
    with pytest.raises(TypeError):
        descriptor.annotations["k"] = "x"
    assert descriptor.model_dump_json(exclude_none=True) == (
        '{"mediaType":"a","digest":"b","size":1,"annotations":{"k":"v"}}'
    )
    assert hash(descriptor) == hash(Descriptor(mediaType="a", digest="b", size=1, annotations={"k": "v"}))


def test_annotations():
    source = {"b": "2", "a": "1"}
    annotations = Annotations(source)
    source["c"] = "3"
    assert annotations == {"a": "1", "b": "2"}
    assert {"a": "1", "b": "2"} == annotations
    assert len(annotations) == 2
    assert hash(annotations) == hash(Annotations({"a": "1", "b": "2"}))
    assert Annotations() == {}
