import pytest

from cloudvision.exceptions import UnknownMethodError
from cloudvision.lro import DecoderPair, DecoderRegistry, decode_empty, decode_model
from cloudvision.types import BatchOperationMetadata, BatchOperationState, ProductSet


def test_decode_model_reads_wire_json():
    decode = decode_model(ProductSet)

    product_set = decode(b'{"name": "projects/p/locations/l/productSets/s", "displayName": "Shoes"}')

    assert product_set == ProductSet(name="projects/p/locations/l/productSets/s", display_name="Shoes")


def test_decode_model_treats_empty_payload_as_empty_message():
    metadata = decode_model(BatchOperationMetadata)(b"")

    assert metadata.state is BatchOperationState.STATE_UNSPECIFIED


def test_decode_empty_ignores_payload():
    assert decode_empty(b'{"anything": 1}') is None


def test_pair_without_response_model_decodes_to_none():
    pair = DecoderPair.for_models(None, BatchOperationMetadata)

    assert pair.response(b"{}") is None
    assert pair.metadata(b'{"state": "PROCESSING"}').state is BatchOperationState.PROCESSING


class TestDecoderRegistry:
    def test_register_and_get(self):
        registry = DecoderRegistry()
        pair = DecoderPair.for_models(ProductSet, BatchOperationMetadata)

        registry.register("svc.method", pair)

        assert registry.get("svc.method") is pair
        assert registry.is_registered("svc.method")
        assert registry.list_methods() == ["svc.method"]

    def test_register_from_constructor(self):
        pair = DecoderPair.for_models(None, BatchOperationMetadata)
        registry = DecoderRegistry({"a.one": pair, "a.two": pair})

        assert registry.list_methods() == ["a.one", "a.two"]

    def test_duplicate_registration_raises(self):
        registry = DecoderRegistry()
        registry.register("svc.method", DecoderPair.for_models(None, BatchOperationMetadata))

        with pytest.raises(ValueError, match="already registered"):
            registry.register("svc.method", DecoderPair.for_models(None, BatchOperationMetadata))

    def test_non_callable_decoder_raises(self):
        registry = DecoderRegistry()

        with pytest.raises(TypeError):
            registry.register("svc.method", DecoderPair(response=decode_empty, metadata=None))

    def test_unknown_method_raises(self):
        registry = DecoderRegistry()
        registry.register("svc.known", DecoderPair.for_models(None, BatchOperationMetadata))

        with pytest.raises(UnknownMethodError) as exc_info:
            registry.get("svc.unknown")

        assert exc_info.value.method == "svc.unknown"
        assert "svc.known" in str(exc_info.value)
        assert isinstance(exc_info.value, KeyError)
        assert not registry.is_registered("svc.unknown")

    def test_require_reports_first_missing_method(self):
        registry = DecoderRegistry()
        registry.register("svc.known", DecoderPair.for_models(None, BatchOperationMetadata))

        registry.require(["svc.known"])
        with pytest.raises(UnknownMethodError) as exc_info:
            registry.require(["svc.known", "svc.missing", "svc.other"])

        assert exc_info.value.method == "svc.missing"
