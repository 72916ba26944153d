from cloudvision.lro.decoders import (
    DecoderPair,
    DecoderRegistry,
    decode_empty,
    decode_model,
)
from cloudvision.lro.operation import OperationHandle, OperationState

__all__ = [
    "DecoderPair",
    "DecoderRegistry",
    "OperationHandle",
    "OperationState",
    "decode_empty",
    "decode_model",
]
