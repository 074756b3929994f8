"""
Record codec.

Serializes records into fixed-width bytes, pads or splits them into circuit
blocks, and converts bytes to big-endian word arrays.
"""
from .field_elements import (
    FIELD_MODULUS,
    bytes_to_field_element,
    bytes_to_signals,
    pack_fields,
    to_field,
)
from .padding import BlockPadder, ChunkSplitScheme, LengthPaddingScheme
from .serializer import RecordSerializer, serialize
from .u32 import (
    bytes_to_words,
    hex_digest_to_words,
    hex_to_words,
    pad_right,
    string_to_words,
    words_to_bytes,
    words_to_hex,
)

__all__ = [
    "FIELD_MODULUS",
    "bytes_to_field_element",
    "bytes_to_signals",
    "pack_fields",
    "to_field",
    "BlockPadder",
    "ChunkSplitScheme",
    "LengthPaddingScheme",
    "RecordSerializer",
    "serialize",
    "bytes_to_words",
    "hex_digest_to_words",
    "hex_to_words",
    "pad_right",
    "string_to_words",
    "words_to_bytes",
    "words_to_hex",
]
