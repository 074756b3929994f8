"""
Module 02 - Record Serializer
Fixed-width record encoding.

Rules (hard contracts):
1. Fields are emitted in layout order, never sorted
2. Each value is UTF-8 encoded and right-padded with spaces to its width
3. A value longer than its width raises FieldTooLongException; nothing is
   truncated and no partial output is produced
4. len(output) == layout.record_width
"""
from __future__ import annotations

import logging
from typing import Mapping

from vcbridge.codec.u32 import pad_right
from vcbridge.schemas.layout import FieldLayout, Record, SerializedRecord

logger = logging.getLogger(__name__)


def serialize(record: Record | Mapping[str, str], layout: FieldLayout) -> SerializedRecord:
    """
    Serialize a record under a fixed-width layout.

    Args:
        record: Record (or plain mapping) whose keys match the layout
        layout: Field widths in serialization order

    Returns:
        SerializedRecord of exactly layout.record_width bytes

    Raises:
        RecordLayoutMismatchException: If record keys differ from layout fields
        FieldTooLongException: If a value's byte length exceeds its width

    Example:
        >>> layout = FieldLayout.from_mapping({"a": 4, "b": 4})
        >>> serialize({"a": "x", "b": "yz"}, layout).data
        b'x   yz  '
    """
    if not isinstance(record, Record):
        record = Record(values=dict(record))
    record.check_layout(layout)

    parts: list[bytes] = []
    for name, width in layout.items():
        parts.append(pad_right(record.get(name).encode("utf-8"), width, field=name))

    serialized = SerializedRecord(data=b"".join(parts), layout=layout)
    logger.debug(f"Serialized {len(layout.fields)} fields into {len(serialized)} bytes")
    return serialized


class RecordSerializer:
    """
    Serializer bound to a single layout.

    Example:
        >>> serializer = RecordSerializer(layout)
        >>> serializer.serialize({"name": "Lukas", ...}).data[:12]
        b'Lukas       '
    """

    def __init__(self, layout: FieldLayout) -> None:
        self.layout = layout

    def serialize(self, record: Record | Mapping[str, str]) -> SerializedRecord:
        return serialize(record, self.layout)


__all__ = [
    "serialize",
    "RecordSerializer",
]
