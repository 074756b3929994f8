"""
Module 01 - Schemas & Errors
File: layout.py

Purpose: Fixed-width record schemas.

- FieldLayout: ordered mapping of field name to a fixed byte width
- Record: ordered mapping of field name to string value
- SerializedRecord: the space-padded concatenation of a Record under a layout

All three are frozen once constructed. Field offsets are derived from
declaration order, so the same layout always yields the same byte ranges.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import (
    InvalidAlignmentException,
    InvalidLayoutException,
    RecordLayoutMismatchException,
)

# Words are 32-bit big-endian units.
WORD_SIZE: int = 4


class FieldLayout(BaseModel):
    """
    Ordered schema mapping field name to a fixed byte width.

    The sum of all widths is the serialized record width. Offsets follow
    declaration order.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    fields: dict[str, int] = Field(
        ...,
        description="Field name -> byte width, in serialization order",
    )

    @field_validator("fields")
    @classmethod
    def validate_widths(cls, v: dict[str, int]) -> dict[str, int]:
        if not v:
            raise InvalidLayoutException("Layout must declare at least one field")
        for name, width in v.items():
            if not name:
                raise InvalidLayoutException("Field names must be non-empty")
            if isinstance(width, bool) or width <= 0:
                raise InvalidLayoutException(
                    f"Width for '{name}' must be a positive integer, got {width!r}",
                    field=name,
                )
        return dict(v)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, int]) -> "FieldLayout":
        """Build a layout from any ordered name -> width mapping."""
        return cls(fields=dict(mapping))

    @property
    def names(self) -> list[str]:
        return list(self.fields)

    @property
    def record_width(self) -> int:
        """Total serialized width in bytes."""
        return sum(self.fields.values())

    def items(self) -> list[tuple[str, int]]:
        return list(self.fields.items())

    def width(self, name: str) -> int:
        if name not in self.fields:
            raise InvalidLayoutException(f"Unknown field '{name}'", field=name)
        return self.fields[name]

    def offset(self, name: str) -> int:
        """Byte offset of a field within the serialized record."""
        position = 0
        for field_name, width in self.fields.items():
            if field_name == name:
                return position
            position += width
        raise InvalidLayoutException(f"Unknown field '{name}'", field=name)

    def span(self, name: str) -> tuple[int, int]:
        """Return (offset, width) for a field."""
        return self.offset(name), self.width(name)

    def word_span(self, name: str) -> tuple[int, int]:
        """
        Return (word_offset, word_count) for a field.

        A circuit compares sub-ranges word by word, so the field must start
        and end on a 4-byte boundary. Any layout where it does not is
        rejected rather than silently comparing the wrong words.

        Raises:
            InvalidAlignmentException: If the field is not word aligned
        """
        offset, width = self.span(name)
        if offset % WORD_SIZE or width % WORD_SIZE:
            raise InvalidAlignmentException(
                f"Field '{name}' spans bytes [{offset}, {offset + width}) "
                f"which is not aligned to {WORD_SIZE}-byte words",
                length=width,
                details={"field": name, "offset": offset},
            )
        return offset // WORD_SIZE, width // WORD_SIZE


class Record(BaseModel):
    """
    Structured identity record: field name -> string value.

    Use Record.for_layout() to validate the key set against a layout at
    construction time.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    values: dict[str, str] = Field(
        default_factory=dict,
        description="Field name -> value",
    )

    @classmethod
    def for_layout(
        cls,
        values: Mapping[str, str],
        layout: FieldLayout,
    ) -> "Record":
        """Create a record whose keys exactly match the layout's fields."""
        record = cls(values=dict(values))
        record.check_layout(layout)
        return record

    def check_layout(self, layout: FieldLayout) -> None:
        """
        Raises:
            RecordLayoutMismatchException: If key sets differ
        """
        missing = [name for name in layout.names if name not in self.values]
        unexpected = [name for name in self.values if name not in layout.fields]
        if missing or unexpected:
            raise RecordLayoutMismatchException(missing=missing, unexpected=unexpected)

    def get(self, name: str) -> str:
        return self.values[name]


class SerializedRecord(BaseModel):
    """
    Fixed-width encoding of a Record.

    Each field is right-padded with spaces (0x20) to its declared width and
    concatenated in layout order. len(data) == layout.record_width always.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    data: bytes = Field(..., description="Serialized record bytes")
    layout: FieldLayout = Field(..., description="Layout the data was produced under")

    @model_validator(mode="after")
    def validate_length(self) -> "SerializedRecord":
        if len(self.data) != self.layout.record_width:
            raise InvalidLayoutException(
                f"Serialized length {len(self.data)} doesn't match expected "
                f"{self.layout.record_width}",
                details={"length": len(self.data)},
            )
        return self

    def __len__(self) -> int:
        return len(self.data)

    def field_bytes(self, name: str) -> bytes:
        """Return the padded bytes of a single field."""
        offset, width = self.layout.span(name)
        return self.data[offset:offset + width]

    def to_dict(self) -> dict[str, Any]:
        return {
            "data": self.data.decode("utf-8", errors="replace"),
            "length": len(self.data),
            "layout": dict(self.layout.fields),
        }
