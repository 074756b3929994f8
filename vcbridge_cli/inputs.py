"""
Input loading shared by CLI commands.

Records and layouts are JSON objects; key order in the layout file is the
serialization order.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from vcbridge.schemas.layout import FieldLayout, Record


class InputError(Exception):
    """Raised when a CLI input file is missing or malformed."""


def _load_json_object(path: str | Path, label: str) -> dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise InputError(f"{label} file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InputError(f"{label} file is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise InputError(f"{label} file must contain a JSON object")
    return data


def load_layout(path: str | Path) -> FieldLayout:
    return FieldLayout.from_mapping(_load_json_object(path, "Layout"))


def _field_text(name: str, value: Any) -> str:
    """Render a JSON scalar as the text that gets serialized."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return json.dumps(value)
    raise InputError(
        f"Record field '{name}' must be a string or scalar, got {type(value).__name__}"
    )


def load_record(path: str | Path, layout: FieldLayout) -> Record:
    """
    Load a record, rendering JSON scalars as text.

    null becomes an empty value and true/false/numbers keep their JSON
    spelling; objects and arrays are rejected.
    """
    data = _load_json_object(path, "Record")
    return Record.for_layout({k: _field_text(k, v) for k, v in data.items()}, layout)
