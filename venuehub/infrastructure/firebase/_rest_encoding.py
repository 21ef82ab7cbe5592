"""Encode/decode Python values to/from Firestore REST API 'fields' format."""

import base64
import re
from datetime import UTC, datetime
from typing import Any


class _ServerTimestamp:
    """Sentinel replaced by the commit time of the write (REQUEST_TIME transform)."""

    _instance: "_ServerTimestamp | None" = None

    def __new__(cls) -> "_ServerTimestamp":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SERVER_TIMESTAMP"


SERVER_TIMESTAMP = _ServerTimestamp()

_SIMPLE_FIELD = re.compile(r"^[A-Za-z_][A-Za-z_0-9]*$")
# Firestore returns up to nanosecond precision; datetime keeps microseconds.
_FRACTION = re.compile(r"\.(\d{6})\d+")


def quote_field_path(name: str) -> str:
    """Return a top-level field name usable in updateMask/fieldTransforms.

    Names that are not simple identifiers (e.g. 'super-adminId') must be
    back-tick quoted.
    """
    if _SIMPLE_FIELD.match(name):
        return name
    escaped = name.replace("\\", "\\\\").replace("`", "\\`")
    return f"`{escaped}`"


def _encode_value(v: Any) -> dict:
    if v is None:
        return {"nullValue": None}
    if isinstance(v, bool):
        return {"booleanValue": v}
    if isinstance(v, int):
        return {"integerValue": str(v)}
    if isinstance(v, float):
        return {"doubleValue": v}
    if isinstance(v, datetime):
        aware = v if v.tzinfo else v.replace(tzinfo=UTC)
        return {"timestampValue": aware.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%S.%fZ")}
    if isinstance(v, str):
        return {"stringValue": v}
    if isinstance(v, bytes):
        return {"bytesValue": base64.standard_b64encode(v).decode("ascii")}
    if isinstance(v, (list, tuple)):
        return {"arrayValue": {"values": [_encode_value(x) for x in v]}}
    if isinstance(v, dict):
        return {"mapValue": {"fields": {k: _encode_value(x) for k, x in v.items()}}}
    if v is SERVER_TIMESTAMP:
        raise TypeError("SERVER_TIMESTAMP is only supported as a top-level field value")
    raise TypeError(f"Unsupported Firestore value type: {type(v)}")


def split_server_timestamps(data: dict[str, Any]) -> tuple[dict[str, Any], list[str]]:
    """Separate SERVER_TIMESTAMP fields from plain values.

    Returns:
        (fields to encode, names of fields to set to the commit time)
    """
    plain: dict[str, Any] = {}
    transforms: list[str] = []
    for key, value in data.items():
        if value is SERVER_TIMESTAMP:
            transforms.append(key)
        else:
            plain[key] = value
    return plain, transforms


def encode_document(data: dict[str, Any]) -> dict:
    """Convert a Python dict to Firestore REST Document.fields format."""
    return {"fields": {k: _encode_value(v) for k, v in data.items()}}


def _decode_timestamp(raw: str) -> datetime:
    text = _FRACTION.sub(r".\1", raw).replace("Z", "+00:00")
    return datetime.fromisoformat(text)


def _decode_value(obj: dict) -> Any:
    if "nullValue" in obj:
        return None
    if "booleanValue" in obj:
        return obj["booleanValue"]
    if "integerValue" in obj:
        return int(obj["integerValue"])
    if "doubleValue" in obj:
        return float(obj["doubleValue"])
    if "timestampValue" in obj:
        return _decode_timestamp(obj["timestampValue"])
    if "stringValue" in obj:
        return obj["stringValue"]
    if "bytesValue" in obj:
        return base64.standard_b64decode(obj["bytesValue"])
    if "arrayValue" in obj:
        vals = obj.get("arrayValue", {}).get("values") or []
        return [_decode_value(x) for x in vals]
    if "mapValue" in obj:
        fields = obj["mapValue"].get("fields") or {}
        return {k: _decode_value(x) for k, x in fields.items()}
    return None


def decode_document(document: dict | None) -> dict:
    """Convert a Firestore REST Document (with 'fields') to a Python dict."""
    if not document:
        return {}
    return {k: _decode_value(v) for k, v in (document.get("fields") or {}).items()}
