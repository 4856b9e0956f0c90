"""Static JSON export of the catalog (camelCase keys, one array of records)"""

import json
from dataclasses import MISSING, fields
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence
from seismic_intel.domain.models import FintechRecord
from seismic_intel.domain.exceptions import InvalidRecordError

LIST_FIELDS = ("investors", "pain_points", "primary_markets")


def to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


# snake_case attribute -> camelCase export key
EXPORT_KEYS = {f.name: to_camel(f.name) for f in fields(FintechRecord)}
REQUIRED_FIELDS = tuple(
    f.name for f in fields(FintechRecord) if f.default is MISSING and f.default_factory is MISSING
)
TEXT_FIELDS = (
    "id", "slug", "name", "abbrev", "logo_color", "description", "long_description", "country",
    "region", "headquarters", "website", "category", "subcategory", "seismic_status", "integration_note",
)


def _check_types(values: Dict[str, Any], slug: Any) -> None:
    for name in TEXT_FIELDS:
        if name in values and not isinstance(values[name], str):
            raise InvalidRecordError(f"Record {slug}: {EXPORT_KEYS[name]} must be a string")
    for name in LIST_FIELDS:
        items = values.get(name, [])
        if not isinstance(items, list) or not all(isinstance(item, str) for item in items):
            raise InvalidRecordError(f"Record {slug}: {EXPORT_KEYS[name]} must be a list of strings")


def parse_record(data: Dict[str, Any]) -> FintechRecord:
    """
    Build a FintechRecord from one exported JSON object.

    Unknown keys (e.g. createdAt from the store) are ignored; optional keys
    may be missing or null.

    Raises:
        InvalidRecordError: Required key missing, value of the wrong type,
            or record fails validation
    """
    if not isinstance(data, dict):
        raise InvalidRecordError(f"Expected a JSON object, got {type(data).__name__}")

    missing = [EXPORT_KEYS[name] for name in REQUIRED_FIELDS if data.get(EXPORT_KEYS[name]) is None]
    if missing:
        raise InvalidRecordError(f"Record {data.get('slug', '?')} missing {', '.join(missing)}")

    values = {name: data[key] for name, key in EXPORT_KEYS.items() if data.get(key) is not None}
    _check_types(values, data.get("slug", "?"))
    for name in LIST_FIELDS:
        values[name] = tuple(values.get(name, ()))

    try:
        return FintechRecord(**values)
    except TypeError as e:
        raise InvalidRecordError(f"Record {data.get('slug', '?')} has invalid values: {e}") from e


def record_to_dict(record: FintechRecord) -> Dict[str, Any]:
    data = {key: getattr(record, name) for name, key in EXPORT_KEYS.items()}
    for name in LIST_FIELDS:
        data[EXPORT_KEYS[name]] = list(getattr(record, name))
    return data


def stored_record_to_dict(
    record: FintechRecord, created_at: datetime, updated_at: Optional[datetime]
) -> Dict[str, Any]:
    """Export form of a stored record, carrying the store's timestamps as ISO 8601"""
    data = record_to_dict(record)
    data["createdAt"] = created_at.isoformat()
    data["updatedAt"] = updated_at.isoformat() if updated_at else None
    return data


def parse_snapshot(payload: Any) -> List[FintechRecord]:
    if not isinstance(payload, list):
        raise InvalidRecordError("Export must be a JSON array of records")
    return [parse_record(item) for item in payload]


def load_snapshot(path: str | Path) -> List[FintechRecord]:
    """
    Read records from an export file.

    Raises:
        FileNotFoundError: Export file does not exist
        ValueError: File is not valid UTF-8 JSON
        InvalidRecordError: A record is malformed
    """
    with open(path, encoding="utf-8") as f:
        return parse_snapshot(json.load(f))


def write_export(items: Sequence[Dict[str, Any]], path: str | Path) -> Path:
    """Write exported objects as a pretty-printed JSON array, creating parent directories"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(list(items), indent=2), encoding="utf-8")
    return path


def write_snapshot(records: Sequence[FintechRecord], path: str | Path) -> Path:
    return write_export([record_to_dict(r) for r in records], path)
