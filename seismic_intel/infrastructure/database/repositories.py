"""Data access layer for fintech records"""

from dataclasses import fields, replace
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple
from sqlalchemy.orm import Session
from seismic_intel.infrastructure.database.models import Fintech
from seismic_intel.domain.models import FintechRecord
from seismic_intel.domain.exceptions import InvalidRecordError, RecordNotFoundError

RECORD_FIELDS = tuple(f.name for f in fields(FintechRecord))
LIST_FIELDS = ("investors", "pain_points", "primary_markets")

# Identity is never rewritten by a correction
CORRECTABLE_FIELDS = frozenset(RECORD_FIELDS) - {"id", "slug"}


def to_record(row: Fintech) -> FintechRecord:
    """Convert ORM row to the canonical domain record"""
    values = {name: getattr(row, name) for name in RECORD_FIELDS}
    for name in LIST_FIELDS:
        values[name] = tuple(values[name] or ())
    return FintechRecord(**values)


def to_row(record: FintechRecord) -> Fintech:
    values = {name: getattr(record, name) for name in RECORD_FIELDS}
    for name in LIST_FIELDS:
        values[name] = list(values[name])
    return Fintech(**values)


class FintechRepository:
    """Repository for fintech records"""

    def __init__(self, db: Session):
        self.db = db

    def _ordered_rows(self) -> List[Fintech]:
        return (
            self.db.query(Fintech)
            # Unknown volume sorts last on every backend; Postgres would otherwise sort NULL volumes first
            .order_by(Fintech.seismic_status.asc(), Fintech.annual_volume.desc().nulls_last())
            .all()
        )

    def list_records(self) -> List[FintechRecord]:
        """All records, integration status ascending then largest volume first"""
        return [to_record(row) for row in self._ordered_rows()]

    def list_timestamped(self) -> List[Tuple[FintechRecord, datetime, Optional[datetime]]]:
        """Records in list_records order, each with its created/updated timestamps"""
        return [(to_record(row), row.created_at, row.updated_at) for row in self._ordered_rows()]

    def list_records_unordered(self) -> List[FintechRecord]:
        """All records in storage order, for aggregation only"""
        return [to_record(row) for row in self.db.query(Fintech).all()]

    def get_by_slug(self, slug: str) -> Optional[FintechRecord]:
        row = self.db.query(Fintech).filter(Fintech.slug == slug).first()
        return to_record(row) if row else None

    def add_records(self, records: Iterable[FintechRecord]) -> int:
        """Insert records (seeding); caller commits"""
        count = 0
        for record in records:
            self.db.add(to_row(record))
            count += 1
        self.db.flush()
        return count

    def replace_fields(self, slug: str, values: Dict[str, Any]) -> FintechRecord:
        """
        Overwrite a fixed set of fields on the record identified by slug.

        The corrected record is validated before anything is written to the
        row, so a rejected correction leaves the session clean.

        Raises:
            RecordNotFoundError: No record with this slug
            InvalidRecordError: Unknown field name or invalid resulting record
        """
        unknown = set(values) - CORRECTABLE_FIELDS
        if unknown:
            raise InvalidRecordError(f"Cannot correct fields: {', '.join(sorted(unknown))}")

        row = self.db.query(Fintech).filter(Fintech.slug == slug).first()
        if row is None:
            raise RecordNotFoundError(f"No fintech with slug '{slug}'")

        changes = {name: tuple(value) if name in LIST_FIELDS else value for name, value in values.items()}
        try:
            record = replace(to_record(row), **changes)
        except TypeError as e:
            raise InvalidRecordError(f"Correction for '{slug}' has invalid values: {e}") from e

        for name, value in changes.items():
            setattr(row, name, list(value) if name in LIST_FIELDS else value)
        self.db.flush()
        return record
