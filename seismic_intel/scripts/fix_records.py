"""
Apply field corrections to catalog records, keyed by slug.

Usage:
    python -m seismic_intel.scripts.fix_records                   # built-in corrections
    python -m seismic_intel.scripts.fix_records --file fixes.json

A corrections file maps slug -> {camelCaseField: value}, the same keys the
JSON export uses.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.orm import Session

from seismic_intel.config import settings
from seismic_intel.domain.exceptions import InvalidRecordError, RecordNotFoundError
from seismic_intel.domain.models import FintechRecord
from seismic_intel.infrastructure.database.repositories import FintechRepository
from seismic_intel.infrastructure.database.session import SessionLocal
from seismic_intel.infrastructure.observability.logging import setup_logging
from seismic_intel.infrastructure.snapshot import EXPORT_KEYS

logger = logging.getLogger(__name__)

FIELD_BY_KEY = {key: name for name, key in EXPORT_KEYS.items()}

CORRECTIONS: Dict[str, Dict[str, Any]] = {
    "specie-finance": {
        "description": (
            "Global neobank for trade finance. Single account replacing 4+ traditional "
            "bank accounts for importers/exporters."
        ),
        "longDescription": (
            "Led by Frankie DiGiacomo (ex-Morgan Stanley). Building on Seismic for encrypted "
            "payment rails. Provides unified liquidity, built-in controls, and local payments "
            "for importers/exporters across 124+ countries. Privacy is essential for the "
            "businesses they serve."
        ),
        "investors": ["Alliance DAO", "Venture Partners"],
        "integrationNote": "Building on Seismic - Privacy for trade finance transactions",
        "seismicStatus": "integrated",
    },
    "cred": {
        "description": "Private credit service for frontier businesses using proprietary credit analytics.",
        "longDescription": (
            "Led by Julian Gay (sold previous company to AppDirect). Backed by Alliance DAO. "
            "Building on Seismic to deploy encrypted lending rails. Provides fast working "
            "capital to frontier businesses that traditional finance overlooks. Privacy is "
            "non-negotiable for the businesses they serve."
        ),
        "investors": ["Alliance DAO"],
        "integrationNote": "Building on Seismic - Encrypted private credit rails",
        "seismicStatus": "integrated",
    },
}


def to_field_names(values: Dict[str, Any]) -> Dict[str, Any]:
    """Translate export keys (camelCase) to record attribute names"""
    unknown = [key for key in values if key not in FIELD_BY_KEY]
    if unknown:
        raise InvalidRecordError(f"Unknown fields: {', '.join(unknown)}")
    return {FIELD_BY_KEY[key]: value for key, value in values.items()}


def apply_corrections(db: Session, corrections: Dict[str, Dict[str, Any]]) -> List[FintechRecord]:
    """
    Replace the given fields on each record and commit once all succeed.

    Raises:
        RecordNotFoundError: A slug does not exist (nothing is committed)
        InvalidRecordError: A field is unknown or a value is out of bounds
    """
    repo = FintechRepository(db)
    updated = []
    try:
        for slug, values in corrections.items():
            updated.append(repo.replace_fields(slug, to_field_names(values)))
            logger.info(f"Updated: {slug}", extra={"slug": slug, "fields": sorted(values)})
        db.commit()
    except Exception:
        db.rollback()
        raise
    return updated


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Correct catalog records by slug")
    parser.add_argument("--file", help="JSON file of corrections (default: built-in set)")
    args = parser.parse_args(argv)

    setup_logging(settings.log_level)

    corrections = CORRECTIONS
    if args.file:
        with open(args.file, encoding="utf-8") as f:
            corrections = json.load(f)

    db = SessionLocal()
    try:
        updated = apply_corrections(db, corrections)
    except (RecordNotFoundError, InvalidRecordError) as e:
        logger.error(f"Correction failed: {e}")
        return 1
    finally:
        db.close()

    logger.info(f"Done! Fixed {len(updated)} records", extra={"slugs": [r.slug for r in updated]})
    return 0


if __name__ == "__main__":
    sys.exit(main())
