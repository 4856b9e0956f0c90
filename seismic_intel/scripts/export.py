"""
Export the fintech table to a static JSON file for the file/http record sources.

Usage:
    python -m seismic_intel.scripts.export                       # writes data/fintechs.json
    python -m seismic_intel.scripts.export --output out.json
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from sqlalchemy.orm import Session

from seismic_intel.config import settings
from seismic_intel.infrastructure.database.repositories import FintechRepository
from seismic_intel.infrastructure.database.session import SessionLocal
from seismic_intel.infrastructure.observability.logging import setup_logging
from seismic_intel.infrastructure.snapshot import stored_record_to_dict, write_export

logger = logging.getLogger(__name__)


def export_records(db: Session, output: str | Path) -> int:
    """Write every record, in dashboard order and with its timestamps, to output; returns the count"""
    items = [stored_record_to_dict(*row) for row in FintechRepository(db).list_timestamped()]
    path = write_export(items, output)
    logger.info(f"Exported {len(items)} fintechs", extra={"path": str(path), "record_count": len(items)})
    return len(items)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Export the fintech catalog to JSON")
    parser.add_argument("--output", default=settings.export_path, help="Destination JSON file")
    args = parser.parse_args(argv)

    setup_logging(settings.log_level)

    db = SessionLocal()
    try:
        export_records(db, args.output)
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
