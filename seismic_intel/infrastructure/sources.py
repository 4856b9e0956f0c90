"""Record sources: the live store, a static export on disk, or the export over HTTP"""

import logging
from typing import List, Optional, Protocol
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from seismic_intel.domain.models import FintechRecord
from seismic_intel.domain.exceptions import DataUnavailableError, InvalidRecordError
from seismic_intel.infrastructure.clients.snapshot import SnapshotClient
from seismic_intel.infrastructure.database.repositories import FintechRepository
from seismic_intel.infrastructure.snapshot import load_snapshot

logger = logging.getLogger(__name__)


def find_by_slug(records: List[FintechRecord], slug: str) -> Optional[FintechRecord]:
    return next((r for r in records if r.slug == slug), None)


class RecordSource(Protocol):
    """Read-only access to the full record collection"""

    name: str

    async def list_records(self) -> List[FintechRecord]:
        """Records ordered by integration status, then volume descending"""
        ...

    async def list_records_unordered(self) -> List[FintechRecord]:
        """Records in any order; for aggregation only"""
        ...

    async def get_record(self, slug: str) -> Optional[FintechRecord]:
        """One record by slug, or None"""
        ...


class DatabaseRecordSource:
    name = "database"

    def __init__(self, db: Session):
        self.repo = FintechRepository(db)

    async def list_records(self) -> List[FintechRecord]:
        try:
            return self.repo.list_records()
        except (SQLAlchemyError, InvalidRecordError) as e:
            raise DataUnavailableError(f"Record store query failed: {e}") from e

    async def list_records_unordered(self) -> List[FintechRecord]:
        try:
            return self.repo.list_records_unordered()
        except (SQLAlchemyError, InvalidRecordError) as e:
            raise DataUnavailableError(f"Record store query failed: {e}") from e

    async def get_record(self, slug: str) -> Optional[FintechRecord]:
        try:
            return self.repo.get_by_slug(slug)
        except (SQLAlchemyError, InvalidRecordError) as e:
            raise DataUnavailableError(f"Record store query failed: {e}") from e


class FileRecordSource:
    """Export file on disk; already ordered at export time"""

    name = "file"

    def __init__(self, path: str):
        self.path = path

    async def list_records(self) -> List[FintechRecord]:
        try:
            records = load_snapshot(self.path)
        # ValueError covers malformed JSON and bytes that are not UTF-8
        except (OSError, ValueError, InvalidRecordError) as e:
            raise DataUnavailableError(f"Cannot read export {self.path}: {e}") from e
        logger.debug("Loaded export", extra={"path": self.path, "record_count": len(records)})
        return records

    async def list_records_unordered(self) -> List[FintechRecord]:
        return await self.list_records()

    async def get_record(self, slug: str) -> Optional[FintechRecord]:
        return find_by_slug(await self.list_records(), slug)


class HttpRecordSource:
    """Export fetched over HTTP; already ordered at export time"""

    name = "http"

    def __init__(self, client: SnapshotClient):
        self.client = client

    async def list_records(self) -> List[FintechRecord]:
        return await self.client.get_records()

    async def list_records_unordered(self) -> List[FintechRecord]:
        return await self.client.get_records()

    async def get_record(self, slug: str) -> Optional[FintechRecord]:
        return find_by_slug(await self.client.get_records(), slug)
