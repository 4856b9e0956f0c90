"""Shared record loading for v1 endpoints"""

import logging
from typing import List, Optional
from fastapi import HTTPException

from seismic_intel.domain.exceptions import DataUnavailableError
from seismic_intel.domain.models import FintechRecord
from seismic_intel.infrastructure.sources import RecordSource
from seismic_intel.infrastructure.observability.metrics import record_fetch_failures_counter


def _unavailable(source: RecordSource, request_id: str, error: DataUnavailableError) -> HTTPException:
    record_fetch_failures_counter.labels(source=source.name).inc()
    logging.error(f"Record fetch failed: {error}", extra={"request_id": request_id, "record_source": source.name})
    return HTTPException(status_code=503, detail="Record store unavailable")


async def fetch_records(source: RecordSource, request_id: str, ordered: bool = True) -> List[FintechRecord]:
    """
    Load the full collection from the configured source.

    Raises:
        HTTPException(503): Source unreachable or export unreadable
    """
    try:
        if ordered:
            return await source.list_records()
        return await source.list_records_unordered()

    except DataUnavailableError as e:
        raise _unavailable(source, request_id, e) from e


async def fetch_record(source: RecordSource, slug: str, request_id: str) -> Optional[FintechRecord]:
    """Load one record by slug; None when no record has it"""
    try:
        return await source.get_record(slug)
    except DataUnavailableError as e:
        raise _unavailable(source, request_id, e) from e
