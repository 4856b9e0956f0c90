"""Dependency injection for FastAPI endpoints"""

from typing import Literal, Optional
from fastapi import Depends, Query, Request
from sqlalchemy.orm import Session
from seismic_intel.config import settings
from seismic_intel.domain.models import FilterParams
from seismic_intel.infrastructure.clients.snapshot import SnapshotClient
from seismic_intel.infrastructure.database.session import get_db
from seismic_intel.infrastructure.sources import (
    DatabaseRecordSource,
    FileRecordSource,
    HttpRecordSource,
    RecordSource,
)

CategoryName = Literal["payments", "neobank", "lending", "crypto", "wealth", "insurance", "infrastructure"]
StatusFilter = Literal["integrated", "potential"]


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_snapshot_client() -> SnapshotClient:
    """Provide export HTTP client instance"""
    return SnapshotClient()


def get_record_source(
    db: Session = Depends(get_db),
    snapshot_client: SnapshotClient = Depends(get_snapshot_client),
) -> RecordSource:
    """Pick the record source configured for this deployment"""
    if settings.record_source == "database":
        return DatabaseRecordSource(db)
    if settings.record_source == "http":
        return HttpRecordSource(snapshot_client)
    return FileRecordSource(settings.export_path)


def get_filter_params(
    search: str = Query("", max_length=200, description="Case-insensitive name/description match"),
    category: Optional[CategoryName] = Query(None, description="Only this category"),
    status: Optional[StatusFilter] = Query(None, description="Only this Seismic status"),
) -> FilterParams:
    """Collect the dashboard's filter controls into one immutable value"""
    return FilterParams(search=search, category=category, status=status)
