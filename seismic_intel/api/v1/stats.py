"""GET /v1/stats and GET /v1/impact - catalog aggregates and the impact calculator"""

from fastapi import APIRouter, Depends, Query, Request

from seismic_intel.api.v1.schemas import ImpactSchema, StatsResponse
from seismic_intel.api.v1.common import fetch_records
from seismic_intel.api.v1.presenters import present_categories, present_impact, present_stats
from seismic_intel.api.dependencies import get_record_source, get_request_id
from seismic_intel.config import settings
from seismic_intel.domain.projection import project_impact
from seismic_intel.domain.statistics import average_privacy_score, category_breakdown, compute_stats
from seismic_intel.infrastructure.sources import RecordSource
from seismic_intel.infrastructure.observability.metrics import record_collection_loaded

router = APIRouter()


@router.get("/stats", response_model=StatsResponse)
async def get_stats(request: Request, source: RecordSource = Depends(get_record_source)):
    """Headline metrics plus per-category counts and volume"""
    records = await fetch_records(source, get_request_id(request), ordered=False)
    record_collection_loaded("stats", total=len(records))

    return StatsResponse(
        stats=present_stats(compute_stats(records), average_privacy_score(records)),
        categories=present_categories(category_breakdown(records)),
    )


@router.get("/impact", response_model=ImpactSchema)
async def get_impact(
    request: Request,
    adoption_rate: int = Query(settings.default_adoption_rate, ge=0, le=100, description="Share of fintechs adopting, 0-100"),
    source: RecordSource = Depends(get_record_source),
):
    """
    Project encrypted volume, protected users and savings at an adoption rate.

    Returns:
        Raw and formatted projection values
    """
    records = await fetch_records(source, get_request_id(request), ordered=False)
    record_collection_loaded("impact", total=len(records))

    impact = project_impact(compute_stats(records), adoption_rate, settings.savings_rate)
    return present_impact(impact)
