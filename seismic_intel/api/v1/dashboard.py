"""GET /v1/dashboard - everything the dashboard view needs in one call"""

import time
from fastapi import APIRouter, Depends, Query, Request

from seismic_intel.api.v1.schemas import DashboardResponse
from seismic_intel.api.v1.common import fetch_records
from seismic_intel.api.v1.presenters import present_card, present_filters, present_impact, present_stats
from seismic_intel.api.dependencies import get_filter_params, get_record_source, get_request_id
from seismic_intel.config import settings
from seismic_intel.domain.filtering import available_categories, filter_records
from seismic_intel.domain.models import FilterParams
from seismic_intel.domain.projection import project_impact
from seismic_intel.domain.statistics import average_privacy_score, compute_stats
from seismic_intel.infrastructure.sources import RecordSource
from seismic_intel.infrastructure.observability.metrics import record_collection_loaded
from seismic_intel.infrastructure.observability.logging import log_dashboard_view

router = APIRouter()


@router.get("/dashboard", response_model=DashboardResponse)
async def get_dashboard(
    request: Request,
    adoption_rate: int = Query(settings.default_adoption_rate, ge=0, le=100, description="Impact calculator slider"),
    params: FilterParams = Depends(get_filter_params),
    source: RecordSource = Depends(get_record_source),
):
    """
    Build the dashboard view.

    Flow:
    1. Load the full ordered collection
    2. Compute headline stats and average privacy score over all records
    3. Project impact at the requested adoption rate
    4. Apply search/category/status filters for the card grid
    """
    start_time = time.time()
    request_id = get_request_id(request)

    # 1. Load records
    records = await fetch_records(source, request_id)

    # 2. Stats always cover the whole catalog, not the filtered view
    stats = compute_stats(records)
    average_privacy = average_privacy_score(records)

    # 3. Impact calculator
    impact = project_impact(stats, adoption_rate, settings.savings_rate)

    # 4. Card grid
    visible = filter_records(records, params)

    duration_ms = (time.time() - start_time) * 1000
    record_collection_loaded("dashboard", total=len(records), showing=len(visible))
    log_dashboard_view(request_id, source.name, params, adoption_rate, len(visible), len(records), duration_ms)

    return DashboardResponse(
        stats=present_stats(stats, average_privacy),
        impact=present_impact(impact),
        categories=available_categories(records),
        filters=present_filters(params),
        showing=len(visible),
        total=len(records),
        fintechs=[present_card(r) for r in visible],
    )
