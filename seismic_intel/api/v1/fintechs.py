"""GET /v1/fintechs - filtered card grid and single-company detail"""

from fastapi import APIRouter, Depends, HTTPException, Request

from seismic_intel.api.v1.schemas import FintechDetail, FintechListResponse
from seismic_intel.api.v1.common import fetch_record, fetch_records
from seismic_intel.api.v1.presenters import present_card, present_detail, present_filters
from seismic_intel.api.dependencies import get_filter_params, get_record_source, get_request_id
from seismic_intel.domain.filtering import filter_records
from seismic_intel.domain.models import FilterParams
from seismic_intel.infrastructure.sources import RecordSource
from seismic_intel.infrastructure.observability.metrics import record_collection_loaded

router = APIRouter()


@router.get("/fintechs", response_model=FintechListResponse)
async def list_fintechs(
    request: Request,
    params: FilterParams = Depends(get_filter_params),
    source: RecordSource = Depends(get_record_source),
):
    """
    Filtered list of fintech cards, in catalog order.

    Returns:
        Matching cards plus "showing N of M" counts
    """
    records = await fetch_records(source, get_request_id(request))
    visible = filter_records(records, params)
    record_collection_loaded("fintechs", total=len(records), showing=len(visible))

    return FintechListResponse(
        filters=present_filters(params),
        showing=len(visible),
        total=len(records),
        fintechs=[present_card(r) for r in visible],
    )


@router.get("/fintechs/{slug}", response_model=FintechDetail)
async def get_fintech(
    slug: str,
    request: Request,
    source: RecordSource = Depends(get_record_source),
):
    """Detail view for one fintech"""
    record = await fetch_record(source, slug, get_request_id(request))
    if record is None:
        raise HTTPException(status_code=404, detail="Fintech not found")

    return present_detail(record)
