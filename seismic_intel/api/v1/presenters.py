"""Map domain values onto response schemas with display strings"""

from typing import List, Optional, Sequence

from seismic_intel.api.v1.schemas import (
    CategorySummarySchema,
    FilterEcho,
    FintechCard,
    FintechDetail,
    ImpactSchema,
    PainPointSchema,
    StatsSchema,
)
from seismic_intel.domain.formatting import (
    NOT_AVAILABLE,
    display_count,
    display_currency,
    display_number,
    display_text,
    format_count,
    format_currency,
    format_percent,
    pain_point_label,
)
from seismic_intel.domain.models import CategorySummary, FilterParams, FintechRecord, ImpactProjection, Stats

DETAIL_MARKETS = 3
DETAIL_INVESTORS = 6


def present_stats(stats: Stats, average_privacy: Optional[int]) -> StatsSchema:
    return StatsSchema(
        total_volume=stats.total_volume,
        total_users=stats.total_users,
        total_fintechs=stats.total_fintechs,
        integrated=stats.integrated,
        total_funding=stats.total_funding,
        average_privacy_score=average_privacy,
        total_volume_display=format_currency(stats.total_volume),
        total_users_display=format_count(stats.total_users),
        total_funding_display=format_currency(stats.total_funding),
        average_privacy_display=NOT_AVAILABLE if average_privacy is None else format_percent(average_privacy),
    )


def present_impact(impact: ImpactProjection) -> ImpactSchema:
    return ImpactSchema(
        adoption_rate=impact.adoption_rate,
        encrypted_volume=impact.encrypted_volume,
        protected_users=impact.protected_users,
        potential_savings=impact.potential_savings,
        fintechs_adopting=impact.fintechs_adopting,
        encrypted_volume_display=format_currency(impact.encrypted_volume),
        protected_users_display=format_count(impact.protected_users),
        potential_savings_display=format_currency(impact.potential_savings),
    )


def present_categories(summaries: Sequence[CategorySummary]) -> List[CategorySummarySchema]:
    return [
        CategorySummarySchema(
            category=s.category,
            count=s.count,
            total_volume=s.total_volume,
            total_volume_display=format_currency(s.total_volume),
        )
        for s in summaries
    ]


def present_filters(params: FilterParams) -> FilterEcho:
    return FilterEcho(search=params.search, category=params.category, status=params.status)


def _card_fields(record: FintechRecord) -> dict:
    return dict(
        id=record.id,
        slug=record.slug,
        name=record.name,
        abbrev=record.abbrev,
        logo_color=record.logo_color,
        category=record.category,
        region=record.region,
        description=record.description,
        seismic_status=record.seismic_status,
        is_integrated=record.is_integrated,
        integration_note=record.integration_note,
        volume_display=display_currency(record.annual_volume),
        users_display=display_count(record.total_users),
        privacy_score=record.privacy_score,
        privacy_display=format_percent(record.privacy_score),
    )


def present_card(record: FintechRecord) -> FintechCard:
    return FintechCard(**_card_fields(record))


def present_detail(record: FintechRecord) -> FintechDetail:
    return FintechDetail(
        **_card_fields(record),
        long_description=record.long_description,
        website=record.website,
        subcategory=record.subcategory,
        country=record.country,
        funding_display=display_currency(record.total_funding),
        employees_display=display_number(record.employees),
        valuation_display=display_currency(record.valuation),
        founded_display=display_text(record.founded),
        headquarters_display=display_text(record.headquarters),
        markets=list(record.primary_markets[:DETAIL_MARKETS]),
        investors=list(record.investors[:DETAIL_INVESTORS]),
        pain_points=[PainPointSchema(token=p, label=pain_point_label(p)) for p in record.pain_points],
        integration_potential=record.integration_potential,
        integration_potential_display=format_percent(record.integration_potential),
    )
