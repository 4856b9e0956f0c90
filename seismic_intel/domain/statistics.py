"""Aggregate statistics over the fintech catalog"""

from typing import Dict, List, Optional, Sequence

from seismic_intel.domain.models import CategorySummary, FintechRecord, Stats, STATUS_INTEGRATED
from seismic_intel.utils.numbers import round_to_int


def compute_stats(records: Sequence[FintechRecord]) -> Stats:
    """
    Reduce the record collection into the five headline metrics.

    Requirements:
    - Absent volume, users or funding count as 0
    - Integrated count only includes seismic_status == "integrated"
    - Empty collection yields all-zero stats
    """
    return Stats(
        total_volume=sum(r.annual_volume or 0 for r in records),
        total_users=sum(r.total_users or 0 for r in records),
        total_fintechs=len(records),
        integrated=sum(1 for r in records if r.seismic_status == STATUS_INTEGRATED),
        total_funding=sum(r.total_funding or 0 for r in records),
    )


def average_privacy_score(records: Sequence[FintechRecord]) -> Optional[int]:
    """Mean privacy score rounded to a whole percent, or None for an empty catalog"""
    if not records:
        return None
    return round_to_int(sum(r.privacy_score for r in records) / len(records))


def category_breakdown(records: Sequence[FintechRecord]) -> List[CategorySummary]:
    """Count and volume per category, categories sorted ascending"""
    counts: Dict[str, int] = {}
    volumes: Dict[str, float] = {}
    for r in records:
        counts[r.category] = counts.get(r.category, 0) + 1
        volumes[r.category] = volumes.get(r.category, 0) + (r.annual_volume or 0)

    return [
        CategorySummary(category=cat, count=counts[cat], total_volume=volumes[cat])
        for cat in sorted(counts)
    ]
