"""Filter engine for the dashboard's search box, category toggles and status buttons"""

from typing import List, Sequence

from seismic_intel.domain.models import FilterParams, FintechRecord


def matches(record: FintechRecord, params: FilterParams) -> bool:
    """
    Check a single record against all three filters (logical AND).

    - search: case-insensitive substring of name or description; empty matches all
    - category / status: exact match when set
    """
    if params.search:
        needle = params.search.casefold()
        if needle not in record.name.casefold() and needle not in record.description.casefold():
            return False

    if params.category and record.category != params.category:
        return False

    if params.status and record.seismic_status != params.status:
        return False

    return True


def filter_records(records: Sequence[FintechRecord], params: FilterParams) -> List[FintechRecord]:
    """Return the records matching params, keeping input order"""
    return [r for r in records if matches(r, params)]


def available_categories(records: Sequence[FintechRecord]) -> List[str]:
    """Distinct categories present in the collection, sorted ascending"""
    return sorted({r.category for r in records})
