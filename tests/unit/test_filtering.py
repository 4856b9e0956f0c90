"""Unit tests for the filter engine"""

import pytest
from seismic_intel.domain.filtering import available_categories, filter_records, matches
from seismic_intel.domain.models import FilterParams


@pytest.fixture
def scenario_records(record_factory):
    return [
        record_factory("a", annual_volume=1_000_000_000, seismic_status="integrated"),
        record_factory("b", annual_volume=2_000_000_000, seismic_status="potential"),
        record_factory("c", annual_volume=0, seismic_status="potential"),
    ]


def test_filter_by_status_keeps_order(scenario_records):
    """status=potential returns the two non-integrated records in input order"""
    result = filter_records(scenario_records, FilterParams(status="potential"))
    assert [r.slug for r in result] == ["b", "c"]


def test_no_filters_returns_everything_in_order(sample_records):
    result = filter_records(sample_records, FilterParams())
    assert result == sample_records


def test_filtering_is_idempotent(sample_records):
    params = FilterParams(search="e", status="potential")
    once = filter_records(sample_records, params)
    twice = filter_records(once, params)
    assert twice == once


def test_search_matches_name_case_insensitive(sample_records):
    result = filter_records(sample_records, FilterParams(search="STRIPE"))
    assert [r.slug for r in result] == ["stripe"]


def test_search_matches_description(sample_records):
    result = filter_records(sample_records, FilterParams(search="neobank"))
    assert [r.slug for r in result] == ["revolut"]


def test_search_substring_anywhere(sample_records):
    # "for" appears in Cred, Stripe and Lemonade descriptions, not Revolut
    result = filter_records(sample_records, FilterParams(search="for"))
    assert [r.slug for r in result] == ["cred", "stripe", "lemonade"]


def test_category_filter_exact(sample_records):
    result = filter_records(sample_records, FilterParams(category="lending"))
    assert [r.slug for r in result] == ["cred"]


def test_filters_combine_with_and(sample_records):
    params = FilterParams(search="insurance", category="payments")
    assert filter_records(sample_records, params) == []


def test_no_matches_returns_empty_list(sample_records):
    assert filter_records(sample_records, FilterParams(search="zzz-not-there")) == []


def test_filter_empty_collection():
    assert filter_records([], FilterParams(search="x", category="crypto", status="integrated")) == []


def test_matches_status_exact(record_factory):
    record = record_factory("a", seismic_status="integrated")
    assert matches(record, FilterParams(status="integrated"))
    assert not matches(record, FilterParams(status="potential"))


def test_available_categories_distinct_sorted(sample_records, record_factory):
    extra = sample_records + [record_factory("x", category="crypto"), record_factory("y", category="payments")]
    assert available_categories(extra) == ["crypto", "insurance", "lending", "neobank", "payments"]


def test_available_categories_empty():
    assert available_categories([]) == []
