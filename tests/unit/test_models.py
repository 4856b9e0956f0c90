"""Unit tests for record invariants"""

import pytest
from seismic_intel.domain.exceptions import InvalidRecordError


@pytest.mark.parametrize("score", [-1, 101, 50.5, None])
def test_privacy_score_must_be_int_in_range(record_factory, score):
    with pytest.raises(InvalidRecordError):
        record_factory("bad", privacy_score=score)


def test_integration_potential_bounds_inclusive(record_factory):
    assert record_factory("low", integration_potential=0).integration_potential == 0
    assert record_factory("high", integration_potential=100).integration_potential == 100

    with pytest.raises(InvalidRecordError):
        record_factory("over", integration_potential=101)


def test_negative_financial_metric_rejected(record_factory):
    with pytest.raises(InvalidRecordError, match="annual_volume"):
        record_factory("neg", annual_volume=-5)


def test_absent_financial_metrics_allowed(record_factory):
    record = record_factory("blank")
    assert record.annual_volume is None
    assert record.total_users is None
    assert record.investors == ()


def test_records_are_immutable(record_factory):
    record = record_factory("frozen")
    with pytest.raises(AttributeError):
        record.name = "Changed"


def test_is_integrated(record_factory):
    assert record_factory("a", seismic_status="integrated").is_integrated
    assert not record_factory("b", seismic_status="potential").is_integrated


def test_api_category_choices_match_domain():
    from typing import get_args
    from seismic_intel.api.dependencies import CategoryName, StatusFilter
    from seismic_intel.domain.models import CATEGORIES, STATUS_INTEGRATED, STATUS_POTENTIAL

    assert get_args(CategoryName) == CATEGORIES
    assert get_args(StatusFilter) == (STATUS_INTEGRATED, STATUS_POTENTIAL)
