"""Unit tests for currency/count formatting"""

import pytest
from seismic_intel.domain.formatting import (
    display_count,
    display_currency,
    display_number,
    display_text,
    format_count,
    format_currency,
    format_percent,
    group_digits,
    pain_point_label,
)


@pytest.mark.parametrize(
    "amount,expected",
    [
        (0, "$0"),
        (999, "$999"),
        (999_999, "$999,999"),
        (12_500.5, "$12,500.5"),
        (1_000_000, "$1M"),
        (2_400_000, "$2M"),
        (1_000_000_000, "$1B"),
        (2_500_000_000, "$3B"),
        (1_000_000_000_000, "$1.0T"),
        (1_250_000_000_000, "$1.3T"),
        (1_400_000_000_000, "$1.4T"),
    ],
)
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_currency_just_below_tier_rounds_within_tier():
    """999,999,999 stays in the millions tier"""
    assert format_currency(999_999_999) == "$1000M"


@pytest.mark.parametrize(
    "count,expected",
    [
        (0, "0"),
        (999, "999"),
        (1_000, "1K"),
        (1_500, "2K"),
        (2_500, "3K"),
        (950_000, "950K"),
        (1_000_000, "1M"),
        (50_000_000, "50M"),
        (1_000_000_000, "1.0B"),
        (1_250_000_000, "1.3B"),
    ],
)
def test_format_count(count, expected):
    assert format_count(count) == expected


def test_group_digits_fraction():
    assert group_digits(1234.5678) == "1,234.568"
    assert group_digits(1234567) == "1,234,567"


def test_format_percent():
    assert format_percent(76) == "76%"


def test_display_absent_values_are_not_available():
    assert display_currency(None) == "N/A"
    assert display_count(None) == "N/A"
    assert display_number(None) == "N/A"
    assert display_text(None) == "N/A"
    assert display_text("") == "N/A"


def test_display_zero_is_a_known_value():
    assert display_currency(0) == "$0"
    assert display_count(0) == "0"


def test_display_present_values():
    assert display_currency(9_400_000_000) == "$9B"
    assert display_count(4_000_000) == "4M"
    assert display_number(8000) == "8,000"
    assert display_text(2015) == "2015"


def test_pain_point_label():
    assert pain_point_label("wallet_tracking") == "Wallet Tracking"
    assert pain_point_label("merchant_exposure") == "Merchant Data Exposed"
    assert pain_point_label("something_new") == "something_new"
