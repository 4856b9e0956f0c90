"""Human-readable formatting for currency amounts, user counts and optional fields"""

from typing import Optional

from seismic_intel.utils.numbers import round_half_up

NOT_AVAILABLE = "N/A"

PAIN_POINT_LABELS = {
    "public_transaction_data": "Public Transaction Data",
    "merchant_exposure": "Merchant Data Exposed",
    "competitive_intel_leak": "Competitive Intel Leak",
    "transaction_visibility": "Transaction Visibility",
    "cross_border_tracking": "Cross-Border Tracking",
    "wallet_tracking": "Wallet Tracking",
    "on_chain_transparency": "On-Chain Transparency",
    "data_exposure": "Data Exposure",
    "fragmented_banking": "Fragmented Banking",
    "slow_underwriting": "Slow Underwriting",
}


def _fixed(value: float, places: int) -> str:
    return str(round_half_up(value, places))


def group_digits(n: float) -> str:
    """en-US grouping: 1234567 -> "1,234,567", up to three fraction digits"""
    rounded = round_half_up(n, 3)
    if rounded == rounded.to_integral_value():
        return f"{int(rounded):,}"
    return f"{rounded:,f}".rstrip("0").rstrip(".")


def format_currency(n: float) -> str:
    """
    Abbreviate a dollar amount.

    >= 1e12 -> "$1.2T" (one decimal), >= 1e9 -> "$3B", >= 1e6 -> "$5M",
    otherwise the grouped amount ("$12,500"). Each threshold belongs to
    the larger unit, and abbreviated values round half-up.
    """
    if n >= 1e12:
        return f"${_fixed(n / 1e12, 1)}T"
    if n >= 1e9:
        return f"${_fixed(n / 1e9, 0)}B"
    if n >= 1e6:
        return f"${_fixed(n / 1e6, 0)}M"
    return f"${group_digits(n)}"


def format_count(n: float) -> str:
    """Abbreviate a user count: "1.5B", "20M", "300K" or the grouped number"""
    if n >= 1e9:
        return f"{_fixed(n / 1e9, 1)}B"
    if n >= 1e6:
        return f"{_fixed(n / 1e6, 0)}M"
    if n >= 1e3:
        return f"{_fixed(n / 1e3, 0)}K"
    return group_digits(n)


def format_percent(n: int) -> str:
    return f"{n}%"


def display_currency(value: Optional[float]) -> str:
    return NOT_AVAILABLE if value is None else format_currency(value)


def display_count(value: Optional[float]) -> str:
    return NOT_AVAILABLE if value is None else format_count(value)


def display_number(value: Optional[float]) -> str:
    # Employees are shown in full, not abbreviated
    return NOT_AVAILABLE if value is None else group_digits(value)


def display_text(value: Optional[object]) -> str:
    if value is None or value == "":
        return NOT_AVAILABLE
    return str(value)


def pain_point_label(token: str) -> str:
    return PAIN_POINT_LABELS.get(token, token)
