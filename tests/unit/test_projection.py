"""Unit tests for the impact calculator"""

import pytest
from seismic_intel.domain.models import Stats
from seismic_intel.domain.projection import project_impact


@pytest.fixture
def stats() -> Stats:
    return Stats(
        total_volume=3_000_000_000,
        total_users=10,
        total_fintechs=6,
        integrated=1,
        total_funding=1_000_000,
    )


def test_project_impact_zero_rate(stats):
    impact = project_impact(stats, 0)

    assert impact.encrypted_volume == 0
    assert impact.protected_users == 0
    assert impact.potential_savings == 0
    assert impact.fintechs_adopting == 0


def test_project_impact_quarter_rounds_half_up(stats):
    """10 users * 0.25 = 2.5 -> 3 and 6 fintechs * 0.25 = 1.5 -> 2"""
    impact = project_impact(stats, 25)

    assert impact.adoption_rate == 25
    assert impact.encrypted_volume == pytest.approx(750_000_000)
    assert impact.protected_users == 3
    assert impact.potential_savings == pytest.approx(15_000_000)
    assert impact.fintechs_adopting == 2


def test_project_impact_half(stats):
    impact = project_impact(stats, 50)

    assert impact.encrypted_volume == pytest.approx(1_500_000_000)
    assert impact.protected_users == 5
    assert impact.potential_savings == pytest.approx(30_000_000)
    assert impact.fintechs_adopting == 3


def test_project_impact_full_rate_matches_stats(stats):
    impact = project_impact(stats, 100)

    assert impact.encrypted_volume == stats.total_volume
    assert impact.protected_users == stats.total_users
    assert impact.fintechs_adopting == stats.total_fintechs
    # Savings are 2% of volume, never the volume itself
    assert impact.potential_savings == pytest.approx(60_000_000)
    assert impact.potential_savings != stats.total_volume


def test_project_impact_half_fintech_rounds_up():
    """Round half-up, not half-to-even: 5 * 0.5 = 2.5 -> 3"""
    stats = Stats(total_volume=0, total_users=0, total_fintechs=5, integrated=0, total_funding=0)
    assert project_impact(stats, 50).fintechs_adopting == 3


def test_project_impact_custom_savings_rate(stats):
    impact = project_impact(stats, 100, savings_rate=0.05)
    assert impact.potential_savings == pytest.approx(150_000_000)


def test_project_impact_empty_stats():
    stats = Stats(total_volume=0, total_users=0, total_fintechs=0, integrated=0, total_funding=0)
    impact = project_impact(stats, 75)

    assert impact.encrypted_volume == 0
    assert impact.protected_users == 0
    assert impact.fintechs_adopting == 0


@pytest.mark.parametrize("rate", [-1, 101])
def test_project_impact_rejects_out_of_range(stats, rate):
    with pytest.raises(ValueError):
        project_impact(stats, rate)
