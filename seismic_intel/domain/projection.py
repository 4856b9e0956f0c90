"""Impact calculator - projects catalog stats onto a hypothetical adoption rate"""

from seismic_intel.domain.models import ImpactProjection, Stats
from seismic_intel.utils.numbers import round_to_int

DEFAULT_SAVINGS_RATE = 0.02


def project_impact(stats: Stats, adoption_rate: int, savings_rate: float = DEFAULT_SAVINGS_RATE) -> ImpactProjection:
    """
    Scale aggregate stats by the share of fintechs adopting encrypted rails.

    Formulas (rate = adoption_rate / 100):
    - encrypted_volume  = total_volume * rate
    - protected_users   = round(total_users * rate)
    - potential_savings = total_volume * rate * savings_rate (2% by default)
    - fintechs_adopting = round(total_fintechs * rate)

    Counts round half-up, so 0.5 of a fintech counts as one.

    Raises:
        ValueError: adoption_rate outside [0, 100]
    """
    if not 0 <= adoption_rate <= 100:
        raise ValueError(f"adoption_rate must be between 0 and 100, got {adoption_rate}")

    rate = adoption_rate / 100
    encrypted_volume = stats.total_volume * rate

    return ImpactProjection(
        adoption_rate=adoption_rate,
        encrypted_volume=encrypted_volume,
        protected_users=round_to_int(stats.total_users * rate),
        potential_savings=encrypted_volume * savings_rate,
        fintechs_adopting=round_to_int(stats.total_fintechs * rate),
    )
