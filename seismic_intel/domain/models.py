"""Domain models - pure Python dataclasses representing catalog entities"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from seismic_intel.domain.exceptions import InvalidRecordError

CATEGORIES = (
    "payments",
    "neobank",
    "lending",
    "crypto",
    "wealth",
    "insurance",
    "infrastructure",
)

STATUS_INTEGRATED = "integrated"
STATUS_POTENTIAL = "potential"

FINANCIAL_METRICS = ("annual_volume", "total_users", "employees", "total_funding", "valuation")


@dataclass(frozen=True)
class FintechRecord:
    """One fintech company in the catalog"""

    id: str
    slug: str
    name: str
    abbrev: str
    logo_color: str
    description: str
    country: str
    region: str
    category: str
    seismic_status: str  # "integrated", "potential" or another pipeline state
    privacy_score: int  # 0-100
    integration_potential: int  # 0-100
    long_description: Optional[str] = None
    founded: Optional[int] = None
    headquarters: Optional[str] = None
    website: Optional[str] = None
    subcategory: Optional[str] = None
    annual_volume: Optional[float] = None
    total_users: Optional[int] = None
    employees: Optional[int] = None
    total_funding: Optional[float] = None
    valuation: Optional[float] = None
    investors: Tuple[str, ...] = field(default_factory=tuple)
    pain_points: Tuple[str, ...] = field(default_factory=tuple)
    primary_markets: Tuple[str, ...] = field(default_factory=tuple)
    integration_note: Optional[str] = None

    def __post_init__(self) -> None:
        for name in ("privacy_score", "integration_potential"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 100:
                raise InvalidRecordError(f"{self.slug}: {name} must be an integer in [0, 100], got {value!r}")

        for name in FINANCIAL_METRICS:
            value = getattr(self, name)
            if value is not None and value < 0:
                raise InvalidRecordError(f"{self.slug}: {name} must be non-negative, got {value!r}")

    @property
    def is_integrated(self) -> bool:
        return self.seismic_status == STATUS_INTEGRATED


@dataclass(frozen=True)
class FilterParams:
    """Dashboard filter state: free-text search plus optional category and status"""

    search: str = ""
    category: Optional[str] = None
    status: Optional[str] = None


@dataclass(frozen=True)
class Stats:
    """Aggregate metrics over the full record collection"""

    total_volume: float
    total_users: int
    total_fintechs: int
    integrated: int
    total_funding: float


@dataclass(frozen=True)
class CategorySummary:
    """Record count and combined volume for one category"""

    category: str
    count: int
    total_volume: float


@dataclass(frozen=True)
class ImpactProjection:
    """Hypothetical outcome if a share of the catalog adopted encrypted rails"""

    adoption_rate: int
    encrypted_volume: float
    protected_users: int
    potential_savings: float
    fintechs_adopting: int
