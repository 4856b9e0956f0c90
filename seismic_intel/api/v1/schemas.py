"""Pydantic schemas for API responses"""

from pydantic import BaseModel, Field
from typing import List, Optional


class StatsSchema(BaseModel):
    """Headline catalog metrics, raw and display-formatted"""

    total_volume: float
    total_users: int
    total_fintechs: int
    integrated: int
    total_funding: float
    average_privacy_score: Optional[int] = Field(None, description="None when the catalog is empty")

    total_volume_display: str
    total_users_display: str
    total_funding_display: str
    average_privacy_display: str


class ImpactSchema(BaseModel):
    """Impact calculator output for one adoption rate"""

    adoption_rate: int
    encrypted_volume: float
    protected_users: int
    potential_savings: float
    fintechs_adopting: int

    encrypted_volume_display: str
    protected_users_display: str
    potential_savings_display: str


class CategorySummarySchema(BaseModel):
    category: str
    count: int
    total_volume: float
    total_volume_display: str


class FintechCard(BaseModel):
    """Grid card for one fintech"""

    id: str
    slug: str
    name: str
    abbrev: str
    logo_color: str
    category: str
    region: str
    description: str
    seismic_status: str
    is_integrated: bool
    integration_note: Optional[str] = None
    volume_display: str
    users_display: str
    privacy_score: int
    privacy_display: str


class PainPointSchema(BaseModel):
    token: str
    label: str


class FintechDetail(FintechCard):
    """Full detail view for one fintech"""

    long_description: Optional[str] = None
    website: Optional[str] = None
    subcategory: Optional[str] = None
    country: str
    funding_display: str
    employees_display: str
    valuation_display: str
    founded_display: str
    headquarters_display: str
    markets: List[str] = Field(description="First three primary markets")
    investors: List[str] = Field(description="First six investors")
    pain_points: List[PainPointSchema]
    integration_potential: int
    integration_potential_display: str


class FilterEcho(BaseModel):
    search: str
    category: Optional[str] = None
    status: Optional[str] = None


class FintechListResponse(BaseModel):
    """Response for GET /v1/fintechs"""

    filters: FilterEcho
    showing: int
    total: int
    fintechs: List[FintechCard]


class DashboardResponse(BaseModel):
    """Response for GET /v1/dashboard"""

    stats: StatsSchema
    impact: ImpactSchema
    categories: List[str]
    filters: FilterEcho
    showing: int
    total: int
    fintechs: List[FintechCard]


class StatsResponse(BaseModel):
    """Response for GET /v1/stats"""

    stats: StatsSchema
    categories: List[CategorySummarySchema]
