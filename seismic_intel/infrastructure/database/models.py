"""SQLAlchemy ORM models for the fintech catalog"""

import uuid
from sqlalchemy import Column, BigInteger, Float, DateTime, Integer, Text, JSON
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


class Fintech(Base):
    """Fintech company record"""

    __tablename__ = "fintech"

    id = Column(Text, primary_key=True, default=lambda: uuid.uuid4().hex)
    slug = Column(Text, nullable=False, unique=True, index=True)
    name = Column(Text, nullable=False)
    abbrev = Column(Text, nullable=False)
    logo_color = Column(Text, nullable=False)

    description = Column(Text, nullable=False)
    long_description = Column(Text, nullable=True)
    founded = Column(Integer, nullable=True)
    headquarters = Column(Text, nullable=True)
    country = Column(Text, nullable=False)
    region = Column(Text, nullable=False)
    website = Column(Text, nullable=True)

    category = Column(Text, nullable=False, index=True)
    subcategory = Column(Text, nullable=True)

    # Financial metrics: NULL means unknown
    annual_volume = Column(Float, nullable=True)
    total_users = Column(BigInteger, nullable=True)
    employees = Column(Integer, nullable=True)
    total_funding = Column(Float, nullable=True)
    valuation = Column(Float, nullable=True)

    investors = Column(JSON, nullable=False, default=list)
    pain_points = Column(JSON, nullable=False, default=list)
    primary_markets = Column(JSON, nullable=False, default=list)

    seismic_status = Column(Text, nullable=False, default="potential", index=True)
    integration_note = Column(Text, nullable=True)
    privacy_score = Column(Integer, nullable=False)
    integration_potential = Column(Integer, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=True, onupdate=func.now())
