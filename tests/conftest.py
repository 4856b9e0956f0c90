"""Pytest fixtures for testing"""

import pytest
from typing import Callable, Generator, List
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from seismic_intel.api.main import create_app
from seismic_intel.api.dependencies import get_record_source
from seismic_intel.infrastructure.database.models import Base
from seismic_intel.infrastructure.database.repositories import FintechRepository
from seismic_intel.infrastructure.database.session import get_db
from seismic_intel.infrastructure.sources import DatabaseRecordSource
from seismic_intel.domain.models import FintechRecord


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def make_record(slug: str, **overrides) -> FintechRecord:
    """Build a valid record; any field can be overridden"""
    values = dict(
        id=f"id_{slug}",
        slug=slug,
        name=slug.replace("-", " ").title(),
        abbrev=slug[:2].upper(),
        logo_color="#635BFF",
        description=f"{slug} description",
        country="US",
        region="North America",
        category="payments",
        seismic_status="potential",
        privacy_score=50,
        integration_potential=50,
    )
    values.update(overrides)
    return FintechRecord(**values)


@pytest.fixture
def record_factory() -> Callable[..., FintechRecord]:
    return make_record


@pytest.fixture
def sample_records() -> List[FintechRecord]:
    """Small catalog in dashboard order: integrated first, then volume descending"""
    return [
        make_record(
            "cred",
            name="Cred",
            description="Private credit for frontier businesses",
            category="lending",
            seismic_status="integrated",
            privacy_score=92,
            integration_potential=100,
            employees=12,
            investors=("Alliance DAO",),
            pain_points=("slow_underwriting",),
        ),
        make_record(
            "stripe",
            name="Stripe",
            description="Payments infrastructure for the internet",
            category="payments",
            annual_volume=1_400_000_000_000,
            total_users=4_000_000,
            total_funding=9_400_000_000,
            privacy_score=78,
            integration_potential=65,
        ),
        make_record(
            "revolut",
            name="Revolut",
            description="Global neobank with cards and FX",
            category="neobank",
            annual_volume=500_000_000_000,
            total_users=50_000_000,
            total_funding=1_700_000_000,
            privacy_score=74,
            integration_potential=58,
        ),
        make_record(
            "lemonade",
            name="Lemonade",
            description="AI-driven insurance for renters",
            category="insurance",
            total_users=2_000_000,
            total_funding=480_000_000,
            privacy_score=61,
            integration_potential=40,
        ),
    ]


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def seeded_db(db: Session, sample_records: List[FintechRecord]) -> Session:
    """Test database holding sample_records"""
    FintechRepository(db).add_records(sample_records)
    db.commit()
    return db


@pytest.fixture
def client(seeded_db: Session) -> TestClient:
    """Create FastAPI test client reading from the seeded test database"""
    app = create_app()

    def override_get_db():
        try:
            yield seeded_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_record_source] = lambda: DatabaseRecordSource(seeded_db)
    return TestClient(app)
