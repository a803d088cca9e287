"""Pytest configuration and fixtures."""

import os
from datetime import datetime
from pathlib import Path

# Settings are read at import time, so the test environment must be set first
os.environ["APP_ENV"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SEED_SAMPLE_PRODUCTS"] = "false"
os.environ["ENABLE_EMAIL_NOTIFICATIONS"] = "false"
os.environ["ARTICLES_PATH"] = str(Path(__file__).parent / "fixtures" / "articles.json")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.catalog.normalizer import normalize_records
from app.database import Base
from app.dependencies import get_db
from app.main import app
from app.models import Admin
from app.seed import build_sample_products

ADMIN_EMAIL = "admin@savajseeds.com"
ADMIN_PASSWORD = "adminpass123"
FIXED_NOW = datetime(2024, 3, 1, 12, 0, 0)

# Test database setup
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    """Override database dependency for testing."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def test_db():
    """Create a test database session."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()

    yield session

    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def raw_records():
    """Spreadsheet rows with the inconsistent headers seen in real catalog sheets."""
    return [
        {
            "Product Name": "Hybrid Maize Seeds",
            "Crop Name": "Maize",
            "Seed Color": "Orange-Yellow",
            "Height": "7-8 feet",
            "Maturity Days": "95-100 days",
            "Season": "Kharif, Rabi",
            "Featured": "Yes",
        },
        {
            "Product Name": "Green Okra Seeds",
            "Crop Name": "",
            "Flower Color": "Yellow",
            "Fruit Shape": "Pentagonal",
            "Season": "Summer",
        },
        {
            "Product Name": "Cotton Gold",
            "Crop Name": "Cotton",
            "Morphological Characters": "Bushy, large bolls",
            "Season": "Kharif",
            "Availability": "Out of stock",
        },
        {"Product Name": "", "Crop Name": "Wheat"},
    ]


@pytest.fixture
def catalog_products(raw_records):
    """Normalized catalog built from ``raw_records``."""
    return normalize_records(raw_records, now=FIXED_NOW)


@pytest.fixture
def sample_products(test_db):
    """Persist the demo catalog."""
    products = build_sample_products()
    test_db.add_all(products)
    test_db.commit()
    for product in products:
        test_db.refresh(product)
    return products


@pytest.fixture
def admin_user(test_db):
    """Create an admin account."""
    admin = Admin(email=ADMIN_EMAIL, name="Test Admin", active=True)
    admin.set_password(ADMIN_PASSWORD)
    test_db.add(admin)
    test_db.commit()
    test_db.refresh(admin)
    return admin


@pytest.fixture
def client(test_db):
    """Create test client with the database dependency overridden."""
    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(client, admin_user):
    """Test client holding a logged-in admin session cookie."""
    response = client.post(
        "/api/v1/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return client
