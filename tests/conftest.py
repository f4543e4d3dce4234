"""
Shared test fixtures.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

import pytest
from datetime import date
from decimal import Decimal

from config import Settings
from tests.factories import ProductionRequestFactory


# ===================
# DATES
# ===================

@pytest.fixture
def before_cutoff() -> date:
    """February 3, 2026: current month still open."""
    return date(2026, 2, 3)


@pytest.fixture
def on_cutoff() -> date:
    """February 5, 2026: current month closes today."""
    return date(2026, 2, 5)


@pytest.fixture
def after_cutoff() -> date:
    """February 10, 2026."""
    return date(2026, 2, 10)


# ===================
# SETTINGS
# ===================

@pytest.fixture
def test_settings() -> Settings:
    """Settings with defaults, isolated from any local .env."""
    return Settings(_env_file=None)


# ===================
# REQUEST ROWS
# ===================

@pytest.fixture
def shared_product_rows() -> list:
    """
    One product requested by two marketplaces, 120 produced.

    Expected split: 40 / 80.
    """
    return ProductionRequestFactory.build_for_marketplaces(
        [("mp-amazon", 50), ("mp-etsy", 100)],
        product_code="IW-SHARED",
        category="MOBILYA",
        unit_size=Decimal("3"),
        produced_quantity=120,
    )


@pytest.fixture
def mixed_month_rows(shared_product_rows) -> list:
    """Shared product plus a second category and a row without size."""
    return shared_product_rows + [
        ProductionRequestFactory.build(
            product_code="IW-LAMP",
            category="AYDINLATMA",
            unit_size=Decimal("1.5"),
            marketplace_id="mp-amazon",
            requested_quantity=20,
            produced_quantity=10,
        ),
        ProductionRequestFactory.build(
            product_code="IW-NOSIZE",
            product_name="Unsized shelf",
            category="MOBILYA",
            unit_size=None,
            marketplace_id="mp-etsy",
            requested_quantity=7,
            produced_quantity=7,
        ),
    ]
