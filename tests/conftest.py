"""
Shared test fixtures.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

import random
from datetime import datetime, timezone

import pytest

from config.settings import Settings
from models.dataset import DashboardDataset
from services.dashboard_store import DashboardStore, reset_dashboard_store
from tests.factories import (
    InventoryItemFactory,
    PurchaseOrderFactory,
    AlertFactory,
    ForecastPointFactory,
)

FIXED_NOW = datetime(2025, 6, 2, 12, 0, tzinfo=timezone.utc)


# ===================
# SETTINGS & CLOCK
# ===================

@pytest.fixture
def test_settings() -> Settings:
    """Settings with no refresh delay and a fixed seed."""
    return Settings(
        _env_file=None,
        refresh_delay_seconds=0,
        random_seed=1234,
    )


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def clock(fixed_now):
    """Clock returning a fixed instant."""
    return lambda: fixed_now


# ===================
# STORES
# ===================

@pytest.fixture
def store(test_settings, clock) -> DashboardStore:
    """Store populated by the generators from a fixed seed."""
    return DashboardStore(
        settings=test_settings,
        rng=random.Random(1234),
        clock=clock,
    )


@pytest.fixture
def known_dataset() -> DashboardDataset:
    """
    Hand-built dataset with predictable statuses.

    Inventory:
        SKU-A: 70 units, 70/week  → 7 days  → in_stock
        SKU-B: 20 units, 70/week  → 2 days  → low_stock
        SKU-C: 500 units, 7/week  → 500 days → overstock
    """
    return DashboardDataset(
        inventory=(
            InventoryItemFactory.build(id="inv-1", sku="SKU-A", current_stock=70, forecasted_demand=70),
            InventoryItemFactory.build(id="inv-2", sku="SKU-B", current_stock=20, forecasted_demand=70),
            InventoryItemFactory.build(id="inv-3", sku="SKU-C", current_stock=500, forecasted_demand=7),
        ),
        forecasts=tuple(
            ForecastPointFactory.build_horizon("SKU-A", weeks=3, realized=1)
            + ForecastPointFactory.build_horizon("SKU-B", weeks=3, realized=1)
        ),
        purchase_orders=(
            PurchaseOrderFactory.build(id="po-1", status="pending"),
            PurchaseOrderFactory.build(id="po-2", status="approved", approved_by="Sarah Smith"),
            PurchaseOrderFactory.build(id="po-3", status="ordered", approved_by="John Doe"),
        ),
        alerts=(
            AlertFactory.build(id="alert-1", acknowledged=False, severity="critical"),
            AlertFactory.build(id="alert-2", acknowledged=True, severity="low"),
            AlertFactory.build(id="alert-3", acknowledged=False, severity="high"),
        ),
        stockouts_prevented=89,
        working_capital_saved=485000,
    )


@pytest.fixture
def known_store(test_settings, clock, known_dataset) -> DashboardStore:
    """Store seeded with the hand-built dataset."""
    return DashboardStore(
        settings=test_settings,
        rng=random.Random(1234),
        clock=clock,
        dataset=known_dataset,
    )


@pytest.fixture(autouse=True)
def _reset_singleton():
    """Each test starts without a process-wide store."""
    reset_dashboard_store()
    yield
    reset_dashboard_store()
