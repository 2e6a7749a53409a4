"""
Unit tests for the synthetic data generators.

Generated invariants are checked across many seeds.
"""

import math
import random
from datetime import timedelta

import pytest

from config.settings import Settings
from generators import (
    PRODUCT_CATALOG,
    ALERT_TEMPLATES,
    APPROVERS,
    forecast_skus,
    generate_inventory,
    generate_forecasts,
    generate_purchase_orders,
    generate_alerts,
    generate_dataset,
)
from models.purchase_order import PurchaseOrderStatus, APPROVED_STATUSES
from rules.stock_status import derive_stock_status

SEEDS = list(range(50))


# ===================
# INVENTORY
# ===================

class TestGenerateInventory:
    """Tests for generate_inventory."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_status_consistent_with_rule(self, seed, fixed_now):
        for item in generate_inventory(random.Random(seed), fixed_now):
            expected = derive_stock_status(item.current_stock, item.forecasted_demand)

            assert item.days_of_stock == expected.days_of_stock
            assert item.status == expected.status

    def test_one_item_per_catalog_product(self, fixed_now):
        items = generate_inventory(random.Random(1), fixed_now)

        assert [i.sku for i in items] == [p.sku for p in PRODUCT_CATALOG]
        assert [i.id for i in items] == [f"inv-{n}" for n in range(1, len(PRODUCT_CATALOG) + 1)]

    @pytest.mark.parametrize("seed", SEEDS[:10])
    def test_value_ranges(self, seed, fixed_now):
        for item in generate_inventory(random.Random(seed), fixed_now):
            assert 10 <= item.current_stock <= 509
            assert 20 <= item.forecasted_demand <= 119
            assert 10 <= item.cost <= 59
            assert 30 <= item.revenue <= 129
            assert fixed_now - timedelta(days=1) <= item.last_updated <= fixed_now

    def test_same_seed_same_values(self, fixed_now):
        first = generate_inventory(random.Random(7), fixed_now)
        second = generate_inventory(random.Random(7), fixed_now)

        assert first == second


# ===================
# FORECASTS
# ===================

class TestGenerateForecasts:
    """Tests for generate_forecasts."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_bounds_bracket_prediction(self, seed, fixed_now):
        for point in generate_forecasts(random.Random(seed), fixed_now):
            assert 0 <= point.lower_bound <= point.predicted_demand <= point.upper_bound
            assert 0.85 <= point.confidence <= 0.95

    def test_horizon_per_sku_is_chronological(self, fixed_now):
        points = generate_forecasts(random.Random(3), fixed_now)

        assert len(points) == len(forecast_skus()) * 12
        for sku in forecast_skus():
            weeks = [p.week for p in points if p.sku == sku]
            assert weeks == [fixed_now.date() + timedelta(weeks=w) for w in range(12)]

    @pytest.mark.parametrize("seed", SEEDS[:10])
    def test_only_elapsed_weeks_realized(self, seed, fixed_now):
        points = generate_forecasts(random.Random(seed), fixed_now)

        for point in points:
            week_index = int(point.id.rsplit("-", 1)[1])
            if week_index < 4:
                assert point.actual_demand is not None
                assert 0.90 <= point.accuracy <= 0.98
            else:
                assert point.actual_demand is None
                assert point.accuracy is None

    def test_custom_horizon(self, fixed_now):
        points = generate_forecasts(random.Random(3), fixed_now, horizon_weeks=6, elapsed_weeks=0)

        assert len(points) == len(forecast_skus()) * 6
        assert all(p.actual_demand is None for p in points)

    def test_interval_width(self, fixed_now):
        """Half width is predicted * (1 - confidence) * 0.5."""
        for point in generate_forecasts(random.Random(11), fixed_now):
            variance = point.predicted_demand * (1 - point.confidence) * 0.5
            assert point.upper_bound == math.floor(point.predicted_demand + variance)
            assert point.lower_bound == math.floor(point.predicted_demand - variance)


# ===================
# PURCHASE ORDERS
# ===================

class TestGeneratePurchaseOrders:
    """Tests for generate_purchase_orders."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_approver_matches_status(self, seed, fixed_now):
        for order in generate_purchase_orders(random.Random(seed), fixed_now):
            if order.status in APPROVED_STATUSES:
                assert order.approved_by in APPROVERS
            else:
                assert order.approved_by is None

    @pytest.mark.parametrize("seed", SEEDS[:10])
    def test_cost_and_dates(self, seed, fixed_now):
        for order in generate_purchase_orders(random.Random(seed), fixed_now):
            assert 100 <= order.quantity <= 599
            assert order.cost == order.unit_cost * order.quantity
            assert 10 <= order.unit_cost <= 39
            assert order.unit_cost == int(order.unit_cost)
            assert order.created_at <= fixed_now
            delivery_days = order.expected_delivery - order.created_at
            assert timedelta(days=7) <= delivery_days <= timedelta(days=21)

    def test_every_status_eventually_generated(self, fixed_now):
        seen = set()
        for seed in SEEDS:
            seen.update(o.status for o in generate_purchase_orders(random.Random(seed), fixed_now))

        assert seen == set(PurchaseOrderStatus)


# ===================
# ALERTS
# ===================

class TestGenerateAlerts:
    """Tests for generate_alerts."""

    def test_alerts_follow_templates(self, fixed_now):
        alerts = generate_alerts(random.Random(5), fixed_now)

        assert len(alerts) == len(ALERT_TEMPLATES)
        for alert, template in zip(alerts, ALERT_TEMPLATES):
            assert alert.type == template.type
            assert alert.severity == template.severity
            assert alert.action_required == template.action_required
            assert alert.sku == template.sku

    def test_linked_skus_exist_in_catalog(self, fixed_now):
        catalog_skus = {p.sku for p in PRODUCT_CATALOG}

        for alert in generate_alerts(random.Random(5), fixed_now):
            if alert.sku is not None:
                assert alert.sku in catalog_skus

    @pytest.mark.parametrize("seed", SEEDS[:10])
    def test_created_within_last_week(self, seed, fixed_now):
        for alert in generate_alerts(random.Random(seed), fixed_now):
            assert fixed_now - timedelta(days=7) <= alert.created_at <= fixed_now


# ===================
# DATASET
# ===================

class TestGenerateDataset:
    """Tests for generate_dataset."""

    def test_dataset_contains_all_collections(self, test_settings, fixed_now):
        dataset = generate_dataset(random.Random(1), fixed_now, test_settings)

        assert len(dataset.inventory) == len(PRODUCT_CATALOG)
        assert len(dataset.forecasts) == len(forecast_skus()) * test_settings.forecast_horizon_weeks
        assert len(dataset.purchase_orders) == 5
        assert len(dataset.alerts) == len(ALERT_TEMPLATES)
        assert 50 <= dataset.stockouts_prevented <= 120
        assert 250_000 <= dataset.working_capital_saved <= 750_000

    def test_seed_from_settings_is_reproducible(self, fixed_now):
        settings = Settings(_env_file=None, random_seed=99)

        first = generate_dataset(now=fixed_now, settings=settings)
        second = generate_dataset(now=fixed_now, settings=settings)

        assert first == second

    def test_forecast_window_from_settings(self, fixed_now):
        settings = Settings(_env_file=None, forecast_horizon_weeks=8, elapsed_forecast_weeks=2)

        dataset = generate_dataset(random.Random(1), fixed_now, settings)

        realized = [f for f in dataset.forecasts if f.is_realized]
        assert len(dataset.forecasts) == len(forecast_skus()) * 8
        assert len(realized) == len(forecast_skus()) * 2
