"""
Full synthetic dashboard dataset.
"""

import random
from datetime import datetime, timezone
from typing import Optional

import structlog

from config.settings import Settings, get_settings
from models.dataset import DashboardDataset
from generators.inventory import generate_inventory
from generators.forecast import generate_forecasts
from generators.purchase_orders import generate_purchase_orders
from generators.alerts import generate_alerts

logger = structlog.get_logger(__name__)

STOCKOUTS_PREVENTED_RANGE = (50, 120)
WORKING_CAPITAL_SAVED_RANGE = (250_000, 750_000)


def generate_business_metrics(rng: random.Random) -> tuple[int, float]:
    """Return (stockouts_prevented, working_capital_saved)."""
    stockouts_prevented = rng.randint(*STOCKOUTS_PREVENTED_RANGE)
    working_capital_saved = round(rng.uniform(*WORKING_CAPITAL_SAVED_RANGE), 2)
    return stockouts_prevented, working_capital_saved


def generate_dataset(
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
    settings: Optional[Settings] = None,
) -> DashboardDataset:
    """
    Generate a complete, internally consistent dataset.

    Args:
        rng: Random source (seeded from settings.random_seed if omitted)
        now: Generation time (current UTC time if omitted)
        settings: Forecast horizon configuration

    Returns:
        DashboardDataset
    """
    settings = settings or get_settings()
    rng = rng or random.Random(settings.random_seed)
    now = now or datetime.now(timezone.utc)

    stockouts_prevented, working_capital_saved = generate_business_metrics(rng)

    dataset = DashboardDataset(
        inventory=tuple(generate_inventory(rng, now)),
        forecasts=tuple(generate_forecasts(
            rng,
            now,
            horizon_weeks=settings.forecast_horizon_weeks,
            elapsed_weeks=settings.elapsed_forecast_weeks,
        )),
        purchase_orders=tuple(generate_purchase_orders(rng, now)),
        alerts=tuple(generate_alerts(rng, now)),
        stockouts_prevented=stockouts_prevented,
        working_capital_saved=working_capital_saved,
    )

    logger.info(
        "dataset_generated",
        inventory=len(dataset.inventory),
        forecasts=len(dataset.forecasts),
        purchase_orders=len(dataset.purchase_orders),
        alerts=len(dataset.alerts),
    )

    return dataset
