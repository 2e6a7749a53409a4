"""
Synthetic weekly demand forecasts.

Each SKU gets a baseline that rises with its catalog position, a yearly
sinusoidal seasonal term and bounded uniform noise:

    predicted = max(0, floor(baseline + sin(week / 52 * 2π) * 10 + noise))

The confidence interval is symmetric around the prediction with a half
width of predicted * (1 - confidence) * 0.5.
"""

import math
import random
from datetime import datetime, timedelta

from models.forecast import ForecastPoint
from generators.catalog import forecast_skus

BASE_DEMAND = 50
BASE_DEMAND_STEP = 10
SEASON_WEEKS = 52
SEASONAL_AMPLITUDE = 10
NOISE_HALF_WIDTH = 10
CONFIDENCE_RANGE = (0.85, 0.95)
ACTUAL_NOISE_HALF_WIDTH = 5
ACCURACY_RANGE = (0.90, 0.98)

DEFAULT_HORIZON_WEEKS = 12
DEFAULT_ELAPSED_WEEKS = 4


def seasonal_term(week: int) -> float:
    return math.sin((week / SEASON_WEEKS) * 2 * math.pi) * SEASONAL_AMPLITUDE


def generate_forecasts(
    rng: random.Random,
    now: datetime,
    horizon_weeks: int = DEFAULT_HORIZON_WEEKS,
    elapsed_weeks: int = DEFAULT_ELAPSED_WEEKS,
) -> list[ForecastPoint]:
    """
    Generate a forecast horizon for every forecast SKU.

    Args:
        rng: Random source
        now: Generation time; week 0 starts on this date
        horizon_weeks: Weeks generated per SKU
        elapsed_weeks: Leading weeks that get actual_demand and accuracy

    Returns:
        Points grouped by SKU, chronological within each SKU
    """
    start = now.date()
    points = []

    for sku_index, sku in enumerate(forecast_skus()):
        baseline = BASE_DEMAND + sku_index * BASE_DEMAND_STEP

        for week in range(horizon_weeks):
            noise = rng.uniform(-NOISE_HALF_WIDTH, NOISE_HALF_WIDTH)
            predicted = max(0, math.floor(baseline + seasonal_term(week) + noise))

            confidence = rng.uniform(*CONFIDENCE_RANGE)
            variance = predicted * (1 - confidence) * 0.5

            actual_demand = None
            accuracy = None
            if week < elapsed_weeks:
                actual_demand = max(0, math.floor(
                    predicted + rng.uniform(-ACTUAL_NOISE_HALF_WIDTH, ACTUAL_NOISE_HALF_WIDTH)
                ))
                accuracy = rng.uniform(*ACCURACY_RANGE)

            points.append(ForecastPoint(
                id=f"forecast-{sku}-{week}",
                sku=sku,
                week=start + timedelta(weeks=week),
                predicted_demand=predicted,
                confidence=confidence,
                lower_bound=math.floor(predicted - variance),
                upper_bound=math.floor(predicted + variance),
                actual_demand=actual_demand,
                accuracy=accuracy,
            ))

    return points
