"""
Stock status derivation, the single source of truth for stock status.

Days of stock is current stock expressed as days of cover at the weekly
demand rate:

    days_of_stock = floor(current_stock / (forecasted_demand / 7))

Status precedence:
    1. current_stock == 0      -> OUT_OF_STOCK
    2. days_of_stock < 7       -> LOW_STOCK
    3. days_of_stock > 60      -> OVERSTOCK
    4. otherwise               -> IN_STOCK

Zero (or negative) demand means infinite cover: days_of_stock is None and any
stock on hand is OVERSTOCK.
"""

import math
from enum import Enum
from typing import NamedTuple, Optional

DAYS_PER_WEEK = 7
DEFAULT_LOW_STOCK_DAYS = 7
DEFAULT_OVERSTOCK_DAYS = 60


class StockStatus(str, Enum):
    """Inventory status derived from stock and demand."""

    IN_STOCK = "in_stock"
    LOW_STOCK = "low_stock"
    OUT_OF_STOCK = "out_of_stock"
    OVERSTOCK = "overstock"


class StockDerivation(NamedTuple):
    """Derived fields for one inventory item."""

    days_of_stock: Optional[int]
    status: StockStatus


def days_of_cover(current_stock: int, forecasted_demand: float) -> Optional[int]:
    """Whole days the stock lasts at the weekly demand rate, None if infinite."""
    if forecasted_demand <= 0:
        return None
    daily_demand = forecasted_demand / DAYS_PER_WEEK
    return math.floor(current_stock / daily_demand)


def derive_stock_status(
    current_stock: int,
    forecasted_demand: float,
    low_stock_days: int = DEFAULT_LOW_STOCK_DAYS,
    overstock_days: int = DEFAULT_OVERSTOCK_DAYS,
) -> StockDerivation:
    """
    Derive days of stock and status from stock level and weekly demand.

    Args:
        current_stock: Units on hand (non-negative)
        forecasted_demand: Forecasted units per week
        low_stock_days: Cover below which the item is LOW_STOCK
        overstock_days: Cover above which the item is OVERSTOCK

    Returns:
        StockDerivation(days_of_stock, status)

    Raises:
        ValueError: If current_stock is negative
    """
    if current_stock < 0:
        raise ValueError(f"current_stock must be non-negative, got {current_stock}")

    days = days_of_cover(current_stock, forecasted_demand)

    if current_stock == 0:
        return StockDerivation(days, StockStatus.OUT_OF_STOCK)
    if days is None:
        return StockDerivation(None, StockStatus.OVERSTOCK)
    if days < low_stock_days:
        return StockDerivation(days, StockStatus.LOW_STOCK)
    if days > overstock_days:
        return StockDerivation(days, StockStatus.OVERSTOCK)
    return StockDerivation(days, StockStatus.IN_STOCK)
