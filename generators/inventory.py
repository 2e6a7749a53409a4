"""
Synthetic inventory positions, one per catalog product.
"""

import random
from datetime import datetime, timedelta

from models.inventory import InventoryItem
from generators.catalog import PRODUCT_CATALOG

# Value ranges (inclusive)
STOCK_RANGE = (10, 509)
WEEKLY_DEMAND_RANGE = (20, 119)
UNIT_COST_RANGE = (10, 59)
UNIT_REVENUE_RANGE = (30, 129)
LAST_UPDATED_WINDOW = timedelta(days=1)


def generate_inventory(rng: random.Random, now: datetime) -> list[InventoryItem]:
    """
    Generate one inventory item per catalog product.

    days_of_stock and status are derived by the model itself.
    """
    items = []
    for index, product in enumerate(PRODUCT_CATALOG):
        items.append(InventoryItem(
            id=f"inv-{index + 1}",
            sku=product.sku,
            product_name=product.name,
            category=product.category,
            supplier=product.supplier,
            current_stock=rng.randint(*STOCK_RANGE),
            forecasted_demand=float(rng.randint(*WEEKLY_DEMAND_RANGE)),
            cost=float(rng.randint(*UNIT_COST_RANGE)),
            revenue=float(rng.randint(*UNIT_REVENUE_RANGE)),
            last_updated=now - rng.random() * LAST_UPDATED_WINDOW,
        ))
    return items
