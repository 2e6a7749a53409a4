"""
Synthetic data generators.

Every generator takes an injected random.Random so a seed reproduces the
same dataset.
"""

from generators.catalog import (
    CatalogProduct,
    PRODUCT_CATALOG,
    ALERT_TEMPLATES,
    APPROVERS,
    forecast_skus,
)
from generators.inventory import generate_inventory
from generators.forecast import generate_forecasts
from generators.purchase_orders import generate_purchase_orders
from generators.alerts import generate_alerts
from generators.dataset import generate_dataset, generate_business_metrics

__all__ = [
    # Catalog
    "CatalogProduct",
    "PRODUCT_CATALOG",
    "ALERT_TEMPLATES",
    "APPROVERS",
    "forecast_skus",

    # Generators
    "generate_inventory",
    "generate_forecasts",
    "generate_purchase_orders",
    "generate_alerts",
    "generate_business_metrics",
    "generate_dataset",
]
