"""
Pydantic models for the dashboard records.
"""

from models.base import RecordSchema
from models.inventory import InventoryItem, StockStatus
from models.forecast import ForecastPoint
from models.purchase_order import (
    PurchaseOrder,
    PurchaseOrderStatus,
    PURCHASE_ORDER_TRANSITIONS,
    APPROVED_STATUSES,
    can_transition,
)
from models.alert import Alert, AlertType, AlertSeverity
from models.stats import DashboardStats
from models.dataset import DashboardDataset

__all__ = [
    # Base
    "RecordSchema",

    # Inventory
    "InventoryItem",
    "StockStatus",

    # Forecast
    "ForecastPoint",

    # Purchase Orders
    "PurchaseOrder",
    "PurchaseOrderStatus",
    "PURCHASE_ORDER_TRANSITIONS",
    "APPROVED_STATUSES",
    "can_transition",

    # Alerts
    "Alert",
    "AlertType",
    "AlertSeverity",

    # Stats
    "DashboardStats",

    # Dataset
    "DashboardDataset",
]
