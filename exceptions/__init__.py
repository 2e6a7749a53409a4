"""
Custom exceptions module.
"""

from exceptions.errors import (
    # Base exceptions
    AppError,
    NotFoundError,
    ValidationError,

    # Inventory
    InventoryItemNotFoundError,

    # Purchase Orders
    PurchaseOrderNotFoundError,
    InvalidStatusTransitionError,

    # Alerts
    AlertNotFoundError,
)

__all__ = [
    # Base
    "AppError",
    "NotFoundError",
    "ValidationError",

    # Inventory
    "InventoryItemNotFoundError",

    # Purchase Orders
    "PurchaseOrderNotFoundError",
    "InvalidStatusTransitionError",

    # Alerts
    "AlertNotFoundError",
]
