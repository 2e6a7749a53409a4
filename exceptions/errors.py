"""
Custom exception classes for the dashboard data layer.

The store raises these from its internal lookup and transition helpers and
turns them into no-ops at its public boundary.
"""

from typing import Optional, Any
from datetime import datetime, timezone


class AppError(Exception):
    """
    Base exception for all application errors.

    All custom exceptions inherit from this.

    Attributes:
        code: Error code (e.g., "ALERT_NOT_FOUND")
        message: Human-readable message
        details: Additional context
    """

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to a serializable error payload."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "timestamp": self.timestamp
            }
        }


class NotFoundError(AppError):
    """Referenced record does not exist."""

    def __init__(
        self,
        resource: str,
        identifier: str,
        code: Optional[str] = None
    ):
        super().__init__(
            code=code or f"{resource.upper()}_NOT_FOUND",
            message=f"{resource} not found",
            details={"id": identifier}
        )


class ValidationError(AppError):
    """Input rejected before any state was touched."""

    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            details=details
        )


# ===================
# SPECIFIC ERRORS
# ===================

class InventoryItemNotFoundError(NotFoundError):
    """Inventory item not found by SKU."""

    def __init__(self, sku: str):
        super().__init__(
            resource="InventoryItem",
            identifier=sku,
            code="INVENTORY_ITEM_NOT_FOUND"
        )


class PurchaseOrderNotFoundError(NotFoundError):
    """Purchase order not found."""

    def __init__(self, order_id: str):
        super().__init__(
            resource="PurchaseOrder",
            identifier=order_id,
            code="PURCHASE_ORDER_NOT_FOUND"
        )


class AlertNotFoundError(NotFoundError):
    """Alert not found."""

    def __init__(self, alert_id: str):
        super().__init__(
            resource="Alert",
            identifier=alert_id,
            code="ALERT_NOT_FOUND"
        )


class InvalidStatusTransitionError(ValidationError):
    """Purchase order workflow does not allow this transition."""

    def __init__(self, current_status: str, new_status: str, allowed: list[str]):
        super().__init__(
            code="PURCHASE_ORDER_INVALID_TRANSITION",
            message=f"Cannot transition from {current_status} to {new_status}",
            details={
                "current_status": current_status,
                "new_status": new_status,
                "allowed_transitions": allowed
            }
        )
