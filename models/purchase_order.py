"""
Purchase order schema and workflow.

Workflow:
    PENDING → APPROVED → ORDERED → RECEIVED
    PENDING/APPROVED → CANCELLED

An order carries approved_by exactly when it has been approved.
"""

from pydantic import Field, model_validator
from typing import Optional
from datetime import datetime
from enum import Enum

from models.base import RecordSchema


class PurchaseOrderStatus(str, Enum):
    """Purchase order workflow status."""

    PENDING = "pending"
    APPROVED = "approved"
    ORDERED = "ordered"
    RECEIVED = "received"
    CANCELLED = "cancelled"


# Valid status transitions
PURCHASE_ORDER_TRANSITIONS: dict[PurchaseOrderStatus, list[PurchaseOrderStatus]] = {
    PurchaseOrderStatus.PENDING: [PurchaseOrderStatus.APPROVED, PurchaseOrderStatus.CANCELLED],
    PurchaseOrderStatus.APPROVED: [PurchaseOrderStatus.ORDERED, PurchaseOrderStatus.CANCELLED],
    PurchaseOrderStatus.ORDERED: [PurchaseOrderStatus.RECEIVED],
    PurchaseOrderStatus.RECEIVED: [],
    PurchaseOrderStatus.CANCELLED: [],
}

# Statuses at or past approval in the main workflow
APPROVED_STATUSES = frozenset({
    PurchaseOrderStatus.APPROVED,
    PurchaseOrderStatus.ORDERED,
    PurchaseOrderStatus.RECEIVED,
})


def can_transition(
    current: PurchaseOrderStatus,
    new: PurchaseOrderStatus
) -> bool:
    """Check if the workflow allows current → new."""
    return new in PURCHASE_ORDER_TRANSITIONS.get(current, [])


class PurchaseOrder(RecordSchema):
    """Replenishment order placed with a supplier."""

    id: str = Field(..., min_length=1)
    sku: str = Field(..., min_length=1)
    product_name: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0)
    cost: float = Field(..., ge=0, description="Total cost (unit cost × quantity)")
    supplier: str = Field(..., min_length=1)
    status: PurchaseOrderStatus
    created_at: datetime
    expected_delivery: datetime
    approved_by: Optional[str] = Field(None, min_length=1)
    notes: Optional[str] = Field(None, max_length=500)

    @model_validator(mode="after")
    def check_workflow_fields(self) -> "PurchaseOrder":
        if self.expected_delivery <= self.created_at:
            raise ValueError("expected_delivery must be after created_at")
        if self.status in APPROVED_STATUSES and self.approved_by is None:
            raise ValueError(f"{self.status.value} order requires approved_by")
        if self.status == PurchaseOrderStatus.PENDING and self.approved_by is not None:
            raise ValueError("pending order cannot carry approved_by")
        return self

    @property
    def unit_cost(self) -> float:
        return self.cost / self.quantity
