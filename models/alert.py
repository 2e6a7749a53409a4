"""
Alert models.

Alerts notify users about important events:
- Stockouts and low stock
- Overstock
- Forecast accuracy drops
- Supplier delays
"""

from datetime import datetime
from typing import Optional
from enum import Enum
from pydantic import Field

from models.base import RecordSchema


class AlertType(str, Enum):
    """Alert type enumeration."""

    STOCKOUT = "stockout"
    LOW_STOCK = "low_stock"
    OVERSTOCK = "overstock"
    FORECAST_ACCURACY = "forecast_accuracy"
    SUPPLIER_DELAY = "supplier_delay"


class AlertSeverity(str, Enum):
    """Alert severity levels, ordered LOW < MEDIUM < HIGH < CRITICAL."""

    LOW = "low"            # Informational only
    MEDIUM = "medium"      # Worth a look
    HIGH = "high"          # Should be addressed soon
    CRITICAL = "critical"  # Requires immediate action

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    AlertSeverity.LOW: 0,
    AlertSeverity.MEDIUM: 1,
    AlertSeverity.HIGH: 2,
    AlertSeverity.CRITICAL: 3,
}


class Alert(RecordSchema):
    """Dashboard alert. Acknowledging flips the flag; the record stays."""

    id: str = Field(..., min_length=1)
    type: AlertType
    severity: AlertSeverity
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1, max_length=1000)
    sku: Optional[str] = None
    product_name: Optional[str] = None
    created_at: datetime
    acknowledged: bool = False
    action_required: bool
