"""
Alert rules for inventory status changes.

When a stock update moves an item into an unhealthy status, the store
raises the matching alert:

    OUT_OF_STOCK → STOCKOUT  / CRITICAL / action required
    LOW_STOCK    → LOW_STOCK / HIGH     / action required
    OVERSTOCK    → OVERSTOCK / LOW      / informational
"""

from datetime import datetime
from typing import NamedTuple, Optional

from models.alert import Alert, AlertType, AlertSeverity
from models.inventory import InventoryItem
from rules.stock_status import StockStatus


class AlertRule(NamedTuple):
    type: AlertType
    severity: AlertSeverity
    action_required: bool
    title: str


STATUS_ALERT_RULES: dict[StockStatus, AlertRule] = {
    StockStatus.OUT_OF_STOCK: AlertRule(
        AlertType.STOCKOUT, AlertSeverity.CRITICAL, True, "Critical Stockout Alert"
    ),
    StockStatus.LOW_STOCK: AlertRule(
        AlertType.LOW_STOCK, AlertSeverity.HIGH, True, "Low Stock Warning"
    ),
    StockStatus.OVERSTOCK: AlertRule(
        AlertType.OVERSTOCK, AlertSeverity.LOW, False, "Overstock Notice"
    ),
}


def alert_for_status(status: StockStatus) -> Optional[AlertRule]:
    """Rule for a stock status, None for IN_STOCK."""
    return STATUS_ALERT_RULES.get(status)


def describe_status(item: InventoryItem) -> str:
    if item.status == StockStatus.OUT_OF_STOCK:
        return f"{item.product_name} is completely out of stock"
    if item.status == StockStatus.LOW_STOCK:
        return f"{item.product_name} has only {item.days_of_stock} days of stock remaining"
    if item.days_of_stock is None:
        return f"{item.product_name} has stock but no forecasted demand"
    return f"{item.product_name} has {item.days_of_stock} days of stock"


def build_status_alert(
    alert_id: str,
    previous: InventoryItem,
    current: InventoryItem,
    created_at: datetime,
) -> Optional[Alert]:
    """
    Alert for an item whose status changed into an unhealthy status.

    Returns None if the status did not change or the new status is IN_STOCK.
    """
    if previous.status == current.status:
        return None

    rule = alert_for_status(current.status)
    if rule is None:
        return None

    return Alert(
        id=alert_id,
        type=rule.type,
        severity=rule.severity,
        title=rule.title,
        description=describe_status(current),
        sku=current.sku,
        product_name=current.product_name,
        created_at=created_at,
        acknowledged=False,
        action_required=rule.action_required,
    )
