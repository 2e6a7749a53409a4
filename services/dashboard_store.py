"""
Dashboard data store: the single owner of the in-memory dataset.

Queries return new lists of immutable records. Mutations build a new
dataset and swap it in with one assignment, so a caller never observes a
half-applied change. Unknown identifiers and disallowed workflow
transitions are logged and ignored; the operation returns False and
leaves every record untouched.
"""

import asyncio
import random
import re
from datetime import datetime, timezone
from typing import Callable, Optional

import structlog

from config.settings import Settings, get_settings
from models.dataset import DashboardDataset
from models.inventory import InventoryItem
from models.forecast import ForecastPoint
from models.purchase_order import (
    PurchaseOrder,
    PurchaseOrderStatus,
    PURCHASE_ORDER_TRANSITIONS,
    can_transition,
)
from models.alert import Alert, AlertSeverity
from models.stats import DashboardStats
from generators.dataset import generate_dataset
from services.alert_rules import build_status_alert
from services.stats_service import summarize_dataset
from exceptions import (
    ValidationError,
    InventoryItemNotFoundError,
    PurchaseOrderNotFoundError,
    AlertNotFoundError,
    InvalidStatusTransitionError,
)

logger = structlog.get_logger(__name__)

_ALERT_ID_PATTERN = re.compile(r"alert-(\d+)")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _replace_at(records: tuple, index: int, record) -> tuple:
    return records[:index] + (record,) + records[index + 1:]


class DashboardStore:
    """
    Dashboard data business logic.

    Owns inventory, forecasts, purchase orders, alerts and the stats
    rollup. Construct one per session and pass it to every caller, or use
    get_dashboard_store() for the process-wide instance.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
        dataset: Optional[DashboardDataset] = None,
    ):
        self.settings = settings or get_settings()
        self._rng = rng or random.Random(self.settings.random_seed)
        self._clock = clock or _utcnow
        self._refresh_lock = asyncio.Lock()
        if dataset is None:
            dataset = generate_dataset(self._rng, self._clock(), self.settings)
        self._dataset = dataset

    @property
    def dataset(self) -> DashboardDataset:
        """Current dataset (immutable)."""
        return self._dataset

    # ===================
    # INVENTORY
    # ===================

    def get_inventory(self) -> list[InventoryItem]:
        """All inventory items in insertion order."""
        return list(self._dataset.inventory)

    def get_inventory_by_sku(self, sku: str) -> Optional[InventoryItem]:
        """
        Get an inventory item by SKU.

        Returns:
            InventoryItem, or None if the SKU is unknown
        """
        try:
            _, item = self._find_inventory_item(sku)
            return item
        except InventoryItemNotFoundError:
            logger.debug("inventory_item_not_found", sku=sku)
            return None

    def update_stock(self, sku: str, new_stock: int) -> bool:
        """
        Set the stock level for a SKU.

        Stamps last_updated and re-derives days_of_stock and status. Raises
        an alert when the item moves into an unhealthy status (if enabled).

        Args:
            sku: Product SKU
            new_stock: Units on hand (non-negative integer)

        Returns:
            True if the item was updated, False if the SKU is unknown

        Raises:
            ValidationError: If new_stock is not a non-negative integer
        """
        if isinstance(new_stock, bool) or not isinstance(new_stock, int) or new_stock < 0:
            raise ValidationError(
                "Stock must be a non-negative integer",
                code="INVENTORY_INVALID_STOCK",
                details={"sku": sku, "provided": new_stock}
            )

        try:
            index, item = self._find_inventory_item(sku)
        except InventoryItemNotFoundError:
            logger.warning("update_stock_unknown_sku", sku=sku)
            return False

        now = self._clock()
        updated = item.with_stock(new_stock, now)
        changes = {"inventory": _replace_at(self._dataset.inventory, index, updated)}

        alert = None
        if self.settings.alert_on_status_change:
            alert = build_status_alert(self._next_alert_id(), item, updated, now)
            if alert is not None:
                changes["alerts"] = self._dataset.alerts + (alert,)

        self._apply(**changes)

        logger.info(
            "stock_updated",
            sku=sku,
            previous_stock=item.current_stock,
            current_stock=updated.current_stock,
            days_of_stock=updated.days_of_stock,
            status=updated.status.value,
            alert_id=alert.id if alert else None,
        )
        return True

    # ===================
    # FORECASTS
    # ===================

    def get_forecasts(self, sku: Optional[str] = None) -> list[ForecastPoint]:
        """All forecast points, or only those for one SKU, in generation order."""
        if sku is None:
            return list(self._dataset.forecasts)
        return [f for f in self._dataset.forecasts if f.sku == sku]

    # ===================
    # PURCHASE ORDERS
    # ===================

    def get_purchase_orders(
        self,
        status: Optional[PurchaseOrderStatus] = None
    ) -> list[PurchaseOrder]:
        """All purchase orders, optionally filtered by status."""
        if status is None:
            return list(self._dataset.purchase_orders)
        return [po for po in self._dataset.purchase_orders if po.status == status]

    def get_purchase_order(self, order_id: str) -> Optional[PurchaseOrder]:
        try:
            _, order = self._find_purchase_order(order_id)
            return order
        except PurchaseOrderNotFoundError:
            return None

    def approve_purchase_order(self, order_id: str, approved_by: str) -> bool:
        """
        Approve a pending purchase order.

        Orders that are not PENDING keep their status and approver.

        Args:
            order_id: Purchase order id
            approved_by: Name of the approver

        Returns:
            True if the order moved to APPROVED

        Raises:
            ValidationError: If approved_by is blank
        """
        if not approved_by or not approved_by.strip():
            raise ValidationError(
                "Approver name is required",
                code="PURCHASE_ORDER_APPROVER_REQUIRED",
                details={"id": order_id}
            )
        return self._transition_purchase_order(
            order_id,
            PurchaseOrderStatus.APPROVED,
            approved_by=approved_by.strip(),
        )

    def mark_purchase_order_ordered(self, order_id: str) -> bool:
        """Move an APPROVED order to ORDERED."""
        return self._transition_purchase_order(order_id, PurchaseOrderStatus.ORDERED)

    def mark_purchase_order_received(self, order_id: str) -> bool:
        """Move an ORDERED order to RECEIVED."""
        return self._transition_purchase_order(order_id, PurchaseOrderStatus.RECEIVED)

    def cancel_purchase_order(self, order_id: str) -> bool:
        """Cancel a PENDING or APPROVED order. Any approver is kept."""
        return self._transition_purchase_order(order_id, PurchaseOrderStatus.CANCELLED)

    def _transition_purchase_order(
        self,
        order_id: str,
        new_status: PurchaseOrderStatus,
        approved_by: Optional[str] = None,
    ) -> bool:
        try:
            index, order = self._find_purchase_order(order_id)
            self._check_transition(order, new_status)
        except PurchaseOrderNotFoundError:
            logger.warning(
                "purchase_order_not_found",
                order_id=order_id,
                new_status=new_status.value
            )
            return False
        except InvalidStatusTransitionError as e:
            logger.warning(
                "purchase_order_transition_ignored",
                order_id=order_id,
                **e.details
            )
            return False

        changes = {"status": new_status}
        if approved_by is not None:
            changes["approved_by"] = approved_by
        updated = PurchaseOrder.model_validate({**order.model_dump(), **changes})

        self._apply(purchase_orders=_replace_at(self._dataset.purchase_orders, index, updated))

        logger.info(
            "purchase_order_status_changed",
            order_id=order_id,
            from_status=order.status.value,
            to_status=new_status.value,
            approved_by=updated.approved_by,
        )
        return True

    @staticmethod
    def _check_transition(order: PurchaseOrder, new_status: PurchaseOrderStatus) -> None:
        if not can_transition(order.status, new_status):
            allowed = [s.value for s in PURCHASE_ORDER_TRANSITIONS.get(order.status, [])]
            raise InvalidStatusTransitionError(order.status.value, new_status.value, allowed)

    # ===================
    # ALERTS
    # ===================

    def get_alerts(
        self,
        unacknowledged_only: bool = False,
        severity: Optional[AlertSeverity] = None,
    ) -> list[Alert]:
        """
        Get alerts, optionally only unacknowledged and/or of one severity.

        Relative order is preserved.
        """
        alerts = list(self._dataset.alerts)
        if unacknowledged_only:
            alerts = [a for a in alerts if not a.acknowledged]
        if severity is not None:
            alerts = [a for a in alerts if a.severity == severity]
        return alerts

    def acknowledge_alert(self, alert_id: str) -> bool:
        """
        Mark an alert as acknowledged. Idempotent.

        Returns:
            True if the alert exists (acknowledged now or already)
        """
        try:
            index, alert = self._find_alert(alert_id)
        except AlertNotFoundError:
            logger.warning("acknowledge_unknown_alert", alert_id=alert_id)
            return False

        if alert.acknowledged:
            return True

        updated = Alert.model_validate({**alert.model_dump(), "acknowledged": True})
        self._apply(alerts=_replace_at(self._dataset.alerts, index, updated))

        logger.info("alert_acknowledged", alert_id=alert_id, type=alert.type.value)
        return True

    def _next_alert_id(self) -> str:
        """One past the highest alert-N id; ids in other formats are skipped."""
        highest = 0
        for alert in self._dataset.alerts:
            match = _ALERT_ID_PATTERN.fullmatch(alert.id)
            if match:
                highest = max(highest, int(match.group(1)))
        return f"alert-{highest + 1}"

    # ===================
    # STATS
    # ===================

    def get_stats(self) -> DashboardStats:
        """Aggregate snapshot of the current dataset."""
        return summarize_dataset(self._dataset)

    # ===================
    # REFRESH
    # ===================

    async def refresh(self) -> None:
        """
        Discard the dataset and generate a new one after a simulated delay.

        The new dataset replaces the old one in a single assignment.
        Mutations made while the delay is pending apply to the old dataset
        and are discarded with it. Overlapping refreshes run one at a time.
        """
        async with self._refresh_lock:
            logger.info(
                "dashboard_refresh_started",
                delay_seconds=self.settings.refresh_delay_seconds
            )
            await asyncio.sleep(self.settings.refresh_delay_seconds)

            dataset = generate_dataset(self._rng, self._clock(), self.settings)
            self._dataset = dataset

            logger.info("dashboard_refresh_completed")

    # ===================
    # LOOKUP HELPERS
    # ===================

    def _apply(self, **changes) -> None:
        """Swap in a revalidated dataset; on a key clash nothing changes."""
        self._dataset = DashboardDataset.model_validate({**dict(self._dataset), **changes})

    def _find_inventory_item(self, sku: str) -> tuple[int, InventoryItem]:
        for index, item in enumerate(self._dataset.inventory):
            if item.sku == sku:
                return index, item
        raise InventoryItemNotFoundError(sku)

    def _find_purchase_order(self, order_id: str) -> tuple[int, PurchaseOrder]:
        for index, order in enumerate(self._dataset.purchase_orders):
            if order.id == order_id:
                return index, order
        raise PurchaseOrderNotFoundError(order_id)

    def _find_alert(self, alert_id: str) -> tuple[int, Alert]:
        for index, alert in enumerate(self._dataset.alerts):
            if alert.id == alert_id:
                return index, alert
        raise AlertNotFoundError(alert_id)


# Singleton instance for convenience
_dashboard_store: Optional[DashboardStore] = None


def get_dashboard_store() -> DashboardStore:
    """Get or create the process-wide DashboardStore."""
    global _dashboard_store
    if _dashboard_store is None:
        _dashboard_store = DashboardStore()
    return _dashboard_store


def reset_dashboard_store() -> None:
    """Drop the process-wide store; the next access builds a fresh one."""
    global _dashboard_store
    _dashboard_store = None
