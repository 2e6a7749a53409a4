"""
Complete dashboard dataset.

The store holds exactly one of these and swaps it whole on refresh.
"""

from pydantic import Field, model_validator

from models.base import RecordSchema
from models.inventory import InventoryItem
from models.forecast import ForecastPoint
from models.purchase_order import PurchaseOrder
from models.alert import Alert


class DashboardDataset(RecordSchema):
    """All entity collections plus the generated business-value metrics."""

    inventory: tuple[InventoryItem, ...] = ()
    forecasts: tuple[ForecastPoint, ...] = ()
    purchase_orders: tuple[PurchaseOrder, ...] = ()
    alerts: tuple[Alert, ...] = ()

    stockouts_prevented: int = Field(default=0, ge=0)
    working_capital_saved: float = Field(default=0, ge=0)

    @model_validator(mode="after")
    def check_unique_keys(self) -> "DashboardDataset":
        """SKUs and record ids must be unique within each collection."""
        _require_unique("inventory sku", [i.sku for i in self.inventory])
        _require_unique("inventory id", [i.id for i in self.inventory])
        _require_unique("forecast (sku, week)", [(f.sku, f.week) for f in self.forecasts])
        _require_unique("purchase order id", [po.id for po in self.purchase_orders])
        _require_unique("alert id", [a.id for a in self.alerts])
        return self


def _require_unique(label: str, keys: list) -> None:
    seen = set()
    for key in keys:
        if key in seen:
            raise ValueError(f"duplicate {label}: {key}")
        seen.add(key)
