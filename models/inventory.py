"""
Inventory item schema.

days_of_stock and status are computed from current_stock and
forecasted_demand on every access. They cannot be assigned, and a dumped
record reloads only if its derived values still agree with stock and demand.
"""

from pydantic import Field, computed_field, model_validator
from typing import Any, Optional
from datetime import datetime

from models.base import RecordSchema
from rules.stock_status import StockStatus, derive_stock_status

_DERIVED_FIELDS = ("days_of_stock", "status")


class InventoryItem(RecordSchema):
    """
    Current stock position for one SKU.

    Use with_stock() to change the stock level; it returns a new,
    revalidated record with refreshed derived fields.
    """

    id: str = Field(..., min_length=1, description="Inventory record id")
    sku: str = Field(..., min_length=1, description="Unique business key")
    product_name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    supplier: str = Field(..., min_length=1)
    current_stock: int = Field(..., ge=0, description="Units on hand")
    forecasted_demand: float = Field(..., gt=0, description="Forecasted units per week")
    cost: float = Field(..., ge=0, description="Unit cost")
    revenue: float = Field(..., ge=0, description="Unit revenue")
    last_updated: datetime

    @model_validator(mode="before")
    @classmethod
    def check_derived_inputs(cls, data: Any) -> Any:
        """Drop derived values from a dump; reject them if they disagree."""
        if not isinstance(data, dict) or not any(name in data for name in _DERIVED_FIELDS):
            return data

        data = dict(data)
        supplied = {name: data.pop(name) for name in _DERIVED_FIELDS if name in data}
        try:
            derived = derive_stock_status(
                int(data["current_stock"]),
                float(data["forecasted_demand"])
            )._asdict()
        except (KeyError, TypeError, ValueError):
            # Field validation reports the bad stock or demand
            return data

        for name, value in supplied.items():
            if value != derived[name]:
                raise ValueError(
                    f"{name} is derived from current_stock and forecasted_demand: "
                    f"expected {derived[name]!r}, got {value!r}"
                )
        return data

    @computed_field
    @property
    def days_of_stock(self) -> Optional[int]:
        """Days of cover at the current weekly demand."""
        return derive_stock_status(self.current_stock, self.forecasted_demand).days_of_stock

    @computed_field
    @property
    def status(self) -> StockStatus:
        return derive_stock_status(self.current_stock, self.forecasted_demand).status

    @property
    def unit_margin(self) -> float:
        return self.revenue - self.cost

    def with_stock(self, new_stock: int, updated_at: datetime) -> "InventoryItem":
        """
        Return a copy with a new stock level.

        Args:
            new_stock: Units on hand (non-negative)
            updated_at: Timestamp stamped into last_updated

        Raises:
            pydantic.ValidationError: If new_stock is negative
        """
        data = self.model_dump(exclude={"days_of_stock", "status"})
        data["current_stock"] = new_stock
        data["last_updated"] = updated_at
        return InventoryItem(**data)
