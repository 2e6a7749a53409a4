"""
Dashboard stats model: aggregate snapshot shown on the overview page.
"""

from pydantic import Field

from models.base import RecordSchema


class DashboardStats(RecordSchema):
    """Rollup of the whole dataset.

    gross_margin and average_forecast_accuracy are percentages (0-100).
    """

    # Financials
    total_revenue: float = Field(..., ge=0)
    total_cost: float = Field(..., ge=0)
    gross_margin: float = Field(..., description="(revenue - cost) / revenue, as a percentage")

    # SKU counts by status
    total_skus: int = Field(..., ge=0)
    out_of_stock_skus: int = Field(..., ge=0)
    low_stock_skus: int = Field(..., ge=0)
    overstock_skus: int = Field(..., ge=0)
    in_stock_skus: int = Field(..., ge=0)

    # Forecasting
    average_forecast_accuracy: float = Field(..., ge=0, le=100)

    # Purchase orders
    total_purchase_orders: int = Field(..., ge=0)
    pending_approvals: int = Field(..., ge=0)

    # Business value
    stockouts_prevented: int = Field(..., ge=0)
    working_capital_saved: float = Field(..., ge=0)
