"""
Dashboard stats rollup.

Recomputed from the live collections on every call so counts follow
mutations (stock updates, approvals).

Financials are weekly projections: each item contributes its unit revenue
and unit cost times its forecasted weekly demand.
"""

import structlog

from models.dataset import DashboardDataset
from models.stats import DashboardStats
from models.purchase_order import PurchaseOrderStatus
from rules.stock_status import StockStatus

logger = structlog.get_logger(__name__)


def gross_margin_pct(total_revenue: float, total_cost: float) -> float:
    """(revenue - cost) / revenue as a percentage, 0 when there is no revenue."""
    if total_revenue <= 0:
        return 0.0
    return round((total_revenue - total_cost) / total_revenue * 100, 2)


def summarize_dataset(dataset: DashboardDataset) -> DashboardStats:
    """
    Build the DashboardStats snapshot for a dataset.

    Args:
        dataset: Current dataset

    Returns:
        DashboardStats
    """
    total_revenue = round(sum(i.revenue * i.forecasted_demand for i in dataset.inventory), 2)
    total_cost = round(sum(i.cost * i.forecasted_demand for i in dataset.inventory), 2)

    status_counts = {status: 0 for status in StockStatus}
    for item in dataset.inventory:
        status_counts[item.status] += 1

    accuracies = [f.accuracy for f in dataset.forecasts if f.accuracy is not None]
    average_accuracy = round(sum(accuracies) / len(accuracies) * 100, 1) if accuracies else 0.0

    pending = sum(
        1 for po in dataset.purchase_orders
        if po.status == PurchaseOrderStatus.PENDING
    )

    stats = DashboardStats(
        total_revenue=total_revenue,
        total_cost=total_cost,
        gross_margin=gross_margin_pct(total_revenue, total_cost),
        total_skus=len(dataset.inventory),
        out_of_stock_skus=status_counts[StockStatus.OUT_OF_STOCK],
        low_stock_skus=status_counts[StockStatus.LOW_STOCK],
        overstock_skus=status_counts[StockStatus.OVERSTOCK],
        in_stock_skus=status_counts[StockStatus.IN_STOCK],
        average_forecast_accuracy=average_accuracy,
        total_purchase_orders=len(dataset.purchase_orders),
        pending_approvals=pending,
        stockouts_prevented=dataset.stockouts_prevented,
        working_capital_saved=dataset.working_capital_saved,
    )

    logger.debug(
        "dashboard_stats_computed",
        total_skus=stats.total_skus,
        pending_approvals=stats.pending_approvals,
        gross_margin=stats.gross_margin,
    )

    return stats
