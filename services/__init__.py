"""
Business logic services.

Each service handles one concern of the dashboard data layer.
"""

from services.dashboard_store import (
    DashboardStore,
    get_dashboard_store,
    reset_dashboard_store,
)
from services.stats_service import summarize_dataset, gross_margin_pct
from services.alert_rules import (
    AlertRule,
    STATUS_ALERT_RULES,
    alert_for_status,
    build_status_alert,
)

__all__ = [
    "DashboardStore",
    "get_dashboard_store",
    "reset_dashboard_store",
    "summarize_dataset",
    "gross_margin_pct",
    "AlertRule",
    "STATUS_ALERT_RULES",
    "alert_for_status",
    "build_status_alert",
]
