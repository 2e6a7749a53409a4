"""
Synthetic alerts built from the catalog templates.
"""

import random
from datetime import datetime, timedelta

from models.alert import Alert
from generators.catalog import ALERT_TEMPLATES

CREATED_WINDOW_DAYS = 7
ACKNOWLEDGED_PROBABILITY = 0.4


def generate_alerts(rng: random.Random, now: datetime) -> list[Alert]:
    alerts = []
    for index, template in enumerate(ALERT_TEMPLATES):
        alerts.append(Alert(
            id=f"alert-{index + 1}",
            type=template.type,
            severity=template.severity,
            title=template.title,
            description=template.description,
            sku=template.sku,
            product_name=template.product_name,
            created_at=now - timedelta(days=rng.uniform(0, CREATED_WINDOW_DAYS)),
            acknowledged=rng.random() < ACKNOWLEDGED_PROBABILITY,
            action_required=template.action_required,
        ))
    return alerts
