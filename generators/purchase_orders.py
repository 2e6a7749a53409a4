"""
Synthetic purchase orders, one per leading catalog product.
"""

import random
from datetime import datetime, timedelta

from models.purchase_order import (
    PurchaseOrder,
    PurchaseOrderStatus,
    APPROVED_STATUSES,
)
from generators.catalog import (
    APPROVERS,
    URGENT_ORDER_NOTE,
    purchase_order_products,
)

QUANTITY_RANGE = (100, 599)
UNIT_COST_RANGE = (10, 39)
CREATED_WINDOW_DAYS = 30
DELIVERY_LEAD_DAYS = (7, 21)
URGENT_NOTE_PROBABILITY = 0.3


def generate_purchase_orders(rng: random.Random, now: datetime) -> list[PurchaseOrder]:
    """
    Generate purchase orders in random workflow states.

    Orders at or past approval always name an approver; pending and
    cancelled orders never do.
    """
    statuses = list(PurchaseOrderStatus)
    orders = []

    for index, product in enumerate(purchase_order_products()):
        quantity = rng.randint(*QUANTITY_RANGE)
        unit_cost = rng.randint(*UNIT_COST_RANGE)
        created_at = now - timedelta(days=rng.uniform(0, CREATED_WINDOW_DAYS))
        expected_delivery = created_at + timedelta(days=rng.uniform(*DELIVERY_LEAD_DAYS))
        status = rng.choice(statuses)

        approved_by = rng.choice(APPROVERS) if status in APPROVED_STATUSES else None
        notes = URGENT_ORDER_NOTE if rng.random() < URGENT_NOTE_PROBABILITY else None

        orders.append(PurchaseOrder(
            id=f"po-{index + 1}",
            sku=product.sku,
            product_name=product.name,
            quantity=quantity,
            cost=float(unit_cost * quantity),
            supplier=product.supplier,
            status=status,
            created_at=created_at,
            expected_delivery=expected_delivery,
            approved_by=approved_by,
            notes=notes,
        ))

    return orders
