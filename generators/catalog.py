"""
Fixed product catalog and templates for the synthetic dataset.

Shape is deterministic; the generators only randomize values.
"""

from typing import NamedTuple, Optional

from models.alert import AlertType, AlertSeverity


class CatalogProduct(NamedTuple):
    sku: str
    name: str
    category: str
    supplier: str


PRODUCT_CATALOG: tuple[CatalogProduct, ...] = (
    CatalogProduct("TECH-001", "Wireless Headphones Pro", "Electronics", "TechCorp"),
    CatalogProduct("FASH-002", "Premium Cotton T-Shirt", "Apparel", "FashionCo"),
    CatalogProduct("HOME-003", "Smart LED Bulb", "Home", "SmartHome Inc"),
    CatalogProduct("TECH-004", "Bluetooth Speaker", "Electronics", "AudioTech"),
    CatalogProduct("FASH-005", "Denim Jeans Classic", "Apparel", "DenimWorks"),
    CatalogProduct("HOME-006", "Coffee Maker Deluxe", "Home", "KitchenPro"),
    CatalogProduct("TECH-007", "Smartphone Case", "Electronics", "AccessoryPlus"),
    CatalogProduct("FASH-008", "Winter Jacket", "Apparel", "WinterWear"),
    CatalogProduct("HOME-009", "Air Purifier", "Home", "CleanAir Co"),
    CatalogProduct("TECH-010", "Laptop Stand", "Electronics", "WorkSpace"),
)

# Forecasts and purchase orders cover the leading products only
FORECAST_PRODUCT_COUNT = 5
PURCHASE_ORDER_PRODUCT_COUNT = 5

APPROVERS = ("John Doe", "Sarah Smith")

URGENT_ORDER_NOTE = "Urgent order - low stock levels"


class AlertTemplate(NamedTuple):
    type: AlertType
    severity: AlertSeverity
    title: str
    description: str
    action_required: bool
    sku: Optional[str] = None
    product_name: Optional[str] = None


ALERT_TEMPLATES: tuple[AlertTemplate, ...] = (
    AlertTemplate(
        type=AlertType.STOCKOUT,
        severity=AlertSeverity.CRITICAL,
        title="Critical Stockout Alert",
        description="Wireless Headphones Pro is completely out of stock",
        sku="TECH-001",
        product_name="Wireless Headphones Pro",
        action_required=True,
    ),
    AlertTemplate(
        type=AlertType.LOW_STOCK,
        severity=AlertSeverity.HIGH,
        title="Low Stock Warning",
        description="Premium Cotton T-Shirt has only 3 days of stock remaining",
        sku="FASH-002",
        product_name="Premium Cotton T-Shirt",
        action_required=True,
    ),
    AlertTemplate(
        type=AlertType.FORECAST_ACCURACY,
        severity=AlertSeverity.MEDIUM,
        title="Forecast Accuracy Drop",
        description="Smart LED Bulb forecast accuracy dropped to 82%",
        sku="HOME-003",
        product_name="Smart LED Bulb",
        action_required=False,
    ),
    AlertTemplate(
        type=AlertType.SUPPLIER_DELAY,
        severity=AlertSeverity.HIGH,
        title="Supplier Delay",
        description="TechCorp shipment delayed by 5 days",
        action_required=True,
    ),
    AlertTemplate(
        type=AlertType.OVERSTOCK,
        severity=AlertSeverity.LOW,
        title="Overstock Notice",
        description="Air Purifier has 90+ days of stock",
        sku="HOME-009",
        product_name="Air Purifier",
        action_required=False,
    ),
)


def forecast_skus() -> list[str]:
    """SKUs that get a demand forecast."""
    return [p.sku for p in PRODUCT_CATALOG[:FORECAST_PRODUCT_COUNT]]


def purchase_order_products() -> tuple[CatalogProduct, ...]:
    return PRODUCT_CATALOG[:PURCHASE_ORDER_PRODUCT_COUNT]
