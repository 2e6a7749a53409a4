"""
Pure derivation rules shared by the models and the store.
"""

from rules.stock_status import (
    StockStatus,
    StockDerivation,
    days_of_cover,
    derive_stock_status,
)

__all__ = [
    "StockStatus",
    "StockDerivation",
    "days_of_cover",
    "derive_stock_status",
]
