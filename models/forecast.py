"""
Weekly demand forecast schema.
"""

from pydantic import Field, model_validator
from typing import Optional
from datetime import date

from models.base import RecordSchema


class ForecastPoint(RecordSchema):
    """
    Predicted demand for one SKU in one week.

    Identity is (sku, week). actual_demand and accuracy are only present
    for weeks that have already been realized.
    """

    id: str = Field(..., min_length=1)
    sku: str = Field(..., min_length=1)
    week: date = Field(..., description="First day of the forecast week")
    predicted_demand: int = Field(..., ge=0)
    confidence: float = Field(..., ge=0, le=1)
    lower_bound: int = Field(..., ge=0)
    upper_bound: int = Field(..., ge=0)
    actual_demand: Optional[int] = Field(None, ge=0)
    accuracy: Optional[float] = Field(None, ge=0, le=1)

    @model_validator(mode="after")
    def check_interval(self) -> "ForecastPoint":
        """Bounds must bracket the prediction."""
        if not self.lower_bound <= self.predicted_demand <= self.upper_bound:
            raise ValueError(
                f"bounds [{self.lower_bound}, {self.upper_bound}] "
                f"do not bracket predicted_demand {self.predicted_demand}"
            )
        if self.accuracy is not None and self.actual_demand is None:
            raise ValueError("accuracy requires actual_demand")
        return self

    @property
    def is_realized(self) -> bool:
        return self.actual_demand is not None
