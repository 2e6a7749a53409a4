"""
Base schemas for all dashboard records.
"""

from pydantic import BaseModel, ConfigDict


class RecordSchema(BaseModel):
    """
    Base for all dashboard records.

    Features:
        - Auto-trim whitespace from strings
        - Immutable: the store replaces a record instead of editing it
        - Reject unknown fields
    """
    model_config = ConfigDict(
        str_strip_whitespace=True,
        frozen=True,
        extra="forbid",
    )
