"""
Production request models.

A production request is one marketplace's demand for one product in one
production month. Rows are owned by the storage layer; the services here
only read them.
"""

from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator

from models.base import BaseSchema
from utils.month_utils import is_valid_month


class ProductionRequest(BaseSchema):
    """Single request row as fetched from storage."""

    id: str = Field(..., description="Request identifier")
    product_code: str = Field(..., min_length=1, description="IWASKU product code")
    product_name: Optional[str] = Field(None, description="Product display name")
    category: str = Field(..., description="Manufacturing category")
    unit_size: Optional[Decimal] = Field(
        None, ge=0, description="Desi per unit (None when master data is incomplete)"
    )
    marketplace_id: str = Field(..., min_length=1, description="Marketplace identifier")
    marketplace_name: str = Field(..., description="Marketplace display name")
    # Positive by upstream contract; not enforced so the aggregator can guard it
    requested_quantity: int = Field(..., description="Units requested by this marketplace")
    produced_quantity: Optional[int] = Field(
        None, ge=0, description="Total units manufactured for the product this month"
    )
    production_month: str = Field(..., description="Production month (YYYY-MM)")

    @field_validator("production_month")
    @classmethod
    def validate_production_month(cls, v: str) -> str:
        if not is_valid_month(v):
            raise ValueError("production_month must be YYYY-MM")
        return v

    @property
    def has_size(self) -> bool:
        """False when unit_size is missing or zero."""
        return bool(self.unit_size)

    @property
    def size(self) -> Decimal:
        """Desi per unit, 0 when missing."""
        return self.unit_size or Decimal("0")
