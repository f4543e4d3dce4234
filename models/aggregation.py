"""
Aggregation result models.

Output shapes of the monthly rollup: per product, per category, per
marketplace and month-wide totals. Produced quantities distributed across
rows are fractional estimates; rounding is left to presentation.
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from models.base import FrozenSchema
from models.production_request import ProductionRequest


class RowAllocation(FrozenSchema):
    """Share of a product's produced quantity attributed to one request row."""

    request_id: str
    product_code: str
    share: Decimal = Field(..., description="requested / product total requested (0 when excluded)")
    attributed_produced: Decimal = Field(..., description="produced_quantity x share")


class ProductAggregate(FrozenSchema):
    """All demand for one product code in a month."""

    product_code: str
    category: str = Field(..., description="Category of the representative row")
    unit_size: Optional[Decimal] = Field(None, description="Desi of the representative row")
    total_requested_quantity: int = Field(
        ..., description="Sum of positive requested quantities across marketplaces"
    )
    produced_quantity: int = Field(..., description="Single produced value for the product")
    requests: List[ProductionRequest] = Field(default_factory=list)

    @property
    def produced_desi(self) -> Decimal:
        return (self.unit_size or Decimal("0")) * self.produced_quantity


class CategorySummary(FrozenSchema):
    """Monthly rollup for one manufacturing category."""

    category: str
    total_quantity: int = Field(..., description="Requested units")
    total_desi: Decimal = Field(..., description="Requested desi")
    total_produced: Decimal = Field(
        ..., description="Sum of row-level attributed produced quantity"
    )
    produced_desi: Decimal = Field(
        ..., description="Sum of unit_size x attributed produced quantity"
    )
    product_produced: int = Field(
        ..., description="Sum of produced_quantity over this category's products"
    )
    product_produced_desi: Decimal = Field(
        ..., description="Sum of unit_size x produced_quantity over this category's products"
    )
    request_count: int
    items_without_size: int
    quantity_completion_rate: int = Field(0, description="Produced / requested units (%)")
    desi_completion_rate: int = Field(0, description="Produced / requested desi (%)")


class MarketplaceSummary(FrozenSchema):
    """Monthly rollup for one marketplace."""

    marketplace_id: str
    marketplace_name: str
    total_quantity: int
    total_desi: Decimal
    request_count: int
    # Only filled when marketplace attribution is enabled
    total_produced: Optional[Decimal] = None
    produced_desi: Optional[Decimal] = None


class MissingDesiItem(FrozenSchema):
    """Request row without size data, listed for operator follow-up."""

    product_code: str
    product_name: Optional[str] = None
    category: str


class MonthAggregate(FrozenSchema):
    """Complete rollup of one production month."""

    total_requests: int = 0
    total_quantity: int = 0
    total_produced: int = Field(0, description="Sum over unique products, not rows")
    total_desi: Decimal = Decimal("0")
    total_produced_desi: Decimal = Decimal("0")
    items_without_size: int = 0
    missing_desi_items: List[MissingDesiItem] = Field(default_factory=list)
    category_summaries: List[CategorySummary] = Field(default_factory=list)
    marketplace_summaries: List[MarketplaceSummary] = Field(default_factory=list)
    products: List[ProductAggregate] = Field(default_factory=list)
    allocations: List[RowAllocation] = Field(default_factory=list)


class MonthStats(FrozenSchema):
    """Headline totals for one month (dashboard cards)."""

    month: str
    total_requests: int = 0
    total_quantity: int = 0
    total_produced: int = 0
    total_desi: Decimal = Decimal("0")
    total_produced_desi: Decimal = Decimal("0")
    items_without_size: int = 0
    quantity_completion_rate: int = 0
    desi_completion_rate: int = 0


class ProductionSummary(FrozenSchema):
    """Totals across several months."""

    month_count: int = 0
    total_requests: int = 0
    total_quantity: int = 0
    total_produced: int = 0
    total_desi: Decimal = Decimal("0")
    total_produced_desi: Decimal = Decimal("0")
    items_without_size: int = 0
    quantity_completion_rate: int = 0
    desi_completion_rate: int = 0
