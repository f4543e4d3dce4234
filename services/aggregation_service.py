"""
Monthly aggregation of production requests.

Turns the flat list of request rows for a production month into product,
category and marketplace rollups plus month-wide totals.

Produced quantity is recorded per product, not per marketplace. When
several marketplaces requested the same product, the produced quantity is
split between their rows in proportion to what each requested:

    marketplace A requested 50, B requested 100, 120 were produced
    -> A gets 50/150 * 120 = 40, B gets 100/150 * 120 = 80

Month totals sum produced quantity over unique products so a product
requested by several marketplaces is counted once.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional, Sequence

import structlog

from config import Settings, get_settings
from exceptions import MonthsRequiredError, TooManyMonthsError
from models.aggregation import (
    CategorySummary,
    MarketplaceSummary,
    MissingDesiItem,
    MonthAggregate,
    MonthStats,
    ProductAggregate,
    ProductionSummary,
    RowAllocation,
)
from models.production_request import ProductionRequest
from utils.month_utils import parse_month

logger = structlog.get_logger(__name__)

ZERO = Decimal("0")


def completion_rate(produced, requested, cap: bool = False) -> int:
    """
    Produced over requested as a whole percentage.

    Args:
        produced: Produced units or desi
        requested: Requested units or desi
        cap: Clamp to 100 (progress bars)

    Returns:
        Rounded percentage, 0 when nothing was requested
    """
    requested = Decimal(requested)
    if requested <= 0:
        return 0

    rate = Decimal(produced) * 100 / requested
    if cap:
        rate = min(rate, Decimal("100"))
    return int(rate.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


# ===================
# GROUPING KEYS
# ===================

def product_key(row: ProductionRequest) -> str:
    return row.product_code


def category_key(row: ProductionRequest) -> str:
    return row.category


def marketplace_key(row: ProductionRequest) -> str:
    # Never the name: two marketplaces may share a display name
    return row.marketplace_id


# ===================
# PRODUCT GROUPING
# ===================

def first_by_original_order(rows: Sequence[ProductionRequest]) -> ProductionRequest:
    """
    Pick the row whose produced quantity, size and category stand for the product.

    First row (input order) with a produced quantity; the first row when none has one.
    """
    return next((r for r in rows if r.produced_quantity is not None), rows[0])


def build_product(product_code: str, rows: Sequence[ProductionRequest]) -> ProductAggregate:
    """Collapse all rows of one product into a ProductAggregate."""
    representative = first_by_original_order(rows)
    return ProductAggregate(
        product_code=product_code,
        category=representative.category,
        unit_size=representative.unit_size,
        total_requested_quantity=sum(
            r.requested_quantity for r in rows if r.requested_quantity > 0
        ),
        produced_quantity=representative.produced_quantity or 0,
        requests=list(rows),
    )


def group_products(rows: Iterable[ProductionRequest]) -> Dict[str, ProductAggregate]:
    """Group rows by product code, keeping first-seen order."""
    grouped: Dict[str, List[ProductionRequest]] = {}
    for row in rows:
        grouped.setdefault(product_key(row), []).append(row)

    return {code: build_product(code, group) for code, group in grouped.items()}


# ===================
# PROPORTIONAL DISTRIBUTION
# ===================

def allocate_row(row: ProductionRequest, product: ProductAggregate) -> RowAllocation:
    """
    Attribute a share of the product's produced quantity to one row.

    Rows with a non-positive requested quantity get a zero share.
    """
    total = product.total_requested_quantity
    if row.requested_quantity <= 0 or total <= 0:
        share = ZERO
        attributed = ZERO
    else:
        share = Decimal(row.requested_quantity) / Decimal(total)
        # Multiply first so exact splits stay exact (120 * 50 / 150 == 40)
        attributed = Decimal(product.produced_quantity) * row.requested_quantity / total

    return RowAllocation(
        request_id=row.id,
        product_code=row.product_code,
        share=share,
        attributed_produced=attributed,
    )


def distribute_production(
    rows: Sequence[ProductionRequest],
    products: Dict[str, ProductAggregate],
) -> List[RowAllocation]:
    """One allocation per row, in input order."""
    return [allocate_row(row, products[product_key(row)]) for row in rows]


# ===================
# ROLLUPS
# ===================

@dataclass
class _Totals:
    """Running sums for one category or marketplace."""

    name: str = ""
    quantity: int = 0
    desi: Decimal = ZERO
    produced: Decimal = ZERO
    produced_desi: Decimal = ZERO
    count: int = 0
    without_size: int = 0

    def add(self, row: ProductionRequest, attributed: Decimal) -> None:
        self.quantity += row.requested_quantity
        self.desi += row.size * row.requested_quantity
        self.produced += attributed
        self.produced_desi += row.size * attributed
        self.count += 1
        if not row.has_size:
            self.without_size += 1


def summarize_categories(
    rows: Sequence[ProductionRequest],
    products: Dict[str, ProductAggregate],
    allocations: Sequence[RowAllocation],
) -> List[CategorySummary]:
    """Category rollup with both distributed and product-level produced totals."""
    totals: Dict[str, _Totals] = {}
    for row, allocation in zip(rows, allocations):
        totals.setdefault(category_key(row), _Totals()).add(row, allocation.attributed_produced)

    product_produced: Dict[str, int] = {}
    product_produced_desi: Dict[str, Decimal] = {}
    for product in products.values():
        product_produced[product.category] = (
            product_produced.get(product.category, 0) + product.produced_quantity
        )
        product_produced_desi[product.category] = (
            product_produced_desi.get(product.category, ZERO) + product.produced_desi
        )

    return [
        CategorySummary(
            category=category,
            total_quantity=t.quantity,
            total_desi=t.desi,
            total_produced=t.produced,
            produced_desi=t.produced_desi,
            product_produced=product_produced.get(category, 0),
            product_produced_desi=product_produced_desi.get(category, ZERO),
            request_count=t.count,
            items_without_size=t.without_size,
            quantity_completion_rate=completion_rate(t.produced, t.quantity),
            desi_completion_rate=completion_rate(t.produced_desi, t.desi),
        )
        for category, t in totals.items()
    ]


def summarize_marketplaces(
    rows: Sequence[ProductionRequest],
    allocations: Sequence[RowAllocation],
    attribute_produced: bool = False,
) -> List[MarketplaceSummary]:
    """
    Marketplace rollup of requested quantity and desi.

    Produced amounts are left empty unless attribute_produced is set, in
    which case each marketplace gets the sum of its rows' attributed shares.
    """
    totals: Dict[str, _Totals] = {}
    for row, allocation in zip(rows, allocations):
        key = marketplace_key(row)
        if key not in totals:
            totals[key] = _Totals(name=row.marketplace_name)
        totals[key].add(row, allocation.attributed_produced)

    return [
        MarketplaceSummary(
            marketplace_id=marketplace_id,
            marketplace_name=t.name,
            total_quantity=t.quantity,
            total_desi=t.desi,
            request_count=t.count,
            total_produced=t.produced if attribute_produced else None,
            produced_desi=t.produced_desi if attribute_produced else None,
        )
        for marketplace_id, t in totals.items()
    ]


def aggregate(
    rows: Iterable[ProductionRequest],
    attribute_produced: bool = False,
) -> MonthAggregate:
    """
    Aggregate all request rows of one production month.

    Args:
        rows: Request rows already filtered to a single production month
        attribute_produced: Also distribute produced quantity to marketplaces

    Returns:
        MonthAggregate with totals, summaries, products and row allocations.
        An empty input gives an all-zero aggregate.
    """
    rows = list(rows)
    products = group_products(rows)
    allocations = distribute_production(rows, products)

    missing = [r for r in rows if not r.has_size]

    result = MonthAggregate(
        total_requests=len(rows),
        total_quantity=sum(r.requested_quantity for r in rows),
        total_produced=sum(p.produced_quantity for p in products.values()),
        total_desi=sum((r.size * r.requested_quantity for r in rows), ZERO),
        total_produced_desi=sum((p.produced_desi for p in products.values()), ZERO),
        items_without_size=len(missing),
        missing_desi_items=[
            MissingDesiItem(
                product_code=r.product_code,
                product_name=r.product_name,
                category=r.category,
            )
            for r in missing
        ],
        category_summaries=summarize_categories(rows, products, allocations),
        marketplace_summaries=summarize_marketplaces(rows, allocations, attribute_produced),
        products=list(products.values()),
        allocations=allocations,
    )

    logger.debug(
        "month_aggregated",
        rows=result.total_requests,
        products=len(products),
        categories=len(result.category_summaries),
        marketplaces=len(result.marketplace_summaries),
        items_without_size=result.items_without_size,
    )
    return result


# ===================
# MULTI-MONTH STATS
# ===================

def month_stats(month: str, month_aggregate: MonthAggregate) -> MonthStats:
    """Headline numbers of an aggregated month."""
    return MonthStats(
        month=month,
        total_requests=month_aggregate.total_requests,
        total_quantity=month_aggregate.total_quantity,
        total_produced=month_aggregate.total_produced,
        total_desi=month_aggregate.total_desi,
        total_produced_desi=month_aggregate.total_produced_desi,
        items_without_size=month_aggregate.items_without_size,
        quantity_completion_rate=completion_rate(
            month_aggregate.total_produced, month_aggregate.total_quantity
        ),
        desi_completion_rate=completion_rate(
            month_aggregate.total_produced_desi, month_aggregate.total_desi
        ),
    )


def get_month_stats(
    rows: Iterable[ProductionRequest],
    months: Sequence[str],
    max_months: int = 24,
) -> List[MonthStats]:
    """
    Stats for several production months from one batch of rows.

    Every requested month is present in the result, zeroed when it has no
    rows. Rows belonging to other months are ignored.

    Args:
        rows: Request rows for (at least) the requested months
        months: Month tokens, duplicates collapsed in first-seen order
        max_months: Upper bound on distinct months

    Raises:
        MonthsRequiredError: No months given
        InvalidMonthError: A month token is malformed
        TooManyMonthsError: More than max_months distinct months
    """
    if not months:
        raise MonthsRequiredError()

    unique_months: List[str] = []
    for month in months:
        parse_month(month)
        if month not in unique_months:
            unique_months.append(month)

    if len(unique_months) > max_months:
        raise TooManyMonthsError(len(unique_months), max_months)

    rows_by_month: Dict[str, List[ProductionRequest]] = {m: [] for m in unique_months}
    skipped = 0
    for row in rows:
        bucket = rows_by_month.get(row.production_month)
        if bucket is None:
            skipped += 1
            continue
        bucket.append(row)

    stats = [month_stats(month, aggregate(rows_by_month[month])) for month in unique_months]

    logger.info(
        "month_stats_calculated",
        months=len(unique_months),
        rows=sum(s.total_requests for s in stats),
        skipped_rows=skipped,
    )
    return stats


def summarize_months(stats: Iterable[MonthStats]) -> ProductionSummary:
    """Add up month stats and compute overall completion rates."""
    stats = list(stats)

    total_quantity = sum(s.total_quantity for s in stats)
    total_produced = sum(s.total_produced for s in stats)
    total_desi = sum((s.total_desi for s in stats), ZERO)
    total_produced_desi = sum((s.total_produced_desi for s in stats), ZERO)

    return ProductionSummary(
        month_count=len(stats),
        total_requests=sum(s.total_requests for s in stats),
        total_quantity=total_quantity,
        total_produced=total_produced,
        total_desi=total_desi,
        total_produced_desi=total_produced_desi,
        items_without_size=sum(s.items_without_size for s in stats),
        quantity_completion_rate=completion_rate(total_produced, total_quantity),
        desi_completion_rate=completion_rate(total_produced_desi, total_desi),
    )


class AggregationService:
    """Production request aggregation bound to configured limits."""

    def __init__(self, app_settings: Optional[Settings] = None):
        app_settings = app_settings or get_settings()
        self.attribute_marketplace_production = app_settings.attribute_marketplace_production
        self.max_stats_months = app_settings.max_stats_months

    def aggregate_month(self, rows: Iterable[ProductionRequest]) -> MonthAggregate:
        """Full rollup of one month's rows."""
        return aggregate(rows, attribute_produced=self.attribute_marketplace_production)

    def get_month_stats(
        self,
        rows: Iterable[ProductionRequest],
        months: Sequence[str],
    ) -> List[MonthStats]:
        """Headline stats for each requested month."""
        return get_month_stats(rows, months, max_months=self.max_stats_months)

    def summarize(self, stats: Iterable[MonthStats]) -> ProductionSummary:
        return summarize_months(stats)


# Singleton instance
_aggregation_service: Optional[AggregationService] = None


def get_aggregation_service() -> AggregationService:
    """Get or create AggregationService singleton instance."""
    global _aggregation_service
    if _aggregation_service is None:
        _aggregation_service = AggregationService()
    return _aggregation_service
