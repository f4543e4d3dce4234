"""
Test data factories.

Uses factory pattern to generate consistent production request rows.
"""

from decimal import Decimal
from typing import Optional, Union
from uuid import uuid4

from models.production_request import ProductionRequest


class ProductionRequestFactory:
    """
    Factory for creating test ProductionRequest data.

    Usage:
        # Row dict with defaults
        row = ProductionRequestFactory.create()

        # Validated model with overrides
        row = ProductionRequestFactory.build(product_code="IW-1", requested_quantity=50)

        # Same product requested by several marketplaces
        rows = ProductionRequestFactory.build_for_marketplaces(
            [("mp-1", 50), ("mp-2", 100)], product_code="IW-1", produced_quantity=120
        )
    """

    _counter = 0

    @classmethod
    def _next_counter(cls) -> int:
        cls._counter += 1
        return cls._counter

    @classmethod
    def create(
        cls,
        id: Optional[str] = None,
        product_code: Optional[str] = None,
        product_name: Optional[str] = None,
        category: str = "MOBILYA",
        unit_size: Union[Decimal, str, None] = Decimal("2"),
        marketplace_id: str = "mp-1",
        marketplace_name: Optional[str] = None,
        requested_quantity: int = 10,
        produced_quantity: Optional[int] = None,
        production_month: str = "2026-02",
    ) -> dict:
        """
        Create a single request row dict.

        Args:
            id: Request id (auto-generated if not provided)
            product_code: IWASKU (auto-generated if not provided)
            product_name: Display name (derived from product_code if not provided)
            category: Manufacturing category
            unit_size: Desi per unit, None for missing master data
            marketplace_id: Marketplace identifier
            marketplace_name: Display name (derived from id if not provided)
            requested_quantity: Units requested
            produced_quantity: Units produced for the product
            production_month: YYYY-MM

        Returns:
            Row dict matching the storage shape
        """
        counter = cls._next_counter()
        code = product_code or f"IW-{counter:04d}"

        return {
            "id": id or str(uuid4()),
            "product_code": code,
            "product_name": product_name or f"Product {code}",
            "category": category,
            "unit_size": unit_size,
            "marketplace_id": marketplace_id,
            "marketplace_name": marketplace_name or marketplace_id.upper(),
            "requested_quantity": requested_quantity,
            "produced_quantity": produced_quantity,
            "production_month": production_month,
        }

    @classmethod
    def build(cls, **overrides) -> ProductionRequest:
        """Create a validated ProductionRequest model."""
        return ProductionRequest(**cls.create(**overrides))

    @classmethod
    def build_batch(cls, count: int, **overrides) -> list:
        """Create several rows with distinct product codes."""
        return [cls.build(**overrides) for _ in range(count)]

    @classmethod
    def build_for_marketplaces(cls, demand: list, **overrides) -> list:
        """
        Create one row per (marketplace_id, requested_quantity) pair.

        All rows share the product fields given in overrides.
        """
        return [
            cls.build(marketplace_id=marketplace_id, requested_quantity=quantity, **overrides)
            for marketplace_id, quantity in demand
        ]

    @classmethod
    def reset_counter(cls):
        """Reset the counter (call in test setup if needed)."""
        cls._counter = 0
