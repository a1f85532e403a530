"""Data Transfer Objects, plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Decimal amounts are
rendered as strings so no precision is lost on the way out.
"""

from __future__ import annotations

from dataclasses import dataclass

from discounts.domain.model.product import Product
from discounts.domain.service.product_operations import (
    calculate_final_price,
    get_discounts,
)


@dataclass(frozen=True)
class DiscountDTO:
    discount_id: str
    percent: str


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as displayed to the user, with its final price."""

    id: str
    name: str
    base_price: str
    country: str
    discounts: list[DiscountDTO]
    final_price: str


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id.value,
        name=product.name.value,
        base_price=str(product.base_price),
        country=product.country.code,
        discounts=[
            DiscountDTO(discount_id=d.discount_id.value, percent=str(d.percent.value))
            for d in get_discounts(product)
        ],
        final_price=str(calculate_final_price(product)),
    )
