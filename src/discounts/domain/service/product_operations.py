"""Domain service: business rules over the Product aggregate.

These are pure functions: they never touch storage and never mutate their
arguments.

``apply_discount`` is only the optimistic half of the duplicate check.  It
sees the snapshot the caller loaded, so two requests that loaded the same
row concurrently can both pass it.  The repository's uniqueness constraint
decides between them at commit time.
"""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

from discounts.domain.exceptions import DiscountAlreadyAppliedError
from discounts.domain.model.product import AppliedDiscount, Product
from discounts.domain.model.value_objects import DiscountId, Money

_ONE = Decimal("1")
_HUNDRED = Decimal("100")


def has_discount(product: Product, discount_id: DiscountId) -> bool:
    return any(d.discount_id == discount_id for d in product.discounts)


def apply_discount(product: Product, discount: AppliedDiscount) -> Product:
    """Return a copy of *product* with *discount* added.

    Raises DiscountAlreadyAppliedError if the snapshot already holds a
    discount with the same id.
    """
    if has_discount(product, discount.discount_id):
        raise DiscountAlreadyAppliedError(
            product.id.value, discount.discount_id.value
        )
    return replace(product, discounts=product.discounts | {discount})


def total_discount_percent(product: Product) -> Decimal:
    """Sum of all applied percents.  Stacking is additive, not compounding."""
    return sum((d.percent.value for d in product.discounts), Decimal("0"))


def calculate_final_price(product: Product) -> Money:
    """Base price after discounts, with the country's VAT added on top.

    final = base * (1 - total_discount / 100) * (1 + vat / 100)

    The total is not clamped: discounts adding up to more than 100 % give a
    zero or negative price.
    """
    discount_factor = _ONE - total_discount_percent(product) / _HUNDRED
    vat_factor = _ONE + product.country.vat_percent / _HUNDRED
    return product.base_price.scale(discount_factor).scale(vat_factor)


def get_discounts(product: Product) -> list[AppliedDiscount]:
    """Applied discounts ordered by id, for stable presentation."""
    return sorted(product.discounts, key=lambda d: d.discount_id.value)


def pending_discounts(product: Product) -> list[AppliedDiscount]:
    """Discounts added in memory that the store has not seen yet."""
    return [d for d in get_discounts(product) if not d.is_persisted]
