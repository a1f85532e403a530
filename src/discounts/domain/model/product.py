"""Product aggregate.

A product owns the set of discounts applied to it.  Discounts have no
lifecycle of their own: they are added by successive saves and never
removed or changed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from discounts.domain.model.country import Country
from discounts.domain.model.value_objects import (
    DiscountId,
    Money,
    Percent,
    ProductId,
    ProductName,
)


@dataclass(frozen=True)
class AppliedDiscount:
    """A discount applied to a product.

    Identity is the discount id: two instances with the same id are equal
    whatever their percent, so a product's discount set can never hold the
    same discount twice.

    ``applied_at`` is filled in by the repository.  A discount whose
    ``applied_at`` is None exists only in memory and will be inserted by
    the next ``save``.
    """

    discount_id: DiscountId
    percent: Percent = field(compare=False)
    applied_at: datetime | None = field(default=None, compare=False)

    @property
    def is_persisted(self) -> bool:
        return self.applied_at is not None


@dataclass(frozen=True)
class Product:
    """Aggregate root for a catalog product.

    Frozen: every domain operation returns a new Product, so a loaded
    snapshot can be shared between threads without locking.  Identity is
    the ProductId; the lifetime belongs to the persistent store.
    """

    id: ProductId
    name: ProductName
    base_price: Money
    country: Country
    discounts: frozenset[AppliedDiscount] = frozenset()
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        # Accept any iterable so callers and the repository can pass lists.
        if not isinstance(self.discounts, frozenset):
            object.__setattr__(self, "discounts", frozenset(self.discounts))
