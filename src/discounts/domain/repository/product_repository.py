"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  Concrete implementations (SQLite, in-memory fakes) live
elsewhere.

``save`` is the authoritative idempotency boundary.  An implementation
MUST enforce uniqueness of (product id, discount id) in storage and report
a violation as DiscountAlreadyAppliedError, never as a generic error.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from discounts.domain.model.country import Country
from discounts.domain.model.product import Product
from discounts.domain.model.value_objects import ProductId


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: ProductId) -> Product:
        """Return the product with its full discount set.

        Raises ProductNotFoundError when the id is absent, and
        StorageError on I/O failure.
        """

    @abstractmethod
    def list_by_country(self, country: Country) -> Iterator[Product]:
        """Lazily yield every product sold in *country*.

        The sequence is finite and cannot be restarted once iteration has
        begun.
        """

    @abstractmethod
    def save(self, product: Product) -> None:
        """Insert the product if new, then insert its pending discounts.

        Base fields of an existing product are never modified.  Raises
        DiscountAlreadyAppliedError when a discount is already stored for
        this product, and StorageError on any other failure.  Both inserts
        commit together or not at all.
        """
