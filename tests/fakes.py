"""In-memory fake repository for testing.

Implements the same abstract interface as the SQLite repository but keeps
everything in dicts.  Like the real store, ``save`` enforces uniqueness of
(product id, discount id) atomically, so use-case tests can exercise the
storage-level conflict without a database.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from dataclasses import replace
from datetime import datetime, timezone

from discounts.domain.exceptions import DiscountAlreadyAppliedError, ProductNotFoundError
from discounts.domain.model.country import Country
from discounts.domain.model.product import AppliedDiscount, Product
from discounts.domain.model.value_objects import ProductId
from discounts.domain.repository.product_repository import ProductRepository
from discounts.domain.service.product_operations import pending_discounts


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._rows: dict[str, Product] = {}
        self._discounts: dict[tuple[str, str], AppliedDiscount] = {}
        self._lock = threading.Lock()
        self.save_calls = 0
        self.reads = 0
        for p in products or []:
            self.save(p)
        # Seeding does not count.
        self.save_calls = 0

    def get_by_id(self, product_id: ProductId) -> Product:
        with self._lock:
            self.reads += 1
            row = self._rows.get(product_id.value)
            if row is None:
                raise ProductNotFoundError(product_id.value)
            return self._assemble(row)

    def list_by_country(self, country: Country) -> Iterator[Product]:
        with self._lock:
            self.reads += 1
            rows = [r for r in self._rows.values() if r.country is country]
            products = [self._assemble(r) for r in sorted(rows, key=lambda r: r.id.value)]
        yield from products

    def save(self, product: Product) -> None:
        with self._lock:
            self.save_calls += 1
            pending = pending_discounts(product)
            for d in pending:
                if (product.id.value, d.discount_id.value) in self._discounts:
                    raise DiscountAlreadyAppliedError(
                        product.id.value, d.discount_id.value
                    )
            if product.id.value not in self._rows:
                self._rows[product.id.value] = replace(product, discounts=frozenset())
            now = datetime.now(timezone.utc)
            for d in pending:
                self._discounts[(product.id.value, d.discount_id.value)] = replace(
                    d, applied_at=now
                )

    def _assemble(self, row: Product) -> Product:
        discounts = [d for (pid, _), d in self._discounts.items() if pid == row.id.value]
        return replace(row, discounts=frozenset(discounts))


class StaleSnapshotRepository(FakeProductRepository):
    """Serves the snapshot captured by ``freeze`` instead of current state.

    Simulates a request that loaded the product before a concurrent request
    committed the same discount.
    """

    def __init__(self, products: list[Product] | None = None) -> None:
        super().__init__(products)
        self._frozen: dict[str, Product] = {}

    def freeze(self, product_id: str) -> None:
        self._frozen[product_id] = super().get_by_id(ProductId(product_id))

    def get_by_id(self, product_id: ProductId) -> Product:
        if product_id.value in self._frozen:
            return self._frozen[product_id.value]
        return super().get_by_id(product_id)


class UntouchableRepository(ProductRepository):
    """Fails the test if any storage method is called."""

    def get_by_id(self, product_id: ProductId) -> Product:
        raise AssertionError("storage must not be accessed")

    def list_by_country(self, country: Country) -> Iterator[Product]:
        raise AssertionError("storage must not be accessed")

    def save(self, product: Product) -> None:
        raise AssertionError("storage must not be accessed")
