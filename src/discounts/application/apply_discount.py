"""Application service: Apply Discount use case.

Pipeline, stopping at the first failure:

1. validate the ids and the percent       -> ValidationError
2. load the product                       -> ProductNotFoundError / StorageError
3. in-memory duplicate check              -> DiscountAlreadyAppliedError
4. save; the store's uniqueness
   constraint is the final arbiter        -> DiscountAlreadyAppliedError / StorageError

Save is attempted exactly once.  A conflict is a final answer, not a
transient fault, so nothing here retries.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from discounts.domain.exceptions import DiscountAlreadyAppliedError
from discounts.domain.model.product import Product
from discounts.domain.repository.product_repository import ProductRepository
from discounts.domain.service import product_operations
from discounts.domain.service.product_validation import (
    validate_discount,
    validate_discount_id,
    validate_product_id,
)

logger = logging.getLogger(__name__)


class ApplyDiscountHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        discount_id: str,
        percent: str | int | float | Decimal,
    ) -> Product:
        """Apply a discount to a product and return the updated product."""
        pid = validate_product_id(product_id)
        discount = validate_discount(validate_discount_id(discount_id), percent)

        product = self._product_repo.get_by_id(pid)

        try:
            updated = product_operations.apply_discount(product, discount)
            self._product_repo.save(updated)
        except DiscountAlreadyAppliedError:
            logger.warning(
                "Discount %s already applied to product %s", discount_id, product_id
            )
            raise

        logger.info(
            "Applied discount %s (%s) to product %s",
            discount_id,
            discount.percent,
            product_id,
        )
        return updated
