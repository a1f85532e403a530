"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from discounts.domain.exceptions import ProductAlreadyExistsError, ProductNotFoundError
from discounts.domain.model.product import Product
from discounts.domain.repository.product_repository import ProductRepository
from discounts.domain.service.product_validation import (
    validate_amount,
    validate_country,
    validate_product_id,
    validate_product_name,
)

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        name: str,
        price: str | int | float | Decimal,
        country: str,
    ) -> Product:
        """Add a new product to the catalog, with no discounts."""
        product = Product(
            id=validate_product_id(product_id),
            name=validate_product_name(name),
            base_price=validate_amount(price),
            country=validate_country(country),
        )

        # save() never overwrites base fields, so an existing id has to be
        # reported here rather than silently ignored.
        try:
            self._product_repo.get_by_id(product.id)
        except ProductNotFoundError:
            pass
        else:
            raise ProductAlreadyExistsError(product_id)

        self._product_repo.save(product)
        logger.info("Added product %s (%s, %s)", product_id, name, product.country)
        return product
