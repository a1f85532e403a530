"""Application service: Get Products By Country use case (query)."""

from __future__ import annotations

from collections.abc import Iterator

from discounts.application.dto import ProductDTO, product_to_dto
from discounts.domain.repository.product_repository import ProductRepository
from discounts.domain.service.product_validation import validate_country


class GetProductsByCountryHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, country_code: str) -> Iterator[ProductDTO]:
        """Stream the products sold in a country, with final prices.

        The country is validated before this returns, so a bad code fails
        without touching storage.  Products are loaded lazily as the
        result is iterated.
        """
        country = validate_country(country_code)
        return (
            product_to_dto(product)
            for product in self._product_repo.list_by_country(country)
        )
