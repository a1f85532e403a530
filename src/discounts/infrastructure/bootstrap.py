"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from discounts.application.add_product import AddProductHandler
from discounts.application.apply_discount import ApplyDiscountHandler
from discounts.application.get_products_by_country import GetProductsByCountryHandler
from discounts.infrastructure.config import Settings
from discounts.infrastructure.persistence.sqlite_product_repository import (
    SqliteProductRepository,
)


def product_repository(settings: Settings) -> SqliteProductRepository:
    return SqliteProductRepository(
        settings.db_path,
        timeout=settings.db_timeout,
        row_failure_policy=settings.row_failure_policy,
    )


def apply_discount_handler(settings: Settings) -> ApplyDiscountHandler:
    return ApplyDiscountHandler(product_repository(settings))


def get_products_by_country_handler(settings: Settings) -> GetProductsByCountryHandler:
    return GetProductsByCountryHandler(product_repository(settings))


def add_product_handler(settings: Settings) -> AddProductHandler:
    return AddProductHandler(product_repository(settings))
