"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from discounts.application.dto import product_to_dto
from discounts.domain.exceptions import DomainException
from discounts.infrastructure.bootstrap import (
    add_product_handler,
    apply_discount_handler,
    get_products_by_country_handler,
)
from discounts.infrastructure.cli.errors import to_click_exception


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Base price before VAT (e.g. 1000.00).")
@click.option("--country", required=True, help="Country code: SE, DE or FR.")
@click.pass_obj
def product_add(settings, product_id: str, name: str, price: str, country: str) -> None:
    """Add a new product to the catalog."""
    try:
        handler = add_product_handler(settings)
        product = handler.handle(
            product_id=product_id, name=name, price=price, country=country
        )
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(
        f"Product {product.id} '{product.name}' added at {product.base_price} "
        f"({product.country})"
    )


@click.command("list")
@click.option("--country", required=True, help="Country code: SE, DE or FR.")
@click.pass_obj
def product_list(settings, country: str) -> None:
    """List the products sold in a country, with final prices."""
    try:
        handler = get_products_by_country_handler(settings)
        products = list(handler.handle(country))
    except DomainException as exc:
        raise to_click_exception(exc)

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<10} {'Name':<20} {'Base':>10} {'Discount':>10} {'Final':>10}")
    click.echo("-" * 64)
    for p in products:
        discount = ",".join(f"{d.percent}%" for d in p.discounts) or "-"
        click.echo(
            f"{p.id:<10} {p.name:<20} {p.base_price:>10} {discount:>10} {p.final_price:>10}"
        )


@click.command("discount")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--discount-id", required=True, help="Discount ID (applied at most once).")
@click.option("--percent", required=True, help="Discount percentage, 0 to 100.")
@click.pass_obj
def product_discount(settings, product_id: str, discount_id: str, percent: str) -> None:
    """Apply a discount to a product."""
    try:
        handler = apply_discount_handler(settings)
        product = handler.handle(
            product_id=product_id, discount_id=discount_id, percent=percent
        )
    except DomainException as exc:
        raise to_click_exception(exc)

    dto = product_to_dto(product)
    click.echo(f"Discount {discount_id} applied to product {dto.id}.")
    click.echo(f"Final price: {dto.final_price}")
