"""CLI commands for database maintenance."""

from __future__ import annotations

import click

from discounts.domain.exceptions import DomainException
from discounts.infrastructure.bootstrap import product_repository
from discounts.infrastructure.cli.errors import to_click_exception


@click.command("init")
@click.option("--seed", is_flag=True, default=False, help="Insert the demo products.")
@click.pass_obj
def db_init(settings, seed: bool) -> None:
    """Create the database schema if it does not exist."""
    try:
        repo = product_repository(settings)
        inserted = repo.seed_demo_products() if seed else 0
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Database ready at {settings.db_path}")
    if seed:
        click.echo(f"Seeded {inserted} demo product(s).")
