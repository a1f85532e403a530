import click
import pydantic

from discounts.infrastructure.cli.db_commands import db_init
from discounts.infrastructure.cli.product_commands import (
    product_add,
    product_discount,
    product_list,
)
from discounts.infrastructure.config import Settings
from discounts.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--db", "db_path", default=None, type=click.Path(dir_okay=False),
              help="SQLite database file (overrides DISCOUNTS_DB_PATH).")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log at DEBUG level.")
@click.pass_context
def cli(ctx: click.Context, db_path: str | None, verbose: bool) -> None:
    """Product Discounts: idempotent discounts and VAT-inclusive prices."""
    try:
        settings = Settings.from_env()
        if db_path is not None:
            settings = Settings.model_validate({**settings.model_dump(), "db_path": db_path})
    except pydantic.ValidationError as exc:
        raise click.UsageError(f"Invalid configuration: {exc}")

    configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


@cli.group()
def product() -> None:
    """Manage products and discounts."""


@cli.group()
def db() -> None:
    """Manage the database."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_discount)
product.add_command(product_list)
db.add_command(db_init)
