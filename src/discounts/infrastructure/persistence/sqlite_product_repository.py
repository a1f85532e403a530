"""SQLite-backed implementation of ProductRepository.

Every public method opens its own connection and runs inside a single
transaction, so the repository can be shared by any number of threads
without external locking.  Writers start with ``BEGIN IMMEDIATE``:
SQLite then serialises them, and of two racing saves of the same
discount exactly one commits while the other hits the primary key on
``applied_discounts``.
"""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from pathlib import Path

from discounts.domain.exceptions import (
    DiscountAlreadyAppliedError,
    ProductNotFoundError,
    StorageError,
)
from discounts.domain.model.country import Country
from discounts.domain.model.product import AppliedDiscount, Product
from discounts.domain.model.value_objects import (
    DiscountId,
    Money,
    Percent,
    ProductId,
    ProductName,
)
from discounts.domain.repository.product_repository import ProductRepository
from discounts.domain.service.product_operations import pending_discounts
from discounts.domain.service.product_validation import MAX_AMOUNT
from discounts.infrastructure.persistence.schema import create_schema, seed_demo_products

logger = logging.getLogger(__name__)

# Error names SQLite reports for the (product_id, discount_id) key.
_DUPLICATE_KEY_ERRORS = frozenset(
    {"SQLITE_CONSTRAINT_PRIMARYKEY", "SQLITE_CONSTRAINT_UNIQUE"}
)

# Anything that can go wrong turning a stored row back into a Product.
_ROW_ERRORS = (sqlite3.Error, ValueError, ArithmeticError)


class RowFailurePolicy(Enum):
    """What ``list_by_country`` does with a row it cannot reconstruct."""

    SKIP = "skip"
    RAISE = "raise"


class SqliteProductRepository(ProductRepository):

    def __init__(
        self,
        db_path: Path,
        timeout: float = 30.0,
        row_failure_policy: RowFailurePolicy = RowFailurePolicy.SKIP,
    ) -> None:
        self._db_path = db_path
        self._timeout = timeout
        self._row_failure_policy = row_failure_policy
        self._ensure_schema()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: ProductId) -> Product:
        with self._read() as conn:
            try:
                row = conn.execute(
                    "SELECT id, name, base_price, country, created_at "
                    "FROM products WHERE id = ?",
                    (product_id.value,),
                ).fetchone()
                if row is None:
                    raise ProductNotFoundError(product_id.value)
                return self._load_product(conn, row)
            except _ROW_ERRORS as exc:
                logger.exception("Failed to load product %s", product_id)
                raise StorageError(f"Failed to load product {product_id}", exc) from exc

    def list_by_country(self, country: Country) -> Iterator[Product]:
        with self._read() as conn:
            try:
                rows = conn.execute(
                    "SELECT id, name, base_price, country, created_at "
                    "FROM products WHERE country = ? ORDER BY id",
                    (country.code,),
                ).fetchall()
            except sqlite3.Error as exc:
                logger.exception("Failed to list products for %s", country.code)
                raise StorageError(
                    f"Failed to list products for {country.code}", exc
                ) from exc

            for row in rows:
                try:
                    product = self._load_product(conn, row)
                except _ROW_ERRORS as exc:
                    if self._row_failure_policy is RowFailurePolicy.RAISE:
                        raise StorageError(
                            f"Failed to load product {row['id']}", exc
                        ) from exc
                    logger.warning("Skipping unreadable product %s: %s", row["id"], exc)
                    continue
                yield product

    def save(self, product: Product) -> None:
        now = datetime.now(timezone.utc)
        pending = pending_discounts(product)
        try:
            with self._write() as conn:
                conn.execute(
                    """
                    INSERT INTO products (id, name, base_price, country, created_at)
                    VALUES (?, ?, ?, ?, ?)
                    ON CONFLICT (id) DO NOTHING
                    """,
                    (
                        product.id.value,
                        product.name.value,
                        str(product.base_price.amount),
                        product.country.code,
                        (product.created_at or now).isoformat(),
                    ),
                )
                for discount in pending:
                    self._insert_discount(conn, product, discount, now)
        except sqlite3.Error as exc:
            logger.exception("Failed to save product %s", product.id)
            raise StorageError(f"Failed to save product {product.id}", exc) from exc

        logger.debug(
            "Saved product %s with %d new discount(s)", product.id, len(pending)
        )

    # --- Extras ---------------------------------------------------------------

    def seed_demo_products(self) -> int:
        """Insert the demo catalog; returns how many products were new."""
        try:
            with self._write() as conn:
                return seed_demo_products(conn)
        except sqlite3.Error as exc:
            raise StorageError("Failed to seed demo products", exc) from exc

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _insert_discount(
        conn: sqlite3.Connection,
        product: Product,
        discount: AppliedDiscount,
        applied_at: datetime,
    ) -> None:
        try:
            conn.execute(
                """
                INSERT INTO applied_discounts (product_id, discount_id, percent, applied_at)
                VALUES (?, ?, ?, ?)
                """,
                (
                    product.id.value,
                    discount.discount_id.value,
                    str(discount.percent.value),
                    applied_at.isoformat(),
                ),
            )
        except sqlite3.IntegrityError as exc:
            if exc.sqlite_errorname in _DUPLICATE_KEY_ERRORS:
                raise DiscountAlreadyAppliedError(
                    product.id.value, discount.discount_id.value
                ) from exc
            raise

    @staticmethod
    def _load_product(conn: sqlite3.Connection, row: sqlite3.Row) -> Product:
        country = Country.from_code(row["country"])
        if country is None:
            raise ValueError(f"Invalid country in database: {row['country']!r}")
        base_price = Decimal(row["base_price"])
        if not (0 < base_price <= MAX_AMOUNT):
            raise ValueError(f"Base price out of range in database: {row['base_price']!r}")

        discounts = [
            AppliedDiscount(
                discount_id=DiscountId(d["discount_id"]),
                percent=Percent(Decimal(d["percent"])),
                applied_at=datetime.fromisoformat(d["applied_at"]),
            )
            for d in conn.execute(
                "SELECT discount_id, percent, applied_at "
                "FROM applied_discounts WHERE product_id = ?",
                (row["id"],),
            )
        ]

        return Product(
            id=ProductId(row["id"]),
            name=ProductName(row["name"]),
            base_price=Money(base_price),
            country=country,
            discounts=discounts,
            created_at=datetime.fromisoformat(row["created_at"]),
        )

    # --- Connection helpers ---------------------------------------------------

    def _connect(self) -> sqlite3.Connection:
        conn = None
        try:
            # Autocommit mode: transactions are opened explicitly below.
            conn = sqlite3.connect(self._db_path, timeout=self._timeout, isolation_level=None)
            conn.row_factory = sqlite3.Row
            conn.execute("PRAGMA foreign_keys = ON")
        except sqlite3.Error as exc:
            if conn is not None:
                conn.close()
            raise StorageError(f"Cannot open database {self._db_path}", exc) from exc
        return conn

    @contextmanager
    def _read(self) -> Iterator[sqlite3.Connection]:
        """One read transaction, so a product and its discounts are consistent."""
        conn = self._connect()
        try:
            try:
                conn.execute("BEGIN")
            except sqlite3.Error as exc:
                raise StorageError("Cannot start read transaction", exc) from exc
            yield conn
        finally:
            if conn.in_transaction:
                conn.execute("ROLLBACK")
            conn.close()

    @contextmanager
    def _write(self) -> Iterator[sqlite3.Connection]:
        """All-or-nothing write transaction holding SQLite's write lock."""
        conn = self._connect()
        try:
            conn.execute("BEGIN IMMEDIATE")
            yield conn
            conn.execute("COMMIT")
        except BaseException:
            if conn.in_transaction:
                conn.execute("ROLLBACK")
            raise
        finally:
            conn.close()

    def _ensure_schema(self) -> None:
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = self._connect()
        try:
            create_schema(conn)
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot create schema in {self._db_path}", exc) from exc
        finally:
            conn.close()
