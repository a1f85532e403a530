"""Relational layout for products and their applied discounts.

The composite primary key on ``applied_discounts`` is the uniqueness
constraint that makes applying a discount idempotent; the explicit unique
index names it so the violation is easy to recognise in logs.

Decimal amounts are stored as TEXT so they round-trip exactly.
"""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone

SCHEMA = """
PRAGMA journal_mode = WAL;

CREATE TABLE IF NOT EXISTS products (
    id          TEXT PRIMARY KEY,
    name        TEXT NOT NULL,
    base_price  TEXT NOT NULL,
    country     TEXT NOT NULL,
    created_at  TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_products_country ON products (country);

CREATE TABLE IF NOT EXISTS applied_discounts (
    product_id  TEXT NOT NULL REFERENCES products (id) ON DELETE CASCADE,
    discount_id TEXT NOT NULL,
    percent     TEXT NOT NULL,
    applied_at  TEXT NOT NULL,
    PRIMARY KEY (product_id, discount_id)
);

CREATE UNIQUE INDEX IF NOT EXISTS unique_product_discount
    ON applied_discounts (product_id, discount_id);
"""

# (id, name, base_price, country)
DEMO_PRODUCTS = [
    ("prod-1", "Laptop", "1000.0", "SE"),
    ("prod-2", "Mouse", "50.0", "DE"),
    ("prod-3", "Keyboard", "150.0", "FR"),
]


def create_schema(conn: sqlite3.Connection) -> None:
    """Create tables and indexes if they do not exist yet."""
    conn.executescript(SCHEMA)


def seed_demo_products(conn: sqlite3.Connection) -> int:
    """Insert the demo catalog, skipping ids that already exist.

    Returns the number of products actually inserted.
    """
    created_at = datetime.now(timezone.utc).isoformat()
    inserted = 0
    for product_id, name, base_price, country in DEMO_PRODUCTS:
        cursor = conn.execute(
            """
            INSERT INTO products (id, name, base_price, country, created_at)
            VALUES (?, ?, ?, ?, ?)
            ON CONFLICT (id) DO NOTHING
            """,
            (product_id, name, base_price, country, created_at),
        )
        inserted += cursor.rowcount
    return inserted
