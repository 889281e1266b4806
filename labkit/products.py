"""Plain SQL access to a ``products`` table."""

from __future__ import annotations

import argparse
import sqlite3
import uuid
from dataclasses import dataclass, field

DB_PATH = "goexpert.db"

_CREATE_TABLE = (
    "CREATE TABLE IF NOT EXISTS products "
    "(id TEXT PRIMARY KEY, name TEXT NOT NULL, price REAL NOT NULL)"
)


class ProductNotFound(LookupError):
    """Raised when no product has the requested id."""


@dataclass
class Product:
    """A product row."""

    name: str
    price: float
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


def new_product(name: str, price: float) -> Product:
    """Build a product with a fresh random id."""
    return Product(name=name, price=price)


def create_table(conn: sqlite3.Connection) -> None:
    """Create the ``products`` table when it does not exist yet."""
    with conn:
        conn.execute(_CREATE_TABLE)


def insert_product(conn: sqlite3.Connection, product: Product) -> None:
    """Insert ``product`` as a new row."""
    with conn:
        conn.execute(
            "INSERT INTO products (id, name, price) VALUES (?, ?, ?)",
            (product.id, product.name, product.price),
        )


def update_product(conn: sqlite3.Connection, product: Product) -> None:
    """Write the name and price of ``product`` to its row."""
    with conn:
        conn.execute(
            "UPDATE products SET name = ?, price = ? WHERE id = ?",
            (product.name, product.price, product.id),
        )


def select_one_product(conn: sqlite3.Connection, product_id: str) -> Product:
    """Return the product with ``product_id``; raise ProductNotFound if absent."""
    row = conn.execute(
        "SELECT id, name, price FROM products WHERE id = ?", (product_id,)
    ).fetchone()
    if row is None:
        raise ProductNotFound(product_id)
    found_id, name, price = row
    return Product(id=found_id, name=name, price=price)


def select_all_products(conn: sqlite3.Connection) -> list[Product]:
    """Return every product in the table."""
    rows = conn.execute("SELECT id, name, price FROM products")
    return [Product(id=row_id, name=name, price=price) for row_id, name, price in rows]


def delete_product(conn: sqlite3.Connection, product_id: str) -> None:
    """Remove the product with ``product_id``."""
    with conn:
        conn.execute("DELETE FROM products WHERE id = ?", (product_id,))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Exercise the products table.")
    parser.add_argument("--database", default=DB_PATH)
    args = parser.parse_args(argv)

    conn = sqlite3.connect(args.database)
    try:
        create_table(conn)
        product = new_product("Notebook", 1889.90)
        insert_product(conn, product)
        product.price = 100.0
        update_product(conn, product)
        for item in select_all_products(conn):
            print(f"Product: {item.name}, possui o preço de {item.price:.2f}")
        delete_product(conn, product.id)
    finally:
        conn.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())