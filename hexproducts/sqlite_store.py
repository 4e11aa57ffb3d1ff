"""SQLite persistence for products."""

from __future__ import annotations

import sqlite3

from hexproducts.product import Product


class ProductNotFound(LookupError):
    """Raised when no product has the requested identifier."""


class ProductDb:
    """Reads and writes products in a ``products`` table."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def get(self, product_id: str) -> Product:
        """Load the product with the given identifier."""
        row = self._connection.execute(
            "select id, name, price, status from products where id=?", (product_id,)
        ).fetchone()
        if row is None:
            raise ProductNotFound(f"product {product_id} not found")
        found_id, name, price, status = row
        return Product(id=found_id, name=name, price=float(price), status=status)

    def save(self, product):
        """Insert the product, or update it when it is already stored."""
        exists = self._connection.execute(
            "select id from products where id=?", (product.id,)
        ).fetchone()
        with self._connection:
            if exists is None:
                self._connection.execute(
                    "insert into products(id, name, price, status) values(?,?,?,?)",
                    (product.id, product.name, product.price, product.status),
                )
            else:
                self._connection.execute(
                    "update products set name = ?, price = ?, status = ? where id = ?",
                    (product.name, product.price, product.status, product.id),
                )
        return product