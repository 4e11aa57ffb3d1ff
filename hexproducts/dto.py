"""Transfer object for products received from outside the application."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from hexproducts.product import Product


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string")
    return value


@dataclass
class ProductDTO:
    """Plain product data as carried in JSON."""

    id: str = ""
    name: str = ""
    price: float = 0.0
    status: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ProductDTO":
        """Build from a decoded JSON object, ignoring unknown keys."""
        if not isinstance(data, Mapping):
            raise ValueError("product data must be an object")
        price = data.get("price")
        if price is None:
            price = 0.0
        elif isinstance(price, bool) or not isinstance(price, (int, float)):
            raise ValueError("price must be a number")
        return cls(
            id=_text(data, "id"),
            name=_text(data, "name"),
            price=float(price),
            status=_text(data, "status"),
        )

    def bind(self, product: Product) -> Product:
        """Copy this data onto ``product``, validate it and return it.

        The product keeps its own identifier when this one is empty.
        """
        if self.id:
            product.id = self.id
        product.name = self.name
        product.price = self.price
        product.status = self.status
        product.is_valid()
        return product