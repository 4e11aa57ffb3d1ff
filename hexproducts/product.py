"""Product entity and the application service that manages products."""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class Status(str, Enum):
    """The two states a product can be in."""

    ENABLED = "enabled"
    DISABLED = "disabled"


class ProductError(ValueError):
    """Raised when a product is invalid or cannot change its status."""


_UUID4 = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}"
)


@dataclass
class Product:
    """A product with an identifier, a name, a price and a status."""

    id: str = ""
    name: str = ""
    price: float = 0.0
    status: str = ""

    def is_valid(self) -> bool:
        """Check the product, raising ProductError when it is not valid.

        An empty status is first set to disabled.
        """
        if not self.status:
            self.status = Status.DISABLED.value
        if self.status not in (Status.ENABLED.value, Status.DISABLED.value):
            raise ProductError("The status must be enabled or disabled")
        if self.price < 0:
            raise ProductError("The price must be greater or equal zero")

        problems = []
        if not self.id:
            problems.append("ID: non zero value required")
        elif not _UUID4.fullmatch(self.id):
            problems.append(f"ID: {self.id} does not validate as uuidv4")
        if not self.name:
            problems.append("Name: non zero value required")
        if problems:
            raise ProductError(";".join(problems))
        return True

    def enable(self) -> None:
        """Mark the product enabled; only products with a positive price can be."""
        if self.price > 0:
            self.status = Status.ENABLED.value
            return
        raise ProductError("The price must be greater than zero to enable the product")

    def disable(self) -> None:
        """Mark the product disabled; only products priced at zero can be."""
        if self.price == 0:
            self.status = Status.DISABLED.value
            return
        raise ProductError("The price must be zero in order to have the product disabled")


def new_product() -> Product:
    """Return a disabled product with a fresh random identifier."""
    return Product(id=str(uuid.uuid4()), status=Status.DISABLED.value)


class _ProductLike(Protocol):
    def enable(self) -> None: ...

    def disable(self) -> None: ...


class _Persistence(Protocol):
    def get(self, product_id: str): ...

    def save(self, product): ...


class ProductService:
    """Application service coordinating product rules and persistence."""

    def __init__(self, persistence: _Persistence) -> None:
        self.persistence = persistence

    def get(self, product_id: str):
        """Fetch a product from persistence."""
        return self.persistence.get(product_id)

    def create(self, name: str, price: float):
        """Create, validate and store a new product."""
        product = new_product()
        product.name = name
        product.price = price
        product.is_valid()
        return self.persistence.save(product)

    def enable(self, product: _ProductLike):
        """Enable a product and store it."""
        product.enable()
        return self.persistence.save(product)

    def disable(self, product: _ProductLike):
        """Disable a product and store it."""
        product.disable()
        return self.persistence.save(product)