"""Command-line actions on products, returning a message to print."""

from __future__ import annotations


def run(service, action: str, product_id: str, product_name: str, price: float) -> str:
    """Perform ``action`` through ``service`` and describe the result.

    Any action other than create, enable or disable shows the product.
    """
    match action:
        case "create":
            product = service.create(product_name, price)
            return (
                f"Product ID {product.id} with the name {product.name} has been created "
                f"with the price {product.price:f} and status {product.status}"
            )
        case "enable":
            result = service.enable(service.get(product_id))
            return f"Product {result.name} has been enabled."
        case "disable":
            result = service.disable(service.get(product_id))
            return f"Product {result.name} has been disabled."
        case _:
            product = service.get(product_id)
            return (
                f"Product ID: {product.id}\nName: {product.name}\n"
                f"Price: {product.price:f}\nStatus: {product.status}"
            )