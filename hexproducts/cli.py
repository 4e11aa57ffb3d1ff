"""Command-line entry point: product actions and the HTTP server."""

from __future__ import annotations

import argparse
import sqlite3
import sys

from hexproducts.cli_adapter import run
from hexproducts.product import ProductService
from hexproducts.sqlite_store import ProductDb
from hexproducts.web import serve

DATABASE_PATH = "db.sqlite"


def build_parser() -> argparse.ArgumentParser:
    """Build the parser with the ``cli`` and ``http`` commands."""
    parser = argparse.ArgumentParser(
        prog="hexproducts", description="Manage products from the command line or over HTTP."
    )
    parser.add_argument("-t", "--toggle", action="store_true", help="Help message for toggle")
    commands = parser.add_subparsers(dest="command")

    cli = commands.add_parser("cli", help="Create, show, enable or disable a product")
    cli.add_argument("-a", "--action", default="enable", help="Enable / Disable a product")
    cli.add_argument("-i", "--id", dest="product_id", default="", help="Product ID")
    cli.add_argument("-n", "--product", dest="product_name", default="", help="Product name")
    cli.add_argument("-p", "--price", type=float, default=0.0, help="Product price")

    commands.add_parser("http", help="Start the web server on port 8080")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command named in ``argv`` and return the exit status."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return 0 if not exc.code else 1
    if args.command is None:
        parser.print_help()
        return 0

    connection = sqlite3.connect(DATABASE_PATH)
    try:
        service = ProductService(ProductDb(connection))
        if args.command == "cli":
            try:
                result = run(
                    service, args.action, args.product_id, args.product_name, args.price
                )
            except (ValueError, LookupError, sqlite3.Error) as exc:
                print(exc)
                result = ""
            print(result)
            return 0

        print("Webserver has been started")
        try:
            serve(service)
        except OSError as exc:
            print(f"log: {exc}", file=sys.stderr)
            return 1
        except KeyboardInterrupt:
            return 0
        return 0
    finally:
        connection.close()


if __name__ == "__main__":
    sys.exit(main())