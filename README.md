# hexproducts

A small product catalogue. A product has an identifier, a name, a price and a
status (`enabled` or `disabled`). Products are kept in a SQLite database and
can be managed from the command line or over HTTP. Only the standard library
is used.

## Rules

- A new product gets a random UUID4 identifier and starts out `disabled`.
- The status must be `enabled` or `disabled`. An empty status counts as
  `disabled`.
- The price may not be negative, and the name may not be empty.
- A product can be enabled only when its price is greater than zero.
- A product can be disabled only when its price is exactly zero.

A product that breaks a rule raises `hexproducts.product.ProductError`, which
is a `ValueError`.

## Installation

```
pip install .
```

## Database

The commands use the file `db.sqlite` in the current directory. It must
already contain a `products` table, because the package does not create it:

```sql
CREATE TABLE products (
    "id" string,
    "name" string,
    "price" float,
    "status" string
);
```

## Command line

Create a product:

```
hexproducts cli -a create -n "Desk lamp" -p 25.0
```

This prints a line such as
`Product ID <id> with the name Desk lamp has been created with the price 25.000000 and status disabled`.

Show a product (any action other than `create`, `enable` or `disable` shows
the product):

```
hexproducts cli -a get --id <product id>
```

Enable or disable a product (`enable` is the default action):

```
hexproducts cli -a enable -i <product id>
hexproducts cli -a disable -i <product id>
```

Options of `cli`:

| Option            | Meaning                                        | Default  |
|-------------------|------------------------------------------------|----------|
| `-a`, `--action`  | `create`, `enable`, `disable`, or anything else to show | `enable` |
| `-i`, `--id`      | product identifier                             | empty    |
| `-n`, `--product` | product name                                   | empty    |
| `-p`, `--price`   | product price                                  | `0`      |

When an action fails, for example because the identifier is unknown or a rule
is broken, the error message is printed followed by an empty line, and the
command still exits with status 0.

Running `hexproducts` without a command prints the help. The top-level
`-t`/`--toggle` flag is accepted but has no effect.

## HTTP API

Start the server on all interfaces, port 8080:

```
hexproducts http
```

Routes (each also answers `OPTIONS`):

| Method | Path                      | Effect                          |
|--------|---------------------------|---------------------------------|
| GET    | `/product/{id}`           | fetch a product                 |
| POST   | `/product`                | create from `{"name", "price"}` |
| GET    | `/product/{id}/enable`    | enable a product                |
| GET    | `/product/{id}/disable`   | disable a product               |

A product is returned as compact JSON followed by a newline:

```
{"ID":"<id>","Name":"Desk lamp","Price":25,"Status":"disabled"}
```

Keys in the POST body are matched without regard to case; other keys are
ignored. An unknown identifier answers 404 with an empty body. A rejected
request answers 500 with a body such as
`{"message":"The price must be greater or equal zero"}`. A path that matches
no route answers 404 with `404 page not found`, and a known path with the
wrong method answers 405.

Requests are logged through the `hexproducts.web` logger.

## Using it from Python

```python
import sqlite3

from hexproducts.cli_adapter import run
from hexproducts.product import ProductService
from hexproducts.sqlite_store import ProductDb

service = ProductService(ProductDb(sqlite3.connect("db.sqlite")))
product = service.create("Desk lamp", 25.0)
print(run(service, "get", product.id, "", 0))
```

The pieces:

- `hexproducts.product`: `Product` (a dataclass with `id`, `name`, `price`,
  `status` and the methods `is_valid()`, `enable()`, `disable()`), `Status`,
  `ProductError`, `new_product()` and `ProductService` with `get`, `create`,
  `enable` and `disable`.
- `hexproducts.sqlite_store`: `ProductDb(connection)` with `get(product_id)`
  and `save(product)`; `get` raises `ProductNotFound` (a `LookupError`) for an
  unknown identifier, and `save` inserts or updates.
- `hexproducts.dto`: `ProductDTO` with `from_dict(data)` and `bind(product)`,
  which copies the data onto a product and validates it.
- `hexproducts.cli_adapter`: `run(service, action, product_id, product_name, price)`,
  which returns the message to print.
- `hexproducts.web`: `json_error(message)`, `make_app(service)` returning a
  WSGI application, and `serve(service, host="", port=8080)`.
- `hexproducts.cli`: `build_parser()` and `main(argv=None)`, which returns the
  exit status.

## What it does not do

- It does not create the database or the `products` table.
- The database path (`db.sqlite`) and the server port (8080) are fixed on the
  command line.
- There is no route to list, rename, reprice or delete products.

## Tests

```
pip install ".[test]"
pytest
```