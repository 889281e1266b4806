# labkit

Small, self-contained database and service programs built on the standard
library and SQLAlchemy. All storage is SQLite.

## What is inside

- **Quote server** (`labkit.quote_server`). `QuoteHandler` answers
  `GET /cotacao` with the current USD-BRL bid encoded as a JSON string; any
  other path gets a 404. `fetch_bid(url, timeout)` reads a JSON array of
  quotes from the upstream service (0.3 s timeout by default) and returns the
  `bid` of the first entry; an upstream failure becomes a 500 response.
  `save_bid(bid, db_path, timeout)` stores the bid in an SQLite table
  `cotacoes` in `values.db`, creating the table when missing; a storage
  failure is logged and the bid is still returned. `serve(host, port)` runs
  the server (port 8080 by default).
- **Quote client** (`labkit.quote_client`). `fetch_quote(url, timeout)` asks
  the server at `http://localhost:8080/cotacao` for the bid;
  `save_quote(quote, path, now)` appends a line
  `Cotação: <bid> - salvo em: YYYY-MM-DD HH:MM:SS` to `cotacao.txt` and returns
  it.
- **Products** (`labkit.products`). Plain SQL on an SQLite `products` table
  with UUID identifiers: `Product`, `new_product`, `create_table`,
  `insert_product`, `update_product`, `select_one_product` (raises
  `ProductNotFound` when the id is absent), `select_all_products`,
  `delete_product`.
- **Catalog with relations** (`labkit.catalog_relations`). SQLAlchemy models
  `Category`, `Product` and `SerialNumber`: a product belongs to one category
  and has one serial number. `products_with_details` and
  `categories_with_products` load live products with their relations;
  `soft_delete_product` sets `deleted_at` instead of removing the row and
  raises `ProductNotFound` for a missing or already deleted product.
- **Catalog with tags** (`labkit.catalog_tags`). Products and categories in a
  many-to-many relation through `products_categories`.
  `rename_category_locked` renames a category in one transaction using
  `SELECT ... FOR UPDATE`, raising `CategoryNotFound` for an unknown id.
- **Todo use case** (`labkit.todo`, `labkit.usecases`). A `Todo` dataclass
  with `done()` and `undone()`, and `FinishTodoUseCase`, which finishes a todo
  through a `TodoRepository` and can compensate the step, publishing a
  `todo_undone` event through a `CompensateEvent`. If publishing fails, the
  exception is returned by `compensate` rather than raised.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

Start the quote server, then ask it for a quote from another terminal:

```
labkit-quote-server --port 8080
labkit-quote-client --url http://localhost:8080/cotacao --output cotacao.txt
```

Run the database examples (each takes `--database`):

```
labkit-products
labkit-catalog-relations
labkit-catalog-tags
```

`labkit-products` uses the file `goexpert.db`; the two catalog commands use
the SQLAlchemy URL `sqlite:///goexpert.db`. Each command accepts `--help`.

## Using the library

```python
from sqlalchemy.orm import Session

from labkit.catalog_relations import (
    add_category,
    add_product,
    add_serial_number,
    categories_with_products,
    open_database,
)

engine = open_database("sqlite://")
with Session(engine) as session:
    category = add_category(session, "Cozinha")
    product = add_product(session, "Panela", 100.90, category.id)
    add_serial_number(session, "SN-0001", product.id)

    for group in categories_with_products(session):
        print(group.name, [p.name for p in group.products])
```

```python
from labkit.todo import Todo
from labkit.usecases import FinishTodoUseCase, InputFinishTodo

class MemoryRepository:
    def __init__(self):
        self.todos = {}

    def find_by_id(self, todo_id):
        return self.todos[todo_id]

    def save(self, todo):
        self.todos[todo.id] = todo

class PrintEvents:
    def publish(self, name, payload):
        print(name, payload.id)

repository = MemoryRepository()
todo = Todo(title="Write report")
repository.save(todo)

use_case = FinishTodoUseCase(repository, PrintEvents())
output = use_case.execute(InputFinishTodo(id=todo.id))
```

## What it does not do

- Only SQLite is used; there is no support for other database servers. On
  SQLite, the row lock requested by `rename_category_locked` has no effect.
- The package ships no `TodoRepository` or `CompensateEvent` implementation;
  the caller provides them.
- The quote server needs network access to the upstream quote service; it
  keeps no cache and serves nothing but `/cotacao`.