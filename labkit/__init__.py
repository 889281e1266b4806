"""Small SQLite-backed programs: a quote server and client, product catalogs and a todo use case."""

__version__ = "0.1.0"

__all__ = [
    "catalog_relations",
    "catalog_tags",
    "products",
    "quote_client",
    "quote_server",
    "todo",
    "usecases",
]