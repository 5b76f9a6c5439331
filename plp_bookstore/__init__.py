"""plp_bookstore package initializer

Query, aggregation and indexing exercises against the ``books`` collection
of a MongoDB database. Run it with ``python -m plp_bookstore``.
"""

__all__ = [
    "connect_db",
    "create_collections",
    "models",
    "queries",
    "runner",
    "schema",
    "seed",
]

__version__ = "1.0.0"
