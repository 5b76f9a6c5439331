"""Command line entry point.

Usage:
    python -m plp_bookstore                 # run the query exercises
    python -m plp_bookstore run --page 3 --limit 4
    python -m plp_bookstore seed --drop     # load data/books.json
    python -m plp_bookstore setup           # create collection + validator
"""
from __future__ import annotations

import argparse
import sys

from . import connect_db
from .create_collections import create_collections
from .logger import LOG_LEVELS, configure_logging, get_logger, resolve_level
from .runner import run_queries
from .seed import load_sample_books, seed_books

logger = get_logger("plp_bookstore")


def _seed(args) -> bool:
    try:
        docs = load_sample_books(args.file)
        with connect_db.connection(args.uri) as client:
            db = connect_db.get_database(client, args.db)
            seed_books(db[connect_db.BOOKS_COLLECTION], docs, drop=args.drop)
    except Exception:
        logger.exception("❌ Seeding failed")
        return False
    return True


def _setup(args) -> bool:
    try:
        with connect_db.connection(args.uri) as client:
            db = connect_db.get_database(client, args.db)
            return create_collections(db, connect_db.BOOKS_COLLECTION)
    except Exception:
        logger.exception("❌ Collection setup failed")
        return False


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="plp-bookstore",
        description="CRUD, query, aggregation and indexing exercises on a MongoDB books collection",
    )
    parser.add_argument(
        "--uri",
        default=None,
        help="MongoDB connection URI (default: $MONGO_URI or %s)" % connect_db.DEFAULT_MONGO_URI,
    )
    parser.add_argument(
        "--db",
        default=None,
        help="Database name (default: the one in the URI, else $DB_NAME)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: $LOG_LEVEL or INFO)",
    )
    sub = parser.add_subparsers(dest="command")

    run_p = sub.add_parser("run", help="Run the query exercises (default)")
    run_p.add_argument("--page", type=int, default=2, help="Page number for the pagination step")
    run_p.add_argument("--limit", type=int, default=5, help="Page size for the pagination step")

    seed_p = sub.add_parser("seed", help="Insert the sample books")
    seed_p.add_argument("--drop", action="store_true", help="Remove existing books first")
    seed_p.add_argument("--file", default=None, help="JSON file with an array of books")

    sub.add_parser("setup", help="Create the books collection with its validator")

    args = parser.parse_args(argv)
    level = resolve_level(args.log_level)
    if level not in LOG_LEVELS:
        parser.error("invalid LOG_LEVEL %r (choose from %s)" % (level, ", ".join(LOG_LEVELS)))
    configure_logging(level)

    if args.command == "seed":
        ok = _seed(args)
    elif args.command == "setup":
        ok = _setup(args)
    else:
        ok = run_queries(
            uri=args.uri,
            db_name=args.db,
            page=getattr(args, "page", 2),
            limit=getattr(args, "limit", 5),
        )
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
