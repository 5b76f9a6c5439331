# runner.py - run the query exercises in order and log every result
from typing import Optional

from pymongo.collection import Collection

from . import connect_db, queries
from .logger import get_logger

logger = get_logger(__name__)


def run_sequence(books: Collection, page: int = 2, limit: int = 5) -> None:
    """Execute every exercise in order. The first failure propagates."""
    logger.info("--- Task 2: CRUD ---")
    logger.info("📚 Fiction Books: %s", queries.find_by_genre(books))
    logger.info("📅 Books after 1950: %s", queries.find_published_after(books))
    logger.info("✍️ Orwell Books: %s", queries.find_by_author(books))

    updated = queries.update_price_by_title(books)
    logger.info("💰 Updated Hobbit Price (matched=%d, modified=%d)", updated.matched, updated.modified)

    deleted = queries.delete_by_title(books)
    logger.info("🗑️ Deleted Moby Dick (deleted=%d)", deleted.deleted)

    logger.info("--- Task 3: Advanced Queries ---")
    logger.info("📦 Recent In-Stock: %s", queries.find_in_stock_published_after(books))
    logger.info("🎯 Projection: %s", queries.project_title_author_price(books))
    logger.info("⬆️ Asc Price: %s", queries.sort_by_price(books))
    logger.info("⬇️ Desc Price: %s", queries.sort_by_price(books, descending=True))
    logger.info("📖 Page %d Books: %s", page, queries.paginate(books, page=page, limit=limit))

    logger.info("--- Task 4: Aggregations ---")
    logger.info("📊 Avg Price by Genre: %s", queries.average_price_by_genre(books))
    logger.info("🏆 Top Author: %s", queries.top_author(books))
    logger.info("📆 Books by Decade: %s", queries.count_by_decade(books))

    logger.info("--- Task 5: Indexing ---")
    logger.info("⚡ Index on title created: %s", queries.create_title_index(books))
    logger.info("⚡ Compound index on author+year created: %s", queries.create_author_year_index(books))
    logger.info("🔎 Explain Plan: %s", queries.explain_title_query(books))


def run_queries(
    uri: Optional[str] = None,
    db_name: Optional[str] = None,
    page: int = 2,
    limit: int = 5,
) -> bool:
    """Connect, run the sequence, disconnect. Returns False if anything failed."""
    try:
        with connect_db.connection(uri) as client:
            db = connect_db.get_database(client, db_name)
            run_sequence(db[connect_db.BOOKS_COLLECTION], page=page, limit=limit)
    except Exception:
        logger.exception("❌ Query run aborted")
        return False
    return True
