"""Queries, aggregations and indexes over the books collection.

Every function takes a pymongo ``Collection`` and performs exactly one
driver call (or one pipeline), so the runner can sequence them and a
failure in any of them surfaces to its caller unchanged.
"""
from typing import Any, Dict, List

from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection

from .models import AuthorCount, BookOut, DecadeCount, GenrePrice, WriteOutcome, format_book, to_float


# ======== Basic CRUD ========
def find_by_genre(books: Collection, genre: str = "Fiction") -> List[BookOut]:
    return [format_book(doc) for doc in books.find({"genre": genre})]


def find_published_after(books: Collection, year: int = 1950) -> List[BookOut]:
    return [format_book(doc) for doc in books.find({"published_year": {"$gt": year}})]


def find_by_author(books: Collection, author: str = "George Orwell") -> List[BookOut]:
    return [format_book(doc) for doc in books.find({"author": author})]


def update_price_by_title(books: Collection, title: str = "The Hobbit", price: float = 15.99) -> WriteOutcome:
    result = books.update_one({"title": title}, {"$set": {"price": price}})
    return WriteOutcome(matched=result.matched_count, modified=result.modified_count)


def delete_by_title(books: Collection, title: str = "Moby Dick") -> WriteOutcome:
    result = books.delete_one({"title": title})
    return WriteOutcome(deleted=result.deleted_count)


# ======== Advanced queries ========
def find_in_stock_published_after(books: Collection, year: int = 2010) -> List[BookOut]:
    cursor = books.find({"in_stock": True, "published_year": {"$gt": year}})
    return [format_book(doc) for doc in cursor]


def project_title_author_price(books: Collection) -> List[Dict[str, Any]]:
    return list(books.find({}, {"title": 1, "author": 1, "price": 1, "_id": 0}))


def sort_by_price(books: Collection, descending: bool = False) -> List[BookOut]:
    direction = DESCENDING if descending else ASCENDING
    return [format_book(doc) for doc in books.find().sort("price", direction)]


def paginate(books: Collection, page: int = 1, limit: int = 5) -> List[BookOut]:
    """Return page ``page`` (1-based) of ``limit`` books in storage order.

    A page past the end is empty rather than an error.
    """
    # bool is an int subclass; True would silently mean page 1
    if not isinstance(page, int) or isinstance(page, bool) or page < 1:
        raise ValueError(f"page must be a positive integer, got {page!r}")
    if not isinstance(limit, int) or isinstance(limit, bool) or limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")
    cursor = books.find().skip((page - 1) * limit).limit(limit)
    return [format_book(doc) for doc in cursor]


# ======== Aggregations ========
def average_price_by_genre(books: Collection) -> List[GenrePrice]:
    pipeline = [
        {"$group": {"_id": "$genre", "avgPrice": {"$avg": "$price"}}},
    ]
    return [GenrePrice(genre=row["_id"], avg_price=to_float(row["avgPrice"])) for row in books.aggregate(pipeline)]


def top_author(books: Collection) -> List[AuthorCount]:
    """Author with the most books; equal counts go to the alphabetically first author."""
    pipeline = [
        {"$group": {"_id": "$author", "count": {"$sum": 1}}},
        {"$sort": {"count": -1, "_id": 1}},
        {"$limit": 1},
    ]
    return [AuthorCount(author=row["_id"], count=row["count"]) for row in books.aggregate(pipeline)]


def count_by_decade(books: Collection) -> List[DecadeCount]:
    pipeline = [
        {"$addFields": {"decade": {"$multiply": [{"$floor": {"$divide": ["$published_year", 10]}}, 10]}}},
        {"$group": {"_id": "$decade", "count": {"$sum": 1}}},
        {"$sort": {"_id": 1}},
    ]
    return [
        DecadeCount(decade=int(row["_id"]) if row["_id"] is not None else None, count=row["count"])
        for row in books.aggregate(pipeline)
    ]


# ======== Indexing ========
def create_title_index(books: Collection) -> str:
    return books.create_index([("title", ASCENDING)])


def create_author_year_index(books: Collection) -> str:
    return books.create_index([("author", ASCENDING), ("published_year", DESCENDING)])


def explain_title_query(books: Collection, title: str = "1984") -> Dict[str, Any]:
    """Execution statistics for ``find({"title": title})``; no documents are returned."""
    plan = books.database.command(
        "explain",
        {"find": books.name, "filter": {"title": title}},
        verbosity="executionStats",
    )
    return plan.get("executionStats", {})
