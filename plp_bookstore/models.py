from typing import Any, Dict, Optional

from bson.decimal128 import Decimal128
from pydantic import BaseModel


class BookOut(BaseModel):
    id: Optional[str] = None
    title: Optional[str] = None
    author: Optional[str] = None
    genre: Optional[str] = None
    published_year: Optional[int] = None
    price: Optional[float] = None
    in_stock: Optional[bool] = None
    pages: Optional[int] = None
    publisher: Optional[str] = None


class GenrePrice(BaseModel):
    genre: Optional[str] = None
    avg_price: Optional[float] = None


class AuthorCount(BaseModel):
    author: Optional[str] = None
    count: int


class DecadeCount(BaseModel):
    decade: Optional[int] = None
    count: int


class WriteOutcome(BaseModel):
    """Counts reported by a single-document update or delete.

    A zero count is a no-op, not a failure.
    """

    matched: int = 0
    modified: int = 0
    deleted: int = 0


def to_float(value: Any) -> Any:
    # Decimal128 prices come back from both find and $avg
    if isinstance(value, Decimal128):
        return float(value.to_decimal())
    return value


def format_book(doc: dict) -> BookOut:
    d: Dict[str, Any] = dict(doc)
    _id = d.pop("_id", None)
    if _id is not None:
        d["id"] = str(_id)
    if "price" in d:
        d["price"] = to_float(d["price"])
    return BookOut(**d)
