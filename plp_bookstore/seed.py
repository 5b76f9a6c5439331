"""Sample data for the books collection.

Documents are checked against ``schema.books_schema`` before anything is
written, so a bad sample file never leaves the collection half seeded.
"""
import json
from pathlib import Path
from typing import Iterable, List, Optional

import jsonschema
from pymongo.collection import Collection

from .logger import get_logger
from .schema import books_schema

logger = get_logger(__name__)

SAMPLE_BOOKS_PATH = Path(__file__).resolve().parent / "data" / "books.json"

_BSON_TO_JSON_TYPES = {
    "string": "string",
    "int": "integer",
    "long": "integer",
    "double": "number",
    "decimal": "number",
    "bool": "boolean",
    "null": "null",
}

_JSON_SCHEMA_CACHE: dict = {}


class BookValidationError(ValueError):
    pass


def _bson_to_jsonschema(bson_schema: dict) -> dict:
    props = {}
    for key, prop in bson_schema.get("properties", {}).items():
        bson_type = prop.get("bsonType")
        types = bson_type if isinstance(bson_type, list) else [bson_type]
        # keep order, drop duplicates (double and decimal both map to number)
        json_types = list(dict.fromkeys(_BSON_TO_JSON_TYPES.get(t, "string") for t in types))
        props[key] = {"type": json_types[0] if len(json_types) == 1 else json_types}

    json_schema = {"type": "object", "properties": props}
    if "required" in bson_schema:
        json_schema["required"] = bson_schema["required"]
    return json_schema


def validate_book(doc: dict) -> None:
    if "books" not in _JSON_SCHEMA_CACHE:
        _JSON_SCHEMA_CACHE["books"] = _bson_to_jsonschema(books_schema)
    try:
        jsonschema.validate(instance=doc, schema=_JSON_SCHEMA_CACHE["books"])
    except jsonschema.ValidationError as e:
        title = doc.get("title", "<untitled>") if isinstance(doc, dict) else "<not a document>"
        raise BookValidationError(f"{title}: {e.message}") from e


def load_sample_books(path: Optional[Path] = None) -> List[dict]:
    with open(path or SAMPLE_BOOKS_PATH, encoding="utf-8") as f:
        return json.load(f)


def seed_books(books: Collection, docs: Iterable[dict], drop: bool = False) -> int:
    docs = [dict(d) for d in docs]
    for doc in docs:
        validate_book(doc)

    if drop:
        removed = books.delete_many({}).deleted_count
        logger.info("🧹 Removed %d existing books", removed)
    if not docs:
        return 0

    result = books.insert_many(docs)
    logger.info("📥 Inserted %d books", len(result.inserted_ids))
    return len(result.inserted_ids)
