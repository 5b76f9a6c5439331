# schema.py

books_schema = {
    "bsonType": "object",
    "required": ["title", "author"],
    "properties": {
        "title": {"bsonType": "string"},
        "author": {"bsonType": "string"},
        "genre": {"bsonType": "string"},
        "published_year": {"bsonType": "int"},
        "price": {"bsonType": ["double", "int", "decimal"]},
        "in_stock": {"bsonType": "bool"},
        "pages": {"bsonType": "int"},
        "publisher": {"bsonType": "string"}
    }
}
