"""
Pytest configuration and shared fixtures

The books fixture is an in-memory mongomock collection loaded with the
bundled sample data, so query tests never need a running server.
"""
import mongomock
import pytest

from plp_bookstore.seed import load_sample_books


@pytest.fixture
def sample_books():
    return load_sample_books()


@pytest.fixture
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture
def books(mongo_client, sample_books):
    collection = mongo_client["plp_bookstore"]["books"]
    collection.insert_many([dict(b) for b in sample_books])
    return collection


@pytest.fixture
def empty_books(mongo_client):
    return mongo_client["plp_bookstore"]["books"]
