"""Shared fixtures: a fresh application (and so a fresh store) per test."""
import pytest
from fastapi.testclient import TestClient

from bookshelf.config import Settings
from bookshelf.main import create_app


@pytest.fixture
def app():
    return create_app(Settings())


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def repo(app):
    return app.state.books


@pytest.fixture
def dune() -> dict:
    return {
        "name": "Dune",
        "year": 1965,
        "author": "Frank Herbert",
        "summary": "Spice, sand and politics.",
        "publisher": "Chilton Books",
        "pageCount": 500,
        "readPage": 500,
        "reading": False,
    }
