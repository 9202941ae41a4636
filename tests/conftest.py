# python
import pytest

from config_rules import MappingStore, Validator


@pytest.fixture
def store():
    return MappingStore(
        {
            "app": {"ip": "127.0.0.1", "port": 3000, "env": "development"},
            "db": {"host": "db.example.com", "port": 70000, "password": "hunter2-secret"},
            "features": 'search, "beta,preview", \'export\'',
            "debug": "yes",
        }
    )


@pytest.fixture
def validator(store):
    return Validator(store)


class CountingStore:
    """Store double that records every key lookup."""

    def __init__(self, values):
        self.values = dict(values)
        self.calls = []

    def get(self, key):
        self.calls.append(key)
        return self.values.get(key)


@pytest.fixture
def counting_store():
    return CountingStore
