from unittest.mock import MagicMock

import pytest
from bson import ObjectId


class FakeDB:
    """Minimal stand-in for a pymongo Database: name + per-collection MagicMocks."""

    def __init__(self, name="security_shifts"):
        self.name = name
        self.collections = {}

    def __getitem__(self, key):
        if key not in self.collections:
            col = MagicMock(name=key)
            col.insert_one.side_effect = lambda doc: MagicMock(inserted_id=ObjectId())
            col.insert_many.side_effect = lambda docs: MagicMock(
                inserted_ids=[ObjectId() for _ in docs]
            )
            self.collections[key] = col
        return self.collections[key]


@pytest.fixture
def fake_db():
    return FakeDB()
