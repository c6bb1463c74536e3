import pandas as pd
import pytest

from data import mock_data
from data.connection import BackendError
from data.memory_store import MemoryStore


class FailingBackend:
    """Backend whose every call fails, like an unreachable Supabase project."""

    name = "supabase"

    def query(self, q):
        raise BackendError(f"Query on {q.table} failed: connection refused")

    def insert(self, table, row):
        raise BackendError(f"Insert into {table} failed: connection refused")

    def update(self, table, row_id, values):
        raise BackendError(f"Update of {table}/{row_id} failed: connection refused")

    def delete(self, table, row_id):
        raise BackendError(f"Delete of {table}/{row_id} failed: connection refused")

    def upload(self, bucket, path, content, content_type=None):
        raise BackendError(f"Upload to {bucket}/{path} failed: connection refused")


@pytest.fixture
def store():
    """In-memory backend seeded with the demo tables."""
    return MemoryStore.seeded()


@pytest.fixture
def empty_store():
    """In-memory backend with no rows at all."""
    return MemoryStore()


@pytest.fixture
def failing_backend():
    return FailingBackend()


@pytest.fixture
def teachers_df():
    return mock_data.teachers_mock()


@pytest.fixture
def courses_df():
    return mock_data.courses_mock()


@pytest.fixture
def tied_teachers():
    """Teachers where several rows share a rating, in a known source order."""
    return pd.DataFrame(
        [
            {"id": "a", "name": "Alice", "specialization": "Grammar", "rating": 4.5, "reviews": 10, "hourly_rate": 100, "is_online": True},
            {"id": "b", "name": "Bob", "specialization": "IELTS", "rating": 4.9, "reviews": 30, "hourly_rate": 250, "is_online": False},
            {"id": "c", "name": "Carla", "specialization": "Conversation", "rating": 4.5, "reviews": 50, "hourly_rate": 100, "is_online": True},
            {"id": "d", "name": "Dina", "specialization": "Business English", "rating": 4.5, "reviews": 5, "hourly_rate": 180, "is_online": False},
        ]
    )
