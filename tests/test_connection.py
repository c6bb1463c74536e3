from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from config import AppConfig
from data import connection, queries
from data.connection import BackendAuthError, BackendError, SupabaseClient, get_backend
from data.memory_store import MemoryStore


def _cfg(url="https://demo.supabase.co", key="anon-key"):
    return AppConfig(
        supabase_url=url,
        supabase_key=key,
        teacher_bucket="teacher-images",
        course_bucket="course-images",
        site_bucket="site-assets",
        default_use_mock=False,
        default_language="ar",
        log_level="INFO",
    )


@pytest.fixture
def request_builder():
    """Fluent stand-in for the supabase table request builder."""
    req = MagicMock()
    for name in ("select", "eq", "order", "limit", "insert", "update", "delete"):
        getattr(req, name).return_value = req
    req.execute.return_value = SimpleNamespace(data=[{"id": "1", "name": "Sara"}])
    return req


@pytest.fixture
def client(request_builder):
    c = MagicMock()
    c.table.return_value = request_builder
    return c


@pytest.fixture
def supabase(client):
    return SupabaseClient(cfg=_cfg(), client=client)


class TestQuery:
    """Test translation of TableQuery into supabase calls."""

    def test_filters_and_order(self, supabase, client, request_builder):
        df = supabase.query(queries.q_online_teachers())
        client.table.assert_called_once_with("teachers")
        request_builder.select.assert_called_once_with("id, name, specialization, hourly_rate, image_url")
        request_builder.eq.assert_called_once_with("is_online", True)
        request_builder.order.assert_called_once_with("rating", desc=True)
        request_builder.limit.assert_not_called()
        assert df.to_dict("records") == [{"id": "1", "name": "Sara"}]

    def test_limit(self, supabase, request_builder):
        supabase.query(queries.q_site_settings())
        request_builder.limit.assert_called_once_with(1)

    def test_empty_result(self, supabase, request_builder):
        request_builder.execute.return_value = SimpleNamespace(data=[])
        assert supabase.query(queries.q_teachers()).empty

    def test_failure_is_wrapped(self, supabase, request_builder):
        """Test that client errors become BackendError chained to the cause."""
        request_builder.execute.side_effect = RuntimeError("boom")
        with pytest.raises(BackendError) as exc:
            supabase.query(queries.q_teachers())
        assert isinstance(exc.value.__cause__, RuntimeError)


class TestWrites:
    """Test insert / update / delete / upload."""

    def test_insert_returns_created_row(self, supabase, request_builder):
        assert supabase.insert("teachers", {"name": "Sara"}) == {"id": "1", "name": "Sara"}
        request_builder.insert.assert_called_once_with({"name": "Sara"})

    def test_insert_without_returned_rows(self, supabase, request_builder):
        request_builder.execute.return_value = SimpleNamespace(data=[])
        assert supabase.insert("teachers", {"name": "Sara"}) == {"name": "Sara"}

    def test_update_by_id(self, supabase, request_builder):
        supabase.update("bookings", "b1", {"status": "confirmed"})
        request_builder.update.assert_called_once_with({"status": "confirmed"})
        request_builder.eq.assert_called_once_with("id", "b1")

    def test_delete_failure(self, supabase, request_builder):
        request_builder.execute.side_effect = ConnectionError("offline")
        with pytest.raises(BackendError):
            supabase.delete("courses", "1")

    def test_upload_returns_public_url(self, supabase, client):
        bucket = client.storage.from_.return_value
        bucket.get_public_url.return_value = "https://cdn/teacher-images/x.png"
        url = supabase.upload("teacher-images", "x.png", b"img", "image/png")
        client.storage.from_.assert_called_once_with("teacher-images")
        bucket.upload.assert_called_once_with("x.png", b"img", {"content-type": "image/png"})
        assert url == "https://cdn/teacher-images/x.png"


class TestAuth:
    """Test sign in / out wrapping."""

    def test_sign_in(self, supabase, client):
        client.auth.sign_in_with_password.return_value = SimpleNamespace(user=SimpleNamespace(email="a@b.co"))
        assert supabase.sign_in("a@b.co", "pw") == "a@b.co"
        client.auth.sign_in_with_password.assert_called_once_with({"email": "a@b.co", "password": "pw"})

    def test_sign_in_rejected(self, supabase, client):
        client.auth.sign_in_with_password.side_effect = RuntimeError("Invalid login credentials")
        with pytest.raises(BackendAuthError):
            supabase.sign_in("a@b.co", "bad")

    def test_sign_in_without_user(self, supabase, client):
        client.auth.sign_in_with_password.return_value = SimpleNamespace(user=None)
        with pytest.raises(BackendAuthError):
            supabase.sign_in("a@b.co", "pw")


class TestGetBackend:
    """Test backend selection."""

    def test_demo_mode_uses_memory_store(self):
        assert isinstance(get_backend(_cfg(), use_mock=True), MemoryStore)

    def test_existing_store_is_reused(self, store):
        assert get_backend(_cfg(), use_mock=True, store=store) is store

    def test_missing_credentials_force_demo(self):
        assert isinstance(get_backend(_cfg(url=None, key=None), use_mock=False), MemoryStore)

    def test_connect_requires_credentials(self):
        with pytest.raises(BackendAuthError):
            SupabaseClient.connect(_cfg(url=None))

    def test_live_mode(self, monkeypatch):
        fake_client = MagicMock()
        monkeypatch.setattr(connection, "create_client", lambda url, key: fake_client)
        backend = get_backend(_cfg(), use_mock=False)
        assert isinstance(backend, SupabaseClient)
        assert backend.client is fake_client
        assert backend.name == "supabase"

    def test_client_creation_failure(self, monkeypatch):
        def boom(url, key):
            raise ValueError("Invalid URL")

        monkeypatch.setattr(connection, "create_client", boom)
        with pytest.raises(BackendError):
            get_backend(_cfg(), use_mock=False)
