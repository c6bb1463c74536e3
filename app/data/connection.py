from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Union

import pandas as pd
from supabase import Client, create_client

from config import AppConfig
from data.queries import TableQuery

if TYPE_CHECKING:
    from data.memory_store import MemoryStore


log = logging.getLogger(__name__)


class BackendError(RuntimeError):
    pass


class BackendAuthError(BackendError):
    pass


@dataclass(frozen=True)
class SupabaseClient:
    """
    Thin wrapper over the Supabase table / storage / auth API.
    Every failure leaves this class as a BackendError chained to the underlying exception.
    """

    cfg: AppConfig
    client: Client
    name: str = "supabase"

    @classmethod
    def connect(cls, cfg: AppConfig) -> "SupabaseClient":
        if not cfg.has_backend:
            raise BackendAuthError(
                "Missing SUPABASE_URL / SUPABASE_ANON_KEY. Set both for live mode, or keep demo mode on."
            )
        try:
            client = create_client(cfg.supabase_url, cfg.supabase_key)
        except Exception as e:
            raise BackendError(f"Could not create Supabase client: {e}") from e
        log.info("Connected to Supabase at %s", cfg.supabase_url)
        return cls(cfg=cfg, client=client)

    def query(self, q: TableQuery) -> pd.DataFrame:
        try:
            req = self.client.table(q.table).select(q.columns)
            for col, value in q.eq.items():
                req = req.eq(col, value)
            if q.order_by:
                req = req.order(q.order_by, desc=not q.ascending)
            if q.limit:
                req = req.limit(q.limit)
            resp = req.execute()
        except Exception as e:
            raise BackendError(f"Query on {q.table} failed: {e}") from e
        return pd.DataFrame(resp.data or [])

    def insert(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        try:
            resp = self.client.table(table).insert(row).execute()
        except Exception as e:
            raise BackendError(f"Insert into {table} failed: {e}") from e
        return resp.data[0] if resp.data else dict(row)

    def update(self, table: str, row_id: str, values: dict[str, Any]) -> None:
        try:
            self.client.table(table).update(values).eq("id", row_id).execute()
        except Exception as e:
            raise BackendError(f"Update of {table}/{row_id} failed: {e}") from e

    def delete(self, table: str, row_id: str) -> None:
        try:
            self.client.table(table).delete().eq("id", row_id).execute()
        except Exception as e:
            raise BackendError(f"Delete of {table}/{row_id} failed: {e}") from e

    def upload(self, bucket: str, path: str, content: bytes, content_type: Optional[str] = None) -> str:
        """Store `content` under `bucket/path` and return its public URL."""
        try:
            bucket_api = self.client.storage.from_(bucket)
            if content_type:
                bucket_api.upload(path, content, {"content-type": content_type})
            else:
                bucket_api.upload(path, content)
            return bucket_api.get_public_url(path)
        except Exception as e:
            raise BackendError(f"Upload to {bucket}/{path} failed: {e}") from e

    def sign_in(self, email: str, password: str) -> str:
        try:
            resp = self.client.auth.sign_in_with_password({"email": email, "password": password})
        except Exception as e:
            raise BackendAuthError(f"Sign-in failed: {e}") from e
        if resp.user is None:
            raise BackendAuthError("Sign-in failed: no user returned")
        return resp.user.email or email

    def sign_out(self) -> None:
        try:
            self.client.auth.sign_out()
        except Exception as e:
            raise BackendAuthError(f"Sign-out failed: {e}") from e


def get_backend(
    cfg: AppConfig, use_mock: bool, store: Optional["MemoryStore"] = None
) -> Union[SupabaseClient, "MemoryStore"]:
    """
    Returns the backend the views talk to.
    Demo mode (or missing credentials) uses the in-memory `store`.
    """
    if use_mock or not cfg.has_backend:
        if store is None:
            from data.memory_store import MemoryStore

            store = MemoryStore.seeded()
        return store
    return SupabaseClient.connect(cfg)
