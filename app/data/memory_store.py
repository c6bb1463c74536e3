"""
In-memory backend for demo mode.

Implements the same calls as `SupabaseClient` over plain lists of dict rows,
so every page (admin included) works without a Supabase project.
"""

from __future__ import annotations

import base64
import copy
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

import pandas as pd

from data.connection import BackendAuthError, BackendError
from data.forms import hash_password
from data.queries import TableQuery


log = logging.getLogger(__name__)


class MemoryStore:
    name = "mock"

    def __init__(self, tables: Optional[dict[str, list[dict]]] = None):
        self.tables: dict[str, list[dict]] = copy.deepcopy(tables or {})
        self.files: dict[tuple[str, str], bytes] = {}
        self.signed_in: Optional[str] = None

    @classmethod
    def seeded(cls) -> "MemoryStore":
        from data.mock_data import seed_tables

        return cls(seed_tables())

    def _rows(self, table: str) -> list[dict]:
        return self.tables.setdefault(table, [])

    def query(self, q: TableQuery) -> pd.DataFrame:
        rows = [r for r in self._rows(q.table) if all(r.get(k) == v for k, v in q.eq.items())]

        if q.order_by:
            present = [r for r in rows if r.get(q.order_by) is not None]
            missing = [r for r in rows if r.get(q.order_by) is None]
            present.sort(key=lambda r: r[q.order_by], reverse=not q.ascending)
            rows = present + missing

        if q.limit:
            rows = rows[: q.limit]

        if q.columns.strip() != "*":
            cols = [c.strip() for c in q.columns.split(",")]
            rows = [{c: r.get(c) for c in cols} for r in rows]

        return pd.DataFrame(copy.deepcopy(rows))

    def insert(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        new = copy.deepcopy(row)
        new.setdefault("id", uuid.uuid4().hex)
        new.setdefault("created_at", datetime.now(timezone.utc).isoformat())
        self._rows(table).append(new)
        return copy.deepcopy(new)

    def _find(self, table: str, row_id: str) -> dict:
        for r in self._rows(table):
            if str(r.get("id")) == str(row_id):
                return r
        raise BackendError(f"No row {row_id} in {table}")

    def update(self, table: str, row_id: str, values: dict[str, Any]) -> None:
        self._find(table, row_id).update(copy.deepcopy(values))

    def delete(self, table: str, row_id: str) -> None:
        self.tables[table] = [r for r in self._rows(table) if str(r.get("id")) != str(row_id)]

    def upload(self, bucket: str, path: str, content: bytes, content_type: Optional[str] = None) -> str:
        self.files[(bucket, path)] = content
        b64 = base64.b64encode(content).decode("utf-8")
        return f"data:{content_type or 'application/octet-stream'};base64,{b64}"

    def sign_in(self, email: str, password: str) -> str:
        for admin in self._rows("admins"):
            if admin.get("email", "").lower() == email.strip().lower() and admin.get("password") == hash_password(password):
                self.signed_in = admin["email"]
                log.info("Demo admin signed in: %s", admin["email"])
                return admin["email"]
        raise BackendAuthError("Invalid email or password")

    def sign_out(self) -> None:
        self.signed_in = None
