# =============================================================================
# tests/fakes.py - In-Memory Supabase Stand-In
# =============================================================================
# Implements just the slice of the Supabase client the services touch:
#   client.table(name).select/insert/update/delete .eq .order .limit .single
#   client.storage.from_(bucket).upload/remove, client.storage.get_bucket
#
# Every call is recorded in `calls` so tests can assert that a rejected
# request never reached the data store.
# =============================================================================

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import httpx


@dataclass
class FakeResponse:
    data: Any


class FakeQuery:
    """Chainable query against one in-memory table."""

    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table = table
        self.action = "select"
        self.payload: dict[str, Any] | None = None
        self.filters: list[tuple[str, Any]] = []
        self.order_by: tuple[str, bool] | None = None
        self.row_limit: int | None = None
        self.want_single = False

    def select(self, *columns: str) -> "FakeQuery":
        return self

    def insert(self, data: dict[str, Any]) -> "FakeQuery":
        self.action = "insert"
        self.payload = data
        return self

    def update(self, data: dict[str, Any]) -> "FakeQuery":
        self.action = "update"
        self.payload = data
        return self

    def delete(self) -> "FakeQuery":
        self.action = "delete"
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self.filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self.order_by = (column, desc)
        return self

    def limit(self, count: int) -> "FakeQuery":
        self.row_limit = count
        return self

    def single(self) -> "FakeQuery":
        self.want_single = True
        return self

    def _matches(self, row: dict[str, Any]) -> bool:
        return all(row.get(column) == value for column, value in self.filters)

    def execute(self) -> FakeResponse:
        self.db.calls.append((self.action, self.table))
        if self.db.fail_with is not None:
            raise self.db.fail_with

        rows = self.db.tables.setdefault(self.table, [])

        if self.action == "insert":
            row = {
                "id": self.db.next_id(self.table),
                "created_at": datetime.now(timezone.utc).isoformat(),
                **self.payload,
            }
            rows.append(row)
            return FakeResponse(data=[dict(row)])

        matched = [row for row in rows if self._matches(row)]

        if self.action == "update":
            for row in matched:
                row.update(self.payload)
            return FakeResponse(data=[dict(row) for row in matched])

        if self.action == "delete":
            self.db.tables[self.table] = [row for row in rows if not self._matches(row)]
            return FakeResponse(data=[dict(row) for row in matched])

        if self.order_by:
            column, desc = self.order_by
            matched = sorted(matched, key=lambda row: row.get(column), reverse=desc)
        if self.row_limit is not None:
            matched = matched[: self.row_limit]

        if self.want_single:
            if len(matched) != 1:
                raise Exception(
                    "{'code': 'PGRST116', 'message': 'JSON object requested, "
                    "multiple (or no) rows returned'}"
                )
            return FakeResponse(data=dict(matched[0]))

        return FakeResponse(data=[dict(row) for row in matched])


class FakeBucket:
    """Objects of one bucket, keyed by object name."""

    def __init__(self, storage: "FakeStorage", bucket_id: str):
        self.storage = storage
        self.bucket_id = bucket_id

    def upload(self, path: str, file: bytes, file_options: dict[str, str] | None = None):
        self.storage.calls.append(("upload", path))
        if self.storage.fail_uploads:
            raise Exception("Bucket not found")
        self.storage.objects[path] = (bytes(file), dict(file_options or {}))
        return {"Key": f"{self.bucket_id}/{path}"}

    def remove(self, paths: list[str]):
        self.storage.calls.append(("remove", paths))
        if self.storage.fail_removes:
            raise Exception("Storage unavailable")
        for path in paths:
            self.storage.objects.pop(path, None)
        return [{"name": path} for path in paths]


@dataclass
class FakeStorage:
    objects: dict[str, tuple[bytes, dict[str, str]]] = field(default_factory=dict)
    calls: list[tuple[str, Any]] = field(default_factory=list)
    fail_uploads: bool = False
    fail_removes: bool = False
    buckets: tuple[str, ...] = ("test-bucket",)

    def from_(self, bucket_id: str) -> FakeBucket:
        return FakeBucket(self, bucket_id)

    def get_bucket(self, bucket_id: str) -> dict[str, str]:
        self.calls.append(("get_bucket", bucket_id))
        if bucket_id not in self.buckets:
            raise Exception(f"Bucket not found: {bucket_id}")
        return {"id": bucket_id}


class FakeSupabase:
    """Drop-in for supabase.Client in tests."""

    def __init__(self):
        self.tables: dict[str, list[dict[str, Any]]] = {}
        self.calls: list[tuple[str, str]] = []
        self.storage = FakeStorage()
        self.fail_with: Exception | None = None
        self._ids: dict[str, int] = {}

    def next_id(self, table: str) -> int:
        self._ids[table] = self._ids.get(table, 0) + 1
        return self._ids[table]

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def seed(self, table: str, **row: Any) -> dict[str, Any]:
        """Insert a row directly, bypassing services."""
        return self.table(table).insert(row).execute().data[0]


def storage_transport(storage: FakeStorage, bucket_id: str) -> httpx.MockTransport:
    """
    Serve FakeStorage objects over the Storage REST read endpoint.

    Unknown objects get a 400, as the real API does for missing keys.
    """
    prefix = f"/storage/v1/object/authenticated/{bucket_id}/"

    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if not path.startswith(prefix):
            return httpx.Response(404, json={"error": "not_found"})

        stored = storage.objects.get(path[len(prefix):])
        if stored is None:
            return httpx.Response(400, json={"error": "not_found", "message": "Object not found"})

        content, options = stored
        return httpx.Response(
            200,
            content=content,
            headers={"content-type": options.get("content-type", "application/octet-stream")},
        )

    return httpx.MockTransport(handler)
