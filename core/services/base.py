# =============================================================================
# core/services/base.py - Table Service Base
# =============================================================================
# Shared PostgREST helpers for the per-entity services. Each service wraps one
# table and is constructed with the Supabase client at request time:
#
#   service = JobService(client)
#   job = service.get(42)
#
# Failures are logged and re-raised as DatabaseError (generic 500); a
# ".single()" miss (PGRST116) is reported as None.
# =============================================================================

import logging
from typing import Any, Generic, TypeVar

from supabase import Client

from app.exceptions import DatabaseError
from core.models.base import RecordModel
from lib.supabase_client import is_no_rows_error

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=RecordModel)


class TableService(Generic[RecordT]):
    """
    CRUD helpers over a single table.

    Subclasses set `table` and `record_model` and expose named operations
    built from the underscore helpers.
    """

    table: str
    record_model: type[RecordT]

    def __init__(self, client: Client):
        self.client = client

    def _fail(self, operation: str, error: Exception) -> DatabaseError:
        logger.error(f"{operation} on {self.table} failed: {error}")
        return DatabaseError(f"{operation} {self.table}", str(error))

    def _to_record(self, row: dict[str, Any]) -> RecordT:
        return self.record_model.model_validate(row)

    def _insert(self, data: dict[str, Any]) -> RecordT:
        try:
            response = self.client.table(self.table).insert(data).execute()
        except Exception as e:
            raise self._fail("insert", e)

        if not response.data:
            raise self._fail("insert", Exception("Insert returned no data"))

        record = self._to_record(response.data[0])
        logger.info(f"Created {self.table} record: {record.id}")
        return record

    def _select(self, filters: dict[str, Any] | None = None) -> list[RecordT]:
        try:
            query = self.client.table(self.table).select("*")
            for column, value in (filters or {}).items():
                query = query.eq(column, value)
            response = query.order("id", desc=True).execute()
        except Exception as e:
            raise self._fail("select", e)

        return [self._to_record(row) for row in response.data or []]

    def _select_one(self, record_id: int) -> RecordT | None:
        try:
            response = (
                self.client.table(self.table)
                .select("*")
                .eq("id", record_id)
                .single()
                .execute()
            )
        except Exception as e:
            if is_no_rows_error(e):
                return None
            raise self._fail("select", e)

        return self._to_record(response.data) if response.data else None

    def _update(self, record_id: int, data: dict[str, Any]) -> RecordT | None:
        try:
            response = (
                self.client.table(self.table)
                .update(data)
                .eq("id", record_id)
                .execute()
            )
        except Exception as e:
            raise self._fail("update", e)

        if not response.data:
            return None

        logger.info(f"Updated {self.table} record: {record_id}")
        return self._to_record(response.data[0])

    def _delete(self, record_id: int) -> RecordT | None:
        try:
            response = (
                self.client.table(self.table)
                .delete()
                .eq("id", record_id)
                .execute()
            )
        except Exception as e:
            raise self._fail("delete", e)

        if not response.data:
            return None

        logger.info(f"Deleted {self.table} record: {record_id}")
        return self._to_record(response.data[0])
