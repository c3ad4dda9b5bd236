"""
Shared plumbing for the SQLite repositories.

Every repository opens a fresh connection per call, uses parameterised
statements only and converts ``sqlite3.Error`` into ``StorageError``.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import datetime, timezone
from typing import Any, Generic, List, Optional, Protocol, Sequence, Tuple, TypeVar

from roster_api.app.core.db import get_connection
from roster_api.app.core.exceptions import StorageError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class EntityRepository(Protocol[T]):
    """Persistence contract consumed by the entity services."""

    def save(self, entity: T) -> T: ...

    def find_by_id(self, entity_id: int) -> Optional[T]: ...

    def find_all(self) -> List[T]: ...

    def update(self, entity: T) -> T: ...

    def delete_by_id(self, entity_id: int) -> bool: ...

    def exists_by_id(self, entity_id: int) -> bool: ...

    def count(self) -> int: ...


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def contains_pattern(text: str) -> str:
    """``LIKE`` pattern matching ``text`` anywhere, with wildcards escaped.

    Use with ``ESCAPE '\\'`` in the query.
    """
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class SQLiteRepository(Generic[T]):
    """Base class holding the connection handling for one table."""

    entity_name: str = "Entity"
    table: str = ""

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path

    def _row_to_entity(self, row: sqlite3.Row) -> T:
        raise NotImplementedError

    def _query(self, sql: str, params: Sequence[Any] = ()) -> List[T]:
        conn = self._connect()
        try:
            rows = conn.execute(sql, tuple(params)).fetchall()
            return [self._row_to_entity(row) for row in rows]
        except sqlite3.Error as exc:
            raise self._storage_error("query", exc) from exc
        finally:
            conn.close()

    def _query_one(self, sql: str, params: Sequence[Any] = ()) -> Optional[T]:
        results = self._query(sql, params)
        return results[0] if results else None

    def _scalar(self, sql: str, params: Sequence[Any] = ()) -> Any:
        conn = self._connect()
        try:
            row = conn.execute(sql, tuple(params)).fetchone()
            return row[0] if row else None
        except sqlite3.Error as exc:
            raise self._storage_error("query", exc) from exc
        finally:
            conn.close()

    def _write(self, sql: str, params: Sequence[Any] = ()) -> Tuple[int, Optional[int]]:
        """Execute a single write statement and commit it.

        Returns the affected row count and the last inserted row id.
        """
        conn = self._connect()
        try:
            cursor = conn.cursor()
            cursor.execute(sql, tuple(params))
            conn.commit()
            return cursor.rowcount, cursor.lastrowid
        except sqlite3.Error as exc:
            conn.rollback()
            raise self._storage_error("write", exc) from exc
        finally:
            conn.close()

    def _connect(self) -> sqlite3.Connection:
        try:
            return get_connection(self.db_path)
        except sqlite3.Error as exc:
            raise self._storage_error("connect", exc) from exc

    def _storage_error(self, action: str, exc: Exception) -> StorageError:
        logger.error("Failed to %s %s: %s", action, self.table, exc)
        return StorageError(self.entity_name, f"Failed to {action} {self.table}: {exc}")

    # Generic operations shared by both tables

    def find_by_id(self, entity_id: int) -> Optional[T]:
        return self._query_one(f"SELECT * FROM {self.table} WHERE id = ?", (entity_id,))

    def delete_by_id(self, entity_id: int) -> bool:
        affected, _ = self._write(f"DELETE FROM {self.table} WHERE id = ?", (entity_id,))
        return affected > 0

    def exists_by_id(self, entity_id: int) -> bool:
        return self._scalar(f"SELECT 1 FROM {self.table} WHERE id = ?", (entity_id,)) is not None

    def count(self) -> int:
        return int(self._scalar(f"SELECT COUNT(*) FROM {self.table}") or 0)
