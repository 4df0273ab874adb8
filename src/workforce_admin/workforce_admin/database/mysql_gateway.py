from __future__ import annotations

import re
import uuid
from typing import Any, List, Mapping, Optional

from ..core.exceptions import StoreError
from .connection import DatabaseConnection
from .gateway import DataGateway, Row, require_collection
from .mysql_base import db_cursor, fetchall, fetchone

_IDENTIFIER = re.compile(r"^[a-z_][a-z0-9_]*$")


def _column(name: str) -> str:
    # Column names are interpolated into SQL; values always go through params.
    if not _IDENTIFIER.match(name or ""):
        raise StoreError(f"Invalid column name: {name!r}")
    return f"`{name}`"


def _where(filters: Optional[Mapping[str, Any]]) -> tuple[str, list[object]]:
    if not filters:
        return "", []

    clauses: list[str] = []
    params: list[object] = []
    for col, value in filters.items():
        if value is None:
            clauses.append(f"{_column(col)} IS NULL")
        else:
            clauses.append(f"{_column(col)}=%s")
            params.append(value)
    return " WHERE " + " AND ".join(clauses), params


class MySQLGateway(DataGateway):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list(
        self,
        collection: str,
        filters: Optional[Mapping[str, Any]] = None,
        *,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Row]:
        table = require_collection(collection)
        where, params = _where(filters)

        sql = f"SELECT * FROM `{table}`{where}"
        if order_by:
            sql += f" ORDER BY {_column(order_by)} {'DESC' if descending else 'ASC'}"
        if limit is not None:
            sql += " LIMIT %s"
            params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return fetchall(cur)

    def insert(self, collection: str, record: Mapping[str, Any]) -> Row:
        table = require_collection(collection)
        values = dict(record)
        values.setdefault("id", str(uuid.uuid4()))

        cols = ", ".join(_column(c) for c in values)
        marks = ", ".join(["%s"] * len(values))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"INSERT INTO `{table}`({cols}) VALUES({marks})", tuple(values.values()))

            # Read back so server-side defaults (created_at, ...) are included.
            cur.execute(f"SELECT * FROM `{table}` WHERE `id`=%s", (values["id"],))
            row = fetchone(cur)
            if not row:
                raise StoreError(f"Inserted row not found in {table}")
            return row

    def update(self, collection: str, record_id: str, patch: Mapping[str, Any]) -> None:
        table = require_collection(collection)
        if not patch:
            return

        assignments = ", ".join(f"{_column(c)}=%s" for c in patch)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE `{table}` SET {assignments} WHERE `id`=%s",
                (*patch.values(), record_id),
            )

    def delete(self, collection: str, record_id: str) -> None:
        table = require_collection(collection)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM `{table}` WHERE `id`=%s", (record_id,))

    def delete_where(self, collection: str, filters: Mapping[str, Any]) -> None:
        table = require_collection(collection)
        if not filters:
            raise StoreError("delete_where requires at least one filter")

        where, params = _where(filters)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM `{table}`{where}", tuple(params))
