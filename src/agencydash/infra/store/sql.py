"""SQL backend: the RemoteStore contract over a SQLAlchemy engine.

Queries run synchronously in a worker thread so callers keep the same
``await`` interface as the HTTP backend.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any

from sqlalchemy import Table, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel

from agencydash.domain.exceptions import RemoteStoreError
from agencydash.infra.store.base import Query, QueryResult, RemoteStore

logger = logging.getLogger(__name__)


class SqlStore(RemoteStore):
    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def _table(self, name: str) -> Table:
        table = SQLModel.metadata.tables.get(name)
        if table is None:
            raise RemoteStoreError(f"Unknown collection {name!r}", status_code=404)
        return table

    def _where(self, table: Table, query: Query) -> list[Any]:
        clauses = []
        for f in query.filters:
            if f.column not in table.c:
                raise RemoteStoreError(f"Unknown column {f.column!r} on {table.name!r}", status_code=400)
            col = table.c[f.column]
            if f.op == "in":
                clauses.append(col.in_(list(f.value)))
            elif f.value is None:
                clauses.append(col.is_(None))
            else:
                clauses.append(col == f.value)
        return clauses

    def _run(self, query: Query) -> QueryResult:
        table = self._table(query.table)
        where = self._where(table, query)

        if query.columns == ("*",):
            cols = list(table.c)
        else:
            missing = [c for c in query.columns if c not in table.c]
            if missing:
                raise RemoteStoreError(f"Unknown column(s) {missing} on {table.name!r}", status_code=400)
            cols = [table.c[c] for c in query.columns]

        stmt = select(*cols).where(*where)
        if query.order_by:
            if query.order_by not in table.c:
                raise RemoteStoreError(f"Unknown column {query.order_by!r} on {table.name!r}", status_code=400)
            order_col = table.c[query.order_by]
            stmt = stmt.order_by(order_col.desc() if query.descending else order_col.asc())
        if query.row_limit is not None:
            stmt = stmt.limit(query.row_limit)

        try:
            with Session(self._engine) as s:
                rows = [dict(r._mapping) for r in s.execute(stmt)]
                count = None
                if query.count:
                    count = s.execute(select(func.count()).select_from(table).where(*where)).scalar_one()
        except SQLAlchemyError as exc:
            raise RemoteStoreError(f"Query on {table.name!r} failed: {exc}") from exc

        logger.debug("Fetched %d rows from %s (count=%s)", len(rows), table.name, count)
        return QueryResult(data=rows, count=count)

    async def execute(self, query: Query) -> QueryResult:
        return await asyncio.to_thread(self._run, query)
