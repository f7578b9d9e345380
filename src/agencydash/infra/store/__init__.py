"""Remote data store contract and backends."""
from __future__ import annotations

from agencydash.infra.store.base import Filter, Query, QueryResult, RemoteStore
from agencydash.infra.store.postgrest import PostgrestStore
from agencydash.infra.store.sql import SqlStore


def create_store() -> RemoteStore:
    """Build the store selected by ``settings.STORE_BACKEND``."""
    from agencydash.config import settings

    if settings.STORE_BACKEND == "sql":
        from agencydash.infra.db.engine import engine

        return SqlStore(engine)
    return PostgrestStore(settings.STORE_URL, settings.store_api_key)


__all__ = [
    "Filter",
    "PostgrestStore",
    "Query",
    "QueryResult",
    "RemoteStore",
    "SqlStore",
    "create_store",
]
