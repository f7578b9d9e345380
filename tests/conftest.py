"""Shared test fixtures.

  sql_engine: temp-file SQLite engine with the mirror tables created.
  sql_store: SqlStore bound to ``sql_engine``.
  client: FastAPI TestClient wired to ``sql_store``.
  mock_store: factory for a PostgrestStore whose HTTP layer is an httpx.MockTransport.
"""
import httpx
import pytest
from sqlmodel import SQLModel, create_engine


@pytest.fixture
def sql_engine(tmp_path):
    """Isolated temp-file SQLite DB (not :memory:, queries run on worker threads)."""
    db_path = tmp_path / "test_agencydash.db"
    engine = create_engine(
        f"sqlite:///{db_path}", echo=False, connect_args={"check_same_thread": False},
    )

    import agencydash.models  # noqa: F401  register all mirror tables
    SQLModel.metadata.create_all(engine)

    yield engine

    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def sql_store(sql_engine):
    from agencydash.infra.store.sql import SqlStore
    return SqlStore(sql_engine)


@pytest.fixture
def client(sql_store):
    """FastAPI TestClient backed by the isolated SQL store."""
    from fastapi.testclient import TestClient
    from agencydash.api.app import create_app

    app = create_app(store=sql_store)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def mock_store():
    """Build a PostgrestStore that answers every request with ``handler``."""
    from agencydash.infra.store.postgrest import PostgrestStore

    def _make(handler) -> PostgrestStore:
        http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return PostgrestStore("https://db.example.test", "anon-key", client=http)

    return _make
