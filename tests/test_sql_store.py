"""Tests for the SQL store backend against a temp-file SQLite DB."""
import asyncio
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from sqlmodel import Session

from agencydash.domain.exceptions import RemoteStoreError
from agencydash.models import FeeCollection, Student


def _seed_students(engine) -> None:
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    with Session(engine) as s:
        for i, name in enumerate(["Ada", "Grace", "Linus"]):
            s.add(Student(first_name=name, last_name="X", agent_id=None, created_at=base + timedelta(days=i)))
        s.commit()


def test_select_with_order_and_limit(sql_store, sql_engine):
    _seed_students(sql_engine)
    result = asyncio.run(
        sql_store.table("students").select("first_name").order("created_at", desc=True).limit(2).execute()
    )
    assert [r["first_name"] for r in result.data] == ["Linus", "Grace"]
    assert result.count is None


def test_count_ignores_limit(sql_store, sql_engine):
    _seed_students(sql_engine)
    result = asyncio.run(sql_store.table("students").select("id", count=True).limit(1).execute())
    assert len(result.data) == 1
    assert result.count == 3


def test_eq_and_in_filters(sql_store, sql_engine):
    _seed_students(sql_engine)
    result = asyncio.run(sql_store.table("students").select("first_name", count=True).eq("first_name", "Ada").execute())
    assert result.count == 1
    result = asyncio.run(sql_store.table("students").select("id").in_("first_name", ["Ada", "Grace"]).execute())
    assert len(result.data) == 2


def test_decimal_amounts_round_trip(sql_store, sql_engine):
    with Session(sql_engine) as s:
        s.add(FeeCollection(amount_paid=Decimal("100.50")))
        s.commit()
    result = asyncio.run(sql_store.table("fee_collections").select("amount_paid").execute())
    assert Decimal(str(result.data[0]["amount_paid"])) == Decimal("100.50")


def test_unknown_collection_raises(sql_store):
    with pytest.raises(RemoteStoreError):
        asyncio.run(sql_store.table("nope").select("id").execute())


def test_unknown_column_raises(sql_store):
    with pytest.raises(RemoteStoreError):
        asyncio.run(sql_store.table("students").select("shoe_size").execute())
    with pytest.raises(RemoteStoreError):
        asyncio.run(sql_store.table("students").select("id").eq("shoe_size", 9).execute())
