"""Integration tests for the dashboard and agent endpoints."""
from decimal import Decimal

import httpx
from fastapi.testclient import TestClient
from sqlmodel import Session

from agencydash.api.app import create_app
from agencydash.models import Agent, ApplyStudent, FeeCollection, Student


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_stats_empty_store_returns_zeros(client):
    resp = client.get("/dashboard/stats")
    assert resp.status_code == 200
    body = resp.json()
    assert body["total_students"] == 0
    assert body["pending_tasks"] == 0
    assert Decimal(str(body["total_revenue"])) == 0


def test_stats_reflect_store_contents(client, sql_engine):
    with Session(sql_engine) as s:
        s.add_all([Student(first_name="Ada"), Student(first_name="Grace")])
        s.add(ApplyStudent(status="pending"))
        s.add_all([FeeCollection(amount_paid=Decimal("10.25")), FeeCollection(amount_paid=Decimal("0.75"))])
        s.commit()

    body = client.get("/dashboard/stats").json()
    assert body["total_students"] == 2
    assert body["active_applications"] == 1
    assert body["total_applicants"] == 1
    assert Decimal(str(body["total_revenue"])) == Decimal("11.00")


def test_recent_activities_limit(client, sql_engine):
    with Session(sql_engine) as s:
        s.add_all([Student(first_name=f"S{i}") for i in range(8)])
        s.commit()

    body = client.get("/dashboard/recent-activities", params={"limit": 3}).json()
    assert body["total"] == 3
    assert len(body["items"]) == 3


def test_recent_activities_rejects_bad_limit(client):
    assert client.get("/dashboard/recent-activities", params={"limit": 0}).status_code == 422


def test_commissions_endpoint(client, sql_engine):
    with Session(sql_engine) as s:
        s.add(Agent(name="Solo", commission_rate=5))
        s.commit()

    body = client.get("/agents/commissions").json()
    assert body["total"] == 1
    assert body["items"][0]["name"] == "Solo"
    assert body["items"][0]["students_count"] == 0


def test_remote_failure_maps_to_502(mock_store):
    store = mock_store(lambda request: httpx.Response(500, json={"message": "db down"}))
    with TestClient(create_app(store=store)) as c:
        resp = c.get("/dashboard/stats")
    assert resp.status_code == 502
    assert "db down" in resp.json()["detail"]
