"""Dashboard statistics use-case service."""
from __future__ import annotations

import asyncio
import logging
from decimal import Decimal

from agencydash.api.schemas.dashboard import DashboardStats, RecentActivity
from agencydash.infra.store.base import QueryResult, RemoteStore

logger = logging.getLogger(__name__)


def sum_amounts(rows: list[dict], column: str) -> Decimal:
    """Sum a monetary column; missing or null values count as zero."""
    total = Decimal("0")
    for row in rows:
        value = row.get(column)
        if value is not None:
            total += Decimal(str(value))
    return total


class DashboardService:
    def __init__(self, store: RemoteStore) -> None:
        self._store = store

    async def get_statistics(self) -> DashboardStats:
        """Fan out the count/sum queries and merge them into one record.

        All-or-nothing: if any query fails the error is logged and re-raised
        and no partial stats are returned.
        """
        store = self._store
        try:
            (
                students,
                universities,
                applicants,
                pending_applications,
                fees,
                pending_tasks,
                agents,
            ) = await asyncio.gather(
                store.table("students").select("id", count=True).execute(),
                store.table("universities").select("id", count=True).execute(),
                store.table("apply_students").select("id", count=True).execute(),
                store.table("apply_students").select("id", count=True).eq("status", "pending").execute(),
                store.table("fee_collections").select("amount_paid").execute(),
                store.table("todo_tasks").select("id", count=True).eq("status", "pending").execute(),
                store.table("agents").select("id", count=True).execute(),
            )
        except Exception:
            logger.exception("Error fetching dashboard statistics")
            raise

        return DashboardStats(
            total_students=_count(students),
            total_universities=_count(universities),
            active_applications=_count(pending_applications),
            total_applicants=_count(applicants),
            total_revenue=sum_amounts(fees.data, "amount_paid"),
            pending_tasks=_count(pending_tasks),
            total_agents=_count(agents),
        )

    async def get_recent_activities(self, limit: int = 5) -> list[RecentActivity]:
        try:
            result = await (
                self._store.table("students")
                .select("first_name", "last_name", "created_at")
                .order("created_at", desc=True)
                .limit(limit)
                .execute()
            )
        except Exception:
            logger.exception("Error fetching recent activities")
            raise
        return [RecentActivity.model_validate(row) for row in result.data]


def _count(result: QueryResult) -> int:
    return result.count or 0
