"""Agent commission calculation.

For each agent, commission is earned on what the agent's students have paid
(fee collections plus fee payments) and is still owed on the positive
outstanding balance of their fee payments.
"""
from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from agencydash.api.schemas.agents import AgentCommission
from agencydash.domain.exceptions import RemoteStoreError
from agencydash.infra.store.base import RemoteStore
from agencydash.services.dashboard_service import sum_amounts

logger = logging.getLogger(__name__)

_CENT = Decimal("0.01")


def _dec(value: Any) -> Decimal:
    return Decimal(str(value)) if value is not None else Decimal("0")


def _round(value: Decimal) -> float:
    return float(value.quantize(_CENT, rounding=ROUND_HALF_UP))


def outstanding_due(payments: list[dict]) -> Decimal:
    """Sum of ``amount_due - amount_paid`` over payments, ignoring overpaid rows."""
    total = Decimal("0")
    for p in payments:
        due = _dec(p.get("amount_due")) - _dec(p.get("amount_paid"))
        if due > 0:
            total += due
    return total


class CommissionService:
    def __init__(self, store: RemoteStore) -> None:
        self._store = store

    async def _optional_rows(self, table: str, columns: tuple[str, ...], student_ids: list[int], agent_id: int) -> list[dict]:
        try:
            result = await self._store.table(table).select(*columns).in_("student_id", student_ids).execute()
        except RemoteStoreError as exc:
            logger.error("Error fetching %s for agent %s: %s", table, agent_id, exc.message)
            return []
        return result.data

    async def _commission_for(self, agent: dict) -> AgentCommission:
        agent_id = agent["id"]
        zero = dict(students_count=0, total_received=0.0, commission_due=0.0)

        try:
            students = await self._store.table("students").select("id").eq("agent_id", agent_id).execute()
        except RemoteStoreError as exc:
            logger.error("Error fetching students for agent %s: %s", agent_id, exc.message)
            return AgentCommission(**agent, **zero)

        student_ids = [s["id"] for s in students.data]
        if not student_ids:
            return AgentCommission(**agent, **zero)

        collections = await self._optional_rows("fee_collections", ("student_id", "amount_paid"), student_ids, agent_id)
        payments = await self._optional_rows(
            "fee_payments", ("student_id", "amount_due", "amount_paid"), student_ids, agent_id,
        )

        paid = sum_amounts(collections, "amount_paid") + sum_amounts(payments, "amount_paid")
        due = outstanding_due(payments)
        rate = _dec(agent.get("commission_rate")) / 100

        logger.info(
            "Agent %s: paid=%s due=%s rate=%s%%", agent.get("name"), paid, due, agent.get("commission_rate"),
        )
        return AgentCommission(
            **agent,
            students_count=len(student_ids),
            total_received=_round(paid * rate),
            commission_due=_round(due * rate),
        )

    async def calculate(self) -> list[AgentCommission]:
        """Commission figures for every agent, newest agent first."""
        try:
            agents = await self._store.table("agents").select("*").order("created_at", desc=True).execute()
        except RemoteStoreError:
            logger.exception("Error fetching agents")
            raise

        logger.info("Calculating commissions for %d agents", len(agents.data))
        return [await self._commission_for(agent) for agent in agents.data]
