"""Agent commission DTOs."""
from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel


class AgentCommission(BaseModel):
    id: int
    name: str
    contact_person: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    commission_rate: float
    status: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    students_count: int
    total_received: float
    commission_due: float


class AgentCommissionList(BaseModel):
    items: list[AgentCommission]
    total: int
