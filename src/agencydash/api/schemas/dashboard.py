"""Dashboard DTOs: pure Pydantic, zero ORM imports."""
from __future__ import annotations
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel


class DashboardStats(BaseModel):
    total_students: int = 0
    total_universities: int = 0
    active_applications: int = 0
    total_applicants: int = 0
    total_revenue: Decimal = Decimal("0")
    pending_tasks: int = 0
    total_agents: int = 0


class RecentActivity(BaseModel):
    first_name: str
    last_name: str | None = None
    created_at: datetime | None = None


class RecentActivityList(BaseModel):
    items: list[RecentActivity]
    total: int
