"""SQLModel tables mirroring the hosted store's collections.

Only the columns the dashboard reads are declared. The hosted database owns
the real schema; this mirror backs the ``sql`` store backend and the tests.
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Agent(SQLModel, table=True):
    __tablename__ = "agents"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    contact_person: str = ""
    email: str = ""
    phone: Optional[str] = None
    location: Optional[str] = None
    commission_rate: float = 0.0
    status: str = "active"
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)


class Student(SQLModel, table=True):
    __tablename__ = "students"

    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str
    last_name: str = ""
    agent_id: Optional[int] = Field(default=None, foreign_key="agents.id")
    is_active: bool = True
    created_at: datetime = Field(default_factory=_utcnow)


class University(SQLModel, table=True):
    __tablename__ = "universities"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    country: Optional[str] = None


class ApplyStudent(SQLModel, table=True):
    __tablename__ = "apply_students"

    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str = ""
    last_name: str = ""
    status: str = "pending"
    created_at: datetime = Field(default_factory=_utcnow)


class FeeCollection(SQLModel, table=True):
    __tablename__ = "fee_collections"

    id: Optional[int] = Field(default=None, primary_key=True)
    student_id: Optional[int] = Field(default=None, foreign_key="students.id")
    amount_paid: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)


class FeePayment(SQLModel, table=True):
    __tablename__ = "fee_payments"

    id: Optional[int] = Field(default=None, primary_key=True)
    student_id: Optional[int] = Field(default=None, foreign_key="students.id")
    amount_due: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)
    amount_paid: Decimal = Field(default=Decimal("0"), max_digits=12, decimal_places=2)


class TodoTask(SQLModel, table=True):
    __tablename__ = "todo_tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    status: str = "pending"
    due_date: Optional[datetime] = None
