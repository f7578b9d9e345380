"""Singleton engine for the local SQL mirror."""
from sqlmodel import create_engine

from agencydash.config import settings
import agencydash.models  # noqa: F401   # registers the mirror tables

_connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, echo=False, connect_args=_connect_args)

__all__ = ["engine"]
