"""FastAPI dependencies."""
from __future__ import annotations
from fastapi import Request
from agencydash.infra.store.base import RemoteStore


def get_store(request: Request) -> RemoteStore:
    """The store opened by the app lifespan; shared across requests."""
    return request.app.state.store
