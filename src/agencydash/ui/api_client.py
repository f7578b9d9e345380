"""Typed HTTP client for Streamlit pages.

Only imports from ``agencydash.api.schemas``. Never ORM, never the store.
Instantiate via ``get_client()`` which caches per Streamlit session.
"""
from __future__ import annotations

import httpx
import streamlit as st

from agencydash.api.schemas.dashboard import DashboardStats, RecentActivityList
from agencydash.api.schemas.agents import AgentCommissionList
from agencydash.config import settings


class APIError(Exception):
    """Raised when the backend returns a 4xx/5xx response or cannot be reached."""

    def __init__(self, status_code: int, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"[{status_code}] {detail}")


class DashboardClient:
    """One method per backend endpoint.  All return pure Pydantic DTOs."""

    def __init__(self, base_url: str | None = None, *, transport: httpx.BaseTransport | None = None) -> None:
        self._client = httpx.Client(base_url=base_url or settings.API_BASE_URL, timeout=30.0, transport=transport)

    def _get(self, path: str, **params) -> httpx.Response:
        try:
            resp = self._client.get(path, params=params or None)
        except httpx.HTTPError as exc:
            raise APIError(0, f"Backend unreachable: {exc}") from exc
        if resp.is_success:
            return resp
        try:
            detail = resp.json().get("detail", resp.text)
        except ValueError:
            detail = resp.text
        raise APIError(resp.status_code, detail)

    def get_dashboard_stats(self) -> DashboardStats:
        return DashboardStats.model_validate(self._get("/dashboard/stats").json())

    def get_recent_activities(self, limit: int = 5) -> RecentActivityList:
        return RecentActivityList.model_validate(self._get("/dashboard/recent-activities", limit=limit).json())

    def get_agent_commissions(self) -> AgentCommissionList:
        return AgentCommissionList.model_validate(self._get("/agents/commissions").json())

    def health(self) -> dict:
        return self._get("/health").json()


def load_stats_or_default(client: DashboardClient) -> tuple[DashboardStats, str | None]:
    """Stats for display; on failure, zeroed stats plus a user-facing notice."""
    try:
        return client.get_dashboard_stats(), None
    except APIError as e:
        return DashboardStats(), f"Failed to load dashboard statistics: {e.detail}"


# ------------------------------------------------------------------
# Streamlit helper: one client per session
# ------------------------------------------------------------------

def get_client() -> DashboardClient:
    """Return a cached ``DashboardClient`` for the current Streamlit session."""
    if "agencydash_api_client" not in st.session_state:
        base_url = st.session_state.get("agencydash_api_url", settings.API_BASE_URL)
        st.session_state["agencydash_api_client"] = DashboardClient(base_url=base_url)
    return st.session_state["agencydash_api_client"]
