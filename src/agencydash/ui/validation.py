"""Pre-flight validation for the Streamlit UI.

No ORM, no store. Uses the API client for backend checks.
"""
from typing import List


def validate_backend_connection(base_url: str | None = None) -> List[str]:
    """Validate that the FastAPI backend is reachable."""
    errors = []
    try:
        from agencydash.ui.api_client import DashboardClient
        client = DashboardClient(base_url)
        client.health()
    except Exception as e:
        errors.append(f"Backend connection failed: {e}")
    return errors


def validate_counter_settings() -> List[str]:
    """Flag counter settings that would make the dashboard animation misbehave."""
    from agencydash.config import settings
    errors = []
    if settings.COUNTER_FRAME_INTERVAL_MS <= 0:
        errors.append("COUNTER_FRAME_INTERVAL_MS must be positive")
    if settings.COUNTER_DURATION_MS < 0:
        errors.append("COUNTER_DURATION_MS is negative; counters will jump straight to their value")
    return errors


def run_all_checks() -> List[str]:
    """Run all validation checks."""
    errors = []
    errors.extend(validate_counter_settings())
    errors.extend(validate_backend_connection())
    return errors
