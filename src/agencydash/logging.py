"""Process-wide logger for agencydash.

Every record carries a ``session_id`` so log lines from one API process or
CLI invocation can be grouped together.
"""
from __future__ import annotations

import logging
import sys
import uuid

from agencydash.config import settings

_SESSION_ID = uuid.uuid4().hex[:12]
_FORMAT = "%(asctime)s [%(levelname)s] [%(session_id)s] %(name)s: %(message)s"


class _SessionFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = _SESSION_ID
        return True


def get_session_id() -> str:
    return _SESSION_ID


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure the ``agencydash`` logger once; later calls only adjust the level."""
    root = logging.getLogger("agencydash")
    root.setLevel((level or settings.LOG_LEVEL).upper())
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.addFilter(_SessionFilter())
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
    return root


logger = setup_logging()
