"""PostgREST backend: the hosted store's REST endpoint over httpx."""
from __future__ import annotations

import logging
from typing import Any

import httpx

from agencydash.domain.exceptions import RemoteStoreError
from agencydash.infra.store.base import Filter, Query, QueryResult, RemoteStore

logger = logging.getLogger(__name__)


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def _encode_filter(f: Filter) -> str:
    if f.op == "in":
        return "in.(" + ",".join(_encode_value(v) for v in f.value) + ")"
    if f.value is None:
        return "is.null"
    return f"eq.{_encode_value(f.value)}"


def parse_content_range(header: str | None) -> int | None:
    """Return the total from a ``Content-Range`` header such as ``0-9/42`` or ``*/0``."""
    if not header or "/" not in header:
        return None
    total = header.rsplit("/", 1)[1]
    if total == "*":
        return None
    try:
        return int(total)
    except ValueError:
        return None


class PostgrestStore(RemoteStore):
    """Reads collections from ``{base_url}/rest/v1/{table}``.

    Timeouts are whatever the underlying ``httpx.AsyncClient`` is configured
    with; nothing is retried.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = 30.0,
    ) -> None:
        headers = {"Accept": "application/json"}
        if api_key:
            headers["apikey"] = api_key
            headers["Authorization"] = f"Bearer {api_key}"
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._client.headers.update(headers)
        self._base_url = base_url.rstrip("/")

    def build_params(self, query: Query) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = [("select", ",".join(query.columns))]
        for f in query.filters:
            params.append((f.column, _encode_filter(f)))
        if query.order_by:
            direction = "desc" if query.descending else "asc"
            params.append(("order", f"{query.order_by}.{direction}"))
        if query.row_limit is not None:
            params.append(("limit", str(query.row_limit)))
        return params

    async def execute(self, query: Query) -> QueryResult:
        url = f"{self._base_url}/rest/v1/{query.table}"
        headers = {"Prefer": "count=exact"} if query.count else {}
        try:
            resp = await self._client.get(url, params=self.build_params(query), headers=headers)
        except httpx.HTTPError as exc:
            raise RemoteStoreError(f"Request to {query.table!r} failed: {exc}") from exc

        if not resp.is_success:
            try:
                detail = resp.json().get("message", resp.text)
            except ValueError:
                detail = resp.text
            raise RemoteStoreError(
                f"Query on {query.table!r} returned {resp.status_code}: {detail}",
                status_code=resp.status_code,
            )

        try:
            rows = resp.json()
        except ValueError as exc:
            raise RemoteStoreError(f"Invalid JSON from {query.table!r}") from exc
        if not isinstance(rows, list):
            raise RemoteStoreError(f"Unexpected payload from {query.table!r}")

        count = parse_content_range(resp.headers.get("content-range")) if query.count else None
        if query.count and count is None:
            count = len(rows)
        logger.debug("Fetched %d rows from %s (count=%s)", len(rows), query.table, count)
        return QueryResult(data=rows, count=count)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
