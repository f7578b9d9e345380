"""Query builder and RemoteStore contract shared by every store backend."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Literal, Sequence

FilterOp = Literal["eq", "in"]


@dataclass(frozen=True, slots=True)
class Filter:
    column: str
    op: FilterOp
    value: Any


@dataclass(frozen=True, slots=True)
class QueryResult:
    """Rows returned by one query, plus the exact row count when it was requested."""

    data: list[dict[str, Any]] = field(default_factory=list)
    count: int | None = None


class Query:
    """Fluent read query against one named collection.

    Builder methods mutate and return ``self``; nothing is sent until
    :meth:`execute` is awaited.
    """

    def __init__(self, store: "RemoteStore", table: str) -> None:
        self._store = store
        self.table = table
        self.columns: tuple[str, ...] = ("*",)
        self.count = False
        self.filters: list[Filter] = []
        self.order_by: str | None = None
        self.descending = False
        self.row_limit: int | None = None

    def select(self, *columns: str, count: bool = False) -> "Query":
        self.columns = tuple(columns) or ("*",)
        self.count = count
        return self

    def eq(self, column: str, value: Any) -> "Query":
        self.filters.append(Filter(column, "eq", value))
        return self

    def in_(self, column: str, values: Sequence[Any]) -> "Query":
        self.filters.append(Filter(column, "in", tuple(values)))
        return self

    def order(self, column: str, *, desc: bool = False) -> "Query":
        self.order_by = column
        self.descending = desc
        return self

    def limit(self, n: int) -> "Query":
        if n < 0:
            raise ValueError("limit must be non-negative")
        self.row_limit = n
        return self

    async def execute(self) -> QueryResult:
        return await self._store.execute(self)

    def __repr__(self) -> str:
        return (
            f"Query(table={self.table!r}, columns={self.columns!r}, count={self.count}, "
            f"filters={self.filters!r}, order_by={self.order_by!r}, limit={self.row_limit!r})"
        )


class RemoteStore(ABC):
    """Abstract read access to the named collections of the remote store."""

    def table(self, name: str) -> Query:
        return Query(self, name)

    @abstractmethod
    async def execute(self, query: Query) -> QueryResult:
        """Run ``query`` and return its rows; raise ``RemoteStoreError`` on any failure."""

    async def aclose(self) -> None:
        """Release backend resources. Default is a no-op."""
