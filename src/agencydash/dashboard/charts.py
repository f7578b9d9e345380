"""Chart data shaping for the dashboard pie chart."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

DEFAULT_COLORS = ("#0088FE", "#00C49F", "#FFBB28", "#FF8042", "#8884d8", "#82ca9d")


@dataclass(frozen=True, slots=True)
class PieSlice:
    name: str
    value: float
    color: str
    percent: float

    @property
    def label(self) -> str:
        return f"{self.name}: {self.percent * 100:.0f}%"


def build_pie_slices(items: Iterable[Mapping]) -> list[PieSlice]:
    """Turn ``{"name", "value", "color"?}`` items into colored slices with their share of the total."""
    items = list(items)
    total = sum(float(i["value"]) for i in items)
    slices = []
    for index, item in enumerate(items):
        value = float(item["value"])
        slices.append(PieSlice(
            name=str(item["name"]),
            value=value,
            color=item.get("color") or DEFAULT_COLORS[index % len(DEFAULT_COLORS)],
            percent=value / total if total else 0.0,
        ))
    return slices


def stats_breakdown(stats) -> list[PieSlice]:
    """Pie slices for the headline people counts of a ``DashboardStats``."""
    return build_pie_slices([
        {"name": "Students", "value": stats.total_students},
        {"name": "Applicants", "value": stats.total_applicants},
        {"name": "Agents", "value": stats.total_agents},
    ])
