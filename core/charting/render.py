"""Rendering of analysis chart series into Chart.js line chart payloads."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TypedDict

from analysis.dto import ChartSeries


class ChartDataset(TypedDict, total=False):
    """A Chart.js dataset payload for the dashboard."""

    label: str
    data: list[float]
    borderColor: str
    backgroundColor: str
    borderWidth: int
    fill: bool
    tension: float
    pointRadius: int
    pointHoverRadius: int
    pointBackgroundColor: str
    pointBorderColor: str
    pointBorderWidth: int
    pointHoverBackgroundColor: str
    pointHoverBorderColor: str
    pointHoverBorderWidth: int


class ChartData(TypedDict):
    """The full Chart.js payload (labels + datasets) for a chart panel."""

    labels: list[str]
    datasets: list[ChartDataset]


@dataclass(frozen=True, slots=True)
class RenderedChart:
    """A rendered line chart panel."""

    data: ChartData
    error: str | None = None


MAX_CHART_LABELS = 400
HUE_STEP = 60


def series_color(index: int, *, alpha: float | None = None) -> str:
    """Return the CSS color for a zero-based series index.

    Args:
        index: Series (dimension) index.
        alpha: Optional opacity; when given an `hsla()` color is returned.

    Returns:
        An `hsl()`/`hsla()` color string with the hue rotated per series.
    """

    hue = index * HUE_STEP
    if alpha is None:
        return f"hsl({hue}, 70%, 50%)"
    return f"hsla({hue}, 70%, 50%, {alpha})"


def render_line_chart(*, series: Sequence[ChartSeries], labels: Sequence[str]) -> RenderedChart:
    """Render chart series as a Chart.js line chart payload.

    Args:
        series: One ChartSeries per dimension.
        labels: Record labels in dataset order (the x-axis).

    Returns:
        RenderedChart with one dataset per series. When there are more labels
        than can be rendered safely, the payload is empty and `error` is set.
    """

    if len(labels) > MAX_CHART_LABELS:
        return RenderedChart(
            data={"labels": [], "datasets": []},
            error=f"Too many data points to render safely (>{MAX_CHART_LABELS}). Submit a smaller dataset.",
        )

    datasets = [_dataset(label=item.name, data=item.values, index=index) for index, item in enumerate(series)]
    return RenderedChart(data={"labels": list(labels), "datasets": datasets})


def _dataset(*, label: str, data: list[float], index: int) -> ChartDataset:
    """Build a Chart.js dataset dict with consistent styling."""

    color = series_color(index)
    return {
        "label": label,
        "data": data,
        "borderColor": color,
        "backgroundColor": series_color(index, alpha=0.1),
        "borderWidth": 2,
        "fill": True,
        "tension": 0.4,
        "pointRadius": 6,
        "pointHoverRadius": 8,
        "pointBackgroundColor": color,
        "pointBorderColor": "#fff",
        "pointBorderWidth": 2,
        "pointHoverBackgroundColor": "#fff",
        "pointHoverBorderColor": color,
        "pointHoverBorderWidth": 2,
    }
