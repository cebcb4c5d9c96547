"""Chart series construction for a Dataset.

Each dimension becomes one series plotted against the record labels. Styling is
a presentation concern and lives in `core.charting`.
"""

from __future__ import annotations

from .dto import ChartSeries, Dataset


def series_name(index: int) -> str:
    """Return the display name for a zero-based dimension index."""

    return f"Input {index + 1}"


def build_chart_series(dataset: Dataset) -> tuple[ChartSeries, ...]:
    """Build one ChartSeries per dimension, with points in dataset order."""

    return tuple(
        ChartSeries(
            name=series_name(index),
            points=tuple((record.label, record.values[index]) for record in dataset.records),
        )
        for index in range(dataset.dimension_count)
    )
