"""Unit tests for chart series construction and Chart.js payload rendering."""

from __future__ import annotations

import pytest

from analysis.dto import ChartSeries, Dataset
from analysis.series import build_chart_series
from core.charting.options import CHART_TITLE, LINE_CHART_OPTIONS
from core.charting.render import MAX_CHART_LABELS, render_line_chart, series_color

pytestmark = pytest.mark.unit


def test_one_series_per_dimension_in_dataset_order(two_record_dataset) -> None:
    """Each dimension becomes a named series of (label, value) points."""

    series = build_chart_series(two_record_dataset)

    assert series == (
        ChartSeries(name="Input 1", points=(("a", 1.0), ("b", 3.0))),
        ChartSeries(name="Input 2", points=(("a", 2.0), ("b", 4.0))),
    )
    assert series[1].values == [2.0, 4.0]


def test_empty_dataset_has_no_series() -> None:
    assert build_chart_series(Dataset()) == ()


def test_series_colors_rotate_hue() -> None:
    """Series colors step the hue by 60 degrees."""

    assert series_color(0) == "hsl(0, 70%, 50%)"
    assert series_color(2) == "hsl(120, 70%, 50%)"
    assert series_color(1, alpha=0.1) == "hsla(60, 70%, 50%, 0.1)"


def test_render_line_chart_builds_labels_and_datasets(pattern_dataset) -> None:
    """The payload carries dataset labels and one styled dataset per series."""

    chart = render_line_chart(series=build_chart_series(pattern_dataset), labels=pattern_dataset.labels)

    assert chart.error is None
    assert chart.data["labels"] == ["P1", "P2", "P3", "P4"]
    assert [dataset["label"] for dataset in chart.data["datasets"]] == ["Input 1", "Input 2", "Input 3"]

    second = chart.data["datasets"][1]
    assert second["data"] == [10.0, 14.0, 2.0, 6.0]
    assert second["borderColor"] == "hsl(60, 70%, 50%)"
    assert second["backgroundColor"] == "hsla(60, 70%, 50%, 0.1)"
    assert second["pointHoverBorderColor"] == second["borderColor"]
    assert second["fill"] is True
    assert second["tension"] == 0.4


def test_render_line_chart_refuses_oversized_datasets() -> None:
    """Too many labels produce an empty payload with an error message."""

    labels = [f"r{idx}" for idx in range(MAX_CHART_LABELS + 1)]
    series = [ChartSeries(name="Input 1", points=tuple((label, 0.0) for label in labels))]

    chart = render_line_chart(series=series, labels=labels)

    assert chart.data == {"labels": [], "datasets": []}
    assert chart.error is not None
    assert str(MAX_CHART_LABELS) in chart.error


def test_chart_options_carry_title() -> None:
    """Static options are plain data with the chart title."""

    assert LINE_CHART_OPTIONS["plugins"]["title"]["text"] == CHART_TITLE
    assert LINE_CHART_OPTIONS["interaction"] == {"mode": "index", "intersect": False}
