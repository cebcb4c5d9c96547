"""Static Chart.js options for the input pattern line chart.

These options are presentation data only; they are serialized into the page and
handed to Chart.js unchanged. The tooltip value format (3 decimals) is applied
by the dashboard script, since callbacks cannot be expressed as JSON.
"""

from __future__ import annotations

from typing import Final

CHART_TITLE: Final[str] = "Neural Network Input Patterns"
TOOLTIP_DECIMALS: Final[int] = 3

LINE_CHART_OPTIONS: Final[dict[str, object]] = {
    "responsive": True,
    "interaction": {"mode": "index", "intersect": False},
    "plugins": {
        "legend": {
            "position": "top",
            "labels": {
                "padding": 20,
                "font": {"size": 13, "weight": "500"},
                "usePointStyle": True,
                "pointStyle": "circle",
            },
        },
        "title": {
            "display": True,
            "text": CHART_TITLE,
            "font": {"size": 16, "weight": "600"},
            "padding": {"bottom": 30},
        },
        "tooltip": {
            "backgroundColor": "rgba(0, 0, 0, 0.8)",
            "titleFont": {"size": 13, "weight": "600"},
            "bodyFont": {"size": 12},
            "padding": 12,
            "usePointStyle": True,
        },
    },
    "scales": {
        "x": {
            "grid": {"display": False},
            "ticks": {"padding": 10, "font": {"size": 12}},
        },
        "y": {
            "grid": {"color": "rgba(255, 255, 255, 0.1)"},
            "ticks": {"padding": 10, "font": {"size": 12}},
        },
    },
    "animation": {"duration": 1000, "easing": "easeInOutQuart"},
}
