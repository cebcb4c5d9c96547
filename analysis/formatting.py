"""Display formatting for the statistics panel."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from .dto import DimensionStats, StatsPanelRow

PANEL_DECIMALS: Final[int] = 3


def format_value(value: float, *, decimals: int = PANEL_DECIMALS) -> str:
    """Format a float with a fixed number of decimals."""

    return f"{value:.{decimals}f}"


def format_range(stats: DimensionStats, *, decimals: int = PANEL_DECIMALS) -> str:
    """Format a `[minimum, maximum]` range string."""

    return f"[{format_value(stats.minimum, decimals=decimals)}, {format_value(stats.maximum, decimals=decimals)}]"


def format_stats_panel(stats: Iterable[DimensionStats]) -> tuple[StatsPanelRow, ...]:
    """Format statistics for the panel, index-aligned with `stats`.

    Args:
        stats: Per-dimension statistics.

    Returns:
        Panel rows titled "Input N Statistics" with 3-decimal values.
    """

    return tuple(
        StatsPanelRow(
            title=f"Input {index} Statistics",
            average=format_value(item.average),
            std_deviation=format_value(item.std_deviation),
            range=format_range(item),
        )
        for index, item in enumerate(stats, start=1)
    )
