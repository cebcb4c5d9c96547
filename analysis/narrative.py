"""Plain-language summaries for per-dimension statistics.

Summaries are written for a non-technical reader. The variance wording is a
single threshold rule on the standard deviation; the threshold is absolute, not
relative to the data, so callers working with data far from unit scale should
pass a threshold that suits it.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from .dto import DimensionStats

DEFAULT_VARIATION_THRESHOLD: Final[float] = 1.0

LOW_VARIATION_TEXT: Final[str] = (
    "This is low variation: the numbers are close to each other, like classmates in a group photo."
)
SPREAD_OUT_TEXT: Final[str] = (
    "This means the numbers are spread out, like students running across a playground."
)


def is_low_variation(stats: DimensionStats, *, threshold: float = DEFAULT_VARIATION_THRESHOLD) -> bool:
    """Return True when the standard deviation is below `threshold`."""

    return stats.std_deviation < threshold


def narrate_dimension(
    stats: DimensionStats,
    *,
    position: int,
    variation_threshold: float = DEFAULT_VARIATION_THRESHOLD,
) -> str:
    """Describe one dimension's statistics in plain language.

    Args:
        stats: Statistics for the dimension.
        position: 1-based display position ("Input 1", "Input 2", ...).
        variation_threshold: Standard deviation below which the values are
            described as having low variation.

    Returns:
        A multi-line paragraph with values formatted to 2 decimals.
    """

    variation = (
        LOW_VARIATION_TEXT
        if is_low_variation(stats, threshold=variation_threshold)
        else SPREAD_OUT_TEXT
    )
    lines = [
        f"Input {position}:",
        f'- The average is like the "middle value" ({stats.average:.2f}), '
        "helping us see what most numbers look like.",
        f"- The standard deviation is {stats.std_deviation:.2f}. {variation}",
        f"- The range ({stats.minimum:.2f} to {stats.maximum:.2f}) "
        "shows the smallest and largest values.",
    ]
    return "\n".join(lines)


def narrate_dimension_stats(
    stats: Iterable[DimensionStats],
    *,
    variation_threshold: float = DEFAULT_VARIATION_THRESHOLD,
) -> tuple[str, ...]:
    """Narrate each dimension, index-aligned with `stats`."""

    return tuple(
        narrate_dimension(item, position=index, variation_threshold=variation_threshold)
        for index, item in enumerate(stats, start=1)
    )
