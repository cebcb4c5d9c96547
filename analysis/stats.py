"""Per-dimension descriptive statistics for a Dataset."""

from __future__ import annotations

import math

from .dto import Dataset, DimensionStats


def compute_dimension_stats(dataset: Dataset) -> tuple[DimensionStats, ...]:
    """Compute mean, min, max, and population standard deviation per dimension.

    Args:
        dataset: Dataset whose records share one value length.

    Returns:
        One DimensionStats per dimension, index-aligned with record values. An
        empty dataset yields an empty tuple.
    """

    stats: list[DimensionStats] = []
    for index in range(dataset.dimension_count):
        column = [record.values[index] for record in dataset.records]
        stats.append(summarize_column(column))
    return tuple(stats)


def summarize_column(column: list[float]) -> DimensionStats:
    """Summarize a single non-empty column of values.

    Args:
        column: Values for one dimension, in dataset order.

    Returns:
        DimensionStats for the column. Plain float arithmetic is used, so
        columns of extreme magnitude overflow to `inf` rather than raising.
    """

    count = len(column)
    minimum = min(column)
    maximum = max(column)
    # Rounding (or overflow) in the mean can land outside the observed range.
    average = min(max(sum(column) / count, minimum), maximum)
    # Float `**` raises OverflowError where `*` yields inf.
    squared_deviations = sum((value - average) * (value - average) for value in column)
    return DimensionStats(
        average=average,
        minimum=minimum,
        maximum=maximum,
        std_deviation=math.sqrt(squared_deviations / count),
    )
