"""Orchestration entry points for the Analysis Engine.

The Analysis Engine is a pure, non-Django module that accepts in-memory inputs
and returns DTOs. It must not import Django.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from .dto import Dataset, DatasetAnalysis
from .formatting import format_stats_panel
from .narrative import DEFAULT_VARIATION_THRESHOLD, narrate_dimension_stats
from .series import build_chart_series
from .stats import compute_dimension_stats

logger = logging.getLogger(__name__)


def analyze_dataset(
    dataset: Dataset,
    *,
    variation_threshold: float = DEFAULT_VARIATION_THRESHOLD,
) -> DatasetAnalysis:
    """Analyze a dataset for the dashboard.

    Args:
        dataset: Validated dataset (see `analysis.dataset.build_dataset`).
        variation_threshold: Standard deviation threshold for narrative wording.

    Returns:
        DatasetAnalysis with statistics, narratives, chart series, and formatted
        panel rows. An empty dataset yields an empty analysis.

    Notes:
        Results are memoized on `(dataset, variation_threshold)`. Datasets that
        compare equal share one cached analysis; `InputRecord.of` stores -0.0
        as 0.0 so such datasets also format identically.
    """

    return _analyze_cached(dataset, float(variation_threshold))


@lru_cache(maxsize=64)
def _analyze_cached(dataset: Dataset, variation_threshold: float) -> DatasetAnalysis:
    stats = compute_dimension_stats(dataset)
    logger.debug(
        "Analyzed dataset: records=%d dimensions=%d threshold=%s",
        len(dataset),
        len(stats),
        variation_threshold,
    )
    return DatasetAnalysis(
        dataset=dataset,
        stats=stats,
        summaries=narrate_dimension_stats(stats, variation_threshold=variation_threshold),
        series=build_chart_series(dataset),
        panel=format_stats_panel(stats),
    )
