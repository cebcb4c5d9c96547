"""Demo dataset shown on the dashboard before anything is submitted.

The patterns are a small set of network input vectors so the chart, statistics
panel, and summary all have something meaningful to display.
"""

from __future__ import annotations

from typing import Final

from analysis.dataset import build_dataset
from analysis.dto import Dataset, InputRecord

DEMO_PATTERNS: Final[tuple[tuple[str, tuple[float, ...]], ...]] = (
    ("Pattern A", (0.12, 0.85, 2.4)),
    ("Pattern B", (0.34, 0.91, 4.1)),
    ("Pattern C", (0.56, 0.78, 0.9)),
    ("Pattern D", (0.21, 0.88, 3.6)),
    ("Pattern E", (0.47, 0.83, 1.2)),
)


def demo_dataset() -> Dataset:
    """Return the demo Dataset.

    Raises:
        ValueError: If the demo patterns are not uniformly shaped.
    """

    result = build_dataset(InputRecord.of(label, values) for label, values in DEMO_PATTERNS)
    if not isinstance(result, Dataset):
        raise ValueError(f"Demo patterns are malformed: {result.message}")
    return result
