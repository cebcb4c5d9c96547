"""Pure analysis package for patternStats.

This package contains deterministic, testable computations that operate on
in-memory inputs and return DTOs. It must not import Django.
"""

from .dataset import DatasetPayloadError, build_dataset, parse_dataset_payload
from .engine import analyze_dataset
from .stats import compute_dimension_stats

__all__ = [
    "DatasetPayloadError",
    "analyze_dataset",
    "build_dataset",
    "compute_dimension_stats",
    "parse_dataset_payload",
]
