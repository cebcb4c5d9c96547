"""Pytest fixtures shared across unit and Django integration tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from analysis.dataset import build_dataset
from analysis.dto import Dataset, InputRecord


@pytest.fixture
def two_record_dataset() -> Dataset:
    """Return the two-record, two-dimension reference dataset."""

    result = build_dataset([InputRecord.of("a", [1, 2]), InputRecord.of("b", [3, 4])])
    assert isinstance(result, Dataset)
    return result


@pytest.fixture
def pattern_dataset() -> Dataset:
    """Return a three-dimension dataset with mixed spreads."""

    result = build_dataset(
        [
            InputRecord.of("P1", [0.1, 10.0, -1.0]),
            InputRecord.of("P2", [0.2, 14.0, -1.0]),
            InputRecord.of("P3", [0.3, 2.0, -1.0]),
            InputRecord.of("P4", [0.4, 6.0, -1.0]),
        ]
    )
    assert isinstance(result, Dataset)
    return result


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    The suite must be runnable by intent:
    - `unit`: pure, fast tests with no Django request cycle.
    - `integration`: tests touching Django views, settings, or the test client.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
