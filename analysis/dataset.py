"""Dataset construction and shape validation.

Records arriving from the UI or the JSON API are untrusted. This module turns
them into a `Dataset` whose records all share the same value length, or reports
the first record that breaks that invariant as a `ShapeMismatch`.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from numbers import Real

from .dto import Dataset, InputRecord, ShapeMismatch


class DatasetPayloadError(ValueError):
    """Raised when a decoded payload does not have the dataset structure."""

    def __init__(self, message: str, *, record_index: int | None = None) -> None:
        """Initialize the error.

        Args:
            message: Description of the structural problem.
            record_index: Zero-based index of the offending record, when known.
        """

        if record_index is not None:
            message = f"Record {record_index + 1}: {message}"
        super().__init__(message)
        self.record_index = record_index


def build_dataset(records: Iterable[InputRecord]) -> Dataset | ShapeMismatch:
    """Build a Dataset, enforcing a uniform value length.

    Args:
        records: Records in display order.

    Returns:
        A Dataset when every record has as many values as the first one, or a
        ShapeMismatch describing the first record that does not.
    """

    collected = tuple(records)
    if not collected:
        return Dataset()

    expected = len(collected[0].values)
    for index, record in enumerate(collected):
        if len(record.values) != expected:
            return ShapeMismatch(
                expected=expected,
                record_index=index,
                label=record.label,
                actual=len(record.values),
            )
    return Dataset(records=collected)


def parse_dataset_payload(payload: object) -> Dataset | ShapeMismatch:
    """Parse decoded JSON into a Dataset.

    Args:
        payload: Decoded JSON, expected as `[{"label": str, "values": [number, ...]}, ...]`.

    Returns:
        The result of `build_dataset` over the parsed records.

    Raises:
        DatasetPayloadError: When the payload is structurally invalid.
    """

    if not isinstance(payload, list):
        raise DatasetPayloadError("Dataset must be a JSON list of records.")

    records: list[InputRecord] = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise DatasetPayloadError("expected an object with 'label' and 'values'.", record_index=index)

        label = item.get("label")
        if not isinstance(label, str) or not label.strip():
            raise DatasetPayloadError("'label' must be a non-empty string.", record_index=index)

        raw_values = item.get("values")
        if not isinstance(raw_values, list):
            raise DatasetPayloadError("'values' must be a list of numbers.", record_index=index)

        records.append(InputRecord.of(label.strip(), _coerce_values(raw_values, record_index=index)))

    return build_dataset(records)


def _coerce_values(raw_values: list[object], *, record_index: int) -> list[float]:
    """Coerce JSON values into finite floats, rejecting booleans and strings."""

    values: list[float] = []
    for raw in raw_values:
        if isinstance(raw, bool) or not isinstance(raw, Real):
            raise DatasetPayloadError(f"value {raw!r} is not a number.", record_index=record_index)
        value = float(raw)
        if not math.isfinite(value):
            raise DatasetPayloadError(f"value {raw!r} is not finite.", record_index=record_index)
        values.append(value)
    return values
