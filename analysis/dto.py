"""DTO types used and returned by the Analysis Engine.

DTOs are plain data containers used to transport datasets and analysis results
to the UI. They intentionally avoid any Django dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InputRecord:
    """One labeled observation.

    Attributes:
        label: Display label, used as the chart x-axis value.
        values: Numeric values, one per dimension.
    """

    label: str
    values: tuple[float, ...]

    @classmethod
    def of(cls, label: str, values: Iterable[float]) -> InputRecord:
        """Build a record, coercing values to floats.

        Negative zero is stored as 0.0 so equal datasets also display equally.
        """

        return cls(label=label, values=tuple(float(v) + 0.0 for v in values))


@dataclass(frozen=True, slots=True)
class Dataset:
    """An ordered collection of InputRecord values.

    Attributes:
        records: Records in insertion order (defines chart x-axis order).

    Notes:
        Use `analysis.dataset.build_dataset` to obtain a Dataset whose records
        are guaranteed to share one value length.
    """

    records: tuple[InputRecord, ...] = ()

    @property
    def dimension_count(self) -> int:
        """Number of dimensions, taken from the first record (0 when empty)."""

        if not self.records:
            return 0
        return len(self.records[0].values)

    @property
    def labels(self) -> tuple[str, ...]:
        """Record labels in dataset order."""

        return tuple(record.label for record in self.records)

    def __len__(self) -> int:
        return len(self.records)


@dataclass(frozen=True, slots=True)
class ShapeMismatch:
    """A record whose value length differs from the first record's.

    Attributes:
        expected: Dimension count of the first record.
        record_index: Zero-based index of the offending record.
        label: Label of the offending record.
        actual: Value length of the offending record.
    """

    expected: int
    record_index: int
    label: str
    actual: int

    @property
    def message(self) -> str:
        """Human-readable description for form and API errors."""

        return (
            f"Record {self.record_index + 1} ({self.label!r}) has {self.actual} values; "
            f"expected {self.expected} like the first record."
        )


@dataclass(frozen=True, slots=True)
class DimensionStats:
    """Aggregate statistics for one dimension across all records.

    Attributes:
        average: Arithmetic mean.
        minimum: Smallest value.
        maximum: Largest value.
        std_deviation: Population standard deviation (divisor N).
    """

    average: float
    minimum: float
    maximum: float
    std_deviation: float


@dataclass(frozen=True, slots=True)
class ChartSeries:
    """A chart-ready series for a single dimension.

    Attributes:
        name: Series display name (e.g. "Input 1").
        points: `(label, value)` pairs in dataset order.
    """

    name: str
    points: tuple[tuple[str, float], ...] = ()

    @property
    def values(self) -> list[float]:
        """Point values in order, as consumed by Chart.js datasets."""

        return [value for _, value in self.points]


@dataclass(frozen=True, slots=True)
class StatsPanelRow:
    """Formatted statistics for display in the analysis panel."""

    title: str
    average: str
    std_deviation: str
    range: str


@dataclass(frozen=True)
class DatasetAnalysis:
    """Container for everything the dashboard displays for one Dataset.

    Attributes:
        dataset: The analyzed dataset.
        stats: Per-dimension statistics, index-aligned with dimensions.
        summaries: Narrative paragraphs, index-aligned with `stats`.
        series: Chart series, index-aligned with `stats`.
        panel: Formatted statistics rows, index-aligned with `stats`.
    """

    dataset: Dataset
    stats: tuple[DimensionStats, ...] = ()
    summaries: tuple[str, ...] = ()
    series: tuple[ChartSeries, ...] = ()
    panel: tuple[StatsPanelRow, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True when there is no data to display."""

        return not self.stats
