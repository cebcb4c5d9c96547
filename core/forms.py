"""Forms for core UI workflows."""

from __future__ import annotations

import json

from django import forms

from analysis.dataset import DatasetPayloadError, parse_dataset_payload
from analysis.dto import Dataset, ShapeMismatch


def decode_dataset_json(raw_json: str) -> Dataset:
    """Decode and validate a JSON dataset string.

    Args:
        raw_json: JSON text of the form `[{"label": ..., "values": [...]}, ...]`.

    Returns:
        The validated Dataset.

    Raises:
        ValueError: With a user-facing message when the JSON is malformed, the
            payload is structurally invalid, or record lengths differ.
    """

    try:
        payload = json.loads(raw_json)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno}).") from exc

    try:
        result = parse_dataset_payload(payload)
    except DatasetPayloadError as exc:
        raise ValueError(str(exc)) from exc

    if isinstance(result, ShapeMismatch):
        raise ValueError(result.message)
    return result


class DatasetImportForm(forms.Form):
    """Validate a user-submitted JSON dataset."""

    raw_json = forms.CharField(
        label="Dataset (JSON)",
        widget=forms.Textarea(attrs={"rows": 10, "cols": 80}),
        help_text='A list of records, e.g. [{"label": "A", "values": [0.1, 0.9]}].',
    )

    def clean_raw_json(self) -> str:
        """Validate the JSON text and stash the parsed Dataset.

        Returns:
            The raw JSON text as entered by the user.
        """

        raw_json = self.cleaned_data.get("raw_json") or ""
        try:
            self.cleaned_data["dataset"] = decode_dataset_json(raw_json)
        except ValueError as exc:
            raise forms.ValidationError(str(exc)) from exc
        return raw_json
