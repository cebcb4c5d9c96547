"""Views for the input pattern dashboard and its JSON API."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import Any

from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import render
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods, require_POST

from analysis.dto import Dataset, DatasetAnalysis
from analysis.engine import analyze_dataset
from core.charting.options import LINE_CHART_OPTIONS, TOOLTIP_DECIMALS
from core.charting.render import render_line_chart
from core.demo import demo_dataset
from core.forms import DatasetImportForm, decode_dataset_json

logger = logging.getLogger(__name__)

EMPTY_STATE_MESSAGE = "No data to display."


def _variation_threshold() -> float:
    """Return the configured standard deviation threshold for narratives."""

    return float(settings.VARIATION_THRESHOLD)


@require_http_methods(["GET", "POST"])
def dashboard(request: HttpRequest) -> HttpResponse:
    """Render the chart, statistics panel, and summary for a dataset.

    GET renders the demo dataset. POST analyzes the submitted JSON dataset;
    invalid submissions re-render the form with errors and no panels.
    """

    dataset: Dataset | None
    if request.method == "POST":
        import_form = DatasetImportForm(request.POST)
        if import_form.is_valid():
            dataset = import_form.cleaned_data["dataset"]
            logger.info(
                "Dataset submitted: records=%d dimensions=%d",
                len(dataset),
                dataset.dimension_count,
            )
        else:
            dataset = None
            logger.warning("Dataset rejected: %s", import_form.errors.get("raw_json"))
    else:
        dataset = demo_dataset()
        import_form = DatasetImportForm(initial={"raw_json": _dataset_json(dataset)})

    context: dict[str, Any] = {
        "import_form": import_form,
        "analysis": None,
        "chart_error": None,
        "chart_data": None,
        "chart_options": LINE_CHART_OPTIONS,
        "tooltip_decimals": TOOLTIP_DECIMALS,
        "empty_state": None,
    }
    if dataset is not None:
        analysis = analyze_dataset(dataset, variation_threshold=_variation_threshold())
        chart = render_line_chart(series=analysis.series, labels=dataset.labels)
        context.update(
            {
                "analysis": analysis,
                "chart_error": chart.error,
                "chart_data": chart.data,
                "empty_state": EMPTY_STATE_MESSAGE if analysis.is_empty else None,
            }
        )
    return render(request, "core/dashboard.html", context)


@csrf_exempt
@require_POST
def analyze_api(request: HttpRequest) -> JsonResponse:
    """Analyze a JSON dataset posted as the request body."""

    try:
        raw_json = request.body.decode("utf-8")
    except UnicodeDecodeError:
        return JsonResponse({"ok": False, "error": "Request body must be UTF-8 encoded JSON."}, status=400)

    try:
        dataset = decode_dataset_json(raw_json)
    except ValueError as exc:
        logger.warning("API dataset rejected: %s", exc)
        return JsonResponse({"ok": False, "error": str(exc)}, status=400)

    analysis = analyze_dataset(dataset, variation_threshold=_variation_threshold())
    return JsonResponse({"ok": True, **_analysis_payload(analysis)})


def _analysis_payload(analysis: DatasetAnalysis) -> dict[str, object]:
    """Serialize a DatasetAnalysis for the JSON API."""

    return {
        "labels": list(analysis.dataset.labels),
        "stats": [asdict(item) for item in analysis.stats],
        "summaries": list(analysis.summaries),
        "series": [
            {"name": item.name, "points": [[label, value] for label, value in item.points]}
            for item in analysis.series
        ],
        "panel": [asdict(row) for row in analysis.panel],
    }


def _dataset_json(dataset: Dataset) -> str:
    """Serialize a Dataset back to the JSON accepted by the import form."""

    return json.dumps(
        [{"label": record.label, "values": list(record.values)} for record in dataset.records],
        indent=2,
    )
