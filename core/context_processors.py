"""Template context processors for patternStats."""

from __future__ import annotations

from django.conf import settings
from django.http import HttpRequest


def variation_threshold(request: HttpRequest) -> dict[str, float]:
    """Expose the narrative variation threshold to all templates.

    Args:
        request: Current request object.

    Returns:
        Context dict with the `variation_threshold` float.
    """

    return {"variation_threshold": float(settings.VARIATION_THRESHOLD)}
