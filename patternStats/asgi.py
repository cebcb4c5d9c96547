"""ASGI entry point for patternStats.

Async servers import the module-level `application` callable.
"""

from __future__ import annotations

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "patternStats.settings")

application = get_asgi_application()
