"""Project-level non-DRF views.

This module contains the root discovery endpoint, the liveness check and the
JSON fallbacks Django uses for unmatched paths and unhandled errors.
"""

from __future__ import annotations

import logging

from django.http import HttpRequest, JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_GET

from weather.localities import LOCALITIES

logger = logging.getLogger(__name__)

HEALTH_PATH = "/api/health"
_JSON_PARAMS = {"ensure_ascii": False}


@require_GET
def home(request: HttpRequest) -> JsonResponse:
    """List the health path and one forecast path per locality."""

    endpoints = {"health": HEALTH_PATH}
    for locality in LOCALITIES:
        endpoints[locality.name] = locality.path
    return JsonResponse(
        {
            "message": "Welcome to the CWA weather forecast API",
            "endpoints": endpoints,
        },
        json_dumps_params=_JSON_PARAMS,
    )


@require_GET
def health(request: HttpRequest) -> JsonResponse:
    """Liveness probe; never touches the upstream API."""
    return JsonResponse(
        {"status": "OK", "timestamp": timezone.now().isoformat()}
    )


def not_found(request: HttpRequest, exception: Exception) -> JsonResponse:
    return JsonResponse({"error": "not found"}, status=404)


def server_error(request: HttpRequest) -> JsonResponse:
    logger.error("server.error path=%s", request.path)
    return JsonResponse(
        {"error": "server error", "message": "Internal server error"},
        status=500,
    )
