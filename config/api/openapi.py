"""drf-spectacular helpers for documenting the project's response bodies.

`config.api.responses` and the global DRF exception handler shape every API
response as either `{"success": true, "data": ...}` or
`{"error": ..., "message": ...}`. These utilities generate matching
serializers for OpenAPI documentation without changing runtime behavior.
"""

from __future__ import annotations

from drf_spectacular.utils import inline_serializer
from rest_framework import serializers
from rest_framework.serializers import Serializer


def success_envelope_serializer(
    name: str,
    *,
    data: serializers.Field,
) -> Serializer:
    """Build an OpenAPI schema matching `success_response`."""

    return inline_serializer(
        name=name,
        fields={
            "success": serializers.BooleanField(),
            "data": data,
        },
    )


def error_envelope_serializer(name: str) -> Serializer:
    """Build an OpenAPI schema matching `error_response`."""

    return inline_serializer(
        name=name,
        fields={
            "error": serializers.CharField(),
            "message": serializers.CharField(required=False),
            "details": serializers.JSONField(required=False, allow_null=True),
        },
    )
