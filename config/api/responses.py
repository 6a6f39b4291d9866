from __future__ import annotations

from typing import TypeAlias

from rest_framework import status
from rest_framework.response import Response

JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]


def success_response(
    data: JSONValue | None,
    *,
    status_code: int = status.HTTP_200_OK,
) -> Response:
    payload: dict[str, JSONValue] = {
        "success": True,
        "data": data,
    }
    return Response(payload, status=status_code)


def error_response(
    error: str,
    *,
    message: str | None = None,
    details: JSONValue | None = None,
    include_details: bool = False,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
) -> Response:
    payload: dict[str, JSONValue] = {"error": error}
    if message is not None:
        payload["message"] = message
    if include_details:
        payload["details"] = details
    return Response(payload, status=status_code)
