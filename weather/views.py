"""Per-locality forecast endpoints.

Authentication: none (public read-only proxy).
Responses: `{"success": true, "data": <WeatherResponse>}` on success, or an
error body built by `forecast_error_response`.
"""

from __future__ import annotations

from typing import cast

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from config.api.openapi import (
    error_envelope_serializer,
    success_envelope_serializer,
)
from config.api.responses import JSONValue, error_response, success_response

from .errors import ForecastError, UpstreamError
from .localities import Locality
from .serializers import WeatherResponseSerializer, serialize_weather
from .services import get_locality_forecast

forecast_success_schema = success_envelope_serializer(
    "WeatherForecastSuccess",
    data=WeatherResponseSerializer(),
)
weather_error_schema = error_envelope_serializer("WeatherErrorResponse")


def _upstream_message(body: JSONValue | None) -> str:
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return "unable to fetch weather data"


def forecast_error_response(
    exc: ForecastError, locality: Locality
) -> Response:
    """Translate a forecast failure into its HTTP response."""

    if exc.kind == "configuration":
        return error_response(
            "server configuration error",
            message=exc.message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    if exc.kind == "upstream":
        upstream = cast(UpstreamError, exc)
        return error_response(
            "upstream API error",
            message=_upstream_message(upstream.body),
            details=upstream.body,
            include_details=True,
            status_code=upstream.status_code,
        )
    return error_response(
        "server error",
        message=(
            f"unable to fetch {locality.name} weather data, "
            "please try again later"
        ),
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


class LocalityForecastView(APIView):
    """Return the CWA 36-hour forecast for one configured locality.

    The locality is bound when the route table is built, never taken from
    the request.
    """

    locality: Locality | None = None

    @extend_schema(
        responses={
            200: forecast_success_schema,
            500: weather_error_schema,
            502: weather_error_schema,
        },
    )
    def get(self, request: Request) -> Response:
        locality = self.locality
        if locality is None:  # pragma: no cover - misconfigured route
            raise RuntimeError("LocalityForecastView requires a locality")

        try:
            forecast = get_locality_forecast(locality)
        except ForecastError as exc:
            return forecast_error_response(exc, locality)
        return success_response(serialize_weather(forecast))
