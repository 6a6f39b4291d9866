"""Failures raised while fetching a locality forecast from CWA.

Every error carries a ``kind`` discriminant so callers can map it to an HTTP
response without inspecting messages.
"""

from __future__ import annotations

from typing import Literal

from config.api.responses import JSONValue

ErrorKind = Literal["configuration", "not_found", "upstream"]


class ForecastError(Exception):
    """Base class for forecast fetch failures."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(ForecastError):
    """Raised when the CWA API key is not configured."""

    kind: ErrorKind = "configuration"


class LocalityNotFoundError(ForecastError):
    """Raised when the upstream payload has no block for the locality."""

    kind: ErrorKind = "not_found"

    def __init__(self, locality_name: str) -> None:
        super().__init__(f"no forecast data for {locality_name}")
        self.locality_name = locality_name


class UpstreamError(ForecastError):
    """Raised when the CWA call fails or returns an unusable body."""

    kind: ErrorKind = "upstream"

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        body: JSONValue | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
