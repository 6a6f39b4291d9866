"""CWA open-data client for the F-C0032-001 36-hour forecast dataset."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Final, cast

import httpx
from django.conf import settings

from config.api.responses import JSONValue
from weather.errors import (
    ConfigurationError,
    LocalityNotFoundError,
    UpstreamError,
)
from weather.localities import Locality
from weather.metrics import (
    cwa_upstream_latency_seconds,
    cwa_upstream_requests_total,
)

from .types import (
    LocalityBlock,
    LocalityForecast,
    TimeSlot,
    UpstreamEnvelope,
    WeatherElement,
)

logger = logging.getLogger(__name__)

DATASET_ID: Final[str] = "F-C0032-001"
DEFAULT_BASE_URL: Final[str] = "https://opendata.cwa.gov.tw/api"
DEFAULT_TIMEOUT: Final[float] = 10.0


@dataclass(frozen=True)
class CwaConfig:
    """Immutable upstream configuration handed to the client."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT

    @classmethod
    def from_settings(cls) -> CwaConfig:
        return cls(
            api_key=str(getattr(settings, "CWA_API_KEY", "") or ""),
            base_url=str(
                getattr(settings, "CWA_API_BASE_URL", DEFAULT_BASE_URL)
            ).rstrip("/"),
            timeout_seconds=float(
                getattr(settings, "CWA_TIMEOUT_SECONDS", DEFAULT_TIMEOUT)
            ),
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/v1/rest/datastore/{DATASET_ID}"


class CwaForecastClient:
    """Fetch one locality's forecast block with a single GET request."""

    engine_name: Final[str] = "cwa"

    def __init__(
        self,
        config: CwaConfig,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.config = config
        self._transport = transport

    def fetch_locality_forecast(self, locality: Locality) -> LocalityForecast:
        if not self.config.api_key:
            raise ConfigurationError(
                "server configuration error: set CWA_API_KEY in the "
                "environment or .env file"
            )

        payload = self._request(
            {
                "Authorization": self.config.api_key,
                "locationName": locality.name,
            }
        )
        envelope = self._parse_envelope(payload)
        for block in envelope.locations:
            if block.location_name == locality.name:
                return LocalityForecast(envelope=envelope, block=block)
        raise LocalityNotFoundError(locality.name)

    def _request(self, params: dict[str, str]) -> dict[str, Any]:
        logger.info(
            "cwa.request dataset=%s locality=%s",
            DATASET_ID,
            params.get("locationName"),
        )
        started = time.monotonic()
        try:
            with httpx.Client(
                timeout=self.config.timeout_seconds,
                transport=self._transport,
            ) as client:
                response = client.get(self.config.endpoint, params=params)
        except httpx.RequestError as exc:
            cwa_upstream_requests_total.labels(outcome="network").inc()
            raise UpstreamError(
                f"CWA request failed: {exc}",
                status_code=502,
            ) from exc
        finally:
            cwa_upstream_latency_seconds.observe(time.monotonic() - started)

        if not response.is_success:
            cwa_upstream_requests_total.labels(outcome="error").inc()
            logger.warning(
                "cwa.response.error status=%s", response.status_code
            )
            raise UpstreamError(
                f"CWA responded with HTTP {response.status_code}",
                status_code=response.status_code,
                body=self._decode_body(response),
            )

        try:
            data = response.json()
        except ValueError as exc:
            cwa_upstream_requests_total.labels(outcome="malformed").inc()
            raise UpstreamError(
                "CWA response is not valid JSON",
                status_code=502,
                body=response.text,
            ) from exc
        if not isinstance(data, dict):
            cwa_upstream_requests_total.labels(outcome="malformed").inc()
            raise UpstreamError(
                "Unexpected CWA response shape",
                status_code=502,
                body=cast(JSONValue, data),
            )

        cwa_upstream_requests_total.labels(outcome="success").inc()
        return data

    def _decode_body(self, response: httpx.Response) -> JSONValue:
        try:
            return cast(JSONValue, response.json())
        except ValueError:
            return response.text

    def _parse_envelope(self, payload: dict[str, Any]) -> UpstreamEnvelope:
        records = payload.get("records")
        if not isinstance(records, dict):
            raise UpstreamError(
                "Unexpected CWA response shape: missing records",
                status_code=502,
                body=cast(JSONValue, payload),
            )
        raw_locations = records.get("location") or []
        if not isinstance(raw_locations, list):
            raise UpstreamError(
                "Unexpected CWA response shape: location is not a list",
                status_code=502,
                body=cast(JSONValue, payload),
            )

        return UpstreamEnvelope(
            dataset_description=self._to_str(
                records.get("datasetDescription")
            ),
            issue_time=self._to_str(records.get("issueTime")),
            locations=tuple(
                self._parse_location(raw)
                for raw in raw_locations
                if isinstance(raw, dict)
            ),
        )

    def _parse_location(self, raw: dict[str, Any]) -> LocalityBlock:
        raw_elements = raw.get("weatherElement") or []
        elements = tuple(
            WeatherElement(
                element_name=self._to_str(item.get("elementName")),
                time=self._parse_slots(item.get("time")),
            )
            for item in raw_elements
            if isinstance(item, dict)
        )
        return LocalityBlock(
            location_name=self._to_str(raw.get("locationName")),
            weather_elements=elements,
        )

    def _parse_slots(self, raw: Any) -> tuple[TimeSlot, ...]:
        if not isinstance(raw, list):
            return ()
        slots: list[TimeSlot] = []
        for item in raw:
            if not isinstance(item, dict):
                continue
            parameter = item.get("parameter")
            if not isinstance(parameter, dict):
                parameter = {}
            unit = parameter.get("parameterUnit")
            slots.append(
                TimeSlot(
                    start_time=self._to_str(item.get("startTime")),
                    end_time=self._to_str(item.get("endTime")),
                    parameter_name=self._to_str(
                        parameter.get("parameterName")
                    ),
                    parameter_unit=str(unit) if unit is not None else None,
                )
            )
        return tuple(slots)

    def _to_str(self, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return (
            "CwaForecastClient("
            f"base_url={self.config.base_url}, "
            f"timeout={self.config.timeout_seconds}"
            ")"
        )
