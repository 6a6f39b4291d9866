from __future__ import annotations

import logging

from .engines.cwa import CwaConfig, CwaForecastClient
from .engines.types import WeatherResponse
from .errors import ForecastError
from .localities import Locality
from .metrics import (
    weather_forecast_errors_total,
    weather_forecast_requests_total,
)
from .normalize import normalize_locality

logger = logging.getLogger(__name__)


def build_client(config: CwaConfig | None = None) -> CwaForecastClient:
    """Instantiate the upstream client from settings unless given a config."""

    return CwaForecastClient(config or CwaConfig.from_settings())


def get_locality_forecast(
    locality: Locality,
    client: CwaForecastClient | None = None,
) -> WeatherResponse:
    """Fetch and flatten the 36-hour forecast for one locality."""

    client = client or build_client()
    weather_forecast_requests_total.labels(locality=locality.slug).inc()
    try:
        result = client.fetch_locality_forecast(locality)
    except ForecastError as exc:
        weather_forecast_errors_total.labels(
            locality=locality.slug, error_type=exc.kind
        ).inc()
        logger.warning(
            "weather.fetch.failed locality=%s kind=%s err=%s",
            locality.slug,
            exc.kind,
            exc.message,
        )
        raise

    return normalize_locality(
        result.block,
        dataset_description=result.envelope.dataset_description,
        issue_time=result.envelope.issue_time,
    )
