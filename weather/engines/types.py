from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TimeSlot:
    start_time: str
    end_time: str
    parameter_name: str
    parameter_unit: str | None = None


@dataclass(frozen=True)
class WeatherElement:
    element_name: str
    time: tuple[TimeSlot, ...]


@dataclass(frozen=True)
class LocalityBlock:
    location_name: str
    weather_elements: tuple[WeatherElement, ...]


@dataclass(frozen=True)
class UpstreamEnvelope:
    dataset_description: str
    issue_time: str
    locations: tuple[LocalityBlock, ...]


@dataclass(frozen=True)
class LocalityForecast:
    """Envelope metadata plus the block matching the requested locality."""

    envelope: UpstreamEnvelope
    block: LocalityBlock


@dataclass(frozen=True)
class ForecastRecord:
    start_time: str
    end_time: str
    weather: str = ""
    rain: str = ""
    min_temp: str = ""
    max_temp: str = ""
    comfort: str = ""
    # F-C0032-001 carries no wind element, so this stays empty.
    wind_speed: str = ""


@dataclass(frozen=True)
class WeatherResponse:
    city: str
    dataset_description: str
    data_update_time: str
    forecasts: tuple[ForecastRecord, ...] = field(default_factory=tuple)
