"""Flatten CWA per-element time arrays into one record per time window."""

from __future__ import annotations

from collections.abc import Callable

from .engines.types import (
    ForecastRecord,
    LocalityBlock,
    WeatherElement,
    WeatherResponse,
)

# elementName -> (ForecastRecord field, value formatter)
ELEMENT_FIELDS: dict[str, tuple[str, Callable[[str], str]]] = {
    "Wx": ("weather", str),
    "PoP": ("rain", lambda value: f"{value}%"),
    "MinT": ("min_temp", lambda value: f"{value}°C"),
    "MaxT": ("max_temp", lambda value: f"{value}°C"),
    "CI": ("comfort", str),
}


def slot_count(elements: tuple[WeatherElement, ...]) -> int:
    """Return the number of time slots, taken from the first element."""

    if not elements:
        return 0
    return len(elements[0].time)


def normalize_locality(
    block: LocalityBlock,
    dataset_description: str,
    issue_time: str,
) -> WeatherResponse:
    """Merge the block's element arrays index by index.

    Slot ``i`` of every element is assumed to describe the same window as
    slot ``i`` of the first element. Elements with fewer slots leave their
    field empty for the missing indexes; unknown element names are ignored.
    """

    elements = block.weather_elements
    forecasts: list[ForecastRecord] = []
    for idx in range(slot_count(elements)):
        reference = elements[0].time[idx]
        values: dict[str, str] = {}
        for element in elements:
            mapping = ELEMENT_FIELDS.get(element.element_name)
            if mapping is None or idx >= len(element.time):
                continue
            field_name, formatter = mapping
            values[field_name] = formatter(element.time[idx].parameter_name)
        forecasts.append(
            ForecastRecord(
                start_time=reference.start_time,
                end_time=reference.end_time,
                **values,
            )
        )

    return WeatherResponse(
        city=block.location_name,
        dataset_description=dataset_description,
        data_update_time=issue_time,
        forecasts=tuple(forecasts),
    )
