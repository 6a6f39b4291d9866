from __future__ import annotations

# ruff: noqa: S101
from weather.engines.types import (
    LocalityBlock,
    TimeSlot,
    WeatherElement,
)
from weather.normalize import normalize_locality, slot_count


def _element(name: str, values: list[str]) -> WeatherElement:
    return WeatherElement(
        element_name=name,
        time=tuple(
            TimeSlot(
                start_time=f"start-{idx}",
                end_time=f"end-{idx}",
                parameter_name=value,
            )
            for idx, value in enumerate(values)
        ),
    )


def _block(*elements: WeatherElement) -> LocalityBlock:
    return LocalityBlock(location_name="苗栗縣", weather_elements=elements)


def test_normalize_produces_one_record_per_slot() -> None:
    block = _block(
        _element("Wx", ["多雲", "晴", "陰"]),
        _element("PoP", ["10", "0", "60"]),
        _element("MinT", ["15", "13", "16"]),
        _element("MaxT", ["22", "18", "21"]),
        _element("CI", ["舒適", "稍有寒意", "悶熱"]),
    )
    result = normalize_locality(
        block,
        dataset_description="三十六小時天氣預報",
        issue_time="2025-01-01 05:00:00",
    )

    assert result.city == "苗栗縣"
    assert result.dataset_description == "三十六小時天氣預報"
    assert result.data_update_time == "2025-01-01 05:00:00"
    assert len(result.forecasts) == 3

    first = result.forecasts[0]
    assert first.start_time == "start-0"
    assert first.end_time == "end-0"
    assert first.weather == "多雲"
    assert first.rain == "10%"
    assert first.min_temp == "15°C"
    assert first.max_temp == "22°C"
    assert first.comfort == "舒適"
    assert all(record.wind_speed == "" for record in result.forecasts)
    assert [r.comfort for r in result.forecasts] == ["舒適", "稍有寒意", "悶熱"]


def test_suffixes_are_plain_string_concatenation() -> None:
    block = _block(
        _element("PoP", ["", "abc"]),
        _element("MinT", ["-3", "12.5"]),
        _element("MaxT", ["0", "n/a"]),
    )
    forecasts = normalize_locality(block, "d", "t").forecasts

    assert [r.rain for r in forecasts] == ["%", "abc%"]
    assert [r.min_temp for r in forecasts] == ["-3°C", "12.5°C"]
    assert [r.max_temp for r in forecasts] == ["0°C", "n/a°C"]
    for record in forecasts:
        assert record.rain.endswith("%")
        assert record.min_temp.endswith("°C")
        assert record.max_temp.endswith("°C")


def test_unknown_elements_are_ignored_and_wind_stays_empty() -> None:
    block = _block(
        _element("Wx", ["晴"]),
        _element("WS", ["5"]),
        _element("WD", ["北風"]),
    )
    (record,) = normalize_locality(block, "d", "t").forecasts
    assert record.weather == "晴"
    assert record.wind_speed == ""
    assert record.rain == ""


def test_reference_element_sets_slot_count_and_windows() -> None:
    block = _block(
        _element("MinT", ["10", "11"]),
        _element("Wx", ["晴", "陰", "雨"]),
    )
    forecasts = normalize_locality(block, "d", "t").forecasts
    assert len(forecasts) == 2
    assert [r.weather for r in forecasts] == ["晴", "陰"]


def test_shorter_element_leaves_missing_slots_empty() -> None:
    block = _block(
        _element("Wx", ["晴", "陰", "雨"]),
        _element("PoP", ["20"]),
    )
    forecasts = normalize_locality(block, "d", "t").forecasts
    assert [r.rain for r in forecasts] == ["20%", "", ""]
    assert [r.weather for r in forecasts] == ["晴", "陰", "雨"]


def test_input_order_is_preserved() -> None:
    element = WeatherElement(
        element_name="Wx",
        time=(
            TimeSlot("2025-01-02 06:00", "2025-01-02 18:00", "late"),
            TimeSlot("2025-01-01 06:00", "2025-01-01 18:00", "early"),
        ),
    )
    forecasts = normalize_locality(_block(element), "d", "t").forecasts
    assert [r.weather for r in forecasts] == ["late", "early"]
    assert forecasts[0].start_time == "2025-01-02 06:00"


def test_block_without_elements_yields_no_records() -> None:
    assert slot_count(()) == 0
    result = normalize_locality(_block(), "d", "t")
    assert result.forecasts == ()
