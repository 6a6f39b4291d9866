from __future__ import annotations

from typing import ClassVar

from rest_framework import serializers

from config.api.responses import JSONValue

from .engines.types import WeatherResponse


class ForecastRecordSerializer(serializers.Serializer):
    startTime: ClassVar[serializers.CharField] = serializers.CharField(
        source="start_time"
    )
    endTime: ClassVar[serializers.CharField] = serializers.CharField(
        source="end_time"
    )
    weather: ClassVar[serializers.CharField] = serializers.CharField(
        allow_blank=True
    )
    rain: ClassVar[serializers.CharField] = serializers.CharField(
        allow_blank=True
    )
    minTemp: ClassVar[serializers.CharField] = serializers.CharField(
        source="min_temp", allow_blank=True
    )
    maxTemp: ClassVar[serializers.CharField] = serializers.CharField(
        source="max_temp", allow_blank=True
    )
    comfort: ClassVar[serializers.CharField] = serializers.CharField(
        allow_blank=True
    )
    windSpeed: ClassVar[serializers.CharField] = serializers.CharField(
        source="wind_speed",
        allow_blank=True,
        help_text="Always empty: F-C0032-001 has no wind element.",
    )


class WeatherResponseSerializer(serializers.Serializer):
    city: ClassVar[serializers.CharField] = serializers.CharField()
    datasetDescription: ClassVar[serializers.CharField] = (
        serializers.CharField(source="dataset_description")
    )
    dataUpdateTime: ClassVar[serializers.CharField] = serializers.CharField(
        source="data_update_time"
    )
    forecasts: ClassVar[ForecastRecordSerializer] = ForecastRecordSerializer(
        many=True
    )


def serialize_weather(payload: WeatherResponse) -> dict[str, JSONValue]:
    serializer = WeatherResponseSerializer(payload)
    return dict(serializer.data)
