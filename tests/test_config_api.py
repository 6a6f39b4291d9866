from __future__ import annotations

# ruff: noqa: S101
from datetime import datetime
from decimal import Decimal
from unittest.mock import patch

from django.test import Client
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.response import Response

from config.api.exceptions import _to_json_value, custom_exception_handler
from config.api.responses import error_response, success_response


def test_success_response_payload() -> None:
    resp = success_response({"city": "新竹縣"})
    assert resp.status_code == 200
    assert resp.data == {"success": True, "data": {"city": "新竹縣"}}


def test_error_response_payload() -> None:
    resp = error_response(
        "upstream API error",
        message="service unavailable",
        details={"message": "service unavailable"},
        include_details=True,
        status_code=503,
    )
    assert resp.status_code == 503
    assert resp.data == {
        "error": "upstream API error",
        "message": "service unavailable",
        "details": {"message": "service unavailable"},
    }


def test_error_response_omits_optional_keys() -> None:
    resp = error_response("server error")
    assert resp.status_code == 500
    assert resp.data == {"error": "server error"}


def test_custom_exception_handler_returns_500_on_unhandled() -> None:
    with patch("rest_framework.views.exception_handler", return_value=None):
        resp = custom_exception_handler(Exception("boom"), {})
    assert resp.status_code == 500
    assert resp.data == {"error": "server error", "message": "boom"}


def test_custom_exception_handler_not_found() -> None:
    resp = custom_exception_handler(NotFound(), {})
    assert resp.status_code == 404
    assert resp.data == {"error": "not found"}


def test_custom_exception_handler_non_dict_detail() -> None:
    with patch(
        "rest_framework.views.exception_handler",
        return_value=Response(["bad"], status=400),
    ):
        resp = custom_exception_handler(ValidationError("bad"), {})
    assert resp.status_code == 400
    assert resp.data == {
        "error": "request error",
        "message": "Request failed",
    }


def test_to_json_value_handles_sequences() -> None:
    payload = ("ok", {"value": Decimal("1.25")})
    assert _to_json_value(payload) == ["ok", {"value": "1.25"}]


def test_home_lists_health_and_locality_paths() -> None:
    resp = Client().get("/")
    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Welcome to the CWA weather forecast API"
    assert body["endpoints"] == {
        "health": "/api/health",
        "新竹縣": "/api/weather/hsinchucounty",
        "桃園市": "/api/weather/taoyuancity",
        "新竹市": "/api/weather/hsinchucity",
        "苗栗縣": "/api/weather/miaolicounty",
    }


def test_health_reports_ok_with_iso_timestamp() -> None:
    with patch("weather.services.get_locality_forecast") as fetch:
        resp = Client().get("/api/health")
    fetch.assert_not_called()
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "OK"
    parsed = datetime.fromisoformat(body["timestamp"])
    assert parsed.tzinfo is not None


def test_unmatched_path_returns_json_404() -> None:
    for path in ("/nope", "/api/weather/", "/api/health/extra"):
        resp = Client().get(path)
        assert resp.status_code == 404
        assert resp.json() == {"error": "not found"}


def test_home_and_health_only_accept_get() -> None:
    for path in ("/", "/api/health"):
        resp = Client().post(path)
        assert resp.status_code == 405
