from __future__ import annotations

import importlib
import sys
from typing import Any

import pytest
from django.conf import LazySettings
from django.core.management.commands.runserver import (
    Command as DjangoRunserver,
)

import manage
from weather.management.commands.runserver import Command as Runserver


def test_manage_main_invokes_execute_from_command_line(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    called = {}

    def _fake_execute(argv: list[str]) -> None:
        called["argv"] = argv

    monkeypatch.setattr(
        "django.core.management.execute_from_command_line",
        _fake_execute,
    )
    monkeypatch.setattr(sys, "argv", ["manage.py", "check"])

    manage.main()

    assert called["argv"] == ["manage.py", "check"]


def test_asgi_application_importable() -> None:
    module = importlib.import_module("config.asgi")
    module = importlib.reload(module)
    assert module.application is not None


def test_wsgi_application_importable() -> None:
    module = importlib.import_module("config.wsgi")
    module = importlib.reload(module)
    assert module.application is not None


def test_runserver_defaults_to_configured_port(
    monkeypatch: pytest.MonkeyPatch, settings: LazySettings
) -> None:
    settings.PORT = 3000
    captured: dict[str, Any] = {}

    def fake_handle(
        self: DjangoRunserver, *args: Any, **options: Any
    ) -> None:
        captured["port"] = self.default_port

    monkeypatch.setattr(DjangoRunserver, "handle", fake_handle)

    Runserver().handle(addrport=None)

    assert captured["port"] == "3000"
