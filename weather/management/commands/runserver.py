from __future__ import annotations

import logging
from typing import Any

from django.conf import settings
from django.core.management.commands.runserver import (
    Command as RunserverCommand,
)

logger = logging.getLogger(__name__)


class Command(RunserverCommand):
    help = (
        "Start the development server on PORT (default 3000) and log the "
        "active environment."
    )

    def handle(self, *args: Any, **options: Any) -> None:
        self.default_port = str(settings.PORT)
        logger.info(
            "server.start port=%s env=%s cwa_key_configured=%s",
            options.get("addrport") or self.default_port,
            settings.ENVIRONMENT,
            bool(settings.CWA_API_KEY),
        )
        super().handle(*args, **options)
