from __future__ import annotations

from django.urls import path

from .localities import LOCALITIES
from .views import LocalityForecastView

urlpatterns = [
    path(
        f"weather/{locality.slug}",
        LocalityForecastView.as_view(locality=locality),
        name=f"weather-{locality.slug}",
    )
    for locality in LOCALITIES
]
