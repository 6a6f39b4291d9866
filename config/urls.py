"""
URL configuration for config project.

The `urlpatterns` list routes URLs to views. For more information please see:
    https://docs.djangoproject.com/en/5.1/topics/http/urls/
"""

# Routes:
# - GET / -> home (endpoint discovery)
# - GET /api/health -> liveness check
# - GET /api/weather/<slug> -> weather.urls, one route per locality
# - /metrics -> Prometheus metrics
# - /api/schema/ -> OpenAPI schema
# - /api/docs/ -> Swagger UI
# Anything else -> 404 {"error": "not found"}

from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from .views import health, home

urlpatterns = [
    path("", home, name="home"),
    path("", include("django_prometheus.urls")),
    path("api/health", health, name="health"),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    path("api/", include("weather.urls")),
]

handler404 = "config.views.not_found"
handler500 = "config.views.server_error"
