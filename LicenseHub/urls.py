"""
Root URL configuration.

Brand routes are scoped by brand id in the path; product routes are
addressed by license key in the request body.
"""
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

from core.views import HealthDBView, HealthView, MetricsView

urlpatterns = [
    path("admin/", admin.site.urls),
    # Operations
    path("health/", HealthView.as_view(), name="health"),
    path("health/db/", HealthDBView.as_view(), name="health-db"),
    path("metrics", MetricsView.as_view(), name="metrics"),
    # Public API
    path("api/v1/brands/<uuid:brand_id>/", include("api.v1.brand.urls")),
    path("api/v1/product/", include("api.v1.product.urls")),
    # OpenAPI schema and docs
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
    path(
        "api/redoc/",
        SpectacularRedocView.as_view(url_name="schema"),
        name="redoc",
    ),
]
