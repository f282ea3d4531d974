"""
URL configuration for brand API endpoints.

Mounted under /api/v1/brands/<uuid:brand_id>/.
"""

from django.urls import path

from api.v1.brand import views

app_name = "brand"

urlpatterns = [
    path(
        "license-keys",
        views.ProvisionLicenseView.as_view(),
        name="provision-license",
    ),
    path(
        "licenses/<uuid:license_id>",
        views.LicenseDetailView.as_view(),
        name="license-detail",
    ),
    path(
        "licenses",
        views.ListLicensesByEmailView.as_view(),
        name="list-licenses",
    ),
]
