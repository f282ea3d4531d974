"""
URL configuration for product API endpoints.
"""

from django.urls import path

from api.v1.product import views

app_name = "product"

urlpatterns = [
    path(
        "activate",
        views.ActivateLicenseView.as_view(),
        name="activate-license",
    ),
    path(
        "validate",
        views.ValidateLicenseView.as_view(),
        name="validate-license",
    ),
]
