"""
URL configuration for the QR menu backend.
"""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("dashboard/", include("apps.web.dashboard.urls")),
    # Vendor login
    path("api/auth/", include("apps.web.accounts.urls")),
    # Vendor + public menu API
    path("api/", include("apps.web.restaurant.urls")),
    path("api/analytics/", include("apps.web.analytics.urls")),
]
