"""
Dashboard URL routes.
"""

from django.urls import path

from . import views

app_name = "dashboard"

urlpatterns = [
    path("", views.home, name="home"),
    path("discounts/preview", views.discount_preview, name="discount_preview"),
    path("qr", views.qr_code, name="qr"),
]
