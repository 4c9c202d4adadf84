"""
URL routing for analytics endpoints.
"""

from django.urls import path

from apps.web.analytics import views

app_name = "analytics"

urlpatterns = [
    path("track", views.track_event, name="track"),
]
