"""Admin registration for analytics models."""

from django.contrib import admin

from apps.web.analytics.models import AnalyticsEvent


@admin.register(AnalyticsEvent)
class AnalyticsEventAdmin(admin.ModelAdmin):  # type: ignore[type-arg]
    list_display = ["event_type", "restaurant_name", "vendor", "timestamp"]
    list_filter = ["event_type", "vendor"]
    search_fields = ["restaurant_name", "referrer"]
    readonly_fields = [
        "vendor",
        "restaurant_name",
        "event_type",
        "ip_hash",
        "user_agent_hash",
        "referrer",
        "timestamp",
        "metadata",
        "created_at",
        "updated_at",
    ]
    date_hierarchy = "timestamp"
