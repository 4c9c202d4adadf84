"""
Analytics models - QR scans and public menu visits.

Visitor IP addresses and user agents are stored only as SHA-256 hashes.
"""

import hashlib

from django.db import models
from django.utils import timezone

from apps.web.core.models import VendorScopedModel


def hash_value(value: str) -> str:
    """SHA-256 hex digest of a visitor identifier."""
    return hashlib.sha256(value.encode()).hexdigest()


class AnalyticsEvent(VendorScopedModel):
    """
    A single tracked event on a vendor's public menu.

    metadata holds optional item_id, item_name and scan_source.
    """

    class EventType(models.TextChoices):
        SCAN = "scan", "QR Scan"
        VISIT = "visit", "Visit"
        MENU_VIEW = "menu_view", "Menu View"
        ITEM_VIEW = "item_view", "Item View"

    restaurant_name = models.CharField(max_length=200)
    event_type = models.CharField(max_length=20, choices=EventType.choices)
    ip_hash = models.CharField(max_length=64, blank=True)
    user_agent_hash = models.CharField(max_length=64, blank=True)
    referrer = models.TextField(blank=True)
    timestamp = models.DateTimeField(default=timezone.now)
    metadata = models.JSONField(default=dict, blank=True)

    class Meta:
        ordering = ["-timestamp"]
        indexes = [
            models.Index(
                fields=["vendor", "-timestamp"], name="analytics_a_vendor__3f9e21_idx"
            ),
            models.Index(
                fields=["restaurant_name", "-timestamp"],
                name="analytics_a_restaur_7b1c05_idx",
            ),
            models.Index(
                fields=["event_type", "-timestamp"], name="analytics_a_event_t_d24a86_idx"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.event_type} @ {self.restaurant_name} ({self.timestamp:%Y-%m-%d %H:%M})"
