"""
Analytics services - recording public menu events.
"""

import logging

from django.http import HttpRequest

from apps.web.analytics.models import AnalyticsEvent, hash_value
from apps.web.analytics.serializers import TrackEventRequest
from apps.web.core.models import Vendor

logger = logging.getLogger(__name__)


def get_client_ip(request: HttpRequest) -> str:
    """
    Resolve the visitor IP.

    Order: first X-Forwarded-For hop, X-Real-IP, then REMOTE_ADDR.
    """
    forwarded = request.headers.get("X-Forwarded-For", "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.headers.get("X-Real-IP") or request.META.get("REMOTE_ADDR", "")


def record_event(
    vendor: Vendor, event: TrackEventRequest, request: HttpRequest
) -> AnalyticsEvent:
    """
    Store an event for a vendor, hashing the visitor's IP and user agent.

    Args:
        vendor: Vendor whose menu generated the event
        event: Validated tracking payload
        request: Incoming request (source of IP, user agent, referrer)

    Returns:
        The created AnalyticsEvent
    """
    ip_address = get_client_ip(request)
    user_agent = request.headers.get("User-Agent", "")

    analytics_event = AnalyticsEvent.objects.create(
        vendor=vendor,
        restaurant_name=event.restaurant_name,
        event_type=event.event_type,
        ip_hash=hash_value(ip_address) if ip_address else "",
        user_agent_hash=hash_value(user_agent) if user_agent else "",
        referrer=request.headers.get("Referer", ""),
        metadata=event.metadata.model_dump(exclude_none=True),
    )

    logger.debug(
        "Recorded %s event for vendor %s", event.event_type, vendor.pk
    )
    return analytics_event
