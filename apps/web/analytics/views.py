"""
Analytics API views - public event tracking.
"""

from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from apps.web.analytics.serializers import TrackEventRequest
from apps.web.analytics.services import record_event
from apps.web.core.decorators import json_body
from apps.web.core.models import Vendor


@csrf_exempt
@require_POST
@json_body(TrackEventRequest)
def track_event(request: HttpRequest, payload: TrackEventRequest) -> JsonResponse:
    """
    POST /api/analytics/track

    Records a scan, visit, menu view or item view for a restaurant.
    Called by the public menu page; no authentication.
    """
    vendor = Vendor.objects.filter(restaurant_name=payload.restaurant_name).first()
    if vendor is None:
        return JsonResponse({"error": "Restaurant not found"}, status=404)

    record_event(vendor, payload, request)
    return JsonResponse({"success": True})
