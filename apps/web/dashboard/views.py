"""
Dashboard views - vendor overview, discount preview and QR code.

Navigation here is guarded by DashboardGuardMiddleware (cookie present) and
each view by vendor_token_required (token valid).
"""

import io
import logging
from urllib.parse import quote

from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.views.decorators.http import require_GET

import qrcode
import qrcode.image.svg
from pydantic import ValidationError as PydanticValidationError

from apps.web.accounts.decorators import vendor_token_required
from apps.web.core.decorators import validation_error_response
from apps.web.core.models import Vendor
from apps.web.core.serializers import ValidationErrorDetail
from apps.web.dashboard.serializers import (
    DashboardHomeResponse,
    DiscountPreviewQuery,
    DiscountPreviewResponse,
)
from apps.web.restaurant.models import MenuItem
from apps.web.restaurant.pricing import price_breakdown
from apps.web.restaurant.serializers import DiscountSchema

logger = logging.getLogger(__name__)


def public_menu_url(vendor: Vendor) -> str | None:
    """URL of the vendor's public menu page, or None without a restaurant name."""
    if not vendor.restaurant_name:
        return None
    base_url = settings.PUBLIC_SITE_URL.rstrip("/")
    return f"{base_url}/restaurant/{quote(vendor.restaurant_name, safe='')}"


@require_GET
@vendor_token_required
def home(request: HttpRequest) -> JsonResponse:
    """
    GET /dashboard/

    Overview of the vendor's menu and discount status.
    """
    vendor: Vendor = request.vendor  # type: ignore[attr-defined]
    response = DashboardHomeResponse(
        email=vendor.email,
        restaurant_name=vendor.restaurant_name,
        public_menu_url=public_menu_url(vendor),
        menu_item_count=MenuItem.objects.for_vendor(request).count(),
        discount=DiscountSchema.model_validate(vendor),
        discount_active=vendor.has_active_discount,
    )
    return JsonResponse(response.model_dump(mode="json"))


@require_GET
@vendor_token_required
def discount_preview(request: HttpRequest) -> JsonResponse:
    """
    GET /dashboard/discounts/preview?price=100

    Prices a sample item exactly as the public menu would.
    """
    vendor: Vendor = request.vendor  # type: ignore[attr-defined]

    try:
        query = DiscountPreviewQuery.model_validate(request.GET.dict())
    except PydanticValidationError as e:
        return validation_error_response(
            [
                ValidationErrorDetail(
                    field=".".join(str(loc) for loc in err["loc"]),
                    message=err["msg"],
                )
                for err in e.errors()
            ]
        )

    discount = DiscountSchema(
        discount_type=query.discount_type or vendor.discount_type,
        discount_value=(
            query.discount_value
            if query.discount_value is not None
            else vendor.discount_value
        ),
    )
    response = DiscountPreviewResponse(
        discount=discount,
        pricing=price_breakdown(
            query.price, discount.discount_type, discount.discount_value
        ),
    )
    return JsonResponse(response.model_dump(mode="json"))


@require_GET
@vendor_token_required
def qr_code(request: HttpRequest) -> HttpResponse:
    """
    GET /dashboard/qr

    SVG QR code pointing at the vendor's public menu page.
    """
    vendor: Vendor = request.vendor  # type: ignore[attr-defined]

    url = public_menu_url(vendor)
    if url is None:
        return JsonResponse(
            {"error": "Set a restaurant name before generating a QR code"},
            status=400,
        )

    qr = qrcode.QRCode(box_size=10, border=4)
    qr.add_data(url)
    qr.make(fit=True)

    buffer = io.BytesIO()
    qr.make_image(image_factory=qrcode.image.svg.SvgPathImage).save(buffer)

    logger.info("Generated QR code for vendor %s", vendor.pk)

    response = HttpResponse(buffer.getvalue(), content_type="image/svg+xml")
    filename = f"{vendor.restaurant_name}-qr-code.svg"
    response["Content-Disposition"] = f"inline; filename*=UTF-8''{quote(filename)}"
    return response
