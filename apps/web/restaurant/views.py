"""
Menu and profile API views.

Vendor endpoints (session token required):
- Profile read/update, including the discount configuration
- Menu item list/add/update/delete

Public endpoint (no auth):
- Full menu for a restaurant name, priced through restaurant.pricing
"""

import logging
from typing import Any

from django.db import IntegrityError, transaction
from django.http import HttpRequest, JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.cache import cache_control
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_http_methods

from apps.web.accounts.decorators import vendor_token_required
from apps.web.core.decorators import json_body, validation_error_response
from apps.web.core.models import DiscountType, Vendor
from apps.web.core.serializers import ValidationErrorDetail
from apps.web.restaurant.models import MenuItem
from apps.web.restaurant.pricing import price_breakdown
from apps.web.restaurant.serializers import (
    MenuItemCreateRequest,
    MenuItemListResponse,
    MenuItemResponse,
    MenuItemSchema,
    MenuItemUpdateRequest,
    ProfileResponse,
    ProfileUpdateRequest,
    PublicMenuItemSchema,
    PublicMenuResponse,
    PublicVendorSchema,
    VendorProfileSchema,
)

logger = logging.getLogger(__name__)

MAX_PERCENTAGE_DISCOUNT = 100

DUPLICATE_NAME_ERROR = ValidationErrorDetail(
    field="restaurant_name",
    message="Restaurant name is already taken",
)


def _cors_headers() -> dict[str, str]:
    """CORS headers for the public menu page."""
    return {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": "GET, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }


def _json_response(data: dict[str, Any], status: int = 200) -> JsonResponse:
    """Create a JSON response with CORS headers."""
    response = JsonResponse(data, status=status)
    for key, value in _cors_headers().items():
        response[key] = value
    return response


def _serialize_public_item(item: MenuItem, vendor: Vendor) -> PublicMenuItemSchema:
    """Serialize a MenuItem with the vendor's discount applied."""
    return PublicMenuItemSchema(
        id=item.pk,
        name=item.name,
        price=item.price,
        category=item.category,
        image=item.image,
        pricing=price_breakdown(
            item.price, vendor.discount_type, vendor.discount_value
        ),
    )


# =============================================================================
# Vendor Profile
# =============================================================================


def _validate_profile_update(
    vendor: Vendor, changes: dict[str, Any]
) -> list[ValidationErrorDetail]:
    """Cross-field checks that need the vendor's current settings."""
    errors: list[ValidationErrorDetail] = []

    discount_type = changes.get("discount_type", vendor.discount_type)
    discount_value = changes.get("discount_value", vendor.discount_value)
    if (
        discount_type == DiscountType.PERCENTAGE
        and discount_value > MAX_PERCENTAGE_DISCOUNT
    ):
        errors.append(
            ValidationErrorDetail(
                field="discount_value",
                message="Percentage discount cannot exceed 100",
            )
        )

    restaurant_name = changes.get("restaurant_name")
    if (
        restaurant_name
        and Vendor.objects.filter(restaurant_name=restaurant_name)
        .exclude(pk=vendor.pk)
        .exists()
    ):
        errors.append(DUPLICATE_NAME_ERROR)

    return errors


@require_GET
@vendor_token_required
def profile_detail(request: HttpRequest) -> JsonResponse:
    """
    GET /api/vendor/profile

    Returns the authenticated vendor's profile and discount settings.
    """
    vendor: Vendor = request.vendor  # type: ignore[attr-defined]
    response = ProfileResponse(vendor=VendorProfileSchema.model_validate(vendor))
    return JsonResponse(response.model_dump(mode="json", exclude_none=True))


@csrf_exempt
@require_http_methods(["PUT"])
@vendor_token_required
@json_body(ProfileUpdateRequest)
def profile_update(request: HttpRequest, payload: ProfileUpdateRequest) -> JsonResponse:
    """
    PUT /api/vendor/profile

    Partially updates display fields and the discount configuration.
    Only fields present in the body are changed.
    """
    vendor: Vendor = request.vendor  # type: ignore[attr-defined]
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)

    errors = _validate_profile_update(vendor, changes)
    if errors:
        return validation_error_response(errors)

    for field, value in changes.items():
        setattr(vendor, field, value)
    try:
        with transaction.atomic():
            vendor.save(update_fields=[*changes, "updated_at"])
    except IntegrityError:
        # Another vendor claimed the name after the check above
        logger.warning("Vendor %s lost restaurant name race", vendor.pk)
        return validation_error_response([DUPLICATE_NAME_ERROR])

    logger.info("Vendor %s updated profile fields: %s", vendor.pk, sorted(changes))

    response = ProfileResponse(
        vendor=VendorProfileSchema.model_validate(vendor),
        message="Profile updated successfully",
    )
    return JsonResponse(response.model_dump(mode="json"))


@csrf_exempt
def profile(request: HttpRequest) -> JsonResponse:
    """Dispatch /api/vendor/profile by method."""
    if request.method == "PUT":
        return profile_update(request)  # type: ignore[no-any-return]
    return profile_detail(request)  # type: ignore[no-any-return]


# =============================================================================
# Vendor Menu
# =============================================================================


@require_GET
@vendor_token_required
def menu_list(request: HttpRequest) -> JsonResponse:
    """
    GET /api/vendor/menu

    Lists the authenticated vendor's menu items.
    """
    items = MenuItem.objects.for_vendor(request)
    response = MenuItemListResponse(
        items=[MenuItemSchema.model_validate(item) for item in items]
    )
    return JsonResponse(response.model_dump(mode="json"))


@csrf_exempt
@require_http_methods(["POST"])
@vendor_token_required
@json_body(MenuItemCreateRequest)
def menu_add(request: HttpRequest, payload: MenuItemCreateRequest) -> JsonResponse:
    """
    POST /api/vendor/menu

    Adds an item to the authenticated vendor's menu.
    """
    item = MenuItem.objects.create(
        vendor=request.vendor,  # type: ignore[attr-defined]
        **payload.model_dump(),
    )
    response = MenuItemResponse(item=MenuItemSchema.model_validate(item))
    return JsonResponse(response.model_dump(mode="json"), status=201)


@csrf_exempt
def menu_collection(request: HttpRequest) -> JsonResponse:
    """Dispatch /api/vendor/menu by method."""
    if request.method == "POST":
        return menu_add(request)  # type: ignore[no-any-return]
    return menu_list(request)  # type: ignore[no-any-return]


@csrf_exempt
@require_http_methods(["PUT"])
@vendor_token_required
@json_body(MenuItemUpdateRequest)
def menu_update(
    request: HttpRequest, payload: MenuItemUpdateRequest, item_id: int
) -> JsonResponse:
    """
    PUT /api/vendor/menu/{item_id}

    Updates an item. Items belonging to other vendors are reported as not found.
    """
    item = get_object_or_404(MenuItem.objects.for_vendor(request), pk=item_id)
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)

    for field, value in changes.items():
        setattr(item, field, value)
    item.save(update_fields=[*changes, "updated_at"])

    response = MenuItemResponse(item=MenuItemSchema.model_validate(item))
    return JsonResponse(response.model_dump(mode="json"))


@csrf_exempt
@require_http_methods(["DELETE"])
@vendor_token_required
def menu_delete(request: HttpRequest, item_id: int) -> JsonResponse:
    """
    DELETE /api/vendor/menu/{item_id}

    Removes an item from the authenticated vendor's menu.
    """
    item = get_object_or_404(MenuItem.objects.for_vendor(request), pk=item_id)
    item.delete()
    return JsonResponse({"success": True})


@csrf_exempt
def menu_item(request: HttpRequest, item_id: int) -> JsonResponse:
    """Dispatch /api/vendor/menu/{item_id} by method."""
    if request.method == "DELETE":
        return menu_delete(request, item_id=item_id)  # type: ignore[no-any-return]
    return menu_update(request, item_id=item_id)  # type: ignore[no-any-return]


# =============================================================================
# Public Menu
# =============================================================================


@require_GET
@cache_control(max_age=60, public=True)
def public_menu(request: HttpRequest) -> JsonResponse:
    """
    GET /api/menu/public?restaurant={name}

    Returns a restaurant's items with discounted pricing, its display fields
    and its discount configuration. No authentication.

    Cache: 1 minute (discount changes should show up quickly)
    """
    restaurant_name = request.GET.get("restaurant", "").strip()
    if not restaurant_name:
        return _json_response({"error": "Restaurant name is required"}, status=400)

    vendor = Vendor.objects.filter(restaurant_name=restaurant_name).first()
    if vendor is None:
        return _json_response({"error": "Restaurant not found"}, status=404)

    items = MenuItem.objects.filter(vendor=vendor)
    response = PublicMenuResponse(
        items=[_serialize_public_item(item, vendor) for item in items],
        vendor=PublicVendorSchema.model_validate(vendor),
    )
    return _json_response(response.model_dump(mode="json"))
