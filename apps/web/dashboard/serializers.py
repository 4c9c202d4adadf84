"""Pydantic schemas for dashboard endpoints."""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field

from apps.web.restaurant.serializers import DiscountSchema, PricingSchema


class DiscountPreviewQuery(BaseModel):
    """
    Query params for GET /dashboard/discounts/preview.

    discount_type/discount_value preview unsaved settings; when omitted the
    vendor's saved configuration is used.
    """

    price: Decimal = Field(default=Decimal("100"), ge=0, max_digits=10)
    discount_type: Literal["percentage", "fixed"] | None = None
    discount_value: Decimal | None = Field(default=None, ge=0, max_digits=10)


class DiscountPreviewResponse(BaseModel):
    """Response for GET /dashboard/discounts/preview."""

    discount: DiscountSchema
    pricing: PricingSchema


class DashboardHomeResponse(BaseModel):
    """Response for GET /dashboard/."""

    email: str
    restaurant_name: str
    public_menu_url: str | None
    menu_item_count: int
    discount: DiscountSchema
    discount_active: bool
