"""
Pydantic schemas for menu and vendor profile APIs.

These schemas define the API contract for vendor and public menu data.
"""

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# =============================================================================
# Pricing
# =============================================================================


class PricingSchema(BaseModel):
    """Price of one item after the vendor's discount."""

    base_price: Decimal
    effective_price: Decimal
    savings: Decimal
    display_price: int  # whole currency units
    display_savings: int  # whole currency units
    discount_active: bool


class DiscountSchema(BaseModel):
    """A vendor's discount configuration."""

    model_config = ConfigDict(from_attributes=True)

    discount_type: str
    discount_value: Decimal


# =============================================================================
# Menu Items
# =============================================================================


class MenuItemSchema(BaseModel):
    """A menu item as stored (base price)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    price: Decimal
    category: str
    image: str


class PublicMenuItemSchema(MenuItemSchema):
    """A menu item on the public menu, with discounted pricing."""

    pricing: PricingSchema


class MenuItemCreateRequest(BaseModel):
    """Request body for POST /api/vendor/menu."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    category: str = Field(..., min_length=1, max_length=100)
    image: str = ""


class MenuItemUpdateRequest(BaseModel):
    """Request body for PUT /api/vendor/menu/{item_id}. Omitted fields are kept."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(default=None, min_length=1, max_length=200)
    price: Decimal | None = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    category: str | None = Field(default=None, min_length=1, max_length=100)
    image: str | None = None


class MenuItemListResponse(BaseModel):
    """Response for GET /api/vendor/menu."""

    success: bool = True
    items: list[MenuItemSchema]


class MenuItemResponse(BaseModel):
    """Response for POST/PUT /api/vendor/menu."""

    success: bool = True
    item: MenuItemSchema


# =============================================================================
# Vendor Profile
# =============================================================================


class VendorProfileSchema(BaseModel):
    """Vendor profile as returned to the vendor (never includes the OTP)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    restaurant_name: str
    phone: str
    address: str
    description: str
    logo: str
    discount_type: str
    discount_value: Decimal


class ProfileUpdateRequest(BaseModel):
    """Request body for PUT /api/vendor/profile. Omitted fields are kept."""

    model_config = ConfigDict(str_strip_whitespace=True)

    restaurant_name: str | None = Field(default=None, max_length=200)
    phone: str | None = Field(default=None, max_length=20)
    address: str | None = None
    description: str | None = None
    logo: str | None = None
    discount_type: Literal["percentage", "fixed"] | None = None
    discount_value: Decimal | None = Field(
        default=None, ge=0, max_digits=10, decimal_places=2
    )


class ProfileResponse(BaseModel):
    """Response for GET/PUT /api/vendor/profile."""

    vendor: VendorProfileSchema
    message: str | None = None


# =============================================================================
# Public Menu
# =============================================================================


class PublicVendorSchema(BaseModel):
    """Vendor fields shown to anonymous visitors."""

    model_config = ConfigDict(from_attributes=True)

    restaurant_name: str
    description: str
    logo: str
    address: str
    phone: str
    discount_type: str
    discount_value: Decimal


class PublicMenuResponse(BaseModel):
    """Response for GET /api/menu/public?restaurant={name}."""

    items: list[PublicMenuItemSchema]
    vendor: PublicVendorSchema
