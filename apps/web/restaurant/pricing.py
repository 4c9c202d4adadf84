"""
Discount pricing - the single source of effective menu prices.

Both the vendor's dashboard preview and the public menu price items through
price_breakdown(), so a discount always renders identically in both places.
compute_effective_price() is exact; rounding happens only in price_breakdown().
"""

from decimal import ROUND_HALF_UP, Decimal

from apps.web.core.models import DiscountType
from apps.web.restaurant.serializers import PricingSchema

CENTS = Decimal("0.01")
WHOLE_UNITS = Decimal("1")

Number = Decimal | int | float | str


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps floats at their printed value rather than the binary one
    return Decimal(str(value))


def compute_effective_price(
    base_price: Number,
    discount_type: str,
    discount_value: Number,
) -> Decimal:
    """
    Apply a vendor discount to a base price.

    Args:
        base_price: Undiscounted item price
        discount_type: "percentage" or "fixed" (anything else = no discount)
        discount_value: Percent off, or amount off; <= 0 means no discount

    Returns:
        Effective price, never below zero and never above base_price
    """
    price = _to_decimal(base_price)
    value = _to_decimal(discount_value)

    if value <= 0:
        return price

    if discount_type == DiscountType.PERCENTAGE:
        return max(Decimal("0"), price * (1 - value / 100))

    if discount_type == DiscountType.FIXED:
        return max(Decimal("0"), price - value)

    return price


def round_for_display(amount: Decimal) -> int:
    """Round to whole currency units, halves away from zero."""
    return int(amount.quantize(WHOLE_UNITS, rounding=ROUND_HALF_UP))


def price_breakdown(
    base_price: Number,
    discount_type: str,
    discount_value: Number,
) -> PricingSchema:
    """
    Price an item for display.

    Returns base/effective/savings to the cent plus the whole-unit values
    shown to customers.
    """
    base = _to_decimal(base_price)
    effective = compute_effective_price(base, discount_type, discount_value)
    savings = base - effective

    return PricingSchema(
        base_price=base.quantize(CENTS, rounding=ROUND_HALF_UP),
        effective_price=effective.quantize(CENTS, rounding=ROUND_HALF_UP),
        savings=savings.quantize(CENTS, rounding=ROUND_HALF_UP),
        display_price=round_for_display(effective),
        display_savings=round_for_display(savings),
        discount_active=savings > 0,
    )
