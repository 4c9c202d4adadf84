"""
Integration tests for menu and vendor profile API views.
"""

import json
from decimal import Decimal
from unittest.mock import patch

from django.test import Client

import pytest

from apps.web.core.models import Vendor
from apps.web.restaurant.models import MenuItem
from apps.web.restaurant.tests.factories import MenuItemFactory, VendorFactory

PROFILE_URL = "/api/vendor/profile"
MENU_URL = "/api/vendor/menu"
PUBLIC_MENU_URL = "/api/menu/public"


def _put(client: Client, url: str, data: dict) -> object:
    return client.put(url, data=json.dumps(data), content_type="application/json")


@pytest.mark.django_db
class TestVendorAuthentication:
    """Tests for token enforcement on vendor endpoints."""

    @pytest.mark.parametrize("url", [PROFILE_URL, MENU_URL])
    def test_missing_token(self, client: Client, url: str) -> None:
        response = client.get(url)

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized"}

    def test_invalid_token(self, client: Client) -> None:
        response = client.get(PROFILE_URL, HTTP_AUTHORIZATION="Bearer not-a-token")

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid or expired token"}

    def test_cookie_token_accepted(self, cookie_client: Client) -> None:
        response = cookie_client.get(PROFILE_URL)

        assert response.status_code == 200

    def test_token_for_deleted_vendor(
        self, vendor_client: Client, vendor: Vendor
    ) -> None:
        """A valid signature for a vendor that no longer exists is rejected."""
        vendor.delete()

        response = vendor_client.get(PROFILE_URL)

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid or expired token"}

    def test_missing_secret(self, vendor_client: Client, settings) -> None:
        settings.TOKEN_SIGNING_SECRET = ""

        response = vendor_client.get(PROFILE_URL)

        assert response.status_code == 500
        assert response.json() == {"error": "Server configuration error"}


@pytest.mark.django_db
class TestProfile:
    """Tests for GET/PUT /api/vendor/profile."""

    def test_get_profile(self, vendor_client: Client, vendor: Vendor) -> None:
        response = vendor_client.get(PROFILE_URL)

        assert response.status_code == 200
        data = response.json()["vendor"]
        assert data["email"] == "owner@example.com"
        assert data["restaurant_name"] == "Test Bistro"
        assert data["discount_type"] == "percentage"
        assert "otp" not in data

    def test_update_discount(self, vendor_client: Client, vendor: Vendor) -> None:
        response = _put(
            vendor_client,
            PROFILE_URL,
            {"discount_type": "fixed", "discount_value": "30"},
        )

        assert response.status_code == 200
        assert response.json()["message"] == "Profile updated successfully"
        vendor.refresh_from_db()
        assert vendor.discount_type == "fixed"
        assert vendor.discount_value == Decimal("30")

    def test_partial_update_keeps_other_fields(
        self, vendor_client: Client, vendor: Vendor
    ) -> None:
        response = _put(vendor_client, PROFILE_URL, {"phone": "+15550000000"})

        assert response.status_code == 200
        vendor.refresh_from_db()
        assert vendor.phone == "+15550000000"
        assert vendor.restaurant_name == "Test Bistro"
        assert vendor.address == "123 Main St"

    def test_percentage_above_100_rejected(
        self, vendor_client: Client, vendor: Vendor
    ) -> None:
        response = _put(
            vendor_client,
            PROFILE_URL,
            {"discount_type": "percentage", "discount_value": "150"},
        )

        assert response.status_code == 400
        assert response.json()["details"] == [
            {
                "field": "discount_value",
                "message": "Percentage discount cannot exceed 100",
            }
        ]
        vendor.refresh_from_db()
        assert vendor.discount_value == Decimal("0")

    def test_switching_to_percentage_checks_stored_value(
        self, vendor_client: Client, vendor: Vendor
    ) -> None:
        """Changing only the type should validate against the stored value."""
        vendor.discount_type = "fixed"
        vendor.discount_value = Decimal("150")
        vendor.save()

        response = _put(vendor_client, PROFILE_URL, {"discount_type": "percentage"})

        assert response.status_code == 400

    def test_large_fixed_discount_allowed(self, vendor_client: Client) -> None:
        response = _put(
            vendor_client,
            PROFILE_URL,
            {"discount_type": "fixed", "discount_value": "150"},
        )

        assert response.status_code == 200

    def test_negative_discount_rejected(self, vendor_client: Client) -> None:
        response = _put(vendor_client, PROFILE_URL, {"discount_value": "-5"})

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "discount_value"

    def test_unknown_discount_type_rejected(self, vendor_client: Client) -> None:
        response = _put(vendor_client, PROFILE_URL, {"discount_type": "bogo"})

        assert response.status_code == 400

    def test_restaurant_name_must_be_unique(self, vendor_client: Client) -> None:
        VendorFactory(restaurant_name="Taken Name")

        response = _put(vendor_client, PROFILE_URL, {"restaurant_name": "Taken Name"})

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "restaurant_name"

    def test_name_claimed_after_check(
        self, vendor_client: Client, vendor: Vendor
    ) -> None:
        """A name taken between the check and the save is still a 400."""
        VendorFactory(restaurant_name="Taken Name")

        with patch(
            "apps.web.restaurant.views._validate_profile_update", return_value=[]
        ):
            response = _put(
                vendor_client, PROFILE_URL, {"restaurant_name": "Taken Name"}
            )

        assert response.status_code == 400
        assert response.json()["details"] == [
            {
                "field": "restaurant_name",
                "message": "Restaurant name is already taken",
            }
        ]
        vendor.refresh_from_db()
        assert vendor.restaurant_name == "Test Bistro"

    def test_keeping_own_name_allowed(self, vendor_client: Client) -> None:
        response = _put(vendor_client, PROFILE_URL, {"restaurant_name": "Test Bistro"})

        assert response.status_code == 200

    def test_post_not_allowed(self, vendor_client: Client) -> None:
        response = vendor_client.post(PROFILE_URL)

        assert response.status_code == 405


@pytest.mark.django_db
class TestMenuCrud:
    """Tests for /api/vendor/menu."""

    def test_list_only_own_items(self, vendor_client: Client, vendor: Vendor) -> None:
        own = MenuItemFactory(vendor=vendor, name="Soup")
        MenuItemFactory(name="Someone else's soup")

        response = vendor_client.get(MENU_URL)

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert [item["id"] for item in data["items"]] == [own.pk]

    def test_add_item(self, vendor_client: Client, vendor: Vendor) -> None:
        response = vendor_client.post(
            MENU_URL,
            data=json.dumps(
                {"name": "Pasta", "price": "12.50", "category": "Mains"}
            ),
            content_type="application/json",
        )

        assert response.status_code == 201
        item = response.json()["item"]
        assert item["name"] == "Pasta"
        assert item["price"] == "12.50"
        assert MenuItem.objects.get(pk=item["id"]).vendor == vendor

    def test_add_item_ignores_vendor_in_body(
        self, vendor_client: Client, vendor: Vendor
    ) -> None:
        """Items are always created for the authenticated vendor."""
        other = VendorFactory()

        response = vendor_client.post(
            MENU_URL,
            data=json.dumps(
                {
                    "name": "Pasta",
                    "price": "12.50",
                    "category": "Mains",
                    "vendor": other.pk,
                }
            ),
            content_type="application/json",
        )

        assert response.status_code == 201
        assert MenuItem.objects.get().vendor == vendor

    def test_add_item_validation(self, vendor_client: Client) -> None:
        response = vendor_client.post(
            MENU_URL,
            data=json.dumps({"name": "", "price": "-1"}),
            content_type="application/json",
        )

        assert response.status_code == 400
        fields = {detail["field"] for detail in response.json()["details"]}
        assert fields == {"name", "price", "category"}

    def test_update_item(self, vendor_client: Client, vendor: Vendor) -> None:
        item = MenuItemFactory(vendor=vendor, name="Soup", price=Decimal("5.00"))

        response = _put(vendor_client, f"{MENU_URL}/{item.pk}", {"price": "6.00"})

        assert response.status_code == 200
        item.refresh_from_db()
        assert item.price == Decimal("6.00")
        assert item.name == "Soup"

    def test_update_other_vendors_item(self, vendor_client: Client) -> None:
        item = MenuItemFactory(name="Soup")

        response = _put(vendor_client, f"{MENU_URL}/{item.pk}", {"name": "Mine now"})

        assert response.status_code == 404
        item.refresh_from_db()
        assert item.name == "Soup"

    def test_delete_item(self, vendor_client: Client, vendor: Vendor) -> None:
        item = MenuItemFactory(vendor=vendor)

        response = vendor_client.delete(f"{MENU_URL}/{item.pk}")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert not MenuItem.objects.filter(pk=item.pk).exists()

    def test_delete_other_vendors_item(self, vendor_client: Client) -> None:
        item = MenuItemFactory()

        response = vendor_client.delete(f"{MENU_URL}/{item.pk}")

        assert response.status_code == 404
        assert MenuItem.objects.filter(pk=item.pk).exists()


@pytest.mark.django_db
class TestPublicMenu:
    """Tests for GET /api/menu/public."""

    def test_public_menu_applies_discount(self, client: Client) -> None:
        vendor = VendorFactory(
            restaurant_name="Chez Test",
            discount_type="percentage",
            discount_value=Decimal("20"),
        )
        MenuItemFactory(vendor=vendor, name="Steak", price=Decimal("100.00"))

        response = client.get(PUBLIC_MENU_URL, {"restaurant": "Chez Test"})

        assert response.status_code == 200
        data = response.json()
        assert data["vendor"]["restaurant_name"] == "Chez Test"
        assert "email" not in data["vendor"]
        [item] = data["items"]
        assert item["price"] == "100.00"
        assert item["pricing"]["effective_price"] == "80.00"
        assert item["pricing"]["display_price"] == 80
        assert item["pricing"]["discount_active"] is True

    def test_public_menu_no_auth_and_cors(self, client: Client) -> None:
        VendorFactory(restaurant_name="Chez Test")

        response = client.get(PUBLIC_MENU_URL, {"restaurant": "Chez Test"})

        assert response.status_code == 200
        assert response["Access-Control-Allow-Origin"] == "*"
        assert "max-age=60" in response["Cache-Control"]

    def test_public_menu_only_that_restaurant(self, client: Client) -> None:
        vendor = VendorFactory(restaurant_name="Chez Test")
        MenuItemFactory(vendor=vendor, name="Ours")
        MenuItemFactory(name="Theirs")

        response = client.get(PUBLIC_MENU_URL, {"restaurant": "Chez Test"})

        assert [item["name"] for item in response.json()["items"]] == ["Ours"]

    def test_public_menu_missing_name(self, client: Client) -> None:
        response = client.get(PUBLIC_MENU_URL)

        assert response.status_code == 400
        assert response.json() == {"error": "Restaurant name is required"}

    def test_public_menu_unknown_restaurant(self, client: Client) -> None:
        response = client.get(PUBLIC_MENU_URL, {"restaurant": "Nowhere"})

        assert response.status_code == 404
        assert response.json() == {"error": "Restaurant not found"}
