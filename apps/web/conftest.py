"""
Pytest configuration for Django app tests.
"""

from django.test import Client

import pytest

from apps.web.accounts.services import issue_token
from apps.web.core.models import Vendor
from apps.web.restaurant.tests.factories import VendorFactory


@pytest.fixture
def vendor() -> Vendor:
    """Create a test vendor with a restaurant name."""
    return VendorFactory(
        email="owner@example.com",
        restaurant_name="Test Bistro",
    )


@pytest.fixture
def vendor_token(vendor: Vendor) -> str:
    """Signed session token for the test vendor."""
    return issue_token(vendor)


@pytest.fixture
def vendor_client(vendor_token: str) -> Client:
    """Test client that sends the vendor's token as a bearer header."""
    return Client(HTTP_AUTHORIZATION=f"Bearer {vendor_token}")


@pytest.fixture
def cookie_client(vendor_token: str) -> Client:
    """Test client that carries the vendor's token as the session cookie."""
    client = Client()
    client.cookies["token"] = vendor_token
    return client
