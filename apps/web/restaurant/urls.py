"""
URL routing for menu and vendor profile API endpoints.

Vendor endpoints require a session token; the public menu does not.
"""

from django.urls import path

from apps.web.restaurant import views

app_name = "restaurant"

urlpatterns = [
    # Vendor profile (GET, PUT)
    path("vendor/profile", views.profile, name="profile"),
    # Vendor menu (GET list, POST add)
    path("vendor/menu", views.menu_collection, name="menu"),
    # Single item (PUT update, DELETE)
    path("vendor/menu/<int:item_id>", views.menu_item, name="menu_item"),
    # Public menu page data
    path("menu/public", views.public_menu, name="public_menu"),
]
