"""
URL routing for vendor login endpoints.
"""

from django.urls import path

from apps.web.accounts import views

app_name = "accounts"

urlpatterns = [
    path("send-otp", views.send_otp, name="send_otp"),
    path("verify-otp", views.verify_otp, name="verify_otp"),
]
