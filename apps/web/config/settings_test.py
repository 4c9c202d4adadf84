"""
Settings for the test suite.

Seeds the environment with throwaway values, then loads the real settings.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-pytest")
os.environ.setdefault("DEBUG", "False")
os.environ.setdefault("ALLOWED_HOSTS", "localhost,testserver")
os.environ.setdefault("DATABASE_URL", "sqlite://:memory:")
os.environ.setdefault("TOKEN_SIGNING_SECRET", "test-token-signing-secret")
os.environ.setdefault("RESEND_API_KEY", "re_test_key")
os.environ.setdefault("PUBLIC_SITE_URL", "https://menus.example.com")

from apps.web.config.settings import *  # noqa: E402, F403
