"""Test environment: a signing secret must exist before app.main is imported."""

import os

os.environ.setdefault("SECRET", "test-secret-key")
os.environ.setdefault("COOKIE_SECURE", "false")
