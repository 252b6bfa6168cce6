"""
Django settings for the SmartRide matching service.

The service is stateless: no database, no sessions. Route catalog and fleet
snapshots are read from the paths below on every request.
"""

import os
from pathlib import Path

from django.core.exceptions import ImproperlyConfigured
from dotenv import load_dotenv

from fleet.policy import locator_policy_for_statuses

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent
REPO_ROOT = BASE_DIR.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "smartride-dev-only-secret")
DEBUG = os.getenv("DJANGO_DEBUG", "false").lower() in ("1", "true", "yes")
ALLOWED_HOSTS = [host for host in os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",") if host]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "matching_api",
]

MIDDLEWARE = [
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "smartride_backend.urls"

DATABASES = {}

USE_TZ = True

REST_FRAMEWORK = {
    # Authentication is handled by the gateway in front of this service
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
}

# --- Snapshots consumed by the matching engine ---
SMARTRIDE_ROUTES_PATH = os.getenv("SMARTRIDE_ROUTES_PATH", str(REPO_ROOT / "sampledata" / "routes.json"))
SMARTRIDE_FLEET_PATH = os.getenv("SMARTRIDE_FLEET_PATH", str(REPO_ROOT / "sampledata" / "vehicles.csv"))

# Comma separated statuses, e.g. "online,full". Empty means no status filter.
# Parsed here so a bad value stops the service at startup.
SMARTRIDE_ELIGIBLE_STATUSES = [
    status for status in os.getenv("SMARTRIDE_ELIGIBLE_STATUSES", "").split(",") if status.strip()
]
try:
    SMARTRIDE_LOCATOR_POLICY = locator_policy_for_statuses(SMARTRIDE_ELIGIBLE_STATUSES)
except ValueError as exc:
    raise ImproperlyConfigured(f"SMARTRIDE_ELIGIBLE_STATUSES: {exc}") from exc

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {"console": {"class": "logging.StreamHandler"}},
    "loggers": {
        "matching": {"handlers": ["console"], "level": os.getenv("SMARTRIDE_LOG_LEVEL", "INFO")},
        "matching_api": {"handlers": ["console"], "level": os.getenv("SMARTRIDE_LOG_LEVEL", "INFO")},
    },
}
