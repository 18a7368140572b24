"""Django settings for the ticket purchase service."""

import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "django-insecure-local-development-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() == "true"
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "tickets",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "config.urls"

# Nothing is persisted; Django falls back to its dummy database backend.
DATABASES = {}

USE_TZ = True

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "TEST_REQUEST_DEFAULT_FORMAT": "json",
}

# Tickets
TICKETS_MAX_PER_PURCHASE = int(os.environ.get("TICKETS_MAX_PER_PURCHASE", "20"))
TICKETS_PAYMENT_GATEWAY = os.environ.get(
    "TICKETS_PAYMENT_GATEWAY", "tickets.gateways.memory.InMemoryPaymentGateway"
)
TICKETS_RESERVATION_GATEWAY = os.environ.get(
    "TICKETS_RESERVATION_GATEWAY", "tickets.gateways.memory.InMemorySeatReservationGateway"
)
TICKETS_LOG_LEVEL = os.environ.get("TICKETS_LOG_LEVEL", "INFO")
