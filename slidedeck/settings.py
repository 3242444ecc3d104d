"""Django settings for the slidedeck project.

Every deployment-specific value is read from the environment. Defaults are
tuned for local development (SQLite, DEBUG on, console logging); production
sets `DJANGO_DEBUG=0` and supplies a secret key and `DATABASE_URL`.

Chart editing reads three project settings:

- `SLIDEDECK_CHART_PALETTE`: fallback chart colors (comma-separated hex).
- `SLIDEDECK_THEMES_PATH`: YAML theme catalog.
- `SLIDEDECK_DEFAULT_THEME`: theme used when a presentation names none.
"""

from __future__ import annotations

import os
from pathlib import Path

import dj_database_url

BASE_DIR = Path(__file__).resolve().parent.parent

_TRUTHY = {"1", "true", "t", "yes", "y", "on"}


def _env_bool(name: str, *, default: bool) -> bool:
    """Read a boolean flag from the environment."""

    raw = os.getenv(name)
    return default if raw is None else raw.strip().lower() in _TRUTHY


def _env_int(name: str, *, default: int) -> int:
    """Read an integer from the environment."""

    raw = os.getenv(name)
    return default if raw is None else int(raw.strip())


def _env_csv(name: str, *, default: list[str]) -> list[str]:
    """Read a comma-separated list from the environment.

    Blank entries are dropped and the rest are trimmed.
    """

    raw = os.getenv(name)
    if raw is None:
        return list(default)
    return [part.strip() for part in raw.split(",") if part.strip()]


# Core

DEBUG = _env_bool("DJANGO_DEBUG", default=True)

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY") or ("slidedeck-dev-insecure-key" if DEBUG else "")
if not SECRET_KEY:
    raise RuntimeError("DJANGO_SECRET_KEY must be set when DJANGO_DEBUG is off.")

ALLOWED_HOSTS: list[str] = _env_csv("DJANGO_ALLOWED_HOSTS", default=["localhost", "127.0.0.1"])
CSRF_TRUSTED_ORIGINS: list[str] = _env_csv("DJANGO_CSRF_TRUSTED_ORIGINS", default=[])

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "deck.apps.DeckConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]
if not DEBUG:
    # WhiteNoise must sit directly after SecurityMiddleware.
    MIDDLEWARE.insert(1, "whitenoise.middleware.WhiteNoiseMiddleware")

ROOT_URLCONF = "slidedeck.urls"
WSGI_APPLICATION = "slidedeck.wsgi.application"
ASGI_APPLICATION = "slidedeck.asgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    }
]

# Database

DATABASES = {
    "default": dj_database_url.config(
        default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}",
        conn_max_age=_env_int("DJANGO_DB_CONN_MAX_AGE", default=0 if DEBUG else 60),
    )
}
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Auth

AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},
]
LOGIN_URL = "/admin/login/"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Static files

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"
STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {
        "BACKEND": (
            "django.contrib.staticfiles.storage.StaticFilesStorage"
            if DEBUG
            else "whitenoise.storage.CompressedManifestStaticFilesStorage"
        )
    },
}

# Security (production defaults follow DEBUG)

SECURE_SSL_REDIRECT = _env_bool("DJANGO_SECURE_SSL_REDIRECT", default=not DEBUG)
SESSION_COOKIE_SECURE = _env_bool("DJANGO_SESSION_COOKIE_SECURE", default=not DEBUG)
CSRF_COOKIE_SECURE = _env_bool("DJANGO_CSRF_COOKIE_SECURE", default=not DEBUG)
SECURE_HSTS_SECONDS = _env_int("DJANGO_SECURE_HSTS_SECONDS", default=0 if DEBUG else 3600)
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = "DENY"

# Logging

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "root": {"handlers": ["console"], "level": os.getenv("DJANGO_LOG_LEVEL", "INFO")},
    "loggers": {
        "chartdata": {"level": os.getenv("SLIDEDECK_CHART_LOG_LEVEL", "WARNING")},
    },
}

# Charts and themes

SLIDEDECK_CHART_PALETTE: list[str] = _env_csv(
    "SLIDEDECK_CHART_PALETTE",
    default=["#2563EB", "#F97316", "#34D399", "#FBBF24", "#C084FC", "#F472B6"],
)
SLIDEDECK_THEMES_PATH = Path(os.getenv("SLIDEDECK_THEMES_PATH") or BASE_DIR / "deck" / "themes.yaml")
SLIDEDECK_DEFAULT_THEME = os.getenv("SLIDEDECK_DEFAULT_THEME", "minimal")
