"""Django app configuration for Deck."""

from __future__ import annotations

from django.apps import AppConfig


class DeckConfig(AppConfig):
    """AppConfig for presentations and slide elements."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "deck"
