"""URL configuration for slidedeck."""

from __future__ import annotations

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("", include("deck.urls")),
    path("admin/", admin.site.urls),
]
