"""Admin registrations for Deck models."""

from __future__ import annotations

from django.contrib import admin
from django.db.models import QuerySet

from deck.models import Presentation, SlideElement


class OwnerScopedAdmin(admin.ModelAdmin):
    """ModelAdmin that limits non-superusers to rows they own."""

    owner_lookup = "owner"

    def get_queryset(self, request) -> QuerySet:
        """Return a queryset scoped to the authenticated user."""

        qs = super().get_queryset(request)
        if request.user.is_superuser:
            return qs
        return qs.filter(**{self.owner_lookup: request.user})


@admin.register(Presentation)
class PresentationAdmin(OwnerScopedAdmin):
    list_display = ("title", "owner", "theme", "updated_at")
    list_filter = ("theme",)
    search_fields = ("title",)


@admin.register(SlideElement)
class SlideElementAdmin(OwnerScopedAdmin):
    owner_lookup = "presentation__owner"
    list_display = ("id", "presentation", "slide_index", "element_type", "updated_at")
    list_filter = ("element_type",)
    list_select_related = ("presentation",)
