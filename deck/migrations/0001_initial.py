"""Initial Deck schema: presentations and slide elements."""

from __future__ import annotations

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion

import deck.models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Presentation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(default="Untitled presentation", max_length=200)),
                ("theme", models.CharField(default=deck.models._default_theme, max_length=40)),
                (
                    "chart_palette",
                    models.JSONField(
                        blank=True,
                        default=list,
                        help_text="Optional list of hex colors overriding the theme's chart palette.",
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="presentations",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
        ),
        migrations.CreateModel(
            name="SlideElement",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("slide_index", models.PositiveIntegerField(default=0)),
                (
                    "element_type",
                    models.CharField(
                        choices=[("text", "Text"), ("shape", "Shape"), ("image", "Image"), ("chart", "Chart")],
                        max_length=16,
                    ),
                ),
                ("settings", models.JSONField(blank=True, default=dict)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "presentation",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="elements",
                        to="deck.presentation",
                    ),
                ),
            ],
            options={
                "ordering": ("presentation", "slide_index", "id"),
                "indexes": [models.Index(fields=["presentation", "slide_index"], name="deck_element_slide_idx")],
            },
        ),
    ]
