"""URL configuration for deck views."""

from __future__ import annotations

from django.urls import path

from deck import views

app_name = "deck"

urlpatterns = [
    path("api/elements/<int:element_id>/chart/", views.chart_data_api, name="chart_data_api"),
]
