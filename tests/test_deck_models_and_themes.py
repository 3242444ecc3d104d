"""Tests for deck models, theme palettes, and chart persistence services."""

from __future__ import annotations

from pathlib import Path

import pytest
from django.core.exceptions import ValidationError

from chartdata.normalizer import normalize_chart_data
from deck.models import Presentation, SlideElement
from deck.services import ChartEditSession, chart_palette_for, load_chart_record, store_chart_record
from deck.themes import get_theme, load_themes


@pytest.mark.unit
def test_theme_catalog_loads_declared_and_derived_palettes(settings) -> None:
    themes = load_themes(str(settings.SLIDEDECK_THEMES_PATH))
    assert list(themes) == ["noir", "minimal", "newClassic", "retroTech", "boldMinimalist"]
    assert themes["noir"].chart_palette[0] == "#1D4ED8"

    retro = themes["retroTech"]
    assert retro.accent_color == "#EC4899"
    assert retro.chart_palette[0] == "#EC4899"
    assert retro.chart_palette[1:] == tuple(settings.SLIDEDECK_CHART_PALETTE)


@pytest.mark.unit
def test_unknown_theme_falls_back_to_default_theme() -> None:
    assert get_theme("does-not-exist").id == "minimal"
    assert get_theme(None).id == "minimal"


@pytest.mark.unit
def test_missing_catalog_uses_settings_palette(settings, tmp_path: Path) -> None:
    settings.SLIDEDECK_THEMES_PATH = tmp_path / "missing.yaml"
    theme = get_theme("noir")
    assert theme.id == "default"
    assert theme.chart_palette == tuple(settings.SLIDEDECK_CHART_PALETTE)


@pytest.mark.integration
@pytest.mark.django_db
def test_presentation_palette_overrides_theme(user) -> None:
    themed = Presentation.objects.create(owner=user, theme="newClassic")
    assert chart_palette_for(themed)[0] == "#0F766E"

    custom = Presentation.objects.create(owner=user, theme="newClassic", chart_palette=["#abc"])
    assert chart_palette_for(custom) == ("#AABBCC",)


@pytest.mark.integration
@pytest.mark.django_db
def test_presentation_clean_rejects_invalid_palette(user) -> None:
    presentation = Presentation(owner=user, chart_palette=["#fff", "blue"])
    with pytest.raises(ValidationError):
        presentation.full_clean()


@pytest.mark.integration
@pytest.mark.django_db
def test_slide_element_clean_validates_chart_settings(presentation) -> None:
    element = SlideElement(presentation=presentation, element_type="chart", settings={"chartType": "radar"})
    with pytest.raises(ValidationError):
        element.full_clean()

    element.settings = {"chartType": "pie", "chartData": {"labels": ["A"]}}
    element.full_clean()


@pytest.mark.integration
@pytest.mark.django_db
def test_store_chart_record_keeps_other_settings(chart_element) -> None:
    chart_element.settings["x"] = 12
    chart_element.save()

    record = normalize_chart_data({"type": "area", "labels": ["A"]}, ["#111111"])
    store_chart_record(chart_element, record)
    store_chart_record(chart_element, record)

    chart_element.refresh_from_db()
    assert chart_element.settings["x"] == 12
    assert chart_element.settings["chartType"] == "area"
    assert load_chart_record(chart_element) == record


@pytest.mark.integration
@pytest.mark.django_db
def test_chart_edit_session_persists_each_commit(chart_element) -> None:
    session = ChartEditSession(chart_element)
    session.editor.add_series()

    chart_element.refresh_from_db()
    datasets = chart_element.settings["chartData"]["datasets"]
    assert len(datasets) == 3
    assert datasets[2]["label"] == "Series 3"
    assert datasets[2]["color"] == "#111111"
    assert session.draft.datasets[2].id == datasets[2]["id"]
