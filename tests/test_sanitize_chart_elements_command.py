"""Tests for the sanitize_chart_elements management command."""

from __future__ import annotations

from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from deck.models import SlideElement

pytestmark = pytest.mark.integration


@pytest.fixture
def messy_element(presentation) -> SlideElement:
    return SlideElement.objects.create(
        presentation=presentation,
        element_type="chart",
        settings={
            "chartData": {
                "type": "pie",
                "labels": ["A", " ", "C"],
                "datasets": [
                    {"id": "p1", "data": [1, "2"]},
                    {"id": "p2", "data": [3, 4, 5]},
                ],
            },
            "width": 480,
        },
    )


@pytest.mark.django_db
def test_command_requires_explicit_mode(messy_element) -> None:
    with pytest.raises(CommandError):
        call_command("sanitize_chart_elements")
    with pytest.raises(CommandError):
        call_command("sanitize_chart_elements", "--check", "--write")


@pytest.mark.django_db
def test_check_reports_without_writing(messy_element) -> None:
    out = StringIO()
    call_command("sanitize_chart_elements", "--check", stdout=out)
    assert "[CHECK]" in out.getvalue()
    assert "'updated': 1" in out.getvalue()

    messy_element.refresh_from_db()
    assert len(messy_element.settings["chartData"]["datasets"]) == 2
    assert "chartType" not in messy_element.settings


@pytest.mark.django_db
def test_write_normalizes_and_is_idempotent(messy_element, presentation) -> None:
    SlideElement.objects.create(presentation=presentation, element_type="text", settings={"html": "<p>hi</p>"})

    call_command("sanitize_chart_elements", "--write", stdout=StringIO())
    messy_element.refresh_from_db()
    chart = messy_element.settings["chartData"]
    assert messy_element.settings["chartType"] == "pie"
    assert messy_element.settings["width"] == 480
    assert chart["labels"] == ["A", "Category 2", "C"]
    assert len(chart["datasets"]) == 1
    assert chart["datasets"][0]["id"] == "p1"
    assert chart["datasets"][0]["data"] == [1, 2.0, 0]
    assert chart["datasets"][0]["segmentColors"] == ["#111111", "#222222", "#111111"]

    out = StringIO()
    call_command("sanitize_chart_elements", "--write", stdout=out)
    assert "'processed': 1" in out.getvalue()
    assert "'no_change': 1" in out.getvalue()
