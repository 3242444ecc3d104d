"""Pytest fixtures shared across Django integration tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest
from django.contrib.auth import get_user_model


@pytest.fixture
def user(db):
    """Return a User that owns the default test presentation."""

    user_model = get_user_model()
    return user_model.objects.create_user(username="alice", password="password")


@pytest.fixture
def auth_client(client, user):
    """Return a Django test client authenticated as the default test user."""

    client.force_login(user)
    return client


@pytest.fixture
def presentation(user):
    """Return a presentation with a fixed two-color chart palette."""

    from deck.models import Presentation

    return Presentation.objects.create(owner=user, title="Quarterly review", chart_palette=["#111111", "#222222"])


@pytest.fixture
def chart_element(presentation):
    """Return a bar chart element with two categories and two series."""

    from deck.models import SlideElement

    return SlideElement.objects.create(
        presentation=presentation,
        slide_index=0,
        element_type="chart",
        settings={
            "chartType": "bar",
            "chartData": {
                "type": "bar",
                "title": "Revenue",
                "labels": ["Q1", "Q2"],
                "datasets": [
                    {"id": "series-a", "label": "North", "color": "#111111", "data": [1, 2]},
                    {"id": "series-b", "label": "South", "color": "#222222", "data": [3, 4]},
                ],
            },
        },
    )


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no database access.
    - `integration`: tests touching Django, database, views, commands, or IO.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
