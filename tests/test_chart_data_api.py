"""Integration tests for the chart data JSON API."""

from __future__ import annotations

import json

import pytest
from django.contrib.auth import get_user_model
from django.urls import reverse

from deck.models import Presentation, SlideElement

pytestmark = pytest.mark.integration


def _url(element: SlideElement) -> str:
    return reverse("deck:chart_data_api", kwargs={"element_id": element.pk})


def _post(client, element: SlideElement, payload: object):
    return client.post(_url(element), data=json.dumps(payload), content_type="application/json")


@pytest.mark.django_db
def test_get_returns_normalized_chart_and_affordances(auth_client, chart_element) -> None:
    response = auth_client.get(_url(chart_element))
    assert response.status_code == 200
    payload = response.json()
    assert payload["chartType"] == "bar"
    assert payload["chartData"]["labels"] == ["Q1", "Q2"]
    assert [d["data"] for d in payload["chartData"]["datasets"]] == [[1, 2], [3, 4]]
    assert payload["variantOptions"] == [{"value": "bar", "label": "Bar"}]
    assert payload["guards"] == {"canAddSeries": True, "canRemoveSeries": True, "canRemoveCategory": True}


@pytest.mark.django_db
def test_post_remove_category_persists_sanitized_record(auth_client, chart_element) -> None:
    response = _post(auth_client, chart_element, {"op": "remove_category", "index": 0})
    assert response.status_code == 200
    assert response.json()["chartData"]["labels"] == ["Q2"]

    chart_element.refresh_from_db()
    stored = chart_element.settings["chartData"]
    assert stored["labels"] == ["Q2"]
    assert [d["data"] for d in stored["datasets"]] == [[2], [4]]
    assert chart_element.settings["chartType"] == "bar"
    assert response.json()["guards"]["canRemoveCategory"] is False


@pytest.mark.django_db
def test_consecutive_edits_build_on_stored_record(auth_client, chart_element) -> None:
    _post(auth_client, chart_element, {"op": "set_data_value", "seriesIndex": 1, "categoryIndex": 0, "value": "9.5"})
    _post(auth_client, chart_element, {"op": "rename_series", "index": 0, "label": "  East "})
    response = _post(auth_client, chart_element, {"op": "add_category"})

    datasets = response.json()["chartData"]["datasets"]
    assert [d["data"] for d in datasets] == [[1, 2, 0], [9.5, 4, 0]]
    assert datasets[0]["label"] == "East"
    assert [d["id"] for d in datasets] == ["series-a", "series-b"]


@pytest.mark.django_db
def test_switching_to_pie_collapses_series_and_reports_type(auth_client, chart_element) -> None:
    response = _post(auth_client, chart_element, {"op": "set_chart_type", "type": "pie"})
    payload = response.json()
    assert payload["chartType"] == "pie"
    assert len(payload["chartData"]["datasets"]) == 1
    assert payload["chartData"]["datasets"][0]["segmentColors"] == ["#111111", "#222222"]
    assert payload["guards"]["canAddSeries"] is False

    response = _post(auth_client, chart_element, {"op": "add_series"})
    assert response.status_code == 200
    assert len(response.json()["chartData"]["datasets"]) == 1


@pytest.mark.django_db
def test_column_line_variant_choice_survives_reload(auth_client, chart_element) -> None:
    _post(auth_client, chart_element, {"op": "set_chart_type", "type": "columnLine"})
    _post(auth_client, chart_element, {"op": "set_series_variant", "index": 0, "variant": "line"})

    payload = auth_client.get(_url(chart_element)).json()
    assert [d["variant"] for d in payload["chartData"]["datasets"]] == ["line", "line"]
    assert [o["value"] for o in payload["variantOptions"]] == ["bar", "line"]


@pytest.mark.django_db
@pytest.mark.parametrize(
    "payload",
    [
        {"op": "explode"},
        {"index": 0},
        {"op": "remove_category"},
        {"op": "remove_category", "index": "first"},
        {"op": "remove_category", "index": "--1"},
        {"op": "remove_category", "index": "²"},
        {"op": "set_data_value", "seriesIndex": 0, "categoryIndex": 0},
        ["op", "add_series"],
    ],
)
def test_malformed_operations_are_rejected(auth_client, chart_element, payload) -> None:
    before = dict(chart_element.settings)
    response = _post(auth_client, chart_element, payload)
    assert response.status_code == 400
    assert "error" in response.json()
    chart_element.refresh_from_db()
    assert chart_element.settings == before


@pytest.mark.django_db
def test_unknown_operation_error_lists_supported_operations(auth_client, chart_element) -> None:
    response = _post(auth_client, chart_element, {"op": "explode"})
    assert response.status_code == 400
    assert "set_data_value" in response.json()["error"]


@pytest.mark.django_db
def test_huge_integer_value_is_stored_as_zero(auth_client, chart_element) -> None:
    body = '{"op": "set_data_value", "seriesIndex": 0, "categoryIndex": 0, "value": ' + "9" * 400 + "}"
    response = auth_client.post(_url(chart_element), data=body, content_type="application/json")
    assert response.status_code == 200
    assert response.json()["chartData"]["datasets"][0]["data"] == [0, 2]


@pytest.mark.django_db
def test_invalid_json_body_is_rejected(auth_client, chart_element) -> None:
    response = auth_client.post(_url(chart_element), data="{not json", content_type="application/json")
    assert response.status_code == 400


@pytest.mark.django_db
def test_non_chart_elements_are_rejected(auth_client, presentation) -> None:
    element = SlideElement.objects.create(presentation=presentation, element_type="text", settings={})
    assert auth_client.get(_url(element)).status_code == 400


@pytest.mark.django_db
def test_other_users_elements_are_not_found(client, chart_element) -> None:
    other = get_user_model().objects.create_user(username="bob", password="password")
    client.force_login(other)
    assert client.get(_url(chart_element)).status_code == 404
    assert _post(client, chart_element, {"op": "add_category"}).status_code == 404


@pytest.mark.django_db
def test_anonymous_requests_redirect_to_login(client, chart_element) -> None:
    response = client.get(_url(chart_element))
    assert response.status_code == 302


@pytest.mark.django_db
def test_unsupported_methods_return_405(auth_client, chart_element) -> None:
    assert auth_client.delete(_url(chart_element)).status_code == 405


@pytest.mark.django_db
def test_element_without_chart_data_gets_defaults(auth_client, user) -> None:
    presentation = Presentation.objects.create(owner=user, theme="noir")
    element = SlideElement.objects.create(presentation=presentation, element_type="chart", settings={})
    payload = auth_client.get(_url(element)).json()
    assert payload["chartData"]["labels"] == ["Category 1"]
    assert payload["chartData"]["datasets"][0]["color"] == "#1D4ED8"
