"""JSON views used by the slide editor's chart format panel."""

from __future__ import annotations

import json
import logging

from django.contrib.auth.decorators import login_required
from django.http import HttpRequest, HttpResponseNotAllowed, JsonResponse
from django.shortcuts import get_object_or_404

from deck.chart_ops import ChartOperationError
from deck.models import SlideElement
from deck.services import chart_payload, edit_chart_element, load_chart_record

logger = logging.getLogger(__name__)


def _error(message: str, *, status: int = 400) -> JsonResponse:
    """Return a JSON error response."""

    return JsonResponse({"error": message}, status=status)


@login_required
def chart_data_api(request: HttpRequest, element_id: int) -> JsonResponse | HttpResponseNotAllowed:
    """Return (GET) or edit (POST) the chart data of one slide element.

    Elements are scoped to the authenticated user's presentations; anything
    else is a 404. POST bodies carry exactly one operation, see
    `deck.chart_ops`.
    """

    if request.method not in ("GET", "POST"):
        return HttpResponseNotAllowed(["GET", "POST"])

    element = get_object_or_404(
        SlideElement.objects.select_related("presentation"),
        pk=element_id,
        presentation__owner=request.user,
    )
    if not element.is_chart:
        return _error(f"Element {element.pk} is not a chart.")

    if request.method == "GET":
        return JsonResponse(chart_payload(load_chart_record(element)))

    try:
        operation = json.loads(request.body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("Rejected chart edit for element %s: malformed JSON", element.pk)
        return _error("Request body must be valid JSON.")

    try:
        record = edit_chart_element(element=element, operation=operation)
    except ChartOperationError as exc:
        logger.warning("Rejected chart edit for element %s: %s", element.pk, exc)
        return _error(str(exc))
    return JsonResponse(chart_payload(record))
