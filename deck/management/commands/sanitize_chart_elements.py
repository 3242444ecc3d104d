"""Re-normalize stored chart element data so every record satisfies chart invariants."""

from __future__ import annotations

import logging

from django.core.management.base import BaseCommand, CommandError

from chartdata.codec import encode_chart_record
from deck.models import SlideElement
from deck.services import chart_palette_for, load_chart_record, store_chart_record

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Normalize chart data stored on slide elements (idempotent)."""

    help = "Normalize chart data stored on chart slide elements (idempotent)."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument(
            "--check",
            action="store_true",
            help="Dry-run: report what would change without writing.",
        )
        parser.add_argument(
            "--write",
            action="store_true",
            help="Write changes to the database.",
        )
        parser.add_argument(
            "--limit",
            type=int,
            default=None,
            help="Optional maximum number of chart elements to process.",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        check: bool = options["check"]
        write: bool = options["write"]
        limit: int | None = options["limit"]

        if check and write:
            raise CommandError("Use either --check or --write, not both.")
        if not check and not write:
            raise CommandError("Refusing to write without explicit intent; pass --check or --write.")

        queryset = SlideElement.objects.filter(element_type="chart").select_related("presentation").order_by("id")
        if limit is not None:
            queryset = queryset[:limit]

        totals = {
            "processed": 0,
            "updated": 0,
            "no_change": 0,
        }

        for element in queryset:
            totals["processed"] += 1
            record = load_chart_record(element, palette=chart_palette_for(element.presentation))
            settings = element.settings or {}
            changed = settings.get("chartData") != encode_chart_record(record) or settings.get("chartType") != record.type
            if not changed:
                totals["no_change"] += 1
                continue

            totals["updated"] += 1
            if write:
                store_chart_record(element, record)
            else:
                logger.info("Chart element %s would be normalized", element.pk)

        mode = "CHECK" if check else "WRITE"
        self.stdout.write(f"[{mode}] {totals}")
        return None
