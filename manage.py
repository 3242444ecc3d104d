#!/usr/bin/env python
"""Command-line entry point for the slidedeck project (migrations, chart maintenance)."""

from __future__ import annotations

import os
import sys


def main() -> None:
    """Dispatch to Django's management command runner."""

    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "slidedeck.settings")
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError("Django is required to run slidedeck management commands.") from exc
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
