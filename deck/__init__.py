"""Presentations, slide elements, and the chart editing API."""
