"""Jinja2 templates bundled with license_detector."""
