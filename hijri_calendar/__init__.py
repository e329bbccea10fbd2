"""Hijri calendar conversion and formatting for Frappe sites."""

__version__ = "0.1.0"
