"""Server-side helpers exposed by the Hijri calendar package."""

from . import converter, formatter, julian_day, reference, settings, strings, structure

__all__ = [
    "converter",
    "formatter",
    "julian_day",
    "reference",
    "settings",
    "strings",
    "structure",
]
