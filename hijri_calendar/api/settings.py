"""Hijri calendar settings resolved from the host site defaults."""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

try:  # pragma: no cover - frappe is unavailable during tests
    import frappe  # type: ignore
except ImportError:  # pragma: no cover - defaults apply outside a Frappe site
    frappe = None  # type: ignore

__all__ = [
    "DEFAULT_ALGORITHM",
    "DEFAULT_START_WEEKDAY",
    "HijriSettings",
    "VALID_ALGORITHMS",
    "get_settings",
    "get_settings_context",
]

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = 1
DEFAULT_START_WEEKDAY = 0
VALID_ALGORITHMS = (1, 2, 3)

_ALGORITHM_KEY = "hijri_calendar_algorithm"
_START_WEEKDAY_KEY = "hijri_calendar_start_weekday"
_NO_FIX_DAY_KEY = "hijri_calendar_no_fix_day"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class HijriSettings:
    """Resolved calendar settings.

    ``algorithm`` records the conversion variant selected by the site; the
    converter implements a single tabular algorithm and does not branch on it.
    ``no_fix_day`` forces ``%d`` to keep its leading zero.
    """

    algorithm: int = DEFAULT_ALGORITHM
    start_weekday: int = DEFAULT_START_WEEKDAY
    no_fix_day: bool = False


def _normalize_algorithm(value: Any) -> Optional[int]:
    try:
        algorithm = int(value)
    except (TypeError, ValueError):
        return None
    return algorithm if algorithm in VALID_ALGORITHMS else None


def _normalize_weekday(value: Any) -> Optional[int]:
    try:
        weekday = int(value)
    except (TypeError, ValueError):
        return None
    return weekday if 0 <= weekday <= 6 else None


def _normalize_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_VALUES
    return bool(value)


def _require_algorithm(value: Any) -> int:
    algorithm = _normalize_algorithm(value)
    if algorithm is None:
        raise ValueError(
            "algorithm must be one of: {}".format(", ".join(str(a) for a in VALID_ALGORITHMS))
        )
    return algorithm


def _require_weekday(value: Any) -> int:
    weekday = _normalize_weekday(value)
    if weekday is None:
        raise ValueError("start_weekday must be an integer in 0..6")
    return weekday


def _read_value(key: str) -> Optional[Any]:
    if frappe:
        return frappe.db.get_default(key)  # type: ignore[attr-defined]
    return None


def _read_stored(key: str, normalize, default):
    stored = _read_value(key)
    if stored is None or stored == "":
        return default
    value = normalize(stored)
    if value is None:
        logger.warning("Ignoring invalid value %r stored for %s", stored, key)
        return default
    return value


def get_settings(
    *,
    algorithm: Optional[int] = None,
    start_weekday: Optional[int] = None,
    no_fix_day: Optional[bool] = None,
) -> HijriSettings:
    """Return the active settings, applying explicit overrides on top of stored values."""

    resolved = HijriSettings(
        algorithm=(
            _require_algorithm(algorithm)
            if algorithm is not None
            else _read_stored(_ALGORITHM_KEY, _normalize_algorithm, DEFAULT_ALGORITHM)
        ),
        start_weekday=(
            _require_weekday(start_weekday)
            if start_weekday is not None
            else _read_stored(_START_WEEKDAY_KEY, _normalize_weekday, DEFAULT_START_WEEKDAY)
        ),
        no_fix_day=(
            bool(no_fix_day)
            if no_fix_day is not None
            else _read_stored(_NO_FIX_DAY_KEY, _normalize_flag, False)
        ),
    )
    logger.debug("Resolved Hijri calendar settings: %s", resolved)
    return resolved


def get_settings_context(**overrides: Any) -> Dict[str, object]:
    """Return a serialisable representation of the resolved settings."""

    context: Dict[str, object] = asdict(get_settings(**overrides))
    context["is_frappe_site"] = frappe is not None
    return context
