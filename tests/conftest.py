from types import SimpleNamespace

import pytest

from hijri_calendar.api import reference, settings, strings


@pytest.fixture(autouse=True)
def no_frappe_site(monkeypatch):
    """Run every test as if outside a Frappe site."""

    monkeypatch.setattr(settings, "frappe", None)
    monkeypatch.setattr(strings, "frappe", None)
    monkeypatch.setattr(reference, "get_system_timezone", None)


@pytest.fixture
def site_defaults(monkeypatch):
    """Install a fake Frappe module whose site defaults come from a dict."""

    store = {}
    fake = SimpleNamespace(
        db=SimpleNamespace(get_default=lambda key: store.get(key)),
        _=lambda text: f"[{text}]",
    )
    monkeypatch.setattr(settings, "frappe", fake)
    monkeypatch.setattr(strings, "frappe", fake)
    return store
