"""The boot check loads settings, imports the app and lists its routes."""

from __future__ import annotations

import pytest

from scripts.boot_check import list_routes, main
from swap_split.api.main import app


def test_list_routes_includes_router_endpoints() -> None:
    routes = list_routes(app)

    assert "POST /subscriptions" in routes
    assert "GET /subscriptions" in routes
    assert "DELETE /subscriptions" in routes
    assert "GET /health" in routes
    assert routes == sorted(routes)


def test_boot_check_reports_settings_and_routes(capsys: pytest.CaptureFixture[str]) -> None:
    main()

    out = capsys.readouterr().out
    assert "Imported swap_split.api.main:app OK" in out
    assert "Database driver:" in out
    assert "AUTO_CREATE_TABLES:" in out
    assert "Rate limit: disabled" in out
    assert "POST /subscriptions" in out
