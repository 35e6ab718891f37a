"""Tests for the typer CLI."""

import json
import logging

from rich.logging import RichHandler
from typer.testing import CliRunner

from polymarket_proxy.api.errors import UpstreamError
from polymarket_proxy.api.gamma import GammaClient
from polymarket_proxy.logs import configure_logging
from polymarket_proxy.main import app
from polymarket_proxy.models import Event

runner = CliRunner()


def _json_payload(output: str):
    return json.loads(output[output.index("["):])


class TestEventsCommand:
    def test_json_output_matches_server_shape(self, monkeypatch, sample_events) -> None:
        seen = []

        async def fake_fetch(self, options=None):
            seen.append(options)
            return [Event.from_dict(e) for e in sample_events]

        monkeypatch.setattr(GammaClient, "fetch_active_events", fake_fetch)
        result = runner.invoke(app, ["events", "--limit", "2", "--format", "json"])

        assert result.exit_code == 0
        payload = _json_payload(result.stdout)
        assert [e["slug"] for e in payload] == ["fed-decision-in-december", "super-bowl-champion-2026"]
        assert payload[0]["markets"][0]["clobTokenIds"] == '["1111", "2222"]'
        assert seen[0].limit == 2

    def test_client_error_exits_nonzero(self, monkeypatch) -> None:
        async def fake_fetch(self, options=None):
            raise UpstreamError(503, "maintenance")

        monkeypatch.setattr(GammaClient, "fetch_active_events", fake_fetch)
        result = runner.invoke(app, ["events", "--format", "json"])

        assert result.exit_code == 1

    def test_negative_limit_rejected(self) -> None:
        result = runner.invoke(app, ["events", "--limit", "-3"])
        assert result.exit_code != 0


def test_configure_logging_is_idempotent() -> None:
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        configure_logging("debug")
        configure_logging("warning")
        added = [h for h in root.handlers if isinstance(h, RichHandler) and h not in before]
        assert len(added) <= 1
        assert root.level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root.handlers[:] = before
        root.setLevel(level)
