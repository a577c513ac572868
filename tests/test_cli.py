"""
tests/test_cli.py

Purpose:
    CLI rendering of ready and failed view states.
"""

from __future__ import annotations

import httpx
import pytest
from typer.testing import CliRunner

from conftest import BASE_URL
from team_matches.cli import main as cli_main
from team_matches.scrapers import TeamMatchesFetcher

runner = CliRunner()


@pytest.fixture
def serve(monkeypatch):
    def _serve(body, status_code=200):
        transport = httpx.MockTransport(lambda request: httpx.Response(status_code, json=body))
        monkeypatch.setattr(
            cli_main.TeamMatchesFetcher,
            "from_settings",
            classmethod(lambda cls, settings: TeamMatchesFetcher(base_url=BASE_URL, transport=transport)),
        )

    return _serve


def test_show_renders_matches_and_statistics(serve, team_payload):
    serve(team_payload)

    result = runner.invoke(cli_main.app, ["show", "RCB"])

    assert result.exit_code == 0, result.output
    assert "url1" in result.output
    assert "Recent Matches" in result.output
    assert "Delhi Capitals" in result.output
    assert "Match Statistics" in result.output
    assert "Wins" in result.output


def test_show_without_statistics(serve, team_payload):
    serve(team_payload)

    result = runner.invoke(cli_main.app, ["show", "RCB", "--no-stats"])

    assert result.exit_code == 0, result.output
    assert "Recent Matches" in result.output
    assert "Match Statistics" not in result.output


def test_show_json_outputs_view_state(serve, team_payload):
    serve(team_payload)

    result = runner.invoke(cli_main.app, ["show", "RCB", "--json"])

    assert result.exit_code == 0, result.output
    assert '"status": "ready"' in result.output
    assert '"teamBannerUrl": "url1"' in result.output


def test_show_failure_exits_non_zero(serve):
    serve({}, status_code=500)

    result = runner.invoke(cli_main.app, ["show", "RCB"])

    assert result.exit_code == 1
    assert "Failed to load team matches" in result.output


def test_teams_lists_style_tokens():
    result = runner.invoke(cli_main.app, ["teams"])

    assert result.exit_code == 0
    assert "RCB" in result.output
    assert "srh" in result.output
