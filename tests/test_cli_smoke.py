from __future__ import annotations

import json

from typer.testing import CliRunner

from sports_data.cli.app import app
from sports_data.domain.enums import ErrorCode, ProviderEnum, Sport
from sports_data.domain.response import DataLayerResponse


class StubLayer:
    def __init__(self) -> None:
        self.queries: list[object] = []

    def find_team(self, query):
        self.queries.append(query)
        if query.name == "Isotopes":
            return DataLayerResponse.fail(
                ErrorCode.TEAM_NOT_FOUND, "Could not find basketball team: Isotopes", provider=ProviderEnum.API_SPORTS
            )
        return DataLayerResponse.ok({"name": "Dallas Mavericks"}, provider=ProviderEnum.API_SPORTS)


def test_cli_help_smoke() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    # Basic sanity checks that top-level commands are registered.
    assert "find-team" in result.stdout
    assert "enrich" in result.stdout


def test_find_team_prints_envelope(monkeypatch) -> None:
    stub = StubLayer()
    monkeypatch.setattr("sports_data.cli.app.data_layer", lambda: stub)

    result = CliRunner().invoke(app, ["find-team", "Mavs", "--sport", "BASKETBALL"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["success"] is True
    assert payload["data"] == {"name": "Dallas Mavericks"}
    assert stub.queries[0].sport is Sport.BASKETBALL


def test_failed_call_exits_non_zero(monkeypatch) -> None:
    monkeypatch.setattr("sports_data.cli.app.data_layer", lambda: StubLayer())

    result = CliRunner().invoke(app, ["find-team", "Isotopes", "--sport", "basketball"])

    assert result.exit_code == 1
    assert json.loads(result.stdout)["error"]["code"] == "TEAM_NOT_FOUND"
