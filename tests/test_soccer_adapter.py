from __future__ import annotations

from datetime import UTC, date, datetime

import httpx
import pytest

from sports_data.domain.enums import ErrorCode, MatchStatus, Sport
from sports_data.domain.queries import H2HQuery, StatsQuery, TeamQuery
from sports_data.providers.api_sports.adapters.soccer import SoccerAdapter
from sports_data.providers.base.errors import ProviderCapabilityError

TODAY = date(2025, 9, 1)

EPL_TEAMS = [
    {"team": {"id": 33, "name": "Manchester United", "country": "England"}, "venue": {}},
    {"team": {"id": 50, "name": "Manchester City", "country": "England"}, "venue": {}},
    {"team": {"id": 42, "name": "Arsenal", "country": "England"}, "venue": {}},
]


def fixture(fid: int, ts: int, home: tuple[int, str], away: tuple[int, str], goals, ht, status="FT"):
    return {
        "fixture": {
            "id": fid,
            "timestamp": ts,
            "status": {"short": status},
            "venue": {"name": "Old Trafford"},
        },
        "league": {"id": 39, "name": "Premier League", "season": 2024},
        "teams": {"home": {"id": home[0], "name": home[1]}, "away": {"id": away[0], "name": away[1]}},
        "goals": {"home": goals[0], "away": goals[1]},
        "score": {"halftime": {"home": ht[0], "away": ht[1]}},
    }


def test_find_team_unwraps_team_items(api_sports_client, respond) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["season"] == "2025"
        assert request.url.params["league"] == "39"
        return respond(EPL_TEAMS)

    adapter = SoccerAdapter(client=api_sports_client(handler), today=lambda: TODAY)
    result = adapter.find_team(TeamQuery(sport=Sport.SOCCER, name="Man Utd"))

    assert result.data is not None
    assert result.data.external_id == "33"
    assert result.data.country == "England"
    assert result.data.league == "Premier League"


def test_find_team_in_other_league(api_sports_client, respond) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["league"] == "140"
        return respond([{"team": {"id": 541, "name": "Real Madrid"}}])

    adapter = SoccerAdapter(client=api_sports_client(handler), today=lambda: TODAY)
    result = adapter.find_team(TeamQuery(sport=Sport.SOCCER, name="Los Blancos", league_id=140))

    assert result.data is not None
    assert result.data.league == "La Liga"


def test_h2h_uses_last_param_and_counts_draws(api_sports_client, respond) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/fixtures/headtohead"
        assert request.url.params["h2h"] == "33-50"
        assert request.url.params["last"] == "3"
        assert "season" not in request.url.params
        return respond(
            [
                fixture(1, 1_700_000_000, (33, "Manchester United"), (50, "Manchester City"), (2, 1), (1, 0)),
                fixture(2, 1_710_000_000, (50, "Manchester City"), (33, "Manchester United"), (3, 0), (2, 0)),
                fixture(3, 1_720_000_000, (33, "Manchester United"), (50, "Manchester City"), (1, 1), (0, 1)),
            ]
        )

    adapter = SoccerAdapter(client=api_sports_client(handler), today=lambda: TODAY)
    result = adapter.get_h2h(H2HQuery(sport=Sport.SOCCER, team1_id="33", team2_id="50", limit=3))

    h2h = result.data
    assert h2h is not None
    assert h2h.summary.team1_wins == 1
    assert h2h.summary.team2_wins == 1
    assert h2h.summary.draws == 1
    assert h2h.summary.team1_goals == 3
    assert h2h.summary.team2_goals == 5

    latest = h2h.matches[0]
    assert latest.external_id == "3"
    assert latest.venue == "Old Trafford"
    assert latest.date == datetime.fromtimestamp(1_720_000_000, tz=UTC)
    assert latest.score is not None
    # Second half derived from full time minus half time.
    assert [(p.home, p.away) for p in latest.score.periods] == [(0, 1), (1, 0)]


def test_team_statistics(api_sports_client, respond) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/teams/statistics"
        assert request.url.params["team"] == "42"
        return respond(
            {
                "form": "WWDLWWWDWW",
                "fixtures": {
                    "played": {"total": 10},
                    "wins": {"total": 7},
                    "draws": {"total": 2},
                    "loses": {"total": 1},
                },
                "goals": {
                    "for": {"total": {"home": 12, "away": 8, "total": 20}, "average": {"total": "2.0"}},
                    "against": {"total": {"home": 3, "away": 4, "total": 7}, "average": {"total": "0.7"}},
                },
            }
        )

    adapter = SoccerAdapter(client=api_sports_client(handler), today=lambda: TODAY)
    result = adapter.get_team_stats(StatsQuery(sport=Sport.SOCCER, team_id="42"))

    stats = result.data
    assert stats is not None
    assert stats.season == "2025"
    assert stats.record.draws == 2
    assert stats.record.win_percentage == pytest.approx(0.7)
    assert stats.scoring.total_for == 20
    assert stats.scoring.away_against == 4
    assert stats.scoring.average_against == pytest.approx(0.7)
    assert stats.form is not None
    assert stats.form.last5 == "WWDWW"
    assert stats.form.last10 == "WWDLWWWDWW"


def test_empty_statistics_is_stats_not_found(api_sports_client, respond) -> None:
    adapter = SoccerAdapter(client=api_sports_client(lambda r: respond([])), today=lambda: TODAY)

    result = adapter.get_team_stats(StatsQuery(sport=Sport.SOCCER, team_id="42"))

    assert result.error is not None
    assert result.error.code is ErrorCode.STATS_NOT_FOUND


def test_failing_statistics_endpoint_is_fetch_error(api_sports_client) -> None:
    adapter = SoccerAdapter(client=api_sports_client(lambda r: httpx.Response(500)), today=lambda: TODAY)

    result = adapter.get_team_stats(StatsQuery(sport=Sport.SOCCER, team_id="42"))

    assert result.error is not None
    assert result.error.code is ErrorCode.FETCH_ERROR


def test_squad_roster(api_sports_client, respond) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/players/squads"
        assert request.url.params["team"] == "42"
        assert "season" not in request.url.params
        return respond(
            [
                {
                    "team": {"id": 42, "name": "Arsenal"},
                    "players": [
                        {"id": 1460, "name": "B. Saka", "number": 7, "position": "Attacker"},
                        {"id": 19465, "name": "D. Raya", "number": 22, "position": "Goalkeeper"},
                    ],
                }
            ]
        )

    adapter = SoccerAdapter(client=api_sports_client(handler), today=lambda: TODAY)
    result = adapter.get_team_roster("soccer-42")

    assert result.data is not None
    assert [(p.name, p.number, p.position) for p in result.data] == [
        ("B. Saka", "7", "Attacker"),
        ("D. Raya", "22", "Goalkeeper"),
    ]


def test_soccer_has_no_injury_source(api_sports_client, respond) -> None:
    adapter = SoccerAdapter(client=api_sports_client(lambda r: respond([])))

    with pytest.raises(ProviderCapabilityError):
        adapter.get_injuries("42", "Arsenal")


def test_postponed_fixture_is_mapped() -> None:
    adapter = SoccerAdapter(client=None)
    pst = fixture(9, 1_700_000_000, (42, "Arsenal"), (33, "Manchester United"), (None, None), (None, None), "PST")

    match = adapter._transform_match(pst, adapter._league(None))

    assert match.status is MatchStatus.POSTPONED
    assert match.score is None
