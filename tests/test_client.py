import json

import pytest
import requests

from roster_client import RosterAPIClient


def _response(status_code, body=None, url="http://testserver/api/v1/"):
    response = requests.Response()
    response.status_code = status_code
    response.url = url
    response.encoding = "utf-8"
    response._content = b"" if body is None else json.dumps(body).encode("utf-8")
    return response


class FakeSession:
    """Records requests and replays canned responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, params=None, json=None, timeout=None):
        self.calls.append({"method": method, "url": url, "params": params, "json": json, "timeout": timeout})
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def make_client():
    def factory(*responses):
        session = FakeSession(*responses)
        return RosterAPIClient(base_url="http://testserver/", session=session, timeout=3), session

    return factory


def test_create_team_posts_payload(make_client):
    client, session = make_client(_response(201, {"id": 1, "name": "Nova FC"}))

    team, error = client.create_team({"name": "Nova FC"})

    assert error is None
    assert team == {"id": 1, "name": "Nova FC"}
    assert session.calls == [{
        "method": "POST",
        "url": "http://testserver/api/v1/teams/",
        "params": None,
        "json": {"name": "Nova FC"},
        "timeout": 3,
    }]


def test_list_players_drops_unset_filters(make_client):
    client, session = make_client(_response(200, [{"id": 1}]))

    players, error = client.list_players(team_id=1, position=None)

    assert error is None
    assert players == [{"id": 1}]
    assert session.calls[0]["params"] == {"team_id": 1}


def test_list_teams_without_filters_sends_no_params(make_client):
    client, session = make_client(_response(200, []))

    teams, error = client.list_teams()

    assert (teams, error) == ([], None)
    assert session.calls[0]["params"] is None


def test_validation_error_lists_rules(make_client):
    detail = {"entity": "Player", "errors": ["Age must be between 16 and 50", "Position is required"]}
    client, _ = make_client(_response(400, {"detail": detail}))

    player, error = client.create_player({"first_name": "Sam"})

    assert player is None
    assert error["status_code"] == 400
    assert error["errors"] == detail["errors"]
    assert error["message"] == "Age must be between 16 and 50; Position is required"


def test_not_found_uses_detail_message(make_client):
    client, _ = make_client(_response(404, {"detail": "Team not found with identifier: 9"}))

    team, error = client.get_team(9)

    assert team is None
    assert error == {"status_code": 404, "message": "Team not found with identifier: 9"}


def test_delete_reports_success_and_failure(make_client):
    client, session = make_client(
        _response(204),
        _response(404, {"detail": "Player not found with identifier: 1"}),
    )

    assert client.delete_player(1) == (True, None)
    deleted, error = client.delete_player(1)
    assert deleted is False
    assert error["status_code"] == 404
    assert [call["method"] for call in session.calls] == ["DELETE", "DELETE"]


def test_connection_failure(make_client):
    client, _ = make_client(requests.ConnectionError("connection refused"))

    stats, error = client.dashboard_stats()

    assert stats is None
    assert error == {"status_code": None, "message": "connection refused"}
