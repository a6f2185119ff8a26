"""Tests for the requests-based API client."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
import requests

from standup_client import StandupAPIClient


def _response(status_code, payload=None, text=""):
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = status_code < 400
    resp.text = text
    if payload is None:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = payload
    return resp


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session):
    return StandupAPIClient(base_url="https://standups.example.com/", session=session, timeout=3)


def test_success_returns_envelope_data(api, session):
    session.request.return_value = _response(200, {"status": "success", "data": [{"id": 1}]})
    data, error = api.next_standup(4)
    assert data == [{"id": 1}]
    assert error is None
    session.request.assert_called_once_with(
        method="GET",
        url="https://standups.example.com/standups/next/4",
        params=None,
        json=None,
        timeout=3,
    )


def test_failed_envelope_becomes_error(api, session):
    session.request.return_value = _response(404, {"status": "failed", "message": "team with id 9 not found"})
    data, error = api.create_standup(9, time="2030-01-01T09:00:00Z", chair_id=1)
    assert data is None
    assert error == {"status_code": 404, "message": "team with id 9 not found"}


def test_non_json_error_uses_body_text(api, session):
    session.request.return_value = _response(502, None, text="Bad Gateway")
    data, error = api.list_users()
    assert data is None
    assert error == {"status_code": 502, "message": "Bad Gateway"}


def test_network_error(api, session):
    session.request.side_effect = requests.ConnectionError("refused")
    data, error = api.get_team(1)
    assert data is None
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_create_standup_serialises_datetime(api, session):
    session.request.return_value = _response(201, {"status": "success", "data": {"id": 5}})
    when = datetime(2030, 1, 1, 9, tzinfo=timezone.utc)
    data, _ = api.create_standup(2, time=when, chair_id=3, meeting_link="https://meet", notes="n")
    assert data == {"id": 5}
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "POST"
    assert kwargs["url"].endswith("/standups/2")
    assert kwargs["json"] == {
        "time": "2030-01-01T09:00:00+00:00",
        "chair_id": 3,
        "meeting_link": "https://meet",
        "notes": "n",
    }


def test_previous_standups_passes_limit(api, session):
    session.request.return_value = _response(200, {"status": "success", "data": []})
    api.previous_standups(1, limit=3)
    assert session.request.call_args.kwargs["params"] == {"limit": 3}


@pytest.mark.parametrize(
    "call, method, path, body",
    [
        (lambda c: c.update_standup_notes(7, "hi"), "PUT", "/standups/notes/7", {"notes": "hi"}),
        (lambda c: c.update_standup(7, time="t", chair_id=1), "PUT", "/standups/7", {"time": "t", "chair_id": 1, "meeting_link": None}),
        (lambda c: c.list_activities(7), "GET", "/standups/activities/7", None),
        (lambda c: c.create_activity(7, user_id=1, name="n"), "POST", "/activity/7", {"user_id": 1, "name": "n", "url": None, "comment": None}),
        (lambda c: c.update_activity(8, name="n"), "PUT", "/activity/8", {"name": "n", "url": None, "comment": None}),
        (lambda c: c.list_team_members(2), "GET", "/teams/members/2", None),
        (lambda c: c.get_standup(7), "GET", "/standups/7", None),
    ],
)
def test_endpoint_routing(api, session, call, method, path, body):
    session.request.return_value = _response(200, {"status": "success", "data": {}})
    call(api)
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == method
    assert kwargs["url"] == "https://standups.example.com" + path
    assert kwargs["json"] == body
