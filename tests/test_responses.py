"""Tests for mapping service outcomes onto HTTP responses."""

import json

import pytest

from standup_scheduler.app.core.responses import (
    Created,
    EmptyPolicy,
    EmptyResult,
    NoUpcoming,
    PreconditionFailed,
    StoreError,
    Success,
    Updated,
    WriteFailed,
    resolve,
)
from standup_scheduler.app.schemas.team import TeamRead


def body(response):
    return json.loads(response.body)


@pytest.mark.parametrize(
    "outcome, status_code",
    [
        (Success([1]), 200),
        (Created({"id": 1}), 201),
        (Updated({"id": 1}), 200),
    ],
)
def test_successes(outcome, status_code):
    response = resolve(outcome)
    assert response.status_code == status_code
    assert body(response) == {"status": "success", "data": outcome.data}


def test_success_serialises_models():
    response = resolve(Success(TeamRead(id=1, name="Platform")))
    assert body(response)["data"] == {"id": 1, "name": "Platform"}


def test_empty_result_rejected_by_default():
    response = resolve(EmptyResult())
    assert response.status_code == 400
    assert body(response) == {"status": "failed", "message": "response is empty"}


def test_empty_result_accepted_with_message():
    response = resolve(EmptyResult("no activities recorded for standup 3"), empty=EmptyPolicy.ACCEPT)
    assert response.status_code == 200
    assert body(response) == {
        "status": "success",
        "data": [],
        "message": "no activities recorded for standup 3",
    }


def test_no_upcoming_is_a_successful_empty_list():
    response = resolve(NoUpcoming(7))
    assert response.status_code == 200
    assert body(response)["data"] == []
    assert "team 7" in body(response)["message"]


def test_precondition_failed_names_entity_and_id():
    response = resolve(PreconditionFailed("team", 999999))
    assert response.status_code == 404
    assert body(response) == {"status": "failed", "message": "team with id 999999 not found"}


def test_write_failed():
    response = resolve(WriteFailed("activity"))
    assert response.status_code == 400
    assert body(response)["status"] == "failed"


def test_store_error_is_generic():
    response = resolve(StoreError("write standup"))
    assert response.status_code == 500
    assert body(response) == {"status": "failed", "message": "internal server error"}


def test_unknown_outcome_is_rejected():
    with pytest.raises(TypeError):
        resolve(object())
