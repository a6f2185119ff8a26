"""
Service outcomes and their translation into HTTP responses.

Services never raise ``HTTPException``; they return one of the outcome
objects below and the endpoint passes it to ``resolve``, which renders
the JSON envelope ``{"status": ..., "data": ..., "message": ...}``.
Exactly one response is produced per outcome.

Two empty-result policies exist and are chosen per endpoint:

* ``EmptyPolicy.REJECT``: plain listings answer 400 "response is empty".
* ``EmptyPolicy.ACCEPT``: activity listings answer 200 with an empty
  list and an explanatory message.
"""

import enum
from dataclasses import dataclass
from typing import Any, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

EMPTY_MESSAGE = "response is empty"
STORE_ERROR_MESSAGE = "internal server error"


class EmptyPolicy(enum.Enum):
    REJECT = "reject"
    ACCEPT = "accept"


@dataclass(frozen=True)
class Success:
    data: Any


@dataclass(frozen=True)
class Created:
    data: Any


@dataclass(frozen=True)
class Updated:
    data: Any


@dataclass(frozen=True)
class EmptyResult:
    message: Optional[str] = None


@dataclass(frozen=True)
class NoUpcoming:
    team_id: int


@dataclass(frozen=True)
class PreconditionFailed:
    """The referenced entity does not exist."""

    entity: str
    id: int


@dataclass(frozen=True)
class WriteFailed:
    """The write ran but affected no rows."""

    entity: str


@dataclass(frozen=True)
class StoreError:
    """The store failed; details are logged, never sent to the client."""

    operation: str


def envelope(
    status_text: str,
    *,
    data: Any = None,
    message: Optional[str] = None,
    include_data: bool = False,
) -> dict:
    body: dict = {"status": status_text}
    if data is not None or include_data:
        body["data"] = jsonable_encoder(data)
    if message is not None:
        body["message"] = message
    return body


def failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=envelope("failed", message=message))


def resolve(outcome: Any, *, empty: EmptyPolicy = EmptyPolicy.REJECT) -> JSONResponse:
    """Map a service outcome onto an HTTP response."""
    if isinstance(outcome, Success):
        return JSONResponse(status_code=status.HTTP_200_OK, content=envelope("success", data=outcome.data, include_data=True))
    if isinstance(outcome, Created):
        return JSONResponse(status_code=status.HTTP_201_CREATED, content=envelope("success", data=outcome.data, include_data=True))
    if isinstance(outcome, Updated):
        return JSONResponse(status_code=status.HTTP_200_OK, content=envelope("success", data=outcome.data, include_data=True))
    if isinstance(outcome, EmptyResult):
        if empty is EmptyPolicy.ACCEPT:
            return JSONResponse(
                status_code=status.HTTP_200_OK,
                content=envelope("success", data=[], message=outcome.message or EMPTY_MESSAGE),
            )
        return failure(status.HTTP_400_BAD_REQUEST, EMPTY_MESSAGE)
    if isinstance(outcome, NoUpcoming):
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=envelope(
                "success",
                data=[],
                message=f"no upcoming standup scheduled for team {outcome.team_id}",
            ),
        )
    if isinstance(outcome, PreconditionFailed):
        return failure(status.HTTP_404_NOT_FOUND, f"{outcome.entity} with id {outcome.id} not found")
    if isinstance(outcome, WriteFailed):
        return failure(status.HTTP_400_BAD_REQUEST, f"{outcome.entity} could not be written")
    if isinstance(outcome, StoreError):
        return failure(status.HTTP_500_INTERNAL_SERVER_ERROR, STORE_ERROR_MESSAGE)
    raise TypeError(f"Unsupported outcome type: {type(outcome).__name__}")
