"""
Standup endpoints for API v1.

Reads
    ``GET /standups/previous/{team_id}``: up to ``limit`` past
    standups, newest first (400 when there are none).
    ``GET /standups/next/{team_id}``: the next standup as a list of at
    most one element (200 with an empty list when nothing is scheduled).
    ``GET /standups/{standup_id}``: a single standup (404 if absent).

Writes
    ``POST /standups/{team_id}``, ``PUT /standups/{standup_id}`` and
    ``PUT /standups/notes/{standup_id}``.  Bodies are validated before
    the service runs; a missing team or standup yields 404 and nothing
    is written.
"""

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from standup_scheduler.app.core.responses import resolve
from standup_scheduler.app.schemas.response import Envelope
from standup_scheduler.app.schemas.standup import (
    StandupCreate,
    StandupNotesUpdate,
    StandupUpdate,
)
from standup_scheduler.app.services.standup_service import (
    DEFAULT_PREVIOUS_LIMIT,
    StandupService,
)

router = APIRouter()

MAX_PREVIOUS_LIMIT = 20


@router.get("/standups/previous/{team_id}", response_model=Envelope)
async def previous_standups(
    team_id: int,
    limit: int = Query(DEFAULT_PREVIOUS_LIMIT, ge=1, le=MAX_PREVIOUS_LIMIT),
) -> JSONResponse:
    """Return the most recent past standups of a team, newest first."""
    return resolve(await StandupService.previous_standups(team_id, limit=limit))


@router.get("/standups/next/{team_id}", response_model=Envelope)
async def next_standup(team_id: int) -> JSONResponse:
    """Return the team's next scheduled standup, if any."""
    return resolve(await StandupService.next_standup(team_id))


@router.get("/standups/{standup_id}", response_model=Envelope)
async def get_standup(standup_id: int) -> JSONResponse:
    return resolve(await StandupService.get_standup(standup_id))


@router.post("/standups/{team_id}", response_model=Envelope, status_code=201)
async def create_standup(team_id: int, standup: StandupCreate) -> JSONResponse:
    """Schedule a standup for a team.

    Responds 201 with the stored row, or 404 if the team does not
    exist.
    """
    return resolve(await StandupService.create_standup(team_id, standup))


@router.put("/standups/notes/{standup_id}", response_model=Envelope)
async def update_standup_notes(standup_id: int, body: StandupNotesUpdate) -> JSONResponse:
    """Replace the notes of a standup; other fields are untouched."""
    return resolve(await StandupService.update_notes(standup_id, body.notes))


@router.put("/standups/{standup_id}", response_model=Envelope)
async def update_standup(standup_id: int, standup: StandupUpdate) -> JSONResponse:
    """Reschedule a standup: new time, chair and meeting link."""
    return resolve(await StandupService.update_standup(standup_id, standup))
