"""
Team and roster endpoints for API v1.

All three are plain listings: an empty result is answered with
400 "response is empty".
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from standup_scheduler.app.core.responses import resolve
from standup_scheduler.app.schemas.response import Envelope
from standup_scheduler.app.services.team_service import TeamService

router = APIRouter()


@router.get("/users", response_model=Envelope)
async def list_users() -> JSONResponse:
    """Return every user's id, name and team."""
    return resolve(await TeamService.list_users())


@router.get("/teamname/{team_id}", response_model=Envelope)
async def get_team_name(team_id: int) -> JSONResponse:
    return resolve(await TeamService.get_team(team_id))


@router.get("/teams/members/{team_id}", response_model=Envelope)
async def list_team_members(team_id: int) -> JSONResponse:
    """Return the users whose ``team_id`` is ``team_id``."""
    return resolve(await TeamService.list_members(team_id))
