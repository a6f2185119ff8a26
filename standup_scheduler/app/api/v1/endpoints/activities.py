"""
Activity endpoints for API v1.

Unlike the plain listings, an empty activity list is a normal answer:
``GET /standups/activities/{standup_id}`` responds 200 with an empty
list and a message.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from standup_scheduler.app.core.responses import EmptyPolicy, resolve
from standup_scheduler.app.schemas.activity import ActivityCreate, ActivityUpdate
from standup_scheduler.app.schemas.response import Envelope
from standup_scheduler.app.services.activity_service import ActivityService

router = APIRouter()


@router.get("/standups/activities/{standup_id}", response_model=Envelope)
async def list_activities(standup_id: int) -> JSONResponse:
    return resolve(await ActivityService.list_activities(standup_id), empty=EmptyPolicy.ACCEPT)


@router.post("/activity/{standup_id}", response_model=Envelope, status_code=201)
async def create_activity(standup_id: int, activity: ActivityCreate) -> JSONResponse:
    """Attach an activity to a standup (404 if the standup is missing)."""
    return resolve(await ActivityService.create_activity(standup_id, activity))


@router.put("/activity/{activity_id}", response_model=Envelope)
async def update_activity(activity_id: int, activity: ActivityUpdate) -> JSONResponse:
    return resolve(await ActivityService.update_activity(activity_id, activity))
