"""
Top-level router for version 1 of the API.

The domain routers declare their full paths themselves (``/users``,
``/teams/members/{team_id}``, ``/standups/...``, ``/activity/...``)
because several resources share a first path segment.  Do not add a
prefix when including them or the public paths would change.
"""

from fastapi import APIRouter

from .endpoints import activities, info, standups, teams

router = APIRouter()

router.include_router(info.router, tags=["info"])
router.include_router(teams.router, tags=["teams"])
router.include_router(standups.router, tags=["standups"])
router.include_router(activities.router, tags=["activities"])
