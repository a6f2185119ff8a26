"""
Read-only queries for teams and their rosters.
"""

from typing import Union

from standup_scheduler.app.core.db import get_cursor
from standup_scheduler.app.core.responses import EmptyResult, Success
from standup_scheduler.app.schemas.team import TeamRead, UserRead


class TeamService:
    """Look up users, team names and team members."""

    @classmethod
    async def list_users(cls) -> Union[Success, EmptyResult]:
        with get_cursor() as cursor:
            rows = cursor.execute("SELECT id, name, team_id FROM users ORDER BY id").fetchall()
        if not rows:
            return EmptyResult()
        return Success([UserRead(id=row["id"], name=row["name"], team_id=row["team_id"]) for row in rows])

    @classmethod
    async def get_team(cls, team_id: int) -> Union[Success, EmptyResult]:
        """Return the team row for ``team_id``.

        An unknown team is an empty result, matching the other plain
        lookups.
        """
        with get_cursor() as cursor:
            row = cursor.execute("SELECT id, name FROM teams WHERE id = ?", (team_id,)).fetchone()
        if not row:
            return EmptyResult()
        return Success(TeamRead(id=row["id"], name=row["name"]))

    @classmethod
    async def list_members(cls, team_id: int) -> Union[Success, EmptyResult]:
        with get_cursor() as cursor:
            rows = cursor.execute(
                "SELECT id, name, team_id FROM users WHERE team_id = ? ORDER BY id",
                (team_id,),
            ).fetchall()
        if not rows:
            return EmptyResult()
        return Success([UserRead(id=row["id"], name=row["name"], team_id=row["team_id"]) for row in rows])
