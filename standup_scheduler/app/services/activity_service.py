"""
Business logic for activities.

Activities are status updates that members attach to a standup.  They
are listed in insertion order.  Creation requires the standup to
exist; an edit requires the activity to exist.
"""

import sqlite3
from typing import Optional, Union

from standup_scheduler.app.core.db import get_cursor
from standup_scheduler.app.core.responses import EmptyResult, Success
from standup_scheduler.app.schemas.activity import ActivityCreate, ActivityRead, ActivityUpdate
from standup_scheduler.app.services.mutation_guard import GuardOutcome, MutationGuard

ACTIVITY_COLUMNS = "SELECT id, standup_id, user_id, name, url, comment FROM activities"


def _to_read(row: sqlite3.Row) -> ActivityRead:
    return ActivityRead(
        id=row["id"],
        standup_id=row["standup_id"],
        user_id=row["user_id"],
        name=row["name"],
        url=row["url"],
        comment=row["comment"],
    )


def _fetch(cursor: sqlite3.Cursor, activity_id: int) -> Optional[ActivityRead]:
    row = cursor.execute(ACTIVITY_COLUMNS + " WHERE id = ?", (activity_id,)).fetchone()
    return _to_read(row) if row else None


class ActivityService:
    """Per-standup activity entries."""

    @classmethod
    async def list_activities(cls, standup_id: int) -> Union[Success, EmptyResult]:
        with get_cursor() as cursor:
            rows = cursor.execute(
                ACTIVITY_COLUMNS + " WHERE standup_id = ? ORDER BY id",
                (standup_id,),
            ).fetchall()
        if not rows:
            return EmptyResult(f"no activities recorded for standup {standup_id}")
        return Success([_to_read(row) for row in rows])

    @classmethod
    async def create_activity(cls, standup_id: int, data: ActivityCreate) -> GuardOutcome:
        def insert(cursor: sqlite3.Cursor) -> Optional[ActivityRead]:
            cursor.execute(
                """
                INSERT INTO activities (standup_id, user_id, name, url, comment)
                VALUES (?, ?, ?, ?, ?)
                """,
                (standup_id, data.user_id, data.name, data.url, data.comment),
            )
            return _fetch(cursor, cursor.lastrowid)

        return MutationGuard.guarded_write("standup", standup_id, insert, entity="activity", created=True)

    @classmethod
    async def update_activity(cls, activity_id: int, data: ActivityUpdate) -> GuardOutcome:
        """Replace the name, url and comment of an activity."""

        def update(cursor: sqlite3.Cursor) -> Optional[ActivityRead]:
            cursor.execute(
                "UPDATE activities SET name = ?, url = ?, comment = ? WHERE id = ?",
                (data.name, data.url, data.comment, activity_id),
            )
            if cursor.rowcount == 0:
                return None
            return _fetch(cursor, activity_id)

        return MutationGuard.guarded_write("activity", activity_id, update, entity="activity", created=False)
