"""
Business logic for standups.

Reads
-----
``previous_standups`` and ``next_standup`` are the time-window queries.
"Previous" means strictly before ``now`` (newest first, capped at
``limit``); "next" means strictly after ``now`` (soonest first, at most
one).  A standup scheduled exactly at ``now`` belongs to neither
window.  ``now`` is always bound as a parameter, never formatted into
the SQL, and defaults to the current UTC time.

The read queries do not check whether the team exists: an unknown
team yields no rows, just like a team with nothing scheduled.

Writes
------
Creating, rescheduling and editing notes all run through
``MutationGuard`` so the team (for creation) or the standup itself (for
updates) is verified in the same transaction as the write.
"""

import sqlite3
from datetime import datetime, timezone
from typing import Optional, Union

from standup_scheduler.app.core.db import format_timestamp, get_cursor, parse_timestamp
from standup_scheduler.app.core.responses import (
    EmptyResult,
    NoUpcoming,
    PreconditionFailed,
    Success,
)
from standup_scheduler.app.schemas.standup import (
    StandupCreate,
    StandupRead,
    StandupUpdate,
)
from standup_scheduler.app.services.mutation_guard import GuardOutcome, MutationGuard

DEFAULT_PREVIOUS_LIMIT = 5

STANDUP_COLUMNS = """
    SELECT s.id, s.team_id, s.time, s.chair_id, u.name AS chair_name,
           s.meeting_link, s.notes
    FROM standups s
    LEFT JOIN users u ON u.id = s.chair_id
"""


def _to_read(row: sqlite3.Row) -> StandupRead:
    return StandupRead(
        id=row["id"],
        team_id=row["team_id"],
        time=parse_timestamp(row["time"]),
        chair_id=row["chair_id"],
        chair_name=row["chair_name"],
        meeting_link=row["meeting_link"],
        notes=row["notes"],
    )


def _fetch(cursor: sqlite3.Cursor, standup_id: int) -> Optional[StandupRead]:
    row = cursor.execute(STANDUP_COLUMNS + " WHERE s.id = ?", (standup_id,)).fetchone()
    return _to_read(row) if row else None


class StandupService:
    """Scheduling and lookup of team standups."""

    @classmethod
    async def previous_standups(
        cls,
        team_id: int,
        limit: int = DEFAULT_PREVIOUS_LIMIT,
        now: Optional[datetime] = None,
    ) -> Union[Success, EmptyResult]:
        """Return up to ``limit`` standups before ``now``, newest first."""
        cutoff = format_timestamp(now or datetime.now(timezone.utc))
        with get_cursor() as cursor:
            rows = cursor.execute(
                STANDUP_COLUMNS
                + " WHERE s.team_id = ? AND s.time < ? ORDER BY s.time DESC, s.id DESC LIMIT ?",
                (team_id, cutoff, limit),
            ).fetchall()
        if not rows:
            return EmptyResult()
        return Success([_to_read(row) for row in rows])

    @classmethod
    async def next_standup(
        cls,
        team_id: int,
        now: Optional[datetime] = None,
    ) -> Union[Success, NoUpcoming]:
        """Return the earliest standup after ``now`` as a one-element list."""
        cutoff = format_timestamp(now or datetime.now(timezone.utc))
        with get_cursor() as cursor:
            row = cursor.execute(
                STANDUP_COLUMNS
                + " WHERE s.team_id = ? AND s.time > ? ORDER BY s.time ASC, s.id ASC LIMIT 1",
                (team_id, cutoff),
            ).fetchone()
        if not row:
            return NoUpcoming(team_id)
        return Success([_to_read(row)])

    @classmethod
    async def get_standup(cls, standup_id: int) -> Union[Success, PreconditionFailed]:
        with get_cursor() as cursor:
            standup = _fetch(cursor, standup_id)
        if standup is None:
            return PreconditionFailed("standup", standup_id)
        return Success(standup)

    @classmethod
    async def create_standup(cls, team_id: int, data: StandupCreate) -> GuardOutcome:
        """Schedule a standup for ``team_id``.

        The team must exist; otherwise nothing is inserted and the
        outcome is ``PreconditionFailed``.
        """

        def insert(cursor: sqlite3.Cursor) -> Optional[StandupRead]:
            cursor.execute(
                """
                INSERT INTO standups (team_id, time, chair_id, meeting_link, notes)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    team_id,
                    format_timestamp(data.time),
                    data.chair_id,
                    data.meeting_link,
                    data.notes,
                ),
            )
            return _fetch(cursor, cursor.lastrowid)

        return MutationGuard.guarded_write("team", team_id, insert, entity="standup", created=True)

    @classmethod
    async def update_standup(cls, standup_id: int, data: StandupUpdate) -> GuardOutcome:
        """Replace the time, chair and meeting link of a standup."""

        def update(cursor: sqlite3.Cursor) -> Optional[StandupRead]:
            cursor.execute(
                "UPDATE standups SET time = ?, chair_id = ?, meeting_link = ? WHERE id = ?",
                (format_timestamp(data.time), data.chair_id, data.meeting_link, standup_id),
            )
            if cursor.rowcount == 0:
                return None
            return _fetch(cursor, standup_id)

        return MutationGuard.guarded_write("standup", standup_id, update, entity="standup", created=False)

    @classmethod
    async def update_notes(cls, standup_id: int, notes: str) -> GuardOutcome:
        """Overwrite the notes of a standup, leaving every other column."""

        def update(cursor: sqlite3.Cursor) -> Optional[StandupRead]:
            cursor.execute("UPDATE standups SET notes = ? WHERE id = ?", (notes, standup_id))
            if cursor.rowcount == 0:
                return None
            return _fetch(cursor, standup_id)

        return MutationGuard.guarded_write("standup", standup_id, update, entity="standup", created=False)
