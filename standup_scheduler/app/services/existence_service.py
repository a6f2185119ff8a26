"""
Existence checks for the entities that writes hang off.

Used by ``MutationGuard`` before a child row is inserted or a row is
updated, so that a missing parent becomes a structured 404 instead of
a raw constraint violation.
"""

import logging
import sqlite3
from typing import Optional

from standup_scheduler.app.core.db import StoreUnavailable, get_cursor

logger = logging.getLogger(__name__)

# Table names are interpolated into SQL, so only these are allowed.
TABLES = {
    "team": "teams",
    "user": "users",
    "standup": "standups",
    "activity": "activities",
}


class ExistenceService:
    """Single-row lookups by primary key."""

    @classmethod
    def exists(cls, kind: str, entity_id: int, cursor: Optional[sqlite3.Cursor] = None) -> bool:
        """Return whether a row of ``kind`` with ``entity_id`` exists.

        When ``cursor`` is given the lookup runs on it, which lets the
        caller keep the check inside its own transaction.  Store errors
        are logged and reported as "not found".
        """
        try:
            table = TABLES[kind]
        except KeyError:
            raise ValueError(f"Unknown entity kind: {kind}") from None
        query = f"SELECT id FROM {table} WHERE id = ?"
        try:
            if cursor is not None:
                row = cursor.execute(query, (entity_id,)).fetchone()
            else:
                with get_cursor() as own_cursor:
                    row = own_cursor.execute(query, (entity_id,)).fetchone()
        except (sqlite3.Error, StoreUnavailable, OverflowError):
            logger.exception("Existence check failed for %s %s", kind, entity_id)
            return False
        return row is not None
