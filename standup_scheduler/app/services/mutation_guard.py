"""
Guarded writes: verify the referenced row, then insert or update.

Every write endpoint goes through ``MutationGuard.guarded_write``.  The
existence check and the write run inside one ``BEGIN IMMEDIATE``
transaction, so no other writer can delete the parent in between.  If
the parent is missing the write is skipped entirely and the caller
receives ``PreconditionFailed``.  A foreign-key violation raised by the
write itself is reported the same way.
"""

import logging
import sqlite3
from typing import Any, Callable, Optional, Union

from standup_scheduler.app.core.db import StoreUnavailable, transaction
from standup_scheduler.app.core.responses import (
    Created,
    PreconditionFailed,
    StoreError,
    Updated,
    WriteFailed,
)
from standup_scheduler.app.services.existence_service import ExistenceService

logger = logging.getLogger(__name__)

WriteFn = Callable[[sqlite3.Cursor], Optional[Any]]
GuardOutcome = Union[Created, Updated, PreconditionFailed, WriteFailed, StoreError]


class MutationGuard:
    """Run a write only when the row it depends on exists."""

    @classmethod
    def guarded_write(
        cls,
        parent_kind: str,
        parent_id: int,
        write_fn: WriteFn,
        *,
        entity: str,
        created: bool,
    ) -> GuardOutcome:
        """Check ``parent_kind``/``parent_id`` and run ``write_fn``.

        Parameters
        ----------
        parent_kind, parent_id
            The row that must exist (the parent for inserts, the target
            itself for updates).
        write_fn
            Called with the transaction's cursor.  Returns the written
            row, or ``None`` when nothing was affected.
        entity
            Name of the entity being written, used in ``WriteFailed``.
        created
            ``True`` for inserts (``Created``), ``False`` for updates
            (``Updated``).
        """
        try:
            with transaction() as cursor:
                if not ExistenceService.exists(parent_kind, parent_id, cursor=cursor):
                    cursor.connection.rollback()
                    logger.warning("Rejected %s write: %s %s does not exist", entity, parent_kind, parent_id)
                    return PreconditionFailed(parent_kind, parent_id)
                row = write_fn(cursor)
                if row is None:
                    cursor.connection.rollback()
                    logger.warning("No %s row affected for %s %s", entity, parent_kind, parent_id)
                    return WriteFailed(entity)
        except sqlite3.IntegrityError as exc:
            if "FOREIGN KEY" in str(exc).upper():
                logger.warning(
                    "Foreign key rejected %s write for %s %s", entity, parent_kind, parent_id
                )
                return PreconditionFailed(parent_kind, parent_id)
            logger.exception("Integrity error writing %s for %s %s", entity, parent_kind, parent_id)
            return StoreError(f"write {entity}")
        except (sqlite3.Error, StoreUnavailable, OverflowError):
            logger.exception("Store failure writing %s for %s %s", entity, parent_kind, parent_id)
            return StoreError(f"write {entity}")
        logger.info("%s %s (%s %s)", "Created" if created else "Updated", entity, parent_kind, parent_id)
        return Created(row) if created else Updated(row)
