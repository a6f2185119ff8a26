"""
SQLite database integration, connection pooling and schema bootstrap.

Connections come from a SQLAlchemy ``Engine`` with a bounded
``QueuePool``.  The engine is created by the startup hook in ``main``
and disposed by the shutdown hook.  Queries stay plain SQL on the
sqlite3 connections the pool hands out: request handlers borrow one
through ``get_cursor`` (reads) or ``transaction`` (writes) and give it
back as soon as the statement completes.

Every wait is bounded by ``settings.db_timeout``: checking a
connection out of the pool and waiting on SQLite's write lock.  When
the bound is exceeded the caller gets ``StoreUnavailable`` or
``sqlite3.OperationalError`` instead of blocking forever.

Timestamps are stored as UTC ISO-8601 strings with microsecond
precision so that string comparison in SQL matches chronological
order.  Use ``format_timestamp`` for every value bound against the
``time`` column.

The migration mechanism stores applied versions in the ``migrations``
table and executes new migrations in order.
"""

import logging
import os
import sqlite3
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from sqlalchemy import create_engine, event, exc
from sqlalchemy.engine import Engine
from sqlalchemy.pool import PoolProxiedConnection, QueuePool

from .config import settings

logger = logging.getLogger(__name__)


class StoreUnavailable(Exception):
    """Raised when no pooled connection could be obtained in time."""


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths (and ``:memory:``) are returned unchanged; relative
    paths are resolved against the project root.
    """
    db_url = database_url or settings.database_url
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # standup_scheduler/
    return str((base_dir / db_url).resolve())


def format_timestamp(value: datetime) -> str:
    """Normalise a datetime to the stored UTC representation.

    Naive datetimes are taken to be UTC already.  Raises
    ``OverflowError`` when the instant falls outside the representable
    range once shifted to UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")


def parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value)


def create_db_engine(path: str, size: int = 5, timeout: float = 5.0) -> Engine:
    """Build an engine holding at most ``size`` sqlite3 connections.

    Connections are opened with ``check_same_thread=False`` so any
    worker thread may use them, and in autocommit mode
    (``isolation_level=None``); ``transaction`` issues explicit
    ``BEGIN IMMEDIATE`` / ``COMMIT`` statements.  Returning a
    connection to the pool rolls back anything left open on it.
    """
    if size < 1:
        raise ValueError("pool size must be at least 1")
    engine = create_engine(
        f"sqlite:///{path}",
        poolclass=QueuePool,
        pool_size=size,
        max_overflow=0,
        pool_timeout=timeout,
        connect_args={
            "timeout": timeout,
            "check_same_thread": False,
            "isolation_level": None,
        },
    )

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.row_factory = sqlite3.Row
        # SQLite ignores REFERENCES clauses unless this is set on every
        # connection.
        dbapi_connection.execute("PRAGMA foreign_keys = ON")

    logger.info("Configured SQLite engine for %s (pool size %d)", path, size)
    return engine


@contextmanager
def checkout(engine: Engine) -> Iterator[PoolProxiedConnection]:
    """Borrow a pooled sqlite3 connection, returning it on exit."""
    try:
        conn = engine.raw_connection()
    except exc.TimeoutError as error:
        raise StoreUnavailable("no database connection available in time") from error
    except exc.DBAPIError as error:
        raise StoreUnavailable("could not open a database connection") from error
    try:
        yield conn
    finally:
        conn.close()


_engine: Optional[Engine] = None
_engine_lock = threading.Lock()


def _build_engine(database_url: Optional[str]) -> Engine:
    return create_db_engine(
        get_database_path(database_url),
        size=settings.db_pool_size,
        timeout=settings.db_timeout,
    )


def open_engine(database_url: Optional[str] = None) -> Engine:
    """Create the process-wide engine, disposing a previous one if any."""
    global _engine
    with _engine_lock:
        if _engine is not None:
            _engine.dispose()
        _engine = _build_engine(database_url)
        return _engine


def close_engine() -> None:
    global _engine
    with _engine_lock:
        if _engine is not None:
            _engine.dispose()
            logger.info("Disposed SQLite engine %s", _engine.url)
            _engine = None


def get_engine() -> Engine:
    """Return the process-wide engine, creating it on first use."""
    global _engine
    with _engine_lock:
        if _engine is None:
            _engine = _build_engine(None)
        return _engine


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Yield a cursor for read queries on a pooled connection."""
    with checkout(get_engine()) as conn:
        cursor = conn.cursor()
        try:
            yield cursor
        finally:
            cursor.close()


@contextmanager
def transaction() -> Iterator[sqlite3.Cursor]:
    """Yield a cursor inside a ``BEGIN IMMEDIATE`` transaction.

    The write lock is taken up front so that a precondition check and
    the write that depends on it cannot interleave with another writer.
    The transaction is committed on normal exit unless the caller has
    already rolled it back, and rolled back if the block raises.
    """
    with checkout(get_engine()) as conn:
        cursor = conn.cursor()
        cursor.execute("BEGIN IMMEDIATE")
        try:
            yield cursor
        except BaseException:
            if cursor.connection.in_transaction:
                cursor.connection.rollback()
            raise
        else:
            if cursor.connection.in_transaction:
                cursor.connection.commit()
        finally:
            cursor.close()


MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS teams (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            team_id INTEGER,
            FOREIGN KEY(team_id) REFERENCES teams(id)
        );

        -- chair_id is not a foreign key: chairs are not
        -- validated against the roster.
        CREATE TABLE IF NOT EXISTS standups (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            team_id INTEGER NOT NULL,
            time TEXT NOT NULL,
            chair_id INTEGER,
            meeting_link TEXT,
            notes TEXT,
            FOREIGN KEY(team_id) REFERENCES teams(id)
        );

        CREATE TABLE IF NOT EXISTS activities (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            standup_id INTEGER NOT NULL,
            user_id INTEGER,
            name TEXT NOT NULL,
            url TEXT,
            comment TEXT,
            FOREIGN KEY(standup_id) REFERENCES standups(id)
        );
        """,
    ),
    # Migration 2: indices for the roster and time-window queries
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_users_team_id ON users(team_id);
        CREATE INDEX IF NOT EXISTS idx_standups_team_time ON standups(team_id, time);
        CREATE INDEX IF NOT EXISTS idx_activities_standup_id ON activities(standup_id);
        """,
    ),
]


def init_db() -> None:
    """Create the schema and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, reads the
    current schema version and applies every newer entry of
    ``MIGRATIONS`` in order, each in its own transaction.
    """
    with checkout(get_engine()) as conn:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS migrations (
                version INTEGER PRIMARY KEY,
                applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
            """
        )
        row = conn.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
        current = row["version"] or 0
        for version, sql in MIGRATIONS:
            if version <= current:
                continue
            logger.info("Applying database migration %d", version)
            # executescript commits any open transaction first, so the
            # version row is written in a second statement.
            conn.executescript(sql)
            conn.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
