"""Shared test fixtures for the standup scheduler tests."""

from datetime import datetime, timezone
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from standup_scheduler.app.core.db import close_engine, format_timestamp, get_cursor, init_db, open_engine, transaction
from standup_scheduler.app.main import create_app


@pytest.fixture
def db_path(tmp_path):
    """Path of a fresh SQLite file for one test."""
    return str(tmp_path / "standups.db")


@pytest.fixture
def pool(db_path):
    """Open the process-wide engine on a temporary database with the schema applied."""
    engine = open_engine(db_path)
    init_db()
    yield engine
    close_engine()


@pytest.fixture
def client(db_path):
    """FastAPI test client; entering it runs the startup hooks (engine + schema)."""
    app = create_app(database_url=db_path)
    with TestClient(app) as test_client:
        yield test_client


def add_team(name: str) -> int:
    with transaction() as cursor:
        cursor.execute("INSERT INTO teams (name) VALUES (?)", (name,))
        return cursor.lastrowid


def add_user(name: str, team_id: Optional[int]) -> int:
    with transaction() as cursor:
        cursor.execute("INSERT INTO users (name, team_id) VALUES (?, ?)", (name, team_id))
        return cursor.lastrowid


def add_standup(
    team_id: int,
    time: datetime,
    chair_id: Optional[int] = None,
    meeting_link: Optional[str] = None,
    notes: Optional[str] = None,
) -> int:
    with transaction() as cursor:
        cursor.execute(
            "INSERT INTO standups (team_id, time, chair_id, meeting_link, notes) VALUES (?, ?, ?, ?, ?)",
            (team_id, format_timestamp(time), chair_id, meeting_link, notes),
        )
        return cursor.lastrowid


def add_activity(standup_id: int, user_id: int, name: str, url: Optional[str] = None, comment: Optional[str] = None) -> int:
    with transaction() as cursor:
        cursor.execute(
            "INSERT INTO activities (standup_id, user_id, name, url, comment) VALUES (?, ?, ?, ?, ?)",
            (standup_id, user_id, name, url, comment),
        )
        return cursor.lastrowid


def count_rows(table: str, where: str = "1 = 1", params: tuple = ()) -> int:
    with get_cursor() as cursor:
        return cursor.execute(f"SELECT COUNT(*) FROM {table} WHERE {where}", params).fetchone()[0]


@pytest.fixture
def roster(pool):
    """Two teams: Platform (Ada, Grace) and Design (Linus)."""
    platform = add_team("Platform")
    design = add_team("Design")
    ada = add_user("Ada", platform)
    grace = add_user("Grace", platform)
    linus = add_user("Linus", design)
    return {
        "platform": platform,
        "design": design,
        "ada": ada,
        "grace": grace,
        "linus": linus,
    }


@pytest.fixture
def api_roster(client):
    """Same roster as ``roster`` but on the engine opened by the test client."""
    platform = add_team("Platform")
    design = add_team("Design")
    ada = add_user("Ada", platform)
    grace = add_user("Grace", platform)
    linus = add_user("Linus", design)
    return {
        "platform": platform,
        "design": design,
        "ada": ada,
        "grace": grace,
        "linus": linus,
    }


NOW = datetime(2025, 9, 1, 9, 0, tzinfo=timezone.utc)
