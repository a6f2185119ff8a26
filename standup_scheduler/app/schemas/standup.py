"""
Pydantic models for standups.

``StandupCreate`` and ``StandupUpdate`` are request bodies.  Every field
they declare must be present in the body; ``meeting_link`` and
``notes`` may be ``null`` but cannot be left out, because an update
replaces all of its columns.  Times may carry any UTC offset and are
normalised to UTC on validation; a time without an offset is read as
UTC.  ``StandupNotesUpdate`` touches the notes column only.
``StandupRead`` is what every standup endpoint returns, including the
chair's display name joined in from ``users``.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator

# Largest integer SQLite can store.
MAX_ROW_ID = 2**63 - 1


class StandupBase(BaseModel):
    time: datetime = Field(..., examples=["2025-09-01T09:30:00+00:00"])
    chair_id: int = Field(..., ge=1, le=MAX_ROW_ID, examples=[3])
    meeting_link: Optional[str] = Field(..., examples=["https://meet.example.com/daily"])

    @field_validator("time")
    @classmethod
    def time_in_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        try:
            return value.astimezone(timezone.utc)
        except OverflowError as exc:
            raise ValueError("time is out of range once converted to UTC") from exc


class StandupCreate(StandupBase):
    """Schema for scheduling a standup for a team."""

    notes: Optional[str] = Field(..., examples=["Demo the new build first"])


class StandupUpdate(StandupBase):
    """Schema for rescheduling a standup.

    The time, chair and link are replaced together; notes are left as
    they are.
    """


class StandupNotesUpdate(BaseModel):
    notes: str = Field(..., examples=["Discussed release blockers"])


class StandupRead(BaseModel):
    """Schema for reading a standup from the API."""

    id: int
    team_id: int
    time: datetime
    chair_id: Optional[int] = None
    chair_name: Optional[str] = None
    meeting_link: Optional[str] = None
    notes: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }
