"""
Pydantic models for activities (status updates attached to a standup).

``url`` and ``comment`` may be ``null`` but must be sent; an update
rewrites them along with the name.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .standup import MAX_ROW_ID


class ActivityBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Fixed flaky login test"])
    url: Optional[str] = Field(..., examples=["https://git.example.com/pr/42"])
    comment: Optional[str] = Field(..., examples=["Ready for review"])


class ActivityCreate(ActivityBase):
    """Schema for adding an activity to a standup."""

    user_id: int = Field(..., ge=1, le=MAX_ROW_ID, examples=[3])


class ActivityUpdate(ActivityBase):
    """Schema for editing an activity.

    The contributor and the standup cannot be changed.
    """


class ActivityRead(BaseModel):
    """Schema for reading an activity from the API."""

    id: int
    standup_id: int
    user_id: Optional[int] = None
    name: str
    url: Optional[str] = None
    comment: Optional[str] = None

    model_config = {
        "from_attributes": True,
    }
