"""
Pydantic models for teams and their members.

Teams and users are created outside this API; these schemas only
describe how they are read back.
"""

from typing import Optional

from pydantic import BaseModel, Field


class TeamRead(BaseModel):
    """A team row."""

    id: int
    name: str = Field(..., examples=["Platform"])

    model_config = {
        "from_attributes": True,
    }


class UserRead(BaseModel):
    """A user and the team they belong to."""

    id: int
    name: str = Field(..., examples=["Ada Lovelace"])
    team_id: Optional[int] = None

    model_config = {
        "from_attributes": True,
    }
