"""
Pydantic models for team data.

``TeamCreate`` is the payload a caller supplies; ``Team`` is the
persisted entity with its store-assigned identifier and timestamps.
Required text fields are typed as optional here on purpose: presence
and blank checks belong to the validator, which reports every missing
field together rather than failing on the first one.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class TeamCreate(BaseModel):
    """Schema for creating (or fully replacing) a team."""

    name: Optional[str] = Field(None, examples=["Nova FC"])
    sport: Optional[str] = Field(None, examples=["Football"])
    coach: Optional[str] = Field(None, examples=["A. Ray"])
    location: Optional[str] = Field(None, examples=["Porto"])
    founded_year: Optional[int] = Field(None, examples=[2010])


class Team(TeamCreate):
    """A team as stored.  Instances are immutable."""

    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True,
        "frozen": True,
    }
