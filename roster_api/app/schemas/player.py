"""
Pydantic models for player data.

As with teams, range and presence rules are enforced by the validator
in ``services.validation`` and not by field constraints, so that all
violations can be reported together.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, computed_field


class PlayerCreate(BaseModel):
    """Schema for creating (or fully replacing) a player.

    ``team_id`` may be omitted or ``0`` for a free agent.
    """

    first_name: Optional[str] = Field(None, examples=["Sam"])
    last_name: Optional[str] = Field(None, examples=["Lee"])
    age: Optional[int] = Field(None, examples=[24])
    position: Optional[str] = Field(None, examples=["Forward"])
    rating: Optional[float] = Field(None, examples=[8.7])
    team_id: Optional[int] = Field(None, examples=[1])
    jersey_number: Optional[int] = Field(None, examples=[9])


class Player(PlayerCreate):
    """A player as stored.  Instances are immutable."""

    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {
        "from_attributes": True,
        "frozen": True,
    }

    @computed_field
    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    @property
    def is_free_agent(self) -> bool:
        return not self.team_id
