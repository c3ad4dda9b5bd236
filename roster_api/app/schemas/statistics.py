"""
Statistics and dashboard read models.

Each aggregate has its own model with named, typed fields so that the
API documents the exact shape clients receive.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .player import Player
from .team import Team


class TeamStatistics(BaseModel):
    total_teams: int = 0
    teams_by_sport: Dict[str, int] = Field(default_factory=dict)
    teams_by_location: Dict[str, int] = Field(default_factory=dict)
    average_founded_year: float = 0.0
    oldest_team: Optional[str] = None


class PlayerStatistics(BaseModel):
    total_players: int = 0
    average_rating: float = 0.0
    average_age: float = 0.0
    players_by_position: Dict[str, int] = Field(default_factory=dict)
    free_agents_count: int = 0
    rating_distribution: Dict[str, int] = Field(default_factory=dict)
    highest_rated_player: Optional[str] = None
    highest_rating: Optional[float] = None


class DashboardStats(BaseModel):
    """Headline numbers shown at the top of the dashboard.

    Matches and tournaments are not tracked yet and always report zero.
    """

    total_teams: int = 0
    total_players: int = 0
    total_matches: int = 0
    total_tournaments: int = 0
    average_rating: float = 0.0


class DashboardData(BaseModel):
    stats: DashboardStats
    team_stats: TeamStatistics
    player_stats: PlayerStatistics
    recent_teams: List[Team] = Field(default_factory=list)
    top_players: List[Player] = Field(default_factory=list)
    free_agents: List[Player] = Field(default_factory=list)
