"""
Pydantic schema definitions for API payloads and entities.

Each domain (teams, players, statistics) defines its own models.  The
entity models double as the service layer's return types.
"""

from .player import Player, PlayerCreate
from .statistics import DashboardData, DashboardStats, PlayerStatistics, TeamStatistics
from .team import Team, TeamCreate

__all__ = [
    "DashboardData",
    "DashboardStats",
    "Player",
    "PlayerCreate",
    "PlayerStatistics",
    "Team",
    "TeamCreate",
    "TeamStatistics",
]
