"""
Service layer.

Each service encapsulates the business logic for one domain and is
constructed once by the composition root in ``main.create_app``.
"""

from .dashboard_service import DashboardService
from .player_service import PlayerService
from .team_service import TeamService

__all__ = ["DashboardService", "PlayerService", "TeamService"]
