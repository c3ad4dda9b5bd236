"""
Dashboard read model.

Combines the team and player services into the single payload the
dashboard screen needs.  Everything is read from the service caches
except the team total, which ``TeamService.count`` takes from the store.
"""

from roster_api.app.schemas.statistics import DashboardData, DashboardStats

from .player_service import PlayerService
from .team_service import TeamService

TOP_PLAYERS_LIMIT = 5


class DashboardService:
    def __init__(self, team_service: TeamService, player_service: PlayerService) -> None:
        self.team_service = team_service
        self.player_service = player_service

    def quick_stats(self) -> DashboardStats:
        return DashboardStats(
            total_teams=self.team_service.count(),
            total_players=self.player_service.count(),
            average_rating=round(self.player_service.calculate_average_rating(), 2),
        )

    def dashboard(self) -> DashboardData:
        return DashboardData(
            stats=self.quick_stats(),
            team_stats=self.team_service.statistics(),
            player_stats=self.player_service.statistics(),
            recent_teams=self.team_service.sort_by("name", ascending=True),
            top_players=self.player_service.get_top_rated_players(TOP_PLAYERS_LIMIT),
            free_agents=self.player_service.get_free_agents(),
        )
