"""
Business logic for players.

Besides the shared entity behaviour, the player service checks that a
referenced team exists (through the team repository, not the team
cache) and offers roster-oriented views such as free agents and the
top-rated players.
"""

from typing import List

from roster_api.app.repositories.player_repository import PlayerRepository
from roster_api.app.repositories.team_repository import TeamRepository
from roster_api.app.schemas.player import Player, PlayerCreate
from roster_api.app.schemas.statistics import PlayerStatistics

from .base import EntityService, text_key
from .statistics_service import average_rating, compute_player_statistics
from .validation import validate_player


def _name_key(player: Player):
    return ((player.last_name or "").casefold(), (player.first_name or "").casefold())


class PlayerService(EntityService[Player]):
    """Service for managing players."""

    entity_name = "Player"
    entity_model = Player
    draft_model = PlayerCreate
    sort_keys = {
        "name": _name_key,
        "age": lambda player: player.age,
        "position": text_key("position"),
        "rating": lambda player: player.rating,
    }

    def __init__(self, repository: PlayerRepository, team_repository: TeamRepository) -> None:
        self.team_repository = team_repository
        super().__init__(repository)

    def validate(self, player: Player) -> List[str]:
        return validate_player(player, self.team_repository.exists_by_id)

    def get_players_by_team(self, team_id: int) -> List[Player]:
        return self.filter_by(lambda player: player.team_id == team_id)

    def get_players_by_position(self, position: str) -> List[Player]:
        wanted = position.casefold()
        return self.filter_by(lambda player: (player.position or "").casefold() == wanted)

    def get_top_rated_players(self, limit: int) -> List[Player]:
        """The ``limit`` highest-rated players, best first."""
        if limit <= 0:
            return []
        return self.sort_by("rating", ascending=False)[:limit]

    def get_free_agents(self) -> List[Player]:
        return self.filter_by(lambda player: player.is_free_agent)

    def get_players_by_age_range(self, min_age: int, max_age: int) -> List[Player]:
        return self.repository.find_by_age_between(min_age, max_age)

    def search_by_name(self, name_part: str) -> List[Player]:
        return self.repository.search_by_name(name_part)

    def calculate_average_rating(self) -> float:
        return average_rating(self.list_all())

    def statistics(self) -> PlayerStatistics:
        return compute_player_statistics(self.list_all())
