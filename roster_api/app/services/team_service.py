"""
Business logic for teams.

Teams are validated before every write and served from the team cache
for all list-style reads.
"""

from typing import List

from roster_api.app.repositories.team_repository import TeamRepository
from roster_api.app.schemas.statistics import TeamStatistics
from roster_api.app.schemas.team import Team, TeamCreate

from .base import EntityService, text_key
from .statistics_service import compute_team_statistics
from .validation import validate_team


def _founded_year_key(team: Team):
    # Teams without a founding year sort after all dated teams.
    return (team.founded_year is None, team.founded_year or 0)


class TeamService(EntityService[Team]):
    """Service for managing teams."""

    entity_name = "Team"
    entity_model = Team
    draft_model = TeamCreate
    sort_keys = {
        "name": text_key("name"),
        "sport": text_key("sport"),
        "coach": text_key("coach"),
        "location": text_key("location"),
        "foundedyear": _founded_year_key,
    }

    def __init__(self, repository: TeamRepository) -> None:
        super().__init__(repository)

    def validate(self, team: Team) -> List[str]:
        return validate_team(team)

    def count(self) -> int:
        """Number of teams in the store (not the cache)."""
        return self.repository.count()

    def get_teams_by_sport(self, sport: str) -> List[Team]:
        wanted = sport.casefold()
        return self.filter_by(lambda team: (team.sport or "").casefold() == wanted)

    def get_teams_by_location(self, location: str) -> List[Team]:
        """Teams whose location contains ``location``, ignoring case."""
        wanted = location.casefold()
        return self.filter_by(lambda team: wanted in (team.location or "").casefold())

    def search_by_name(self, name_part: str) -> List[Team]:
        return self.repository.search_by_name(name_part)

    def statistics(self) -> TeamStatistics:
        return compute_team_statistics(self.list_all())
