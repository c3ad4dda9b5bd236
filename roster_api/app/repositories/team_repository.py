"""
SQLite gateway for the ``teams`` table.

All queries use parameterised statements.  ``find_all`` returns teams
ordered by name, which is the order the team cache exposes.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List

from roster_api.app.core.exceptions import NotFoundError
from roster_api.app.schemas.team import Team

from .base import SQLiteRepository, contains_pattern, utc_now

logger = logging.getLogger(__name__)


INSERT_SQL = """
    INSERT INTO teams (name, sport, coach, location, founded_year, created_at, updated_at)
    VALUES (?, ?, ?, ?, ?, ?, ?)
"""
UPDATE_SQL = """
    UPDATE teams
    SET name = ?, sport = ?, coach = ?, location = ?, founded_year = ?, updated_at = ?
    WHERE id = ?
"""
FIND_ALL = "SELECT * FROM teams ORDER BY name, id"
FIND_BY_SPORT = "SELECT * FROM teams WHERE sport = ? ORDER BY name, id"
FIND_BY_LOCATION = "SELECT * FROM teams WHERE location = ? ORDER BY name, id"
FIND_BY_COACH = "SELECT * FROM teams WHERE coach = ? ORDER BY name, id"
SEARCH_BY_NAME = "SELECT * FROM teams WHERE name LIKE ? ESCAPE '\\' ORDER BY name, id"


class TeamRepository(SQLiteRepository[Team]):
    """Persistence gateway for teams."""

    entity_name = "Team"
    table = "teams"

    def save(self, team: Team) -> Team:
        """Insert a team and return it as stored, with its new id."""
        now = utc_now()
        _, team_id = self._write(
            INSERT_SQL,
            (team.name, team.sport, team.coach, team.location, team.founded_year, now, now),
        )
        logger.info("Inserted team %s (%s)", team_id, team.name)
        return self.find_by_id(team_id)

    def find_all(self) -> List[Team]:
        return self._query(FIND_ALL)

    def update(self, team: Team) -> Team:
        """Overwrite every column of an existing team.

        Raises ``NotFoundError`` when no row has the team's id.
        """
        affected, _ = self._write(
            UPDATE_SQL,
            (
                team.name,
                team.sport,
                team.coach,
                team.location,
                team.founded_year,
                utc_now(),
                team.id,
            ),
        )
        if affected == 0:
            raise NotFoundError(self.entity_name, team.id)
        return self.find_by_id(team.id)

    def find_by_sport(self, sport: str) -> List[Team]:
        return self._query(FIND_BY_SPORT, (sport,))

    def find_by_location(self, location: str) -> List[Team]:
        return self._query(FIND_BY_LOCATION, (location,))

    def find_by_coach(self, coach: str) -> List[Team]:
        return self._query(FIND_BY_COACH, (coach,))

    def search_by_name(self, name_part: str) -> List[Team]:
        """Case-insensitive substring match on the team name."""
        return self._query(SEARCH_BY_NAME, (contains_pattern(name_part),))

    def _row_to_entity(self, row: sqlite3.Row) -> Team:
        return Team(
            id=row["id"],
            name=row["name"],
            sport=row["sport"],
            coach=row["coach"],
            location=row["location"],
            founded_year=row["founded_year"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
