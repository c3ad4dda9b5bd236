"""
SQLite gateway for the ``players`` table.

``find_all`` orders players by last name then first name.  A ``NULL``
``team_id`` marks a free agent; the service also treats ``0`` that way,
so ``find_free_agents`` matches both.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List

from roster_api.app.core.exceptions import NotFoundError
from roster_api.app.schemas.player import Player

from .base import SQLiteRepository, contains_pattern, utc_now

logger = logging.getLogger(__name__)


INSERT_SQL = """
    INSERT INTO players (
        first_name, last_name, age, position, rating, team_id, jersey_number,
        created_at, updated_at
    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
"""
UPDATE_SQL = """
    UPDATE players
    SET first_name = ?, last_name = ?, age = ?, position = ?, rating = ?,
        team_id = ?, jersey_number = ?, updated_at = ?
    WHERE id = ?
"""
ORDER_BY_NAME = " ORDER BY last_name, first_name, id"


class PlayerRepository(SQLiteRepository[Player]):
    """Persistence gateway for players."""

    entity_name = "Player"
    table = "players"

    def save(self, player: Player) -> Player:
        now = utc_now()
        _, player_id = self._write(
            INSERT_SQL,
            (
                player.first_name,
                player.last_name,
                player.age,
                player.position,
                player.rating,
                player.team_id,
                player.jersey_number,
                now,
                now,
            ),
        )
        logger.info("Inserted player %s (%s)", player_id, player.full_name)
        return self.find_by_id(player_id)

    def find_all(self) -> List[Player]:
        return self._query("SELECT * FROM players" + ORDER_BY_NAME)

    def update(self, player: Player) -> Player:
        affected, _ = self._write(
            UPDATE_SQL,
            (
                player.first_name,
                player.last_name,
                player.age,
                player.position,
                player.rating,
                player.team_id,
                player.jersey_number,
                utc_now(),
                player.id,
            ),
        )
        if affected == 0:
            raise NotFoundError(self.entity_name, player.id)
        return self.find_by_id(player.id)

    def find_by_team_id(self, team_id: int) -> List[Player]:
        return self._query("SELECT * FROM players WHERE team_id = ?" + ORDER_BY_NAME, (team_id,))

    def find_by_position(self, position: str) -> List[Player]:
        return self._query(
            "SELECT * FROM players WHERE position = ? ORDER BY rating DESC, id", (position,)
        )

    def find_by_rating_greater_than(self, min_rating: float) -> List[Player]:
        """Players rated ``min_rating`` or higher, best first."""
        return self._query(
            "SELECT * FROM players WHERE rating >= ? ORDER BY rating DESC, id", (min_rating,)
        )

    def find_by_age_between(self, min_age: int, max_age: int) -> List[Player]:
        return self._query(
            "SELECT * FROM players WHERE age BETWEEN ? AND ? ORDER BY age, id",
            (min_age, max_age),
        )

    def search_by_name(self, name_part: str) -> List[Player]:
        pattern = contains_pattern(name_part)
        return self._query(
            "SELECT * FROM players WHERE first_name LIKE ? ESCAPE '\\' OR last_name LIKE ? ESCAPE '\\'"
            + ORDER_BY_NAME,
            (pattern, pattern),
        )

    def find_free_agents(self) -> List[Player]:
        return self._query(
            "SELECT * FROM players WHERE team_id IS NULL OR team_id = 0 ORDER BY rating DESC, id"
        )

    def _row_to_entity(self, row: sqlite3.Row) -> Player:
        return Player(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            age=row["age"],
            position=row["position"],
            rating=row["rating"],
            team_id=row["team_id"],
            jersey_number=row["jersey_number"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
