"""In-memory stand-ins for the SQLite repositories used by service tests."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from roster_api.app.core.exceptions import NotFoundError, StorageError
from roster_api.app.schemas.player import Player
from roster_api.app.schemas.team import Team


class InMemoryRepository:
    entity_name = "Entity"

    def __init__(self, order_key: Callable) -> None:
        self.rows: Dict[int, object] = {}
        self.next_id = 1
        self.order_key = order_key
        self.find_all_calls = 0
        self.fail_writes = False

    def _check_writable(self) -> None:
        if self.fail_writes:
            raise StorageError(self.entity_name, "database is locked")

    def save(self, entity):
        self._check_writable()
        now = datetime.now(timezone.utc)
        stored = entity.model_copy(update={"id": self.next_id, "created_at": now, "updated_at": now})
        self.rows[self.next_id] = stored
        self.next_id += 1
        return stored

    def find_by_id(self, entity_id: int):
        return self.rows.get(entity_id)

    def find_all(self) -> List:
        self.find_all_calls += 1
        return sorted(self.rows.values(), key=self.order_key)

    def update(self, entity):
        self._check_writable()
        if entity.id not in self.rows:
            raise NotFoundError(self.entity_name, entity.id)
        previous = self.rows[entity.id]
        stored = entity.model_copy(
            update={"created_at": previous.created_at, "updated_at": datetime.now(timezone.utc)}
        )
        self.rows[entity.id] = stored
        return stored

    def delete_by_id(self, entity_id: int) -> bool:
        self._check_writable()
        return self.rows.pop(entity_id, None) is not None

    def exists_by_id(self, entity_id: int) -> bool:
        return entity_id in self.rows

    def count(self) -> int:
        return len(self.rows)


class InMemoryTeamRepository(InMemoryRepository):
    entity_name = "Team"

    def __init__(self) -> None:
        super().__init__(order_key=lambda team: (team.name, team.id))

    def search_by_name(self, name_part: str) -> List[Team]:
        return [t for t in self.find_all() if name_part.lower() in t.name.lower()]


class InMemoryPlayerRepository(InMemoryRepository):
    entity_name = "Player"

    def __init__(self) -> None:
        super().__init__(order_key=lambda p: (p.last_name, p.first_name, p.id))

    def find_by_age_between(self, min_age: int, max_age: int) -> List[Player]:
        return sorted(
            (p for p in self.rows.values() if min_age <= p.age <= max_age),
            key=lambda p: (p.age, p.id),
        )

    def search_by_name(self, name_part: str) -> List[Player]:
        part = name_part.lower()
        return [
            p for p in self.find_all()
            if part in p.first_name.lower() or part in p.last_name.lower()
        ]


def make_player(rating: float, *, first_name: str = "Test", last_name: Optional[str] = None,
                age: int = 25, position: str = "Forward", team_id: Optional[int] = None,
                player_id: int = 1) -> Player:
    return Player(
        id=player_id,
        first_name=first_name,
        last_name=last_name or f"Player{player_id}",
        age=age,
        position=position,
        rating=rating,
        team_id=team_id,
    )
