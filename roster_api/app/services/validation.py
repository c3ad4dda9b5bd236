"""
Validation rules for teams and players.

Each validator returns the list of every violated rule; an empty list
means the entity is valid.  Rule violations are never raised and the
entity is never modified.  Errors from the ``team_exists`` lookup (such
as ``StorageError``) propagate to the caller.
"""

from typing import Callable, List, Optional

from roster_api.app.schemas.player import PlayerCreate
from roster_api.app.schemas.team import TeamCreate

MIN_PLAYER_AGE = 16
MAX_PLAYER_AGE = 50
MIN_RATING = 0.0
MAX_RATING = 10.0


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_team(team: TeamCreate) -> List[str]:
    errors: List[str] = []
    if _is_blank(team.name):
        errors.append("Team name is required")
    if _is_blank(team.sport):
        errors.append("Sport is required")
    if _is_blank(team.coach):
        errors.append("Coach name is required")
    if _is_blank(team.location):
        errors.append("Location is required")
    return errors


def validate_player(player: PlayerCreate, team_exists: Callable[[int], bool]) -> List[str]:
    """Check a player's fields and its team reference.

    ``team_exists`` is only consulted when the player names a team
    (a non-zero ``team_id``).
    """
    errors: List[str] = []
    if _is_blank(player.first_name):
        errors.append("First name is required")
    if _is_blank(player.last_name):
        errors.append("Last name is required")
    if player.age is None or not MIN_PLAYER_AGE <= player.age <= MAX_PLAYER_AGE:
        errors.append(f"Age must be between {MIN_PLAYER_AGE} and {MAX_PLAYER_AGE}")
    if _is_blank(player.position):
        errors.append("Position is required")
    if player.rating is None or not MIN_RATING <= player.rating <= MAX_RATING:
        errors.append(f"Rating must be between {MIN_RATING} and {MAX_RATING}")
    if player.team_id and not team_exists(player.team_id):
        errors.append(f"Team with ID {player.team_id} does not exist")
    return errors
