"""
Persistence gateways.

One repository per table.  Services depend on the ``EntityRepository``
contract only, so tests can substitute in-memory fakes.
"""

from .base import EntityRepository
from .player_repository import PlayerRepository
from .team_repository import TeamRepository

__all__ = ["EntityRepository", "PlayerRepository", "TeamRepository"]
