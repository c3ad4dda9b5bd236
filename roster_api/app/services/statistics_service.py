"""
Aggregated statistics over team and player snapshots.

The functions here are pure: they take a sequence of entities (normally
a service's cached snapshot) and return a statistics model.  Nothing is
cached; each call recomputes from the given data.  Averages over an
empty sequence are ``0.0``.
"""

from __future__ import annotations

from collections import Counter
from statistics import fmean
from typing import List, Sequence, Tuple

from roster_api.app.schemas.player import Player
from roster_api.app.schemas.statistics import PlayerStatistics, TeamStatistics
from roster_api.app.schemas.team import Team

# Lower bound (inclusive) and label, checked from the top down.
RATING_BANDS: List[Tuple[float, str]] = [
    (9.0, "Excellent"),
    (8.0, "Good"),
    (7.0, "Average"),
]
LOWEST_BAND = "Below Average"


def rating_band(rating: float) -> str:
    for lower_bound, label in RATING_BANDS:
        if rating >= lower_bound:
            return label
    return LOWEST_BAND


def average_rating(players: Sequence[Player]) -> float:
    """Mean player rating, unrounded."""
    return fmean(p.rating for p in players) if players else 0.0


def compute_team_statistics(teams: Sequence[Team]) -> TeamStatistics:
    dated = [team for team in teams if team.founded_year]
    oldest = min(dated, key=lambda team: team.founded_year) if dated else None
    return TeamStatistics(
        total_teams=len(teams),
        teams_by_sport=dict(Counter(team.sport for team in teams)),
        teams_by_location=dict(Counter(team.location for team in teams)),
        average_founded_year=fmean(team.founded_year for team in dated) if dated else 0.0,
        oldest_team=oldest.name if oldest else None,
    )


def compute_player_statistics(players: Sequence[Player]) -> PlayerStatistics:
    best = max(players, key=lambda player: player.rating) if players else None
    return PlayerStatistics(
        total_players=len(players),
        average_rating=round(average_rating(players), 2),
        average_age=fmean(player.age for player in players) if players else 0.0,
        players_by_position=dict(Counter(player.position for player in players)),
        free_agents_count=sum(1 for player in players if player.is_free_agent),
        rating_distribution=dict(Counter(rating_band(player.rating) for player in players)),
        highest_rated_player=best.full_name if best else None,
        highest_rating=best.rating if best else None,
    )
