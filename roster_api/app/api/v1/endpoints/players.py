"""
Player endpoints for API v1.

List filters are mutually exclusive; the first one present wins, in the
order ``team_id``, ``position``, ``top``, ``sort``, ``free_agents``,
``name``, then the ``min_age``/``max_age`` range.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from roster_api.app.api.deps import get_player_service, http_error
from roster_api.app.core.exceptions import NotFoundError, ValidationError
from roster_api.app.schemas.player import Player, PlayerCreate
from roster_api.app.schemas.statistics import PlayerStatistics
from roster_api.app.services.player_service import PlayerService
from roster_api.app.services.validation import MAX_PLAYER_AGE, MIN_PLAYER_AGE


router = APIRouter()


@router.get("/", response_model=List[Player])
def list_players(
    team_id: Optional[int] = Query(None),
    position: Optional[str] = Query(None),
    top: Optional[int] = Query(None, ge=0),
    sort: Optional[str] = Query(None),
    order: str = Query("asc"),
    free_agents: bool = Query(False),
    name: Optional[str] = Query(None),
    min_age: Optional[int] = Query(None),
    max_age: Optional[int] = Query(None),
    service: PlayerService = Depends(get_player_service),
) -> List[Player]:
    """List players with an optional filter.

    - **team_id**: players on that team.
    - **position**: exact position, case-insensitive.
    - **top**: the N highest-rated players.
    - **sort**: `name`, `age`, `position` or `rating`; **order** `asc`/`desc`.
    - **free_agents**: players without a team.
    - **name**: substring search on first or last name.
    - **min_age**, **max_age**: inclusive age range.
    """
    if team_id is not None:
        return service.get_players_by_team(team_id)
    if position:
        return service.get_players_by_position(position)
    if top is not None:
        return service.get_top_rated_players(top)
    if sort:
        return service.sort_by(sort, ascending=order.lower() != "desc")
    if free_agents:
        return service.get_free_agents()
    if name:
        return service.search_by_name(name)
    if min_age is not None or max_age is not None:
        return service.get_players_by_age_range(
            min_age if min_age is not None else MIN_PLAYER_AGE,
            max_age if max_age is not None else MAX_PLAYER_AGE,
        )
    return service.list_all()


@router.get("/stats", response_model=PlayerStatistics)
def player_statistics(service: PlayerService = Depends(get_player_service)) -> PlayerStatistics:
    return service.statistics()


@router.get("/{player_id}", response_model=Player)
def get_player(player_id: int, service: PlayerService = Depends(get_player_service)) -> Player:
    try:
        return service.get_by_id(player_id)
    except NotFoundError as e:
        raise http_error(e) from e


@router.post("/", response_model=Player, status_code=status.HTTP_201_CREATED)
def create_player(
    payload: PlayerCreate,
    service: PlayerService = Depends(get_player_service),
) -> Player:
    """Create a player.  A non-zero ``team_id`` must name an existing team."""
    try:
        return service.create(payload)
    except ValidationError as e:
        raise http_error(e) from e


@router.put("/{player_id}", response_model=Player)
def update_player(
    player_id: int,
    payload: PlayerCreate,
    service: PlayerService = Depends(get_player_service),
) -> Player:
    try:
        return service.update(Player(id=player_id, **payload.model_dump()))
    except (ValidationError, NotFoundError) as e:
        raise http_error(e) from e


@router.delete("/{player_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_player(player_id: int, service: PlayerService = Depends(get_player_service)) -> None:
    try:
        service.delete(player_id)
    except NotFoundError as e:
        raise http_error(e) from e
    return None
