"""
Team endpoints for API v1.

CRUD operations plus the filtered, sorted and statistics views served
from the team cache.  Only one list filter applies per request, checked
in the order ``sport``, ``location``, ``name``, ``sort``.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from roster_api.app.api.deps import get_team_service, http_error
from roster_api.app.core.exceptions import NotFoundError, ValidationError
from roster_api.app.schemas.statistics import TeamStatistics
from roster_api.app.schemas.team import Team, TeamCreate
from roster_api.app.services.team_service import TeamService


router = APIRouter()


@router.get("/", response_model=List[Team])
def list_teams(
    sport: Optional[str] = Query(None),
    location: Optional[str] = Query(None),
    name: Optional[str] = Query(None),
    sort: Optional[str] = Query(None),
    order: str = Query("asc"),
    service: TeamService = Depends(get_team_service),
) -> List[Team]:
    """List teams.

    - **sport**: exact match, case-insensitive.
    - **location**: substring match, case-insensitive.
    - **name**: substring search on the team name.
    - **sort**: `name`, `sport`, `coach`, `location` or `founded_year`;
      **order** is `asc` or `desc`.
    """
    if sport:
        return service.get_teams_by_sport(sport)
    if location:
        return service.get_teams_by_location(location)
    if name:
        return service.search_by_name(name)
    if sort:
        return service.sort_by(sort, ascending=order.lower() != "desc")
    return service.list_all()


@router.get("/stats", response_model=TeamStatistics)
def team_statistics(service: TeamService = Depends(get_team_service)) -> TeamStatistics:
    return service.statistics()


@router.get("/{team_id}", response_model=Team)
def get_team(team_id: int, service: TeamService = Depends(get_team_service)) -> Team:
    try:
        return service.get_by_id(team_id)
    except NotFoundError as e:
        raise http_error(e) from e


@router.post("/", response_model=Team, status_code=status.HTTP_201_CREATED)
def create_team(payload: TeamCreate, service: TeamService = Depends(get_team_service)) -> Team:
    try:
        return service.create(payload)
    except ValidationError as e:
        raise http_error(e) from e


@router.put("/{team_id}", response_model=Team)
def update_team(
    team_id: int,
    payload: TeamCreate,
    service: TeamService = Depends(get_team_service),
) -> Team:
    """Replace every field of an existing team."""
    try:
        return service.update(Team(id=team_id, **payload.model_dump()))
    except (ValidationError, NotFoundError) as e:
        raise http_error(e) from e


@router.delete("/{team_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_team(team_id: int, service: TeamService = Depends(get_team_service)) -> None:
    try:
        service.delete(team_id)
    except NotFoundError as e:
        raise http_error(e) from e
    return None
