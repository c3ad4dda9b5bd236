"""
FastAPI dependencies resolving the services built by ``create_app``.

The composition root stores one instance of each service on
``app.state``; endpoints receive them through ``Depends``.
"""

from fastapi import HTTPException, Request, status

from roster_api.app.core.exceptions import NotFoundError, ValidationError
from roster_api.app.services import DashboardService, PlayerService, TeamService


def get_team_service(request: Request) -> TeamService:
    return request.app.state.team_service


def get_player_service(request: Request) -> PlayerService:
    return request.app.state.player_service


def get_dashboard_service(request: Request) -> DashboardService:
    return request.app.state.dashboard_service


def http_error(exc: Exception) -> HTTPException:
    """Translate a service error into the matching ``HTTPException``."""
    if isinstance(exc, ValidationError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"entity": exc.entity_name, "errors": exc.errors},
        )
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    raise TypeError(f"Unsupported error type: {type(exc).__name__}")
