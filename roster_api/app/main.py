"""
Main entrypoint for the Sports Roster API.

This module assembles the FastAPI application.  ``create_app`` is also
the composition root: it applies migrations, builds one repository and
one service per entity type and stores the services on ``app.state``
where the endpoint dependencies find them.  No application is built at
import time; serve it through the factory::

    uvicorn roster_api.app.main:create_app --factory --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.exceptions import StorageError
from .core.logging_config import setup_logging
from .repositories import PlayerRepository, TeamRepository
from .services import DashboardService, PlayerService, TeamService

logger = logging.getLogger(__name__)


def create_app(database_path: Optional[str] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    database_path : Optional[str]
        SQLite file to use instead of ``settings.database_url``.  Tests
        pass a temporary file here.

    Returns
    -------
    FastAPI
        A configured application with its services already loaded.
    """
    # Initialise logging before anything else so that the setup below
    # can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    # Services load their caches on construction, so the schema must
    # exist first.
    init_db(database_path)
    team_repository = TeamRepository(database_path)
    player_repository = PlayerRepository(database_path)
    team_service = TeamService(team_repository)
    player_service = PlayerService(player_repository, team_repository)

    app.state.team_service = team_service
    app.state.player_service = player_service
    app.state.dashboard_service = DashboardService(team_service, player_service)

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": f"Storage error: {exc}"},
        )

    app.include_router(v1_router, prefix="/api/v1")

    logger.info(
        "%s ready (%d teams, %d players)",
        settings.project_name,
        team_service.count(),
        player_service.count(),
    )
    return app
