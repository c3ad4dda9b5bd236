"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.  When
new domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import dashboard, players, teams

router = APIRouter()

router.include_router(teams.router, prefix="/teams", tags=["teams"])
router.include_router(players.router, prefix="/players", tags=["players"])
router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
