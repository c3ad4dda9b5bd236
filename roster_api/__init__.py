"""
Top‑level package for the Sports Roster API.

All functionality lives in submodules under ``app``; import the
application factory from ``roster_api.app.main``.
"""

__all__ = []
