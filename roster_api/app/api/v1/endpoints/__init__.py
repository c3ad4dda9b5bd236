"""
Endpoint subpackage for API v1.

Each module defines an APIRouter for one domain (teams, players,
dashboard).  The routers are aggregated in ``router.py``.
"""
