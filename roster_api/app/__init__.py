"""
Application package.

The project is split by concern: ``core`` (settings, logging, database,
errors), ``schemas`` (pydantic models), ``repositories`` (SQLite
gateways), ``services`` (validation, caching, statistics) and ``api``
(versioned FastAPI routers).  ``main.create_app`` wires them together.
"""
