"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``) and applying migrations on application start
(``init_db``).  Applied migration versions are stored in the
``migrations`` table and new migrations are executed in order.

There is no foreign key from ``players.team_id`` to ``teams.id``;
the player service checks team references at write time.
"""

import logging
import os
import sqlite3
from pathlib import Path
from typing import List, Optional, Tuple

from .config import settings

logger = logging.getLogger(__name__)


MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS teams (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            sport TEXT NOT NULL,
            coach TEXT NOT NULL,
            location TEXT NOT NULL,
            founded_year INTEGER,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS players (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            first_name TEXT NOT NULL,
            last_name TEXT NOT NULL,
            age INTEGER NOT NULL,
            position TEXT NOT NULL,
            rating REAL NOT NULL,
            team_id INTEGER,
            jersey_number INTEGER,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );
        """,
    ),
    # Migration 2: Indexes for the common lookups
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_teams_name ON teams(name);
        CREATE INDEX IF NOT EXISTS idx_players_team_id ON players(team_id);
        CREATE INDEX IF NOT EXISTS idx_players_name ON players(last_name, first_name);
        """,
    ),
]


def get_database_path(db_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the path is absolute it is used directly.  Otherwise it is
    resolved relative to the project root.  In-memory databases are
    rejected: every repository call opens its own connection, and each
    ``:memory:`` connection would see a separate empty database.
    """
    db_url = db_url or settings.database_url
    if db_url == ":memory:" or db_url.startswith("file::memory:"):
        raise ValueError("In-memory SQLite databases are not supported; use a file path")
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` objects so columns can be
    accessed by name.  Timestamps are returned as stored (strings).
    """
    conn = sqlite3.connect(get_database_path(db_path))
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_path: Optional[str] = None) -> None:
    """Create the database if needed and apply pending migrations."""
    conn = get_connection(db_path)
    try:
        cursor = conn.cursor()
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS migrations (
                version INTEGER PRIMARY KEY,
                applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
            """
        )
        row = cursor.execute("SELECT MAX(version) FROM migrations").fetchone()
        current_version = row[0] or 0
        for version, sql in MIGRATIONS:
            if version <= current_version:
                continue
            logger.info("Applying migration %s", version)
            cursor.executescript(sql)
            cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
            conn.commit()
    finally:
        conn.close()
