#!/usr/bin/env python3
"""
Load a small demo roster into the Sports Roster SQLite database.

Teams and players go through the regular services, so every record is
validated exactly as it would be through the API.  A team is skipped
when a team with exactly the same name exists, and a free agent when a
player with the same first and last name exists, so the script can be
re-run on a partially seeded database.

Usage:
    python seed_demo.py --db ./roster.db
"""

import argparse
import sys

from roster_api.app.core.db import init_db
from roster_api.app.core.exceptions import StorageError, ValidationError
from roster_api.app.repositories import PlayerRepository, TeamRepository
from roster_api.app.schemas import PlayerCreate, TeamCreate
from roster_api.app.services import PlayerService, TeamService

DEMO_TEAMS = [
    ({"name": "Nova FC", "sport": "Football", "coach": "A. Ray", "location": "Porto", "founded_year": 2010}, [
        {"first_name": "Sam", "last_name": "Lee", "age": 24, "position": "Forward", "rating": 8.7, "jersey_number": 9},
        {"first_name": "Ivo", "last_name": "Marques", "age": 29, "position": "Goalkeeper", "rating": 7.4, "jersey_number": 1},
    ]),
    ({"name": "Harbor Hawks", "sport": "Basketball", "coach": "J. Stone", "location": "Lisbon", "founded_year": 1998}, [
        {"first_name": "Dana", "last_name": "Cole", "age": 27, "position": "Guard", "rating": 9.1, "jersey_number": 7},
    ]),
]

DEMO_FREE_AGENTS = [
    {"first_name": "Rui", "last_name": "Costa", "age": 33, "position": "Midfielder", "rating": 6.8},
]


def seed(db_path: str) -> int:
    init_db(db_path)
    team_repository = TeamRepository(db_path)
    teams = TeamService(team_repository)
    players = PlayerService(PlayerRepository(db_path), team_repository)

    existing_teams = {team.name for team in teams.list_all()}
    existing_players = {(player.first_name, player.last_name) for player in players.list_all()}

    created = 0
    for team_data, roster in DEMO_TEAMS:
        if team_data["name"] in existing_teams:
            print(f"[=] Team already present: {team_data['name']}")
            continue
        team = teams.create(TeamCreate(**team_data))
        print(f"[+] Team {team.id}: {team.name}")
        created += 1
        for player_data in roster:
            player = players.create(PlayerCreate(team_id=team.id, **player_data))
            print(f"    [+] Player {player.id}: {player.full_name}")
            created += 1

    for player_data in DEMO_FREE_AGENTS:
        if (player_data["first_name"], player_data["last_name"]) in existing_players:
            print(f"[=] Free agent already present: {player_data['first_name']} {player_data['last_name']}")
            continue
        player = players.create(PlayerCreate(**player_data))
        print(f"[+] Free agent {player.id}: {player.full_name}")
        created += 1
    return created


def main():
    ap = argparse.ArgumentParser(description="Seed the Sports Roster database with demo data.")
    ap.add_argument("--db", default=None, help="Path to SQLite DB file (defaults to DATABASE_URL)")
    args = ap.parse_args()

    try:
        created = seed(args.db)
    except ValidationError as exc:
        print(f"[!] {exc}", file=sys.stderr)
        sys.exit(1)
    except StorageError as exc:
        print(f"[!] Database error: {exc}", file=sys.stderr)
        sys.exit(2)
    print(f"[+] Done, {created} records created")


if __name__ == "__main__":
    main()
