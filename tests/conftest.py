import pytest
from fastapi.testclient import TestClient

from roster_api.app.core.db import init_db
from roster_api.app.main import create_app
from roster_api.app.repositories import PlayerRepository, TeamRepository
from roster_api.app.services import PlayerService, TeamService

from tests.fakes import InMemoryPlayerRepository, InMemoryTeamRepository


@pytest.fixture
def db_path(tmp_path) -> str:
    path = str(tmp_path / "roster.db")
    init_db(path)
    return path


@pytest.fixture
def team_repository(db_path) -> TeamRepository:
    return TeamRepository(db_path)


@pytest.fixture
def player_repository(db_path) -> PlayerRepository:
    return PlayerRepository(db_path)


@pytest.fixture
def team_service(team_repository) -> TeamService:
    return TeamService(team_repository)


@pytest.fixture
def player_service(player_repository, team_repository) -> PlayerService:
    return PlayerService(player_repository, team_repository)


@pytest.fixture
def fake_teams() -> InMemoryTeamRepository:
    return InMemoryTeamRepository()


@pytest.fixture
def fake_players() -> InMemoryPlayerRepository:
    return InMemoryPlayerRepository()


@pytest.fixture
def client(tmp_path):
    app = create_app(str(tmp_path / "api.db"))
    with TestClient(app) as test_client:
        yield test_client
