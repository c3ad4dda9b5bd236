import pytest

from roster_api.app.core.exceptions import NotFoundError, StorageError, ValidationError
from roster_api.app.schemas import Team, TeamCreate
from roster_api.app.services import TeamService


def _create(service: TeamService, name: str, sport: str = "Football", location: str = "Porto",
            coach: str = "Coach", founded_year=None) -> Team:
    return service.create(
        TeamCreate(name=name, sport=sport, coach=coach, location=location, founded_year=founded_year)
    )


def test_create_assigns_id_and_get_by_id_round_trips(team_service):
    created = _create(team_service, "Nova FC", coach="A. Ray", founded_year=2010)

    assert created.id == 1
    fetched = team_service.get_by_id(created.id)
    assert fetched == created
    assert fetched.name == "Nova FC"
    assert fetched.founded_year == 2010
    assert fetched.created_at is not None


def test_create_refreshes_cache(team_service):
    assert team_service.list_all() == []
    _create(team_service, "Nova FC")
    assert [team.name for team in team_service.list_all()] == ["Nova FC"]


def test_cache_is_loaded_at_construction(team_repository):
    TeamService(team_repository).create(
        TeamCreate(name="Nova FC", sport="Football", coach="A. Ray", location="Porto")
    )
    assert [team.name for team in TeamService(team_repository).list_all()] == ["Nova FC"]


def test_invalid_draft_is_rejected_without_persisting(team_service):
    with pytest.raises(ValidationError) as excinfo:
        team_service.create(TeamCreate(name=" ", sport="Football", coach="", location="Porto"))

    assert excinfo.value.entity_name == "Team"
    assert excinfo.value.errors == ["Team name is required", "Coach name is required"]
    assert team_service.count() == 0
    assert team_service.list_all() == []


def test_list_all_is_ordered_by_name_and_is_a_copy(team_service):
    for name in ["Zebras", "Antelopes", "Marlins"]:
        _create(team_service, name)

    teams = team_service.list_all()
    assert [team.name for team in teams] == ["Antelopes", "Marlins", "Zebras"]
    teams.clear()
    assert len(team_service.list_all()) == 3


def test_get_by_id_missing_raises(team_service):
    with pytest.raises(NotFoundError) as excinfo:
        team_service.get_by_id(42)
    assert excinfo.value.identifier == 42
    assert str(excinfo.value) == "Team not found with identifier: 42"


def test_update_replaces_fields(team_service):
    team = _create(team_service, "Nova FC")
    updated = team_service.update(team.model_copy(update={"coach": "B. Silva", "location": "Braga"}))

    assert updated.coach == "B. Silva"
    assert team_service.get_by_id(team.id).location == "Braga"
    assert team_service.get_teams_by_location("braga") == [updated]


def test_update_requires_identifier(team_service):
    draft = Team(name="Nova FC", sport="Football", coach="A. Ray", location="Porto")
    with pytest.raises(ValidationError) as excinfo:
        team_service.update(draft)
    assert excinfo.value.errors == ["Team ID cannot be 0 for update"]


def test_update_revalidates(team_service):
    team = _create(team_service, "Nova FC")
    with pytest.raises(ValidationError):
        team_service.update(team.model_copy(update={"sport": ""}))
    assert team_service.get_by_id(team.id).sport == "Football"


def test_update_missing_identifier_leaves_cache_unchanged(team_service):
    _create(team_service, "Nova FC")
    before = team_service.list_all()

    ghost = Team(id=99, name="Ghost", sport="Football", coach="Nobody", location="Nowhere")
    with pytest.raises(NotFoundError):
        team_service.update(ghost)
    assert team_service.list_all() == before


def test_delete(team_service):
    team = _create(team_service, "Nova FC")
    team_service.delete(team.id)

    assert team_service.list_all() == []
    with pytest.raises(NotFoundError):
        team_service.delete(team.id)


def test_filter_with_always_true_matches_list_all(team_service):
    for name in ["B", "A", "C"]:
        _create(team_service, name)
    assert team_service.filter_by(lambda team: True) == team_service.list_all()


def test_sort_by_name_descending_reverses_ascending(team_service):
    for name in ["delta", "Alpha", "charlie", "Bravo"]:
        _create(team_service, name)

    ascending = team_service.sort_by("name", True)
    descending = team_service.sort_by("name", False)

    assert [team.name for team in ascending] == ["Alpha", "Bravo", "charlie", "delta"]
    assert descending == list(reversed(ascending))


def test_sort_by_founded_year_accepts_either_spelling(team_service):
    _create(team_service, "Old", founded_year=1900)
    _create(team_service, "Undated")
    _create(team_service, "New", founded_year=2020)

    expected = ["Old", "New", "Undated"]
    assert [t.name for t in team_service.sort_by("foundedYear")] == expected
    assert [t.name for t in team_service.sort_by("founded_year")] == expected


def test_unknown_sort_key_orders_by_id(team_service):
    for name in ["Zebras", "Antelopes"]:
        _create(team_service, name)
    assert [t.id for t in team_service.sort_by("colour")] == [1, 2]


def test_views_by_sport_and_location(team_service):
    _create(team_service, "Nova FC", sport="Football", location="Porto")
    _create(team_service, "Hawks", sport="Basketball", location="Lisbon")
    _create(team_service, "Dragons", sport="football", location="Porto East")

    assert [t.name for t in team_service.get_teams_by_sport("FOOTBALL")] == ["Dragons", "Nova FC"]
    assert [t.name for t in team_service.get_teams_by_location("porto")] == ["Dragons", "Nova FC"]
    assert [t.name for t in team_service.search_by_name("haw")] == ["Hawks"]


def test_statistics(team_service):
    _create(team_service, "Nova FC", sport="Football", location="Porto", founded_year=2010)
    _create(team_service, "Hawks", sport="Basketball", location="Porto", founded_year=1990)
    _create(team_service, "Rookies", sport="Football", location="Lisbon")

    stats = team_service.statistics()
    assert stats.total_teams == 3
    assert stats.teams_by_sport == {"Basketball": 1, "Football": 2}
    assert stats.teams_by_location == {"Porto": 2, "Lisbon": 1}
    assert stats.average_founded_year == 2000.0
    assert stats.oldest_team == "Hawks"


def test_failed_write_does_not_refresh_cache(fake_teams):
    service = TeamService(fake_teams)
    service.create(TeamCreate(name="Nova FC", sport="Football", coach="A. Ray", location="Porto"))
    loads = fake_teams.find_all_calls

    fake_teams.fail_writes = True
    with pytest.raises(StorageError):
        service.create(TeamCreate(name="Hawks", sport="Basketball", coach="J", location="Lisbon"))

    assert fake_teams.find_all_calls == loads
    assert [t.name for t in service.list_all()] == ["Nova FC"]
