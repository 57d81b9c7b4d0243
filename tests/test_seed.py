"""Tests for the demo data utilities."""

from sitetrack.crud import assignments, clients, projects, users, visits
from sitetrack.utils.seed import clear_test_data, seed_test_data


def test_seed_without_users_skips_assignments(db):
    result = seed_test_data(db, now_ms=1700000000000)

    assert result["created"] == {"clients": 2, "projects": 3, "visits": 3, "project_assignments": 0}
    assert len(clients.list_clients(db)) == 2
    acme = result["ids"]["clients"][0]
    assert len(projects.list_projects(db, client_id=acme)) == 2

    by_date = visits.list_visits_by_date(db)
    assert [v.exterior_type for v in by_date] == ["video", "splat", "video"]
    assert by_date[1].splat_url is not None


def test_seed_assigns_first_user(db):
    user_id = users.upsert_from_identity(db, "user_2abc", "Dana Builder")

    result = seed_test_data(db)

    assert result["created"]["project_assignments"] == 2
    roles = {p.role for p in assignments.get_user_projects(db, user_id)}
    assert roles == {"operator"}


def test_clear_removes_everything_but_users(db):
    users.upsert_from_identity(db, "user_2abc", "Dana Builder")
    seed_test_data(db)

    result = clear_test_data(db)

    assert result["deleted"] == {
        "photos": 0, "visits": 3, "project_assignments": 2, "projects": 3, "clients": 2,
    }
    assert clients.list_clients(db) == []
    assert visits.list_visits_by_date(db) == []
    assert users.get_user_by_external_id(db, "user_2abc") is not None
