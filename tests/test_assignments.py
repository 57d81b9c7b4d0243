"""Tests for project assignments: the assign upsert and the two resolvers."""

from sitetrack.crud import assignments, projects, users
from sitetrack.schemas.assignment import AssignmentCreate, AssignmentUpdate
from sitetrack.schemas.project import ProjectCreate


def _project(db, make_id, name="Office"):
    return projects.create_project(db, ProjectCreate(client_id=make_id(), name=name, address="1 Main"))


class TestAssign:

    def test_assign_twice_keeps_one_row(self, db, make_id):
        project_id, user_id = make_id(), make_id()

        first = assignments.assign(db, project_id, user_id, "operator")
        second = assignments.assign(db, project_id, user_id, "operator")

        assert first == second
        assert len(assignments.list_assignments(db, project_id=project_id, user_id=user_id)) == 1

    def test_assign_with_new_role_updates_row(self, db, make_id):
        project_id, user_id = make_id(), make_id()

        first = assignments.assign(db, project_id, user_id, "operator")
        second = assignments.assign(db, project_id, user_id, "client")

        assert first == second
        rows = assignments.list_assignments(db, project_id=project_id)
        assert [(r.id, r.role) for r in rows] == [(first, "client")]

    def test_assign_recovers_from_concurrent_insert(self, db, make_id, monkeypatch):
        project_id, user_id = make_id(), make_id()
        existing_id = assignments.assign(db, project_id, user_id, "client")

        lookup = assignments.get_assignment_for_pair
        calls = []

        def stale_first_lookup(*args):
            # The first check misses the row another request just inserted
            calls.append(args)
            return None if len(calls) == 1 else lookup(*args)

        monkeypatch.setattr(assignments, "get_assignment_for_pair", stale_first_lookup)

        assert assignments.assign(db, project_id, user_id, "operator") == existing_id
        rows = assignments.list_assignments(db, project_id=project_id, user_id=user_id)
        assert [(r.id, r.role) for r in rows] == [(existing_id, "operator")]

    def test_create_goes_through_assign(self, db, make_id):
        data = AssignmentCreate(project_id=make_id(), user_id=make_id(), role="client")

        assignment_id = assignments.create_assignment(db, data)
        assert assignments.create_assignment(db, data) == assignment_id

        assignment = assignments.get_assignment(db, assignment_id)
        assert (assignment.project_id, assignment.user_id, assignment.role) == (data.project_id, data.user_id, "client")

    def test_update_and_noop(self, db, make_id):
        assignment_id = assignments.assign(db, make_id(), make_id(), "client")

        assert assignments.update_assignment(db, assignment_id, AssignmentUpdate()) == assignment_id
        assert assignments.get_assignment(db, assignment_id).role == "client"

        assignments.update_assignment(db, assignment_id, AssignmentUpdate(role="operator"))
        assert assignments.get_assignment(db, assignment_id).role == "operator"

    def test_remove_by_id_and_pair(self, db, make_id):
        project_id, user_id = make_id(), make_id()
        assignment_id = assignments.assign(db, project_id, user_id, "client")
        assignments.remove_assignment(db, assignment_id)
        assert assignments.get_assignment(db, assignment_id) is None

        assignments.assign(db, project_id, user_id, "client")
        assignments.remove_assignment_for_pair(db, project_id, user_id)
        assert assignments.get_assignment_for_pair(db, project_id, user_id) is None

        # nothing left to remove
        assignments.remove_assignment_for_pair(db, project_id, user_id)


class TestResolvers:

    def test_user_projects_carry_role_and_skip_dangling(self, db, make_id):
        user_id = users.upsert_from_identity(db, "user_2abc", "Dana Builder")
        office = _project(db, make_id, "Office")
        kitchen = _project(db, make_id, "Kitchen")
        assignments.assign(db, office, user_id, "operator")
        assignments.assign(db, kitchen, user_id, "client")
        assignments.assign(db, make_id(), user_id, "client")

        rows = {p.name: p.role for p in assignments.get_user_projects(db, user_id)}
        assert rows == {"Office": "operator", "Kitchen": "client"}

    def test_project_users_carry_role_and_skip_dangling(self, db, make_id):
        project_id = _project(db, make_id)
        dana = users.upsert_from_identity(db, "user_dana", "Dana Builder")
        assignments.assign(db, project_id, dana, "operator")
        assignments.assign(db, project_id, make_id(), "client")

        rows = assignments.get_project_users(db, project_id)
        assert [(u.name, u.role) for u in rows] == [("Dana Builder", "operator")]


class TestAssignmentRoutes:

    def test_put_assign_is_idempotent(self, client, auth_headers, make_id):
        body = {"project_id": make_id(), "user_id": make_id(), "role": "operator"}

        first = client.put("/api/assignments", json=body, headers=auth_headers).json()["id"]
        second = client.put("/api/assignments", json={**body, "role": "client"}, headers=auth_headers).json()["id"]
        assert first == second

        rows = client.get("/api/assignments", params={"user_id": body["user_id"]}, headers=auth_headers).json()
        assert [(r["id"], r["role"]) for r in rows] == [(first, "client")]

    def test_delete_pair(self, client, auth_headers, make_id):
        body = {"project_id": make_id(), "user_id": make_id(), "role": "operator"}
        assignment_id = client.put("/api/assignments", json=body, headers=auth_headers).json()["id"]

        response = client.delete(
            "/api/assignments", params={"project_id": body["project_id"], "user_id": body["user_id"]}, headers=auth_headers
        )
        assert response.status_code == 200
        assert client.get(f"/api/assignments/{assignment_id}", headers=auth_headers).json() is None

    def test_invalid_role(self, client, auth_headers, make_id):
        body = {"project_id": make_id(), "user_id": make_id(), "role": "admin"}
        assert client.put("/api/assignments", json=body, headers=auth_headers).status_code == 422
