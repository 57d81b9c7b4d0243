"""Tests for client access functions and the /api/clients routes."""

import pytest
from sqlalchemy.exc import MultipleResultsFound

from sitetrack.crud import clients
from sitetrack.crud.base import RecordNotFound
from sitetrack.schemas.client import ClientCreate, ClientUpdate


class TestClientAccessFunctions:

    def test_get_returns_created_fields(self, db):
        client_id = clients.create_client(db, ClientCreate(name="Acme", email="acme@example.com"))

        client = clients.get_client(db, client_id)
        assert client.name == "Acme"
        assert client.email == "acme@example.com"

    def test_get_missing_returns_none(self, db, make_id):
        assert clients.get_client(db, make_id()) is None

    def test_empty_update_is_noop(self, db):
        client_id = clients.create_client(db, ClientCreate(name="Acme", email="acme@example.com"))

        assert clients.update_client(db, client_id, ClientUpdate()) == client_id
        client = clients.get_client(db, client_id)
        assert (client.name, client.email) == ("Acme", "acme@example.com")

    def test_empty_update_of_missing_id_returns_id(self, db, make_id):
        missing = make_id()
        assert clients.update_client(db, missing, ClientUpdate()) == missing

    def test_partial_update_leaves_other_fields(self, db):
        client_id = clients.create_client(db, ClientCreate(name="Acme", email="acme@example.com"))

        clients.update_client(db, client_id, ClientUpdate(email="office@acme.com"))
        client = clients.get_client(db, client_id)
        assert client.name == "Acme"
        assert client.email == "office@acme.com"

    def test_update_missing_id_raises(self, db, make_id):
        with pytest.raises(RecordNotFound):
            clients.update_client(db, make_id(), ClientUpdate(name="Ghost"))

    def test_remove(self, db):
        client_id = clients.create_client(db, ClientCreate(name="Acme", email="acme@example.com"))

        clients.remove_client(db, client_id)
        assert clients.get_client(db, client_id) is None

    def test_remove_missing_id_raises(self, db, make_id):
        with pytest.raises(RecordNotFound):
            clients.remove_client(db, make_id())

    def test_get_by_email(self, db):
        clients.create_client(db, ClientCreate(name="Acme", email="acme@example.com"))
        clients.create_client(db, ClientCreate(name="Other", email="other@example.com"))

        assert clients.get_client_by_email(db, "acme@example.com").name == "Acme"
        assert clients.get_client_by_email(db, "nobody@example.com") is None

    def test_get_by_email_with_shared_email_raises(self, db):
        clients.create_client(db, ClientCreate(name="Acme", email="shared@example.com"))
        clients.create_client(db, ClientCreate(name="Acme West", email="shared@example.com"))

        with pytest.raises(MultipleResultsFound):
            clients.get_client_by_email(db, "shared@example.com")


class TestClientRoutes:

    def test_requires_identity(self, client):
        response = client.get("/api/clients")
        assert response.status_code == 401

    def test_invalid_token_rejected(self, client):
        response = client.get("/api/clients", headers={"Authorization": "Bearer not-a-token"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Could not validate credentials"

    def test_crud_cycle(self, client, auth_headers):
        response = client.post("/api/clients", json={"name": "Acme", "email": "acme@example.com"}, headers=auth_headers)
        assert response.status_code == 201
        client_id = response.json()["id"]

        response = client.get(f"/api/clients/{client_id}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == {"id": client_id, "name": "Acme", "email": "acme@example.com"}

        response = client.patch(f"/api/clients/{client_id}", json={"name": "Acme Corp"}, headers=auth_headers)
        assert response.json() == {"id": client_id}

        listing = client.get("/api/clients", headers=auth_headers).json()
        assert [c["name"] for c in listing] == ["Acme Corp"]

        response = client.delete(f"/api/clients/{client_id}", headers=auth_headers)
        assert response.status_code == 200
        assert client.get(f"/api/clients/{client_id}", headers=auth_headers).json() is None

    def test_missing_client_is_null_not_error(self, client, auth_headers, make_id):
        response = client.get(f"/api/clients/{make_id()}", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() is None

    def test_create_rejects_missing_field(self, client, auth_headers):
        response = client.post("/api/clients", json={"name": "Acme"}, headers=auth_headers)
        assert response.status_code == 422

    def test_remove_missing_client_is_404(self, client, auth_headers, make_id):
        response = client.delete(f"/api/clients/{make_id()}", headers=auth_headers)
        assert response.status_code == 404

    def test_update_missing_client_is_404(self, client, auth_headers, make_id):
        response = client.patch(f"/api/clients/{make_id()}", json={"name": "Ghost"}, headers=auth_headers)
        assert response.status_code == 404

    def test_by_email_conflict(self, client, auth_headers):
        for name in ("Acme", "Acme West"):
            client.post("/api/clients", json={"name": name, "email": "shared@example.com"}, headers=auth_headers)

        response = client.get("/api/clients/by-email", params={"email": "shared@example.com"}, headers=auth_headers)
        assert response.status_code == 409

    def test_cookie_token_accepted(self, client, auth_headers):
        client.cookies.set("access_token", auth_headers["Authorization"].split(" ", 1)[1])
        response = client.get("/api/clients")
        assert response.status_code == 200
        assert response.json() == []
