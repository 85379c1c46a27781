"""End-to-end: create, hijack attempt, delete, gone."""
from tests.conftest import auth, create_test_user


class TestGroupLifecycle:

    def test_book_club_lifecycle(self, client):
        ann = create_test_user(client, email="ann@example.com")
        bob = create_test_user(client, email="bob@example.com")

        resp = client.post("/groups", json={"group": {"name": "Book Club", "description": "Readers"}},
                           headers=auth(ann))
        assert resp.status_code == 201
        group = resp.json()["group"]
        assert group["owner"] == ann["id"]

        resp = client.patch(f"/groups/{group['id']}", json={"group": {"name": "Hijack"}}, headers=auth(bob))
        assert resp.status_code == 401

        resp = client.get(f"/groups/{group['id']}", headers=auth(bob))
        assert resp.status_code == 200
        assert resp.json()["group"]["name"] == "Book Club"

        resp = client.delete(f"/groups/{group['id']}", headers=auth(ann))
        assert resp.status_code == 204

        resp = client.get(f"/groups/{group['id']}", headers=auth(ann))
        assert resp.status_code == 404

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}
