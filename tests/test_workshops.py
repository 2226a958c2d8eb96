"""Workshop catalog: public reads, admin-only mutations."""

import uuid

import pytest

from workshophub.core.roles import Role
from workshophub.workshops.models import Workshop


@pytest.fixture
def workshop_payload(instructor):
    return {
        "title": "Bookbinding Basics",
        "description": "Sew your own notebook",
        "date": "2026-12-01",
        "time": "14:00",
        "venue": "Studio B",
        "seats": 12,
        "instructor": str(instructor.id),
    }


class TestPublicReads:

    def test_list_is_public(self, client, make_workshop):
        make_workshop(title="A")
        make_workshop(title="B")
        resp = client.get("/api/workshops")
        assert resp.status_code == 200
        assert {w["title"] for w in resp.json()} == {"A", "B"}

    def test_get_includes_registration_count(self, client, make_workshop, instructor):
        workshop = make_workshop(seats=3, instructor=instructor)
        resp = client.get(f"/api/workshops/{workshop.id}")
        assert resp.status_code == 200
        body = resp.json()
        assert body["workshop"]["title"] == workshop.title
        assert body["workshop"]["instructor"]["name"] == instructor.name
        assert body["registrations"] == 0
        assert body["seats_left"] == 3

    def test_unknown_workshop_is_404(self, client):
        resp = client.get(f"/api/workshops/{uuid.uuid4()}")
        assert resp.status_code == 404
        assert resp.json() == {"message": "Workshop not found"}

    def test_malformed_id_is_400(self, client):
        assert client.get("/api/workshops/not-a-uuid").status_code == 400


class TestMutations:

    def test_admin_creates_workshop(self, client, admin, auth_headers, workshop_payload, db):
        resp = client.post("/api/workshops", json=workshop_payload, headers=auth_headers(admin))
        assert resp.status_code == 201
        body = resp.json()
        assert body["seats"] == 12
        assert body["instructor"]["id"] == workshop_payload["instructor"]
        assert db.get(Workshop, uuid.UUID(body["id"])).created_by == str(admin.id)

    def test_create_requires_token(self, client, workshop_payload):
        resp = client.post("/api/workshops", json=workshop_payload)
        assert resp.status_code == 401

    @pytest.mark.parametrize("role_fixture", ["instructor", "participant"])
    def test_create_forbidden_for_non_admin(self, request, client, auth_headers, workshop_payload, role_fixture):
        user = request.getfixturevalue(role_fixture)
        resp = client.post("/api/workshops", json=workshop_payload, headers=auth_headers(user))
        assert resp.status_code == 403

    def test_instructor_must_have_instructor_role(self, client, admin, participant, auth_headers, workshop_payload):
        workshop_payload["instructor"] = str(participant.id)
        resp = client.post("/api/workshops", json=workshop_payload, headers=auth_headers(admin))
        assert resp.status_code == 400

    def test_negative_seats_rejected(self, client, admin, auth_headers, workshop_payload):
        workshop_payload["seats"] = -1
        resp = client.post("/api/workshops", json=workshop_payload, headers=auth_headers(admin))
        assert resp.status_code == 400

    def test_missing_title_rejected(self, client, admin, auth_headers, workshop_payload):
        del workshop_payload["title"]
        resp = client.post("/api/workshops", json=workshop_payload, headers=auth_headers(admin))
        assert resp.status_code == 400

    def test_update_changes_only_sent_fields(self, client, admin, auth_headers, make_workshop):
        workshop = make_workshop(seats=5)
        resp = client.put(
            f"/api/workshops/{workshop.id}",
            json={"venue": "Main Hall"},
            headers=auth_headers(admin),
        )
        assert resp.status_code == 200
        assert resp.json()["venue"] == "Main Hall"
        assert resp.json()["seats"] == 5
        assert resp.json()["title"] == workshop.title

    def test_update_rejects_clearing_title(self, client, admin, auth_headers, make_workshop):
        workshop = make_workshop()
        resp = client.put(f"/api/workshops/{workshop.id}", json={"title": None}, headers=auth_headers(admin))
        assert resp.status_code == 400

    def test_delete_hides_workshop(self, client, admin, auth_headers, make_workshop):
        workshop = make_workshop()
        resp = client.delete(f"/api/workshops/{workshop.id}", headers=auth_headers(admin))
        assert resp.status_code == 200
        assert client.get(f"/api/workshops/{workshop.id}").status_code == 404
        assert client.get("/api/workshops").json() == []

    def test_delete_unknown_is_404(self, client, admin, auth_headers):
        resp = client.delete(f"/api/workshops/{uuid.uuid4()}", headers=auth_headers(admin))
        assert resp.status_code == 404


class TestMyWorkshops:

    def test_instructor_sees_only_own(self, client, make_user, make_workshop, instructor, auth_headers):
        other = make_user(Role.INSTRUCTOR, name="Other Instructor")
        mine = make_workshop(instructor=instructor, title="Mine")
        make_workshop(instructor=other, title="Theirs")

        resp = client.get("/api/workshops/my", headers=auth_headers(instructor))
        assert resp.status_code == 200
        assert [w["id"] for w in resp.json()] == [str(mine.id)]

    def test_participant_cannot_use_my_view(self, client, participant, auth_headers):
        assert client.get("/api/workshops/my", headers=auth_headers(participant)).status_code == 403
