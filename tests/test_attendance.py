"""Attendance marking is limited to the workshop's instructor and admins."""

import uuid

import pytest

from workshophub.core.roles import Role
from workshophub.registrations.crud import RegistrationCRUD


@pytest.fixture
def owned_registration(db, instructor, participant, make_workshop):
    workshop = make_workshop(instructor=instructor)
    return RegistrationCRUD.register(db, participant, workshop.id)


def _mark(client, headers, registration_id, attended=True):
    return client.post(
        "/api/attendance/mark",
        json={"registrationId": str(registration_id), "attended": attended},
        headers=headers,
    )


def test_owning_instructor_marks_attendance(client, instructor, auth_headers, owned_registration):
    resp = _mark(client, auth_headers(instructor), owned_registration.id)
    assert resp.status_code == 200
    body = resp.json()
    assert body["attended"] is True
    assert body["registration_id"] == str(owned_registration.id)
    assert body["marked_by"] == str(instructor.id)


def test_marking_again_overwrites(client, instructor, auth_headers, owned_registration):
    first = _mark(client, auth_headers(instructor), owned_registration.id, attended=True).json()
    second = _mark(client, auth_headers(instructor), owned_registration.id, attended=False).json()
    assert second["id"] == first["id"]
    assert second["attended"] is False


def test_other_instructor_is_forbidden(client, make_user, auth_headers, owned_registration):
    stranger = make_user(Role.INSTRUCTOR, name="Other Instructor")
    resp = _mark(client, auth_headers(stranger), owned_registration.id)
    assert resp.status_code == 403
    assert resp.json() == {
        "message": "Only the workshop's instructor or an admin can manage attendance"
    }


def test_admin_may_mark_any_workshop(client, admin, auth_headers, owned_registration):
    assert _mark(client, auth_headers(admin), owned_registration.id).status_code == 200


def test_participant_cannot_mark(client, participant, auth_headers, owned_registration):
    assert _mark(client, auth_headers(participant), owned_registration.id).status_code == 403


def test_unknown_registration_is_404(client, admin, auth_headers):
    assert _mark(client, auth_headers(admin), uuid.uuid4()).status_code == 404


class TestListByWorkshop:

    def test_lists_marked_registrations(self, client, instructor, auth_headers, owned_registration):
        _mark(client, auth_headers(instructor), owned_registration.id)
        resp = client.get(
            f"/api/attendance/workshop/{owned_registration.workshop_id}",
            headers=auth_headers(instructor),
        )
        assert resp.status_code == 200
        [record] = resp.json()
        assert record["attended"] is True
        assert record["registration"]["user"]["name"] == "Pat Participant"

    def test_other_instructor_cannot_list(self, client, make_user, auth_headers, owned_registration):
        stranger = make_user(Role.INSTRUCTOR, name="Other Instructor")
        resp = client.get(
            f"/api/attendance/workshop/{owned_registration.workshop_id}",
            headers=auth_headers(stranger),
        )
        assert resp.status_code == 403

    def test_unknown_workshop_is_404(self, client, admin, auth_headers):
        resp = client.get(f"/api/attendance/workshop/{uuid.uuid4()}", headers=auth_headers(admin))
        assert resp.status_code == 404

    def test_unassigned_workshop_is_admin_only(self, client, instructor, admin, auth_headers, make_workshop):
        workshop = make_workshop()
        url = f"/api/attendance/workshop/{workshop.id}"
        assert client.get(url, headers=auth_headers(instructor)).status_code == 403
        assert client.get(url, headers=auth_headers(admin)).json() == []


class TestDeletedWorkshop:

    @pytest.fixture
    def deleted_workshop_registration(self, client, admin, auth_headers, owned_registration):
        resp = client.delete(f"/api/workshops/{owned_registration.workshop_id}", headers=auth_headers(admin))
        assert resp.status_code == 200
        return owned_registration

    def test_mark_is_404(self, client, instructor, auth_headers, deleted_workshop_registration):
        resp = _mark(client, auth_headers(instructor), deleted_workshop_registration.id)
        assert resp.status_code == 404
        assert resp.json() == {"message": "Workshop not found"}

    def test_list_is_404(self, client, instructor, auth_headers, deleted_workshop_registration):
        resp = client.get(
            f"/api/attendance/workshop/{deleted_workshop_registration.workshop_id}",
            headers=auth_headers(instructor),
        )
        assert resp.status_code == 404
