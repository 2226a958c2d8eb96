"""Registration ledger: capacity, uniqueness, cancellation and visibility."""

import uuid

import pytest

from workshophub.core.exceptions import AlreadyRegistered, WorkshopFull
from workshophub.core.roles import Role
from workshophub.registrations.crud import RegistrationCRUD
from workshophub.registrations.models import Registration, RegistrationStatus


def _register(client, headers, workshop_id):
    return client.post("/api/registrations", json={"workshopId": str(workshop_id)}, headers=headers)


def test_seat_released_by_cancellation(client, make_user, make_workshop, auth_headers):
    p1 = make_user(Role.PARTICIPANT, name="P One")
    p2 = make_user(Role.PARTICIPANT, name="P Two")
    workshop = make_workshop(seats=1)

    first = _register(client, auth_headers(p1), workshop.id)
    assert first.status_code == 201
    assert first.json()["status"] == "registered"
    assert client.get(f"/api/workshops/{workshop.id}").json()["registrations"] == 1

    full = _register(client, auth_headers(p2), workshop.id)
    assert full.status_code == 409
    assert full.json() == {"message": "Workshop is full"}

    cancelled = client.put(
        f"/api/registrations/{first.json()['id']}/unregister", headers=auth_headers(p1)
    )
    assert cancelled.status_code == 200
    assert cancelled.json()["status"] == "cancelled"
    assert client.get(f"/api/workshops/{workshop.id}").json()["registrations"] == 0

    assert _register(client, auth_headers(p2), workshop.id).status_code == 201


def test_second_active_registration_is_rejected(client, participant, make_workshop, auth_headers):
    workshop = make_workshop(seats=5)
    assert _register(client, auth_headers(participant), workshop.id).status_code == 201

    again = _register(client, auth_headers(participant), workshop.id)
    assert again.status_code == 409
    assert again.json() == {"message": "You are already registered for this workshop"}


def test_can_register_again_after_cancelling(client, participant, make_workshop, auth_headers, db):
    workshop = make_workshop(seats=5)
    first = _register(client, auth_headers(participant), workshop.id).json()
    client.put(f"/api/registrations/{first['id']}/unregister", headers=auth_headers(participant))

    assert _register(client, auth_headers(participant), workshop.id).status_code == 201
    statuses = sorted(r.status.value for r in db.query(Registration).all())
    assert statuses == ["cancelled", "registered"]


def test_zero_seat_workshop_is_always_full(client, participant, make_workshop, auth_headers):
    workshop = make_workshop(seats=0)
    assert _register(client, auth_headers(participant), workshop.id).status_code == 409


def test_register_for_unknown_workshop_is_404(client, participant, auth_headers):
    assert _register(client, auth_headers(participant), uuid.uuid4()).status_code == 404


@pytest.mark.parametrize("role", [Role.ADMIN, Role.INSTRUCTOR])
def test_only_participants_register(client, make_user, make_workshop, auth_headers, role):
    workshop = make_workshop()
    assert _register(client, auth_headers(make_user(role)), workshop.id).status_code == 403


def test_register_without_token_is_401(client, make_workshop):
    workshop = make_workshop()
    resp = client.post("/api/registrations", json={"workshopId": str(workshop.id)})
    assert resp.status_code == 401


class TestCancel:

    def test_cannot_cancel_someone_elses(self, client, make_user, make_workshop, auth_headers):
        owner = make_user(Role.PARTICIPANT, name="Owner")
        intruder = make_user(Role.PARTICIPANT, name="Intruder")
        workshop = make_workshop()
        reg = _register(client, auth_headers(owner), workshop.id).json()

        resp = client.put(f"/api/registrations/{reg['id']}/unregister", headers=auth_headers(intruder))
        assert resp.status_code == 403

    def test_cancel_unknown_is_404(self, client, participant, auth_headers):
        resp = client.put(f"/api/registrations/{uuid.uuid4()}/unregister", headers=auth_headers(participant))
        assert resp.status_code == 404

    def test_cancelling_twice_is_a_no_op(self, client, participant, make_workshop, auth_headers):
        workshop = make_workshop()
        reg = _register(client, auth_headers(participant), workshop.id).json()
        url = f"/api/registrations/{reg['id']}/unregister"

        assert client.put(url, headers=auth_headers(participant)).status_code == 200
        second = client.put(url, headers=auth_headers(participant))
        assert second.status_code == 200
        assert second.json()["status"] == "cancelled"

    def test_cancelled_registration_is_kept_and_listed(self, client, participant, make_workshop, auth_headers):
        workshop = make_workshop()
        reg = _register(client, auth_headers(participant), workshop.id).json()
        client.put(f"/api/registrations/{reg['id']}/unregister", headers=auth_headers(participant))

        listed = client.get("/api/registrations", headers=auth_headers(participant)).json()
        assert [(r["id"], r["status"]) for r in listed] == [(reg["id"], "cancelled")]


class TestListing:

    @pytest.fixture
    def two_participants_registered(self, client, make_user, make_workshop, auth_headers):
        p1 = make_user(Role.PARTICIPANT, name="First")
        p2 = make_user(Role.PARTICIPANT, name="Second")
        w1 = make_workshop(title="W1")
        w2 = make_workshop(title="W2")
        _register(client, auth_headers(p1), w1.id)
        _register(client, auth_headers(p2), w2.id)
        return p1, p2, w1, w2

    def test_participant_sees_only_own(self, client, auth_headers, two_participants_registered):
        p1, _, w1, _ = two_participants_registered
        listed = client.get("/api/registrations", headers=auth_headers(p1)).json()
        assert len(listed) == 1
        assert listed[0]["user_id"] == str(p1.id)
        assert listed[0]["workshop"]["title"] == "W1"

    def test_participant_cannot_fetch_others_by_id(self, client, auth_headers, two_participants_registered, db):
        p1, p2, _, _ = two_participants_registered
        other = db.query(Registration).filter(Registration.user_id == p2.id).one()
        resp = client.get(f"/api/registrations/{other.id}", headers=auth_headers(p1))
        assert resp.status_code == 404

    @pytest.mark.parametrize("role", [Role.ADMIN, Role.INSTRUCTOR])
    def test_staff_see_all(self, client, make_user, auth_headers, two_participants_registered, role):
        listed = client.get("/api/registrations", headers=auth_headers(make_user(role))).json()
        assert len(listed) == 2
        assert {r["user"]["name"] for r in listed} == {"First", "Second"}

    def test_workshop_filter(self, client, admin, auth_headers, two_participants_registered):
        _, p2, _, w2 = two_participants_registered
        listed = client.get(
            "/api/registrations", params={"workshop": str(w2.id)}, headers=auth_headers(admin)
        ).json()
        assert [r["user_id"] for r in listed] == [str(p2.id)]


class TestLedgerDirectly:

    def test_capacity_never_exceeded(self, db, make_user, make_workshop):
        workshop = make_workshop(seats=2)
        participants = [make_user(Role.PARTICIPANT) for _ in range(4)]

        outcomes = []
        for p in participants:
            try:
                RegistrationCRUD.register(db, p, workshop.id)
                outcomes.append("ok")
            except WorkshopFull:
                outcomes.append("full")

        assert outcomes == ["ok", "ok", "full", "full"]
        active = (
            db.query(Registration)
            .filter(Registration.status == RegistrationStatus.REGISTERED)
            .count()
        )
        assert active == 2

    def test_duplicate_raises_already_registered(self, db, participant, make_workshop):
        workshop = make_workshop(seats=3)
        RegistrationCRUD.register(db, participant, workshop.id)
        with pytest.raises(AlreadyRegistered):
            RegistrationCRUD.register(db, participant, workshop.id)
