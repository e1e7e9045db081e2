"""End-to-end tests over the HTTP app."""

import logging

import pytest
from fastapi.encoders import jsonable_encoder
from libs.auth.dependencies import create_access_token
from libs.auth.models import AuthUser
from services.gateway_service.app.fixtures import seed_fixtures
from tests.factories import ClassFactory, ClientFactory, TeacherFactory

API = "/api/v1"


def as_json(payload: dict) -> dict:
    return jsonable_encoder(payload)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_client_crud(client):
    created = await client.post(
        f"{API}/clients/", json=as_json(ClientFactory.build(name="Emma Wilson"))
    )
    assert created.status_code == 201
    body = created.json()
    assert body["version"] == 1

    fetched = await client.get(f"{API}/clients/{body['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["name"] == "Emma Wilson"

    patched = await client.patch(
        f"{API}/clients/{body['id']}", json={"notes": "Prefers mornings"}
    )
    assert patched.status_code == 200
    assert patched.json()["notes"] == "Prefers mornings"
    assert patched.json()["version"] == 2

    deleted = await client.delete(f"{API}/clients/{body['id']}")
    assert deleted.status_code == 204

    missing = await client.get(f"{API}/clients/{body['id']}")
    assert missing.status_code == 404
    assert missing.json()["code"] == "not_found"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_stale_if_match_is_conflict(client):
    created = await client.post(f"{API}/clients/", json=as_json(ClientFactory.build()))
    client_id = created.json()["id"]

    ok = await client.patch(
        f"{API}/clients/{client_id}", json={"notes": "a"}, headers={"If-Match": '"1"'}
    )
    assert ok.status_code == 200

    stale = await client.patch(
        f"{API}/clients/{client_id}", json={"notes": "b"}, headers={"If-Match": 'W/"1"'}
    )
    assert stale.status_code == 409
    assert stale.json()["code"] == "version_conflict"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_garbage_if_match_is_rejected(client):
    created = await client.post(f"{API}/clients/", json=as_json(ClientFactory.build()))

    response = await client.patch(
        f"{API}/clients/{created.json()['id']}",
        json={"notes": "a"},
        headers={"If-Match": "yesterday"},
    )

    assert response.status_code == 422
    assert response.json()["code"] == "invalid_input"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_domain_rule_failure_carries_code(client):
    response = await client.post(
        f"{API}/classes/", json=as_json(ClassFactory.build("no-such-teacher"))
    )
    assert response.status_code == 422
    assert response.json()["code"] == "unknown_teacher"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_teacher_with_classes_cannot_be_deleted(client):
    teacher = (
        await client.post(f"{API}/teachers/", json=as_json(TeacherFactory.build()))
    ).json()
    await client.post(f"{API}/classes/", json=as_json(ClassFactory.build(teacher["id"])))

    response = await client.delete(f"{API}/teachers/{teacher['id']}")

    assert response.status_code == 422
    assert response.json()["code"] == "teacher_has_classes"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_request_id_is_echoed(client):
    response = await client.get(f"{API}/clients/", headers={"X-Request-ID": "req-42"})
    assert response.headers["X-Request-ID"] == "req-42"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_completion_log_names_caller_and_resource(client, caplog):
    caplog.set_level(logging.INFO, logger="libs.common.middleware")

    await client.post(f"{API}/clients/", json=as_json(ClientFactory.build()))

    [line] = [r for r in caplog.records if r.getMessage() == "Request completed"]
    assert line.extra_fields["caller"] == "owner-1"
    assert line.extra_fields["resource"] == "clients"
    assert line.extra_fields["mutation"] is True
    assert line.extra_fields["status_code"] == 201


@pytest.mark.asyncio
@pytest.mark.integration
async def test_teacher_palette(client):
    response = await client.get(f"{API}/teachers/palette")
    assert response.status_code == 200
    assert "#10B981" in response.json()["colors"]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_seeded_listings(client, db):
    await seed_fixtures(db)

    payments = (await client.get(f"{API}/payments/")).json()
    assert len(payments) == 3
    assert {p["type"] for p in payments} == {"membership"}

    monday = (await client.get(f"{API}/classes/", params={"day": "Monday"})).json()
    assert [c["name"] for c in monday] == ["Morning Vinyasa"]

    overview = (await client.get(f"{API}/dashboard/overview")).json()
    assert overview["total_clients"] == 3
    assert overview["active_teachers"] == 3
    assert overview["total_revenue"] == 2050.0

    summary = (
        await client.get(f"{API}/attendance/summary", params={"date": "2024-01-22"})
    ).json()
    assert summary["total"] == 3
    assert summary["by_status"]["present"] == 3

    profile = (await client.get(f"{API}/studio-profile")).json()
    assert profile["name"] == "Zen Yoga Studio"


@pytest.mark.asyncio
@pytest.mark.integration
async def test_employee_permissions_gate_mutations(client, db, current_user):
    await seed_fixtures(db)
    # Jamie may manage clients and teachers, nothing else.
    current_user(AuthUser(user_id="jamie-1", email="jamie@zenyoga.com"))
    teacher_id = (await db.teachers.list())[0].id

    listed = await client.get(f"{API}/classes/")
    assert listed.status_code == 200

    denied = await client.post(
        f"{API}/classes/", json=as_json(ClassFactory.build(teacher_id))
    )
    assert denied.status_code == 403
    assert denied.json()["code"] == "permission_denied"

    allowed = await client.post(f"{API}/clients/", json=as_json(ClientFactory.build()))
    assert allowed.status_code == 201


@pytest.mark.asyncio
@pytest.mark.integration
async def test_unknown_user_is_read_only(client, current_user):
    current_user(AuthUser(user_id="stranger", email="stranger@mail.com"))

    assert (await client.get(f"{API}/clients/")).status_code == 200
    response = await client.post(f"{API}/clients/", json=as_json(ClientFactory.build()))
    assert response.status_code == 403


@pytest.mark.asyncio
@pytest.mark.integration
async def test_missing_token_is_rejected(anonymous_client):
    response = await anonymous_client.get(f"{API}/clients/")
    assert response.status_code in (401, 403)


@pytest.mark.asyncio
@pytest.mark.integration
async def test_invalid_token_is_rejected(anonymous_client):
    response = await anonymous_client.get(
        f"{API}/clients/", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 401


@pytest.mark.asyncio
@pytest.mark.integration
async def test_signed_owner_token_is_accepted(anonymous_client):
    token = create_access_token("owner-2", email="owner@zenyoga.com", role="owner")

    response = await anonymous_client.post(
        f"{API}/clients/",
        json=as_json(ClientFactory.build()),
        headers={"Authorization": f"Bearer {token}"},
    )

    assert response.status_code == 201
