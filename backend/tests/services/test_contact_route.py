"""Contact route — validation, persistence, and best-effort notification.

Invariants:
    - Valid submission -> 200 with generated id and createdAt
    - Each invalid field -> 400 naming that field
    - Notification scheduled only for stored messages; its failure never changes the response
"""

import pytest

VALID = {"name": "Jane", "email": "jane@example.com", "message": "Hello"}


async def test_valid_submission_returns_stored_message(client, storage):
    res = await client.post("/api/contact", json=VALID)

    assert res.status_code == 200
    body = res.json()
    assert body["id"] > 0
    assert body["createdAt"]
    assert {k: body[k] for k in VALID} == VALID

    inbox = await storage.list_messages()
    assert [m.id for m in inbox] == [body["id"]]


@pytest.mark.parametrize("overrides, field", [
    ({"name": ""}, "name"),
    ({"email": "not-an-email"}, "email"),
    ({"message": ""}, "message"),
])
async def test_invalid_field_returns_400_naming_it(client, storage, overrides, field):
    res = await client.post("/api/contact", json={**VALID, **overrides})

    assert res.status_code == 400
    body = res.json()
    assert body["field"] == field
    assert body["message"]
    assert [e["field"] for e in body["errors"]] == [field]
    assert await storage.list_messages() == []


async def test_all_invalid_fields_reported_together(client):
    res = await client.post(
        "/api/contact", json={"name": "", "email": "nope", "message": ""},
    )
    assert res.status_code == 400
    assert [e["field"] for e in res.json()["errors"]] == ["name", "email", "message"]


async def test_missing_fields_are_reported(client):
    res = await client.post("/api/contact", json={})
    assert res.status_code == 400
    assert {e["field"] for e in res.json()["errors"]} == {"name", "email", "message"}


async def test_non_json_body_is_400(client):
    res = await client.post(
        "/api/contact", content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["field"] == "body"


async def test_json_array_body_is_400(client):
    res = await client.post("/api/contact", json=[VALID])
    assert res.status_code == 400
    assert res.json()["field"] == "body"


async def test_extra_fields_are_ignored(client):
    res = await client.post(
        "/api/contact", json={**VALID, "id": 999, "createdAt": "1999-01-01"},
    )
    assert res.status_code == 200
    assert res.json()["id"] != 999


async def test_stored_message_triggers_notification(client, fake_notifier):
    res = await client.post("/api/contact", json=VALID)
    assert res.status_code == 200
    assert [m.id for m in fake_notifier.sent] == [res.json()["id"]]


async def test_rejected_message_sends_no_notification(client, fake_notifier):
    await client.post("/api/contact", json={**VALID, "email": "bad"})
    assert fake_notifier.sent == []


async def test_failed_notification_does_not_change_response(client, fake_notifier):
    fake_notifier.fail = True
    res = await client.post("/api/contact", json=VALID)
    assert res.status_code == 200
    assert len(fake_notifier.sent) == 1


async def test_disabled_notifier_is_not_called(client, fake_notifier):
    fake_notifier.enabled = False
    res = await client.post("/api/contact", json=VALID)
    assert res.status_code == 200
    assert fake_notifier.sent == []


async def test_long_message_is_accepted(client, storage):
    long_text = "x" * 20_000
    res = await client.post("/api/contact", json={**VALID, "message": long_text})
    assert res.status_code == 200
    assert res.json()["message"] == long_text
    assert (await storage.list_messages())[0].message == long_text


async def test_email_domain_is_normalized_local_part_kept(client):
    res = await client.post("/api/contact", json={**VALID, "email": "Jane@EXAMPLE.com"})
    assert res.status_code == 200
    assert res.json()["email"] == "Jane@example.com"
