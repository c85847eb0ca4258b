import json

import pytest

from integrase.domain.entities import Bot

from conftest import LIFECYCLE_ROUTES


@pytest.mark.parametrize("path,method", LIFECYCLE_ROUTES.items())
def test_valid_request_invokes_adapter_once(client, adapter, auth_headers, bot_payload, path, method):
    res = client.post(path, headers=auth_headers, json=bot_payload)

    assert res.status_code == 200
    assert res.text == "OK :)"
    assert len(adapter.calls) == 1
    name, bot = adapter.calls[0]
    assert name == method
    assert bot == Bot(**bot_payload)


@pytest.mark.parametrize("path", LIFECYCLE_ROUTES)
@pytest.mark.parametrize(
    "headers",
    [{}, {"Authorization": ""}, {"Authorization": "wrong"}, {"Authorization": "Bearer test-secret"}],
)
def test_bad_authorization_is_rejected(client, adapter, bot_payload, path, headers):
    res = client.post(path, headers=headers, json=bot_payload)

    assert res.status_code == 401
    assert res.text == "Unauthorized"
    assert adapter.calls == []


@pytest.mark.parametrize("path", LIFECYCLE_ROUTES)
@pytest.mark.parametrize("method", ["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"])
def test_non_post_is_method_not_allowed(client, adapter, auth_headers, path, method):
    res = client.request(method, path, headers=auth_headers)

    assert res.status_code == 405
    assert res.headers["content-type"].startswith("text/plain")
    if method != "HEAD":
        assert res.text == "Method not allowed"
    assert adapter.calls == []


def test_method_is_checked_before_authorization(client, adapter):
    res = client.get("/claim")

    assert res.status_code == 405


@pytest.mark.parametrize("path", LIFECYCLE_ROUTES)
@pytest.mark.parametrize("body", ["{not json", "", '{"bot_id": "1"', '{"tags": "Utility"}'])
def test_malformed_body_is_bad_request(client, adapter, auth_headers, path, body):
    res = client.post(path, headers=auth_headers, content=body)

    assert res.status_code == 400
    assert res.text.startswith("Serialization error occured: ")
    assert adapter.calls == []


@pytest.mark.parametrize("path", LIFECYCLE_ROUTES)
def test_adapter_error_is_bad_request_with_message(client, adapter, auth_headers, bot_payload, path):
    adapter.error = "Bot is already claimed"

    res = client.post(path, headers=auth_headers, json=bot_payload)

    assert res.status_code == 400
    assert "Bot is already claimed" in res.text
    assert len(adapter.calls) == 1


def test_partial_record_decodes_with_defaults(client, adapter, auth_headers):
    res = client.post(
        "/approve",
        headers=auth_headers,
        content=json.dumps({"bot_id": "42", "unknown_field": 1}),
    )

    assert res.status_code == 200
    _, bot = adapter.calls[0]
    assert bot.bot_id == "42"
    assert bot.tags == []
    assert bot.cross_add is None
    assert bot.website is None


def test_responses_are_plain_text(client, auth_headers, bot_payload):
    ok = client.post("/deny", headers=auth_headers, json=bot_payload)
    denied = client.post("/deny", json=bot_payload)

    assert ok.headers["content-type"].startswith("text/plain")
    assert denied.headers["content-type"].startswith("text/plain")


def test_null_body_is_bad_request(client, adapter, auth_headers):
    res = client.post("/claim", headers=auth_headers, content="null")

    assert res.status_code == 400
    assert res.text.startswith("Serialization error occured: ")
    assert adapter.calls == []
