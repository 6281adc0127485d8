"""
Tests for the HTTP surface.
"""

import pytest
from fastapi.testclient import TestClient

from conftest import FakeTelegram
from telegram_relay.api.deps import get_dispatcher
from telegram_relay.main import app


@pytest.fixture
def client_for(make_dispatcher):
    def _client(fake: FakeTelegram, **kwargs) -> TestClient:
        dispatcher = make_dispatcher(fake, **kwargs)
        app.dependency_overrides[get_dispatcher] = lambda: dispatcher
        return TestClient(app)

    yield _client
    app.dependency_overrides.clear()


def test_health():
    response = TestClient(app).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_send_delivered(client_for):
    fake = FakeTelegram(body={"ok": True, "result": {"message_id": 7}})

    response = client_for(fake).post(
        "/api/telegram/send", json={"chatId": "@channelname", "messageText": "hello"}
    )

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Message sent to Telegram successfully.",
        "providerResponse": {"ok": True, "result": {"message_id": 7}},
        "outcome": "delivered",
    }
    assert fake.calls == 1


def test_send_rejected_is_still_200(client_for):
    body = {"ok": False, "error_code": 400, "description": "Bad Request: chat not found"}
    fake = FakeTelegram(status_code=400, body=body)

    response = client_for(fake).post(
        "/api/telegram/send", json={"chatId": "-100", "messageText": "hello"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert data["outcome"] == "provider_rejection"
    assert data["providerResponse"] == body


def test_missing_token(client_for):
    fake = FakeTelegram()

    response = client_for(fake, token="").post(
        "/api/telegram/send", json={"chatId": "1", "messageText": "hello"}
    )

    data = response.json()
    assert data["outcome"] == "configuration_error"
    assert data["providerResponse"] is None
    assert fake.calls == 0


def test_empty_chat_id_is_rejected(client_for):
    fake = FakeTelegram()

    response = client_for(fake).post("/api/telegram/send", json={"chatId": "", "messageText": "hi"})

    assert response.status_code == 422
    assert fake.calls == 0


def test_request_id_header(client_for):
    response = client_for(FakeTelegram()).post(
        "/api/telegram/send",
        json={"chatId": "1", "messageText": "hi"},
        headers={"X-Request-ID": "abc123"},
    )

    assert response.headers["X-Request-ID"] == "abc123"
