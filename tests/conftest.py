import httpx
import pytest

from telegram_relay.telegram.client import TelegramClient
from telegram_relay.telegram.dispatcher import MessageDispatcher

TOKEN = "123456:ABC-DEF1234ghIkl-zyx57W2v1u123ew11"


class FakeTelegram:
    """Stand-in for api.telegram.org that records every request it receives."""

    def __init__(self, status_code: int = 200, body=None, raw: bytes | None = None, exc=None):
        self.status_code = status_code
        self.body = body if body is not None else {"ok": True, "result": {"message_id": 1}}
        self.raw = raw
        self.exc = exc
        self.requests: list[httpx.Request] = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    def client(self) -> TelegramClient:
        return TelegramClient(
            api_base="https://api.telegram.test",
            timeout=5,
            transport=httpx.MockTransport(self.handler),
        )


@pytest.fixture
def fake_telegram():
    return FakeTelegram()


@pytest.fixture
def make_dispatcher():
    def _make(fake: FakeTelegram, token: str | None = TOKEN, locale: str = "en", app_env: str = "development"):
        return MessageDispatcher(bot_token=token, client=fake.client(), locale=locale, app_env=app_env)

    return _make
