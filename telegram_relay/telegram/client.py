"""
Telegram Bot API client — singleton, owns the pooled httpx client.

Handles:
- httpx.AsyncClient lifecycle (initialize / shutdown)
- sendMessage: one POST per call, no retries

The client only moves bytes; interpreting Telegram's response is the
dispatcher's job.
"""

import httpx
import structlog

from telegram_relay.config import settings

logger = structlog.get_logger()

TOKEN_PLACEHOLDER = "<TOKEN_HIDDEN>"


class TelegramClient:
    def __init__(
        self,
        api_base: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_base = (api_base or settings.TELEGRAM_API_BASE).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.TELEGRAM_TIMEOUT_SECONDS
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    async def initialize(self):
        """Create the httpx client."""
        if self._http is None:
            self._http = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        logger.info("telegram.client.initialized", api_base=self.api_base)

    async def shutdown(self):
        """Close the httpx client."""
        if self._http:
            await self._http.aclose()
            self._http = None
        logger.info("telegram.client.shutdown")

    def method_url(self, token: str, method: str) -> str:
        return f"{self.api_base}/bot{token}/{method}"

    def redacted_url(self, method: str) -> str:
        """URL safe to log: the token is replaced by a placeholder."""
        return self.method_url(TOKEN_PLACEHOLDER, method)

    async def send_message(self, token: str, chat_id: str, text: str) -> httpx.Response:
        """POST sendMessage with exactly {chat_id, text}.

        Raises httpx.HTTPError on transport failure; any HTTP status is returned.
        """
        if self._http is None:
            await self.initialize()

        return await self._http.post(
            self.method_url(token, "sendMessage"),
            json={"chat_id": chat_id, "text": text},
            headers={"Content-Type": "application/json"},
        )


# Singleton instance
telegram_client = TelegramClient()
