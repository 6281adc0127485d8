"""
MessageDispatcher — send one text message through the Telegram Bot API.

Flow: check token → POST sendMessage → interpret response → DispatchResult.
dispatch() never raises; every path ends in a DispatchResult tagged with its
Outcome.
"""

import structlog

from telegram_relay.config import Settings
from telegram_relay.telegram.client import TelegramClient
from telegram_relay.telegram.guidance import classify_rejection
from telegram_relay.telegram.messages import DEFAULT_LOCALE, render
from telegram_relay.telegram.types import DispatchRequest, DispatchResult, Outcome

logger = structlog.get_logger()


def _token_prefix(token: str) -> str:
    """Bot id part of the token (before ':'), safe to log."""
    bot_id, sep, _ = token.partition(":")
    return f"{bot_id}:..." if sep else "<malformed>"


class MessageDispatcher:
    def __init__(
        self,
        bot_token: str | None,
        client: TelegramClient,
        locale: str = DEFAULT_LOCALE,
        app_env: str = "development",
    ):
        self.bot_token = bot_token
        self.client = client
        self.locale = locale
        self.app_env = app_env

    @classmethod
    def from_settings(cls, settings: Settings, client: TelegramClient) -> "MessageDispatcher":
        return cls(
            bot_token=settings.TELEGRAM_BOT_TOKEN,
            client=client,
            locale=settings.MESSAGE_LOCALE,
            app_env=settings.APP_ENV,
        )

    def _t(self, key: str, **params) -> str:
        return render(self.locale, key, **params)

    async def dispatch(self, request: DispatchRequest) -> DispatchResult:
        logger.info(
            "telegram.dispatch.start",
            chat_id=request.chat_id,
            preview=request.message_text[:50],
        )

        if not self.bot_token:
            return self._missing_token()
        logger.info("telegram.dispatch.token_found", token=_token_prefix(self.bot_token))

        logger.info("telegram.dispatch.sending", url=self.client.redacted_url("sendMessage"))
        try:
            response = await self.client.send_message(
                self.bot_token, request.chat_id, request.message_text
            )
            data = response.json()
        except Exception as e:
            return self._network_error(e)

        logger.info("telegram.dispatch.response", status=response.status_code, body=data)

        if response.is_success and isinstance(data, dict) and data.get("ok") is True:
            return DispatchResult(
                outcome=Outcome.DELIVERED,
                message=self._t("delivered"),
                provider_response=data,
            )
        return self._rejection(response.status_code, data)

    def _missing_token(self) -> DispatchResult:
        where = "config.where.local" if self.app_env == "development" else "config.where.deployed"
        message = self._t("config.missing_token", where=self._t(where))
        logger.error("telegram.dispatch.missing_token", app_env=self.app_env)
        return DispatchResult(outcome=Outcome.CONFIGURATION_ERROR, message=message)

    def _network_error(self, exc: Exception) -> DispatchResult:
        logger.exception("telegram.dispatch.network_error", error=str(exc))
        error_text = str(exc) or self._t("network.unknown")
        return DispatchResult(
            outcome=Outcome.NETWORK_ERROR,
            message=self._t("network.error", error=error_text),
            provider_response={"error": str(exc), "type": type(exc).__name__},
        )

    def _rejection(self, status_code: int, data) -> DispatchResult:
        logger.error("telegram.dispatch.rejected", status=status_code, body=data)
        body = data if isinstance(data, dict) else {}

        description = body.get("description")
        if not isinstance(description, str) or not description:
            description = f"HTTP status {status_code}"
        error_code = body.get("error_code")
        code = self._t("provider.code", code=error_code) if error_code else ""
        message = self._t("provider.error", description=description, code=code)

        guidance = classify_rejection(error_code, description)
        if guidance is not None:
            message += self._t(guidance.value)

        return DispatchResult(
            outcome=Outcome.PROVIDER_REJECTION,
            message=message,
            provider_response=data,
        )
