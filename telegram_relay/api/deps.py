from telegram_relay.config import settings
from telegram_relay.telegram.client import telegram_client
from telegram_relay.telegram.dispatcher import MessageDispatcher


async def get_dispatcher() -> MessageDispatcher:
    """Dispatcher bound to the process settings and the shared client."""
    return MessageDispatcher.from_settings(settings, telegram_client)
