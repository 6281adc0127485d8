"""Send one Telegram message using the environment settings.

Usage: python scripts/send_message.py <chat_id> <text>
"""

import argparse
import asyncio
import json
import sys

from telegram_relay.actions import send_telegram_message
from telegram_relay.config import settings
from telegram_relay.main import configure_logging
from telegram_relay.telegram.client import telegram_client
from telegram_relay.telegram.dispatcher import MessageDispatcher
from telegram_relay.telegram.types import DispatchRequest


async def send(chat_id: str, text: str) -> int:
    dispatcher = MessageDispatcher.from_settings(settings, telegram_client)
    try:
        result = await send_telegram_message(
            DispatchRequest(chat_id=chat_id, message_text=text), dispatcher
        )
    finally:
        await telegram_client.shutdown()

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0 if result.success else 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Send a text message via the Telegram Bot API.")
    parser.add_argument("chat_id", help="numeric chat id or @channelname")
    parser.add_argument("text", help="message text")
    args = parser.parse_args(argv)
    if not args.chat_id:
        parser.error("chat_id must not be empty")

    configure_logging()
    return asyncio.run(send(args.chat_id, args.text))


if __name__ == "__main__":
    sys.exit(main())
