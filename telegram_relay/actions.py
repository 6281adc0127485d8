"""
Server action: the entry point callers use to send a Telegram message.

Wraps MessageDispatcher.dispatch so that even an unexpected fault inside the
dispatcher comes back as a DispatchResult with the same shape.
"""

import structlog

from telegram_relay.telegram.dispatcher import MessageDispatcher
from telegram_relay.telegram.messages import render
from telegram_relay.telegram.types import DispatchRequest, DispatchResult, Outcome

logger = structlog.get_logger()


async def send_telegram_message(
    request: DispatchRequest, dispatcher: MessageDispatcher
) -> DispatchResult:
    logger.info(
        "action.send_telegram_message.invoked",
        chat_id=request.chat_id,
        preview=request.message_text[:50],
    )
    try:
        result = await dispatcher.dispatch(request)
    except Exception as e:
        logger.exception("action.send_telegram_message.crashed", chat_id=request.chat_id)
        locale = getattr(dispatcher, "locale", None) or "en"
        return DispatchResult(
            outcome=Outcome.INTERNAL_ERROR,
            message=render(locale, "internal.error", error=str(e) or type(e).__name__),
            provider_response={"error": str(e), "type": type(e).__name__},
        )

    logger.info(
        "action.send_telegram_message.done",
        outcome=result.outcome.value,
        success=result.success,
    )
    return result
