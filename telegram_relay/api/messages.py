from fastapi import APIRouter, Depends

from telegram_relay.actions import send_telegram_message
from telegram_relay.api.deps import get_dispatcher
from telegram_relay.schemas.message import SendMessageIn, SendMessageOut
from telegram_relay.telegram.dispatcher import MessageDispatcher
from telegram_relay.telegram.types import DispatchRequest

router = APIRouter(prefix="/api/telegram", tags=["telegram"])


@router.post("/send", response_model=SendMessageOut, response_model_by_alias=True)
async def send_message(
    req: SendMessageIn,
    dispatcher: MessageDispatcher = Depends(get_dispatcher),
):
    """Send one text message. Delivery failures are reported in the body, not the status."""
    result = await send_telegram_message(
        DispatchRequest(chat_id=req.chat_id, message_text=req.message_text),
        dispatcher,
    )
    return result.to_dict()
