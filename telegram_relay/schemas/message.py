from typing import Any

from pydantic import BaseModel, Field


class SendMessageIn(BaseModel):
    model_config = {"populate_by_name": True}

    chat_id: str = Field(min_length=1, alias="chatId")  # "-1001234567890" or "@channelname"
    message_text: str = Field(alias="messageText")


class SendMessageOut(BaseModel):
    model_config = {"populate_by_name": True}

    success: bool
    message: str
    provider_response: Any | None = Field(default=None, alias="providerResponse")
    outcome: str
