from dataclasses import dataclass
from enum import Enum
from typing import Any


class Outcome(str, Enum):
    DELIVERED = "delivered"
    CONFIGURATION_ERROR = "configuration_error"
    NETWORK_ERROR = "network_error"
    PROVIDER_REJECTION = "provider_rejection"
    # Only produced by the server action boundary (telegram_relay.actions)
    INTERNAL_ERROR = "internal_error"


@dataclass(frozen=True)
class DispatchRequest:
    chat_id: str  # numeric id as text, or "@channelname"
    message_text: str

    def __post_init__(self):
        if not self.chat_id:
            raise ValueError("chat_id must be a non-empty string")


@dataclass(frozen=True)
class DispatchResult:
    outcome: Outcome
    message: str
    provider_response: Any = None  # raw decoded body or a local error descriptor

    @property
    def success(self) -> bool:
        return self.outcome is Outcome.DELIVERED

    def to_dict(self) -> dict:
        """Wire shape returned to callers."""
        return {
            "success": self.success,
            "message": self.message,
            "providerResponse": self.provider_response,
            "outcome": self.outcome.value,
        }
