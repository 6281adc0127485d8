"""
Classification of Telegram sendMessage rejections.

Maps (error_code, description) to a remediation hint. Matching relies on the
exact English wording of Telegram's descriptions; if Telegram rewords or
localizes them, the match silently falls through to no guidance.
"""

from enum import Enum


class Guidance(str, Enum):
    CHAT_NOT_FOUND = "chat_not_found"
    BOT_BLOCKED = "bot_blocked"
    FORBIDDEN = "forbidden"
    INVALID_TOKEN = "invalid_token"


def classify_rejection(code: int | None, description: str) -> Guidance | None:
    """Return the guidance for a provider rejection, or None if nothing matches."""
    text = description.lower() if isinstance(description, str) else ""

    if code == 400 and "chat not found" in text:
        return Guidance.CHAT_NOT_FOUND
    if code == 403 and "bot was blocked by the user" in text:
        return Guidance.BOT_BLOCKED
    if code == 403:
        return Guidance.FORBIDDEN
    if code == 401 and "unauthorized" in text:
        return Guidance.INVALID_TOKEN
    return None
