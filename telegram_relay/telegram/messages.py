"""
User-facing status strings, per locale.

The "ru" catalog keeps the wording the relay originally shipped with; "en" is
the default. Unknown locales fall back to "en".
"""

from telegram_relay.telegram.guidance import Guidance

DEFAULT_LOCALE = "en"

CATALOGS: dict[str, dict[str, str]] = {
    "en": {
        "delivered": "Message sent to Telegram successfully.",
        "config.missing_token": (
            "Configuration error: TELEGRAM_BOT_TOKEN was not found {where}. "
            "Make sure it is set correctly."
        ),
        "config.where.local": "in the local .env file",
        "config.where.deployed": "in the deployment environment variables",
        "network.error": "Network error or request failure while contacting Telegram: {error}",
        "network.unknown": "Unknown error while contacting Telegram.",
        "provider.error": (
            "Telegram API error: {description}{code}. "
            "Check the chat ID/username and the bot token."
        ),
        "provider.code": " (code: {code})",
        "internal.error": (
            "Critical server error while sending the message: {error}. "
            "See the server logs for details."
        ),
        Guidance.CHAT_NOT_FOUND.value: (
            " Make sure the bot is a member of the target chat (group/channel) and is "
            "allowed to send messages there. For channels the bot must be an "
            "administrator with permission to post."
        ),
        Guidance.BOT_BLOCKED.value: (
            " The user has blocked the bot, or the bot was removed from the chat/channel."
        ),
        Guidance.FORBIDDEN.value: (
            " Make sure the bot has permission to send messages to this chat "
            "(e.g. it is not blocked by the user and has rights in the group/channel)."
        ),
        Guidance.INVALID_TOKEN.value: (
            " The bot token is invalid. Check the TELEGRAM_BOT_TOKEN value in the "
            "environment variables."
        ),
    },
    "ru": {
        "delivered": "Сообщение успешно отправлено в Telegram.",
        "config.missing_token": (
            "Ошибка конфигурации: TELEGRAM_BOT_TOKEN не найден {where}. "
            "Убедитесь, что он правильно установлен."
        ),
        "config.where.local": "в локальном .env",
        "config.where.deployed": "в переменных окружения развертывания",
        "network.error": "Сетевая ошибка или ошибка выполнения запроса к Telegram: {error}",
        "network.unknown": "Неизвестная ошибка при связи с Telegram.",
        "provider.error": (
            "Ошибка Telegram API: {description}{code}. "
            "Проверьте правильность ID чата/имени пользователя и токен бота."
        ),
        "provider.code": " (Код: {code})",
        "internal.error": (
            "Произошла критическая серверная ошибка при отправке сообщения: {error}. "
            "Подробности в логах сервера."
        ),
        Guidance.CHAT_NOT_FOUND.value: (
            " Убедитесь, что бот является участником указанного чата (группы/канала) "
            "и имеет права на отправку сообщений. Для каналов бот должен быть "
            "администратором с правом публикации."
        ),
        Guidance.BOT_BLOCKED.value: (
            " Пользователь заблокировал бота, или бот был удален из чата/канала."
        ),
        Guidance.FORBIDDEN.value: (
            " Убедитесь, что бот имеет необходимые разрешения для отправки сообщений в "
            "этот чат (например, не заблокирован пользователем или имеет права в "
            "группе/канале)."
        ),
        Guidance.INVALID_TOKEN.value: (
            " Неверный токен бота. Проверьте значение TELEGRAM_BOT_TOKEN в "
            "переменных окружения."
        ),
    },
}


def render(locale: str, key: str, **params) -> str:
    catalog = CATALOGS.get(locale, CATALOGS[DEFAULT_LOCALE])
    return catalog[key].format(**params)
