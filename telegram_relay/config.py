from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    APP_ENV: str = "development"
    # Empty: DEBUG in development, INFO elsewhere
    LOG_LEVEL: str = ""

    # Telegram Bot API
    TELEGRAM_BOT_TOKEN: str = ""
    TELEGRAM_API_BASE: str = "https://api.telegram.org"
    TELEGRAM_TIMEOUT_SECONDS: float = 30

    # "en" or "ru"
    MESSAGE_LOCALE: str = "en"


settings = Settings()
