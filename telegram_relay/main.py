import logging
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from telegram_relay.api.messages import router as messages_router
from telegram_relay.config import settings
from telegram_relay.middleware.error_handler import global_exception_handler
from telegram_relay.middleware.logging import LoggingMiddleware
from telegram_relay.telegram.client import telegram_client

logger = structlog.get_logger()

SERVICE_NAME = "telegram-relay"


def log_level(app_env: str, override: str = "") -> int:
    """LOG_LEVEL wins when it names a level; otherwise DEBUG in development, INFO elsewhere."""
    level = getattr(logging, override.upper(), None) if override else None
    if isinstance(level, int):
        return level
    return logging.DEBUG if app_env == "development" else logging.INFO


def add_service(logger, method_name: str, event_dict: dict) -> dict:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def configure_logging():
    development = settings.APP_ENV == "development"
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            add_service,
            structlog.processors.TimeStamper(fmt="iso", utc=not development),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            (
                structlog.dev.ConsoleRenderer()
                if development
                # non-ASCII (ru) messages are written as-is
                else structlog.processors.JSONRenderer(ensure_ascii=False)
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            log_level(settings.APP_ENV, settings.LOG_LEVEL)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info(
        "app.startup",
        env=settings.APP_ENV,
        locale=settings.MESSAGE_LOCALE,
        token_configured=bool(settings.TELEGRAM_BOT_TOKEN),
    )
    await telegram_client.initialize()

    yield

    await telegram_client.shutdown()
    logger.info("app.shutdown")


app = FastAPI(title="Telegram Relay", lifespan=lifespan)

app.add_middleware(LoggingMiddleware)
app.add_exception_handler(Exception, global_exception_handler)

app.include_router(messages_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
