import structlog
from fastapi import Request
from fastapi.responses import JSONResponse

from telegram_relay.middleware.logging import REQUEST_ID_HEADER

logger = structlog.get_logger()


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort 500 for faults outside the send action; echoes the request id for log lookup."""
    request_id = structlog.contextvars.get_contextvars().get("request_id") or request.headers.get(
        REQUEST_ID_HEADER
    )
    logger.exception(
        "http.unhandled_exception",
        path=request.url.path,
        method=request.method,
        error_type=type(exc).__name__,
    )
    content = {"error": "Internal server error", "detail": str(exc)}
    headers = {}
    if request_id:
        content["request_id"] = request_id
        headers[REQUEST_ID_HEADER] = request_id
    return JSONResponse(status_code=500, content=content, headers=headers)
