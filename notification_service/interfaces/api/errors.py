"""Exception handlers translating request decoding failures."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from notification_service.domain.outcomes import KIND_INVALID_PAYLOAD
from notification_service.interfaces.api.dependencies import get_alert_headers

logger = logging.getLogger(__name__)


def _describe_errors(errors: list[dict]) -> str:
    parts = []
    for error in errors:
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Malformed request body"


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed payloads as 400 responses with a stable error kind."""

    errors = jsonable_encoder(exc.errors())
    logger.info("Rejected malformed request to %s: %s", request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": {
                "kind": KIND_INVALID_PAYLOAD,
                "message": _describe_errors(errors),
                "errors": errors,
            }
        },
        headers=get_alert_headers().failure(KIND_INVALID_PAYLOAD),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_handler)
