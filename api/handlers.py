"""Translate booking engine errors into HTTP responses."""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from Hotels.errors import ErrorKind, HotelError
from .models import ErrorResponse

logger = logging.getLogger(__name__)

# error body documented on every router
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_409_CONFLICT: {"model": ErrorResponse},
}

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_RANGE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.NO_ACTIVE_BOOKING: status.HTTP_404_NOT_FOUND,
    ErrorKind.ROOM_UNAVAILABLE: status.HTTP_409_CONFLICT,
    ErrorKind.OVERLAP_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.RESOURCE_BUSY: status.HTTP_409_CONFLICT,
    ErrorKind.DUPLICATE_KEY: status.HTTP_409_CONFLICT,
}


async def hotel_error_handler(_request: Request, exc: HotelError) -> JSONResponse:
    logger.info("Hotel error: %s (kind=%s)", exc.message, exc.kind.value)
    return JSONResponse(
        status_code=STATUS_BY_KIND.get(exc.kind, status.HTTP_400_BAD_REQUEST),
        content={"detail": exc.message, "error": exc.kind.value},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HotelError, hotel_error_handler)  # type: ignore[arg-type]
