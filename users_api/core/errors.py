# File: users_api/core/errors.py

"""
Error types and the handlers that turn them into JSON responses.

Every error body has the shape ``{"error": "<message>"}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found"
MALFORMED_BODY = "Malformed request body"


class StorageError(Exception):
    """A statement could not be executed against the store."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UserNotFound(Exception):
    """No row matched the requested id."""


class MalformedBody(Exception):
    """The request body could not be decoded into user fields."""


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": exc.message},
    )


async def user_not_found_handler(request: Request, exc: UserNotFound) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"error": USER_NOT_FOUND},
    )


async def malformed_body_handler(request: Request, exc: MalformedBody) -> JSONResponse:
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": MALFORMED_BODY},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(UserNotFound, user_not_found_handler)
    app.add_exception_handler(MalformedBody, malformed_body_handler)
