"""Mapping of operation results onto HTTP responses."""

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from orgdir.errors.result import DirectoryError, Err, ErrorKind, Ok, malformed
from orgdir.models.common import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(error: DirectoryError) -> JSONResponse:
    return JSONResponse(
        status_code=error.status_code,
        content=ErrorResponse(message=error.message).model_dump(),
    )


async def read_json_body(request: Request) -> Ok[Any] | Err:
    raw = await request.body()
    try:
        return Ok(json.loads(raw))
    except ValueError:
        return malformed("Invalid Json body")


async def respond(db: AsyncSession, outcome: Awaitable[Ok | Err]) -> JSONResponse:
    """Await an operation, commit on success and roll back on any rejection.

    Unexpected exceptions become a 500 carrying the exception message.
    """
    try:
        result = await outcome
        if isinstance(result, Err):
            await db.rollback()
            logger.info(
                "Request rejected (status=%d kind=%s): %s",
                result.error.status_code, result.error.kind.value, result.error.message,
            )
            return error_response(result.error)
        await db.commit()
    except Exception as exc:
        logger.exception("Unexpected error while handling request")
        await db.rollback()
        return error_response(DirectoryError(ErrorKind.UNEXPECTED, str(exc)))

    return JSONResponse(status_code=200, content=result.value.to_json())


async def handle_body(
    request: Request,
    db: AsyncSession,
    action: Callable[[Any], Awaitable[Ok | Err]],
) -> JSONResponse:
    """Parse the JSON body and pass it to ``action``."""
    body = await read_json_body(request)
    if isinstance(body, Err):
        return error_response(body.error)
    return await respond(db, action(body.value))
