"""Service health endpoint."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from orgdir import __version__
from orgdir.dependencies import DBSession

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(db: DBSession):
    """Report whether the record store answers; 503 when it does not."""
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("Health check: record store unavailable: %s", exc)
        return JSONResponse(
            status_code=503,
            content={"status": "unavailable", "service": "orgdir-api", "version": __version__},
        )
    return {"status": "healthy", "service": "orgdir-api", "version": __version__}
