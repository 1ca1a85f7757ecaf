"""FastAPI dependency injection providers."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from orgdir.logging_config import bind_context


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session from the app's session factory."""
    session_factory = request.app.state.db_session_factory
    async with session_factory() as session:
        yield session


def scoped_org(org_id: str) -> str:
    """Path-scoped organization id, bound into the log context."""
    bind_context(org_id=org_id)
    return org_id


# Type aliases for dependency injection
DBSession = Annotated[AsyncSession, Depends(get_db)]
OrgScope = Annotated[str, Depends(scoped_org)]
