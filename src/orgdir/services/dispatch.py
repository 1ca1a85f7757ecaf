"""Route an operation tag and its payload to the matching create/update logic."""

from collections.abc import Awaitable, Callable
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from orgdir.errors.result import Err, Ok
from orgdir.models.validation import Operation
from orgdir.services import reconciler, registration

Handler = Callable[[AsyncSession, dict[str, Any]], Awaitable[Ok | Err]]

# User events carry their organization scope inside the payload as ``orgId``.
HANDLERS: dict[Operation, Handler] = {
    Operation.CREATE_ORGANIZATION: registration.create_organization,
    Operation.CREATE_USER: lambda session, payload: registration.create_user(
        session, payload.get("orgId"), payload
    ),
    Operation.UPDATE_ORGANIZATION: reconciler.update_organization,
    Operation.UPDATE_USER: lambda session, payload: reconciler.update_user(
        session, payload.get("orgId"), payload
    ),
}


async def dispatch(session: AsyncSession, operation: Operation, payload: dict[str, Any]) -> Ok | Err:
    return await HANDLERS[operation](session, payload)
