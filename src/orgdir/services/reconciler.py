"""Update reconciliation for organizations and users.

An update runs through a fixed sequence before anything is written:

1. validate the payload shape,
2. resolve the target (organization existence, user existence and ownership),
3. stage the optional fields that were supplied,
4. re-check uniqueness of staged unique fields, excluding the record itself,
5. reject an empty staged set,
6. apply the staged fields with a partial update.

Any rejection in steps 1-5 returns an ``Err`` and leaves the store untouched.
Uniqueness is a read-then-write check with no isolation; two concurrent
updates to the same name or email can both pass it.
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from orgdir.errors.result import Err, Ok, conflict, forbidden, not_found, validation_error
from orgdir.models.organization import Organization
from orgdir.models.user import User
from orgdir.models.validation import Operation, validate
from orgdir.repositories.organization_repo import OrganizationRepository
from orgdir.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)


async def update_organization(session: AsyncSession, raw: Any) -> Ok[Organization] | Err:
    validated = validate(Operation.UPDATE_ORGANIZATION, raw)
    if isinstance(validated, Err):
        return validated
    payload = validated.value

    repo = OrganizationRepository(session)
    if not await repo.exists(payload.org_id):
        return not_found("Organization not found")

    updates = payload.present_fields()
    if "name" in updates and await repo.exists_by_name(updates["name"], exclude_id=payload.org_id):
        return conflict("Organization with this name already exists")

    if not updates:
        return validation_error("At least one of name or description must be provided")

    row = await repo.partial_update(payload.org_id, updates)
    if row is None:
        return not_found("Organization not found")
    logger.info("Updated organization %s fields=%s", payload.org_id, sorted(updates))
    return Ok(Organization.model_validate(row))


async def update_user(session: AsyncSession, org_id: str | None, raw: Any) -> Ok[User] | Err:
    validated = validate(Operation.UPDATE_USER, raw)
    if isinstance(validated, Err):
        return validated
    payload = validated.value

    if not org_id or not await OrganizationRepository(session).exists(org_id):
        return validation_error("Organization not found")

    repo = UserRepository(session)
    current = await repo.get(payload.user_id)
    if current is None:
        return not_found("User not found")
    if current.org_id != org_id:
        return forbidden("User does not belong to the specified organization")

    updates = payload.present_fields()
    if "email" in updates and await repo.exists_by_email(updates["email"], exclude_id=payload.user_id):
        return conflict("User with this email already exists")

    if not updates:
        return validation_error("At least one of name or email must be provided")

    row = await repo.partial_update(payload.user_id, updates)
    if row is None:
        return not_found("User not found")
    logger.info("Updated user %s fields=%s", payload.user_id, sorted(updates))
    return Ok(User.model_validate(row))
