"""Creation of organizations and users."""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from orgdir.db.models.organization import OrganizationRow
from orgdir.db.models.user import UserRow
from orgdir.errors.result import Err, Ok, conflict, validation_error
from orgdir.models.organization import Organization
from orgdir.models.user import User
from orgdir.models.validation import Operation, validate
from orgdir.repositories.organization_repo import OrganizationRepository
from orgdir.repositories.user_repo import UserRepository
from orgdir.services.id_generator import ORGANIZATION_PREFIX, USER_PREFIX, generate_id

logger = logging.getLogger(__name__)


async def create_organization(session: AsyncSession, raw: Any) -> Ok[Organization] | Err:
    validated = validate(Operation.CREATE_ORGANIZATION, raw)
    if isinstance(validated, Err):
        return validated
    payload = validated.value

    repo = OrganizationRepository(session)
    if await repo.exists_by_name(payload.name):
        return conflict("Organization with this name already exists")

    row = await repo.insert(
        OrganizationRow(
            org_id=generate_id(ORGANIZATION_PREFIX),
            name=payload.name,
            description=payload.description,
        )
    )
    logger.info("Created organization %s", row.org_id)
    return Ok(Organization.model_validate(row))


async def create_user(session: AsyncSession, org_id: str | None, raw: Any) -> Ok[User] | Err:
    """Create a user inside ``org_id``.

    The organization is checked before the body, so a missing org wins over
    field errors.
    """
    if not org_id or not await OrganizationRepository(session).exists(org_id):
        return validation_error("Organization not found")

    validated = validate(Operation.CREATE_USER, raw)
    if isinstance(validated, Err):
        return validated
    payload = validated.value

    repo = UserRepository(session)
    if await repo.exists_by_email(payload.email):
        return conflict("User with this email already exists")

    row = await repo.insert(
        UserRow(
            user_id=generate_id(USER_PREFIX),
            org_id=org_id,
            name=payload.name,
            email=payload.email,
        )
    )
    logger.info("Created user %s in organization %s", row.user_id, org_id)
    return Ok(User.model_validate(row))
