"""User repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from orgdir.db.models.user import UserRow
from orgdir.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserRow]):
    pk_field = "user_id"

    def __init__(self, session: AsyncSession):
        super().__init__(session, UserRow)

    async def exists_by_email(self, email: str, exclude_id: str | None = None) -> bool:
        return await self.exists_by_field("email", email, exclude_id)

    async def list_by_org(self, org_id: str) -> list[UserRow]:
        stmt = select(UserRow).where(UserRow.org_id == org_id).order_by(UserRow.name)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
