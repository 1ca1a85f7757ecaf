"""Organization repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from orgdir.db.models.organization import OrganizationRow
from orgdir.repositories.base import BaseRepository


class OrganizationRepository(BaseRepository[OrganizationRow]):
    pk_field = "org_id"

    def __init__(self, session: AsyncSession):
        super().__init__(session, OrganizationRow)

    async def exists_by_name(self, name: str, exclude_id: str | None = None) -> bool:
        return await self.exists_by_field("name", name, exclude_id)
