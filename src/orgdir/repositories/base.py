"""Base repository with the point and index operations shared by both collections."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from orgdir.db.base import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """Generic async repository keyed on a single primary key column."""

    pk_field: str

    def __init__(self, session: AsyncSession, model_class: type[T]):
        self.session = session
        self.model_class = model_class

    async def get(self, pk_value: str) -> T | None:
        """Point lookup by primary key."""
        stmt = select(self.model_class).where(
            getattr(self.model_class, self.pk_field) == pk_value
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def exists(self, pk_value: str) -> bool:
        return await self.get(pk_value) is not None

    async def insert(self, row: T) -> T:
        """Persist a new record. The caller guarantees a fresh primary key."""
        self.session.add(row)
        await self.session.flush()
        return row

    async def partial_update(self, pk_value: str, fields: dict[str, Any]) -> T | None:
        """Apply only the given fields and return the full updated record.

        Returns None when no record has the given key.
        """
        row = await self.get(pk_value)
        if row is None:
            return None
        for key, value in fields.items():
            setattr(row, key, value)
        await self.session.flush()
        return row

    async def exists_by_field(self, field: str, value: Any, exclude_id: str | None = None) -> bool:
        """True iff a record other than ``exclude_id`` has ``field == value``."""
        pk_column = getattr(self.model_class, self.pk_field)
        stmt = select(pk_column).where(getattr(self.model_class, field) == value)
        result = await self.session.execute(stmt)
        return any(pk != exclude_id for pk in result.scalars().all())
