"""Users table, scoped to an owning organization."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from orgdir.db.base import Base


class UserRow(Base):
    __tablename__ = "users"

    user_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    # No foreign key: the owning org is only required to exist at creation
    org_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, index=True)
