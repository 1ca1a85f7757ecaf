"""Organizations table."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from orgdir.db.base import Base


class OrganizationRow(Base):
    __tablename__ = "organizations"

    org_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    # Indexed, not unique: name uniqueness is checked by query before writes
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
