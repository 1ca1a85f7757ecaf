"""SQLAlchemy ORM models - import all to register with Base.metadata."""

from orgdir.db.models.organization import OrganizationRow
from orgdir.db.models.user import UserRow

__all__ = [
    "OrganizationRow",
    "UserRow",
]
