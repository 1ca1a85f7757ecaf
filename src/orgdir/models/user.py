"""Pydantic models for users."""

from typing import ClassVar

from email_validator import EmailNotValidError, validate_email
from pydantic import Field, field_validator

from orgdir.models.common import RecordModel, RequestModel, clean_string

NAME_MAX_LENGTH = 200


def check_email(value: str) -> str:
    """Reject malformed addresses; return the input as given, not normalized."""
    # Display-name forms like "Bob <bob@x.com>" are not plain addresses
    if "<" in value or ">" in value:
        raise ValueError("invalid email")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError("invalid email") from exc
    return value


class UserCreate(RequestModel):
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH, title="Name")
    email: str = Field(title="Email")

    @field_validator("name", "email", mode="before")
    @classmethod
    def strip_strings(cls, value):
        return clean_string(value)

    @field_validator("email")
    @classmethod
    def valid_email(cls, value: str) -> str:
        return check_email(value)


class UserUpdate(RequestModel):
    mutable_fields: ClassVar[tuple[str, ...]] = ("name", "email")

    user_id: str = Field(min_length=1, title="User ID")
    name: str | None = Field(None, min_length=1, max_length=NAME_MAX_LENGTH, title="Name")
    email: str | None = Field(None, title="Email")

    @field_validator("name", "email", mode="before")
    @classmethod
    def strip_strings(cls, value):
        return clean_string(value)

    @field_validator("email")
    @classmethod
    def valid_email(cls, value: str | None) -> str | None:
        return value if value is None else check_email(value)


class User(RecordModel):
    user_id: str
    org_id: str
    name: str
    email: str
