"""Pydantic models for organizations."""

from typing import ClassVar

from pydantic import Field, field_validator

from orgdir.models.common import RecordModel, RequestModel, clean_string

NAME_MAX_LENGTH = 200


class OrganizationCreate(RequestModel):
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH, title="Name")
    description: str = Field(min_length=1, title="Description")

    @field_validator("name", "description", mode="before")
    @classmethod
    def strip_strings(cls, value):
        return clean_string(value)


class OrganizationUpdate(RequestModel):
    mutable_fields: ClassVar[tuple[str, ...]] = ("name", "description")

    org_id: str = Field(min_length=1, title="Organization Id")
    name: str | None = Field(None, min_length=1, max_length=NAME_MAX_LENGTH, title="Name")
    description: str | None = Field(None, min_length=1, title="Description")

    @field_validator("name", "description", mode="before")
    @classmethod
    def strip_strings(cls, value):
        return clean_string(value)


class Organization(RecordModel):
    org_id: str
    name: str
    description: str
