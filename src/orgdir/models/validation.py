"""Entity validation: turn raw payloads into typed records or one aggregated error."""

from enum import Enum
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from orgdir.errors.result import Err, Ok, validation_error
from orgdir.models.organization import OrganizationCreate, OrganizationUpdate
from orgdir.models.user import UserCreate, UserUpdate


class Operation(str, Enum):
    """Directory operations. Values double as queue ``eventType`` tags."""

    CREATE_ORGANIZATION = "create.organization"
    CREATE_USER = "create.user"
    UPDATE_ORGANIZATION = "update.organization"
    UPDATE_USER = "update.user"


SCHEMAS: dict[Operation, type[BaseModel]] = {
    Operation.CREATE_ORGANIZATION: OrganizationCreate,
    Operation.CREATE_USER: UserCreate,
    Operation.UPDATE_ORGANIZATION: OrganizationUpdate,
    Operation.UPDATE_USER: UserUpdate,
}

_MESSAGES = {
    "missing": "{label} is required",
    "null_value": "{label} cannot be null",
    "string_too_short": "{label} must not be empty",
    "string_too_long": "{label} must be at most {max_length} characters",
    "string_type": "{label} must be a string",
    "value_error": "Invalid {lower}",
}


def validate(operation: Operation, raw: Any) -> Ok | Err:
    """Validate ``raw`` against the field rules of ``operation``.

    Every field violation is reported; the messages are joined with a space
    into a single VALIDATION error.
    """
    schema = SCHEMAS[operation]
    try:
        return Ok(schema.model_validate(raw))
    except PydanticValidationError as exc:
        messages = [_describe(schema, error) for error in exc.errors()]
        return validation_error(" ".join(messages))


def _describe(schema: type[BaseModel], error: dict) -> str:
    if not error["loc"]:
        return "Request body must be a JSON object"

    key = error["loc"][0]
    label = str(key)
    for name, info in schema.model_fields.items():
        if key in (name, info.alias, to_camel(name)):
            label = info.title or name
            break

    template = _MESSAGES.get(error["type"])
    if template is None:
        return f"{label}: {error['msg']}"
    return template.format(label=label, lower=label.lower(), **error.get("ctx", {}))
