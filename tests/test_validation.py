"""Tests for payload validation and error aggregation."""

import pytest

from orgdir.errors.result import Err, ErrorKind, Ok
from orgdir.models.organization import OrganizationCreate, OrganizationUpdate
from orgdir.models.user import UserUpdate
from orgdir.models.validation import Operation, validate


def _message(result) -> str:
    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.VALIDATION
    assert result.error.status_code == 400
    return result.error.message


def test_create_organization_trims_fields():
    result = validate(Operation.CREATE_ORGANIZATION, {"name": "  Acme ", "description": " Widgets\n"})
    assert isinstance(result, Ok)
    assert isinstance(result.value, OrganizationCreate)
    assert result.value.name == "Acme"
    assert result.value.description == "Widgets"


def test_create_organization_collects_every_error():
    message = _message(validate(Operation.CREATE_ORGANIZATION, {}))
    assert message == "Name is required Description is required"


def test_blank_string_is_rejected_after_trim():
    message = _message(validate(Operation.CREATE_ORGANIZATION, {"name": "   ", "description": "d"}))
    assert message == "Name must not be empty"


def test_no_type_coercion():
    message = _message(validate(Operation.CREATE_ORGANIZATION, {"name": 42, "description": "d"}))
    assert message == "Name must be a string"


def test_create_user_reports_name_and_email_together():
    message = _message(validate(Operation.CREATE_USER, {"email": "not-an-email"}))
    assert message == "Name is required Invalid email"


def test_create_user_trims_email():
    result = validate(Operation.CREATE_USER, {"name": "Bob", "email": "  bob@x.com "})
    assert isinstance(result, Ok)
    assert result.value.email == "bob@x.com"


def test_unknown_keys_are_ignored():
    result = validate(
        Operation.CREATE_USER,
        {"eventType": "create.user", "orgId": "org_1", "name": "Bob", "email": "bob@x.com"},
    )
    assert isinstance(result, Ok)


def test_non_object_body():
    message = _message(validate(Operation.CREATE_ORGANIZATION, ["Acme"]))
    assert message == "Request body must be a JSON object"


def test_update_requires_identifier():
    assert _message(validate(Operation.UPDATE_ORGANIZATION, {"name": "x"})) == "Organization Id is required"
    assert _message(validate(Operation.UPDATE_USER, {"name": "x"})) == "User ID is required"


def test_update_present_fields_only_includes_supplied_values():
    result = validate(Operation.UPDATE_ORGANIZATION, {"orgId": "org_1", "description": " new "})
    assert isinstance(result, Ok)
    assert isinstance(result.value, OrganizationUpdate)
    assert result.value.present_fields() == {"description": "new"}


def test_update_with_no_optional_fields_is_valid_shape():
    result = validate(Operation.UPDATE_USER, {"userId": "usr_1"})
    assert isinstance(result, Ok)
    assert isinstance(result.value, UserUpdate)
    assert result.value.present_fields() == {}


def test_update_rejects_explicit_null():
    message = _message(validate(Operation.UPDATE_ORGANIZATION, {"orgId": "org_1", "name": None}))
    assert message == "Name cannot be null"


@pytest.mark.parametrize("email", ["bob", "bob@", "@x.com"])
def test_update_user_rejects_bad_email(email):
    message = _message(validate(Operation.UPDATE_USER, {"userId": "usr_1", "email": email}))
    assert message == "Invalid email"


def test_email_is_kept_as_given():
    result = validate(Operation.CREATE_USER, {"name": "Bob", "email": " Bob@X.COM "})
    assert isinstance(result, Ok)
    assert result.value.email == "Bob@X.COM"


@pytest.mark.parametrize("email", ["Bob Smith <bob@x.com>", "<bob@x.com>"])
def test_display_name_email_is_rejected(email):
    assert _message(validate(Operation.CREATE_USER, {"name": "Bob", "email": email})) == "Invalid email"
    assert _message(validate(Operation.UPDATE_USER, {"userId": "usr_1", "email": email})) == "Invalid email"


def test_name_longer_than_column_is_rejected():
    long_name = "x" * 201
    assert _message(validate(Operation.CREATE_ORGANIZATION, {"name": long_name, "description": "d"})) == (
        "Name must be at most 200 characters"
    )
    assert _message(validate(Operation.UPDATE_USER, {"userId": "usr_1", "name": long_name})) == (
        "Name must be at most 200 characters"
    )
    result = validate(Operation.CREATE_USER, {"name": "x" * 200, "email": "bob@x.com"})
    assert isinstance(result, Ok)
