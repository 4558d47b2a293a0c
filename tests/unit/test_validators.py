import locale

import pytest
from bson import ObjectId

from contactbook.core.exceptions import ValidationError
from contactbook.utils.validators import (
    BIRTHDAY_ERROR,
    extract_client_id,
    is_birthday,
    parse_object_id,
    validate_contact,
)


def _payload(**overrides):
    payload = {
        "firstName": "  Jane ",
        "lastName": "Doe",
        "email": " Jane.Doe@Example.COM ",
        "favoriteColor": "blue",
        "birthday": "1995-03-12",
    }
    payload.update(overrides)
    return payload


def test_validate_contact_normalizes_fields():
    contact = validate_contact(_payload())

    assert contact.firstName == "Jane"
    assert contact.email == "jane.doe@example.com"
    assert contact.birthday == "1995-03-12"


def test_missing_fields_are_listed_in_order():
    with pytest.raises(ValidationError) as excinfo:
        validate_contact({"lastName": "Doe", "favoriteColor": "   ", "birthday": None})

    assert excinfo.value.message == "Missing required field(s): firstName, email, favoriteColor, birthday"


def test_missing_fields_checked_before_formats():
    with pytest.raises(ValidationError) as excinfo:
        validate_contact(_payload(email="not-an-email", lastName=""))

    assert excinfo.value.message == "Missing required field(s): lastName"


def test_none_payload_reports_all_fields():
    with pytest.raises(ValidationError) as excinfo:
        validate_contact(None)

    assert "firstName, lastName, email, favoriteColor, birthday" in excinfo.value.message


def test_non_object_payload_rejected():
    with pytest.raises(ValidationError) as excinfo:
        validate_contact(["Jane", "Doe"])

    assert excinfo.value.message == "Request body must be a JSON object"


@pytest.mark.parametrize("email", ["jane", "jane@example", "jane doe@example.com", "@example.com"])
def test_invalid_email(email):
    with pytest.raises(ValidationError) as excinfo:
        validate_contact(_payload(email=email))

    assert excinfo.value.message == "Invalid email format"


@pytest.mark.parametrize("value, expected", [(42, "42"), (True, "true"), (False, "false"), (1.0, "1"), (1.5, "1.5")])
def test_non_string_values_are_coerced(value, expected):
    contact = validate_contact(_payload(favoriteColor=value))

    assert contact.favoriteColor == expected


@pytest.mark.parametrize(
    "value",
    [
        "1995-03-12",
        # shape alone is enough for YYYY-MM-DD
        "1995-02-30",
        "1995-13-01",
        "1995-03-12T08:30",
        "1995-03-12T08:30:00",
        "1995-03-12T08:30:00.123Z",
        "1995-03-12T08:30:00+02:00",
        "03/12/1995",
        "3/2/1995",
        "March 12, 1995",
        "Mar 12, 1995",
        "mar. 12, 1995",
        "12 March 1995",
        "12 Sept 1995",
    ],
)
def test_accepted_birthday_formats(value):
    assert is_birthday(value)


@pytest.mark.parametrize(
    "value",
    [
        "not-a-date",
        "12.03.1995",
        "yesterday",
        "19950312",
        "1995-W11-1",
        "1995-02-30T08:30:00",
        "02/30/1995",
        "13/01/1995",
        "Smarch 12, 1995",
        "February 30, 1995",
    ],
)
def test_rejected_birthday_formats(value):
    assert not is_birthday(value)


def test_month_names_ignore_process_locale():
    previous = locale.setlocale(locale.LC_TIME)
    try:
        locale.setlocale(locale.LC_TIME, "de_DE.UTF-8")
    except locale.Error:
        pytest.skip("de_DE.UTF-8 locale not installed")
    try:
        assert is_birthday("March 12, 1995")
        assert is_birthday("12 Dec 1995")
    finally:
        locale.setlocale(locale.LC_TIME, previous)


def test_birthday_is_not_reformatted():
    contact = validate_contact(_payload(birthday="March 12, 1995"))

    assert contact.birthday == "March 12, 1995"


def test_invalid_birthday_message():
    with pytest.raises(ValidationError) as excinfo:
        validate_contact(_payload(birthday="not-a-date"))

    assert excinfo.value.message == BIRTHDAY_ERROR


def test_parse_object_id():
    oid = ObjectId()

    assert parse_object_id(str(oid)) == oid


@pytest.mark.parametrize("value", ["123", "zzzzzzzzzzzzzzzzzzzzzzzz", "abcdefghijkl", 12, None])
def test_parse_object_id_rejects_malformed(value):
    with pytest.raises(ValidationError) as excinfo:
        parse_object_id(value)

    assert excinfo.value.message == "Invalid id format"


def test_extract_client_id():
    oid = ObjectId()

    assert extract_client_id({"_id": str(oid)}) == oid
    assert extract_client_id({"_id": ""}) is None
    assert extract_client_id({}) is None
    with pytest.raises(ValidationError, match="Invalid _id format"):
        extract_client_id({"_id": "nope"})
