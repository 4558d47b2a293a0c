"""Input validation helpers."""

from __future__ import annotations

import re
from datetime import date
from typing import Any, Mapping, Optional

from bson import ObjectId

from contactbook.core.exceptions import ValidationError
from contactbook.models.contact import CONTACT_FIELDS, ContactInput

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# A value with this shape is accepted without checking the calendar.
ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
ISO_DATETIME_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})T\d{2}:\d{2}(?::\d{2}(?:\.\d{1,6})?)?(?:Z|[+-]\d{2}:\d{2})?$"
)
US_DATE_PATTERN = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")
MONTH_FIRST_PATTERN = re.compile(r"^([A-Za-z]+)\.? (\d{1,2}), (\d{4})$")
DAY_FIRST_PATTERN = re.compile(r"^(\d{1,2}) ([A-Za-z]+)\.? (\d{4})$")

# English month names, independent of the process locale.
MONTHS = {
    name: number
    for number, full in enumerate(
        (
            "january", "february", "march", "april", "may", "june",
            "july", "august", "september", "october", "november", "december",
        ),
        start=1,
    )
    for name in (full, full[:3])
}
MONTHS["sept"] = 9

BIRTHDAY_ERROR = "birthday must be an ISO date (e.g. 1995-03-12)"


def sanitize(value: Any) -> str:
    """Stringify a JSON scalar the way a browser would, then strip it."""

    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def is_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value))


def _is_calendar_date(year: str, month: Any, day: str) -> bool:
    try:
        date(int(year), int(month), int(day))
    except ValueError:
        return False
    return True


def is_birthday(value: str) -> bool:
    """Return True when ``value`` is in one of the accepted birthday formats.

    Accepted: ``YYYY-MM-DD`` (shape only), ISO-8601 date-times,
    ``MM/DD/YYYY``, ``March 12, 1995`` / ``Mar 12, 1995`` and
    ``12 March 1995`` / ``12 Mar 1995``.
    """

    if ISO_DATE_PATTERN.match(value):
        return True

    match = ISO_DATETIME_PATTERN.match(value)
    if match:
        return _is_calendar_date(*match.groups())

    match = US_DATE_PATTERN.match(value)
    if match:
        month, day, year = match.groups()
        return _is_calendar_date(year, month, day)

    match = MONTH_FIRST_PATTERN.match(value)
    if match:
        name, day, year = match.groups()
    else:
        match = DAY_FIRST_PATTERN.match(value)
        if not match:
            return False
        day, name, year = match.groups()
    month = MONTHS.get(name.lower())
    return month is not None and _is_calendar_date(year, month, day)


def validate_contact(payload: Any) -> ContactInput:
    """Normalize a raw request body into a `ContactInput`.

    Fields are stripped and the email lower-cased. Missing fields are
    reported before any format check runs. Raises `ValidationError` with a
    client-facing message on the first failing rule.
    """

    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise ValidationError("Request body must be a JSON object")

    values = {field: sanitize(payload.get(field)) for field in CONTACT_FIELDS}
    values["email"] = values["email"].lower()

    missing = [field for field, value in values.items() if not value]
    if missing:
        raise ValidationError(f"Missing required field(s): {', '.join(missing)}")
    if not is_email(values["email"]):
        raise ValidationError("Invalid email format")
    if not is_birthday(values["birthday"]):
        raise ValidationError(BIRTHDAY_ERROR)

    return ContactInput(**values)


def parse_object_id(value: Any, *, field: str = "id") -> ObjectId:
    """Return ``value`` as an ObjectId or raise `ValidationError`."""

    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise ValidationError(f"Invalid {field} format")
    return ObjectId(value)


def extract_client_id(payload: Any) -> Optional[ObjectId]:
    """Return the optional caller-supplied ``_id`` of a create request body."""

    if not isinstance(payload, Mapping):
        return None
    value = payload.get("_id")
    if value is None or value == "":
        return None
    return parse_object_id(value, field="_id")
