"""Field validators shared by the command parser and the storage layer.

Each ``parse_*`` function accepts raw text, returns the normalised value and
raises ``ValueError`` carrying the field's constraint message when the text is
not acceptable. Keeping both input paths on the same validators means a value
that could not have been typed in can never be loaded from disk either.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta

from pydantic import EmailStr, TypeAdapter, ValidationError

NAME_CONSTRAINTS = (
    "Names should only contain alphanumeric characters and spaces, "
    "and it should not be blank"
)
PHONE_CONSTRAINTS = (
    "Phone numbers should only contain numbers, and it should be at least 3 digits long"
)
EMAIL_CONSTRAINTS = (
    "Emails should be of the format local-part@domain, where the domain "
    "has at least one period-separated label"
)
ADDRESS_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
TAG_CONSTRAINTS = "Tags names should be alphanumeric"
TITLE_CONSTRAINTS = (
    "Titles should only contain alphanumeric characters and spaces, "
    "and it should not be blank"
)
DATE_CONSTRAINTS = "Date should be in correct DD/MM/YYYY format."
TIME_CONSTRAINTS = "Time should be in correct HHMM format."
DURATION_CONSTRAINTS = "Duration should be a positive number of minutes."

_NAME_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")
_PHONE_RE = re.compile(r"\d{3,}")
_TAG_RE = re.compile(r"[A-Za-z0-9]+")
_DATE_RE = re.compile(r"\d{2}/\d{2}/\d{4}")
_TIME_RE = re.compile(r"\d{4}")
_DURATION_RE = re.compile(r"0*[1-9]\d*")

DATE_FORMAT = "%d/%m/%Y"
TIME_FORMAT = "%H%M"

_email_adapter = TypeAdapter(EmailStr)


def parse_name(value: str) -> str:
    value = value.strip()
    if not _NAME_RE.fullmatch(value):
        raise ValueError(NAME_CONSTRAINTS)
    return value


def parse_phone(value: str) -> str:
    value = value.strip()
    if not _PHONE_RE.fullmatch(value):
        raise ValueError(PHONE_CONSTRAINTS)
    return value


def parse_email(value: str) -> str:
    """Validate with pydantic's ``EmailStr``; the text is kept as typed.

    ``EmailStr`` also accepts ``Name <addr>`` and returns only the address, so
    anything other than a bare address is rejected.
    """
    value = value.strip()
    try:
        validated = _email_adapter.validate_python(value)
    except ValidationError as exc:
        raise ValueError(EMAIL_CONSTRAINTS) from exc
    # Normalisation only lowercases the domain.
    if validated.lower() != value.lower():
        raise ValueError(EMAIL_CONSTRAINTS)
    return value


def parse_address(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(ADDRESS_CONSTRAINTS)
    return value


def parse_tag(value: str) -> str:
    value = value.strip()
    if not _TAG_RE.fullmatch(value):
        raise ValueError(TAG_CONSTRAINTS)
    return value


def parse_remark(value: str | None) -> str:
    return (value or "").strip()


def parse_title(value: str) -> str:
    value = value.strip()
    if not _NAME_RE.fullmatch(value):
        raise ValueError(TITLE_CONSTRAINTS)
    return value


def parse_date(value: str) -> date:
    value = value.strip()
    if not _DATE_RE.fullmatch(value):
        raise ValueError(DATE_CONSTRAINTS)
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as exc:
        raise ValueError(DATE_CONSTRAINTS) from exc


def parse_time(value: str) -> time:
    value = value.strip()
    if not _TIME_RE.fullmatch(value):
        raise ValueError(TIME_CONSTRAINTS)
    try:
        return datetime.strptime(value, TIME_FORMAT).time()
    except ValueError as exc:
        raise ValueError(TIME_CONSTRAINTS) from exc


def parse_duration(value: str | int) -> timedelta:
    if isinstance(value, bool):
        raise ValueError(DURATION_CONSTRAINTS)
    if isinstance(value, int):
        minutes = value
    else:
        value = value.strip()
        if not _DURATION_RE.fullmatch(value):
            raise ValueError(DURATION_CONSTRAINTS)
        minutes = int(value)
    if minutes <= 0:
        raise ValueError(DURATION_CONSTRAINTS)
    try:
        return timedelta(minutes=minutes)
    except OverflowError as exc:
        raise ValueError(DURATION_CONSTRAINTS) from exc


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def format_time(value: time) -> str:
    return value.strftime(TIME_FORMAT)


def duration_minutes(value: timedelta) -> int:
    return int(value.total_seconds() // 60)
