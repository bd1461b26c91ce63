from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from typing import Any, Final

from .config import ARRAY_LIMIT
from .errors import DuplicateError, LimitExceededError, ValidationError

SENDER_NAME_RE: Final[re.Pattern[str]] = re.compile(r"[\w\s.-]{1,11}")
PHONE_RE: Final[re.Pattern[str]] = re.compile(r"380[0-9]{9}")
NON_DIGIT_RE: Final[re.Pattern[str]] = re.compile(r"[^0-9]")

# Numeric strings as the API backend accepts them: "42", " 42", "-1.5", "1e3", ".5"
NUMERIC_RE: Final[re.Pattern[str]] = re.compile(
    r"[ \t\n\r\v\f]*[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?[ \t\n\r\v\f]*"
)

_SCALARS = (str, bytes, int, float)


def is_numeric(value: Any) -> bool:
    # bool is an int subclass but never counts as a number here
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        # NaN and infinities have no JSON representation
        return math.isfinite(value)
    if isinstance(value, str):
        return NUMERIC_RE.fullmatch(value) is not None
    return False


def check_token(token: Any) -> str:
    if not isinstance(token, str):
        raise ValidationError("Wrong token. Must be string")
    if not token:
        raise ValidationError("Token can't be empty")
    return token


def check_integration_id(integration_id: Any) -> Any:
    if not is_numeric(integration_id):
        raise ValidationError("Wrong type of integration ID. Should be numeric")
    return integration_id


def check_sender_name(sender_name: Any) -> str:
    """Alpha-name: 1-11 word characters, whitespace, dots or hyphens."""
    if not isinstance(sender_name, str) or SENDER_NAME_RE.fullmatch(sender_name) is None:
        raise ValidationError("Wrong alpha-name")
    return sender_name


def check_message(message: Any) -> str:
    # Any text goes, including "" -- only the type is checked.
    if not isinstance(message, str):
        raise ValidationError("Message must be string")
    return message


def normalize_phone(phone: Any) -> str:
    """
    Strip everything but digits and require a Ukrainian mobile number.

    "+38 (050) 123-45-67" -> "380501234567". An already normalised
    number comes back unchanged.
    """
    if isinstance(phone, float) and phone.is_integer():
        # 380501234567.0 -> "380501234567"
        phone_text = format(phone, ".0f")
    else:
        phone_text = str(phone)
    digits = NON_DIGIT_RE.sub("", phone_text)
    if PHONE_RE.fullmatch(digits) is None:
        raise ValidationError(f"Wrong phone number: {phone}")
    return digits


def check_sms_id(sms_id: Any) -> Any:
    if not is_numeric(sms_id):
        raise ValidationError(f"Wrong SMS ID: {sms_id}")
    return sms_id


def as_batch(value: Any, noun: str = "items") -> list[Any]:
    """
    Turn a single value or an iterable of values into one ordered list.

    A lone phone number / id becomes a one-element list; iterables are
    capped at ARRAY_LIMIT entries and must not be empty.
    """
    if isinstance(value, _SCALARS):
        return [value]

    if not isinstance(value, Iterable):
        raise ValidationError(f"Expected a value or a list of {noun}, got {type(value).__name__}")

    # mappings contribute their values, keys are ignored
    items = list(value.values()) if isinstance(value, Mapping) else list(value)
    if len(items) > ARRAY_LIMIT:
        raise LimitExceededError(
            "One-time sending limit has been exceeded. "
            f"Should be no more than {ARRAY_LIMIT} {noun} in the array"
        )
    if not items:
        raise ValidationError(f"At least one of {noun} is required")
    return items


def find_duplicates(values: Iterable[str]) -> list[str]:
    """Values seen more than once, in first-seen order, each listed once."""
    seen: set[str] = set()
    duplicates: dict[str, None] = {}
    for value in values:
        if value in seen:
            duplicates[value] = None
        else:
            seen.add(value)
    return list(duplicates)


def check_duplicates(values: list[str]) -> list[str]:
    duplicates = find_duplicates(values)
    if duplicates:
        raise DuplicateError("You have duplicate in array: " + ", ".join(duplicates))
    return values


def prepare_phones(phones: Any) -> list[str]:
    return [normalize_phone(phone) for phone in as_batch(phones, noun="numbers")]


def prepare_sms_ids(sms_ids: Any) -> list[Any]:
    return [check_sms_id(sms_id) for sms_id in as_batch(sms_ids, noun="IDs")]
