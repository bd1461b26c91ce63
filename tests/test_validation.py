from __future__ import annotations

import pytest

from smsclub.errors import DuplicateError, LimitExceededError, ValidationError
from smsclub.validation import (
    as_batch,
    check_duplicates,
    check_integration_id,
    check_message,
    check_sender_name,
    check_sms_id,
    check_token,
    find_duplicates,
    is_numeric,
    normalize_phone,
    prepare_phones,
    prepare_sms_ids,
)


def test_check_token() -> None:
    assert check_token("abc") == "abc"
    with pytest.raises(ValidationError, match="empty"):
        check_token("")
    with pytest.raises(ValidationError, match="Must be string"):
        check_token(123)


@pytest.mark.parametrize("value", [0, 5, "5", " 7", "-1", "1.5", ".5", "1e3", 2.5])
def test_numeric_values(value: object) -> None:
    assert is_numeric(value)
    assert check_integration_id(value) == value


@pytest.mark.parametrize(
    "value", ["", "abc", "5a", "1.2.3", None, True, [1], float("nan"), float("inf"), float("-inf")]
)
def test_non_numeric_values(value: object) -> None:
    assert not is_numeric(value)
    with pytest.raises(ValidationError):
        check_integration_id(value)


@pytest.mark.parametrize("name", ["Acme", "Acme-Store1", "A", "my.shop", "Магазин", "Two words"])
def test_sender_name_accepted(name: str) -> None:
    assert check_sender_name(name) == name


@pytest.mark.parametrize("name", ["", "TwelveChars!", "Acme-Store12", "Shop!", "a+b", None])
def test_sender_name_rejected(name: object) -> None:
    with pytest.raises(ValidationError, match="alpha-name"):
        check_sender_name(name)


def test_message_type_only() -> None:
    assert check_message("") == ""
    assert check_message("Привіт") == "Привіт"
    with pytest.raises(ValidationError, match="Message must be string"):
        check_message(None)


def test_normalize_phone_strips_formatting() -> None:
    assert normalize_phone("+38 (050) 123-45-67") == "380501234567"
    assert normalize_phone(380501234567) == "380501234567"
    assert normalize_phone(380501234567.0) == "380501234567"


def test_normalize_phone_is_idempotent() -> None:
    phone = "380501234567"
    assert normalize_phone(phone) == phone
    assert normalize_phone(normalize_phone(phone)) == phone


@pytest.mark.parametrize("phone", ["123", "0501234567", "3805012345678", "390501234567", ""])
def test_normalize_phone_rejects_bad_numbers(phone: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        normalize_phone(phone)
    assert str(exc_info.value) == f"Wrong phone number: {phone}"


def test_error_names_raw_phone_value() -> None:
    with pytest.raises(ValidationError, match=r"\+1 \(555\) 000"):
        normalize_phone("+1 (555) 000")


def test_check_sms_id() -> None:
    assert check_sms_id("123") == "123"
    assert check_sms_id(123) == 123
    with pytest.raises(ValidationError, match="Wrong SMS ID: x1"):
        check_sms_id("x1")


def test_as_batch_wraps_scalars() -> None:
    assert as_batch("380501234567") == ["380501234567"]
    assert as_batch(42) == [42]
    assert as_batch(("a", "b")) == ["a", "b"]


def test_as_batch_takes_mapping_values() -> None:
    assert as_batch({"a": "380501234567", "b": "380671234567"}) == ["380501234567", "380671234567"]
    assert prepare_sms_ids({10: "7", 11: "8"}) == ["7", "8"]


def test_as_batch_limit() -> None:
    assert len(as_batch(["1"] * 100)) == 100
    with pytest.raises(LimitExceededError, match="no more than 100 IDs"):
        as_batch(["1"] * 101, noun="IDs")


def test_as_batch_rejects_empty_and_unknown() -> None:
    with pytest.raises(ValidationError):
        as_batch([])
    with pytest.raises(ValidationError):
        as_batch(None)


def test_find_duplicates_lists_each_once_in_order() -> None:
    values = ["b", "a", "b", "c", "a", "b"]
    assert find_duplicates(values) == ["b", "a"]
    assert find_duplicates(["a", "b"]) == []


def test_check_duplicates_message() -> None:
    values = ["380501234567", "380671234567"]
    assert check_duplicates(values) is values

    with pytest.raises(DuplicateError) as exc_info:
        check_duplicates(["380501234567", "380671234567", "380501234567", "380671234567"])
    assert str(exc_info.value) == "You have duplicate in array: 380501234567, 380671234567"


def test_prepare_phones_detects_duplicates_after_normalisation() -> None:
    phones = prepare_phones(["+380501234567", "380 50 123 45 67"])
    assert phones == ["380501234567", "380501234567"]
    with pytest.raises(DuplicateError):
        check_duplicates(phones)


def test_prepare_sms_ids() -> None:
    assert prepare_sms_ids(5) == [5]
    assert prepare_sms_ids(["1", 2]) == ["1", 2]
    with pytest.raises(ValidationError, match="Wrong SMS ID: abc"):
        prepare_sms_ids(["1", "abc"])
