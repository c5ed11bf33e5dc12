import datetime

import pytest

from expense_tracker.client.errors import ValidationError
from expense_tracker.client.validation import (
    AMOUNT_INVALID,
    DATE_REQUIRED,
    LABEL_REQUIRED,
    validate_fields,
)

VALID = {"label": "  Lunch ", "amount": "12.50", "date": "2024-03-05", "category": "Food", "type": "expense"}


def test_valid_fields_are_normalized():
    cleaned = validate_fields(VALID)
    assert cleaned["label"] == "Lunch"
    assert cleaned["amount"] == 12.5
    assert cleaned["date"] == "2024-03-05"
    assert cleaned["category"] == "Food"


def test_date_objects_are_accepted():
    cleaned = validate_fields({**VALID, "date": datetime.date(2024, 3, 5)})
    assert cleaned["date"] == "2024-03-05"


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"label": ""}, LABEL_REQUIRED),
        ({"label": "   "}, LABEL_REQUIRED),
        ({"date": ""}, DATE_REQUIRED),
        ({"date": None}, DATE_REQUIRED),
        ({"date": "not a date"}, DATE_REQUIRED),
        ({"amount": "abc"}, AMOUNT_INVALID),
        ({"amount": ""}, AMOUNT_INVALID),
        ({"amount": 0}, AMOUNT_INVALID),
        ({"amount": -3}, AMOUNT_INVALID),
        ({"amount": "nan"}, AMOUNT_INVALID),
    ],
)
def test_each_rule_rejects_independently(overrides, message):
    with pytest.raises(ValidationError) as exc:
        validate_fields({**VALID, **overrides})
    assert exc.value.message == message


def test_missing_fields_fail_on_create():
    with pytest.raises(ValidationError) as exc:
        validate_fields({"label": "Rent", "amount": 900})
    assert exc.value.message == DATE_REQUIRED


def test_first_failing_rule_wins():
    with pytest.raises(ValidationError) as exc:
        validate_fields({"label": " ", "date": "", "amount": 0})
    assert exc.value.message == LABEL_REQUIRED

    with pytest.raises(ValidationError) as exc:
        validate_fields({"label": "Rent", "date": "", "amount": 0})
    assert exc.value.message == DATE_REQUIRED


def test_partial_skips_absent_fields():
    assert validate_fields({"amount": "7"}, partial=True) == {"amount": 7.0}
    assert validate_fields({"category": "Bills"}, partial=True) == {"category": "Bills"}

    with pytest.raises(ValidationError) as exc:
        validate_fields({"amount": 0}, partial=True)
    assert exc.value.message == AMOUNT_INVALID

    with pytest.raises(ValidationError) as exc:
        validate_fields({"label": ""}, partial=True)
    assert exc.value.message == LABEL_REQUIRED


def test_trailing_garbage_after_date_is_rejected():
    with pytest.raises(ValidationError) as exc:
        validate_fields({**VALID, "date": "2024-01-01garbage"})
    assert exc.value.message == DATE_REQUIRED


def test_iso_datetime_strings_are_reduced_to_their_date():
    assert validate_fields({**VALID, "date": "2024-01-01T00:00:00Z"})["date"] == "2024-01-01"
    assert validate_fields({**VALID, "date": "2024-01-01T13:45:00"})["date"] == "2024-01-01"
