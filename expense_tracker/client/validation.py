"""Client-side checks run on candidate fields before any request is issued.

The rules run in a fixed order and the first failing rule wins, so a form
with several problems always reports the same message.
"""
import datetime
import math
from typing import Any, Mapping

from expense_tracker.client.errors import ValidationError

LABEL_REQUIRED = "Description is required."
DATE_REQUIRED = "Date is required."
AMOUNT_INVALID = "Please enter a valid amount greater than 0."


def _check_label(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(LABEL_REQUIRED)
    return value.strip()


def _check_date(value: Any) -> str:
    if isinstance(value, datetime.datetime):
        return value.date().isoformat()
    if isinstance(value, datetime.date):
        return value.isoformat()
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(DATE_REQUIRED)
    text = value.strip()
    # A date input that cannot be read yields no date at all
    try:
        if "T" in text:
            return datetime.datetime.fromisoformat(text.replace("Z", "+00:00")).date().isoformat()
        return datetime.date.fromisoformat(text).isoformat()
    except ValueError:
        raise ValidationError(DATE_REQUIRED)


def _check_amount(value: Any) -> float:
    if value is None or isinstance(value, bool):
        raise ValidationError(AMOUNT_INVALID)
    try:
        amount = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        raise ValidationError(AMOUNT_INVALID)
    if not math.isfinite(amount) or amount <= 0:
        raise ValidationError(AMOUNT_INVALID)
    return amount


_RULES = (
    ("label", _check_label),
    ("date", _check_date),
    ("amount", _check_amount),
)


def validate_fields(fields: Mapping[str, Any], partial: bool = False) -> dict[str, Any]:
    """Validate and normalize candidate transaction fields.

    With ``partial`` set, rules whose field is absent are skipped (used for
    updates that only touch some fields). Returns a copy of ``fields`` with
    the label trimmed, the date as an ISO string and the amount as a float.
    Raises :class:`ValidationError` on the first failing rule.
    """
    cleaned = dict(fields)
    for name, check in _RULES:
        if partial and name not in fields:
            continue
        cleaned[name] = check(fields.get(name))
    return cleaned
