"""
Input normalization shared by every write operation.

Empty strings and None both mean "absent" for optional fields. Each optional
field type has exactly one normalizer; required fields go through the
``require_*`` variants. All of them raise InvalidInput naming the field, so a
value the database column cannot hold never reaches the database.
"""

import math
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation

from belongings.core.exceptions import InvalidInput

_INTEGER_RE = re.compile(r"^[+-]?\d+$")

# Integer columns are 32-bit signed on PostgreSQL.
MAX_INTEGER = 2**31 - 1
# Numeric(12, 2): ten integer digits, two fractional.
MONEY_PLACES = 2
MONEY_INTEGER_DIGITS = 10


def is_absent(value) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def normalize_text(value, field: str | None = None, max_length: int | None = None) -> str | None:
    if is_absent(value):
        return None
    text = str(value).strip()
    if max_length is not None and len(text) > max_length:
        raise InvalidInput(
            f"{field or 'value'} must be at most {max_length} characters",
            details=f"got {len(text)} characters",
            field=field,
        )
    return text


def require_text(value, field: str, max_length: int | None = None) -> str:
    text = normalize_text(value, field, max_length)
    if text is None:
        raise InvalidInput(f"{field} is required", field=field)
    return text


def normalize_int(value, field: str, max_value: int = MAX_INTEGER) -> int | None:
    """Optional integer in 0..max_value. Integral floats (e.g. 12.0) are accepted."""
    if is_absent(value):
        return None
    if isinstance(value, bool):
        raise InvalidInput(f"{field} must be a whole number", field=field)
    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise InvalidInput(f"{field} must be a whole number", field=field)
        number = int(value)
    else:
        text = str(value).strip()
        if not _INTEGER_RE.match(text):
            raise InvalidInput(f"{field} must be a whole number", details=f"got {text!r}", field=field)
        number = int(text)
    if number < 0:
        raise InvalidInput(f"{field} must not be negative", field=field)
    if number > max_value:
        raise InvalidInput(f"{field} must be at most {max_value}", details=f"got {number}", field=field)
    return number


def normalize_decimal(value, field: str) -> Decimal | None:
    """
    Optional non-negative money amount. NaN and infinities are rejected, and so
    is anything the column would round or overflow: more than two decimal
    places, or ten or more digits before the point.
    """
    if is_absent(value):
        return None
    if isinstance(value, bool):
        raise InvalidInput(f"{field} must be a number", field=field)
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        raise InvalidInput(f"{field} must be a number", details=f"got {value!r}", field=field) from None
    if not number.is_finite():
        raise InvalidInput(f"{field} must be a number", details=f"got {value!r}", field=field)
    if number < 0:
        raise InvalidInput(f"{field} must not be negative", field=field)
    if number >= Decimal(10) ** MONEY_INTEGER_DIGITS:
        raise InvalidInput(
            f"{field} must be less than {10 ** MONEY_INTEGER_DIGITS}", details=f"got {value!r}", field=field
        )
    if number != number.quantize(Decimal(1).scaleb(-MONEY_PLACES)):
        raise InvalidInput(
            f"{field} must have at most {MONEY_PLACES} decimal places", details=f"got {value!r}", field=field
        )
    return number


def normalize_date(value, field: str) -> date | None:
    """Optional calendar date from a date, a datetime, or ISO-8601 text."""
    if is_absent(value):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        raise InvalidInput(f"{field} must be an ISO date (YYYY-MM-DD)", details=f"got {text!r}", field=field) from None


def require_date(value, field: str) -> date:
    parsed = normalize_date(value, field)
    if parsed is None:
        raise InvalidInput(f"{field} is required", field=field)
    return parsed
