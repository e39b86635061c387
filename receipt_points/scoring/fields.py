"""Lenient parsing of receipt amount, date and time strings."""
import math
import re
from typing import Optional

from receipt_points.errors import FieldParseFailure

AMOUNT_PATTERN = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?$")
INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def parse_amount(value: str, field: str = "amount") -> float:
    """
    Parse a decimal string such as "6.49" into a float.

    No surrounding whitespace, underscores or inf/nan spellings are accepted,
    and values that overflow a double are rejected. The failure for an
    overflow carries the signed infinity as its fallback.
    """
    if not AMOUNT_PATTERN.match(value):
        raise FieldParseFailure(field, value)
    amount = float(value)
    if math.isinf(amount):
        raise FieldParseFailure(field, value, fallback=amount)
    return amount


def parse_integer(value: str, field: str = "integer") -> int:
    """Parse an optionally signed run of ASCII digits that fits in 64 bits."""
    if not INTEGER_PATTERN.match(value):
        raise FieldParseFailure(field, value)
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        raise FieldParseFailure(field, value)
    return number


def parse_day(purchase_date: str) -> int:
    """
    Extract the day of month from a YYYY-MM-DD string.

    Only the third "-" separated segment is read; no calendar validation is
    done, so "2022-02-31" yields 31.
    """
    parts = purchase_date.split("-")
    if len(parts) < 3:
        raise FieldParseFailure("purchaseDate", purchase_date)
    return parse_integer(parts[2], "purchaseDate")


def parse_hour(purchase_time: str) -> int:
    """Extract the hour from an HH:MM string. Minutes are not checked."""
    parts = purchase_time.split(":")
    if len(parts) != 2:
        raise FieldParseFailure("purchaseTime", purchase_time)
    return parse_integer(parts[0], "purchaseTime")


def truncate_int64(value: float) -> Optional[int]:
    """
    Truncate a float toward zero as a 64-bit integer.

    Returns None when the value is not finite or falls outside the int64
    range, so callers award nothing for it.
    """
    if not math.isfinite(value) or not INT64_MIN <= value < 2 ** 63:
        return None
    return int(value)
