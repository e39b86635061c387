"""Points rules for receipts.

Each rule reads the raw receipt fields and returns its own contribution.
Rules never interact: a field that fails to parse only zeroes the rule that
reads it.
"""
import logging
from typing import Dict

from receipt_points.errors import FieldParseFailure
from receipt_points.parse.models import Receipt
from receipt_points.scoring.fields import parse_amount, parse_day, parse_hour, truncate_int64

logger = logging.getLogger(__name__)

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
AFTERNOON_START_HOUR = 14
AFTERNOON_END_HOUR = 16
DESCRIPTION_PRICE_MULTIPLIER = 0.2


def retailer_alphanumeric(receipt: Receipt) -> int:
    """One point per letter or digit in the retailer name."""
    return sum(1 for ch in receipt.retailer if ch.isalpha() or ch.isdecimal())


def round_dollar_total(receipt: Receipt) -> int:
    """50 points if the total has no cents."""
    try:
        total = parse_amount(receipt.total, "total")
    except FieldParseFailure as e:
        logger.debug(f"round_dollar_total skipped: {e}")
        return 0
    dollars = truncate_int64(total)
    if dollars is not None and total == dollars:
        return ROUND_DOLLAR_POINTS
    return 0


def quarter_multiple_total(receipt: Receipt, strict_total: bool = False) -> int:
    """
    25 points if the total in whole cents is a multiple of 25.

    Cents are computed as int(total * 100) on the float, so "35.35" becomes
    3534. An unparsable total counts as 0.0 and therefore qualifies, unless
    strict_total is set. A total too large for a double counts as infinity
    and never qualifies.
    """
    try:
        total = parse_amount(receipt.total, "total")
    except FieldParseFailure as e:
        if strict_total:
            logger.debug(f"quarter_multiple_total skipped: {e}")
            return 0
        logger.debug(f"quarter_multiple_total using {e.fallback}: {e}")
        total = e.fallback
    cents = truncate_int64(total * 100)
    if cents is not None and cents % 25 == 0:
        return QUARTER_MULTIPLE_POINTS
    return 0


def item_pairs(receipt: Receipt) -> int:
    """5 points for every two items."""
    return (len(receipt.items) // 2) * ITEM_PAIR_POINTS


def description_length(receipt: Receipt) -> int:
    """
    int(price * 0.2) + 1 for each item whose trimmed description length is a
    multiple of 3. An empty description qualifies.
    """
    points = 0
    for item in receipt.items:
        if len(item.short_description.strip()) % 3 != 0:
            continue
        try:
            price = parse_amount(item.price, "price")
        except FieldParseFailure as e:
            logger.debug(f"description_length skipped item: {e}")
            continue
        scaled = truncate_int64(price * DESCRIPTION_PRICE_MULTIPLIER)
        if scaled is None:
            logger.debug(f"description_length skipped item: price {item.price!r} out of range")
            continue
        points += scaled + 1
    return points


def odd_purchase_day(receipt: Receipt) -> int:
    """6 points if the day in the purchase date is odd."""
    try:
        day = parse_day(receipt.purchase_date)
    except FieldParseFailure as e:
        logger.debug(f"odd_purchase_day skipped: {e}")
        return 0
    if day % 2 == 1:
        return ODD_DAY_POINTS
    return 0


def afternoon_purchase(receipt: Receipt) -> int:
    """10 points if the purchase hour is 14 or 15."""
    try:
        hour = parse_hour(receipt.purchase_time)
    except FieldParseFailure as e:
        logger.debug(f"afternoon_purchase skipped: {e}")
        return 0
    if AFTERNOON_START_HOUR <= hour < AFTERNOON_END_HOUR:
        return AFTERNOON_POINTS
    return 0


def score_breakdown(receipt: Receipt, strict_total: bool = False) -> Dict[str, int]:
    """Return each rule's contribution, keyed by rule name, in rule order."""
    return {
        "retailer_alphanumeric": retailer_alphanumeric(receipt),
        "round_dollar_total": round_dollar_total(receipt),
        "quarter_multiple_total": quarter_multiple_total(receipt, strict_total=strict_total),
        "item_pairs": item_pairs(receipt),
        "description_length": description_length(receipt),
        "odd_purchase_day": odd_purchase_day(receipt),
        "afternoon_purchase": afternoon_purchase(receipt),
    }


def calculate_points(receipt: Receipt, strict_total: bool = False) -> int:
    """Total points for a receipt."""
    breakdown = score_breakdown(receipt, strict_total=strict_total)
    points = sum(breakdown.values())
    logger.debug(f"Scored receipt from {receipt.retailer!r}: {points} {breakdown}")
    return points
