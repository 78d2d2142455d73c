import logging
import re
from datetime import datetime
from decimal import Decimal
from typing import Optional

from receipt_processor.model.ReceiptModel import Receipt
from receipt_processor.model.ReceiptItemModel import ReceiptItem

logger = logging.getLogger(__name__)

ALPHANUMERIC_PATTERN = re.compile(r'[A-Za-z0-9]')
AMOUNT_PATTERN = re.compile(r'-?[0-9]+(\.[0-9]+)?')
MAX_AMOUNT_LENGTH = 64

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
DESCRIPTION_PRICE_DIVISOR = 5


def parse_amount(value) -> Optional[Decimal]:
    """Parse a plain decimal string exactly, returning None for anything else."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    # Exponent forms like 1e30000000 would build enormous integers below
    if len(value) > MAX_AMOUNT_LENGTH or not AMOUNT_PATTERN.fullmatch(value):
        return None
    return Decimal(value)


def retailer_points(receipt: Receipt) -> int:
    return len(ALPHANUMERIC_PATTERN.findall(receipt.retailer))


def round_dollar_points(receipt: Receipt) -> int:
    total = parse_amount(receipt.total)
    if total is None:
        logger.debug("Unparseable total %r, skipping round dollar rule", receipt.total)
        return 0
    _, denominator = total.as_integer_ratio()
    if denominator == 1:
        return ROUND_DOLLAR_POINTS
    return 0


def quarter_multiple_points(receipt: Receipt) -> int:
    total = parse_amount(receipt.total)
    if total is None:
        logger.debug("Unparseable total %r, skipping quarter multiple rule", receipt.total)
        return 0
    # Multiple of 0.25 exactly when 4 * total is a whole number
    numerator, denominator = total.as_integer_ratio()
    if (numerator * 4) % denominator == 0:
        return QUARTER_MULTIPLE_POINTS
    return 0


def item_pair_points(receipt: Receipt) -> int:
    return ITEM_PAIR_POINTS * (len(receipt.items) // 2)


def item_description_points(item: ReceiptItem) -> int:
    trimmed = item.description.strip()
    if not trimmed or len(trimmed) % 3 != 0:
        return 0

    price = parse_amount(item.price)
    if price is None:
        logger.debug("Unparseable price %r for item %r", item.price, trimmed)
        return 0
    # ceil(price * 0.2) in exact integer arithmetic
    numerator, denominator = price.as_integer_ratio()
    bonus = -(-numerator // (denominator * DESCRIPTION_PRICE_DIVISOR))
    return max(bonus, 0)


def description_points(receipt: Receipt) -> int:
    return sum(item_description_points(item) for item in receipt.items)


def odd_day_points(receipt: Receipt) -> int:
    try:
        purchase_date = datetime.strptime(receipt.purchase_date.strip(), "%Y-%m-%d")
    except ValueError:
        logger.debug("Unparseable purchase date %r", receipt.purchase_date)
        return 0
    if purchase_date.day % 2 == 1:
        return ODD_DAY_POINTS
    return 0


def afternoon_points(receipt: Receipt) -> int:
    try:
        purchase_time = datetime.strptime(receipt.purchase_time.strip(), "%H:%M")
    except ValueError:
        logger.debug("Unparseable purchase time %r", receipt.purchase_time)
        return 0

    # Strictly between 14:00 and 16:00, both ends excluded
    hour, minute = purchase_time.hour, purchase_time.minute
    if (hour == 14 and minute > 0) or hour == 15:
        return AFTERNOON_POINTS
    return 0


RULES = (
    retailer_points,
    round_dollar_points,
    quarter_multiple_points,
    item_pair_points,
    description_points,
    odd_day_points,
    afternoon_points,
)


def calculate_points(receipt: Receipt) -> int:
    """
    Score a receipt by summing every rule in RULES.

    Rules are independent of each other; a rule whose input can't be parsed
    contributes nothing instead of failing the whole receipt.
    """
    return sum(rule(receipt) for rule in RULES)
