# receipt_processor/rules/ruleset.py
import math
import re
from decimal import Decimal
from typing import Callable, List, NamedTuple

from ..schemas import Receipt
from ..utils.parsing import parse_amount, parse_purchase_date, parse_purchase_time

# -----------------------------
# Tunables
# -----------------------------
ALNUM_RE = re.compile(r"[a-zA-Z0-9]")

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE = Decimal("0.25")
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
DESCRIPTION_MULTIPLE = 3
DESCRIPTION_PRICE_FACTOR = Decimal("0.2")
ODD_DAY_POINTS = 6
AFTERNOON_START_HOUR = 14   # inclusive
AFTERNOON_END_HOUR = 16     # exclusive
AFTERNOON_POINTS = 10


class RuleResult(NamedTuple):
    rule: str
    points: int
    reason: str

Rule = Callable[[Receipt], RuleResult]

# -----------------------------
# Rules
# -----------------------------
def retailer_name(receipt: Receipt) -> RuleResult:
    """One point for every ASCII letter or digit in the retailer name."""
    n = len(ALNUM_RE.findall(receipt.retailer))
    return RuleResult("retailer_name", n, f"{n} alphanumeric characters in {receipt.retailer!r}")

def round_dollar_total(receipt: Receipt) -> RuleResult:
    # literal suffix check, the total is never parsed here
    hit = receipt.total.endswith(".00")
    return RuleResult("round_dollar_total", ROUND_DOLLAR_POINTS if hit else 0,
                      f"total {receipt.total!r} {'is' if hit else 'is not'} a round dollar amount")

def quarter_multiple_total(receipt: Receipt) -> RuleResult:
    quarters = parse_amount(receipt.total) / QUARTER_MULTIPLE
    hit = quarters == quarters.to_integral_value()
    return RuleResult("quarter_multiple_total", QUARTER_MULTIPLE_POINTS if hit else 0,
                      f"total {receipt.total!r} {'is' if hit else 'is not'} a multiple of 0.25")

def item_pairs(receipt: Receipt) -> RuleResult:
    count = len(receipt.items)
    return RuleResult("item_pairs", (count // 2) * ITEM_PAIR_POINTS, f"{count} items")

def description_length(receipt: Receipt) -> RuleResult:
    """
    For each item whose trimmed description length is a positive multiple of 3,
    award ceil(price * 0.2). An item never contributes less than zero.
    """
    total = 0
    matched: List[str] = []
    for item in receipt.items:
        description = item.short_description.strip()
        if not description or len(description) % DESCRIPTION_MULTIPLE:
            continue
        price = parse_amount(item.price)
        total += max(0, math.ceil(price * DESCRIPTION_PRICE_FACTOR))
        matched.append(description)
    return RuleResult("description_length", total, f"qualifying descriptions: {matched}")

def odd_purchase_day(receipt: Receipt) -> RuleResult:
    day = parse_purchase_date(receipt.purchase_date).day
    hit = day % 2 == 1
    return RuleResult("odd_purchase_day", ODD_DAY_POINTS if hit else 0,
                      f"purchase date {receipt.purchase_date!r} (day {day})")

def afternoon_purchase(receipt: Receipt) -> RuleResult:
    t = parse_purchase_time(receipt.purchase_time)
    hit = AFTERNOON_START_HOUR <= t.hour < AFTERNOON_END_HOUR
    return RuleResult("afternoon_purchase", AFTERNOON_POINTS if hit else 0,
                      f"purchase time {receipt.purchase_time!r}")

# rule 6 is reserved: no points for the total itself
DEFAULT_RULES: List[Rule] = [
    retailer_name,
    round_dollar_total,
    quarter_multiple_total,
    item_pairs,
    description_length,
    odd_purchase_day,
    afternoon_purchase,
]
