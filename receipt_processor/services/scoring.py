# scoring.py
from __future__ import annotations
from typing import List

from ..rules.ruleset import DEFAULT_RULES, Rule, RuleResult
from ..schemas import Receipt
from ..utils.logging import logger

def score_breakdown(receipt: Receipt, rules: List[Rule] | None = None) -> List[RuleResult]:
    """Run every rule against the receipt and return each contribution, in rule order."""
    return [rule(receipt) for rule in (DEFAULT_RULES if rules is None else rules)]

def calculate_points(receipt: Receipt) -> int:
    """
    Returns the loyalty points for a receipt.
    Pure apart from logging: unparsable fields count as zero values, nothing raises.
    """
    points = 0
    for result in score_breakdown(receipt):
        logger.debug("%s: %d points (%s)", result.rule, result.points, result.reason)
        points += result.points
    logger.info("Receipt from %r scored %d points", receipt.retailer, points)
    return points
