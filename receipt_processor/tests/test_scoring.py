# tests/test_scoring.py
from receipt_processor.schemas import Receipt
from receipt_processor.services.scoring import calculate_points, score_breakdown

def test_target_receipt(target_receipt):
    assert calculate_points(Receipt.model_validate(target_receipt)) == 28

def test_corner_market_receipt(corner_market_receipt):
    # 14 + 5 + 1 + 10
    assert calculate_points(Receipt.model_validate(corner_market_receipt)) == 30

def test_corner_market_gatorade_receipt():
    r = Receipt.model_validate({
        "retailer": "M&M Corner Market",
        "purchaseDate": "2022-03-20",
        "purchaseTime": "14:33",
        "items": [{"shortDescription": "Gatorade", "price": "2.25"}] * 4,
        "total": "9.00",
    })
    assert calculate_points(r) == 109

def test_breakdown_sums_to_points(target_receipt):
    r = Receipt.model_validate(target_receipt)
    breakdown = score_breakdown(r)
    assert sum(res.points for res in breakdown) == calculate_points(r)
    assert {res.rule: res.points for res in breakdown}["item_pairs"] == 10

def test_deterministic(corner_market_receipt):
    r = Receipt.model_validate(corner_market_receipt)
    assert len({calculate_points(r) for _ in range(5)}) == 1

def test_empty_receipt_never_fails():
    # "" total -> 0 (multiple of 0.25), bad date -> day 1 (odd)
    assert calculate_points(Receipt()) == 25 + 6

def test_garbage_fields_score_non_negative():
    r = Receipt.model_validate({
        "retailer": "!!!",
        "purchaseDate": "yesterday",
        "purchaseTime": "teatime",
        "items": [{"shortDescription": "abc", "price": "-99.99"}],
        "total": "-1.13",
    })
    assert calculate_points(r) >= 0

def test_breakdown_with_custom_rules(target_receipt):
    from receipt_processor.rules.ruleset import RuleResult, item_pairs

    flat = lambda receipt: RuleResult("flat", 7, "always")
    breakdown = score_breakdown(Receipt.model_validate(target_receipt), rules=[item_pairs, flat])
    assert [(r.rule, r.points) for r in breakdown] == [("item_pairs", 10), ("flat", 7)]
