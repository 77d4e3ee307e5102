# receipt_processor/utils/parsing.py
import re
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
TIME_RE = re.compile(r"\d{1,2}:\d{2}")

ZERO = Decimal(0)
MAX_MAGNITUDE = 18  # decimal exponent; anything larger is not a receipt amount

def parse_amount(text: str | None) -> Decimal:
    """
    Parse a money string such as "12.50".
    Anything unparsable (padding, digit separators, NaN/Infinity) becomes 0
    so scoring can go on.
    """
    text = text or ""
    if "_" in text or text != text.strip():
        return ZERO
    try:
        value = Decimal(text)
    except (InvalidOperation, ValueError):
        return ZERO
    if not value.is_finite() or abs(value.adjusted()) > MAX_MAGNITUDE:
        return ZERO
    return value

def parse_purchase_date(text: str | None) -> date:
    # YYYY-MM-DD only, falls back to 0001-01-01
    if not DATE_RE.fullmatch(text or ""):
        return date.min
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError:
        return date.min

def parse_purchase_time(text: str | None) -> time:
    # HH:MM only, falls back to 00:00
    if not TIME_RE.fullmatch(text or ""):
        return time.min
    try:
        return datetime.strptime(text, TIME_FORMAT).time()
    except ValueError:
        return time.min
