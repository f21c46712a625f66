"""Named field patterns and first-match extraction helpers.

Every pattern has exactly one capturing group. A pattern that does not match
means the field is absent; callers decide whether that skips the record.
"""
import re
from typing import Optional, Pattern

DATE = r"\d{2}-\w{3}-\d{4}"
AMOUNT = r"[\d,]*\.?\d+"
COUNT = r"[\d,]+"

RELEASE_DATE = re.compile(rf"Release Date:\s*({DATE})")
SETTLEMENT_DATE = re.compile(rf"Settlement Date:\s*({DATE})")
RELEASE_PRICE = re.compile(rf"Release Price:\s*\$({AMOUNT})\s*USD")
RELEASED_QUANTITY = re.compile(rf"Number of Restricted Awards Released:\s*({COUNT})")
# Older statements label the tax withholding "Sold" and the net shares "Disbursed"
WITHHELD_QUANTITY = re.compile(rf"Number of Restricted Awards (?:Withheld|Sold):\s*({COUNT})")
ISSUED_QUANTITY = re.compile(rf"Number of Restricted Awards (?:Issued|Disbursed):\s*({COUNT})")

MARKET_PRICE_PER_UNIT = re.compile(rf"Market Price Per Unit:\s*\$({AMOUNT})\s*USD")
SHARES_SOLD = re.compile(rf"Shares Sold:\s*({COUNT})")


def extract_field(text: str, pattern: Pattern[str]) -> Optional[str]:
    """Return group 1 of the first match, or None."""
    m = pattern.search(text)
    if not m:
        return None
    return m.group(1)


def to_int(value: Optional[str]) -> Optional[int]:
    """'1,250' -> 1250. Anything that is not a whole number -> None."""
    if value is None:
        return None
    digits = value.replace(",", "").strip()
    if not digits.isdigit():
        return None
    return int(digits)


def to_decimal(value: Optional[str]) -> Optional[str]:
    """Drop grouping commas from a price, keeping it as text ('1,045.50' -> '1045.50')."""
    if value is None:
        return None
    cleaned = value.replace(",", "").strip()
    return cleaned or None


def extract_int(text: str, pattern: Pattern[str]) -> Optional[int]:
    return to_int(extract_field(text, pattern))


def extract_decimal(text: str, pattern: Pattern[str]) -> Optional[str]:
    return to_decimal(extract_field(text, pattern))
