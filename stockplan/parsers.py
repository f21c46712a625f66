"""Turn statement text into Release, Sale and ESPPPurchase records."""
import logging
import re
from typing import List

from .fields import (
    AMOUNT,
    COUNT,
    DATE,
    ISSUED_QUANTITY,
    MARKET_PRICE_PER_UNIT,
    RELEASE_DATE,
    RELEASE_PRICE,
    RELEASED_QUANTITY,
    SETTLEMENT_DATE,
    SHARES_SOLD,
    WITHHELD_QUANTITY,
    extract_decimal,
    extract_field,
    extract_int,
    to_decimal,
    to_int,
)
from .models import ESPPPurchase, ParsedData, Release, Sale
from .segmenter import RELEASE_MARKER, SALE_MARKER, segment

logger = logging.getLogger(__name__)

# Activity layout: "15-Mar-2023  You bought  $1,234.50  25  $49.38"
YOU_BOUGHT = re.compile(
    rf"({DATE})\s+You bought\s*\${AMOUNT}\s+({COUNT})\s+\$({AMOUNT})"
)
# Purchase history row: offering date, grant date, grant price, purchase date,
# purchase-date FMV, purchase price, shares
PURCHASE_HISTORY_ROW = re.compile(
    rf"{DATE}\s+{DATE}\s+\${AMOUNT}\s+({DATE})\s+\${AMOUNT}\s+\$({AMOUNT})\s+({COUNT})"
)


def _missing(**fields) -> List[str]:
    return [name for name, value in fields.items() if value is None]


def parse_releases(text: str) -> List[Release]:
    """One Release per release block carrying all required fields."""
    releases: List[Release] = []
    for i, block in enumerate(segment(text, RELEASE_MARKER), start=1):
        release_date = extract_field(block, RELEASE_DATE)
        settlement_date = extract_field(block, SETTLEMENT_DATE)
        price = extract_decimal(block, RELEASE_PRICE)
        quantity = extract_int(block, RELEASED_QUANTITY)
        issued = extract_int(block, ISSUED_QUANTITY)
        missing = _missing(
            release_date=release_date,
            settlement_date=settlement_date,
            release_price=price,
            quantity=quantity,
            issued=issued,
        )
        if missing:
            logger.debug("Skipping release block %d: missing %s", i, ", ".join(missing))
            continue
        # No withholding line means nothing was withheld; an unreadable one is not zero
        withheld_text = extract_field(block, WITHHELD_QUANTITY)
        withheld = to_int(withheld_text)
        if withheld_text is not None and withheld is None:
            logger.debug("Skipping release block %d: unreadable withheld quantity %r", i, withheld_text)
            continue
        releases.append(
            Release(
                release_date=release_date,
                settlement_date=settlement_date,
                release_price=price,
                quantity=quantity,
                withheld=withheld if withheld is not None else 0,
                issued=issued,
            )
        )
    return releases


def parse_sales(text: str) -> List[Sale]:
    """One Sale per withdrawal block with settlement date, price and shares sold."""
    sales: List[Sale] = []
    for i, block in enumerate(segment(text, SALE_MARKER), start=1):
        settlement_date = extract_field(block, SETTLEMENT_DATE)
        price = extract_decimal(block, MARKET_PRICE_PER_UNIT)
        shares = extract_int(block, SHARES_SOLD)
        missing = _missing(
            settlement_date=settlement_date,
            market_price_per_unit=price,
            shares_sold=shares,
        )
        if missing:
            logger.debug("Skipping withdrawal block %d: missing %s", i, ", ".join(missing))
            continue
        sales.append(
            Sale(
                settlement_date=settlement_date,
                market_price_per_unit=price,
                shares_sold=shares,
            )
        )
    return sales


def parse_espp_you_bought(text: str) -> List[ESPPPurchase]:
    """Purchases from 'You bought' activity lines anywhere in the document."""
    purchases: List[ESPPPurchase] = []
    for m in YOU_BOUGHT.finditer(text):
        shares = to_int(m.group(2))
        if shares is None:
            continue
        purchases.append(
            ESPPPurchase(
                purchase_date=m.group(1),
                purchase_price=to_decimal(m.group(3)),
                shares_purchased=shares,
            )
        )
    return purchases


def parse_espp_purchase_history(text: str) -> List[ESPPPurchase]:
    """Purchases from purchase-history table rows (older statement layout)."""
    purchases: List[ESPPPurchase] = []
    for m in PURCHASE_HISTORY_ROW.finditer(text):
        shares = to_int(m.group(3))
        if shares is None:
            continue
        purchases.append(
            ESPPPurchase(
                purchase_date=m.group(1),
                purchase_price=to_decimal(m.group(2)),
                shares_purchased=shares,
            )
        )
    return purchases


def parse_espp_purchases(text: str) -> List[ESPPPurchase]:
    """'You bought' layout first; the purchase-history layout only when that finds nothing."""
    purchases = parse_espp_you_bought(text)
    if purchases:
        return purchases
    purchases = parse_espp_purchase_history(text)
    if purchases:
        logger.debug("ESPP purchases taken from purchase history layout")
    return purchases


def parse(raw_text: str) -> ParsedData:
    """Extract every record kind from one statement's plain text."""
    data = ParsedData(
        releases=parse_releases(raw_text),
        sales=parse_sales(raw_text),
        espp_purchases=parse_espp_purchases(raw_text),
    )
    logger.info(
        "Parsed %d releases, %d sales, %d ESPP purchases",
        len(data.releases),
        len(data.sales),
        len(data.espp_purchases),
    )
    return data
