"""Project records onto one comparable shape and order them by date."""
import re
from datetime import date
from typing import List

from .models import ESPPPurchase, NormalizedRecord, ParsedData, Release, Sale

RELEASE = "Release"
SALE = "Sale"
ESPP_PURCHASE = "ESPP Purchase"

# Statements print the month title-cased; "DEC" is rejected
_MONTHS = {
    "Jan": 1, "Feb": 2, "Mar": 3, "Apr": 4, "May": 5, "Jun": 6,
    "Jul": 7, "Aug": 8, "Sep": 9, "Oct": 10, "Nov": 11, "Dec": 12,
}
_DATE_RE = re.compile(r"(\d{2})-([A-Za-z]{3})-(\d{4})")


class StatementDateError(ValueError):
    """A record date is not a valid DD-MMM-YYYY calendar date."""
    pass


def parse_date(value: str) -> date:
    """'15-Mar-2023' -> date(2023, 3, 15). Raises StatementDateError on anything else."""
    m = _DATE_RE.fullmatch(value or "")
    if not m:
        raise StatementDateError(f"Unrecognized date {value!r}, expected DD-MMM-YYYY")
    day, month_name, year = m.groups()
    month = _MONTHS.get(month_name)
    if month is None:
        raise StatementDateError(f"Unknown month {month_name!r} in date {value!r}")
    try:
        return date(int(year), month, int(day))
    except ValueError as e:
        raise StatementDateError(f"Invalid calendar date {value!r}: {e}") from e


def _from_release(r: Release) -> NormalizedRecord:
    return NormalizedRecord(
        kind=RELEASE,
        date=r.release_date,
        settlement_date=r.settlement_date,
        price=r.release_price,
        quantity=r.quantity,
        withheld=r.withheld,
        issued=r.issued,
        sort_key=parse_date(r.release_date),
    )


def _from_sale(s: Sale) -> NormalizedRecord:
    return NormalizedRecord(
        kind=SALE,
        date=s.settlement_date,
        settlement_date=s.settlement_date,
        price=s.market_price_per_unit,
        quantity=s.shares_sold,
        withheld=None,
        issued=None,
        sort_key=parse_date(s.settlement_date),
    )


def _from_espp(p: ESPPPurchase) -> NormalizedRecord:
    return NormalizedRecord(
        kind=ESPP_PURCHASE,
        date=p.purchase_date,
        settlement_date=p.purchase_date,
        price=p.purchase_price,
        quantity=p.shares_purchased,
        withheld=None,
        issued=None,
        sort_key=parse_date(p.purchase_date),
    )


def normalize(data: ParsedData) -> List[NormalizedRecord]:
    """All records, oldest first. Same-date records keep releases, sales, ESPP order."""
    records: List[NormalizedRecord] = []
    records.extend(_from_release(r) for r in data.releases)
    records.extend(_from_sale(s) for s in data.sales)
    records.extend(_from_espp(p) for p in data.espp_purchases)
    # sorted() is stable
    return sorted(records, key=lambda r: r.sort_key)


def sort_releases(releases: List[Release]) -> List[Release]:
    return sorted(releases, key=lambda r: parse_date(r.release_date))


def sort_sales(sales: List[Sale]) -> List[Sale]:
    return sorted(sales, key=lambda s: parse_date(s.settlement_date))


def sort_espp_purchases(purchases: List[ESPPPurchase]) -> List[ESPPPurchase]:
    return sorted(purchases, key=lambda p: parse_date(p.purchase_date))


def sort_by_kind(data: ParsedData) -> ParsedData:
    """Each record list sorted independently by its own date."""
    return ParsedData(
        releases=sort_releases(data.releases),
        sales=sort_sales(data.sales),
        espp_purchases=sort_espp_purchases(data.espp_purchases),
    )
