"""Render parsed statement data as CSV text.

Cells are joined with bare commas; no value is quoted or escaped.
"""
from typing import Dict, Iterable, List, Optional, Union

from .models import ParsedData
from .normalizer import normalize, sort_by_kind

COMBINED = "combined"
SEPARATE = "separate"
MODES = (COMBINED, SEPARATE)

COMBINED_HEADER = "Type,Date,Settlement Date,Price,Quantity,Withheld,Issued"
RELEASES_HEADER = "Release Date,Settlement Date,Release Price,Quantity,Withheld,Issued"
SALES_HEADER = "Settlement Date,Market Price Per Unit,Shares Sold"
ESPP_HEADER = "Purchase Date,Purchase Price,Shares Purchased"


def _cell(value: Optional[object]) -> str:
    # None means "not applicable" and stays empty; 0 is a real value
    return "" if value is None else str(value)


def _table(header: str, rows: Iterable[Iterable[Optional[object]]]) -> str:
    lines: List[str] = [header]
    for row in rows:
        lines.append(",".join(_cell(v) for v in row))
    return "\n".join(lines)


def render_combined(data: ParsedData) -> str:
    """One chronological table of every record kind."""
    return _table(
        COMBINED_HEADER,
        (
            (r.kind, r.date, r.settlement_date, r.price, r.quantity, r.withheld, r.issued)
            for r in normalize(data)
        ),
    )


def render_separate(data: ParsedData) -> Dict[str, str]:
    """Three tables keyed releases / sales / espp_purchases, each sorted by its own date."""
    ordered = sort_by_kind(data)
    return {
        "releases": _table(
            RELEASES_HEADER,
            (
                (r.release_date, r.settlement_date, r.release_price, r.quantity, r.withheld, r.issued)
                for r in ordered.releases
            ),
        ),
        "sales": _table(
            SALES_HEADER,
            ((s.settlement_date, s.market_price_per_unit, s.shares_sold) for s in ordered.sales),
        ),
        "espp_purchases": _table(
            ESPP_HEADER,
            ((p.purchase_date, p.purchase_price, p.shares_purchased) for p in ordered.espp_purchases),
        ),
    }


def render(data: ParsedData, mode: str = COMBINED) -> Union[str, Dict[str, str]]:
    if mode == COMBINED:
        return render_combined(data)
    if mode == SEPARATE:
        return render_separate(data)
    raise ValueError(f"Unknown render mode {mode!r}; expected one of {', '.join(MODES)}")
