"""Stock plan statement records - parsed transaction types."""
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional


@dataclass(frozen=True)
class Release:
    """Restricted stock unit release (vest). Dates are DD-MMM-YYYY display strings."""
    release_date: str
    settlement_date: str
    release_price: str
    quantity: int
    withheld: int
    issued: int


@dataclass(frozen=True)
class Sale:
    """Shares withdrawn and sold."""
    settlement_date: str
    market_price_per_unit: str
    shares_sold: int


@dataclass(frozen=True)
class ESPPPurchase:
    """Employee stock purchase plan buy."""
    purchase_date: str
    purchase_price: str
    shares_purchased: int


@dataclass(frozen=True)
class ParsedData:
    releases: List[Release] = field(default_factory=list)
    sales: List[Sale] = field(default_factory=list)
    espp_purchases: List[ESPPPurchase] = field(default_factory=list)


@dataclass(frozen=True)
class NormalizedRecord:
    """Any record projected onto the combined-table columns."""
    kind: str  # "Release" | "Sale" | "ESPP Purchase"
    date: str
    settlement_date: str
    price: str
    quantity: int
    withheld: Optional[int]  # None for Sale / ESPP Purchase
    issued: Optional[int]
    sort_key: date
