"""Per-kind totals for a parsed statement."""
import pandas as pd

from .models import ParsedData
from .normalizer import ESPP_PURCHASE, RELEASE, SALE, normalize

KINDS = [RELEASE, SALE, ESPP_PURCHASE]
SUMMARY_COLUMNS = ["type", "records", "total_quantity", "first_date", "last_date"]


def summarize(data: ParsedData) -> pd.DataFrame:
    """
    DataFrame: type, records, total_quantity, first_date, last_date.
    One row per record kind present, in Release / Sale / ESPP Purchase order.
    Raises StatementDateError like normalize().
    """
    records = normalize(data)
    if not records:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    df = pd.DataFrame([
        {"type": r.kind, "date": r.date, "quantity": r.quantity}
        for r in records
    ])
    # records arrive oldest first, so first/last are the date range
    agg = df.groupby("type").agg(
        records=("quantity", "count"),
        total_quantity=("quantity", "sum"),
        first_date=("date", "first"),
        last_date=("date", "last"),
    )
    order = [k for k in KINDS if k in agg.index]
    return agg.loc[order].reset_index()
