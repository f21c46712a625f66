"""Tests for date parsing, normalization and sorting."""
from datetime import date

import pytest

from stockplan import parse
from stockplan.models import ESPPPurchase, ParsedData, Release, Sale
from stockplan.normalizer import (
    StatementDateError,
    normalize,
    parse_date,
    sort_by_kind,
    sort_releases,
)


def _release(release_date, quantity=10):
    return Release(
        release_date=release_date,
        settlement_date=release_date,
        release_price="10.00",
        quantity=quantity,
        withheld=0,
        issued=quantity,
    )


class TestParseDate:

    def test_valid(self):
        assert parse_date("15-Mar-2023") == date(2023, 3, 15)

    def test_month_must_be_title_case(self):
        with pytest.raises(StatementDateError, match="Unknown month"):
            parse_date("01-DEC-2021")

    @pytest.mark.parametrize("value", [
        "1-Jan-2022",
        "2022-01-01",
        "01/01/2022",
        "15-Xyz-2023",
        "31-Feb-2023",
        "15-Mar-23",
        "",
    ])
    def test_rejects_everything_else(self, value):
        with pytest.raises(StatementDateError):
            parse_date(value)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError, match="DD-MMM-YYYY"):
            parse_date("March 15, 2023")


class TestNormalize:

    def test_statement_chronological(self, statement_text):
        records = normalize(parse(statement_text))
        assert [(r.kind, r.date) for r in records] == [
            ("Release", "01-Jan-2021"),
            ("ESPP Purchase", "30-Jun-2021"),
            ("ESPP Purchase", "31-Dec-2021"),
            ("Release", "01-Jan-2022"),
            ("Sale", "14-Feb-2022"),
        ]

    def test_projection(self, statement_text):
        records = normalize(parse(statement_text))
        sale = records[-1]
        assert sale.settlement_date == "14-Feb-2022"
        assert sale.price == "1100.25"
        assert sale.quantity == 300
        assert sale.withheld is None
        assert sale.issued is None
        assert sale.sort_key == date(2022, 2, 14)
        espp = records[1]
        assert espp.settlement_date == espp.date

    def test_same_date_keeps_extraction_order(self):
        data = ParsedData(
            releases=[_release("01-May-2023", 1), _release("01-May-2023", 2)],
            sales=[Sale("01-May-2023", "5.00", 3)],
            espp_purchases=[ESPPPurchase("01-May-2023", "4.00", 4)],
        )
        assert [r.quantity for r in normalize(data)] == [1, 2, 3, 4]

    def test_monotonic(self, statement_text):
        keys = [r.sort_key for r in normalize(parse(statement_text))]
        assert keys == sorted(keys)

    def test_bad_date_aborts(self):
        data = ParsedData(
            releases=[_release("01-Jan-2022")],
            sales=[Sale("2022-02-14", "5.00", 3)],
        )
        with pytest.raises(StatementDateError):
            normalize(data)

    def test_empty(self):
        assert normalize(ParsedData()) == []


class TestSortByKind:

    def test_releases_oldest_first(self):
        ordered = sort_releases([_release("01-Jan-2022"), _release("01-Jan-2021")])
        assert [r.release_date for r in ordered] == ["01-Jan-2021", "01-Jan-2022"]

    def test_each_kind_sorted_independently(self, statement_text, purchase_history_text):
        data = parse(statement_text)
        history = parse(purchase_history_text)
        ordered = sort_by_kind(ParsedData(data.releases, data.sales, history.espp_purchases))
        assert [r.release_date for r in ordered.releases] == ["01-Jan-2021", "01-Jan-2022"]
        assert [p.purchase_date for p in ordered.espp_purchases] == ["31-Dec-2022", "30-Jun-2023"]

    def test_input_not_mutated(self):
        releases = [_release("01-Jan-2022"), _release("01-Jan-2021")]
        sort_by_kind(ParsedData(releases=releases))
        assert releases[0].release_date == "01-Jan-2022"
