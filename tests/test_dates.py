"""
Unit tests for date extraction.
"""

from datetime import date

import pytest

from billscan.ocr_engine.document import Document
from billscan.parsing.dates import DateExtractor


@pytest.fixture
def dates():
    return DateExtractor()


class TestMonthNames:
    """Day, French month name, year"""

    def test_janvier(self, dates):
        assert dates.extract(["Facture du 12 janvier 2026"]) == date(2026, 1, 12)

    def test_accented_month(self, dates):
        assert dates.extract(["Le 3 février 2026"]) == date(2026, 2, 3)

    def test_unaccented_ocr_spelling(self, dates):
        assert dates.extract(["1 aout 2025"]) == date(2025, 8, 1)

    def test_uppercase_month(self, dates):
        assert dates.extract(["30 JUIN 2025"]) == date(2025, 6, 30)

    def test_decembre(self, dates):
        assert dates.extract(["Émise le 24 décembre 2025"]) == date(2025, 12, 24)

    def test_month_name_before_numeric_on_same_line(self, dates):
        assert dates.extract_from_line("12 janvier 2026 - 05/03/2026") == date(2026, 1, 12)

    def test_invalid_day_falls_back_to_numeric(self, dates):
        assert dates.extract_from_line("31 février 2026, payé le 02/03/2026") == date(2026, 3, 2)


class TestNumeric:
    """Day-first numeric dates"""

    def test_labelled_slash_date(self, dates):
        assert dates.extract(["Date : 05/03/2026"]) == date(2026, 3, 5)

    def test_hyphen_separator(self, dates):
        assert dates.extract(["Emis le 5-3-2026"]) == date(2026, 3, 5)

    def test_day_is_first(self, dates):
        assert dates.extract(["03/12/2025"]) == date(2025, 12, 3)

    def test_label_glued_to_date(self, dates):
        assert dates.extract(["Date:5/3/2026"]) == date(2026, 3, 5)

    def test_label_form_without_trailing_boundary(self, dates):
        assert dates.extract_from_line("Date:05/03/20261") == date(2026, 3, 5)

    def test_future_date_accepted(self, dates):
        assert dates.extract(["Echéance 01/01/2099"]) == date(2099, 1, 1)

    def test_two_digit_year_ignored(self, dates):
        assert dates.extract(["01/02/26"]) is None


class TestScanOrder:
    def test_first_line_wins(self, dates):
        lines = ["Date: 01/02/2026", "Echéance: 15/03/2026"]
        assert dates.extract(lines) == date(2026, 2, 1)

    def test_earlier_numeric_beats_later_month_name(self, dates):
        lines = ["Ticket 10/01/2026", "Facture du 12 janvier 2026"]
        assert dates.extract(lines) == date(2026, 1, 10)

    def test_invalid_date_line_skipped(self, dates):
        lines = ["31/02/2026", "15/03/2026"]
        assert dates.extract(lines) == date(2026, 3, 15)

    def test_lines_without_dates_skipped(self, dates):
        doc = Document.from_text("ACME Corp\nTotal 12,50\nLe 7 mai 2026")
        assert dates.extract(doc) == date(2026, 5, 7)


class TestNoDate:
    @pytest.mark.parametrize("lines", [
        [],
        [""],
        ["Total 12,50", "Merci"],
        ["Tel 01/02/03"],
    ])
    def test_returns_none(self, dates, lines):
        assert dates.extract(lines) is None
