"""
Unit tests for the number parser.
"""

from decimal import Decimal

import pytest

from billscan.parsing.numbers import NumberParser, parse_number


@pytest.fixture
def parser():
    return NumberParser()


class TestNumberShapes:
    """Each recognized way of writing an amount"""

    def test_space_grouped_comma_decimal(self, parser):
        assert parser.parse("1 860,81") == Decimal("1860.81")

    def test_non_breaking_space_thousands(self, parser):
        assert parser.parse("TOTAL 1\u00a0860,81 EUR") == Decimal("1860.81")

    def test_narrow_non_breaking_space_thousands(self, parser):
        assert parser.parse("12\u202f345,60") == Decimal("12345.60")

    def test_three_digit_leading_group(self, parser):
        assert parser.parse("Net 124 860,81") == Decimal("124860.81")

    def test_plain_comma_decimal(self, parser):
        assert parser.parse("79,00") == Decimal("79.00")

    def test_plain_dot_decimal(self, parser):
        assert parser.parse("1860.81") == Decimal("1860.81")

    def test_result_has_two_decimals(self, parser):
        assert str(parser.parse("Total 79,00")) == "79.00"


class TestSelection:
    """Choosing among several numbers on one line"""

    def test_largest_number_wins(self, parser):
        line = "Sous-total 12,50 TVA 2,50 Total 15,00"
        assert parser.parse(line) == Decimal("15.00")

    def test_mixed_separators_largest_wins(self, parser):
        assert parser.parse("3.50 x 2 = 7,00") == Decimal("7.00")

    def test_find_numbers_returns_every_match(self, parser):
        values = parser.find_numbers("1 860,81")
        assert Decimal("1860.81") in values
        assert Decimal("860.81") in values


class TestRejection:
    """Lines that yield no usable number"""

    def test_negative_number_rejected(self, parser):
        assert parser.parse("-5,00") is None

    def test_discount_line_rejected(self, parser):
        assert parser.parse("Remise : -15,00") is None

    @pytest.mark.parametrize("line", ["-1 860,81", "-12 345,60", "Remise -1 200,00"])
    def test_negative_grouped_number_rejected_whole(self, parser, line):
        assert parser.parse(line) is None

    def test_positive_beside_negative_kept(self, parser):
        assert parser.find_numbers("Avoir -1 200,00 reste 35,00") == [Decimal("35.00")]

    def test_hyphen_after_word_is_not_a_sign(self, parser):
        assert parser.parse("Total-79,00") == Decimal("79.00")

    def test_zero_rejected(self, parser):
        assert parser.parse("0,00") is None

    @pytest.mark.parametrize("line", [
        "Merci de votre visite",
        "TVA 20%",
        "Tel 01 23 45 67 89",
        "Quantité 3",
        "",
    ])
    def test_no_number_shape(self, parser, line):
        assert parser.parse(line) is None

    def test_none_line(self, parser):
        assert parser.parse(None) is None


class TestNormalize:
    def test_strips_separators_and_converts_comma(self):
        assert NumberParser.normalize("1 234,56") == Decimal("1234.56")

    def test_keeps_sign(self):
        assert NumberParser.normalize("-5,00") == Decimal("-5.00")


def test_module_shortcut():
    assert parse_number("A payer 42,10") == Decimal("42.10")
