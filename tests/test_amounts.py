"""
Unit tests for the total amount strategy cascade.
"""

from decimal import Decimal

import pytest

from billscan.ocr_engine.document import Document
from billscan.parsing.amounts import (
    AMOUNT_STRATEGIES,
    AmountExtractor,
    balance_due_strategy,
    fallback_strategy,
)
from billscan.parsing.locale import FRENCH
from billscan.parsing.numbers import NumberParser


@pytest.fixture
def amounts():
    return AmountExtractor()


class TestBalanceDue:
    """Strategy 1: "Solde à payer" / "Reste à payer" anchors"""

    def test_largest_number_in_window(self, amounts):
        lines = ["SOLDE A PAYER", "12,00", "45,50"]
        assert amounts.extract(lines) == Decimal("45.50")

    def test_reste_a_payer_beats_total_ttc(self, amounts):
        lines = ["TOTAL TTC 100,00", "Acompte 70,00", "Reste à payer : 30,00"]
        candidate = amounts.extract_candidate(lines)
        assert candidate.value == Decimal("30.00")
        assert candidate.strategy == "balance_due"

    def test_union_across_anchors(self, amounts):
        lines = [
            "Solde à payer 10,00",
            "merci", "de", "votre", "visite",
            "Solde à payer 20,00",
        ]
        assert amounts.extract(lines) == Decimal("20.00")

    def test_window_is_three_lines_below(self):
        lines = ["SOLDE A PAYER", "a", "b", "c", "999,00"]
        candidates = balance_due_strategy(lines, FRENCH, NumberParser())
        assert candidates == []

    def test_anchor_without_numbers_falls_through(self, amounts):
        lines = ["TOTAL TTC 12,00", "x", "y", "z", "w", "SOLDE A PAYER"]
        candidate = amounts.extract_candidate(lines)
        assert candidate.value == Decimal("12.00")
        assert candidate.strategy == "total_tax"


class TestAmountLabel:
    """Strategy 2: "Montant :" / "Montant à payer" anchors"""

    def test_montant_a_payer(self, amounts):
        lines = ["Montant à payer", "63,20", "Total HT 52,67"]
        candidate = amounts.extract_candidate(lines)
        assert candidate.value == Decimal("63.20")
        assert candidate.strategy == "amount_label"

    def test_montant_with_colon_on_same_line(self, amounts):
        assert amounts.extract(["Montant : 18,90"]) == Decimal("18.90")

    def test_montant_without_colon_or_payer_is_not_an_anchor(self, amounts):
        lines = ["Montant TVA 10,53", "Total TTC 63,20"]
        candidate = amounts.extract_candidate(lines)
        assert candidate.strategy == "total_tax"
        assert candidate.value == Decimal("63.20")


class TestTotalTax:
    """Strategy 3: "Total TTC" anchors"""

    def test_value_on_next_line(self, amounts):
        lines = ["Total HT 100,00", "TVA 20,00", "Total TTC", "120,00"]
        assert amounts.extract(lines) == Decimal("120.00")

    def test_case_insensitive(self, amounts):
        assert amounts.extract(["total ttc 8,40"]) == Decimal("8.40")

    def test_grouped_discount_in_window_ignored(self, amounts):
        lines = ["Total TTC", "Remise -1 200,00", "150,00"]
        assert amounts.extract(lines) == Decimal("150.00")


class TestBareTotal:
    """Strategy 4: a line reading exactly "Total" """

    def test_skips_weight_line(self, amounts):
        lines = ["TOTAL", "5 KG", "23,40"]
        candidate = amounts.extract_candidate(lines)
        assert candidate.value == Decimal("23.40")
        assert candidate.strategy == "bare_total"

    def test_weight_line_numbers_ignored_entirely(self, amounts):
        lines = ["Total", "Poids 12,50 KG 180,00", "23,40"]
        assert amounts.extract(lines) == Decimal("23.40")

    def test_anchor_must_be_whole_line(self, amounts):
        lines = ["Total:", "Poids 12,50 KG 180,00", "23,40"]
        candidate = amounts.extract_candidate(lines)
        assert candidate.strategy == "fallback"

    def test_window_is_five_lines_below(self, amounts):
        lines = ["TOTAL", "a", "b", "c", "d", "e", "99,00"]
        candidate = amounts.extract_candidate(lines)
        assert candidate.value == Decimal("99.00")
        assert candidate.strategy == "fallback"

    def test_unit_price_not_excluded_below_total(self, amounts):
        # Narrower exclusion set than the fallback
        lines = ["TOTAL", "Prix unit HT 450,00", "90,00"]
        assert amounts.extract(lines) == Decimal("450.00")


class TestFallback:
    """Strategy 5: whole document minus weight/quantity/unit-price lines"""

    def test_excludes_weight_line(self, amounts):
        lines = ["2 KG 3,50", "19,99"]
        candidate = amounts.extract_candidate(lines)
        assert candidate.value == Decimal("19.99")
        assert candidate.strategy == "fallback"

    def test_excludes_unit_price_line(self, amounts):
        assert amounts.extract(["Prix unit HT 450,00", "Net 90,00"]) == Decimal("90.00")

    def test_excludes_per_tonne_line(self, amounts):
        assert amounts.extract(["Gravier 45,00/tonne 300,00", "Net 90,00"]) == Decimal("90.00")

    def test_candidates_carry_line_index(self):
        candidates = fallback_strategy(["entête", "12,00", "KG 50,00", "3,00"], FRENCH, NumberParser())
        assert [c.line_index for c in candidates] == [1, 3]


class TestCascade:
    def test_no_amount(self, amounts):
        assert amounts.extract(["Merci de votre visite", "A bientôt"]) is None

    def test_empty_document(self, amounts):
        assert amounts.extract([]) is None
        assert amounts.extract_candidate(Document()) is None

    def test_accepts_document(self, amounts):
        doc = Document.from_text("SOLDE A PAYER\n12,00\n45,50")
        assert amounts.extract(doc) == Decimal("45.50")

    def test_strategy_order(self):
        assert [name for name, _ in AMOUNT_STRATEGIES] == [
            "balance_due", "amount_label", "total_tax", "bare_total", "fallback"
        ]

    def test_custom_strategy_list(self):
        only_fallback = AmountExtractor(strategies=[AMOUNT_STRATEGIES[-1]])
        assert only_fallback.extract(["SOLDE A PAYER", "12,00", "99,00 KG"]) == Decimal("12.00")
