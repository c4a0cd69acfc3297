"""
Amount Extraction Module.

Recovers the total of an invoice from its OCR lines. Invoices rarely
label their grand total unambiguously, so a cascade of label-anchored
strategies is tried in a fixed order. Each strategy looks at a small
window around its anchor lines and proposes candidates; the first
strategy that proposes anything wins, and its largest candidate is the
result (totals tend to be the biggest figure near their label, larger
than line items, discounts or unit prices).

Strategies, highest priority first:
    1. balance_due   "SOLDE ... PAYER" / "RESTE ... PAYER", anchor + 3 lines
    2. amount_label  "MONTANT" with ":" or "PAYER", anchor + 2 lines
    3. total_tax     "TOTAL" and "TTC", anchor + 2 lines
    4. bare_total    a line that is exactly "TOTAL", next 5 lines minus
                     weight/quantity lines
    5. fallback      every line of the document minus weight, quantity
                     and unit-price lines

Author: billscan team
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from billscan.ocr_engine.document import Document
from billscan.utils.logger import get_logger
from .locale import FRENCH, Locale
from .numbers import NumberParser

# Initialize module logger
logger = get_logger(__name__)

BALANCE_DUE_WINDOW = 3
AMOUNT_LABEL_WINDOW = 2
TOTAL_TAX_WINDOW = 2
BARE_TOTAL_WINDOW = 5


@dataclass(frozen=True)
class AmountCandidate:
    """
    A number proposed as the invoice total.

    Attributes:
        value: Parsed amount, rounded to cents
        line_index: Index of the line the number was read from
        strategy: Name of the strategy that proposed it
    """
    value: Decimal
    line_index: int
    strategy: str


Strategy = Callable[[Sequence[str], Locale, NumberParser], List[AmountCandidate]]


def _collect(
    lines: Sequence[str],
    indices: Iterable[int],
    parser: NumberParser,
    strategy: str
) -> List[AmountCandidate]:
    """Parse the best number of each in-range line index."""
    candidates = []

    for index in indices:
        if not 0 <= index < len(lines):
            continue
        value = parser.parse(lines[index])
        if value is not None:
            candidates.append(AmountCandidate(value, index, strategy))

    return candidates


def _contains_any(text: str, markers: Iterable[str]) -> bool:
    return any(marker in text for marker in markers)


def balance_due_strategy(
    lines: Sequence[str], locale: Locale, parser: NumberParser
) -> List[AmountCandidate]:
    """Balance-due anchors ("Solde à payer", "Reste à payer") and the 3 lines below."""
    candidates = []

    for i, line in enumerate(lines):
        upper = line.upper().strip()
        if any(a in upper and b in upper for a, b in locale.balance_anchors):
            logger.debug(f"[balance_due] anchor at line {i}: {line!r}")
            candidates.extend(
                _collect(lines, range(i, i + BALANCE_DUE_WINDOW + 1), parser, "balance_due")
            )

    return candidates


def amount_label_strategy(
    lines: Sequence[str], locale: Locale, parser: NumberParser
) -> List[AmountCandidate]:
    """Amount labels ("Montant :", "Montant à payer") and the 2 lines below."""
    candidates = []

    for i, line in enumerate(lines):
        upper = line.upper()
        if locale.amount_label in upper and _contains_any(upper, locale.amount_label_companions):
            logger.debug(f"[amount_label] anchor at line {i}: {line!r}")
            candidates.extend(
                _collect(lines, range(i, i + AMOUNT_LABEL_WINDOW + 1), parser, "amount_label")
            )

    return candidates


def total_tax_strategy(
    lines: Sequence[str], locale: Locale, parser: NumberParser
) -> List[AmountCandidate]:
    """Tax-inclusive total labels ("Total TTC") and the 2 lines below."""
    candidates = []

    for i, line in enumerate(lines):
        upper = line.upper()
        if locale.total_label in upper and locale.total_tax_label in upper:
            logger.debug(f"[total_tax] anchor at line {i}: {line!r}")
            candidates.extend(
                _collect(lines, range(i, i + TOTAL_TAX_WINDOW + 1), parser, "total_tax")
            )

    return candidates


def bare_total_strategy(
    lines: Sequence[str], locale: Locale, parser: NumberParser
) -> List[AmountCandidate]:
    """
    Lines reading exactly "Total", then the 5 lines below.

    Table layouts put the total label alone on its line with the figure
    a few lines further down; weight and quantity lines in that window
    are skipped entirely.
    """
    candidates = []

    for i, line in enumerate(lines):
        if line.strip().upper() != locale.total_label:
            continue

        logger.debug(f"[bare_total] anchor at line {i}")
        window = [
            j for j in range(i + 1, i + BARE_TOTAL_WINDOW + 1)
            if j < len(lines)
            and not _contains_any(lines[j].upper(), locale.total_window_exclusions)
        ]
        candidates.extend(_collect(lines, window, parser, "bare_total"))

    return candidates


def fallback_strategy(
    lines: Sequence[str], locale: Locale, parser: NumberParser
) -> List[AmountCandidate]:
    """Every line except weight, quantity and unit-price lines."""
    kept = [
        i for i, line in enumerate(lines)
        if not _contains_any(line.upper(), locale.fallback_exclusions)
    ]
    return _collect(lines, kept, parser, "fallback")


AMOUNT_STRATEGIES: Tuple[Tuple[str, Strategy], ...] = (
    ("balance_due", balance_due_strategy),
    ("amount_label", amount_label_strategy),
    ("total_tax", total_tax_strategy),
    ("bare_total", bare_total_strategy),
    ("fallback", fallback_strategy),
)


class AmountExtractor:
    """
    Selects the single best total amount of a document.

    Attributes:
        locale: Vocabulary for anchors and exclusions
        parser: Per-line number parser
        strategies: Ordered (name, strategy) pairs

    Example:
        >>> extractor = AmountExtractor()
        >>> extractor.extract(["SOLDE A PAYER", "12,00", "45,50"])
        Decimal('45.50')
    """

    def __init__(
        self,
        locale: Optional[Locale] = None,
        parser: Optional[NumberParser] = None,
        strategies: Sequence[Tuple[str, Strategy]] = AMOUNT_STRATEGIES
    ) -> None:
        self.locale = locale or FRENCH
        self.parser = parser or NumberParser()
        self.strategies = tuple(strategies)

    def extract_candidate(
        self, document: Union[Document, Sequence[str]]
    ) -> Optional[AmountCandidate]:
        """
        Run the strategy cascade and return the winning candidate.

        Args:
            document: A Document or its line texts.

        Returns:
            Largest candidate of the first strategy that found any, or None.
        """
        lines = document.texts if isinstance(document, Document) else tuple(document)

        for name, strategy in self.strategies:
            candidates = strategy(lines, self.locale, self.parser)
            if not candidates:
                logger.debug(f"[{name}] no candidate")
                continue

            best = max(candidates, key=lambda c: c.value)
            logger.debug(
                f"[{name}] selected {best.value} from line {best.line_index} "
                f"({len(candidates)} candidates)"
            )
            return best

        logger.debug("No amount found in document")
        return None

    def extract(self, document: Union[Document, Sequence[str]]) -> Optional[Decimal]:
        """Return the best total amount, or None."""
        candidate = self.extract_candidate(document)
        return candidate.value if candidate else None
