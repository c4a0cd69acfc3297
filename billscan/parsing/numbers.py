"""
Number Parser Module.

Finds monetary numbers in a single OCR line. Invoices printed for the
French market write "1 860,81" (space or non-breaking space as thousands
separator, comma as decimal mark), while some tills print "1860.81";
both are recognized.

Author: billscan team
"""

import re
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from billscan.utils.logger import get_logger

# Initialize module logger
logger = get_logger(__name__)

# A minus directly in front of the digits, not glued to a word ("Total-79,00")
_SIGN = r'(?:(?<!\w)-)?'

# Space-grouped shapes must start at the first digit of a run
_RUN_START = r'(?<![0-9])'

CENT = Decimal('0.01')


class NumberParser:
    """
    Extracts the largest plausible monetary number from a line.

    All number shapes are tried on the line and every match is kept;
    the shapes overlap on purpose ("1 860,81" also yields "860,81"),
    since only the maximum is returned.

    Example:
        >>> parser = NumberParser()
        >>> parser.parse("TOTAL TTC 1 860,81")
        Decimal('1860.81')
        >>> parser.parse("Remise -5,00") is None
        True
    """

    NUMBER_PATTERNS = [
        # "1 860,81": digit, thousands space, three digits, comma decimals
        re.compile(_SIGN + _RUN_START + r'[0-9]\s[0-9]{3},[0-9]{2}'),
        # "12 860,81": up to three leading digits
        re.compile(_SIGN + _RUN_START + r'[0-9]{1,3}\s[0-9]{3},[0-9]{2}'),
        # "79,00"
        re.compile(_SIGN + r'[0-9]+,[0-9]{2}'),
        # "1860.81"
        re.compile(_SIGN + r'[0-9]+\.[0-9]{2}'),
    ]

    def find_numbers(self, line: str) -> List[Decimal]:
        """
        Return every strictly positive number found on the line.

        A shorter shape matching inside a rejected negative number
        ("860,81" in "-1 860,81") is rejected with it.

        Args:
            line: One line of OCR text.

        Returns:
            Matched values rounded to cents, in pattern then position order.
        """
        matches = []
        rejected_spans = []

        for pattern in self.NUMBER_PATTERNS:
            for match in pattern.finditer(line):
                value = self.normalize(match.group(0))
                if value is None:
                    continue
                if value > 0:
                    matches.append((value, match.span()))
                else:
                    rejected_spans.append(match.span())

        return [
            value for value, (start, end) in matches
            if not any(start < r_end and r_start < end for r_start, r_end in rejected_spans)
        ]

    def parse(self, line: Optional[str]) -> Optional[Decimal]:
        """
        Return the largest positive number on the line, or None.

        A line without a usable number is not an error.
        """
        if not line:
            return None

        values = self.find_numbers(line)
        if not values:
            logger.debug(f"No number in line: {line!r}")
            return None

        best = max(values)
        logger.debug(f"Best number {best} in line: {line!r}")
        return best

    @staticmethod
    def normalize(number_str: str) -> Optional[Decimal]:
        """
        Convert a matched number to a Decimal with two fractional digits.

        Thousands separators (space, non-breaking space, narrow
        non-breaking space) are dropped and a decimal comma becomes a point.

        Example:
            >>> NumberParser.normalize("1\\u00a0860,81")
            Decimal('1860.81')
        """
        cleaned = re.sub(r'\s', '', number_str).replace(',', '.')

        try:
            return Decimal(cleaned).quantize(CENT)
        except InvalidOperation:
            logger.debug(f"Could not parse number: {number_str!r}")
            return None


_default_parser = NumberParser()


def parse_number(line: Optional[str]) -> Optional[Decimal]:
    """Module-level shortcut for ``NumberParser().parse(line)``."""
    return _default_parser.parse(line)
