"""
Date Extraction Module.

Finds the invoice date in OCR lines. Lines are scanned top to bottom and
the first date that parses wins; there is no ranking across the
document, because the issue date is almost always printed in the header.

Recognized forms, tried in this order on each line:
    - "12 janvier 2026" (day, month name, four-digit year)
    - "05/03/2026" or "5-3-2026" (day first)
    - "Date : 05/03/2026"

Author: billscan team
"""

import re
from datetime import date
from typing import Optional, Sequence, Union

from dateutil import parser as date_parser

from billscan.ocr_engine.document import Document
from billscan.utils.logger import get_logger
from .locale import FRENCH, Locale

# Initialize module logger
logger = get_logger(__name__)

NUMERIC_DATE = r'([0-3]?[0-9])[/-]([0-1]?[0-9])[/-]([0-9]{4})'


class DateExtractor:
    """
    Extracts the first calendar date of a document.

    Any valid date is accepted, including future ones; a match that is
    not a real calendar date ("31/02/2026") is ignored.

    Attributes:
        locale: Vocabulary for month names and the date label

    Example:
        >>> extractor = DateExtractor()
        >>> extractor.extract(["Facture du 12 janvier 2026"])
        datetime.date(2026, 1, 12)
    """

    def __init__(self, locale: Optional[Locale] = None) -> None:
        self.locale = locale or FRENCH
        self._parserinfo = self.locale.date_parserinfo()

        months = '|'.join(re.escape(name) for name in self.locale.month_names)
        self.month_name_pattern = re.compile(
            r'([0-3]?[0-9])\s+(' + months + r')\s+([0-9]{4})',
            re.IGNORECASE
        )
        self.numeric_pattern = re.compile(r'\b' + NUMERIC_DATE + r'\b')
        self.labelled_pattern = re.compile(
            re.escape(self.locale.date_label) + r'\s*:?\s*' + NUMERIC_DATE,
            re.IGNORECASE
        )

    def extract(self, document: Union[Document, Sequence[str]]) -> Optional[date]:
        """
        Return the first date found scanning lines top to bottom, or None.

        Args:
            document: A Document or its line texts.
        """
        lines = document.texts if isinstance(document, Document) else tuple(document)

        for index, line in enumerate(lines):
            found = self.extract_from_line(line)
            if found is not None:
                logger.debug(f"Date {found.isoformat()} found at line {index}: {line!r}")
                return found

        logger.debug("No date found in document")
        return None

    def extract_from_line(self, line: str) -> Optional[date]:
        """Try each date form on one line; return the first that parses."""
        if not line:
            return None

        match = self.month_name_pattern.search(line)
        if match:
            parsed = self._parse_month_name(match.group(0))
            if parsed is not None:
                return parsed

        for pattern in (self.numeric_pattern, self.labelled_pattern):
            match = pattern.search(line)
            if match:
                parsed = self._parse_numeric(*match.groups())
                if parsed is not None:
                    return parsed

        return None

    def _parse_month_name(self, text: str) -> Optional[date]:
        """Parse "12 janvier 2026" with the locale's month names."""
        try:
            return date_parser.parse(text, parserinfo=self._parserinfo).date()
        except (ValueError, OverflowError) as e:
            logger.debug(f"Rejected date {text!r}: {e}")
            return None

    @staticmethod
    def _parse_numeric(day: str, month: str, year: str) -> Optional[date]:
        """Build a day-month-year date, or None if it is not a calendar date."""
        try:
            return date(int(year), int(month), int(day))
        except ValueError as e:
            logger.debug(f"Rejected date {day}/{month}/{year}: {e}")
            return None
