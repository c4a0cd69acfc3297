"""
Provider and Title Extraction Module.

The issuer of an invoice is usually printed in its first few lines,
above or next to the "FACTURE" heading. This module guesses a provider
name from those lines and builds the default bill title shown in the
form.

Author: billscan team
"""

from datetime import date
from typing import Callable, List, NamedTuple, Optional, Sequence, Union

from billscan.ocr_engine.document import Document
from billscan.utils.helpers import format_display_date
from billscan.utils.logger import get_logger
from .locale import FRENCH, Locale

# Initialize module logger
logger = get_logger(__name__)

SCAN_LINES = 5
MAX_PROVIDER_LINES = 2
MIN_LINE_LENGTH = 2


class ProviderTitle(NamedTuple):
    """Provider guess ("" when none) and the generated title."""
    provider_name: str
    title: str


class ProviderTitleExtractor:
    """
    Infers a provider name and a human-readable title.

    Attributes:
        locale: Vocabulary for boilerplate words, exclusions and titles
        today: Callable returning today's date, used when the title has
            to fall back on a date and none was extracted

    Example:
        >>> extractor = ProviderTitleExtractor()
        >>> extractor.extract(["FACTURE", "ACME Corp", "Zone Industrielle"])
        ProviderTitle(provider_name='ACME Corp Zone Industrielle', title='Facture ACME Corp Zone Industrielle')
    """

    def __init__(
        self,
        locale: Optional[Locale] = None,
        today: Optional[Callable[[], date]] = None
    ) -> None:
        self.locale = locale or FRENCH
        self.today = today or date.today

    def extract_provider(self, document: Union[Document, Sequence[str]]) -> str:
        """
        Guess the provider name from the first lines of the document.

        Returns:
            Up to two eligible lines joined by a space, or "".
        """
        lines = document.texts if isinstance(document, Document) else tuple(document)
        provider_lines: List[str] = []

        for line in lines[:SCAN_LINES]:
            clean = line.strip()

            if len(clean) < MIN_LINE_LENGTH:
                continue
            if self._is_boilerplate(clean):
                continue
            # Dates and amounts, not names
            if any(marker in clean for marker in self.locale.provider_exclusions):
                continue

            provider_lines.append(clean)
            if len(provider_lines) == MAX_PROVIDER_LINES:
                break

        provider = ' '.join(provider_lines)
        logger.debug(f"Provider guess: {provider!r}")
        return provider

    def _is_boilerplate(self, line: str) -> bool:
        lowered = line.lower()
        return any(
            lowered == word or lowered.startswith(word + ' ')
            for word in self.locale.boilerplate_words
        )

    def make_title(self, provider_name: str, invoice_date: Optional[date] = None) -> str:
        """
        Build the default bill title.

        "Facture <provider>" when a provider is known, otherwise
        "Facture du <dd/mm/yyyy>" with the invoice date or today.
        """
        if provider_name:
            return f"{self.locale.title_prefix} {provider_name}"

        shown = invoice_date or self.today()
        return f"{self.locale.dated_title_prefix} {format_display_date(shown, self.locale.display_date_format)}"

    def extract(
        self,
        document: Union[Document, Sequence[str]],
        invoice_date: Optional[date] = None
    ) -> ProviderTitle:
        """Guess the provider and derive the title in one call."""
        provider = self.extract_provider(document)
        return ProviderTitle(provider, self.make_title(provider, invoice_date))
