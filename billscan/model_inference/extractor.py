"""
Invoice Field Extractor Module.

Entry point of the extraction engine: turns the OCR text of one invoice
into an ExtractionResult. The amount, date and provider extractors run
independently over the same document and their outputs are merged.

Extraction is a pure function of the input lines (and of "today", used
only for the default title): no network, no file access, no state kept
between calls. A single extractor can be shared across threads.

Author: billscan team
"""

import time
from datetime import date
from typing import Any, Callable, Dict, Iterable, Optional, Union

from config import get_config
from billscan.ocr_engine.document import Document
from billscan.parsing.amounts import AmountExtractor
from billscan.parsing.dates import DateExtractor
from billscan.parsing.locale import DEFAULT_LOCALE, Locale, get_locale
from billscan.parsing.numbers import NumberParser
from billscan.parsing.provider import ProviderTitleExtractor
from billscan.utils.logger import get_logger
from .extraction_result import ExtractionResult

# Initialize module logger
logger = get_logger(__name__)

DocumentInput = Union[Document, str, Iterable[Any], None]


class InvoiceFieldExtractor:
    """
    Extracts amount, date, provider and title from OCR text.

    Attributes:
        locale: Vocabulary shared by all sub-extractors
        amount_extractor: AmountExtractor instance
        date_extractor: DateExtractor instance
        provider_extractor: ProviderTitleExtractor instance

    Example:
        >>> extractor = InvoiceFieldExtractor()
        >>> result = extractor.extract("ACME Corp\\nDate : 05/03/2026\\nTOTAL TTC 79,00")
        >>> result.amount, result.invoice_date, result.title
        (Decimal('79.00'), datetime.date(2026, 3, 5), 'Facture ACME Corp')
    """

    def __init__(
        self,
        locale: Union[Locale, str, None] = None,
        today: Optional[Callable[[], date]] = None
    ) -> None:
        """
        Initialize the extractor.

        Args:
            locale: Locale or locale name. If None, uses the
                ``extraction.locale`` configuration key.
            today: Callable returning today's date, for the default title.

        Raises:
            UnknownLocaleError: If the locale name is not registered.
        """
        if locale is None:
            locale = get_config("extraction.locale", DEFAULT_LOCALE)
        self.locale = get_locale(locale) if isinstance(locale, str) else locale

        parser = NumberParser()
        self.amount_extractor = AmountExtractor(self.locale, parser)
        self.date_extractor = DateExtractor(self.locale)
        self.provider_extractor = ProviderTitleExtractor(self.locale, today)

        logger.debug(f"InvoiceFieldExtractor initialized (locale: {self.locale.name})")

    @staticmethod
    def to_document(document: DocumentInput) -> Document:
        """
        Accept the shapes the OCR step hands over.

        A Document is used as is, a string is split into lines, any other
        iterable is taken as pre-split lines and None is an empty document.
        """
        if isinstance(document, Document):
            return document
        if document is None or isinstance(document, str):
            return Document.from_text(document)
        return Document.from_lines(document)

    def extract(self, document: DocumentInput) -> ExtractionResult:
        """
        Extract all fields from one document.

        Missing fields are None (amount, date) or "" (provider); nothing
        is raised for empty or noisy input.

        Args:
            document: Document, raw text blob or sequence of lines.

        Returns:
            ExtractionResult with the merged fields.
        """
        start_time = time.perf_counter()
        doc = self.to_document(document)

        amount = self.amount_extractor.extract(doc)
        invoice_date = self.date_extractor.extract(doc)
        provider = self.provider_extractor.extract(doc, invoice_date)

        result = ExtractionResult(
            amount=amount,
            invoice_date=invoice_date,
            provider_name=provider.provider_name,
            title=provider.title,
            document=doc
        )

        logger.info(
            f"Extraction complete: {len(result.extracted_fields)}/{len(result.fields)} fields "
            f"from {doc.line_count} lines, "
            f"time: {time.perf_counter() - start_time:.3f}s"
        )
        if result.missing_fields:
            logger.debug(f"Missing fields: {', '.join(result.missing_fields)}")

        return result

    def get_extractor_info(self) -> Dict[str, Any]:
        """Describe the extractor configuration."""
        return {
            'locale': self.locale.name,
            'amount_strategies': [name for name, _ in self.amount_extractor.strategies],
        }
