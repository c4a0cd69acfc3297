"""
Extraction Result Data Class.

Standardized, immutable output of one extraction call. The presentation
layer uses it to pre-fill the editable bill form; the user always
reviews the values before anything is saved.

Author: billscan team
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional
import json

from billscan.ocr_engine.document import Document
from billscan.utils.helpers import format_display_date

CENT = Decimal('0.01')


@dataclass(frozen=True)
class ExtractionResult:
    """
    Fields recovered from one invoice document.

    Attributes:
        amount: Total amount, strictly positive, rounded to cents
        invoice_date: Invoice date (no time component)
        provider_name: Provider guess, "" when none was found
        title: Generated bill title, always present
        document: The OCR document the fields were read from

    Example:
        >>> result = ExtractionResult(
        ...     amount=Decimal("45.5"),
        ...     invoice_date=date(2026, 1, 12),
        ...     provider_name="ACME Corp",
        ...     title="Facture ACME Corp"
        ... )
        >>> result.amount
        Decimal('45.50')
    """
    amount: Optional[Decimal] = None
    invoice_date: Optional[date] = None
    provider_name: str = ""
    title: str = ""
    document: Document = field(default_factory=Document)

    def __post_init__(self):
        """Enforce the amount invariant (positive, two decimals)."""
        if self.amount is not None:
            amount = Decimal(self.amount)
            if amount <= 0:
                raise ValueError(f"amount must be strictly positive, got {amount}")
            object.__setattr__(self, 'amount', amount.quantize(CENT))

    @property
    def fields(self) -> Dict[str, Any]:
        """Extracted field values keyed by name."""
        return {
            'amount': self.amount,
            'invoice_date': self.invoice_date,
            'provider_name': self.provider_name,
        }

    @property
    def missing_fields(self) -> List[str]:
        """Names of fields that could not be extracted."""
        return [k for k, v in self.fields.items() if v is None or v == ""]

    @property
    def extracted_fields(self) -> Dict[str, Any]:
        """Only the fields that have values."""
        return {k: v for k, v in self.fields.items() if v is not None and v != ""}

    @property
    def extraction_rate(self) -> float:
        """Percentage of fields successfully extracted (0-100)."""
        return len(self.extracted_fields) / len(self.fields) * 100

    @property
    def raw_text(self) -> str:
        """The OCR text, for the debug disclosure in the form."""
        return self.document.text

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a JSON-friendly dictionary.

        The amount is a two-decimal string and the date is ISO formatted.
        """
        return {
            'amount': str(self.amount) if self.amount is not None else None,
            'invoice_date': self.invoice_date.isoformat() if self.invoice_date else None,
            'provider_name': self.provider_name,
            'title': self.title,
            'source': self.document.source,
            'raw_text': self.raw_text,
            'missing_fields': self.missing_fields,
            'extraction_rate': self.extraction_rate,
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def to_form_fields(
        self,
        today: Optional[Callable[[], date]] = None,
        date_format: str = "%d/%m/%Y"
    ) -> Dict[str, str]:
        """
        Values for pre-filling the bill form.

        Every value is a string the user can edit. A missing amount is
        an empty field; a missing date shows today, like the date picker.

        Args:
            today: Callable returning today's date.
            date_format: strftime format of the date field.
        """
        shown_date = self.invoice_date or (today or date.today)()

        return {
            'title': self.title,
            'amount': f"{self.amount:.2f}" if self.amount is not None else "",
            'date': format_display_date(shown_date, date_format),
            'provider_name': self.provider_name,
            'comment': "",
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ExtractionResult':
        """
        Rebuild a result from ``to_dict()`` output.

        Line confidences are not part of the dictionary and are lost.
        """
        amount = data.get('amount')
        invoice_date = data.get('invoice_date')

        return cls(
            amount=Decimal(amount) if amount is not None else None,
            invoice_date=date.fromisoformat(invoice_date) if invoice_date else None,
            provider_name=data.get('provider_name') or "",
            title=data.get('title') or "",
            document=Document.from_text(data.get('raw_text'), data.get('source')),
        )

    def __repr__(self) -> str:
        return (
            f"ExtractionResult("
            f"amount={self.amount}, "
            f"date={self.invoice_date}, "
            f"provider={self.provider_name!r}, "
            f"rate={self.extraction_rate:.0f}%)"
        )
