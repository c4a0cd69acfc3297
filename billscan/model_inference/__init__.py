"""
Field Extraction Module for billscan.

Rule-based extraction of invoice fields from OCR text:
    - Total amount (label-anchored strategy cascade)
    - Invoice date (first date in reading order)
    - Provider name and default bill title

No model weights and no network: the heuristics in billscan.parsing do
all the work and InvoiceFieldExtractor merges their outputs.
"""

from .extractor import InvoiceFieldExtractor
from .extraction_result import ExtractionResult

__all__ = ['InvoiceFieldExtractor', 'ExtractionResult']
