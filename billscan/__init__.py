"""
billscan - Invoice Field Extraction Engine.

Recovers the total amount, the date and a likely provider from the OCR
text of a photographed invoice or receipt, to pre-fill the bill form of
the bills app.

Modules:
    - ocr_engine: Document model for recognized OCR lines
    - parsing: Heuristic extractors (numbers, amounts, dates, provider)
    - model_inference: InvoiceFieldExtractor and ExtractionResult
    - input_handler: Loading OCR dumps from disk
    - utils: Logging, exceptions, helpers

Architecture:
    OCR text → Document → Amount / Date / Provider extractors → ExtractionResult
"""

__version__ = "1.0.0"

__all__ = [
    'ocr_engine',
    'parsing',
    'model_inference',
    'input_handler',
    'utils'
]
