"""
Parsing Module for billscan.

Heuristic field extractors working on OCR lines:
    - NumberParser: monetary numbers on one line
    - AmountExtractor: the invoice total, via a strategy cascade
    - DateExtractor: the first date in the document
    - ProviderTitleExtractor: provider name and default title
    - Locale: the language-dependent vocabulary they share
"""

from .locale import Locale, FRENCH, get_locale, register_locale, available_locales
from .numbers import NumberParser, parse_number
from .amounts import AmountExtractor, AmountCandidate, AMOUNT_STRATEGIES
from .dates import DateExtractor
from .provider import ProviderTitleExtractor, ProviderTitle

__all__ = [
    'Locale',
    'FRENCH',
    'get_locale',
    'register_locale',
    'available_locales',
    'NumberParser',
    'parse_number',
    'AmountExtractor',
    'AmountCandidate',
    'AMOUNT_STRATEGIES',
    'DateExtractor',
    'ProviderTitleExtractor',
    'ProviderTitle',
]
