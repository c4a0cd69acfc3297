"""
Shared pytest fixtures.

Every test starts from a fresh configuration singleton so a custom
settings file loaded by one test never leaks into another.
"""

from datetime import date

import pytest

from config import ConfigurationManager
from billscan.model_inference import InvoiceFieldExtractor

FIXED_TODAY = date(2026, 10, 17)


@pytest.fixture(autouse=True)
def reset_configuration():
    """Drop the configuration singleton around each test."""
    ConfigurationManager.reset()
    yield
    ConfigurationManager.reset()


@pytest.fixture
def today():
    """Clock pinned to a known date."""
    return lambda: FIXED_TODAY


@pytest.fixture
def extractor(today):
    """Extractor with the default locale and a pinned clock."""
    return InvoiceFieldExtractor(today=today)


@pytest.fixture
def garage_invoice():
    """OCR text of a typical garage invoice."""
    return "\n".join([
        "SARL GARAGE DUPONT",
        "12 rue des Lilas",
        "FACTURE N° 2026-042",
        "Date : 05/03/2026",
        "Désignation Qté Prix unit. Montant",
        "Vidange 1 79,00 79,00",
        "Filtre 2 12,50 25,00",
        "Total HT 86,67",
        "TVA 20% 17,33",
        "Total TTC 104,00",
    ])
