"""
Extraction Locale Module.

Everything language-dependent in the heuristics lives here: month names,
anchor keywords for the total amount, lines to ignore, boilerplate
words and the wording of generated titles. Strategy code only reads a
Locale, so retargeting the engine means registering a new one.

Author: billscan team
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from dateutil import parser as date_parser

from billscan.utils.exceptions import UnknownLocaleError


@dataclass(frozen=True)
class Locale:
    """
    Vocabulary for one invoice language.

    Keyword fields are compared against uppercased line text unless
    noted otherwise.

    Attributes:
        name: Registry key (e.g. "fr")
        months: One tuple of accepted spellings per month, January first
        date_label: Label that may precede a numeric date, any case
        balance_anchors: Keyword pairs marking a balance-due line
        amount_label: Keyword of the "amount" label line
        amount_label_companions: At least one must accompany amount_label
        total_label: Keyword of the total line
        total_tax_label: Keyword that, with total_label, marks the
            tax-inclusive total
        total_window_exclusions: Markers of weight/quantity lines skipped
            below a bare total line
        fallback_exclusions: Markers of lines skipped by the whole-document
            fallback
        boilerplate_words: Lowercase words that start invoice headings
        provider_exclusions: Case-sensitive markers of date/amount lines
        title_prefix: Title start when a provider is known
        dated_title_prefix: Title start when only a date is known
        display_date_format: strftime format for dates in titles and forms
    """
    name: str
    months: Tuple[Tuple[str, ...], ...]
    date_label: str
    balance_anchors: Tuple[Tuple[str, str], ...]
    amount_label: str
    amount_label_companions: Tuple[str, ...]
    total_label: str
    total_tax_label: str
    total_window_exclusions: Tuple[str, ...]
    fallback_exclusions: Tuple[str, ...]
    boilerplate_words: Tuple[str, ...]
    provider_exclusions: Tuple[str, ...]
    title_prefix: str
    dated_title_prefix: str
    display_date_format: str = "%d/%m/%Y"

    @property
    def month_names(self) -> List[str]:
        """Every accepted month spelling, longest first for regex alternation."""
        names = {name for spellings in self.months for name in spellings}
        return sorted(names, key=len, reverse=True)

    def date_parserinfo(self) -> 'LocaleParserInfo':
        """dateutil parserinfo that understands this locale's month names."""
        return LocaleParserInfo(self)


class LocaleParserInfo(date_parser.parserinfo):
    """dateutil parserinfo with month names taken from a Locale, day first."""

    def __init__(self, locale: Locale) -> None:
        self.MONTHS = [tuple(spellings) for spellings in locale.months]
        super().__init__(dayfirst=True, yearfirst=False)


FRENCH = Locale(
    name="fr",
    months=(
        ("janvier",),
        ("février", "fevrier"),
        ("mars",),
        ("avril",),
        ("mai",),
        ("juin",),
        ("juillet",),
        ("août", "aout"),
        ("septembre",),
        ("octobre",),
        ("novembre",),
        ("décembre", "decembre"),
    ),
    date_label="date",
    balance_anchors=(("SOLDE", "PAYER"), ("RESTE", "PAYER")),
    amount_label="MONTANT",
    amount_label_companions=(":", "PAYER"),
    total_label="TOTAL",
    total_tax_label="TTC",
    total_window_exclusions=("KG", "TN", "QUANTITE", "POIDS", "UNITE", "UNIT."),
    # Wider than total_window_exclusions; see DESIGN.md before unifying.
    fallback_exclusions=(
        "KG", "TN", "QUANTITE", "POIDS", "UNITE", "UNIT.", "PRIX UNIT", "/TONNE"
    ),
    boilerplate_words=("facture", "invoice", "bill", "devis", "quote"),
    provider_exclusions=("/", "€", "EUR"),
    title_prefix="Facture",
    dated_title_prefix="Facture du",
)


_REGISTRY: Dict[str, Locale] = {FRENCH.name: FRENCH}

DEFAULT_LOCALE = FRENCH.name


def register_locale(locale: Locale) -> None:
    """Make a locale available to get_locale() under its name."""
    _REGISTRY[locale.name.lower()] = locale


def available_locales() -> List[str]:
    return sorted(_REGISTRY)


def get_locale(name: str = DEFAULT_LOCALE) -> Locale:
    """
    Look up a registered locale.

    Raises:
        UnknownLocaleError: If no locale is registered under ``name``.
    """
    try:
        return _REGISTRY[name.lower()]
    except (KeyError, AttributeError):
        raise UnknownLocaleError(str(name), available_locales())
