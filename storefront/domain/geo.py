from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Currency(StrEnum):
    EUR = "EUR"


# alpha-2 (zoals de payment processor het adres teruggeeft) -> alpha-3
ALPHA2_TO_ALPHA3: dict[str, str] = {
    "AT": "AUT",
    "BE": "BEL",
    "CH": "CHE",
    "CZ": "CZE",
    "DE": "DEU",
    "DK": "DNK",
    "ES": "ESP",
    "FI": "FIN",
    "FR": "FRA",
    "GB": "GBR",
    "IE": "IRL",
    "IT": "ITA",
    "LU": "LUX",
    "NL": "NLD",
    "NO": "NOR",
    "PL": "POL",
    "PT": "PRT",
    "SE": "SWE",
    "US": "USA",
}


def normalize_country_code(code: str | None) -> str:
    """
    Uppercase + strip; alpha-2 codes we know are mapped to alpha-3.
    Unknown codes are returned as-is (callers treat them as "rest of world").
    """
    raw = (code or "").strip().upper()
    return ALPHA2_TO_ALPHA3.get(raw, raw)


@dataclass(frozen=True)
class LocaleConfig:
    locale: str
    decimal_sep: str
    thousand_sep: str
    symbol_first: bool


LOCALE_CONFIG: dict[str, LocaleConfig] = {
    "en": LocaleConfig("en", ".", ",", True),
    "nl": LocaleConfig("nl", ",", ".", True),
    "fr": LocaleConfig("fr", ",", " ", False),
    "de": LocaleConfig("de", ",", ".", False),
}

CURRENCY_SYMBOLS: dict[str, str] = {
    Currency.EUR: "€",
}
