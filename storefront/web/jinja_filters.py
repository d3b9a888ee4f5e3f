from decimal import Decimal

from storefront.domain.geo import CURRENCY_SYMBOLS, LOCALE_CONFIG


def format_number_eu(value: Decimal | str | float, decimal_sep=",", thousand_sep=".") -> str:
    # simpele formatter: 12345.67 -> 12.345,67
    d = Decimal(str(value))
    s = f"{d:.2f}"
    sign = "-" if s.startswith("-") else ""
    whole, frac = s.lstrip("-").split(".")
    # thousand grouping
    parts = []
    while whole:
        parts.append(whole[-3:])
        whole = whole[:-3]
    whole = thousand_sep.join(reversed(parts))
    return f"{sign}{whole}{decimal_sep}{frac}"


def format_price(price_cents: int, currency: str = "EUR", locale: str = "en") -> str:
    """Cents -> display string for the given locale, e.g. 1290 -> "€12.90" (en) / "12,90 €" (de)."""
    cfg = LOCALE_CONFIG.get((locale or "en").split("-")[0].lower(), LOCALE_CONFIG["en"])
    symbol = CURRENCY_SYMBOLS.get(currency.upper())
    amount = format_number_eu(Decimal(int(price_cents)) / 100, cfg.decimal_sep, cfg.thousand_sep)

    if symbol is None:
        # onbekende valuta: code achter het bedrag
        return f"{amount} {currency.upper()}"
    if cfg.symbol_first:
        return f"{symbol}{amount}"
    return f"{amount} {symbol}"


def format_percent(rate) -> str:
    # 0.06 -> "6%"
    pct = (Decimal(str(rate)) * 100).normalize()
    return f"{pct:f}%"
