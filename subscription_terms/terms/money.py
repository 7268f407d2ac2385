"""Default money formatter.

Terms only hold integer amounts in the currency's smallest unit; turning that
into "$49.99" is a collaborator concern. Anything with the MoneyFormatter
signature can be passed to the formatting helpers instead of format_money.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Dict, Optional, Protocol, Tuple

# code -> (symbol, minor-unit exponent)
_CURRENCIES: Dict[str, Tuple[str, int]] = {
    "usd": ("$", 2),
    "eur": ("€", 2),
    "gbp": ("£", 2),
    "aud": ("A$", 2),
    "cad": ("CA$", 2),
    "nzd": ("NZ$", 2),
    "sgd": ("S$", 2),
    "hkd": ("HK$", 2),
    "inr": ("₹", 2),
    "brl": ("R$", 2),
    "pln": ("zł", 2),
    "chf": ("CHF ", 2),
    "jpy": ("¥", 0),
    "krw": ("₩", 0),
}


class MoneyFormatter(Protocol):
    def __call__(self, amount_minor_units: int, currency: str, *, no_cents_if_whole: bool = ..., symbol: bool = ...) -> str: ...


def _norm_currency(currency: Optional[str]) -> str:
    return (currency or "").strip().lower()


def minor_unit_exponent(currency: Optional[str]) -> int:
    return _CURRENCIES.get(_norm_currency(currency), ("", 2))[1]


def format_money(
    amount_minor_units: int,
    currency: str,
    *,
    no_cents_if_whole: bool = True,
    symbol: bool = True,
) -> str:
    code = _norm_currency(currency)
    sym, exponent = _CURRENCIES.get(code, ("", 2))

    sign = "-" if amount_minor_units < 0 else ""
    whole, frac = divmod(abs(amount_minor_units), 10 ** exponent)
    number = f"{whole:,}"
    if exponent and not (no_cents_if_whole and frac == 0):
        number = f"{number}.{frac:0{exponent}d}"

    if not symbol:
        return f"{sign}{number}"
    if sym:
        return f"{sign}{sym}{number}"
    return f"{sign}{number} {code.upper()}"


def parse_money(text: str, currency: str) -> int:
    """Parse editor input ("10", "10.5", "$1,000.00") into minor units."""

    cleaned = str(text or "").strip()
    sym = _CURRENCIES.get(_norm_currency(currency), ("", 2))[0].strip()
    if sym and cleaned.startswith(sym):
        cleaned = cleaned[len(sym):]
    cleaned = cleaned.replace(",", "").strip()
    if not cleaned:
        raise ValueError(f"Not a money amount: {text!r}")

    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Not a money amount: {text!r}") from None
    if not value.is_finite():
        raise ValueError(f"Not a money amount: {text!r}")

    scaled = value.scaleb(minor_unit_exponent(currency))
    if scaled != scaled.to_integral_value():
        raise ValueError(f"Too many decimal places for {currency.upper()}: {text!r}")
    return int(scaled)
