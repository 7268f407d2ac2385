from .duration import duration_display, formatted_duration_with_recurrence, occurrence_count
from .formatting import (
    formatted_price_with_duration,
    price_formatted_without_symbol,
    recurrence_formatted,
    subscription_summary,
    suggested_price_formatted_without_symbol,
    term_as_dict,
)
from .money import MoneyFormatter, format_money, parse_money
from .price_term import PriceTerm

__all__ = [
    "PriceTerm",
    "occurrence_count",
    "duration_display",
    "formatted_duration_with_recurrence",
    "formatted_price_with_duration",
    "subscription_summary",
    "price_formatted_without_symbol",
    "suggested_price_formatted_without_symbol",
    "recurrence_formatted",
    "term_as_dict",
    "MoneyFormatter",
    "format_money",
    "parse_money",
]
