"""Round-trip between editor payloads and PriceTerms.

An editor submits one mapping per cadence, shaped like the output of
TierPricing.values_by_cadence(for_edit=True), with form values as strings:

    {"monthly": {"enabled": "1", "price_cents": "1000",
                 "fixed_duration_months": "12", "duration_display_name": "1 year deal"}}
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..config import DEFAULT_CURRENCY
from ..recurrence import RecurrenceCatalog, resolve_catalog
from ..terms import PriceTerm, parse_money

_LOGGER = logging.getLogger(__name__)

EDITABLE_FIELDS: Tuple[str, ...] = (
    "enabled",
    "price",
    "price_cents",
    "suggested_price",
    "suggested_price_cents",
    "fixed_duration_months",
    "duration_display_name",
)

_FALSE_VALUES = {"", "0", "false", "off", "no"}


def permitted_params(catalog: Optional[RecurrenceCatalog] = None) -> Dict[str, Tuple[str, ...]]:
    return {c: EDITABLE_FIELDS for c in resolve_catalog(catalog).allowed_cadences()}


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _enabled(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_VALUES
    return bool(value)


def _to_int(value: Any, *, cadence: str, key: str) -> Optional[int]:
    if _blank(value):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValueError(f"{cadence}.{key} must be a whole number, got {value!r}") from None


def _amount(raw: Mapping[str, Any], cents_key: str, price_key: str, *, cadence: str, currency: str) -> Optional[int]:
    cents = _to_int(raw.get(cents_key), cadence=cadence, key=cents_key)
    if cents is not None:
        return cents
    if _blank(raw.get(price_key)):
        return None
    try:
        return parse_money(str(raw[price_key]), currency)
    except ValueError as ex:
        raise ValueError(f"{cadence}.{price_key}: {ex}") from None


def price_terms_from_editor_values(
    values: Mapping[str, Mapping[str, Any]],
    currency: str = DEFAULT_CURRENCY,
    catalog: Optional[RecurrenceCatalog] = None,
) -> List[PriceTerm]:
    allowed = permitted_params(catalog)
    out: List[PriceTerm] = []
    for cadence, raw in values.items():
        if cadence not in allowed:
            _LOGGER.warning("Ignoring editor values for unknown cadence %r", cadence)
            continue
        if not isinstance(raw, Mapping):
            raise ValueError(f"{cadence} editor values must be a mapping")
        if not _enabled(raw.get("enabled", True)):
            continue

        unknown = sorted(set(raw) - set(allowed[cadence]))
        if unknown:
            _LOGGER.debug("Dropping unpermitted editor keys for %s: %s", cadence, unknown)

        name = raw.get("duration_display_name")
        out.append(
            PriceTerm(
                amount_minor_units=_amount(raw, "price_cents", "price", cadence=cadence, currency=currency),
                currency=currency,
                cadence=cadence,
                fixed_duration_months=_to_int(raw.get("fixed_duration_months"), cadence=cadence, key="fixed_duration_months"),
                duration_display_name=None if _blank(name) else str(name).strip(),
                suggested_amount_minor_units=_amount(
                    raw, "suggested_price_cents", "suggested_price", cadence=cadence, currency=currency
                ),
            )
        )
    return out
