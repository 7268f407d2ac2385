from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..config import DEFAULT_CURRENCY, DEFAULT_PRODUCT_NAME, DEFAULT_TIER_NAME
from ..validation import PricingContext

PRODUCT = "product"
TIER = "tier"


@dataclass(frozen=True)
class SellableUnit:
    """A product, or a tier/variant of a product, that carries price terms."""

    kind: str = PRODUCT  # "product" | "tier"
    name: Optional[str] = None
    default_cadence: Optional[str] = None
    is_recurring_billing: bool = False
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if self.kind not in (PRODUCT, TIER):
            raise ValueError(f"Unknown sellable unit kind: {self.kind!r}")

    def owner_display_name(self) -> str:
        if self.name and self.name.strip():
            return self.name
        return DEFAULT_TIER_NAME if self.kind == TIER else DEFAULT_PRODUCT_NAME

    def pricing_context(self) -> PricingContext:
        if self.kind == TIER:
            return PricingContext.for_tier()
        return PricingContext.for_product(self.is_recurring_billing)

    def shows_currency_symbol(self) -> bool:
        """Whole-product prices carry the currency symbol; tier prices are shown bare."""
        return self.kind == PRODUCT
