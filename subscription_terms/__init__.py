"""Billing cadences, fixed-duration commitments and their customer-facing text."""

from .recurrence import RecurrenceCatalog, UnknownCadence, default_catalog
from .terms import PriceTerm
from .tiers import SellableUnit, TierPricing
from .validation import PricingContext, ValidationFailure, validate

__all__ = [
    "RecurrenceCatalog",
    "UnknownCadence",
    "default_catalog",
    "PriceTerm",
    "SellableUnit",
    "TierPricing",
    "PricingContext",
    "ValidationFailure",
    "validate",
]
