from .rules import failures_by_field, is_billable, validate
from .types import (
    BASE_FIELD,
    DURATION_SHORTER_THAN_CYCLE,
    INVALID_CADENCE,
    INVALID_DURATION,
    MISSING_PRICE,
    MISSING_REQUIRED_FIELD,
    PriceTermInvalid,
    PricingContext,
    ValidationFailure,
)

__all__ = [
    "validate",
    "is_billable",
    "failures_by_field",
    "PricingContext",
    "PriceTermInvalid",
    "ValidationFailure",
    "BASE_FIELD",
    "MISSING_REQUIRED_FIELD",
    "INVALID_DURATION",
    "INVALID_CADENCE",
    "DURATION_SHORTER_THAN_CYCLE",
    "MISSING_PRICE",
]
