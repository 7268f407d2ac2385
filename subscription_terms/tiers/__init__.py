from .aggregator import TierPricing
from .editor import EDITABLE_FIELDS, permitted_params, price_terms_from_editor_values
from .seed import SeededUnit, load_seed_file, parse_units
from .unit import PRODUCT, TIER, SellableUnit

__all__ = [
    "TierPricing",
    "SellableUnit",
    "PRODUCT",
    "TIER",
    "EDITABLE_FIELDS",
    "permitted_params",
    "price_terms_from_editor_values",
    "SeededUnit",
    "load_seed_file",
    "parse_units",
]
