from .catalog import RecurrenceCatalog, build_catalog, default_catalog, resolve_catalog
from .loader import DEFAULT_DEFINITIONS_FILE, load_cadence_definitions
from .types import CadenceDefinition, DurationTemplate, UnknownCadence

__all__ = [
    "RecurrenceCatalog",
    "build_catalog",
    "default_catalog",
    "resolve_catalog",
    "DEFAULT_DEFINITIONS_FILE",
    "load_cadence_definitions",
    "CadenceDefinition",
    "DurationTemplate",
    "UnknownCadence",
]
