from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

from ..config import CADENCE_FILE
from .loader import load_cadence_definitions
from .types import CadenceDefinition, UnknownCadence


@dataclass(frozen=True)
class RecurrenceCatalog:
    """Lookup table for billing cadences, in definition order.

    The catalog is built once and never altered; every accessor is a plain read.
    Lookups for a cadence outside the table raise UnknownCadence: code that
    formats a term expects its cadence to have passed validation already.
    """

    entries: Dict[str, CadenceDefinition] = field(default_factory=dict)

    @classmethod
    def from_definitions(cls, definitions: Iterable[CadenceDefinition]) -> "RecurrenceCatalog":
        entries: Dict[str, CadenceDefinition] = {}
        for d in definitions:
            if d.name in entries:
                raise ValueError(f"Duplicate cadence in catalog: {d.name}")
            entries[d.name] = d
        return cls(entries=entries)

    def allowed_cadences(self) -> Tuple[str, ...]:
        return tuple(self.entries.keys())

    def is_allowed(self, cadence: object) -> bool:
        return isinstance(cadence, str) and cadence in self.entries

    def get(self, cadence: object) -> Optional[CadenceDefinition]:
        if not isinstance(cadence, str):
            return None
        return self.entries.get(cadence)

    def require(self, cadence: object) -> CadenceDefinition:
        d = self.get(cadence)
        if d is None:
            raise UnknownCadence(cadence)
        return d

    def cycle_months(self, cadence: str) -> int:
        return self.require(cadence).months_per_cycle

    def long_indicator(self, cadence: str) -> str:
        return self.require(cadence).long_indicator

    def short_indicator(self, cadence: str) -> str:
        return self.require(cadence).short_indicator

    def single_period_indicator(self, cadence: str) -> str:
        return self.require(cadence).single_period_indicator


def build_catalog(path: Path | str | None = None) -> RecurrenceCatalog:
    return RecurrenceCatalog.from_definitions(load_cadence_definitions(path))


@lru_cache(maxsize=None)
def _cached_catalog(path: str) -> RecurrenceCatalog:
    return build_catalog(path or None)


def default_catalog() -> RecurrenceCatalog:
    """Process-wide catalog (packaged table, or SUBTERMS_CADENCE_FILE)."""

    return _cached_catalog(CADENCE_FILE)


def resolve_catalog(catalog: Optional[RecurrenceCatalog]) -> RecurrenceCatalog:
    return catalog if catalog is not None else default_catalog()
