from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class UnknownCadence(ValueError):
    """Raised when a cadence is looked up that the catalog does not define."""

    def __init__(self, cadence: object):
        super().__init__(f"Unknown cadence not in recurrence catalog: {cadence!r}")
        self.cadence = cadence


@dataclass(frozen=True)
class DurationTemplate:
    """Singular/plural word choice for an occurrence count."""

    one: str
    other: str

    def render(self, count: int) -> str:
        pattern = self.one if count == 1 else self.other
        return pattern.format(count=count)


@dataclass(frozen=True)
class CadenceDefinition:
    name: str
    months_per_cycle: int
    long_indicator: str
    short_indicator: str
    single_period_indicator: str
    duration_template: Optional[DurationTemplate] = None
    source_file: str = ""
