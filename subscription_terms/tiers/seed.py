"""Seed-file loader: sellable units and their price terms from YAML/JSON.

    units:
      - kind: tier
        name: Premium
        default_cadence: monthly
        terms:
          - {cadence: monthly, price_cents: 1000, fixed_duration_months: 12}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from ..config import DEFAULT_CURRENCY
from ..terms import PriceTerm
from .unit import PRODUCT, SellableUnit

SeededUnit = Tuple[SellableUnit, List[PriceTerm]]


def _read(path: Path) -> Dict[str, Any]:
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(raw)
    else:
        data = yaml.safe_load(raw) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Top-level document must be a mapping in {path}")
    return data


def parse_units(data: Dict[str, Any], *, source: str = "<memory>") -> List[SeededUnit]:
    items = data.get("units")
    if not isinstance(items, list):
        raise ValueError(f"'units' must be a list in {source}")

    out: List[SeededUnit] = []
    for i, it in enumerate(items):
        ctx = f"{source}.units[{i}]"
        if not isinstance(it, dict):
            raise ValueError(f"unit must be an object in {ctx}")
        unit = SellableUnit(
            kind=str(it.get("kind") or PRODUCT).strip().lower(),
            name=it.get("name"),
            default_cadence=it.get("default_cadence"),
            is_recurring_billing=bool(it.get("is_recurring_billing", False)),
            currency=str(it.get("currency") or DEFAULT_CURRENCY).strip().lower(),
        )
        terms: List[PriceTerm] = []
        for j, t in enumerate(it.get("terms") or []):
            if not isinstance(t, dict):
                raise ValueError(f"term must be an object in {ctx}.terms[{j}]")
            terms.append(PriceTerm.from_mapping(t, currency=unit.currency))
        out.append((unit, terms))
    return out


def load_seed_file(path: Path | str) -> List[SeededUnit]:
    p = Path(path)
    return parse_units(_read(p), source=p.name)
