"""Definition loader for the cadence table.

Loads a YAML/JSON table from subscription_terms/recurrence/definitions/cadences.yaml
(or an explicit path).

The loader is intentionally strict:
- it validates required fields
- it normalizes the table into frozen dataclasses

If the table is invalid, it raises ValueError with a readable message,
so a misconfigured deployment fails at startup instead of at checkout.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .types import CadenceDefinition, DurationTemplate

_LOGGER = logging.getLogger(__name__)

DEFAULT_DEFINITIONS_FILE = Path(__file__).resolve().parent / "definitions" / "cadences.yaml"


def _require(obj: Dict[str, Any], key: str, *, ctx: str) -> Any:
    if key not in obj:
        raise ValueError(f"Missing required key '{key}' in {ctx}")
    return obj[key]


def _require_text(obj: Dict[str, Any], key: str, *, ctx: str) -> str:
    value = str(_require(obj, key, ctx=ctx) or "").strip()
    if not value:
        raise ValueError(f"'{key}' cannot be empty in {ctx}")
    return value


def _load_one(path: Path) -> Dict[str, Any]:
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yaml", ".yml"):
        data = yaml.safe_load(raw) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Top-level YAML must be a mapping in {path}")
        return data
    if path.suffix.lower() == ".json":
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError(f"Top-level JSON must be an object in {path}")
        return data
    raise ValueError(f"Unsupported cadence table file type: {path}")


def _parse_template(obj: Any, *, ctx: str) -> Optional[DurationTemplate]:
    if obj is None:
        return None
    if not isinstance(obj, dict):
        raise ValueError(f"duration_template must be an object in {ctx}")
    tctx = f"{ctx}.duration_template"
    one = _require_text(obj, "one", ctx=tctx)
    other = _require_text(obj, "other", ctx=tctx)
    for form in (one, other):
        if "{count}" not in form:
            raise ValueError(f"duration_template forms must contain '{{count}}' in {tctx}")
    return DurationTemplate(one=one, other=other)


def _parse_months(value: Any, *, ctx: str) -> int:
    # bool is an int subclass; "true" months is a table typo, not 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"months_per_cycle must be an integer in {ctx}")
    if value <= 0:
        raise ValueError(f"months_per_cycle must be positive in {ctx}")
    return value


def load_cadence_definitions(path: Path | str | None = None) -> List[CadenceDefinition]:
    source = Path(path) if path else DEFAULT_DEFINITIONS_FILE
    if not source.exists():
        raise ValueError(f"Cadence table not found: {source}")

    data = _load_one(source)
    items = data.get("cadences")
    if not isinstance(items, list) or not items:
        raise ValueError(f"'cadences' must be a non-empty list in {source.name}")

    out: List[CadenceDefinition] = []
    seen: set[str] = set()
    for i, it in enumerate(items):
        ctx = f"{source.name}.cadences[{i}]"
        if not isinstance(it, dict):
            raise ValueError(f"cadence must be an object in {ctx}")
        name = _require_text(it, "name", ctx=ctx)
        if name in seen:
            raise ValueError(f"Duplicate cadence '{name}' in {ctx}")
        seen.add(name)
        out.append(
            CadenceDefinition(
                name=name,
                months_per_cycle=_parse_months(_require(it, "months_per_cycle", ctx=ctx), ctx=ctx),
                long_indicator=_require_text(it, "long_indicator", ctx=ctx),
                short_indicator=_require_text(it, "short_indicator", ctx=ctx),
                single_period_indicator=_require_text(it, "single_period_indicator", ctx=ctx),
                duration_template=_parse_template(it.get("duration_template"), ctx=ctx),
                source_file=source.name,
            )
        )

    _LOGGER.debug("Loaded %d cadences from %s", len(out), source)
    return out
