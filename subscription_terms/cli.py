#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Subscription terms – CLI

Flow:
- `cadences`: prints the loaded cadence table.
- `describe`: builds a single price term from flags and prints its customer-facing text,
  occurrence count and validation problems.
- `check`: reads a seed file (YAML/JSON) of sellable units and their terms, validates
  every term and prints a Markdown report. Exit code 1 when any term is not billable.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from .config import CADENCE_FILE, DEFAULT_CURRENCY, DEFAULT_LOG_LEVEL
from .recurrence import RecurrenceCatalog, build_catalog, default_catalog
from .reporting import render_failures, render_report
from .terms import PriceTerm, subscription_summary, term_as_dict
from .tiers import PRODUCT, TIER, SellableUnit, load_seed_file
from .validation import validate

console = Console()
logger = logging.getLogger("subscription_terms")


# --------------------------------------------------------------------
# Argument parsing
# --------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="subscription-terms",
        description=(
            "Subscription pricing terms\n\n"
            "Validates billing cadences and fixed commitment lengths and renders\n"
            "the duration text a buyer sees next to a recurring price."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--log-level",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default=DEFAULT_LOG_LEVEL if DEFAULT_LOG_LEVEL in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"} else "WARNING",
        help="Logging level for internal messages (DEBUG is the most verbose).",
    )

    parser.add_argument(
        "--cadence-file",
        type=str,
        default=CADENCE_FILE or None,
        help="Alternative cadence table (YAML/JSON). Defaults to the packaged table.",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("cadences", help="List the allowed billing cadences.")

    describe = sub.add_parser("describe", help="Describe a single price term.")
    describe.add_argument("--cadence", type=str, default=None, help="Billing cadence (omit for a one-time sale).")
    describe.add_argument("--months", type=int, default=None, help="Fixed duration in months (omit for ongoing).")
    describe.add_argument("--price-cents", type=int, required=True, help="Amount in the currency's smallest unit.")
    describe.add_argument("--currency", type=str, default=DEFAULT_CURRENCY, help="Currency code, e.g. usd, eur.")
    describe.add_argument("--display-name", type=str, default=None, help="Custom duration text override.")
    describe.add_argument("--name", type=str, default=None, help="Owner name used in the summary.")
    describe.add_argument("--tier", action="store_true", help="Validate as a tier price instead of a product price.")
    describe.add_argument("--recurring-billing", action="store_true", help="Owning product requires a cadence.")
    describe.add_argument("--json", action="store_true", help="Print the term projection as JSON.")

    check = sub.add_parser("check", help="Validate every term in a seed file and print a report.")
    check.add_argument("path", type=str, help="YAML or JSON file with a top-level 'units' list.")

    return parser


# --------------------------------------------------------------------
# Commands
# --------------------------------------------------------------------
def _cmd_cadences(catalog: RecurrenceCatalog) -> int:
    table = Table(title="Billing cadences")
    for col in ("Cadence", "Months", "Long", "Short", "Single period"):
        table.add_column(col)
    for name in catalog.allowed_cadences():
        d = catalog.require(name)
        table.add_row(name, str(d.months_per_cycle), d.long_indicator, d.short_indicator, d.single_period_indicator)
    console.print(table)
    return 0


def _cmd_describe(args: argparse.Namespace, catalog: RecurrenceCatalog) -> int:
    unit = SellableUnit(
        kind=TIER if args.tier else PRODUCT,
        name=args.name,
        is_recurring_billing=args.recurring_billing,
        currency=args.currency.lower(),
    )
    term = PriceTerm(
        amount_minor_units=args.price_cents,
        currency=unit.currency,
        cadence=args.cadence,
        fixed_duration_months=args.months,
        duration_display_name=args.display_name,
    )
    failures = validate(term, unit.pricing_context(), catalog)
    if failures:
        console.print("[red]Price term is not billable:[/red]")
        console.print(render_failures([(term, failures)]), markup=False, soft_wrap=True)
        return 1

    if args.json:
        console.print_json(json.dumps(term_as_dict(term, catalog)))
        return 0

    console.print(
        subscription_summary(term, unit.owner_display_name(), symbol=unit.shows_currency_symbol(), catalog=catalog),
        markup=False,
        soft_wrap=True,
    )
    count = term.charge_occurrence_count(catalog)
    if count is not None:
        console.print(f"Charges: {count}")
    console.print(f"Duration: {term.duration_display()}", markup=False)
    return 0


def _cmd_check(args: argparse.Namespace, catalog: RecurrenceCatalog) -> int:
    try:
        seeded = load_seed_file(args.path)
    except (OSError, ValueError) as ex:
        console.print(f"[red]Cannot read {args.path}: {ex}[/red]")
        return 2
    logger.info("Loaded %d unit(s) from %s", len(seeded), args.path)

    units = []
    invalid = 0
    for unit, terms in seeded:
        ctx = unit.pricing_context()
        results = [(t, validate(t, ctx, catalog)) for t in terms]
        invalid += sum(1 for _, f in results if f)
        units.append((unit, results))

    console.print(render_report(units, catalog), markup=False, soft_wrap=True)
    if invalid:
        console.print(f"\n[yellow]{invalid} price term(s) are not billable.[/yellow]")
        return 1
    return 0


# --------------------------------------------------------------------
# Main
# --------------------------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )
    logger.debug("CLI arguments: %s", args)

    try:
        catalog = build_catalog(args.cadence_file) if args.cadence_file else default_catalog()
    except ValueError as ex:
        console.print(f"[red]Invalid cadence table: {ex}[/red]")
        return 2

    if args.command == "cadences":
        return _cmd_cadences(catalog)
    if args.command == "describe":
        return _cmd_describe(args, catalog)
    return _cmd_check(args, catalog)


if __name__ == "__main__":
    sys.exit(main())
