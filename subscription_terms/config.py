#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
config.py

This module defines configuration constants and defaults for the subscription terms package.

Key idea: the cadence table is DATA, not code
---------------------------------------------
The set of allowed billing cadences (monthly, yearly, ...) and their indicator texts
live in a YAML table shipped with the package (recurrence/definitions/cadences.yaml).

Why do we do this?
- Adding a cadence (e.g. "every_three_years") should not require touching Python.
- The word-choice templates ("1 year" / "2 years") sit next to the cadence they describe,
  so a translated table can replace them without code changes.

Everything else here is a small set of defaults and labels that can be overridden
through environment variables.
"""

import os  # Standard library: access environment variables (os.getenv).

# ---------------------------------------------------------------------
# Cadence table
# ---------------------------------------------------------------------
# CADENCE_FILE:
# - Optional path to an alternative cadence table (YAML or JSON).
# - Empty string means "use the packaged table".
# - Can be overridden via env var SUBTERMS_CADENCE_FILE or the CLI (--cadence-file).
CADENCE_FILE = os.getenv("SUBTERMS_CADENCE_FILE", "").strip()

# ---------------------------------------------------------------------
# Defaults: currency
# ---------------------------------------------------------------------
# DEFAULT_CURRENCY:
# - Used when a sellable unit / editor payload does not specify a currency.
# - Example value: "usd"
DEFAULT_CURRENCY = os.getenv("SUBTERMS_DEFAULT_CURRENCY", "usd").strip().lower()

# ---------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------
# DEFAULT_LOG_LEVEL:
# - Level used by the CLI when --log-level is not given.
DEFAULT_LOG_LEVEL = os.getenv("SUBTERMS_LOG_LEVEL", "WARNING").strip().upper()

# ---------------------------------------------------------------------
# Audit trail (repository commits)
# ---------------------------------------------------------------------
# AUDIT_FILE:
# - If set, the repository appends one JSONL event per committed change.
# - Empty string disables the audit trail.
AUDIT_FILE = os.getenv("SUBTERMS_AUDIT_FILE", "").strip()

# ---------------------------------------------------------------------
# Display labels
# ---------------------------------------------------------------------
# ONGOING_LABEL:
# - Duration text for offers that recur indefinitely (no fixed duration).
ONGOING_LABEL = "Ongoing"

# DEFAULT_PRODUCT_NAME / DEFAULT_TIER_NAME:
# - Placeholders used in subscription summaries when the owner has no name.
DEFAULT_PRODUCT_NAME = "Product"
DEFAULT_TIER_NAME = "Tier"
