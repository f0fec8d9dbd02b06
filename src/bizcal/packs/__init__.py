"""
bizcal Calendar Packs

Schema validation and loading for calendar packs.

Calendar packs are YAML documents (or mappings) that derive a new
convention from an existing one: extra special closures, or holiday
rules dropped from the base set.

Usage:
    from bizcal.packs import load_calendar_pack

    nyse = load_calendar_pack('''
    code: nyse_2025
    name: NYSE 2025
    base: nyse
    closures:
      - date: 2025-01-09
        reason: National Day of Mourning for President Carter
    ''')
"""
from __future__ import annotations

from .loader import (
    CalendarPackLoader,
    load_calendar_pack,
)
from .schema import (
    SCHEMA_VERSION,
    CalendarPackSchema,
    ClosureSchema,
    check_schema_version,
    validate_calendar_pack,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Loader
    "CalendarPackLoader",
    "load_calendar_pack",
    # Validation
    "validate_calendar_pack",
    "check_schema_version",
    # Schemas
    "CalendarPackSchema",
    "ClosureSchema",
]
