"""
bizcal Calendar Pack Loader

Loads and validates calendar packs from YAML text or plain mappings and
turns them into `Convention` values.

Packs are passed in as content, never as paths; reading files is left to
the host application.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Union

import yaml
from pydantic import ValidationError

from ..calendars.base import Weekday, is_weekend
from ..conventions import Closure, Convention, get_convention
from ..exceptions import (
    CalendarPackError,
    CalendarPackValidationError,
    UnknownConventionError,
)
from .schema import (
    SCHEMA_VERSION,
    CalendarPackSchema,
    ClosureSchema,
    check_schema_version,
    validate_calendar_pack,
)

logger = logging.getLogger(__name__)

PackSource = Union[str, Mapping[str, Any]]


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_closure(schema: ClosureSchema) -> Closure:
    """Convert ClosureSchema to Closure."""
    return Closure(
        reason=schema.reason,
        start=schema.start_date,
        end=schema.end_date,
        weekday=Weekday[schema.weekday.upper()] if schema.weekday else None,
    )


# =============================================================================
# Calendar Pack Loader
# =============================================================================

class CalendarPackLoader:
    """
    Builds conventions from calendar packs.

    Packs may extend a built-in convention or one loaded earlier by the
    same loader.

    Usage:
        loader = CalendarPackLoader()
        nyse = loader.load(pack_yaml)
        nyse.is_business_day(date(2025, 1, 9))
    """

    def __init__(self, strict_version: bool = True):
        """
        Initialize the loader.

        Args:
            strict_version: If True, reject packs with incompatible schema versions
        """
        self.strict_version = strict_version
        self._conventions: dict[str, Convention] = {}

    def load(self, source: PackSource) -> Convention:
        """
        Load a calendar pack.

        Args:
            source: YAML text or an already parsed mapping

        Returns:
            The derived Convention

        Raises:
            CalendarPackError: If the YAML cannot be parsed
            CalendarPackValidationError: If validation fails
        """
        data = self._parse(source)

        if self.strict_version and not check_schema_version(data):
            pack_version = data.get("schema_version", "unknown")
            raise CalendarPackValidationError(
                message=(
                    f"Schema version mismatch: pack has {pack_version}, "
                    f"expected {SCHEMA_VERSION}"
                ),
                details={
                    "pack_version": pack_version,
                    "expected_version": SCHEMA_VERSION,
                },
            )

        try:
            schema = validate_calendar_pack(data)
        except ValidationError as e:
            raise CalendarPackValidationError(
                message=f"Calendar pack validation failed: {e.error_count()} errors",
                details={"errors": e.errors(include_url=False)},
            )

        convention = self._build(schema)
        self._conventions[convention.code] = convention
        logger.info(
            "Loaded calendar pack %s (base %s, %d closures, %d holidays excluded)",
            convention.code,
            schema.base,
            len(schema.closures),
            len(schema.exclude_holidays),
        )
        return convention

    def get_convention(self, code: str) -> Optional[Convention]:
        """Get a convention loaded by this loader."""
        return self._conventions.get(code)

    def list_conventions(self) -> list[str]:
        """Codes of all conventions loaded so far."""
        return list(self._conventions.keys())

    def _parse(self, source: PackSource) -> dict[str, Any]:
        if isinstance(source, Mapping):
            return dict(source)
        try:
            data = yaml.safe_load(source)
        except yaml.YAMLError as e:
            raise CalendarPackError(
                message=f"Failed to parse calendar pack: {e}",
                details={"error": str(e)},
            )
        if not isinstance(data, dict):
            raise CalendarPackError(
                message="Calendar pack must be a mapping",
                details={"type": type(data).__name__},
            )
        return data

    def _resolve_base(self, schema: CalendarPackSchema) -> Convention:
        if schema.base in self._conventions:
            return self._conventions[schema.base]
        try:
            return get_convention(schema.base)
        except UnknownConventionError as e:
            raise CalendarPackValidationError(
                message=f"Calendar pack {schema.code} extends unknown convention '{schema.base}'",
                details=e.details,
                convention=schema.code,
            )

    def _build(self, schema: CalendarPackSchema) -> Convention:
        base = self._resolve_base(schema)

        closures = [_convert_closure(c) for c in schema.closures]
        for closure in closures:
            if closure.end is None and is_weekend(closure.start):
                logger.warning(
                    "Closure '%s' on %s falls on a weekend and has no effect",
                    closure.reason,
                    closure.start,
                )

        try:
            return base.extend(
                code=schema.code,
                name=schema.name,
                closures=closures,
                exclude=schema.exclude_holidays,
            )
        except ValueError as e:
            raise CalendarPackValidationError(
                message=f"Calendar pack {schema.code} is inconsistent with {base.code}",
                details={"errors": str(e)},
                convention=schema.code,
            )


# =============================================================================
# Convenience Functions
# =============================================================================

def load_calendar_pack(source: PackSource) -> Convention:
    """
    Load a single calendar pack.

    Convenience function that creates a temporary loader.

    Args:
        source: YAML text or an already parsed mapping

    Returns:
        The derived Convention
    """
    loader = CalendarPackLoader()
    return loader.load(source)
