"""
bizcal Exception Hierarchy

Domain-specific exceptions for business-day calendar lookups.
All exceptions carry an error code for tracking and logging.

Exception codes follow the pattern: BC_<CATEGORY>_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class BizCalError(Exception):
    """
    Base exception for all bizcal errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (BC_*)
        details: Additional context about the error
        convention: Code of the calendar convention involved, if any
    """
    message: str
    code: str = "BC_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)
    convention: Optional[str] = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.message}"]
        if self.convention:
            parts.append(f"(convention: {self.convention})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        if self.convention:
            result["convention"] = self.convention
        return result


# =============================================================================
# Easter Table Errors
# =============================================================================

@dataclass
class EasterOutOfRangeError(BizCalError):
    """Requested year is outside the Easter tables."""
    code: str = "BC_EASTER_OUT_OF_RANGE"


# =============================================================================
# Navigation Errors
# =============================================================================

@dataclass
class NoBusinessDayFoundError(BizCalError):
    """Business-day scan gave up after the configured number of days."""
    code: str = "BC_NO_BUSINESS_DAY"


# =============================================================================
# Convention Errors
# =============================================================================

@dataclass
class UnknownConventionError(BizCalError):
    """Requested calendar convention is not registered."""
    code: str = "BC_UNKNOWN_CONVENTION"


# =============================================================================
# Calendar Pack Errors
# =============================================================================

@dataclass
class CalendarPackError(BizCalError):
    """Failed to parse a calendar pack document."""
    code: str = "BC_CALENDAR_PACK_ERROR"


@dataclass
class CalendarPackValidationError(CalendarPackError):
    """Calendar pack failed schema or reference validation."""
    code: str = "BC_CALENDAR_PACK_INVALID"
