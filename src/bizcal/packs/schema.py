"""
bizcal Calendar Pack Schemas

Pydantic models for validating calendar pack documents.

A calendar pack derives a new convention from a built-in one, adding
site-specific closures (a day of mourning announced after this library
was released, a local weather closure) or dropping holiday rules.

Schema versioning:
- schema_version field tracks breaking changes
- Loaders check major version compatibility
"""
from __future__ import annotations

from datetime import date
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


WeekdayValue = Literal[
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"
]


# =============================================================================
# Pack Schemas
# =============================================================================

class ClosureSchema(BaseModel):
    """Schema for a special closure: one day, a range, or one weekday in a range."""
    model_config = ConfigDict(populate_by_name=True)

    start_date: date = Field(
        ..., alias="date", description="Closure date, or first day of the range"
    )
    end_date: Optional[date] = Field(None, description="Last day of the range (inclusive)")
    weekday: Optional[WeekdayValue] = Field(
        None, description="Only close on this weekday within the range"
    )
    reason: str = Field(..., min_length=1, description="Why the market was closed")

    @field_validator("weekday", mode="before")
    @classmethod
    def lowercase_weekday(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @model_validator(mode="after")
    def validate_range(self) -> "ClosureSchema":
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError(
                f"end_date {self.end_date} is before date {self.start_date}"
            )
        if self.weekday is not None and self.end_date is None:
            raise ValueError("weekday filter requires an end_date range")
        return self


class CalendarPackSchema(BaseModel):
    """Schema for a complete calendar pack."""
    schema_version: str = Field(SCHEMA_VERSION, description="Pack schema version")
    code: str = Field(
        ..., pattern=r"^[a-z][a-z0-9_]*$", description="Registry key of the new convention"
    )
    name: str = Field(..., min_length=1, description="Display name")
    base: str = Field(..., description="Convention this pack extends")
    description: Optional[str] = Field(None, description="Free-form notes")
    exclude_holidays: list[str] = Field(
        default_factory=list, description="Names of base holiday rules to drop"
    )
    closures: list[ClosureSchema] = Field(default_factory=list)


def validate_calendar_pack(data: dict[str, Any]) -> CalendarPackSchema:
    """
    Validate a calendar pack dictionary against the schema.

    Raises:
        pydantic.ValidationError: If validation fails
    """
    return CalendarPackSchema.model_validate(data)


def check_schema_version(data: dict[str, Any]) -> bool:
    """Check that a pack's major schema version matches ours."""
    pack_version = str(data.get("schema_version", SCHEMA_VERSION))
    return pack_version.split(".")[0] == SCHEMA_VERSION.split(".")[0]
