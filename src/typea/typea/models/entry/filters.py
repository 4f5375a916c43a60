# ABOUTME: Filtering entry models contributed by the built-in mixins
# ABOUTME: Covers type, creation-time range and field equality filters

from datetime import datetime
from typing import Any, Literal, Tuple

from pydantic import Field, field_validator

from typea.config.settings import get_settings
from typea.models.entry.base import Entry


class TypeFilter(Entry):
    """Restrict results to records whose type is one of ``types``."""

    kind: Literal["type"] = "type"
    types: Tuple[str, ...] = Field(..., min_length=1, description="Accepted type names")

    @field_validator("types")
    @classmethod
    def validate_types(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Reject blank type names and drop duplicates while keeping order."""
        cleaned = []
        for name in v:
            name = name.strip()
            if not name:
                raise ValueError("type names must not be blank")
            if name not in cleaned:
                cleaned.append(name)
        return tuple(cleaned)


def _normalize_timestamp(value: datetime) -> datetime:
    # Naive datetimes are read in the configured timezone
    if value.tzinfo is None:
        return value.replace(tzinfo=get_settings().tzinfo())
    return value


class CreatedAfterFilter(Entry):
    """Keep records created at or after ``timestamp``."""

    kind: Literal["created_after"] = "created_after"
    timestamp: datetime = Field(..., description="Inclusive lower bound on creation time")

    @field_validator("timestamp")
    @classmethod
    def validate_timestamp(cls, v: datetime) -> datetime:
        return _normalize_timestamp(v)


class CreatedBeforeFilter(Entry):
    """Keep records created at or before ``timestamp``."""

    kind: Literal["created_before"] = "created_before"
    timestamp: datetime = Field(..., description="Inclusive upper bound on creation time")

    @field_validator("timestamp")
    @classmethod
    def validate_timestamp(cls, v: datetime) -> datetime:
        return _normalize_timestamp(v)


class FieldEqualsFilter(Entry):
    """Keep records whose ``field`` equals ``value``."""

    kind: Literal["field_equals"] = "field_equals"
    field: str = Field(..., min_length=1, description="Record field name")
    value: Any = Field(default=None, description="Expected value")
