# ABOUTME: Models package initialization
# ABOUTME: Exports the entry models

from .entry import (
    EntryKind,
    Entry,
    TypeFilter,
    CreatedAfterFilter,
    CreatedBeforeFilter,
    FieldEqualsFilter,
    OrderBy,
    Limit,
    Offset,
    AnyEntry,
    parse_entry,
)

__all__ = [
    "EntryKind",
    "Entry",
    "TypeFilter",
    "CreatedAfterFilter",
    "CreatedBeforeFilter",
    "FieldEqualsFilter",
    "OrderBy",
    "Limit",
    "Offset",
    "AnyEntry",
    "parse_entry",
]
