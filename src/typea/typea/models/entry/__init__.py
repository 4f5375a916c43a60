# ABOUTME: Entry models package
# ABOUTME: Exports the entry base, built-in kinds and the discriminated union parser

from typing import Annotated, Any, Mapping, Union

from pydantic import Field, TypeAdapter

from .entry_kind import EntryKind
from .base import Entry
from .filters import TypeFilter, CreatedAfterFilter, CreatedBeforeFilter, FieldEqualsFilter
from .paging import OrderBy, Limit, Offset

AnyEntry = Annotated[
    Union[
        TypeFilter,
        CreatedAfterFilter,
        CreatedBeforeFilter,
        FieldEqualsFilter,
        OrderBy,
        Limit,
        Offset,
    ],
    Field(discriminator="kind"),
]

_any_entry_adapter: TypeAdapter[Any] = TypeAdapter(AnyEntry)


def parse_entry(data: Mapping[str, Any]) -> Entry:
    """
    Parse serialized data back into the matching built-in entry model.

    Args:
        data: Mapping produced by ``entry.model_dump()`` or its JSON form.

    Returns:
        The concrete entry selected by the ``kind`` field.

    Raises:
        pydantic.ValidationError: If the kind is unknown or the payload is invalid.
    """
    return _any_entry_adapter.validate_python(dict(data))


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
