# ABOUTME: Mixins contributing type and field equality filters
# ABOUTME: Each builder pushes one filter entry through the shared sink

from typing import Any

from typea.interfaces.mixin import BaseMixin
from typea.models.entry import FieldEqualsFilter, TypeFilter


class TypeFilterMixin(BaseMixin):
    """Restrict results to records of given types."""

    def of_type(self, *types: str) -> "TypeFilterMixin":
        """
        Push a type filter.

        Args:
            *types: Accepted type names. At least one is required.

        Raises:
            ValidationException: If no name is given or a name is blank.
        """
        self._push(self._build(TypeFilter, types=types))
        return self


class FieldFilterMixin(BaseMixin):
    """Restrict results by field equality."""

    def where(self, field: str, value: Any) -> "FieldFilterMixin":
        self._push(self._build(FieldEqualsFilter, field=field, value=value))
        return self

    def where_all(self, **fields: Any) -> "FieldFilterMixin":
        """Push one equality filter per keyword, in keyword order."""
        for field, value in fields.items():
            self.where(field, value)
        return self
