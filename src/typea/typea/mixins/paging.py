# ABOUTME: Mixin contributing ordering and pagination entries
# ABOUTME: Provides order_by, limit, offset and page-number helpers

from typea.exceptions import ValidationException
from typea.interfaces.mixin import BaseMixin
from typea.models.entry import Limit, Offset, OrderBy


class PagingMixin(BaseMixin):
    """Order and paginate results."""

    def order_by(self, field: str, descending: bool = False) -> "PagingMixin":
        self._push(self._build(OrderBy, field=field, descending=descending))
        return self

    def limit(self, limit: int) -> "PagingMixin":
        self._push(self._build(Limit, limit=limit))
        return self

    def offset(self, offset: int) -> "PagingMixin":
        self._push(self._build(Offset, offset=offset))
        return self

    def page(self, number: int, size: int) -> "PagingMixin":
        """
        Push the offset and limit selecting one page.

        Args:
            number: 1-based page number.
            size: Page size, at least 1.

        Raises:
            ValidationException: If ``number`` or ``size`` is below 1.
        """
        if number < 1 or size < 1:
            raise ValidationException(
                "page number and size must be at least 1", "INVALID_PAGE", {"number": number, "size": size}
            )
        self.offset((number - 1) * size)
        self.limit(size)
        return self
