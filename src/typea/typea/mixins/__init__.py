# ABOUTME: Built-in mixins package
# ABOUTME: Exports the query-construction mixins shipped with typea

from .filters import TypeFilterMixin, FieldFilterMixin
from .time_range import TimeRangeMixin
from .paging import PagingMixin

__all__ = [
    "TypeFilterMixin",
    "FieldFilterMixin",
    "TimeRangeMixin",
    "PagingMixin",
]
