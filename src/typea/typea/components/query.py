# ABOUTME: Ready-made accumulator composed with the built-in query mixins
# ABOUTME: Shows the embedding pattern downstream code follows for its own composites

from typing import Optional, Type

from typea.components.accumulator import Accumulator
from typea.interfaces.mixin import BaseMixin
from typea.interfaces.runner import Runner
from typea.mixins import FieldFilterMixin, PagingMixin, TimeRangeMixin, TypeFilterMixin


class Query(Accumulator):
    """
    Accumulator bound at construction with the built-in mixins.

    Example:
        query = Query(InMemoryRecordRunner(records))
        query.types.of_type("invoice")
        query.time.created_after(cutoff)
        query.paging.order_by("created_at", descending=True).limit(10)
        results = query.apply()

    Additional mixin types passed after the runner are composed as well and
    are reachable through ``mixin``.
    """

    DEFAULT_MIXINS = (TypeFilterMixin, TimeRangeMixin, FieldFilterMixin, PagingMixin)

    def __init__(
        self,
        runner: Runner,
        *extra_mixins: Type[BaseMixin],
        name: Optional[str] = None,
        reusable: Optional[bool] = None,
    ):
        super().__init__(name=name, reusable=reusable)
        self.initialize(runner, *self.DEFAULT_MIXINS, *extra_mixins)

    @property
    def types(self) -> TypeFilterMixin:
        return self.mixin(TypeFilterMixin)

    @property
    def time(self) -> TimeRangeMixin:
        return self.mixin(TimeRangeMixin)

    @property
    def fields(self) -> FieldFilterMixin:
        return self.mixin(FieldFilterMixin)

    @property
    def paging(self) -> PagingMixin:
        return self.mixin(PagingMixin)
