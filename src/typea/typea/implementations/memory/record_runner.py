# ABOUTME: In-memory runner interpreting the built-in entry kinds against plain records
# ABOUTME: Filters, orders and pages a list of mappings the way a backing store would

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from typea.components.dispatch import DispatchRunner, entry_handler
from typea.config.settings import get_settings
from typea.exceptions import RunnerError
from typea.models.entry import (
    CreatedAfterFilter,
    CreatedBeforeFilter,
    EntryKind,
    FieldEqualsFilter,
    Limit,
    Offset,
    OrderBy,
    TypeFilter,
)

Record = Mapping[str, Any]
_MISSING = object()


@dataclass
class RecordQueryState:
    """Translated form of one applied entry sequence."""

    predicates: List[Callable[[Record], bool]] = field(default_factory=list)
    ordering: List[OrderBy] = field(default_factory=list)
    limit: Optional[int] = None
    offset: int = 0


class InMemoryRecordRunner(DispatchRunner):
    """
    In-memory implementation of a record-querying runner.

    Records are plain mappings. Each filter entry becomes a predicate that
    every returned record must satisfy; multiple filters of the same kind
    combine with AND. After filtering, order-by entries are applied (the first
    one pushed is the primary key, later ones break ties, records missing the
    field sort last), then the offset, then the limit. For offset and limit
    the last entry pushed wins.

    The result is a list of shallow copies of the matching records.
    """

    def __init__(
        self,
        records: Sequence[Record] = (),
        type_field: str = "type",
        created_field: str = "created_at",
        name: Optional[str] = None,
    ) -> None:
        super().__init__(name=name)
        self._records: List[Record] = list(records)
        self.type_field = type_field
        self.created_field = created_field

    @property
    def records(self) -> List[Record]:
        return list(self._records)

    def add_record(self, record: Record) -> None:
        self._records.append(record)

    def create_state(self) -> RecordQueryState:
        return RecordQueryState()

    def finalize(self, state: RecordQueryState) -> List[Dict[str, Any]]:
        rows = [r for r in self._records if all(p(r) for p in state.predicates)]

        for order in reversed(state.ordering):
            present = [r for r in rows if r.get(order.field) is not None]
            missing = [r for r in rows if r.get(order.field) is None]
            try:
                present.sort(key=lambda r: self._sort_value(r, order.field), reverse=order.descending)
            except TypeError as e:
                raise RunnerError(
                    f"Cannot order records by '{order.field}': values are not comparable",
                    details={"runner": self.name, "field": order.field},
                ) from e
            rows = present + missing

        rows = rows[state.offset :]
        if state.limit is not None:
            rows = rows[: state.limit]

        self._logger.debug(f"Matched {len(rows)} of {len(self._records)} records")
        return [dict(r) for r in rows]

    # Handlers

    @entry_handler(EntryKind.TYPE)
    def _type(self, state: RecordQueryState, entry: TypeFilter) -> None:
        accepted = set(entry.types)

        def matches(record: Record) -> bool:
            value = record.get(self.type_field)
            try:
                return value in accepted
            except TypeError as e:
                raise RunnerError(
                    f"Record field '{self.type_field}' must be hashable, got {type(value).__name__}",
                    details={"runner": self.name, "field": self.type_field},
                ) from e

        state.predicates.append(matches)

    @entry_handler(EntryKind.CREATED_AFTER)
    def _created_after(self, state: RecordQueryState, entry: CreatedAfterFilter) -> None:
        bound = entry.timestamp
        state.predicates.append(lambda r: self._created_at(r) is not None and self._created_at(r) >= bound)

    @entry_handler(EntryKind.CREATED_BEFORE)
    def _created_before(self, state: RecordQueryState, entry: CreatedBeforeFilter) -> None:
        bound = entry.timestamp
        state.predicates.append(lambda r: self._created_at(r) is not None and self._created_at(r) <= bound)

    @entry_handler(EntryKind.FIELD_EQUALS)
    def _field_equals(self, state: RecordQueryState, entry: FieldEqualsFilter) -> None:
        state.predicates.append(lambda r: r.get(entry.field, _MISSING) == entry.value)

    @entry_handler(EntryKind.ORDER_BY)
    def _order_by(self, state: RecordQueryState, entry: OrderBy) -> None:
        state.ordering.append(entry)

    @entry_handler(EntryKind.LIMIT)
    def _limit(self, state: RecordQueryState, entry: Limit) -> None:
        state.limit = entry.limit

    @entry_handler(EntryKind.OFFSET)
    def _offset(self, state: RecordQueryState, entry: Offset) -> None:
        state.offset = entry.offset

    def _sort_value(self, record: Record, field_name: str) -> Any:
        if field_name == self.created_field:
            return self._created_at(record)
        return record[field_name]

    def _created_at(self, record: Record) -> Optional[datetime]:
        value = record.get(self.created_field)
        if value is None:
            return None
        if isinstance(value, str):
            try:
                value = datetime.fromisoformat(value)
            except ValueError as e:
                raise RunnerError(
                    f"Record field '{self.created_field}' is not an ISO datetime: {value!r}",
                    details={"runner": self.name, "field": self.created_field},
                ) from e
        if not isinstance(value, datetime):
            raise RunnerError(
                f"Record field '{self.created_field}' must be a datetime, got {type(value).__name__}",
                details={"runner": self.name, "field": self.created_field},
            )
        if value.tzinfo is None:
            value = value.replace(tzinfo=get_settings().tzinfo())
        return value
