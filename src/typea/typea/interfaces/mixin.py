# ABOUTME: Entry sink protocol and mixin base class
# ABOUTME: Mixins hold the accumulator's push capability and contribute entries through it

from typing import Any, Protocol, Type, TypeVar, runtime_checkable, TYPE_CHECKING

from pydantic import ValidationError

from typea.exceptions import ValidationException

if TYPE_CHECKING:
    from typea.models.entry import Entry

E = TypeVar("E", bound="Entry")


@runtime_checkable
class EntrySink(Protocol):
    """
    Push capability of an accumulator.

    Mixins only ever see this narrow interface, never the accumulator itself.
    """

    def push(self, entry: "Entry") -> None: ...


class BaseMixin:
    """
    Base class for capability bundles composed onto an accumulator.

    A mixin owns no data. It receives an ``EntrySink`` at construction and its
    builder methods construct entries and push them through that sink, so every
    mixin composed onto one accumulator writes to the same record store.

    Builder methods return ``self`` so calls can be chained. Invalid builder
    arguments raise ``ValidationException`` and push nothing.
    """

    def __init__(self, sink: EntrySink) -> None:
        if not isinstance(sink, EntrySink):
            raise TypeError(f"{type(self).__name__} requires an entry sink, got {type(sink).__name__}")
        self._sink = sink

    @property
    def sink(self) -> EntrySink:
        return self._sink

    def _build(self, entry_type: Type[E], **fields: Any) -> E:
        try:
            return entry_type(**fields)
        except ValidationError as e:
            raise ValidationException(
                f"Invalid arguments for {entry_type.__name__}",
                "INVALID_ENTRY_ARGUMENTS",
                {
                    "mixin": type(self).__name__,
                    "entry": entry_type.__name__,
                    "errors": e.errors(include_url=False),
                },
            ) from e

    def _push(self, entry: "Entry") -> None:
        self._sink.push(entry)
