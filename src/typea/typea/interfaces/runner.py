# ABOUTME: Abstract runner interface for interpreting accumulated entries
# ABOUTME: Defines the contract a runner fulfils when an accumulator is applied

from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence, TYPE_CHECKING, Union

if TYPE_CHECKING:
    from typea.models.entry import Entry


class AbstractRunner(ABC):
    """
    Abstract base class for runner implementations.

    A runner receives the full, ordered sequence of entries pushed into an
    accumulator and turns it into a result, typically by translating each
    entry into a backing-store operation and executing it. Errors are raised,
    never returned; the accumulator propagates them to its caller unchanged.
    """

    @abstractmethod
    def run(self, entries: Sequence["Entry"]) -> Any:
        """
        Interpret the entries and produce a result.

        Args:
            entries: Entries in push order. The sequence must not be mutated.

        Returns:
            Any result the runner defines.

        Raises:
            UnsupportedEntryKindError: If an entry kind cannot be interpreted.
            Exception: Any failure of the underlying work.
        """
        pass

    def __call__(self, entries: Sequence["Entry"]) -> Any:
        return self.run(entries)


RunnerFunc = Callable[[Sequence["Entry"]], Any]

# Accumulators accept runner objects and plain functions alike
Runner = Union[AbstractRunner, RunnerFunc]
