# ABOUTME: NoOp runner that performs no interpretation
# ABOUTME: Echoes the applied entries back, useful for tests and dry runs

from typing import List, Sequence

from typea.interfaces.runner import AbstractRunner
from typea.models.entry import Entry


class NoOpRunner(AbstractRunner):
    """
    No-operation implementation of AbstractRunner.

    Accepts every entry kind, does no work, and returns the entries it was
    given as a list. Useful for inspecting what an accumulator collected and
    for wiring composites in tests without a backing store.
    """

    def __init__(self) -> None:
        self.call_count = 0

    def run(self, entries: Sequence[Entry]) -> List[Entry]:
        self.call_count += 1
        return list(entries)
