# ABOUTME: Unit tests for DispatchRunner and the entry_handler decorator
# ABOUTME: Tests handler registration, ordered dispatch and unsupported kinds

from typing import Literal

import pytest

from typea.components.dispatch import DispatchRunner, entry_handler
from typea.exceptions import ConfigurationException, UnsupportedEntryKindError
from typea.interfaces.runner import AbstractRunner
from typea.models.entry import Entry, EntryKind, Limit, Offset, TypeFilter


class NoteEntry(Entry):
    kind: Literal["note"] = "note"
    text: str


class PagingRecorder(DispatchRunner):
    """Records limit and offset entries as tuples."""

    @entry_handler(EntryKind.LIMIT)
    def _limit(self, state, entry):
        state.append(("limit", entry.limit))

    @entry_handler(EntryKind.OFFSET)
    def _offset(self, state, entry):
        state.append(("offset", entry.offset))


class TestDispatchRunner:
    """Test cases for DispatchRunner."""

    @pytest.mark.unit
    def test_is_a_runner(self):
        runner = DispatchRunner()
        assert isinstance(runner, AbstractRunner)
        assert runner.kinds == []
        assert runner.run([]) == []

    @pytest.mark.unit
    def test_decorated_handlers_registered(self):
        runner = PagingRecorder()

        assert runner.kinds == ["limit", "offset"]
        assert runner.handles(EntryKind.LIMIT)
        assert not runner.handles("type")

    @pytest.mark.unit
    def test_dispatch_in_order(self):
        runner = PagingRecorder()

        result = runner([Offset(offset=10), Limit(limit=5), Offset(offset=20)])

        assert result == [("offset", 10), ("limit", 5), ("offset", 20)]

    @pytest.mark.unit
    def test_fresh_state_per_run(self):
        runner = PagingRecorder()
        runner([Limit(limit=1)])
        assert runner([Limit(limit=2)]) == [("limit", 2)]

    @pytest.mark.unit
    def test_unsupported_kind(self):
        runner = PagingRecorder()

        with pytest.raises(UnsupportedEntryKindError) as exc_info:
            runner([Limit(limit=1), TypeFilter(types=("a",)), Limit(limit=2)])

        assert exc_info.value.kind == "type"
        assert exc_info.value.index == 1
        assert exc_info.value.details["runner"] == "PagingRecorder"

    @pytest.mark.unit
    def test_register_custom_kind(self):
        runner = PagingRecorder(name="notes")
        runner.register("note", lambda state, entry: state.append(entry.text))

        assert runner([NoteEntry(text="hi"), Limit(limit=3)]) == ["hi", ("limit", 3)]

    @pytest.mark.unit
    def test_register_conflict(self):
        runner = PagingRecorder()
        with pytest.raises(ConfigurationException):
            runner.register(EntryKind.LIMIT, lambda state, entry: None)

        runner.register(EntryKind.LIMIT, lambda state, entry: state.append("replaced"), replace=True)
        assert runner([Limit(limit=1)]) == ["replaced"]

    @pytest.mark.unit
    def test_unregister(self):
        runner = PagingRecorder()
        assert runner.unregister("offset") is True
        assert runner.unregister("offset") is False
        with pytest.raises(UnsupportedEntryKindError):
            runner([Offset(offset=1)])

    @pytest.mark.unit
    def test_subclass_override_and_finalize(self):
        class Summing(PagingRecorder):
            def create_state(self):
                return {"total": 0}

            def finalize(self, state):
                return state["total"]

            @entry_handler(EntryKind.LIMIT, EntryKind.OFFSET)
            def _both(self, state, entry):
                state["total"] += entry.payload()[entry.kind]

        assert Summing()([Limit(limit=2), Offset(offset=5)]) == 7

    @pytest.mark.unit
    def test_decorated_override_keeps_kind(self):
        class Doubling(PagingRecorder):
            @entry_handler(EntryKind.LIMIT)
            def _limit(self, state, entry):
                state.append(("limit", entry.limit * 2))

        assert Doubling()([Limit(limit=4)]) == [("limit", 8)]

    @pytest.mark.unit
    def test_undecorated_override_drops_kind(self):
        class Silenced(PagingRecorder):
            def _limit(self, state, entry):
                state.append("never")

        runner = Silenced()

        assert runner.kinds == ["offset"]
        with pytest.raises(UnsupportedEntryKindError):
            runner([Limit(limit=4)])

    @pytest.mark.unit
    def test_override_changing_kind_rewires_handlers(self):
        class OffsetOnly(PagingRecorder):
            @entry_handler(EntryKind.OFFSET)
            def _limit(self, state, entry):
                state.append(("shifted", entry.offset))

        runner = OffsetOnly()

        # The subclass method wins OFFSET over the inherited _offset;
        # LIMIT is no longer handled by anything
        assert runner.kinds == ["offset"]
        assert not runner.handles(EntryKind.LIMIT)
        assert runner([Offset(offset=3)]) == [("shifted", 3)]
        with pytest.raises(UnsupportedEntryKindError) as exc_info:
            runner([Offset(offset=3), Limit(limit=5)])
        assert exc_info.value.index == 1
