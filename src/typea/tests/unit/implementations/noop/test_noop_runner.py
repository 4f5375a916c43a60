# ABOUTME: Unit tests for NoOpRunner
# ABOUTME: Verifies entries are echoed unchanged and calls are counted

import pytest

from typea.implementations.noop import NoOpRunner
from typea.interfaces.runner import AbstractRunner
from typea.models.entry import Entry, Limit


class TestNoOpRunner:
    """Test cases for NoOpRunner."""

    @pytest.mark.unit
    def test_echoes_entries(self):
        runner = NoOpRunner()
        entries = (Limit(limit=1), Entry(kind="anything"))

        result = runner(entries)

        assert result == list(entries)
        assert result[1] is entries[1]
        assert runner.call_count == 1

    @pytest.mark.unit
    def test_interface(self):
        assert isinstance(NoOpRunner(), AbstractRunner)
        assert NoOpRunner().run([]) == []
