# ABOUTME: Unit tests for RecordStore
# ABOUTME: Tests append ordering, snapshots and concurrent appends

import threading

import pytest

from typea.components.record_store import RecordStore
from typea.models.entry import Limit, Offset
from tests.constants import DataSizes


class TestRecordStore:
    """Test cases for RecordStore."""

    @pytest.mark.unit
    def test_empty(self):
        store = RecordStore()
        assert len(store) == 0
        assert store.snapshot() == ()

    @pytest.mark.unit
    def test_append_returns_position_and_keeps_order(self):
        store = RecordStore()
        entries = [Limit(limit=1), Offset(offset=2), Limit(limit=3)]

        positions = [store.append(e) for e in entries]

        assert positions == [0, 1, 2]
        assert list(store) == entries

    @pytest.mark.unit
    def test_snapshot_is_point_in_time(self):
        store = RecordStore()
        store.append(Limit(limit=1))
        snapshot = store.snapshot()

        store.append(Limit(limit=2))

        assert len(snapshot) == 1
        assert len(store) == 2

    @pytest.mark.unit
    def test_concurrent_appends(self):
        store = RecordStore()

        def worker(thread_id: int):
            for i in range(DataSizes.PUSHES_PER_THREAD):
                store.append(Offset(offset=thread_id * DataSizes.PUSHES_PER_THREAD + i))

        threads = [threading.Thread(target=worker, args=(t,)) for t in range(DataSizes.THREAD_COUNT)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        offsets = [e.offset for e in store]
        assert len(offsets) == DataSizes.THREAD_COUNT * DataSizes.PUSHES_PER_THREAD
        assert sorted(offsets) == list(range(len(offsets)))
        # Each thread's entries stay in that thread's push order
        for t in range(DataSizes.THREAD_COUNT):
            mine = [o for o in offsets if o // DataSizes.PUSHES_PER_THREAD == t]
            assert mine == sorted(mine)
