# ABOUTME: In-memory implementations package
# ABOUTME: Contains runners that interpret entries against in-process data

from .record_runner import InMemoryRecordRunner, RecordQueryState

__all__ = ["InMemoryRecordRunner", "RecordQueryState"]
