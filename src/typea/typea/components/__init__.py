# ABOUTME: Components package exports
# ABOUTME: Exports the record store, accumulator, dispatching runner and query composite

from .record_store import RecordStore
from .accumulator import Accumulator
from .dispatch import DispatchRunner, EntryHandler, entry_handler
from .query import Query

__all__ = [
    "RecordStore",
    "Accumulator",
    "DispatchRunner",
    "EntryHandler",
    "entry_handler",
    "Query",
]
