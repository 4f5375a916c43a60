# ABOUTME: Typea package initialization
# ABOUTME: Exposes the accumulator, mixins, runners and entry models at the top level

"""
Typea: accumulate-then-apply query composition.

Downstream code embeds an ``Accumulator`` (by subclassing or composition),
composes mixins onto it to gain query-construction methods, and hands the
ordered entries to a runner that interprets them.
"""

from typea.components import Accumulator, DispatchRunner, Query, RecordStore
from typea.interfaces import AbstractRunner, BaseMixin, EntrySink
from typea.models import Entry, EntryKind

__version__ = "0.1.0"

__all__ = [
    "Accumulator",
    "DispatchRunner",
    "Query",
    "RecordStore",
    "AbstractRunner",
    "BaseMixin",
    "EntrySink",
    "Entry",
    "EntryKind",
]
