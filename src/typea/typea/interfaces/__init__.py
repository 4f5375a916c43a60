# ABOUTME: Interfaces package exports
# ABOUTME: Exports the runner contract and the mixin/sink abstractions

from .runner import AbstractRunner, Runner, RunnerFunc
from .mixin import BaseMixin, EntrySink

__all__ = [
    "AbstractRunner",
    "Runner",
    "RunnerFunc",
    "BaseMixin",
    "EntrySink",
]
