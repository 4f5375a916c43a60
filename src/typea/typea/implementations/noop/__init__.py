# ABOUTME: NoOp implementations package
# ABOUTME: Contains no-operation implementations for testing and dry runs

from .runner import NoOpRunner

__all__ = ["NoOpRunner"]
