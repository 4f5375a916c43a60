# ABOUTME: Dispatching runner that routes each entry to a handler registered for its kind
# ABOUTME: Unknown kinds raise UnsupportedEntryKindError instead of aborting the process

from __future__ import annotations

from typing import Any, Callable, Dict, List, Sequence

from loguru import logger

from typea.exceptions import ConfigurationException, UnsupportedEntryKindError
from typea.interfaces.runner import AbstractRunner
from typea.models.entry import Entry, EntryKind

EntryHandler = Callable[[Any, Entry], None]

_HANDLER_ATTR = "__typea_entry_kinds__"


def _kind_key(kind: str | EntryKind) -> str:
    return kind.value if isinstance(kind, EntryKind) else str(kind)


def entry_handler(*kinds: str | EntryKind) -> Callable[[Callable[..., None]], Callable[..., None]]:
    """
    Mark a ``DispatchRunner`` method as the handler for one or more entry kinds.

    The decorated method is called as ``method(state, entry)``:

        class CountingRunner(DispatchRunner):
            @entry_handler(EntryKind.LIMIT)
            def _limit(self, state, entry):
                state.append(entry.limit)
    """

    def decorator(func: Callable[..., None]) -> Callable[..., None]:
        marked = list(getattr(func, _HANDLER_ATTR, ()))
        marked.extend(_kind_key(k) for k in kinds)
        setattr(func, _HANDLER_ATTR, tuple(marked))
        return func

    return decorator


class DispatchRunner(AbstractRunner):
    """
    Runner that interprets entries through a registry of per-kind handlers.

    For every ``run`` call a fresh state is built with ``create_state``; each
    entry is then dispatched, in order, to the handler registered for its
    kind, and ``finalize`` turns the state into the result. Handlers come from
    methods decorated with ``entry_handler`` and from ``register`` calls.
    A subclass overriding a handler method must decorate the override to
    keep (or change) the kinds it handles; an undecorated override drops them.

    An entry whose kind has no handler stops the run with
    ``UnsupportedEntryKindError``; nothing after it is interpreted.
    """

    def __init__(self, name: str | None = None) -> None:
        self.name = name or type(self).__name__
        self._handlers: Dict[str, EntryHandler] = {}
        self._logger = logger.bind(name=f"{__name__}.{self.name}")

        # Marks come from the attribute the class resolves, so an override
        # replaces the kinds of the method it shadows. Attributes defined
        # further down the hierarchy are wired last and win shared kinds.
        mro = type(self).__mro__

        def defined_at(attr: str) -> int:
            return next((i for i, cls in enumerate(mro) if attr in vars(cls)), len(mro))

        for attr in sorted(dir(type(self)), key=defined_at, reverse=True):
            func = getattr(type(self), attr, None)
            for kind in getattr(func, _HANDLER_ATTR, ()):
                self._handlers[kind] = getattr(self, attr)

    def register(self, kind: str | EntryKind, handler: EntryHandler, replace: bool = False) -> None:
        """
        Register a handler for an entry kind.

        Args:
            kind: The entry tag to handle.
            handler: Callable invoked as ``handler(state, entry)``.
            replace: Whether an existing handler for ``kind`` may be overwritten.

        Raises:
            ConfigurationException: If ``kind`` already has a handler and ``replace`` is False.
        """
        key = _kind_key(kind)
        if key in self._handlers and not replace:
            raise ConfigurationException(
                f"Entry kind '{key}' already has a handler", "HANDLER_CONFLICT", {"runner": self.name, "kind": key}
            )
        self._handlers[key] = handler

    def unregister(self, kind: str | EntryKind) -> bool:
        """
        Remove the handler for an entry kind.

        Returns:
            True if a handler was found and removed, False otherwise.
        """
        return self._handlers.pop(_kind_key(kind), None) is not None

    def handles(self, kind: str | EntryKind) -> bool:
        return _kind_key(kind) in self._handlers

    @property
    def kinds(self) -> List[str]:
        return sorted(self._handlers)

    def create_state(self) -> Any:
        """Build the per-run state handed to every handler. Defaults to a list."""
        return []

    def finalize(self, state: Any) -> Any:
        """Turn the per-run state into the run result. Defaults to the state itself."""
        return state

    def run(self, entries: Sequence[Entry]) -> Any:
        state = self.create_state()
        for index, entry in enumerate(entries):
            handler = self._handlers.get(_kind_key(entry.kind))
            if handler is None:
                self._logger.warning(f"No handler for entry kind '{entry.kind}' at position {index}")
                raise UnsupportedEntryKindError(entry.kind, index, {"runner": self.name})
            handler(state, entry)
        return self.finalize(state)
