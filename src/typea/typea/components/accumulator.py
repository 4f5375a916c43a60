# ABOUTME: Accumulator implementing the accumulate-then-apply pattern
# ABOUTME: Binds a runner and mixins, collects entries in order and hands them to the runner

import threading
from typing import Any, Callable, Dict, Optional, Tuple, Type, TypeVar

from loguru import logger

from typea.config.settings import get_settings
from typea.components.record_store import RecordStore
from typea.exceptions import (
    AccumulatorSealedError,
    AlreadyInitializedError,
    ConfigurationException,
    MissingRunnerError,
    MixinConflictError,
    MixinNotFoundError,
    NotInitializedError,
    ValidationException,
)
from typea.interfaces.mixin import BaseMixin
from typea.interfaces.runner import Runner
from typea.models.entry import Entry

M = TypeVar("M", bound=BaseMixin)


class _AccumulatorSink:
    """Narrow push capability handed to mixins."""

    __slots__ = ("_push",)

    def __init__(self, push: Callable[[Entry], None]) -> None:
        self._push = push

    def push(self, entry: Entry) -> None:
        self._push(entry)


class Accumulator:
    """
    Ordered heterogeneous accumulator with pluggable interpretation.

    Downstream code embeds an accumulator, either by subclassing it or by
    holding one, and binds it once with ``initialize``. Entries arrive through
    ``push`` (directly or from composed mixins) and ``apply`` hands a snapshot
    of all entries, in push order, to the bound runner.

    Lifecycle:
        uninitialized -> initialized -> (push* -> apply)*

    With ``reusable=False`` the accumulator is sealed by its first apply and
    any later push or apply raises ``AccumulatorSealedError``.
    """

    def __init__(self, name: Optional[str] = None, reusable: Optional[bool] = None):
        """
        Initialize an empty, unbound accumulator.

        Args:
            name: Name used in logs. Defaults to the class name.
            reusable: Whether the accumulator can be used again after apply.
                Defaults to the ``ACCUMULATOR_REUSABLE`` setting.
        """
        self.name = name or type(self).__name__
        self._reusable = get_settings().ACCUMULATOR_REUSABLE if reusable is None else reusable

        self._store = RecordStore()
        self._sink = _AccumulatorSink(self.push)
        self._runner: Optional[Runner] = None
        self._mixins: Dict[Type[BaseMixin], BaseMixin] = {}

        self._sealed = False
        self._apply_count = 0

        # Guards binding and lifecycle state; the store has its own lock
        self._lock = threading.RLock()

        self._logger = logger.bind(name=f"{__name__}.{self.name}")

    # Lifecycle

    def initialize(self, runner: Runner, *mixins: Type[BaseMixin]) -> None:
        """
        Bind the runner and wire each mixin to this accumulator's store.

        Args:
            runner: Callable receiving the ordered entries on apply.
            *mixins: Mixin types to instantiate with this accumulator's entry sink.

        Raises:
            AlreadyInitializedError: If a runner is already bound. The first binding is kept.
            MissingRunnerError: If ``runner`` is None or not callable.
            MixinConflictError: If the same mixin type is given twice.
            ConfigurationException: If a mixin is not a ``BaseMixin`` subclass.
        """
        with self._lock:
            if self._runner is not None:
                raise AlreadyInitializedError(details={"accumulator": self.name})
            if runner is None or not callable(runner):
                raise MissingRunnerError(details={"accumulator": self.name, "runner": repr(runner)})

            wired: Dict[Type[BaseMixin], BaseMixin] = {}
            for mixin_type in mixins:
                if not (isinstance(mixin_type, type) and issubclass(mixin_type, BaseMixin)):
                    raise ConfigurationException(
                        f"Mixin {mixin_type!r} is not a BaseMixin subclass",
                        "INVALID_MIXIN",
                        {"accumulator": self.name},
                    )
                if mixin_type in wired:
                    raise MixinConflictError(
                        f"Mixin {mixin_type.__name__} composed more than once",
                        {"accumulator": self.name, "mixin": mixin_type.__name__},
                    )
                wired[mixin_type] = mixin_type(self._sink)

            self._mixins = wired
            self._runner = runner

        self._logger.debug(
            f"Initialized with runner {getattr(runner, '__name__', type(runner).__name__)} "
            f"and mixins {[m.__name__ for m in wired]}"
        )

    def push(self, entry: Entry) -> None:
        """
        Append an entry to the ordered store.

        Args:
            entry: A tagged entry.

        Raises:
            NotInitializedError: If no runner has been bound yet.
            AccumulatorSealedError: If a single-use accumulator was already applied.
            ValidationException: If ``entry`` is not an ``Entry``.
        """
        with self._lock:
            self._ensure_usable("push")
            if not isinstance(entry, Entry):
                raise ValidationException(
                    f"Only entries can be pushed, got {type(entry).__name__}",
                    "INVALID_ENTRY",
                    {"accumulator": self.name, "type": type(entry).__name__},
                )
            position = self._store.append(entry)

        self._logger.debug(f"Pushed entry #{position}: {entry}")

    def apply(self) -> Any:
        """
        Hand every entry pushed so far, in push order, to the bound runner.

        The runner is called exactly once with a point-in-time snapshot taken
        under the lock; pushes racing with apply land either wholly inside or
        wholly outside that snapshot.

        Returns:
            Whatever the runner returns, unchanged.

        Raises:
            NotInitializedError: If no runner has been bound yet.
            AccumulatorSealedError: If a single-use accumulator was already applied.
            Exception: Any exception raised by the runner, propagated unchanged.
        """
        with self._lock:
            self._ensure_usable("apply")
            runner = self._runner
            entries = self._store.snapshot()
            self._apply_count += 1
            apply_id = self._apply_count
            if not self._reusable:
                self._sealed = True

        self._logger.info(f"Apply #{apply_id}: running with {len(entries)} entries")
        try:
            result = runner(entries)
        except Exception as e:
            self._logger.error(f"Apply #{apply_id}: runner failed with {type(e).__name__}: {e}")
            raise

        self._logger.debug(f"Apply #{apply_id}: runner completed")
        return result

    # Mixins

    def mixin(self, mixin_type: Type[M]) -> M:
        """
        Get the composed mixin instance of the given type.

        An exact type match wins; otherwise the first composed mixin that is
        an instance of ``mixin_type`` is returned.

        Raises:
            MixinNotFoundError: If no composed mixin matches.
        """
        with self._lock:
            found = self._mixins.get(mixin_type)
            if found is None:
                found = next((m for m in self._mixins.values() if isinstance(m, mixin_type)), None)
        if found is None:
            raise MixinNotFoundError(
                f"Mixin {mixin_type.__name__} is not composed onto {self.name}",
                {"accumulator": self.name, "mixin": mixin_type.__name__},
            )
        return found  # type: ignore[return-value]

    @property
    def mixins(self) -> Tuple[BaseMixin, ...]:
        with self._lock:
            return tuple(self._mixins.values())

    # State

    @property
    def sink(self) -> _AccumulatorSink:
        """The push capability shared by every composed mixin."""
        return self._sink

    @property
    def entries(self) -> Tuple[Entry, ...]:
        return self._store.snapshot()

    @property
    def is_initialized(self) -> bool:
        return self._runner is not None

    @property
    def is_reusable(self) -> bool:
        return self._reusable

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    @property
    def apply_count(self) -> int:
        return self._apply_count

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, entries={len(self)}, "
            f"initialized={self.is_initialized}, sealed={self._sealed})"
        )

    def _ensure_usable(self, operation: str) -> None:
        if self._runner is None:
            raise NotInitializedError(
                f"Cannot {operation} before initialize", {"accumulator": self.name, "operation": operation}
            )
        if self._sealed:
            raise AccumulatorSealedError(
                f"Cannot {operation}: accumulator was already applied",
                {"accumulator": self.name, "operation": operation},
            )
