"""Registry — named singletons whose lifecycle follows the application's.

Objects are stored under a logical name (by convention their type name).
Fetching a Controller enables it; deleting an entry disables a Controller
and disposes an Rx before removing it. In test mode, registered objects are
replaced by the configured mocks.

The current registry is resolved through a contextvar, like the dependency
tracker: one process-wide default, swappable with ``use_registry``.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Sequence, TypeVar

from rxsuper.controller import Controller
from rxsuper.errors import NotActivatedError, NotFoundError
from rxsuper.observable import Rx

logger = logging.getLogger("rxsuper.injection")

T = TypeVar("T")

FrameScheduler = Callable[[Callable[[], None]], Any]


class Registry:
    """Named-singleton store with activation, mocks and cascading disposal."""

    def __init__(self, scheduler: FrameScheduler | None = None) -> None:
        self._instances: dict[str, Any] = {}
        self._mocks: list[Any] = []
        self._scoped = False
        self._test_mode = False
        self._auto_dispose: bool | None = None
        self.scheduler = scheduler

    @property
    def scoped(self) -> bool:
        return self._scoped

    @property
    def test_mode(self) -> bool:
        return self._test_mode

    @property
    def auto_dispose(self) -> bool | None:
        return self._auto_dispose

    @property
    def mocks(self) -> list[Any]:
        return list(self._mocks)

    def keys(self) -> list[str]:
        return list(self._instances)

    def __contains__(self, key: str) -> bool:
        return key in self._instances

    def __len__(self) -> int:
        return len(self._instances)

    def create(self, instance: T, key: str) -> None:
        """Register ``instance`` under ``key``. Requires an active registry."""
        if not self._scoped:
            raise NotActivatedError()
        self._register(instance, key)

    def of(self, key: str) -> Any:
        """Return the object stored under ``key``, enabling it if it is a Controller."""
        if key not in self._instances:
            raise NotFoundError(key)
        inst = self._instances[key]
        if isinstance(inst, Controller):
            inst.bind(self)
            inst.enable()
        return inst

    def init(self, instance: T, key: str) -> T:
        """Get-or-create: ``of(key)`` if present, else ``create`` then ``of``."""
        if key in self._instances:
            return self.of(key)
        self.create(instance, key)
        return self.of(key)

    def _register(self, instance: Any, key: str) -> None:
        if self._test_mode and self._mocks:
            for item in self._mocks:
                mock = self._as_mock(item)
                if mock is not None:
                    logger.debug("Registered mock %s for %s", type(mock).__name__, key)
                    self._instances[key] = mock
                    return
        logger.debug("Registered %s", key)
        self._instances[key] = instance

    @staticmethod
    def _as_mock(item: Any) -> Any:
        # Any object is accepted as a stand-in; duck typing does the rest.
        return item

    def delete(self, key: str, force: bool = False) -> None:
        """Remove ``key``, tearing down Controllers and Rx objects.

        Unforced deletes are ignored when auto-dispose is explicitly off.
        Unknown keys are ignored.
        """
        if self._auto_dispose is False and not force:
            return
        if key not in self._instances:
            return
        inst = self._instances[key]
        if isinstance(inst, Controller):
            inst.disable()
        if isinstance(inst, Rx):
            inst.dispose()
        # A controller's on_disable may already have removed its own entry.
        if self._instances.get(key) is inst:
            del self._instances[key]
        logger.debug("Deleted %s", key)

    def delete_all(self) -> None:
        for key in list(self._instances):
            self.delete(key, force=True)
        self._instances = {}

    def activate(
        self,
        *,
        test_mode: bool = False,
        auto_dispose: bool | None = None,
        mocks: Sequence[Any] | None = None,
    ) -> None:
        """Open the registry for ``create``.

        ``mocks`` replaces the configured mocks only when non-empty; passing
        nothing keeps whatever an earlier activate() configured.
        """
        self._scoped = True
        self._test_mode = test_mode
        self._auto_dispose = auto_dispose
        if mocks:
            self._mocks = list(mocks)
        logger.debug(
            "Activated (test_mode=%s, auto_dispose=%s, mocks=%d)",
            test_mode, auto_dispose, len(self._mocks),
        )

    def deactivate(self) -> None:
        self.delete_all()
        self._scoped = False
        self._test_mode = False
        self._auto_dispose = None
        self._mocks = []
        logger.debug("Deactivated")

    def __repr__(self) -> str:
        state = "active" if self._scoped else "inactive"
        return f"Registry({state}, keys={self.keys()!r})"


_default_registry = Registry()

_current_registry: contextvars.ContextVar[Registry] = contextvars.ContextVar(
    "current_registry", default=_default_registry
)


def current_registry() -> Registry:
    return _current_registry.get()


@contextmanager
def use_registry(registry: Registry) -> Iterator[Registry]:
    """Make ``registry`` the current one for this context."""
    token = _current_registry.set(registry)
    try:
        yield registry
    finally:
        _current_registry.reset(token)
