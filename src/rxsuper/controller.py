"""Controller — stateful object with an enabled/disabled lifecycle.

The registry enables a controller when it is fetched with ``of`` and
disables it when its entry is deleted. Subclasses override the hooks:

- ``on_enable``: runs synchronously inside ``enable()``.
- ``on_alive``: runs after ``on_enable``, on the next frame of the UI the
  registry is bound to. With no frame scheduler configured it runs
  synchronously at the end of ``enable()``, so it fires before
  ``Registry.of`` returns.
- ``on_disable``: runs inside ``disable()``. The default removes the
  controller from its registry under its type name.

A pending ``on_alive`` is cancelled by ``disable()`` if the frame has not
come yet.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from rxsuper.injection import Registry


class _PendingCall:
    """Callable wrapper handed to a frame scheduler. Becomes inert once cancelled."""

    __slots__ = ("_fn", "cancelled", "fired")

    def __init__(self, fn: Callable[[], None]) -> None:
        self._fn = fn
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True

    def __call__(self) -> None:
        if self.cancelled or self.fired:
            return
        self.fired = True
        self._fn()


class Controller:
    """Base class for controllers managed by a Registry."""

    _alive: bool = False
    _registry: Registry | None = None
    _pending_alive: _PendingCall | None = None

    @property
    def alive(self) -> bool:
        return self._alive

    @property
    def registry(self) -> Registry:
        """The registry this controller is bound to (process default if unbound)."""
        if self._registry is not None:
            return self._registry
        from rxsuper.injection import current_registry

        return current_registry()

    def bind(self, registry: Registry) -> None:
        self._registry = registry

    def enable(self) -> None:
        if self._alive:
            return
        self.on_enable()
        self._alive = True
        self._schedule_alive()

    def disable(self) -> None:
        if not self._alive:
            return
        self._alive = False
        if self._pending_alive is not None:
            self._pending_alive.cancel()
            self._pending_alive = None
        self.on_disable()

    def on_enable(self) -> None:
        pass

    def on_alive(self) -> None:
        pass

    def on_disable(self) -> None:
        self.registry.delete(type(self).__name__)

    def _schedule_alive(self) -> None:
        pending = _PendingCall(self.on_alive)
        self._pending_alive = pending
        scheduler = self.registry.scheduler
        if scheduler is None:
            pending()
        else:
            scheduler(pending)

    def __str__(self) -> str:
        return type(self).__name__
