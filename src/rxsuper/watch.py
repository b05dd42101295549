"""rx_watch() — run a function, then re-run it whenever anything it read changes.

The first run happens inside a tracked evaluation; every observable it read
is merged into one RxMerge and a re-run callback is subscribed to it. With
``stop_when``, the callback detaches itself the first time the condition holds
on a notification.

Dependencies are captured once. A re-run that reads different observables
does not change what is watched.
"""

from __future__ import annotations

from typing import Callable

from rxsuper._tracking import tracking
from rxsuper.merged import RxMerge


class WatchHandle:
    """Disposable handle for an rx_watch subscription."""

    __slots__ = ("_rx", "_callback", "_disposed")

    def __init__(self, rx: RxMerge, callback: Callable[[], None]):
        self._rx = rx
        self._callback = callback
        self._disposed = False

    @property
    def rx(self) -> RxMerge:
        return self._rx

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        """Detach the re-run callback. Safe to call more than once."""
        if self._disposed:
            return
        self._disposed = True
        # Disposed children already dropped their listeners.
        for child in self._rx.children:
            if child is not None and child.alive:
                child.remove_listener(self._callback)


def rx_watch(fn: Callable[[], object], *, stop_when: Callable[[], bool] | None = None) -> WatchHandle:
    """Run fn now and again on every change to the observables it read.

    Raises NoObservableReadError if fn read nothing.

    Usage:
        loading = rx_state(True)
        log = []

        rx_watch(lambda: log.append(loading.value), stop_when=lambda: not loading.value)
        # log == [True]

        loading.value = False
        # log == [True] — condition held, watcher detached
    """
    with tracking() as session:
        fn()
    rx = session.rx
    handle: WatchHandle

    def _call() -> None:
        if stop_when is None or not stop_when():
            fn()
            return
        handle.dispose()

    handle = WatchHandle(rx, _call)
    rx.add_listener(_call)
    return handle
