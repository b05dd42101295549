"""Dependency tracking engine — records which observables a piece of code read.

While a tracker is listening, every ``Rx.value`` read appends the observable
to the tracker's collection. Harvesting turns the collection into a single
RxMerge that callers subscribe to.

The current tracker is resolved through a contextvar. There is one
process-wide default; ``use_tracker`` swaps in an isolated one.

Nesting is unsupported: a second ``start_listening`` while already listening
shares the same buffer, so inner reads are attributed to the outer session.
"""

from __future__ import annotations

import contextvars
from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

from rxsuper.errors import NoObservableReadError

if TYPE_CHECKING:
    from rxsuper.merged import RxMerge
    from rxsuper.observable import Rx


class DependencyTracker:
    """On/off switch plus the list of observables read while on."""

    __slots__ = ("listening", "collected")

    def __init__(self) -> None:
        self.listening = False
        self.collected: list[Rx] = []

    def start_listening(self) -> None:
        self.listening = True

    def read(self, rx: Rx) -> None:
        """Record a read. Ignored unless listening."""
        if not self.listening:
            return
        self.collected.append(rx)

    def harvest(self) -> RxMerge:
        """Stop listening and wrap everything read so far in an RxMerge."""
        from rxsuper.merged import RxMerge

        self.listening = False
        snapshot = list(self.collected)
        self.collected = []
        if not snapshot:
            raise NoObservableReadError()
        return RxMerge(snapshot)

    def reset(self) -> None:
        """Stop listening and drop collected reads."""
        self.listening = False
        self.collected = []

    def __repr__(self) -> str:
        state = "listening" if self.listening else "idle"
        return f"DependencyTracker({state}, collected={len(self.collected)})"


_default_tracker = DependencyTracker()

_current_tracker: contextvars.ContextVar[DependencyTracker] = contextvars.ContextVar(
    "current_tracker", default=_default_tracker
)


def current_tracker() -> DependencyTracker:
    return _current_tracker.get()


@contextmanager
def use_tracker(tracker: DependencyTracker) -> Iterator[DependencyTracker]:
    """Route reads in this context to ``tracker`` instead of the process default."""
    token = _current_tracker.set(tracker)
    try:
        yield tracker
    finally:
        _current_tracker.reset(token)


def listen() -> None:
    current_tracker().start_listening()


def listened_rx() -> RxMerge:
    return current_tracker().harvest()


def read(rx: Rx) -> None:
    current_tracker().read(rx)


class TrackedSession:
    """Result holder for ``tracking()``. ``rx`` is set on clean exit."""

    __slots__ = ("rx",)

    def __init__(self) -> None:
        self.rx: RxMerge | None = None


@contextmanager
def tracking() -> Iterator[TrackedSession]:
    """Scoped tracked evaluation.

    Usage:
        with tracking() as session:
            render()
        session.rx.add_listener(rerender)

    If the body raises, the tracker is reset so it is never left listening.
    If the body read nothing, NoObservableReadError is raised on exit.
    """
    tracker = current_tracker()
    tracker.start_listening()
    session = TrackedSession()
    try:
        yield session
    except BaseException:
        tracker.reset()
        raise
    session.rx = tracker.harvest()
