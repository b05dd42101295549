"""Observable values — state cells that report their readers and notify on change.

Reading ``value`` while a tracker is listening registers the cell with the
tracker. Writing ``value`` compares the textual form of old and new; only a
textual change notifies listeners, synchronously and in insertion order.

Listeners take no arguments; they re-read ``value`` themselves.

There is no re-entrancy guard. A listener that writes another cell triggers
nested notification right away, and two cells writing each other will loop
until the interpreter's recursion limit. Avoiding such cycles is up to the
caller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

from rxsuper._tracking import read
from rxsuper.errors import DisposedAccessError

T = TypeVar("T")

VoidCallback = Callable[[], None]


class Rx(ABC, Generic[T]):
    """Capability set shared by every observable: read, write, subscribe, dispose."""

    @property
    @abstractmethod
    def alive(self) -> bool:
        """False once dispose() has been called."""

    @property
    @abstractmethod
    def has_listeners(self) -> bool:
        ...

    @property
    @abstractmethod
    def value(self) -> T:
        ...

    @value.setter
    @abstractmethod
    def value(self, value: T) -> None:
        ...

    @abstractmethod
    def add_listener(self, listener: VoidCallback) -> None:
        """Register ``listener``.

        Adding the same callback twice registers it twice; it then fires twice
        per change and needs two removals to detach.
        """

    @abstractmethod
    def remove_listener(self, listener: VoidCallback) -> None:
        ...

    @abstractmethod
    def dispose(self) -> None:
        """Release resources. Clears listeners without notifying them."""

    def assert_alive(self) -> None:
        if not self.alive:
            raise DisposedAccessError(type(self).__name__)

    def __str__(self) -> str:
        return f"{type(self).__name__}({self.value})"


class _RxCell(Rx[T]):
    """Single stored value with its own listener list."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._listeners: list[VoidCallback] = []
        self._alive = True

    @property
    def alive(self) -> bool:
        return self._alive

    @property
    def has_listeners(self) -> bool:
        return len(self._listeners) > 0

    @property
    def value(self) -> T:
        read(self)
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self.assert_alive()
        if str(self._value) == str(value):
            return
        self._value = value
        self._notify_listeners()

    def add_listener(self, listener: VoidCallback) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: VoidCallback) -> None:
        self.assert_alive()
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def dispose(self) -> None:
        if not self._alive:
            return
        self._alive = False
        self._listeners = []

    def _notify_listeners(self) -> None:
        self.assert_alive()
        for listener in list(self._listeners):
            listener()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class RxT(_RxCell[T]):
    """A plain observable cell holding a value assigned directly."""


def rx_state(value: T) -> RxT[T]:
    """Create an RxT holding ``value``.

    Usage:
        counter = rx_state(0)
        counter.add_listener(lambda: print(counter.value))
        counter.value = 1   # prints 1
        counter.value = 1   # no-op, textually equal
    """
    return RxT(value)


class RxNotifier(_RxCell[T]):
    """An observable cell whose initial value comes from ``watch()``.

    Subclasses implement ``watch``; it runs once, at construction. Later
    changes are made by assigning ``self.value`` from the subclass's own
    methods. Nothing recomputes automatically.

    Usage:
        class CounterNotifier(RxNotifier[int]):
            def watch(self) -> int:
                return 0

            def increment(self) -> None:
                self.value = self.value + 1
    """

    def __init__(self) -> None:
        super().__init__(self.watch())

    @abstractmethod
    def watch(self) -> T:
        ...
