"""RxMerge — one handle over the group of observables read in a tracked evaluation."""

from __future__ import annotations

from typing import Any, Sequence

from rxsuper.errors import UnsettableCompositeError
from rxsuper.observable import Rx, VoidCallback


class RxMerge(Rx[Any]):
    """Read-only composite over a fixed list of observables.

    Slots may be None. ``alive`` and ``has_listeners`` look at the first
    child only; this mirrors how adapters use the merge (as a subscription
    handle) and is kept as-is.
    """

    def __init__(self, children: Sequence[Rx | None]) -> None:
        self._children: tuple[Rx | None, ...] = tuple(children)

    @property
    def children(self) -> tuple[Rx | None, ...]:
        return self._children

    def add_listener(self, listener: VoidCallback) -> None:
        for child in self._children:
            if child is not None:
                child.add_listener(listener)

    def remove_listener(self, listener: VoidCallback) -> None:
        for child in self._children:
            if child is not None:
                child.remove_listener(listener)

    @property
    def alive(self) -> bool:
        if not self._children or self._children[0] is None:
            return False
        return self._children[0].alive

    @property
    def has_listeners(self) -> bool:
        if not self._children or self._children[0] is None:
            return False
        return self._children[0].has_listeners

    @property
    def value(self) -> list[Rx | None]:
        # The children themselves, not their values.
        return list(self._children)

    @value.setter
    def value(self, value: Any) -> None:
        raise UnsettableCompositeError()

    def dispose(self) -> None:
        for child in self._children:
            if child is not None:
                child.dispose()

    def __str__(self) -> str:
        return f"RxMerge([{', '.join(str(c) for c in self._children)}])"

    def __repr__(self) -> str:
        return f"RxMerge({list(self._children)!r})"
