"""Exceptions raised by the rxsuper core.

Every error is raised synchronously at the call site. Nothing in the core
retries or recovers; propagation is the caller's business.
"""

from __future__ import annotations


class RxSuperError(Exception):
    """Base class for all rxsuper errors."""


class DisposedAccessError(RxSuperError, RuntimeError):
    """An observable was used after dispose()."""

    def __init__(self, type_name: str) -> None:
        super().__init__(
            f"The {type_name} object was accessed or utilized after being disposed. "
            f"Once dispose() is called on a {type_name} object, it becomes unusable."
        )
        self.type_name = type_name


class NotActivatedError(RxSuperError, RuntimeError):
    """Registry mutation attempted before activate()."""

    def __init__(self) -> None:
        super().__init__(
            "Registry is not active. Call activate() (or wrap the app with "
            "rxsuper.textual.activate) before creating dependencies."
        )


class NotFoundError(RxSuperError, KeyError):
    """Lookup of a name that was never registered."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return (
            f"Failed to retrieve {self.key} dependency. "
            f'Call "init(instance, {self.key!r})" instead.'
        )


class NoObservableReadError(RxSuperError, RuntimeError):
    """A tracked evaluation finished without reading any observable."""

    def __init__(self) -> None:
        super().__init__(
            "Couldn't find any Rx object. Read the value of an Rx object "
            "(RxT or RxNotifier) inside the tracked function."
        )


class UnsettableCompositeError(RxSuperError, AttributeError):
    """Write attempted on a merged observable."""

    def __init__(self) -> None:
        super().__init__("Cannot set RxMerge value")
