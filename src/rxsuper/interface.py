"""Super — convenience surface over the current Registry.

Keys are derived from the instance's type name, so application code rarely
spells them out:

    counter = Super.init(CounterController())
    ...
    Super.of("CounterController")
"""

from __future__ import annotations

from typing import Any, Sequence, TypeVar

from rxsuper.injection import Registry, current_registry

T = TypeVar("T")


class SuperInterface:
    def __init__(self, registry: Registry | None = None) -> None:
        self._registry = registry

    @property
    def registry(self) -> Registry:
        return self._registry if self._registry is not None else current_registry()

    def create(self, instance: object) -> None:
        self.registry.create(instance, type(instance).__name__)

    def of(self, key: str) -> Any:
        return self.registry.of(key)

    def init(self, instance: T) -> T:
        return self.registry.init(instance, type(instance).__name__)

    def delete(self, key: str) -> None:
        """Delete ``key`` even when auto-dispose is off."""
        self.registry.delete(key, force=True)

    def delete_all(self) -> None:
        self.registry.delete_all()

    def activate(
        self,
        *,
        test_mode: bool = False,
        auto_dispose: bool | None = None,
        mocks: Sequence[Any] | None = None,
    ) -> None:
        self.registry.activate(test_mode=test_mode, auto_dispose=auto_dispose, mocks=mocks)

    def deactivate(self) -> None:
        self.registry.deactivate()


Super = SuperInterface()
