"""SuperModel — value objects compared by their textual form.

Observables decide whether a write is a change by comparing ``str()`` of the
old and new value. Models give that string a stable shape built from the
properties listed in ``props``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence


class SuperModel(ABC):
    """Base for models whose equality is defined by ``props``.

    Usage:
        class User(SuperModel):
            def __init__(self, id: int, name: str):
                self.id = id
                self.name = name

            @property
            def props(self):
                return [self.id, self.name]

        str(User(1, "Ada"))  # "User(1,Ada)"
    """

    @property
    @abstractmethod
    def props(self) -> Sequence[object | None]:
        ...

    def equals(self, other: object) -> bool:
        return str(self) == str(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SuperModel):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(str(self))

    def __str__(self) -> str:
        props = ",".join(str(p) for p in self.props)
        return f"{type(self).__name__}({props})"

    def __repr__(self) -> str:
        return str(self)
