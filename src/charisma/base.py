"""Subject side of the contract: the provider protocol and the mixin.

A subject exposes characteristics through two things: a class-level
``characterization`` registry and ``read_characteristic(name)``, which
returns the current value or None when the subject has nothing to offer.
"""

from __future__ import annotations

import inspect
from functools import cached_property
from typing import Any, ClassVar, Protocol, runtime_checkable

from charisma.characterization import Characterization
from charisma.curator import Curator

_MISSING = object()


@runtime_checkable
class CharacteristicProvider(Protocol):
    """Capability contract every curated subject implements."""

    characterization: ClassVar[Characterization]

    def read_characteristic(self, name: str) -> Any | None: ...


class Characterized:
    """Mixin giving a class its own registry and a per-instance curator.

    Each subclass gets a copy of its parent's registry, so declarations on a
    subclass never leak upward::

        class Person(Characterized):
            def __init__(self, name):
                self.name = name

        Person.characterization.has("name")
        Person("Ada").characteristics.to_dict()  # {"name": "Ada"}
    """

    # Read-only: subclasses each get a writable copy.
    characterization: ClassVar[Characterization] = Characterization(frozen=True)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "characterization" not in cls.__dict__:
            cls.characterization = cls.characterization.copy()

    def read_characteristic(self, name: str) -> Any | None:
        """Read attribute *name*, calling it when it is a bound method.

        Only a missing attribute counts as absent; errors raised while reading
        an existing one propagate.
        """
        if inspect.getattr_static(self, name, _MISSING) is _MISSING:
            return None
        value = getattr(self, name)
        if inspect.ismethod(value):
            return value()
        return value

    @cached_property
    def characteristics(self) -> Curator:
        return Curator(self)
