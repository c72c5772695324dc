"""Curator: the per-instance cache of computed characteristics.

INVARIANT: a curator creates its store at most once; every later access
returns the same store object.
INVARIANT: only explicit assignment (including eager population at
construction) adds keys. Reads of declared but unset names return a
transient ``Curation(None, descriptor)`` and leave the store untouched.
"""

from __future__ import annotations

import logging
from collections.abc import ItemsView, Iterator, KeysView, Mapping
from typing import TYPE_CHECKING, Any

from charisma.characterization import Characterization
from charisma.curation import Curation
from charisma.errors import MissingCharacterizationError
from charisma.store import CharacteristicStore

if TYPE_CHECKING:
    from charisma.base import CharacteristicProvider

logger = logging.getLogger(__name__)


def characterization_of(subject: object) -> Characterization:
    """Return the registry declared on *subject*'s class."""
    registry = getattr(type(subject), "characterization", None)
    if not isinstance(registry, Characterization):
        raise MissingCharacterizationError(subject)
    return registry


class Curator:
    """Mapping-like store of the characteristics computed for one subject.

    Construction reads every declared characteristic the subject provides
    and memoizes the non-None ones. Everything else delegates to the
    backing :class:`CharacteristicStore`.

    Curators do no locking. Callers sharing one across threads must
    synchronize access themselves.
    """

    _subject: CharacteristicProvider
    _characteristics: CharacteristicStore | None = None

    def __init__(self, subject: CharacteristicProvider) -> None:
        self._subject = subject
        for name in characterization_of(subject).names():
            value = subject.read_characteristic(name)
            if value is not None:
                self[name] = value
        logger.debug(
            "Curated %d characteristic(s) for %s", len(self), type(subject).__name__
        )

    @property
    def subject(self) -> CharacteristicProvider:
        return self._subject

    @property
    def characteristics(self) -> CharacteristicStore:
        """The backing store, created on first access."""
        if self._characteristics is None:
            self._characteristics = CharacteristicStore(characterization_of(self._subject))
        return self._characteristics

    def __setitem__(self, key: str, value: Any) -> None:
        """Store *value* under *key*, wrapped with the key's descriptor."""
        characteristic = self.characteristics.characterization.get(key)
        if characteristic is None:
            logger.debug(
                "Storing undeclared characteristic %r on %s", key, type(self._subject).__name__
            )
        self.characteristics[key] = Curation(value, characteristic)

    # --- delegated reads ---

    def __getitem__(self, key: str) -> Curation:
        return self.characteristics[key]

    def get(self, key: str, default: Any = None) -> Curation | Any:
        return self.characteristics.get(key, default)

    def keys(self) -> KeysView[str]:
        return self.characteristics.keys()

    def items(self) -> ItemsView[str, Curation]:
        return self.characteristics.items()

    def slice(self, *keys: str) -> dict[str, Curation]:
        return self.characteristics.slice(*keys)

    def __iter__(self) -> Iterator[str]:
        return iter(self.characteristics)

    def __len__(self) -> int:
        return len(self.characteristics)

    def __contains__(self, key: object) -> bool:
        return key in self.characteristics

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Curator):
            return self.characteristics == other.characteristics
        if isinstance(other, Mapping):
            return self.characteristics == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.characteristics)

    # --- projection, copying, serialization ---

    def to_dict(self) -> dict[str, Any]:
        """Plain key -> raw value mapping of the stored characteristics."""
        return self.characteristics.to_dict()

    def dup(self) -> Curator:
        """Shallow copy sharing the subject but owning a copy of the store."""
        duplicate = self.__class__.__new__(self.__class__)
        duplicate._subject = self._subject
        duplicate._characteristics = self.characteristics.copy()
        return duplicate

    __copy__ = dup

    def export(self) -> tuple[CharacteristicProvider, dict[str, Any]]:
        """``(subject, raw values)``; descriptors are re-derived on load."""
        return self._subject, self.to_dict()

    @classmethod
    def load(cls, state: tuple[CharacteristicProvider, Mapping[str, Any]]) -> Curator:
        """Rebuild a curator from :meth:`export` output without re-reading the subject."""
        curator = cls.__new__(cls)
        curator.__setstate__(state)
        return curator

    def __getstate__(self) -> tuple[CharacteristicProvider, dict[str, Any]]:
        return self.export()

    def __setstate__(self, state: tuple[CharacteristicProvider, Mapping[str, Any]]) -> None:
        self._subject, values = state
        for key, value in values.items():
            self[key] = value
        logger.debug(
            "Loaded %d characteristic(s) for %s", len(values), type(self._subject).__name__
        )

    def __repr__(self) -> str:
        return f"<Curator {len(self)} known characteristic(s)>"

    __str__ = __repr__
