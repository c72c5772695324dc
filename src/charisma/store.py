"""Characteristic store and loose equality.

The store is an ordered mapping of characteristic name to :class:`Curation`.
Reading a declared but unset name synthesizes a transient default wrapper
and never writes it back; only explicit assignment persists a key.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

from charisma.characterization import Characterization
from charisma.curation import Curation


def _raw(value: Any) -> Any:
    if isinstance(value, Curation):
        return value.raw_value()
    return value


def loose_equals(left: Mapping[str, Any], right: Mapping[str, Any]) -> bool:
    """Compare two mappings by key set and unwrapped values.

    Wrappers are never compared themselves, so two curations holding equal
    values under different descriptors are equal. Plain values on either
    side are compared as they are.

    Examples:
        >>> loose_equals({"a": Curation(1)}, {"a": Curation(1, None)})
        True
        >>> loose_equals({"a": Curation(1)}, {"a": 1})
        True
        >>> loose_equals({"a": Curation(1)}, {"a": 1, "b": 2})
        False
    """
    if set(left.keys()) != set(right.keys()):
        return False
    return all(_raw(left[key]) == _raw(right[key]) for key in left.keys())


class CharacteristicStore(MutableMapping[str, Curation]):
    """Ordered name -> Curation mapping with get-or-compute reads."""

    def __init__(
        self,
        characterization: Characterization,
        data: Mapping[str, Curation] | None = None,
    ) -> None:
        self.characterization = characterization
        self._data: dict[str, Curation] = dict(data or {})

    def __getitem__(self, key: str) -> Curation:
        try:
            return self._data[key]
        except KeyError:
            characteristic = self.characterization.get(key)
            if characteristic is None:
                raise
            return Curation(None, characteristic)

    def __setitem__(self, key: str, value: Curation) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return loose_equals(self, other)

    def __hash__(self) -> int:
        # Equal stores share a key set; values may be unhashable.
        return hash(frozenset(self._data))

    def slice(self, *keys: str) -> dict[str, Curation]:
        """Plain dict of the requested keys that are actually stored."""
        return {key: self._data[key] for key in keys if key in self._data}

    def copy(self) -> CharacteristicStore:
        """Shallow copy: new top-level mapping, shared wrappers."""
        return CharacteristicStore(self.characterization, self._data)

    def to_dict(self) -> dict[str, Any]:
        return {key: curation.raw_value() for key, curation in self._data.items()}

    def __repr__(self) -> str:
        return f"CharacteristicStore({self._data!r})"
