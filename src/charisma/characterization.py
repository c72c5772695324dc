"""Characterization registry and characteristic descriptors.

A characterization is the per-class schema of characteristics: an ordered
mapping from name to :class:`Characteristic`. Curators only ever call
:meth:`Characterization.names` and :meth:`Characterization.get`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from charisma.errors import FrozenCharacterizationError, InvalidCharacteristicError


class Characteristic(BaseModel):
    """Descriptor for one declared characteristic."""

    model_config = ConfigDict(frozen=True)

    name: str
    display_with: Callable[[Any], str] | None = None

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("characteristic name must not be blank")
        return value


class Characterization:
    """Ordered registry of a class's characteristics.

    A frozen registry rejects declarations; :meth:`copy` always returns a
    writable one.
    """

    def __init__(
        self,
        characteristics: dict[str, Characteristic] | None = None,
        *,
        frozen: bool = False,
    ) -> None:
        self._characteristics: dict[str, Characteristic] = dict(characteristics or {})
        self.frozen = frozen

    def has(self, name: str, *, display_with: Callable[[Any], str] | None = None) -> Characteristic:
        """Declare *name* as a characteristic, replacing any earlier declaration.

        Re-declaring keeps the original position in :meth:`names`.
        """
        if self.frozen:
            msg = f"cannot declare {name!r} on a frozen characterization"
            raise FrozenCharacterizationError(msg)
        try:
            characteristic = Characteristic(name=name, display_with=display_with)
        except ValidationError as exc:
            raise InvalidCharacteristicError(f"invalid characteristic {name!r}: {exc}") from exc
        self._characteristics[name] = characteristic
        return characteristic

    def names(self) -> list[str]:
        """Declared names in declaration order."""
        return list(self._characteristics)

    def get(self, name: str) -> Characteristic | None:
        return self._characteristics.get(name)

    def copy(self) -> Characterization:
        return Characterization(self._characteristics)

    def __contains__(self, name: object) -> bool:
        return name in self._characteristics

    def __iter__(self) -> Iterator[str]:
        return iter(self._characteristics)

    def __len__(self) -> int:
        return len(self._characteristics)

    def __repr__(self) -> str:
        return f"<Characterization {self.names()!r}>"
