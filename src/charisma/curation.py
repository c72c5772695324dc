"""Curation: a raw characteristic value paired with its descriptor."""

from __future__ import annotations

from typing import Any

from charisma.characterization import Characteristic


class Curation:
    """Wrapper holding a raw value and the descriptor it was computed under.

    The descriptor may be None for keys the registry does not declare.
    Construction is total: any value is accepted.
    """

    __slots__ = ("characteristic", "value")

    def __init__(self, value: Any, characteristic: Characteristic | None = None) -> None:
        self.value = value
        self.characteristic = characteristic

    def raw_value(self) -> Any:
        return self.value

    def display(self) -> str:
        """Display form: the descriptor's ``display_with`` if any, else ``str``."""
        if self.value is None:
            return ""
        if self.characteristic is not None and self.characteristic.display_with is not None:
            return self.characteristic.display_with(self.value)
        return str(self.value)

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        name = self.characteristic.name if self.characteristic else None
        return f"<Curation {name}={self.value!r}>"
