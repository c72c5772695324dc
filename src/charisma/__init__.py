"""charisma — lazily computed, loosely comparable object characteristics."""

from charisma.base import CharacteristicProvider, Characterized
from charisma.characterization import Characteristic, Characterization
from charisma.curation import Curation
from charisma.curator import Curator
from charisma.errors import (
    CharismaError,
    FrozenCharacterizationError,
    InvalidCharacteristicError,
    MissingCharacterizationError,
)
from charisma.store import CharacteristicStore, loose_equals

__version__ = "0.1.0"

__all__ = [
    "CharacteristicProvider",
    "CharacteristicStore",
    "Characteristic",
    "Characterization",
    "Characterized",
    "CharismaError",
    "FrozenCharacterizationError",
    "Curation",
    "Curator",
    "InvalidCharacteristicError",
    "MissingCharacterizationError",
    "__version__",
    "loose_equals",
]
