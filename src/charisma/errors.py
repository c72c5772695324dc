"""Exception hierarchy for charisma.

INVARIANT: programmer errors surface immediately to the caller.
Lenient paths (undeclared keys, unset reads) never raise from here.
"""

from __future__ import annotations


class CharismaError(Exception):
    """Base class for every error raised by charisma."""


class MissingCharacterizationError(CharismaError, TypeError):
    """The subject's class carries no characterization registry."""

    def __init__(self, subject: object) -> None:
        self.subject_type = type(subject)
        super().__init__(
            f"{self.subject_type.__name__} has no characterization; "
            f"subclass Characterized or set a 'characterization' class attribute"
        )


class InvalidCharacteristicError(CharismaError, ValueError):
    """A characteristic declaration is malformed."""


class FrozenCharacterizationError(CharismaError, TypeError):
    """A declaration was attempted on a read-only characterization."""
