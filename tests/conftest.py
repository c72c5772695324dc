"""Shared pytest fixtures and test subjects for charisma tests."""

from __future__ import annotations

import pytest

from charisma.base import Characterized


class Person(Characterized):
    """Declares name and age; only ever provides name."""

    def __init__(self, name: str | None = "Ada") -> None:
        self.name = name


Person.characterization.has("name", display_with=str.upper)
Person.characterization.has("age")


class Vehicle(Characterized):
    """Provides characteristics through methods and a property."""

    def __init__(self, make: str, seats: int | None) -> None:
        self._make = make
        self._seats = seats

    def make(self) -> str:
        return self._make

    @property
    def seats(self) -> int | None:
        return self._seats

    def fuel(self) -> None:
        return None


Vehicle.characterization.has("make")
Vehicle.characterization.has("seats")
Vehicle.characterization.has("fuel")
Vehicle.characterization.has("color")


@pytest.fixture
def person() -> Person:
    return Person("Ada")


@pytest.fixture
def vehicle() -> Vehicle:
    return Vehicle("Volvo", 5)
