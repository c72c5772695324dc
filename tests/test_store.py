"""Tests for CharacteristicStore and loose_equals."""

from __future__ import annotations

import pytest

from charisma.characterization import Characterization
from charisma.curation import Curation
from charisma.store import CharacteristicStore, loose_equals


@pytest.fixture
def registry() -> Characterization:
    registry = Characterization()
    registry.has("name")
    registry.has("age")
    return registry


@pytest.fixture
def store(registry: Characterization) -> CharacteristicStore:
    store = CharacteristicStore(registry)
    store["name"] = Curation("Ada", registry.get("name"))
    return store


class TestGetOrCompute:
    def test_stored_key(self, store: CharacteristicStore) -> None:
        assert store["name"].raw_value() == "Ada"

    def test_declared_missing_key_synthesizes_default(
        self, store: CharacteristicStore, registry: Characterization
    ) -> None:
        default = store["age"]
        assert default.raw_value() is None
        assert default.characteristic is registry.get("age")
        assert "age" not in store
        assert len(store) == 1

    def test_undeclared_missing_key_raises_key_error(self, store: CharacteristicStore) -> None:
        with pytest.raises(KeyError):
            store["shoe_size"]

    def test_get_uses_default_path(self, store: CharacteristicStore) -> None:
        assert store.get("age").raw_value() is None
        assert store.get("shoe_size") is None

    def test_contains_only_stored_keys(self, store: CharacteristicStore) -> None:
        assert "name" in store
        assert "age" not in store


class TestMutation:
    def test_delete(self, store: CharacteristicStore) -> None:
        del store["name"]
        assert list(store) == []

    def test_copy_is_shallow(self, store: CharacteristicStore) -> None:
        duplicate = store.copy()
        duplicate["age"] = Curation(30)
        assert "age" not in store
        assert duplicate["name"] is store["name"]
        assert duplicate.characterization is store.characterization


class TestProjection:
    def test_to_dict(self, store: CharacteristicStore) -> None:
        store["age"] = Curation(30)
        assert store.to_dict() == {"name": "Ada", "age": 30}

    def test_slice(self, store: CharacteristicStore) -> None:
        assert list(store.slice("age", "name")) == ["name"]
        assert store.slice() == {}


class TestLooseEquals:
    def test_ignores_descriptors(self, registry: Characterization) -> None:
        left = {"name": Curation("Ada", registry.get("name"))}
        right = {"name": Curation("Ada")}
        assert loose_equals(left, right)

    def test_ignores_key_order(self) -> None:
        left = {"a": Curation(1), "b": Curation(2)}
        right = {"b": Curation(2), "a": Curation(1)}
        assert loose_equals(left, right)

    def test_key_sets_must_match(self) -> None:
        assert not loose_equals({"a": Curation(1)}, {"a": Curation(1), "b": Curation(None)})

    def test_uses_value_equality(self) -> None:
        assert loose_equals({"a": Curation(1)}, {"a": Curation(1.0)})
        assert not loose_equals({"a": Curation([1])}, {"a": Curation([2])})

    def test_unwrapped_values(self) -> None:
        assert loose_equals({"a": Curation("x")}, {"a": "x"})

    def test_store_equality_and_hash(self, registry: Characterization) -> None:
        left = CharacteristicStore(registry, {"name": Curation("Ada", registry.get("name"))})
        right = CharacteristicStore(Characterization(), {"name": Curation("Ada")})
        assert left == right
        assert hash(left) == hash(right)

    def test_store_not_equal_to_non_mapping(self, store: CharacteristicStore) -> None:
        assert store != ["name"]
