"""
Tests for routine and skin type persistence.

Most tests use MemoryStore; the restart tests use JsonFileStore on tmp_path to
check that a routine saved by one store instance is rebuilt by another.
"""

import json

import pytest

from layerit.catalog import get_product, load_products
from layerit.routine import (
    ROUTINE_KEY,
    SKIN_TYPE_KEY,
    add_to_routine,
    clear_routine,
    load_routine,
    load_routine_ids,
    load_skin_type,
    remove_from_routine,
    save_routine,
    save_skin_type,
)
from layerit.storage import JsonFileStore, MemoryStore


@pytest.fixture
def catalog():
    return load_products()


@pytest.fixture
def store():
    return MemoryStore()


class TestAddToRoutine:
    """Test adding products and persisting the result."""

    def test_add_persists_ids(self, store, catalog):
        routine = add_to_routine(store, [], get_product(catalog, 3))

        assert [p.id for p in routine] == [3]
        assert json.loads(store.get_item(ROUTINE_KEY)) == [3]

    def test_add_appends_in_order(self, store, catalog):
        routine = add_to_routine(store, [], get_product(catalog, 3))
        routine = add_to_routine(store, routine, get_product(catalog, 1))

        assert [p.id for p in routine] == [3, 1]
        assert json.loads(store.get_item(ROUTINE_KEY)) == [3, 1]

    def test_add_duplicate_is_ignored(self, store, catalog):
        """Test that a product already in the routine is not added twice."""
        routine = add_to_routine(store, [], get_product(catalog, 2))
        routine = add_to_routine(store, routine, get_product(catalog, 2))

        assert [p.id for p in routine] == [2]
        assert json.loads(store.get_item(ROUTINE_KEY)) == [2]

    def test_add_returns_new_list(self, store, catalog):
        original = [get_product(catalog, 1)]
        updated = add_to_routine(store, original, get_product(catalog, 2))

        assert updated is not original
        assert len(original) == 1


class TestLoadRoutine:
    """Test rebuilding the routine from saved ids."""

    def test_nothing_saved(self, store, catalog):
        assert load_routine_ids(store) == []
        assert load_routine(store, catalog) == []

    def test_reload_matches_saved_routine(self, store, catalog):
        """Test that loading returns the same products in the same order."""
        routine = add_to_routine(store, [], get_product(catalog, 9))
        routine = add_to_routine(store, routine, get_product(catalog, 4))
        routine = add_to_routine(store, routine, get_product(catalog, 6))

        reloaded = load_routine(store, catalog)

        assert reloaded == routine
        assert [p.id for p in reloaded] == [9, 4, 6]

    def test_unknown_ids_skipped(self, catalog):
        store = MemoryStore({ROUTINE_KEY: "[1, 404, 2]"})
        assert [p.id for p in load_routine(store, catalog)] == [1, 2]

    def test_corrupt_value_treated_as_empty(self, catalog):
        store = MemoryStore({ROUTINE_KEY: "not json"})
        assert load_routine(store, catalog) == []

    def test_non_list_value_treated_as_empty(self):
        store = MemoryStore({ROUTINE_KEY: '{"ids": [1]}'})
        assert load_routine_ids(store) == []

    def test_non_integer_ids_dropped(self):
        store = MemoryStore({ROUTINE_KEY: '[1, "2", true, 3.5, 4]'})
        assert load_routine_ids(store) == [1, 4]

    def test_repeated_ids_loaded_once(self, catalog):
        """Test that a repeated id keeps its first position and appears once."""
        store = MemoryStore({ROUTINE_KEY: "[1, 1]"})
        assert load_routine_ids(store) == [1]

        store = MemoryStore({ROUTINE_KEY: "[3, 1, 3, 2, 1]"})
        assert [p.id for p in load_routine(store, catalog)] == [3, 1, 2]

    def test_survives_restart(self, tmp_path, catalog):
        """Test that a routine saved to disk is rebuilt by a fresh store."""
        path = tmp_path / "storage.json"
        save_routine(JsonFileStore(path), [get_product(catalog, 5), get_product(catalog, 7)])

        reloaded = load_routine(JsonFileStore(path), catalog)

        assert [p.id for p in reloaded] == [5, 7]


class TestRemoveAndClear:
    """Test removing products and clearing the routine."""

    def test_remove(self, store, catalog):
        routine = [get_product(catalog, i) for i in (1, 2, 3)]
        save_routine(store, routine)

        routine = remove_from_routine(store, routine, 2)

        assert [p.id for p in routine] == [1, 3]
        assert load_routine_ids(store) == [1, 3]

    def test_remove_missing_id(self, store, catalog):
        routine = remove_from_routine(store, [get_product(catalog, 1)], 99)
        assert [p.id for p in routine] == [1]

    def test_clear(self, store, catalog):
        save_routine(store, [get_product(catalog, 1)])
        save_skin_type(store, "oily")

        clear_routine(store)

        assert store.get_item(ROUTINE_KEY) is None
        assert load_routine(store, catalog) == []
        assert load_skin_type(store) == "oily"


class TestSkinType:
    """Test skin type persistence."""

    def test_not_taken(self, store):
        assert load_skin_type(store) is None

    def test_save_and_load(self, store):
        save_skin_type(store, "combination")
        assert store.get_item(SKIN_TYPE_KEY) == "combination"
        assert load_skin_type(store) == "combination"

    def test_empty_value_is_none(self):
        assert load_skin_type(MemoryStore({SKIN_TYPE_KEY: ""})) is None
