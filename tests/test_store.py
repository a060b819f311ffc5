"""Tests for the JSON fact store."""
from __future__ import annotations

import pytest

from conftest import read_facts, write_facts
from factbot.store import Fact, FactStore, StorageError


def test_load_all_missing_file_returns_empty(store):
    assert store.load_all() == []


def test_load_all_corrupt_file_returns_empty(store, facts_path):
    facts_path.write_text("{not json", encoding="utf-8")
    assert store.load_all() == []


def test_load_all_non_array_returns_empty(store, facts_path):
    facts_path.write_text('{"fact": "x", "is_enabled": true}', encoding="utf-8")
    assert store.load_all() == []


def test_load_all_skips_malformed_entries(store, facts_path):
    write_facts(facts_path, [{"fact": "ok", "is_enabled": False}, "junk", {"is_enabled": True}, {"fact": 3}])
    assert store.load_all() == [Fact("ok", False)]


def test_load_all_defaults_missing_flag_to_enabled(store, facts_path):
    write_facts(facts_path, [{"fact": "Ben likes tea"}])
    assert store.load_all() == [Fact("Ben likes tea", True)]


def test_add_one_on_empty_store(store, facts_path):
    store.add_one("New fact")
    assert read_facts(facts_path) == [{"fact": "New fact", "is_enabled": True}]


def test_add_one_creates_parent_directory(tmp_path):
    path = tmp_path / "data" / "facts.json"
    FactStore(str(path)).add_one("Nested")
    assert read_facts(path) == [{"fact": "Nested", "is_enabled": True}]


def test_add_one_keeps_existing_flags(store, facts_path):
    write_facts(facts_path, [{"fact": "A", "is_enabled": False}])
    store.add_one("B")
    assert read_facts(facts_path) == [
        {"fact": "A", "is_enabled": False},
        {"fact": "B", "is_enabled": True},
    ]


def test_repeated_adds_keep_distinct_texts_with_latest_flag(store):
    store.add_one("A")
    store.add_one("B", enabled=False)
    store.add_one("A", enabled=False)
    store.add_one("C")
    store.add_one("B")

    assert store.load_all() == [Fact("A", False), Fact("B", True), Fact("C", True)]


def test_add_one_collapses_duplicates_already_on_disk(store, facts_path):
    write_facts(facts_path, [
        {"fact": "A", "is_enabled": True},
        {"fact": "A", "is_enabled": False},
    ])
    store.add_one("B")
    assert store.load_all() == [Fact("A", False), Fact("B", True)]


def test_set_enabled_set_toggles_flags_in_order(store, facts_path):
    write_facts(facts_path, [
        {"fact": "A", "is_enabled": True},
        {"fact": "B", "is_enabled": False},
    ])
    store.set_enabled_set({"B"})
    assert read_facts(facts_path) == [
        {"fact": "A", "is_enabled": False},
        {"fact": "B", "is_enabled": True},
    ]


def test_set_enabled_set_never_adds_unknown_texts(store, facts_path):
    write_facts(facts_path, [{"fact": "A", "is_enabled": False}])
    store.set_enabled_set(["A", "not stored"])
    assert store.load_all() == [Fact("A", True)]


def test_set_enabled_set_empty_selection_disables_everything(store, facts_path):
    write_facts(facts_path, [{"fact": "A", "is_enabled": True}, {"fact": "B", "is_enabled": True}])
    store.set_enabled_set([])
    assert [f.enabled for f in store.load_all()] == [False, False]


def test_write_failure_raises_storage_error(tmp_path):
    # A directory in place of the file makes open() for writing fail
    path = tmp_path / "facts.json"
    path.mkdir()
    store = FactStore(str(path))

    with pytest.raises(StorageError):
        store.add_one("A")
    with pytest.raises(StorageError):
        store.set_enabled_set({"A"})


def test_load_all_deeply_nested_file_returns_empty(store, facts_path):
    facts_path.write_text("[" * 200000, encoding="utf-8")
    assert store.load_all() == []


def test_deeply_nested_file_does_not_block_writes(store, facts_path):
    facts_path.write_text("[" * 200000, encoding="utf-8")
    store.add_one("Fresh start")
    assert read_facts(facts_path) == [{"fact": "Fresh start", "is_enabled": True}]


@pytest.mark.parametrize("flag", ["false", "true", 1, 0, None, []])
def test_non_boolean_flag_loads_as_disabled(store, facts_path, flag):
    write_facts(facts_path, [{"fact": "A", "is_enabled": flag}])
    assert store.load_all() == [Fact("A", False)]


def test_string_false_flag_is_not_rewritten_as_enabled(store, facts_path):
    write_facts(facts_path, [{"fact": "A", "is_enabled": "false"}])
    store.add_one("B")
    assert read_facts(facts_path) == [
        {"fact": "A", "is_enabled": False},
        {"fact": "B", "is_enabled": True},
    ]
