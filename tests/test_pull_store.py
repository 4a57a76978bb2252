"""
Tests for the pull list store and its pure mutations.
"""

import json
import random
from collections import Counter
from datetime import datetime

import pytest

from maigacha.errors import DuplicateName, InvalidWeight, NotFound, StoreCorrupted
from maigacha.models.pull_models import Category, Item, PullHistory, PullList
from maigacha.pull_engine import select_pull
from maigacha.pull_store import PullStore, add_item, remove_item


class TestLoadSave:
    """Tests for PullStore.load / PullStore.save."""

    def test_missing_file_loads_empty_list(self, store):
        pull_list = store.load()
        assert pull_list.items == []
        assert pull_list.history.entries == []

    def test_load_does_not_create_file(self, store, store_path):
        store.load()
        assert not store_path.exists()

    def test_round_trip_preserves_items_and_order(self, store, mixed_items):
        store.save(PullList(items=mixed_items))
        assert store.load().items == mixed_items

    def test_round_trip_is_lossless_for_awkward_values(self, store):
        items = [
            Item(name="Ünïcode ✨", category=Category.rare, weight=0.1 + 0.2),
            Item(name="item 1", category=Category.common, weight=1e-9),
            Item(name="Item 1", category=Category.common, weight=123456789.125),
        ]
        store.save(PullList(items=items))
        loaded = store.load().items
        assert [(i.name, i.category, i.weight) for i in loaded] == [
            (i.name, i.category, i.weight) for i in items
        ]

    def test_round_trip_preserves_history(self, store, sample_items):
        history = PullHistory(size=5).record(sample_items[1], datetime(2026, 1, 2, 3, 4, 5))
        store.save(PullList(items=sample_items, history=history))
        loaded = store.load().history
        assert loaded.size == 5
        assert loaded.entries[0].name == "Item 2"
        assert loaded.entries[0].pulled_at == datetime(2026, 1, 2, 3, 4, 5)

    def test_save_creates_parent_directory(self, store, store_path):
        assert not store_path.parent.exists()
        store.save(PullList())
        assert store_path.exists()

    def test_save_replaces_previous_contents(self, store, sample_items):
        store.save(PullList(items=sample_items))
        store.save(PullList(items=sample_items[1:]))
        assert [i.name for i in store.load().items] == ["Item 2"]

    def test_save_leaves_no_temp_files(self, store, store_path, sample_items):
        store.save(PullList(items=sample_items))
        store.save(PullList(items=sample_items))
        assert [p.name for p in store_path.parent.iterdir()] == [store_path.name]

    def test_saved_file_is_plain_json(self, store, store_path, sample_items):
        store.save(PullList(items=sample_items))
        document = json.loads(store_path.read_text(encoding="utf-8"))
        assert document["items"][0] == {"name": "Item 1", "category": "common", "weight": 0.5}

    def test_invalid_json_is_reported(self, store, store_path):
        store_path.parent.mkdir(parents=True)
        store_path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StoreCorrupted):
            store.load()

    def test_undecodable_bytes_are_reported(self, store, store_path):
        store_path.parent.mkdir(parents=True)
        store_path.write_bytes(b'{"items": [], "x": "\xff\xfe"}')
        with pytest.raises(StoreCorrupted):
            store.load()

    def test_overflowing_total_weight_is_reported(self, store, store_path):
        store_path.parent.mkdir(parents=True)
        store_path.write_text(json.dumps({"items": [
            {"name": "A", "category": "common", "weight": 1e308},
            {"name": "B", "category": "common", "weight": 1e308},
        ]}), encoding="utf-8")
        with pytest.raises(StoreCorrupted) as exc:
            store.load()
        assert exc.value.errors[0]["path"] == "$.items"

    def test_invalid_record_is_reported_with_path(self, store, store_path):
        store_path.parent.mkdir(parents=True)
        store_path.write_text(json.dumps({
            "items": [{"name": "A", "category": "legendary", "weight": 1}]
        }), encoding="utf-8")
        with pytest.raises(StoreCorrupted) as exc:
            store.load()
        assert exc.value.errors[0]["path"] == "$.items[0].category"

    def test_document_without_history_loads(self, store, store_path):
        store_path.parent.mkdir(parents=True)
        store_path.write_text(json.dumps({
            "items": [{"name": "A", "category": "rare", "weight": 2}]
        }), encoding="utf-8")
        pull_list = store.load()
        assert pull_list.items == [Item(name="A", category=Category.rare, weight=2.0)]
        assert pull_list.history.entries == []


class TestAddItem:
    """Tests for add_item."""

    def test_appends_item(self, sample_items):
        result = add_item(sample_items, "Item 3", Category.common, 1.5)
        assert [i.name for i in result] == ["Item 1", "Item 2", "Item 3"]
        assert result[-1] == Item(name="Item 3", category=Category.common, weight=1.5)

    def test_does_not_modify_input(self, sample_items):
        before = list(sample_items)
        add_item(sample_items, "Item 3", Category.rare, 1)
        assert sample_items == before

    def test_duplicate_name_rejected(self, sample_items):
        before = list(sample_items)
        with pytest.raises(DuplicateName):
            add_item(sample_items, "Item 1", Category.rare, 3)
        assert sample_items == before

    def test_names_are_case_sensitive(self, sample_items):
        result = add_item(sample_items, "item 1", Category.common, 1)
        assert len(result) == 3

    @pytest.mark.parametrize("weight", [0, -1, float("nan"), float("inf"), "2", True])
    def test_invalid_weight_rejected(self, sample_items, weight):
        with pytest.raises(InvalidWeight):
            add_item(sample_items, "Item 3", Category.common, weight)

    def test_total_weight_must_stay_finite(self):
        items = [Item(name="A", category=Category.common, weight=1e308)]
        with pytest.raises(InvalidWeight):
            add_item(items, "B", Category.common, 1e308)

    def test_huge_weights_keep_even_odds(self):
        items = add_item([], "A", Category.common, 1e307)
        items = add_item(items, "B", Category.common, 1e307)
        counts = Counter(select_pull(items, random.Random(1234)).name for _ in range(2000))
        assert counts["A"] / 2000 == pytest.approx(0.5, abs=0.05)


class TestRemoveItem:
    """Tests for remove_item."""

    def test_removes_matching_item(self, mixed_items):
        result = remove_item(mixed_items, "Crown")
        assert len(result) == len(mixed_items) - 1
        assert "Crown" not in [i.name for i in result]
        assert [i.name for i in result] == ["Sword", "Shield", "Dragon Egg"]

    def test_does_not_modify_input(self, mixed_items):
        before = list(mixed_items)
        remove_item(mixed_items, "Crown")
        assert mixed_items == before

    def test_unknown_name_rejected(self, mixed_items):
        before = list(mixed_items)
        with pytest.raises(NotFound):
            remove_item(mixed_items, "crown")
        assert mixed_items == before

    def test_remove_from_empty_list(self):
        with pytest.raises(NotFound):
            remove_item([], "Anything")
