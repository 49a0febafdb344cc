import asyncio
import random

import pytest

from datasources.native_system_module import CATEGORIES, NativeSystemModule
from models.result_item import NATIVE_SOURCE
from orchestrator.errors import QueryValidationError


def test_populate_generates_three_to_seven_items(store):
    items = asyncio.run(store.populate_data("Technology Trends"))
    assert 3 <= len(items) <= 7
    assert all(item.source == NATIVE_SOURCE for item in items)
    assert len({item.id for item in items}) == len(items)


def test_populate_titles_use_query_category_and_index(store):
    items = asyncio.run(store.populate_data("science"))
    for index, item in enumerate(items, start=1):
        query, category, number = item.title.split(" ")
        assert query == "science"
        assert category in CATEGORIES
        assert number == str(index)
        assert '"science"' in item.content


def test_has_data_only_after_populate(store):
    assert asyncio.run(store.has_data("health")) is False
    asyncio.run(store.populate_data("health"))
    assert asyncio.run(store.has_data("  HEALTH ")) is True


def test_get_data_returns_stored_items_or_empty(store):
    assert asyncio.run(store.get_data("business")) == []
    populated = asyncio.run(store.populate_data("business"))
    assert asyncio.run(store.get_data("Business")) == populated


def test_populate_twice_overwrites(store):
    first = asyncio.run(store.populate_data("education"))
    second = asyncio.run(store.populate_data("education"))
    assert {i.id for i in first}.isdisjoint({i.id for i in second})
    assert asyncio.run(store.get_data("education")) == second


def test_uncovered_query_records_empty_entry(store):
    items = asyncio.run(store.populate_data("zzqzz123"))
    assert items == []
    assert asyncio.run(store.has_data("zzqzz123")) is True


def test_wildcard_coverage_accepts_every_query():
    store = NativeSystemModule(populate_delay_s=0, coverage=["*"], rng=random.Random(1))
    assert store.coverage is None
    assert asyncio.run(store.populate_data("zzqzz123"))


def test_fixed_item_count_range():
    store = NativeSystemModule(populate_delay_s=0, min_items=5, max_items=5)
    assert len(asyncio.run(store.populate_data("politics"))) == 5


def test_invalid_item_range_rejected():
    with pytest.raises(ValueError):
        NativeSystemModule(min_items=4, max_items=2)


def test_blank_query_rejected(store):
    with pytest.raises(QueryValidationError):
        asyncio.run(store.populate_data("   "))


def test_clear_drops_everything(store):
    asyncio.run(store.populate_data("science"))
    store.clear()
    assert len(store) == 0
    assert asyncio.run(store.has_data("science")) is False
