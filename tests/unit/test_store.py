"""Tests for the in-memory asset store."""
from asset_tracker.store import AssetStore


def test_new_store_is_empty():
    store = AssetStore()
    assert store.is_empty()
    assert len(store) == 0
    assert store.all() == []


def test_add_keeps_insertion_order(make_asset):
    store = AssetStore()
    assets = [make_asset(office=o) for o in ("Mumbai", "London", "New York")]
    for asset in assets:
        store.add(asset)
    assert not store.is_empty()
    assert len(store) == 3
    assert store.all() == assets
    assert list(store) == assets


def test_size_matches_number_added(make_asset):
    store = AssetStore()
    for i in range(25):
        store.add(make_asset(model=f"M{i}"))
    assert len(store) == 25


def test_all_returns_copy(make_asset):
    store = AssetStore()
    store.add(make_asset())
    store.all().clear()
    assert len(store) == 1
