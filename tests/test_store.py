import random

import pytest

from clickergame.objects import DuplicateObjectError, ObjectManager, UnknownObjectError
from clickergame.player import Player
from clickergame.store import Item, Store


def make_store(seed=1):
    manager = ObjectManager()
    player = Player()
    store = Store(310, 10, 300, 400, "store", manager, rng=random.Random(seed))
    return manager, player, store


def make_item(store, player, item_id, cost=100, prob=1.0, on_purchase=None):
    if on_purchase is None:
        on_purchase = lambda p: p.add_multiplier(1)  # noqa: E731
    return Item(item_id, "upgrade_example", cost, "desc", on_purchase, prob, store, player)


def test_store_registers_itself_inactive():
    manager, _, store = make_store()
    assert manager.get_object("Store") is store
    assert store.is_active is False
    assert store not in manager.click_active_objects


def test_item_construction_registers_clickable_inactive_item():
    manager, player, store = make_store()
    item = make_item(store, player, "a")
    assert store.items == {"a": item}
    assert manager.get_object("a") is item
    assert item in manager.click_active_objects
    assert item.is_active is False
    assert item.level == 1
    assert (item.x, item.y, item.width, item.height) == (380, 140, 90, 90)


def test_duplicate_item_id_raises():
    _, player, store = make_store()
    make_item(store, player, "a")
    with pytest.raises(DuplicateObjectError):
        make_item(store, player, "a")
    assert len(store.items) == 1


def test_unknown_ids_raise():
    _, _, store = make_store()
    with pytest.raises(UnknownObjectError):
        store.get_item("missing")
    with pytest.raises(UnknownObjectError):
        store.remove_item("missing")
    with pytest.raises(UnknownObjectError):
        store.make_item_available("missing")
    with pytest.raises(UnknownObjectError):
        store.make_item_unavailable("missing")


def test_remove_item():
    _, player, store = make_store()
    make_item(store, player, "a")
    store.remove_item("a")
    assert "a" not in store.items


def test_click_without_enough_points_only_shrinks():
    _, player, store = make_store()
    purchases = []
    item = make_item(store, player, "a", cost=100, on_purchase=purchases.append)
    item.on_click()
    assert (item.width, item.height) == (80, 80)
    assert item.cost == 100
    assert item.level == 1
    assert purchases == []


def test_release_restores_size():
    _, player, store = make_store()
    item = make_item(store, player, "a")
    item.on_click()
    item.on_release()
    assert (item.width, item.height) == (90, 90)


def test_purchase_raises_cost_and_level_and_keeps_points():
    _, player, store = make_store()
    purchases = []
    item = make_item(store, player, "a", cost=4, on_purchase=purchases.append)
    player.add_points(4)
    item.on_click()
    assert purchases == [player]
    assert item.cost == 8
    assert item.level == 2
    assert player.points == 4
    assert store.available_items == [item]


def test_randomize_offers_at_most_three_items():
    manager, player, store = make_store()
    items = [make_item(store, player, f"item{n}") for n in range(5)]
    store.randomize_available_items()
    assert len(store.available_items) == 3
    for item in items:
        assert item.is_active == (item in store.available_items)
        assert (item in manager.active_objects) == item.is_active


def test_randomize_stacks_items_from_top_slot():
    _, player, store = make_store()
    for n in range(3):
        make_item(store, player, f"item{n}")
    store.randomize_available_items()
    ys = [item.y for item in store.available_items]
    assert ys[0] == 140
    assert [b - a for a, b in zip(ys, ys[1:])] == [80, 80]


def test_randomize_skips_zero_probability_and_handles_few_candidates():
    _, player, store = make_store()
    always = make_item(store, player, "always", prob=1.0)
    never = make_item(store, player, "never", prob=0.0)
    for seed in range(10):
        store.rng = random.Random(seed)
        store.randomize_available_items()
        assert store.available_items == [always]
        assert never.is_active is False


def test_randomize_twice_does_not_duplicate():
    manager, player, store = make_store()
    for n in range(4):
        make_item(store, player, f"item{n}")
    store.randomize_available_items()
    store.randomize_available_items()
    assert len(store.available_items) == 3
    assert len(set(map(id, store.available_items))) == 3
    active_items = [o for o in manager.active_objects if isinstance(o, Item)]
    assert sorted(i.id for i in active_items) == sorted(i.id for i in store.available_items)


def test_make_item_unavailable_on_inactive_item_is_harmless():
    _, player, store = make_store()
    item = make_item(store, player, "a")
    store.make_item_unavailable("a")
    assert item.is_active is False
    assert store.available_items == []


def test_update_store_toggles_disabled_texture():
    _, player, store = make_store()
    item = make_item(store, player, "a", cost=10)
    store.make_item_available("a")
    store.update_store(player)
    assert item.texture_id == "upgrade_example_disabled"
    store.update_store(player)
    assert item.texture_id == "upgrade_example_disabled"
    player.add_points(10)
    store.update_store(player)
    assert item.texture_id == "upgrade_example"