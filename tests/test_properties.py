"""Randomized operation sequences against the layout store.

Each test replays a seeded random sequence of operations and checks the
layout invariants after every step.
"""

import random

import pytest

from split_ide.config.defaults import MAX_RATIO, MIN_RATIO
from split_ide.layout import LayoutStore, check_invariants, get_all_leaves, iter_nodes
from split_ide.models import Split

SEEDS = list(range(40))
STEPS = 120


def node_ids(store):
    return [node.id for node in iter_nodes(store.root)]


def random_operation(store, rng):
    """Apply one random operation, mixing valid and invalid targets."""
    ids = node_ids(store) + ["does-not-exist"]
    op = rng.choice(
        ["split", "split", "split_active", "close", "close", "ratio", "file", "focus", "next", "reset"]
    )
    direction = rng.choice(["horizontal", "vertical"])
    target = rng.choice(ids)

    if op == "split":
        store.split_pane(target, direction, rng.choice([None, "file-a", "file-b"]))
    elif op == "split_active":
        store.split_active(direction)
    elif op == "close":
        store.close_pane(target)
    elif op == "ratio":
        store.set_ratio(target, rng.uniform(-0.5, 1.5))
    elif op == "file":
        store.set_pane_file(target, rng.choice([None, "file-a", "file-c"]))
    elif op == "focus":
        store.set_active_pane(target)
    elif op == "next":
        store.focus_next()
    elif op == "reset" and rng.random() < 0.2:
        store.reset()


@pytest.mark.parametrize("seed", SEEDS)
def test_invariants_hold_for_random_sequences(seed):
    """Every reachable state satisfies the layout invariants."""
    rng = random.Random(seed)
    store = LayoutStore(seed=seed)

    for _ in range(STEPS):
        random_operation(store, rng)

        check_invariants(store.root, store.active_pane_id)
        assert store.get_pane_count() >= 1
        assert store.active_pane_id in {leaf.id for leaf in store.get_leaves()}
        for node in iter_nodes(store.root):
            if isinstance(node, Split):
                assert MIN_RATIO <= node.ratio <= MAX_RATIO


@pytest.mark.parametrize("seed", SEEDS)
def test_close_never_empties_tree(seed):
    """Closing every id in turn always leaves at least one pane."""
    rng = random.Random(seed)
    store = LayoutStore(seed=seed)
    for _ in range(30):
        random_operation(store, rng)

    for node_id in node_ids(store):
        store.close_pane(node_id)
        assert store.get_pane_count() >= 1
    for _ in range(5):
        store.close_pane(store.active_pane_id)
        assert store.get_pane_count() >= 1


@pytest.mark.parametrize("seed", SEEDS)
def test_split_then_close_round_trip(seed):
    """Closing a freshly split pane restores the previous tree."""
    rng = random.Random(seed)
    store = LayoutStore(seed=seed)
    for _ in range(30):
        random_operation(store, rng)

    for leaf in get_all_leaves(store.root):
        before_root = store.root
        before_count = store.get_pane_count()

        new_id = store.split_pane(leaf.id, rng.choice(["horizontal", "vertical"]))
        assert new_id is not None
        store.close_pane(new_id)

        assert store.get_pane_count() == before_count
        assert store.root == before_root
        restored = [l for l in store.get_leaves() if l.id == leaf.id]
        assert restored == [leaf]
        assert store.active_pane_id == leaf.id


@pytest.mark.parametrize("seed", SEEDS)
def test_set_ratio_is_idempotent(seed):
    """Setting the same ratio twice equals setting it once."""
    rng = random.Random(seed)
    store = LayoutStore(seed=seed)
    for _ in range(3):
        store.split_active(rng.choice(["horizontal", "vertical"]))

    splits = [node for node in iter_nodes(store.root) if isinstance(node, Split)]
    for split in splits:
        ratio = rng.uniform(-1.0, 2.0)
        store.set_ratio(split.id, ratio)
        once = store.state
        store.set_ratio(split.id, ratio)
        assert store.state == once


def test_old_snapshots_survive_updates():
    """Snapshots taken before a mutation keep their contents."""
    rng = random.Random(99)
    store = LayoutStore(seed=99)
    snapshots = []
    for _ in range(STEPS):
        snapshots.append((store.state, repr(store.state)))
        random_operation(store, rng)

    for snapshot, text in snapshots:
        assert repr(snapshot) == text
