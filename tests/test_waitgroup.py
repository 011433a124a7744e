import threading
import time

import pytest

from basekit.waitgroup import BoundedWaitGroup


def test_block_add_and_done_over_items():
    items = ["one", "two", "three", "four", "five"]
    group = BoundedWaitGroup(3)
    seen = []
    lock = threading.Lock()

    def check(item):
        try:
            with lock:
                seen.append(item)
        finally:
            group.done()

    for item in items:
        group.block_add()
        threading.Thread(target=check, args=(item,)).start()
    group.wait()
    assert sorted(seen) == sorted(items)
    assert group.pending_count() == 0


def test_add_limits_concurrency():
    group = BoundedWaitGroup(3)
    lock = threading.Lock()
    state = {"running": 0, "peak": 0, "ran": 0}

    def task():
        with lock:
            state["running"] += 1
            state["peak"] = max(state["peak"], state["running"])
        time.sleep(0.01)
        with lock:
            state["running"] -= 1
            state["ran"] += 1

    group.add(*[task for _ in range(10)])
    group.wait()
    assert group.pending_count() == 0
    assert state["ran"] == 10
    assert 1 <= state["peak"] <= 3


def test_pending_count_tracks_slots():
    group = BoundedWaitGroup(4)
    group.block_add()
    group.block_add()
    assert group.pending_count() == 2
    group.done()
    assert group.pending_count() == 1
    group.done()
    assert group.pending_count() == 0


def test_unbounded_group_has_no_pending_slots():
    group = BoundedWaitGroup(-1)
    for _ in range(5):
        group.block_add()
    assert group.pending_count() == 0
    for _ in range(5):
        group.done()
    group.wait()
    assert group.pending_count() == 0


def test_block_add_blocks_when_full():
    group = BoundedWaitGroup(1)
    group.block_add()
    added = threading.Event()

    def second():
        group.block_add()
        added.set()

    thread = threading.Thread(target=second)
    thread.start()
    assert not added.wait(0.05)
    group.done()
    assert added.wait(1.0)
    thread.join()
    assert group.pending_count() == 1
    group.done()
    assert group.pending_count() == 0


def test_done_without_add_raises():
    group = BoundedWaitGroup(2)
    with pytest.raises(ValueError):
        group.done()


def test_context_manager_waits():
    results = []
    with BoundedWaitGroup(2) as group:
        group.add(lambda: results.append(1), lambda: results.append(2))
    assert sorted(results) == [1, 2]