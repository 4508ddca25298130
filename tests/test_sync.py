from collections import Counter

import pytest

from threadlab.sync import (
    run_barrier,
    run_cond,
    run_counter_mutex,
    run_counter_unsafe,
    run_rwlock,
    run_sem_mutex,
    run_sem_sync,
    run_spinlock,
)


def test_counter_mutex_exact():
    assert run_counter_mutex(10000) == 20000


def test_counter_mutex_zero():
    assert run_counter_mutex(0) == 0


def test_counter_unsafe_bounded():
    result = run_counter_unsafe(10000)
    assert 0 < result <= 20000


def test_counter_negative_iterations():
    with pytest.raises(ValueError):
        run_counter_mutex(-1)
    with pytest.raises(ValueError):
        run_counter_unsafe(-1)


def test_cond_order():
    assert run_cond(0.2) == ["waiting", "signalled", "woken"]


def test_cond_zero_delay_completes():
    events = run_cond(0.0)
    assert sorted(events) == ["signalled", "waiting", "woken"]
    assert events[-1] in ("woken", "signalled")
    assert events.index("waiting") < events.index("woken")


@pytest.mark.parametrize("parties", [1, 3, 5])
def test_barrier_separates_phases(parties):
    events = run_barrier(parties)
    assert len(events) == 2 * parties
    assert all(kind == "before" for kind, _ in events[:parties])
    assert all(kind == "after" for kind, _ in events[parties:])
    assert sorted(i for _, i in events[:parties]) == list(range(parties))
    assert sorted(i for _, i in events[parties:]) == list(range(parties))


def test_barrier_rejects_zero():
    with pytest.raises(ValueError):
        run_barrier(0)


def test_spinlock_no_overlap():
    events = run_spinlock(3, 0.01)
    assert len(events) == 12
    for enter, leave in zip(events[::2], events[1::2]):
        assert enter[0] == "enter"
        assert leave[0] == "leave"
        assert enter[1] == leave[1]
    assert Counter(worker for kind, worker in events if kind == "enter") == {0: 3, 1: 3}


def test_rwlock_consistent_reads():
    rounds = 3
    events = run_rwlock(rounds, 0.01)
    writes = [value for kind, _, _, value in events if kind == "write"]
    assert writes == list(range(1, rounds + 1))
    held: dict[tuple[int, int], list[int]] = {}
    for kind, worker, round_no, value in events:
        if kind == "read":
            held.setdefault((worker, round_no), []).append(value)
    assert len(held) == 2 * rounds
    for values in held.values():
        assert len(values) == 2
        assert values[0] == values[1]
        assert 0 <= values[0] <= rounds


def test_sem_mutex_blocks_contiguous():
    seen = run_sem_mutex(0.0)
    ranges = {tuple(range(0, 5)), tuple(range(10, 15)), tuple(range(20, 25))}
    chunks = {tuple(seen[i : i + 5]) for i in range(0, len(seen), 5)}
    assert len(seen) == 15
    assert chunks == ranges


def test_sem_sync_fixed_order():
    assert run_sem_sync(0.0) == list(range(0, 5)) + list(range(10, 15)) + list(range(20, 25))