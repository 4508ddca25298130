"""Synchronisation demonstrations: mutexes, conditions, barriers, spin and rw locks, semaphores."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

from threadlab.locks import RWLock, SpinLock
from threadlab.logger import deb


def _run_all(targets: list[Callable[[], None]]) -> None:
    threads = [threading.Thread(target=target) for target in targets]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def _check_iterations(iterations: int) -> None:
    if iterations < 0:
        raise ValueError("iterations must not be negative")


def run_counter_unsafe(iterations: int = 10000) -> int:
    """Two threads increment a shared counter with no lock; return the total."""
    _check_iterations(iterations)
    counter = [0]

    def work() -> None:
        for _ in range(iterations):
            value = counter[0]
            counter[0] = value + 1

    _run_all([work, work])
    deb(f"result: {counter[0]}")
    deb("main thread about to exit...")
    return counter[0]


def run_counter_mutex(iterations: int = 10000) -> int:
    """Two threads increment a shared counter under a mutex; return the total."""
    _check_iterations(iterations)
    counter = [0]
    mutex = threading.Lock()

    def work() -> None:
        for _ in range(iterations):
            with mutex:
                counter[0] += 1

    _run_all([work, work])
    deb(f"result: {counter[0]}")
    deb("main thread about to exit...")
    return counter[0]


def run_cond(delay: float = 5.0) -> list[str]:
    """One thread waits on a condition that another signals after a delay.

    Returns the events in the order they happened.
    """
    cond = threading.Condition()
    signalled = [False]
    events: list[str] = []

    def waiter() -> None:
        deb("entering blocked state...")
        with cond:
            events.append("waiting")
            cond.wait_for(lambda: signalled[0])
            events.append("woken")
            deb("got the signal, leaving blocked state...")

    def signaller() -> None:
        deb(f"sending the wake-up signal after {delay} seconds...")
        time.sleep(delay)
        with cond:
            signalled[0] = True
            cond.notify()
            events.append("signalled")
            deb("wake-up signal sent...")

    _run_all([waiter, signaller])
    return events


def run_barrier(parties: int = 3) -> list[tuple[str, int]]:
    """Threads meet at a barrier; return ("before"/"after", worker) events in order."""
    if parties < 1:
        raise ValueError("parties must be at least 1")
    deb(f"main thread ({threading.get_ident()}) starting...")
    barrier = threading.Barrier(parties)
    record = threading.Lock()
    events: list[tuple[str, int]] = []

    def worker(index: int) -> Callable[[], None]:
        def body() -> None:
            ident = threading.get_ident()
            deb(f"child thread ({ident}) starting...")
            deb(f"child thread ({ident}) before the barrier")
            with record:
                events.append(("before", index))
            barrier.wait()
            with record:
                events.append(("after", index))
            deb(f"child thread ({ident}) after the barrier")
            deb(f"child thread ({ident}) about to exit...")

        return body

    _run_all([worker(index) for index in range(parties)])
    deb(f"main thread ({threading.get_ident()}) about to exit...")
    return events


def run_spinlock(rounds: int = 3, hold: float = 1.0) -> list[tuple[str, int]]:
    """Two threads take turns holding a spin lock; return ("enter"/"leave", worker) events."""
    deb(f"main thread ({threading.get_ident()}) starting...")
    lock = SpinLock()
    events: list[tuple[str, int]] = []

    def worker(index: int) -> Callable[[], None]:
        def body() -> None:
            ident = threading.get_ident()
            deb(f"child thread ({ident}) starting...")
            for _ in range(rounds):
                with lock:
                    events.append(("enter", index))
                    deb(f"child thread ({ident}) entered the spin lock")
                    time.sleep(hold)
                    deb(f"child thread ({ident}) leaving the spin lock")
                    events.append(("leave", index))

        return body

    _run_all([worker(0), worker(1)])
    deb(f"main thread ({threading.get_ident()}) about to exit...")
    return events


def run_rwlock(rounds: int = 5, interval: float = 1.0) -> list[tuple[str, int, int, int]]:
    """Two readers and one writer share a value under a reader-writer lock.

    Returns events ``(kind, worker, round, value)`` where kind is "read" or
    "write"; workers 0 and 1 read, worker 2 writes.
    """
    lock = RWLock()
    value = [0]
    record = threading.Lock()
    events: list[tuple[str, int, int, int]] = []

    def reader(index: int) -> Callable[[], None]:
        def body() -> None:
            ident = threading.get_ident()
            for round_no in range(rounds):
                lock.acquire_read()
                try:
                    for _ in range(2):
                        current = value[0]
                        with record:
                            events.append(("read", index, round_no, current))
                        deb(f"reader thread ({ident}) got current value ({current})")
                        time.sleep(interval)
                finally:
                    lock.release_read()
                time.sleep(interval)

        return body

    def writer() -> None:
        ident = threading.get_ident()
        for round_no in range(rounds):
            lock.acquire_write()
            try:
                value[0] += 1
                with record:
                    events.append(("write", 2, round_no, value[0]))
                deb(f"writer thread ({ident}) set current value ({value[0]})")
            finally:
                lock.release_write()
            time.sleep(2 * interval)

    _run_all([reader(0), reader(1), writer])
    return events


def _emit_range(start: int, interval: float, seen: list[int]) -> None:
    ident = threading.get_ident()
    for number in range(start, start + 5):
        seen.append(number)
        deb(f"reader thread ({ident}) got current value ({number})")
        time.sleep(interval)


def run_sem_mutex(interval: float = 1.0) -> list[int]:
    """Three threads use a binary semaphore as a mutex; return the values they emitted."""
    sem = threading.Semaphore(1)
    seen: list[int] = []

    def worker(start: int) -> Callable[[], None]:
        def body() -> None:
            with sem:
                _emit_range(start, interval, seen)

        return body

    _run_all([worker(0), worker(10), worker(20)])
    return seen


def run_sem_sync(interval: float = 1.0) -> list[int]:
    """Three threads run in a fixed order handed on by semaphores; return the values emitted."""
    sems = [threading.Semaphore(1), threading.Semaphore(0), threading.Semaphore(0)]
    seen: list[int] = []

    def worker(position: int, start: int) -> Callable[[], None]:
        def body() -> None:
            sems[position].acquire()
            _emit_range(start, interval, seen)
            sems[(position + 1) % len(sems)].release()

        return body

    _run_all([worker(0, 0), worker(1, 10), worker(2, 20)])
    return seen