"""Thread lifecycle demonstrations: join, detach, early exit, cancel, parameters, exit hooks."""

from __future__ import annotations

import atexit
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from threadlab.logger import deb

_NAME_CAPACITY = 32


@dataclass
class Student:
    """A record handed to a worker thread."""

    id: int
    age: int
    name: str

    def __post_init__(self) -> None:
        if len(self.name.encode()) >= _NAME_CAPACITY:
            raise ValueError(f"name must be shorter than {_NAME_CAPACITY} bytes")


class _ThreadExit(Exception):
    """Ends a worker thread early with a value."""

    def __init__(self, value: Any) -> None:
        super().__init__(value)
        self.value = value


def _thread_exit(value: Any) -> None:
    raise _ThreadExit(value)


class _Worker(threading.Thread):
    """A thread whose target's return (or early exit) value is kept."""

    def __init__(self, target: Callable[[], Any], *, daemon: bool = False) -> None:
        super().__init__(daemon=daemon)
        self._fn = target
        self.result: Any = None

    def run(self) -> None:
        try:
            self.result = self._fn()
        except _ThreadExit as stop:
            self.result = stop.value

    def join_result(self) -> Any:
        self.join()
        return self.result


def run_detach(child_delay: float = 3.0, main_delay: float = 5.0) -> bool:
    """Run a detached child; return whether it finished before the main thread ended."""
    finished = threading.Event()

    def child() -> None:
        deb(f"child thread exits after {child_delay} seconds...")
        time.sleep(child_delay)
        finished.set()

    worker = _Worker(child, daemon=True)
    worker.start()
    deb("main thread continues...")
    deb(f"main thread ends after {main_delay} seconds...")
    time.sleep(main_delay)
    deb("main thread about to exit...")
    return finished.is_set()


def run_exit_early(limit: int = 3, interval: float = 1.0) -> str:
    """Child counts and ends itself once past the limit; return its exit value."""

    def child() -> str:
        num = 0
        while True:
            num += 1
            deb(f"child thread running, {num}...")
            time.sleep(interval)
            if num > limit:
                _thread_exit("8888")

    worker = _Worker(child)
    worker.start()
    deb("main thread continues...")
    value = worker.join_result()
    deb(f"child thread returned: {value}")
    deb("main thread about to exit...")
    return value


def run_exit_return(limit: int = 3, interval: float = 1.0) -> str:
    """Child counts, leaves its loop past the limit and returns; return that value."""

    def child() -> str:
        num = 0
        while True:
            num += 1
            deb(f"child thread running, {num}...")
            time.sleep(interval)
            if num > limit:
                break
        return "9999"

    worker = _Worker(child)
    worker.start()
    deb("main thread continues...")
    value = worker.join_result()
    deb(f"child thread returned: {value}")
    deb("main thread about to exit...")
    return value


def _looping_child(stop: threading.Event, interval: float, counter: list[int]) -> Callable[[], None]:
    def child() -> None:
        while True:
            counter[0] += 1
            deb(f"child thread running, {counter[0]}...")
            if stop.wait(interval):
                return

    return child


def run_daemon(main_delay: float = 5.0, interval: float = 1.0) -> int:
    """An endless child is ended when the main thread finishes; return its iterations."""
    stop = threading.Event()
    counter = [0]
    worker = _Worker(_looping_child(stop, interval, counter), daemon=True)
    worker.start()

    deb(f"main thread ends after {main_delay} seconds...")
    time.sleep(main_delay)
    deb("main thread about to exit...")
    stop.set()
    worker.join()
    return counter[0]


def run_cancel(cancel_delay: float = 5.0, settle_delay: float = 5.0, interval: float = 1.0) -> int:
    """Cancel an endless child after a delay; return how many iterations it ran."""
    cancel = threading.Event()
    counter = [0]
    worker = _Worker(_looping_child(cancel, interval, counter), daemon=True)
    worker.start()

    deb(f"main thread cancels the child after {cancel_delay} seconds")
    time.sleep(cancel_delay)
    cancel.set()

    deb(f"main thread waits {settle_delay} seconds for the child to stop")
    time.sleep(settle_delay)
    worker.join()

    deb("main thread about to exit...")
    return counter[0]


def run_join(delay: float = 3.0) -> str:
    """Wait for a child that sleeps then returns; return its value."""

    def child() -> str:
        deb(f"child thread exits after {delay} seconds...")
        time.sleep(delay)
        return "9999"

    worker = _Worker(child)
    worker.start()
    deb("main thread continues...")
    value = worker.join_result()
    deb(f"child thread returned: {value}")
    deb("main thread about to exit...")
    return value


def run_param(student: Student, main_delay: float = 5.0) -> str:
    """Hand a record to a child, which reports it; return the report."""

    def child() -> str:
        text = f"name = {student.name}, age = {student.age}, id = {student.id}"
        deb(text)
        return text

    worker = _Worker(child)
    worker.start()
    deb(f"main thread ends after {main_delay} seconds...")
    time.sleep(main_delay)
    text = worker.join_result()
    deb("main thread about to exit...")
    return text


def run_self(main_delay: float = 5.0) -> tuple[int, int]:
    """Return the identifiers of the main thread and of a child thread."""
    main_ident = threading.get_ident()
    deb(f"main thread id: {main_ident}")

    def child() -> int:
        ident = threading.get_ident()
        deb(f"child thread id: {ident}")
        return ident

    worker = _Worker(child)
    worker.start()
    deb(f"main thread ends after {main_delay} seconds...")
    time.sleep(main_delay)
    child_ident = worker.join_result()
    deb("main thread about to exit...")
    return main_ident, child_ident


def run_atexit(interval: float = 0.5, linger: float = 2.0) -> Callable[[], None]:
    """Register an exit hook that stops a background loop; return the hook."""
    exit_flag = threading.Event()

    def loop() -> str:
        while True:
            deb("++++++++++++++++++++++++++")
            if exit_flag.wait(interval):
                return "9999"

    def exit_func() -> None:
        deb("------------------------------------")
        exit_flag.set()
        time.sleep(linger)
        deb("====================================")

    _Worker(loop, daemon=True).start()
    atexit.register(exit_func)
    deb(f"exit hook registered: {exit_func.__name__}")
    deb(f"main thread ({threading.get_ident()}) about to exit...")
    return exit_func