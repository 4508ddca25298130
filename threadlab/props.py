"""Scheduling information of running threads and default thread attributes."""

from __future__ import annotations

import mmap
import os
import threading
import time
from dataclasses import dataclass

from threadlab.logger import deb

try:
    import resource
except ImportError:  # not available on every platform
    resource = None

SCHED_OTHER = getattr(os, "SCHED_OTHER", 0)
SCHED_FIFO = getattr(os, "SCHED_FIFO", 1)
SCHED_RR = getattr(os, "SCHED_RR", 2)

_POLICY_NAMES = {
    SCHED_FIFO: "SCHED_FIFO",
    SCHED_RR: "SCHED_RR",
    SCHED_OTHER: "SCHED_OTHER",
}

_FALLBACK_STACK_SIZE = 8 * 1024 * 1024


def policy_name(policy: int) -> str:
    """Return the symbolic name of a scheduling policy, or '???' if unknown."""
    return _POLICY_NAMES.get(policy, "???")


@dataclass(frozen=True)
class ThreadSchedInfo:
    """Identity and scheduling state of one thread."""

    ident: int
    native_id: int | None
    cpu_clock_id: int | None
    policy: int
    priority: int

    @property
    def policy_label(self) -> str:
        return policy_name(self.policy)


@dataclass(frozen=True)
class AttrDefaults:
    """The attributes a newly created thread gets by default."""

    detach_state: str
    guard_size: int
    inherit_sched: str
    sched_priority: int
    sched_policy: int
    scope: str
    stack_addr: int | None
    stack_size: int

    def lines(self) -> list[str]:
        """Describe every attribute, one line each."""
        addr = "(nil)" if self.stack_addr is None else hex(self.stack_addr)
        return [
            f"default: detached state   = {self.detach_state}",
            f"default: guard size     = {self.guard_size}",
            f"default: inherit sched  = {self.inherit_sched}",
            f"default: sched_param    = {self.sched_priority}",
            f"default: sched policy   = {policy_name(self.sched_policy)}",
            f"default: scope          = {self.scope}",
            f"default: stack_addr     = {addr}",
            f"default: stack_size     = {self.stack_size}",
            f"default: stack_addr     = {addr}",
            f"default: stack_size     = {self.stack_size}",
        ]


def current_thread_info() -> ThreadSchedInfo:
    """Collect scheduling information about the calling thread."""
    ident = threading.get_ident()
    try:
        clock_id = time.pthread_getcpuclockid(ident)
    except (AttributeError, OSError):
        clock_id = None
    try:
        policy = os.sched_getscheduler(0)
        priority = os.sched_getparam(0).sched_priority
    except (AttributeError, OSError):
        policy, priority = SCHED_OTHER, 0
    return ThreadSchedInfo(
        ident=ident,
        native_id=threading.get_native_id(),
        cpu_clock_id=clock_id,
        policy=policy,
        priority=priority,
    )


def _default_stack_size() -> int:
    configured = threading.stack_size()
    if configured:
        return configured
    if resource is not None:
        soft, _hard = resource.getrlimit(resource.RLIMIT_STACK)
        if soft > 0 and soft != resource.RLIM_INFINITY:
            return soft
    return _FALLBACK_STACK_SIZE


def default_attributes() -> AttrDefaults:
    """Return the attributes new threads are created with."""
    return AttrDefaults(
        detach_state="PTHREAD_CREATE_JOINABLE",
        guard_size=mmap.PAGESIZE,
        inherit_sched="PTHREAD_INHERIT_SCHED",
        sched_priority=0,
        sched_policy=SCHED_OTHER,
        scope="PTHREAD_SCOPE_SYSTEM",
        stack_addr=None,
        stack_size=_default_stack_size(),
    )


def _report(role: str, info: ThreadSchedInfo) -> None:
    deb(f"{role} thread ({info.ident}) CPU clock id ({info.cpu_clock_id})")
    deb(f"{role} thread ({info.ident}) scheduling policy ({info.policy_label})")
    deb(f"{role} thread ({info.ident}) scheduling priority ({info.priority})")


def run_create(main_delay: float = 5.0) -> tuple[ThreadSchedInfo, ThreadSchedInfo]:
    """Start a thread, report both threads' scheduling state, and return it."""
    deb(f"main thread ({threading.get_ident()}) starting...")
    child_infos: list[ThreadSchedInfo] = []

    def child() -> None:
        info = current_thread_info()
        deb(f"child thread ({info.ident}) running...")
        _report("child", info)
        child_infos.append(info)
        deb(f"child thread ({info.ident}) about to exit...")

    worker = threading.Thread(target=child)
    worker.start()

    main_info = current_thread_info()
    _report("main", main_info)
    deb(f"main thread ({main_info.ident}) ends after {main_delay} seconds...")
    time.sleep(main_delay)
    worker.join()

    deb(f"main thread ({main_info.ident}) about to exit...")
    return main_info, child_infos[0]


def run_prop() -> AttrDefaults:
    """Log the default thread attributes and return them."""
    attrs = default_attributes()
    for line in attrs.lines():
        deb(line)
    return attrs