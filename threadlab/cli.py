"""Command line entry point that runs one of the thread demonstrations."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence

from threadlab import basics, props, sync


def _create(scale: float) -> str:
    main_info, child_info = props.run_create(5.0 * scale)
    return "\n".join(
        [
            f"main ({main_info.ident}): {main_info.policy_label} priority {main_info.priority}",
            f"child ({child_info.ident}): {child_info.policy_label} priority {child_info.priority}",
        ]
    )


def _join_values(values: Sequence[object]) -> str:
    return " ".join(str(value) for value in values)


_DEMOS: dict[str, Callable[[float], str]] = {
    "create": _create,
    "prop": lambda s: "\n".join(props.run_prop().lines()),
    "detach": lambda s: f"child finished: {basics.run_detach(3.0 * s, 5.0 * s)}",
    "exit-01": lambda s: basics.run_exit_early(3, 1.0 * s),
    "exit-02": lambda s: basics.run_exit_return(3, 1.0 * s),
    "exit-03": lambda s: f"iterations: {basics.run_daemon(5.0 * s, 1.0 * s)}",
    "exit-04": lambda s: f"iterations: {basics.run_cancel(5.0 * s, 5.0 * s, 1.0 * s)}",
    "join": lambda s: basics.run_join(3.0 * s),
    "param": lambda s: basics.run_param(basics.Student(id=2022, age=18, name="zao san"), 5.0 * s),
    "self": lambda s: _join_values(basics.run_self(5.0 * s)),
    "atexit": lambda s: f"registered: {basics.run_atexit(0.5 * s, 2.0 * s).__name__}",
    "sync-ques": lambda s: str(sync.run_counter_unsafe(10000)),
    "sync-mutex": lambda s: str(sync.run_counter_mutex(10000)),
    "sync-cond": lambda s: _join_values(sync.run_cond(5.0 * s)),
    "sync-barrier": lambda s: _join_values(f"{kind}:{i}" for kind, i in sync.run_barrier(3)),
    "sync-spinlock": lambda s: _join_values(f"{kind}:{i}" for kind, i in sync.run_spinlock(3, 1.0 * s)),
    "sync-rwlock": lambda s: _join_values(
        f"{kind}:{worker}:{value}" for kind, worker, _, value in sync.run_rwlock(5, 1.0 * s)
    ),
    "sem-mutex": lambda s: _join_values(sync.run_sem_mutex(1.0 * s)),
    "sem-sync": lambda s: _join_values(sync.run_sem_sync(1.0 * s)),
}


def _scale(text: str) -> float:
    try:
        value = float(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError("scale must not be negative")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="threadlab", description="Run a thread demonstration.")
    parser.add_argument("demo", nargs="?", default="create", choices=sorted(_DEMOS), help="demonstration to run")
    parser.add_argument("--scale", type=_scale, default=1.0, help="multiply every delay by this factor")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen demonstration and print its result."""
    args = _parser().parse_args(argv)
    print(_DEMOS[args.demo](args.scale))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())