"""Runnable demonstrations of threads and thread synchronisation: logging,
thread properties, thread life cycle, lock types, coordination scenarios and
a command line entry point."""

__version__ = "0.1.0"
__all__ = ["basics", "cli", "locks", "logger", "props", "sync"]