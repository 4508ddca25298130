# threadlab

Short, self-contained demonstrations of how threads behave. They show how to
start threads and join them, detach them, stop them early and pass them data.
They also show how to coordinate threads with mutexes, condition variables,
barriers, semaphores, read/write locks and spin locks.

Each demonstration is a plain function. It runs one scenario, logs what
happens to standard error, and returns what the scenario produced. You can
watch a demonstration from the command line or check its result from code.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Command line

```
threadlab [DEMO] [--scale FACTOR]
```

The command runs one demonstration and prints its result to standard output.
The progress log goes to standard error. `DEMO` defaults to `create`. It is
one of:

| demo            | runs                                                      |
|-----------------|-----------------------------------------------------------|
| `create`        | `props.run_create`                                        |
| `prop`          | `props.run_prop`                                          |
| `detach`        | `basics.run_detach`                                       |
| `exit-01`       | `basics.run_exit_early`                                   |
| `exit-02`       | `basics.run_exit_return`                                  |
| `exit-03`       | `basics.run_daemon`                                       |
| `exit-04`       | `basics.run_cancel`                                       |
| `join`          | `basics.run_join`                                         |
| `param`         | `basics.run_param` with `Student(id=2022, age=18, name="zao san")` |
| `self`          | `basics.run_self`                                         |
| `atexit`        | `basics.run_atexit`                                       |
| `sync-ques`     | `sync.run_counter_unsafe(10000)`                          |
| `sync-mutex`    | `sync.run_counter_mutex(10000)`                           |
| `sync-cond`     | `sync.run_cond`                                           |
| `sync-barrier`  | `sync.run_barrier(3)`                                     |
| `sync-spinlock` | `sync.run_spinlock`                                       |
| `sync-rwlock`   | `sync.run_rwlock`                                         |
| `sem-mutex`     | `sync.run_semmutex`                                       |
| `sem-sync`      | `sync.run_sem_sync`                                       |

`--scale` multiplies every delay the demonstration uses. The factor must not
be negative. `threadlab sync-rwlock --scale 0.1`, for example, runs the
reader-writer scenario ten times faster.

The same entry point can be called from code as `threadlab.cli.main(argv)`.
It returns 0.

## Logging

`threadlab.logger` writes one line per message to standard error. Each line
carries the date, the time, a level tag, the caller's file, function and line
number, and the message. Every logging function returns the line it wrote:

```python
from threadlab import logger

logger.deb("worker started")
logger.err("something went wrong")
logger.log_msg(logger.Level.INF, "a message at an explicit level")
```

The levels in `logger.Level` are `DEB`, `INF`, `WAR`, `ERR` and `FAT`. Each
level has one helper function: `deb`, `inf`, `war`, `err` and `fat`.
`log_msg` raises `ValueError` for an unknown level.

Under `python -O` logging is switched off. The functions then write nothing
and return `None`.

## Thread basics

`threadlab.basics` covers the life cycle of a single worker thread:

```python
from threadlab import basics

basics.run_join(0.1)               # worker sleeps, returns "9999"; the main thread joins it
basics.run_exit_early(3, 0.05)     # worker counts, leaves its loop early with "8888"
basics.run_exit_return(3, 0.05)    # worker counts, breaks out and returns "9999"
basics.run_detach(0.1, 0.2)        # daemon worker; True if it finished before main ended
basics.run_daemon(0.2, 0.05)       # endless worker stopped when main finishes; returns its count
basics.run_cancel(0.2, 0.1, 0.05)  # endless worker told to stop; returns its count
basics.run_self(0.1)               # (main thread id, worker thread id)
basics.run_atexit(0.05, 0.1)       # registers an exit hook that stops a background loop

student = basics.Student(id=2022, age=18, name="zao san")
basics.run_param(student, 0.1)     # "name = zao san, age = 18, id = 2022"
```

`Student` raises `ValueError` if the name is 32 bytes or longer in UTF-8.

`run_atexit` returns the hook function it registered with `atexit`. The hook
runs at interpreter exit: it signals the loop to stop, waits `linger` seconds
and logs once more.

## Thread properties

`threadlab.props` reports what can be learned about threads and their default
attributes:

```python
from threadlab import props

info = props.current_thread_info()     # ThreadSchedInfo for the calling thread
info.policy_label                      # e.g. "SCHED_OTHER"
defaults = props.default_attributes()  # AttrDefaults
defaults.lines()                       # one "default: ..." line per attribute
props.policy_name(props.SCHED_FIFO)    # "SCHED_FIFO"; unknown policies give "???"
props.run_create(0.1)                  # (main ThreadSchedInfo, worker ThreadSchedInfo)
props.run_prop()                       # logs and returns default_attributes()
```

`ThreadSchedInfo` holds the following fields:

- `ident` and `native_id`: the thread's identifiers.
- `cpu_clock_id`: the thread's CPU clock id, or `None` where the platform has none.
- `policy` and `priority`: the scheduling policy and priority. These are read
  from the process. Where they are unavailable, the fields hold `SCHED_OTHER`
  and 0.

## Synchronisation

`threadlab.sync` runs the classic coordination scenarios. Each returns what
happened, in order:

```python
from threadlab import sync

sync.run_counter_unsafe(10000)  # two workers, no lock: the total may fall short of 20000
sync.run_counter_mutex(10000)   # two workers under a mutex: 20000
sync.run_cond(0.1)              # ["waiting", "signalled", "woken"]
sync.run_barrier(3)             # ("before", i) events, then ("after", i) events
sync.run_spinlock(3, 0.05)      # ("enter", i) / ("leave", i) pairs, never interleaved
sync.run_rwlock(5, 0.05)        # ("read" | "write", worker, round, value) events
sync.run_sem_mutex(0.01)        # three runs of five numbers, each run unbroken
sync.run_sem_sync(0.01)         # always [0..4, 10..14, 20..24]
```

`run_counter_unsafe` and `run_counter_mutex` raise `ValueError` if the
iteration count is negative. `run_barrier` raises `ValueError` if it is given
fewer than one party.

## Locks

The lock types used above are also available on their own in
`threadlab.locks`:

```python
from threadlab.locks import RWLock, SpinLock

rw = RWLock()
rw.acquire_read()       # many readers at once, as long as no writer holds it
try:
    rw.read_locked()    # True
finally:
    rw.release_read()

rw.acquire_write()      # exclusive
try:
    rw.write_locked()   # True
finally:
    rw.release_write()

spin = SpinLock()
with spin:              # or spin.acquire() / spin.release()
    spin.locked()       # True
```

`RWLock` gives readers precedence. A new reader gets in whenever no writer
holds the lock, even while a writer is waiting. A release without a matching
acquire raises `RuntimeError`, for `RWLock` and for `SpinLock` alike.
`read_locked()`, `write_locked()` and `locked()` only report the current
state. `SpinLock` retries without blocking and yields the processor between
attempts.

## What it does not do

- It never changes a thread's scheduling policy or priority. It only reads
  them.
- `default_attributes()` reports the defaults Python threads get. The detach
  state, inherit-scheduling and scope entries are fixed values. The guard size
  is the memory page size. The stack size comes from `threading.stack_size()`
  or the stack resource limit.
- Threads cannot be stopped from outside. "Cancelling" (`run_cancel`) and
  stopping daemon workers (`run_daemon`) set an event that the worker checks
  between iterations.