import threading

import pytest

from threadlab.locks import RWLock, SpinLock


def _start(fn):
    done = threading.Event()

    def body():
        fn()
        done.set()

    thread = threading.Thread(target=body, daemon=True)
    thread.start()
    return thread, done


def test_rwlock_many_readers():
    lock = RWLock()
    lock.acquire_read()
    lock.acquire_read()
    assert lock.read_locked() is True
    assert lock.write_locked() is False
    lock.release_read()
    assert lock.read_locked() is True
    lock.release_read()
    assert lock.read_locked() is False


def test_rwlock_writer_blocks_reader():
    lock = RWLock()
    lock.acquire_write()
    assert lock.write_locked() is True
    thread, done = _start(lock.acquire_read)
    assert done.wait(0.1) is False
    lock.release_write()
    assert done.wait(2.0) is True
    thread.join(2.0)
    assert lock.read_locked() is True
    assert lock.write_locked() is False


def test_rwlock_reader_blocks_writer():
    lock = RWLock()
    lock.acquire_read()
    thread, done = _start(lock.acquire_write)
    assert done.wait(0.1) is False
    lock.release_read()
    assert done.wait(2.0) is True
    thread.join(2.0)
    assert lock.write_locked() is True
    lock.release_write()
    assert lock.write_locked() is False


def test_rwlock_release_errors():
    lock = RWLock()
    with pytest.raises(RuntimeError):
        lock.release_read()
    with pytest.raises(RuntimeError):
        lock.release_write()


def test_spinlock_state():
    lock = SpinLock()
    assert lock.locked() is False
    assert lock.acquire() is True
    assert lock.locked() is True
    lock.release()
    assert lock.locked() is False


def test_spinlock_release_unlocked():
    with pytest.raises(RuntimeError):
        SpinLock().release()


def test_spinlock_context_manager():
    lock = SpinLock()
    with lock as held:
        assert held.locked() is True
    assert lock.locked() is False


def test_spinlock_excludes():
    lock = SpinLock()
    lock.acquire()
    thread, done = _start(lambda: (lock.acquire(), lock.release()))
    assert done.wait(0.1) is False
    lock.release()
    assert done.wait(2.0) is True
    thread.join(2.0)
    assert lock.locked() is False


def test_spinlock_counter():
    lock = SpinLock()
    total = [0]
    acquired = []
    held_inside = []

    def work():
        for _ in range(500):
            acquired.append(lock.acquire())
            try:
                held_inside.append(lock.locked())
                value = total[0]
                total[0] = value + 1
            finally:
                lock.release()

    threads = [threading.Thread(target=work) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert total[0] == 2000
    assert len(acquired) == 2000
    assert all(result is True for result in acquired)
    assert all(state is True for state in held_inside)
    assert lock.locked() is False