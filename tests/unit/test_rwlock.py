#!/usr/bin/env python3
"""
Unit tests for the shared reader/writer lock
"""

import sys
import threading
import time
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from langcache.rwlock import ReadWriteLock


def _wait_until(predicate, timeout=2.0):
    deadline = time.time() + timeout
    while time.time() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return False


class TestReadWriteLock:
    def test_readers_share(self):
        lock = ReadWriteLock()
        barrier = threading.Barrier(2, timeout=2)
        errors = []

        def reader():
            try:
                with lock.read_locked():
                    barrier.wait()
            except threading.BrokenBarrierError as exc:
                errors.append(exc)

        threads = [threading.Thread(target=reader) for _ in range(2)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=5)

        assert not errors

    def test_writer_waits_for_readers(self):
        lock = ReadWriteLock()
        written = threading.Event()

        def writer():
            with lock.write_locked():
                written.set()

        lock.acquire_read()
        thread = threading.Thread(target=writer)
        thread.start()

        assert not written.wait(0.1)
        lock.release_read()
        assert written.wait(2)
        thread.join(timeout=2)

    def test_waiting_writer_blocks_new_readers(self):
        lock = ReadWriteLock()
        order = []

        def writer():
            with lock.write_locked():
                order.append("writer")

        def late_reader():
            with lock.read_locked():
                order.append("reader")

        lock.acquire_read()
        writer_thread = threading.Thread(target=writer)
        writer_thread.start()
        assert _wait_until(lambda: lock._writers_waiting == 1)

        reader_thread = threading.Thread(target=late_reader)
        reader_thread.start()
        time.sleep(0.05)
        assert order == []

        lock.release_read()
        writer_thread.join(timeout=2)
        reader_thread.join(timeout=2)
        assert order == ["writer", "reader"]

    def test_writers_exclude_each_other(self):
        lock = ReadWriteLock()
        inside = []
        overlap = []

        def writer():
            for _ in range(200):
                with lock.write_locked():
                    inside.append(1)
                    if len(inside) > 1:
                        overlap.append(len(inside))
                    inside.pop()

        threads = [threading.Thread(target=writer) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(timeout=10)

        assert overlap == []

    def test_unbalanced_release(self):
        lock = ReadWriteLock()
        with pytest.raises(RuntimeError):
            lock.release_read()
        with pytest.raises(RuntimeError):
            lock.release_write()

    def test_lock_released_on_error(self):
        lock = ReadWriteLock()
        with pytest.raises(KeyError):
            with lock.write_locked():
                raise KeyError("boom")

        with lock.read_locked():
            pass
