"""Tests for the reader/writer lock."""

from __future__ import annotations

import threading
import time

import pytest

from text_bayes.locking import ReadWriteLock


class TestReadWriteLock:
    """Tests for shared and exclusive access."""

    def test_readers_share(self):
        lock = ReadWriteLock()
        inside = threading.Barrier(3, timeout=5)

        def reader():
            with lock.read_locked():
                inside.wait()

        threads = [threading.Thread(target=reader) for _ in range(2)]
        for t in threads:
            t.start()
        # Both readers hold the lock at once or the barrier times out.
        inside.wait()
        for t in threads:
            t.join(timeout=5)
        assert not any(t.is_alive() for t in threads)

    def test_writer_excludes_readers(self):
        lock = ReadWriteLock()
        events: list[str] = []
        writer_in = threading.Event()

        def writer():
            with lock.write_locked():
                writer_in.set()
                time.sleep(0.05)
                events.append("writer-done")

        def reader():
            writer_in.wait(timeout=5)
            with lock.read_locked():
                events.append("reader")

        w = threading.Thread(target=writer)
        r = threading.Thread(target=reader)
        w.start()
        r.start()
        w.join(timeout=5)
        r.join(timeout=5)

        assert events == ["writer-done", "reader"]

    def test_waiting_writer_blocks_new_readers(self):
        lock = ReadWriteLock()
        events: list[str] = []

        lock.acquire_read()

        def writer():
            with lock.write_locked():
                events.append("writer")

        def late_reader():
            with lock.read_locked():
                events.append("reader")

        w = threading.Thread(target=writer)
        w.start()
        deadline = time.monotonic() + 5
        while lock._writers_waiting == 0 and time.monotonic() < deadline:
            time.sleep(0.001)

        r = threading.Thread(target=late_reader)
        r.start()
        time.sleep(0.05)
        assert events == []

        lock.release_read()
        w.join(timeout=5)
        r.join(timeout=5)

        assert events == ["writer", "reader"]

    def test_release_without_acquire(self):
        lock = ReadWriteLock()
        with pytest.raises(RuntimeError):
            lock.release_read()
        with pytest.raises(RuntimeError):
            lock.release_write()

    def test_context_manager_releases_on_error(self):
        lock = ReadWriteLock()
        with pytest.raises(ValueError):
            with lock.write_locked():
                raise ValueError("boom")
        # Would deadlock if the write side were still held.
        with lock.read_locked():
            pass
