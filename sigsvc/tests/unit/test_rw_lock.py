# sigsvc/tests/unit/test_rw_lock.py
'''
Test Suite para ReadWriteLock:
    Lectores compartidos, escritor exclusivo y preferencia de escritura.
'''

import sys
import os
import threading
import time

# --- AJUSTE DE RUTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
root_dir = os.path.abspath(os.path.join(current_dir, '../../..'))
if root_dir not in sys.path:
    sys.path.append(root_dir)

from sigsvc.core.utils.rw_lock import ReadWriteLock

def test_readers_share_the_lock():
    lock = ReadWriteLock()
    inside = threading.Barrier(3, timeout=2)

    def reader() -> None:
        with lock.read_lock():
            # Si los lectores se excluyeran, la barrera expiraría
            inside.wait()

    threads = [threading.Thread(target=reader) for _ in range(3)]
    for t in threads: t.start()
    for t in threads: t.join()

    assert not inside.broken

def test_writer_excludes_readers():
    lock = ReadWriteLock()
    events = []
    writer_in = threading.Event()

    def writer() -> None:
        with lock.write_lock():
            writer_in.set()
            time.sleep(0.1)
            events.append("writer-done")

    def reader() -> None:
        writer_in.wait()
        with lock.read_lock():
            events.append("reader")

    w = threading.Thread(target=writer)
    r = threading.Thread(target=reader)
    w.start(); r.start()
    w.join(); r.join()

    assert events == ["writer-done", "reader"]

def test_waiting_writer_blocks_new_readers():
    lock = ReadWriteLock()
    events = []
    first_reader_in = threading.Event()
    release_first_reader = threading.Event()

    def first_reader() -> None:
        with lock.read_lock():
            first_reader_in.set()
            release_first_reader.wait(2)
        events.append("reader-1-out")

    def writer() -> None:
        with lock.write_lock():
            events.append("writer")

    def late_reader() -> None:
        with lock.read_lock():
            events.append("reader-2")

    r1 = threading.Thread(target=first_reader)
    r1.start()
    first_reader_in.wait(2)

    w = threading.Thread(target=writer)
    w.start()
    time.sleep(0.05)  # el escritor queda esperando al primer lector

    r2 = threading.Thread(target=late_reader)
    r2.start()
    time.sleep(0.05)
    assert "reader-2" not in events

    release_first_reader.set()
    for t in (r1, w, r2): t.join(2)

    assert events.index("writer") < events.index("reader-2")

def test_lock_released_on_exception():
    lock = ReadWriteLock()

    try:
        with lock.write_lock():
            raise ValueError("fallo dentro de la sección crítica")
    except ValueError:
        pass

    acquired = threading.Event()

    def reader() -> None:
        with lock.read_lock():
            acquired.set()

    t = threading.Thread(target=reader)
    t.start(); t.join(1)
    assert acquired.is_set()
