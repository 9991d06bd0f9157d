from concurrent.futures import ThreadPoolExecutor
import threading

from ecash.ledger import Ledger, MemoryLedger
import pytest

def test_insert_if_absent():
    ledger = MemoryLedger()
    assert not ledger.contains(b"a")
    assert ledger.insert_if_absent(b"a")
    assert not ledger.insert_if_absent(b"a")
    assert b"a" in ledger
    assert len(ledger) == 1

def test_concurrent_insert_has_one_winner():
    ledger = MemoryLedger()
    n = 32
    barrier = threading.Barrier(n)

    def attempt(_):
        barrier.wait()
        return ledger.insert_if_absent(b"contested")

    with ThreadPoolExecutor(max_workers=n) as pool:
        results = list(pool.map(attempt, range(n)))

    assert results.count(True) == 1
    assert len(ledger) == 1

def test_concurrent_batch_has_one_winner():
    ledger = MemoryLedger()
    n = 32
    barrier = threading.Barrier(n)

    def attempt(i):
        barrier.wait()
        # every batch shares b"contested" and has one secret of its own
        return ledger.insert_all_if_absent([b"contested", bytes([i])])

    with ThreadPoolExecutor(max_workers=n) as pool:
        results = list(pool.map(attempt, range(n)))

    assert results.count(True) == 1
    assert len(ledger) == 2

def test_batch_insert_is_all_or_nothing(dict_ledger):
    for ledger in (MemoryLedger(), dict_ledger):
        assert ledger.insert_if_absent(b"b")
        assert not ledger.insert_all_if_absent([b"a", b"b", b"c"])
        assert not ledger.contains(b"a")
        assert not ledger.contains(b"c")

        assert ledger.insert_all_if_absent([b"a", b"c"])
        assert ledger.contains(b"a") and ledger.contains(b"c")

def test_batch_insert_rejects_duplicates(dict_ledger):
    for ledger in (MemoryLedger(), dict_ledger):
        assert not ledger.insert_all_if_absent([b"x", b"y", b"x"])
        assert not ledger.contains(b"x")
        assert not ledger.contains(b"y")

def test_backend_must_provide_batch_insert():
    class SingleInsertLedger(Ledger):
        def contains(self, secret):
            return False

        def insert_if_absent(self, secret):
            return True

    with pytest.raises(TypeError):
        SingleInsertLedger()

def test_empty_batch():
    ledger = MemoryLedger()
    assert ledger.insert_all_if_absent([])
    assert len(ledger) == 0
