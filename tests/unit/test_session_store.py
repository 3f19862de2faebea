"""In-memory session store"""

import threading
import time

from itinerary_analyzer.infrastructure.session_store import SessionStore


def test_get_or_create_reuses_entry():
    store = SessionStore()
    first = store.get_or_create("s1", list)
    first.append("x")
    assert store.get_or_create("s1", list) == ["x"]
    assert store.active_count == 1


def test_expired_entries_disappear():
    store = SessionStore(ttl=0.01)
    store.save("s1", {"v": 1})
    time.sleep(0.05)
    assert store.get("s1") is None
    assert store.active_count == 0


def test_oldest_entry_evicted_when_full():
    store = SessionStore(max_sessions=2)
    store.save("a", 1)
    store.save("b", 2)
    store.save("c", 3)
    assert store.get("a") is None
    assert store.get("c") == 3


def test_concurrent_first_requests_share_one_session():
    store = SessionStore()
    barrier = threading.Barrier(8)
    created = []
    results = []

    def factory():
        created.append(object())
        return created[-1]

    def worker():
        barrier.wait()
        results.append(store.get_or_create("shared", factory))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(created) == 1
    assert all(result is created[0] for result in results)
    assert store.active_count == 1
