import threading
import time

import pytest

from roster_api.app.core.exceptions import StorageError
from roster_api.app.services.cache_pool import CachePool


def test_snapshot_is_empty_until_refreshed():
    pool = CachePool("numbers", lambda: [1, 2, 3])
    assert pool.snapshot() == ()
    pool.refresh()
    assert pool.snapshot() == (1, 2, 3)
    assert len(pool) == 3


def test_failed_reload_keeps_previous_snapshot():
    data = {"fail": False}

    def loader():
        if data["fail"]:
            raise StorageError("Team", "disk I/O error")
        return ["a", "b"]

    pool = CachePool("letters", loader)
    pool.refresh()
    data["fail"] = True
    with pytest.raises(StorageError):
        pool.refresh()
    assert pool.snapshot() == ("a", "b")


def test_readers_never_observe_a_partial_snapshot():
    small = tuple(range(5))
    large = tuple(range(50))
    state = {"toggle": False}

    def slow_loader():
        state["toggle"] = not state["toggle"]
        for item in (large if state["toggle"] else small):
            time.sleep(0.0005)
            yield item

    pool = CachePool("slow", slow_loader)
    pool.refresh()
    stop = threading.Event()
    observed = set()

    def reader():
        while not stop.is_set():
            observed.add(pool.snapshot())

    readers = [threading.Thread(target=reader) for _ in range(4)]
    for thread in readers:
        thread.start()
    for _ in range(6):
        pool.refresh()
    stop.set()
    for thread in readers:
        thread.join()

    assert observed <= {small, large}
