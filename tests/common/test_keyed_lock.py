import threading
import time

from src.cohort_attendance.cohort_attendance.common.locks import KeyedLock


def test_same_key_is_serialized():
    locks = KeyedLock()
    counter = [0]

    def bump():
        with locks.hold(("m1", "2026-01-01")):
            value = counter[0]
            time.sleep(0.001)
            counter[0] = value + 1

    threads = [threading.Thread(target=bump) for _ in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert counter[0] == 20
    assert len(locks) == 0


def test_different_keys_do_not_block_each_other():
    locks = KeyedLock()

    with locks.hold("a"):
        with locks.hold("b"):
            assert len(locks) == 2

    assert len(locks) == 0
