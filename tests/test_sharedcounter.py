import threading

import pytest

from samplekit.sharedcounter import (
    AtomicCounter,
    atomic_count,
    locked_count,
    main,
    unsafe_count,
)


def test_atomic_counter_add_returns_new_value():
    counter = AtomicCounter()
    assert counter.add(1) == 1
    assert counter.add(4) == 5
    assert counter.add(-5) == 0
    assert counter.load() == 0


def test_atomic_counter_starts_from_value():
    assert AtomicCounter(7).load() == 7


def test_atomic_counter_is_safe_across_threads():
    counter = AtomicCounter()
    threads = [
        threading.Thread(target=lambda: [counter.add(1) for _ in range(500)]) for _ in range(8)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert counter.load() == 8 * 500


@pytest.mark.parametrize("workers, rounds", [(2, 2), (4, 50), (1, 10), (0, 5), (3, 0)])
def test_atomic_count_loses_nothing(workers, rounds):
    assert atomic_count(workers, rounds) == workers * rounds


@pytest.mark.parametrize("workers, rounds", [(2, 2), (4, 50), (1, 10), (0, 5)])
def test_locked_count_loses_nothing(workers, rounds):
    assert locked_count(workers, rounds) == workers * rounds


def test_unsafe_count_stays_in_bounds():
    workers, rounds = 4, 25
    result = unsafe_count(workers, rounds)
    assert 1 <= result <= workers * rounds


def test_unsafe_count_single_worker_is_exact():
    assert unsafe_count(1, 10) == 10


@pytest.mark.parametrize("count", [atomic_count, locked_count, unsafe_count])
def test_negative_arguments_rejected(count):
    with pytest.raises(ValueError):
        count(-1, 2)
    with pytest.raises(ValueError):
        count(2, -1)


def test_main_prints_final_counter(capsys):
    assert main(["atomic"]) == 0
    assert capsys.readouterr().out == "Final Counter: 4\n"


def test_main_locked_default(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Final Counter: 4\n"