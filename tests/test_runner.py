import time

import pytest

from samplekit.runner import (
    Runner,
    RunnerInterrupted,
    RunnerTimeout,
    create_task,
    main,
)


def test_tasks_run_in_order_with_their_index():
    recorded = []
    runner = Runner(5)
    runner.add(recorded.append, recorded.append, recorded.append)
    runner.start()
    assert recorded == [0, 1, 2]


def test_add_accumulates_across_calls():
    recorded = []
    runner = Runner(5)
    runner.add(recorded.append)
    runner.add(recorded.append, recorded.append)
    runner.start()
    assert recorded == [0, 1, 2]


def test_timeout_is_raised_when_tasks_are_slow():
    runner = Runner(0.05)
    runner.add(lambda task_id: time.sleep(0.5))
    with pytest.raises(RunnerTimeout) as info:
        runner.start()
    assert str(info.value) == "received timeout"


def test_interrupt_before_start_runs_no_task():
    recorded = []
    runner = Runner(5)
    runner.add(recorded.append)
    runner.interrupt()
    with pytest.raises(RunnerInterrupted) as info:
        runner.start()
    assert str(info.value) == "received interrupt"
    assert recorded == []


def test_interrupt_during_run_stops_later_tasks():
    recorded = []
    runner = Runner(5)

    def first(task_id):
        recorded.append(task_id)
        runner.interrupt()

    runner.add(first, recorded.append, recorded.append)
    with pytest.raises(RunnerInterrupted):
        runner.start()
    assert recorded == [0]


def test_task_failure_is_raised_from_start():
    runner = Runner(5)

    def broken(task_id):
        raise ValueError("broken task")

    runner.add(broken)
    with pytest.raises(ValueError, match="broken task"):
        runner.start()


def test_create_task_sleeps_in_proportion_to_id():
    runner = Runner(0.2)
    runner.add(create_task(0.5), create_task(0.5))
    with pytest.raises(RunnerTimeout) as info:
        runner.start()
    assert str(info.value) == "received timeout"


def test_main_finishes_within_limit():
    assert main(["--timeout", "2", "--unit", "0"]) == 0


def test_main_reports_timeout():
    assert main(["--timeout", "0.05", "--unit", "1"]) == 1