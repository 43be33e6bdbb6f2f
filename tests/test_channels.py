import io
import random

import pytest

from samplekit.channels import (
    play_tennis,
    print_received,
    relay_race,
    run_workers,
    work_until_shutdown,
)


class ScriptedRng:
    def __init__(self, values):
        self._values = iter(values)

    def randrange(self, stop):
        return next(self._values)


def test_print_received_given_values():
    out = io.StringIO()
    print_received([1, 2, 3], out)
    assert out.getvalue() == "Received 1 Received 2 Received 3 "


def test_print_received_defaults_to_one_through_ten():
    out = io.StringIO()
    print_received(out=out)
    text = out.getvalue()
    assert text.startswith("Received 1 ")
    assert text.endswith("Received 10 ")
    assert text.count("Received") == 10


def test_work_until_shutdown_stops_every_worker():
    out = io.StringIO()
    work_until_shutdown(("A", "B"), 0.05, 0.01, out)
    lines = out.getvalue().splitlines()
    shutdown_at = lines.index("Shutdown Now")
    for name in ("A", "B"):
        stopped = [i for i, line in enumerate(lines) if line == f"Shutting {name} Down"]
        assert len(stopped) == 1
        assert stopped[0] > shutdown_at
        assert f"Doing {name} Work" in lines[:shutdown_at]


def test_tennis_scripted_rally():
    out = io.StringIO()
    winners = play_tennis(("Nadal", "Djokovic"), ScriptedRng([1, 2, 0]), out)
    assert winners == ["Djokovic"]
    assert out.getvalue().splitlines() == [
        "Player Nadal Hit 1",
        "Player Djokovic Hit 2",
        "Player Nadal Missed",
        "Player Djokovic Won",
    ]


def test_tennis_with_three_players_everyone_else_wins():
    out = io.StringIO()
    winners = play_tennis(("A", "B", "C"), ScriptedRng([1, 13]), out)
    assert winners == ["A", "C"]
    lines = out.getvalue().splitlines()
    assert lines[:2] == ["Player A Hit 1", "Player B Missed"]
    assert sorted(lines[2:]) == ["Player A Won", "Player C Won"]


def test_tennis_random_game_has_one_loser():
    out = io.StringIO()
    winners = play_tennis(rng=random.Random(7), out=out)
    lines = out.getvalue().splitlines()
    assert len(winners) == 1
    assert lines[-1] == f"Player {winners[0]} Won"
    assert sum(line.endswith("Missed") for line in lines) == 1


def test_tennis_needs_two_players():
    with pytest.raises(ValueError):
        play_tennis(("Solo",))


def test_relay_with_two_runners():
    out = io.StringIO()
    relay_race(2, 0.0, out)
    assert out.getvalue().splitlines() == [
        "Runner 1 Running With Baton",
        "Runner 2 To The Line",
        "Runner 1 Exchange With Runner 2",
        "Runner 2 Running With Baton",
        "Runner 2 Finished, Race Over",
    ]


def test_relay_default_runners_finish_with_the_last():
    out = io.StringIO()
    relay_race(leg_time=0.0, out=out)
    lines = out.getvalue().splitlines()
    assert lines[-1] == "Runner 4 Finished, Race Over"
    assert sum("Running With Baton" in line for line in lines) == 4


def test_relay_needs_a_runner():
    with pytest.raises(ValueError):
        relay_race(0)


def test_run_workers_completes_every_task_once():
    out = io.StringIO()
    done = run_workers(rng=random.Random(1), out=out)
    expected = [f"Task : {post}" for post in range(1, 11)]
    assert sorted(done) == sorted(expected)
    assert set(done.values()) <= {1, 2, 3, 4}
    lines = out.getvalue().splitlines()
    for task in expected:
        started = [line for line in lines if line.endswith(f"Started {task}")]
        assert len(started) == 1
    shut = [line for line in lines if line.endswith("Shutting Down")]
    assert sorted(shut) == [f"Worker: {n} : Shutting Down" for n in range(1, 5)]


def test_run_workers_given_tasks():
    done = run_workers(["x", "y"], 1, ScriptedRng([0, 0]), io.StringIO())
    assert done == {"x": 1, "y": 1}


def test_run_workers_needs_a_worker():
    with pytest.raises(ValueError):
        run_workers(workers=0)