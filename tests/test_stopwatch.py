import time
from unittest import mock

from dmrgateway.stopwatch import StopWatch


def test_time_close_to_wall_clock():
    watch = StopWatch()
    now_ms = time.time() * 1000
    assert abs(watch.time() - now_ms) < 1000


def test_start_returns_monotonic_ms():
    watch = StopWatch()
    with mock.patch("time.monotonic_ns", return_value=5_000_000_000):
        assert watch.start() == 5000


def test_elapsed_measures_from_start():
    watch = StopWatch()
    with mock.patch("time.monotonic_ns", side_effect=[1_000_000_000, 1_250_000_000]):
        watch.start()
        assert watch.elapsed() == 250


def test_restart_resets_reference():
    watch = StopWatch()
    with mock.patch(
        "time.monotonic_ns",
        side_effect=[1_000_000_000, 3_000_000_000, 3_100_000_000],
    ):
        watch.start()
        watch.start()
        assert watch.elapsed() == 100


def test_elapsed_non_negative_real_clock():
    watch = StopWatch()
    watch.start()
    time.sleep(0.01)
    assert watch.elapsed() >= 9