import pytest

from dmrgateway.timer import Timer


def test_not_running_until_started():
    timer = Timer(1000, 1)
    assert not timer.is_running()
    assert not timer.has_expired()
    timer.start()
    assert timer.is_running()


def test_timeout_reported_in_seconds():
    assert Timer(1000, 5).timeout() == 5
    assert Timer(1000).timeout() == 0


def test_expires_after_timeout_ticks():
    timer = Timer(1000, 1)
    timer.start()
    timer.clock(999)
    assert not timer.has_expired()
    assert timer.remaining() >= 0
    timer.clock(1)
    assert timer.has_expired()
    assert timer.remaining() == 0


def test_remaining_decreases():
    timer = Timer(10, 3)
    timer.start()
    before = timer.remaining()
    timer.clock(10)
    assert timer.remaining() == before - 1


def test_elapsed_seconds_tracks_clock():
    timer = Timer(10, 10)
    timer.start()
    assert timer.timer() == 0
    timer.clock(20)
    assert timer.timer() == 2


def test_start_without_timeout_does_not_run():
    timer = Timer(1000)
    timer.start()
    assert not timer.is_running()
    timer.clock(5000)
    assert not timer.has_expired()


def test_start_with_new_timeout():
    timer = Timer(1000)
    timer.start(2)
    assert timer.is_running()
    assert timer.timeout() == 2


def test_stop_clears_running_state():
    timer = Timer(1000, 1)
    timer.start()
    timer.clock(5)
    timer.stop()
    assert not timer.is_running()
    assert timer.timer() == 0
    timer.clock(5000)
    assert not timer.has_expired()


def test_zero_timeout_stops_timer():
    timer = Timer(1000, 1)
    timer.start()
    timer.set_timeout(0)
    assert not timer.is_running()
    assert timer.timeout() == 0


def test_msecs_timeout_in_ticks():
    timer = Timer(1000, 0, 500)
    timer.start()
    timer.clock(499)
    assert not timer.has_expired()
    timer.clock(1)
    assert timer.has_expired()


def test_invalid_tick_rate():
    with pytest.raises(ValueError):
        Timer(0)