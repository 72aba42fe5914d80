import pytest

from dmrgateway.ringbuffer import RingBuffer, RingBufferOverflow, RingBufferUnderflow


def test_new_buffer_is_empty():
    rb = RingBuffer(10, "test")
    assert rb.is_empty()
    assert not rb.has_data()
    assert rb.free_space() == 10
    assert rb.data_size() == 0
    assert len(rb) == 0


def test_round_trip():
    rb = RingBuffer(10, "test")
    rb.add_data([1, 2, 3, 4])
    assert len(rb) == 4
    assert rb.has_data()
    assert rb.get_data(4) == [1, 2, 3, 4]
    assert rb.is_empty()


def test_peek_does_not_consume():
    rb = RingBuffer(8, "test")
    rb.add_data(b"\x05\x06\x07")
    assert rb.peek(2) == [5, 6]
    assert len(rb) == 3
    assert rb.get_data(3) == [5, 6, 7]


def test_wraparound_preserves_order():
    rb = RingBuffer(5, "test")
    rb.add_data([1, 2, 3])
    assert rb.get_data(2) == [1, 2]
    rb.add_data([4, 5, 6])
    assert len(rb) == 4
    assert rb.free_space() == 1
    assert rb.get_data(4) == [3, 4, 5, 6]
    assert rb.free_space() == 5


def test_capacity_is_one_less_than_length():
    rb = RingBuffer(4, "test")
    rb.add_data([1, 2, 3])
    assert len(rb) == 3
    with pytest.raises(RingBufferOverflow):
        rb.add_data([9])


def test_overflow_clears_buffer():
    rb = RingBuffer(4, "test")
    rb.add_data([1, 2])
    with pytest.raises(RingBufferOverflow):
        rb.add_data([3, 4])
    assert rb.is_empty()
    assert rb.free_space() == 4


def test_underflow_on_get_and_peek():
    rb = RingBuffer(6, "test")
    rb.add_data([1, 2])
    with pytest.raises(RingBufferUnderflow):
        rb.get_data(3)
    with pytest.raises(RingBufferUnderflow):
        rb.peek(3)
    assert rb.get_data(2) == [1, 2]


def test_has_space_is_strict():
    rb = RingBuffer(6, "test")
    rb.add_data([1, 2])
    assert rb.has_space(3)
    assert not rb.has_space(4)


def test_clear_resets():
    rb = RingBuffer(6, "test")
    rb.add_data([1, 2, 3])
    rb.clear()
    assert rb.is_empty()
    assert len(rb) == 0


@pytest.mark.parametrize("length,name", [(0, "x"), (-1, "x"), (4, "")])
def test_invalid_construction(length, name):
    with pytest.raises(ValueError):
        RingBuffer(length, name)