import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.circular_deque import CircularDeque


def test_fresh_deque_is_empty():
    dq = CircularDeque(3)
    assert dq.is_empty()
    assert not dq.is_full()
    assert dq.front() == -1
    assert dq.rear() == -1
    assert len(dq) == 0


def test_worked_example():
    dq = CircularDeque(3)
    assert dq.insert_last(1) is True
    assert dq.insert_last(2) is True
    assert dq.insert_front(3) is True
    assert dq.insert_front(4) is False
    assert dq.rear() == 2
    assert dq.is_full() is True
    assert dq.delete_last() is True
    assert dq.insert_front(4) is True
    assert dq.front() == 4
    assert list(dq) == [4, 3, 1]


def test_delete_from_empty_is_refused():
    dq = CircularDeque(2)
    assert dq.delete_front() is False
    assert dq.delete_last() is False
    assert dq.is_empty()


def test_zero_capacity_is_always_full():
    dq = CircularDeque(0)
    assert dq.is_full()
    assert dq.is_empty()
    assert dq.insert_front(5) is False
    assert dq.insert_last(5) is False


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        CircularDeque(-1)


def test_capacity_property():
    assert CircularDeque(7).capacity == 7


def test_wraps_around_repeatedly():
    dq = CircularDeque(2)
    for value in range(10):
        assert dq.insert_last(value)
        assert dq.front() == value
        assert dq.delete_front()
    assert dq.is_empty()


_operations = st.lists(
    st.one_of(
        st.tuples(st.just("insert_front"), st.integers(-100, 100)),
        st.tuples(st.just("insert_last"), st.integers(-100, 100)),
        st.tuples(st.just("delete_front"), st.none()),
        st.tuples(st.just("delete_last"), st.none()),
    ),
    max_size=60,
)


@given(capacity=st.integers(0, 6), operations=_operations)
def test_matches_list_model(capacity, operations):
    dq = CircularDeque(capacity)
    model: list[int] = []
    for name, value in operations:
        if name == "insert_front":
            expected = len(model) < capacity
            if expected:
                model.insert(0, value)
            assert dq.insert_front(value) is expected
        elif name == "insert_last":
            expected = len(model) < capacity
            if expected:
                model.append(value)
            assert dq.insert_last(value) is expected
        elif name == "delete_front":
            expected = bool(model)
            if expected:
                model.pop(0)
            assert dq.delete_front() is expected
        else:
            expected = bool(model)
            if expected:
                model.pop()
            assert dq.delete_last() is expected
        assert list(dq) == model
        assert dq.front() == (model[0] if model else -1)
        assert dq.rear() == (model[-1] if model else -1)
        assert dq.is_empty() == (not model)
        assert dq.is_full() == (len(model) == capacity)