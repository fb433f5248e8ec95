import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.custom_stack import CustomStack


def test_pop_empty_returns_minus_one():
    stack = CustomStack(3)
    assert stack.pop() == -1
    assert len(stack) == 0


def test_worked_example():
    stack = CustomStack(3)
    stack.push(1)
    stack.push(2)
    assert stack.pop() == 2
    stack.push(2)
    stack.push(3)
    stack.push(4)
    stack.increment(5, 100)
    stack.increment(2, 100)
    assert stack.pop() == 103
    assert stack.pop() == 202
    assert stack.pop() == 201
    assert stack.pop() == -1


def test_push_beyond_capacity_is_ignored():
    stack = CustomStack(2)
    for value in (10, 20, 30):
        stack.push(value)
    assert len(stack) == 2
    assert stack.pop() == 20
    assert stack.pop() == 10


def test_increment_on_empty_stack_has_no_effect():
    stack = CustomStack(2)
    stack.increment(2, 50)
    stack.push(7)
    assert stack.pop() == 7


def test_increment_zero_elements_has_no_effect():
    stack = CustomStack(2)
    stack.push(7)
    stack.increment(0, 50)
    assert stack.pop() == 7


def test_negative_max_size_rejected():
    with pytest.raises(ValueError):
        CustomStack(-1)


def test_max_size_property():
    assert CustomStack(4).max_size == 4


_operations = st.lists(
    st.one_of(
        st.tuples(st.just("push"), st.integers(-50, 50), st.none()),
        st.tuples(st.just("pop"), st.none(), st.none()),
        st.tuples(st.just("increment"), st.integers(0, 8), st.integers(-20, 20)),
    ),
    max_size=60,
)


@given(max_size=st.integers(0, 6), operations=_operations)
def test_matches_list_model(max_size, operations):
    stack = CustomStack(max_size)
    model: list[int] = []
    for name, first, second in operations:
        if name == "push":
            stack.push(first)
            if len(model) < max_size:
                model.append(first)
        elif name == "pop":
            expected = model.pop() if model else -1
            assert stack.pop() == expected
        else:
            stack.increment(first, second)
            for index in range(min(first, len(model))):
                model[index] += second
        assert len(stack) == len(model)
    drained = [stack.pop() for _ in range(len(model))]
    assert drained == model[::-1]
    assert stack.pop() == -1