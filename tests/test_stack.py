import pytest

from pushswap.stack import Node, Stack


def make(values):
    return Stack(Node(v) for v in values)


def test_len_and_values():
    values = [5, -3, 8, 0]
    stack = make(values)
    assert len(stack) == len(values)
    assert stack.values() == values


def test_empty_stack():
    stack = Stack()
    assert len(stack) == 0
    assert stack.values() == []
    assert stack.is_sorted() is True


def test_iter_yields_nodes_in_order():
    nodes = [Node(1), Node(2), Node(3)]
    stack = Stack(nodes)
    assert all(a is b for a, b in zip(stack, nodes))


def test_swap_exchanges_top_two():
    stack = make([4, 7, 9])
    stack.swap()
    assert stack.values() == [7, 4, 9]


def test_swap_carries_index():
    first, second = Node(10, index=2), Node(20, index=1)
    stack = Stack([first, second])
    stack.swap()
    assert [n.index for n in stack] == [1, 2]


def test_swap_twice_is_identity():
    values = [3, 1, 2]
    stack = make(values)
    stack.swap()
    stack.swap()
    assert stack.values() == values


def test_swap_small_stack_is_noop():
    stack = make([42])
    stack.swap()
    assert stack.values() == [42]


def test_push_from_moves_top():
    a = make([1, 2, 3])
    b = make([9])
    b.push_from(a)
    assert b.values() == [1, 9]
    assert a.values() == [2, 3]


def test_push_from_empty_is_noop():
    a = Stack()
    b = make([5, 6])
    b.push_from(a)
    assert b.values() == [5, 6]
    assert len(a) == 0


def test_push_back_and_forth_round_trip():
    a = make([1, 2, 3])
    b = Stack()
    b.push_from(a)
    b.push_from(a)
    a.push_from(b)
    a.push_from(b)
    assert a.values() == [1, 2, 3]
    assert len(b) == 0


def test_rotate_moves_top_to_bottom():
    values = [3, 1, 2]
    stack = make(values)
    stack.rotate()
    assert stack.values() == values[1:] + values[:1]


def test_reverse_rotate_moves_bottom_to_top():
    values = [3, 1, 2]
    stack = make(values)
    stack.reverse_rotate()
    assert stack.values() == values[-1:] + values[:-1]


def test_rotate_then_reverse_rotate_is_identity():
    values = [8, 6, 7, 5, 3]
    stack = make(values)
    stack.rotate()
    stack.reverse_rotate()
    assert stack.values() == values


def test_full_rotation_is_identity():
    values = [8, 6, 7, 5, 3]
    stack = make(values)
    for _ in values:
        stack.rotate()
    assert stack.values() == values


@pytest.mark.parametrize("op", ["rotate", "reverse_rotate"])
def test_rotations_on_single_element(op):
    stack = make([1])
    getattr(stack, op)()
    assert stack.values() == [1]


@pytest.mark.parametrize(
    "values, expected",
    [
        ([1, 2, 3], True),
        ([1, 1, 2], True),
        ([7], True),
        ([2, 1], False),
        ([1, 3, 2], False),
    ],
)
def test_is_sorted(values, expected):
    assert make(values).is_sorted() is expected


def test_max_index():
    stack = Stack([Node(5, index=2), Node(1, index=4), Node(3, index=1)])
    assert stack.max_index() == 4


def test_max_index_empty_raises():
    with pytest.raises(ValueError):
        Stack().max_index()