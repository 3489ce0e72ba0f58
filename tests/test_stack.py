import pytest

from bencodec.stack import (
    DICT_MARKER,
    LIST_MARKER,
    DataStack,
    Marker,
    StackError,
    is_dict_symbol,
    is_list_symbol,
    shrink_dictionary,
    shrink_stack,
)


@pytest.mark.parametrize(
    "candidate, expected",
    [(DICT_MARKER, True), (LIST_MARKER, False), (1, False), ("1", False), (None, False)],
)
def test_is_dict_symbol(candidate, expected):
    assert is_dict_symbol(candidate) is expected


@pytest.mark.parametrize(
    "candidate, expected",
    [(LIST_MARKER, True), (DICT_MARKER, False), (1, False), ("1", False), (None, False)],
)
def test_is_list_symbol(candidate, expected):
    assert is_list_symbol(candidate) is expected


def test_enum_members_are_recognised_as_markers():
    assert is_dict_symbol(Marker.DICT) is True
    assert is_list_symbol(Marker.LIST) is True
    assert is_dict_symbol(Marker.LIST) is False
    assert is_list_symbol(Marker.DICT) is False


def test_stack_push():
    stack = DataStack()
    stack.push(1)
    assert stack == [1]


def test_empty_stack_pop():
    stack = DataStack()
    with pytest.raises(StackError, match="data stack is empty"):
        stack.pop()


def test_stack_pop():
    stack = DataStack()
    stack.push(1)
    assert stack.pop() == 1
    assert len(stack) == 0


def test_stack_pop_is_lifo():
    stack = DataStack()
    stack.push("a")
    stack.push("b")
    assert stack.pop() == "b"
    assert stack.pop() == "a"


@pytest.mark.parametrize(
    "items, expected",
    [
        (["value1", "key1", "value2", "key2"], {"key1": "value1", "key2": "value2"}),
        ([], {}),
        ([42, "x", True, "y"], {"x": 42, "y": True}),
    ],
)
def test_shrink_dictionary(items, expected):
    assert shrink_dictionary(items) == expected


@pytest.mark.parametrize(
    "items",
    [["only", "two", "values"], ["val", 123]],
)
def test_shrink_dictionary_errors(items):
    with pytest.raises(StackError):
        shrink_dictionary(items)


def test_shrink_dictionary_does_not_mutate_input():
    items = ["value1", "key1"]
    shrink_dictionary(items)
    assert items == ["value1", "key1"]


@pytest.mark.parametrize(
    "initial, expected",
    [
        (
            [DICT_MARKER, "key1", "value1", "key2", "value2"],
            [{"key1": "value1", "key2": "value2"}],
        ),
        ([LIST_MARKER, "item1", "item2"], [["item1", "item2"]]),
        (["onlyOne"], ["onlyOne"]),
        ([], []),
    ],
)
def test_shrink_stack(initial, expected):
    stack = DataStack(initial)
    shrink_stack(stack)
    assert stack == expected


def test_shrink_stack_only_reduces_to_nearest_marker():
    stack = DataStack([LIST_MARKER, 1, LIST_MARKER, 2, 3])
    shrink_stack(stack)
    assert stack == [LIST_MARKER, 1, [2, 3]]


@pytest.mark.parametrize(
    "initial",
    [
        [DICT_MARKER, 123, "value"],
        [DICT_MARKER, "value1", "key1", "extra"],
    ],
)
def test_shrink_stack_errors(initial):
    stack = DataStack(initial)
    with pytest.raises(StackError):
        shrink_stack(stack)