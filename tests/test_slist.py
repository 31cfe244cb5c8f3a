import copy

import pytest

from fieacore.slist import SList
from fieacore.slist_node import Cursor


def test_empty_list():
    s = SList()
    assert len(s) == 0
    assert s.is_empty()
    assert s.begin() == s.end()
    assert list(s) == []


def test_construct_from_values_keeps_order():
    values = [10, 20, 30]
    s = SList(values)
    assert list(s) == values
    assert len(s) == len(values)
    assert s.front() == values[0]
    assert s.back() == values[-1]


def test_empty_list_raises():
    s = SList()
    with pytest.raises(RuntimeError, match="List is empty"):
        s.front()
    with pytest.raises(RuntimeError, match="List is empty"):
        s.back()
    with pytest.raises(RuntimeError, match="List is empty"):
        s.pop_front()
    with pytest.raises(RuntimeError, match="List is empty"):
        s.pop_back()
    assert len(s) == 0


def test_push_front_and_back():
    s = SList()
    cur = s.push_back(2)
    assert cur.value() == 2
    cur = s.push_front(1)
    assert cur.value() == 1
    s.push_back(3)
    assert list(s) == [1, 2, 3]
    assert s.front() == 1
    assert s.back() == 3


def test_single_element_front_equals_back():
    s = SList()
    s.push_front("a")
    assert s.front() == s.back() == "a"


def test_pop_front_and_back():
    s = SList([1, 2, 3, 4])
    s.pop_front()
    assert list(s) == [2, 3, 4]
    s.pop_back()
    assert list(s) == [2, 3]
    assert s.back() == 3
    s.pop_back()
    s.pop_back()
    assert s.is_empty()
    assert s.begin() == s.end()


def test_push_after_emptying():
    s = SList([1])
    s.pop_front()
    s.push_back(5)
    assert s.front() == 5
    assert s.back() == 5
    assert len(s) == 1


def test_find_returns_cursor_or_end():
    s = SList(["a", "b", "c"])
    cur = s.find("b")
    assert cur.value() == "b"
    assert s.find("z") == s.end()


def test_find_custom_equality():
    s = SList([(1, "x"), (2, "y")])
    cur = s.find((2, None), lambda a, b: a[0] == b[0])
    assert cur.value() == (2, "y")


def test_iteration_with_cursor():
    values = [5, 6, 7]
    s = SList(values)
    seen = []
    cur = s.begin()
    while cur != s.end():
        seen.append(cur.value())
        cur.advance()
    assert seen == values


def test_insert_after_middle_and_end():
    s = SList([1, 3])
    s.insert_after(s.begin(), 2)
    assert list(s) == [1, 2, 3]
    s.insert_after(s.end(), 4)
    assert list(s) == [1, 2, 3, 4]
    assert s.back() == 4
    assert len(s) == 4


def test_insert_after_back_updates_back():
    s = SList([1, 2])
    s.insert_after(s.find(2), 9)
    assert s.back() == 9
    s.push_back(10)
    assert list(s) == [1, 2, 9, 10]


def test_insert_after_foreign_cursor_raises():
    s = SList([1])
    other = SList([1])
    with pytest.raises(RuntimeError):
        s.insert_after(other.begin(), 2)
    with pytest.raises(RuntimeError):
        s.insert_after(Cursor(), 2)


def test_remove_value():
    s = SList([1, 2, 3, 2])
    assert s.remove(2) is True
    assert list(s) == [1, 3, 2]
    assert s.remove(42) is False
    assert len(s) == 3


def test_remove_last_and_second_to_last_keeps_back():
    s = SList([1, 2, 3])
    assert s.remove(3)
    assert s.back() == 2
    s = SList([1, 2, 3])
    assert s.remove(2)
    assert s.back() == 3
    s.push_back(4)
    assert list(s) == [1, 3, 4]


def test_remove_at_foreign_or_end_cursor():
    s = SList([1, 2])
    other = SList([1, 2])
    assert s.remove_at(other.begin()) is False
    assert s.remove_at(s.end()) is False
    assert list(s) == [1, 2]


def test_remove_at_front():
    s = SList(["a", "b"])
    assert s.remove_at(s.begin())
    assert list(s) == ["b"]
    assert s.front() == s.back() == "b"


def test_clear():
    s = SList([1, 2, 3])
    s.clear()
    assert len(s) == 0
    assert s.is_empty()
    with pytest.raises(RuntimeError):
        s.front()


def test_equality_and_copy():
    s = SList([1, 2, 3])
    c = copy.copy(s)
    assert c == s
    c.push_back(4)
    assert c != s
    assert list(s) == [1, 2, 3]
    assert s.copy() == s


def test_cursor_end_does_not_advance_past_end():
    s = SList([1])
    cur = s.end()
    cur.advance()
    assert cur == s.end()
    with pytest.raises(RuntimeError):
        cur.value()


def test_cursors_of_different_lists_differ():
    a = SList()
    b = SList()
    assert a.end() != b.end()