import pytest

from algodrills.linked_list import (
    LinkedList,
    break_cycle,
    create_cycle,
    has_cycle,
    merge_sorted,
    sum_of_lists,
)


def test_construction_iterates_in_order():
    ll = LinkedList([5, 4, 3])
    assert list(ll) == [5, 4, 3]
    assert len(ll) == 3
    assert ll.head.data == 5
    assert ll.tail.data == 3


def test_header_walkthrough_matches_python_list():
    ll = LinkedList()
    model = []
    for i in range(10):
        ll.insert_at_front(i)
        model.insert(0, i)
    for i in range(11, 20):
        ll.insert_at_end(i)
        model.append(i)
    assert list(ll) == model
    assert ll.delete_from_front() == model.pop(0)
    assert ll.delete_from_end() == model.pop()
    assert list(ll) == model
    assert len(ll) == len(model)
    ll.delete_from_pos(5)
    del model[5]
    assert list(ll) == model
    ll.insert_at_pos(20, 7)
    model.insert(7, 20)
    assert list(ll) == model
    assert len(ll) == len(model)


def test_deleting_from_empty_list_is_harmless():
    ll = LinkedList()
    assert ll.delete_from_front() is None
    assert ll.delete_from_end() is None
    assert len(ll) == 0
    assert list(ll) == []


def test_delete_last_single_element_clears_tail():
    ll = LinkedList([7])
    assert ll.delete_from_end() == 7
    assert ll.head is None and ll.tail is None
    ll.insert_at_end(8)
    assert list(ll) == [8]


def test_insert_past_end_appends_and_updates_tail():
    ll = LinkedList([1, 2])
    ll.insert_at_pos(9, 50)
    assert list(ll) == [1, 2, 9]
    assert ll.tail.data == 9


def test_delete_past_end_removes_tail():
    ll = LinkedList([1, 2, 3])
    assert ll.delete_from_pos(10) == 3
    assert list(ll) == [1, 2]


def test_negative_position_rejected():
    with pytest.raises(ValueError):
        LinkedList([1]).insert_at_pos(0, -1)
    with pytest.raises(ValueError):
        LinkedList([1]).delete_from_pos(-1)


def test_find_present_and_missing():
    ll = LinkedList([4, 6, 8])
    assert ll.find(6).data == 6
    assert ll.find(5) is None


def test_mid_point_odd_and_even():
    assert LinkedList([1, 2, 3, 4, 5]).mid_point().data == 3
    assert LinkedList([1, 2, 3, 4]).mid_point().data == 2
    assert LinkedList().mid_point() is None


def test_reverse_keeps_tail_consistent():
    values = [5, 4, 3, 2, 1]
    ll = LinkedList(values)
    ll.reverse()
    assert list(ll) == values[::-1]
    ll.insert_at_end(0)
    assert list(ll) == values[::-1] + [0]


def test_reverse_sublist_matches_slice_reversal():
    values = list(range(10, 0, -1))
    ll = LinkedList(values)
    ll.reverse_sublist(2, 7)
    expected = values[:1] + values[1:7][::-1] + values[7:]
    assert list(ll) == expected


def test_reverse_whole_list_via_sublist():
    values = [1, 2, 3, 4]
    ll = LinkedList(values)
    ll.reverse_sublist(1, 4)
    assert list(ll) == values[::-1]
    assert ll.tail.data == values[0]


@pytest.mark.parametrize("start, finish", [(0, 2), (3, 2), (1, 9)])
def test_reverse_sublist_invalid_range(start, finish):
    with pytest.raises(ValueError):
        LinkedList([1, 2, 3]).reverse_sublist(start, finish)


@pytest.mark.parametrize("values", [[5, 4, 3, 2, 1], [3, 1, 2, 1], [], [1], [2, 9, -4, 7, 0]])
def test_bubble_sort(values):
    ll = LinkedList(values)
    ll.bubble_sort()
    assert list(ll) == sorted(values)
    assert len(ll) == len(values)
    ll.insert_at_end(100)
    assert list(ll)[-1] == 100


@pytest.mark.parametrize("values", [[5, 4, 3, 2, 1], [3, 1, 2, 1], [], [1], [2, 9, -4, 7, 0]])
def test_merge_sort(values):
    ll = LinkedList(values)
    ll.merge_sort()
    assert list(ll) == sorted(values)
    ll.insert_at_end(100)
    assert list(ll)[-1] == 100


def test_merge_sorted_lists():
    first = [2, 3, 6, 8, 10]
    second = [1, 4, 5, 9, 12]
    merged = merge_sorted(first, second)
    assert list(merged) == sorted(first + second)
    assert len(merged) == len(first) + len(second)
    assert merged.tail.data == 12


def test_separate_odd_even_keeps_group_order():
    values = [1, 2, 3, 4, 5, 8, 7]
    ll = LinkedList(values)
    ll.separate_odd_even()
    evens = [v for v in values if v % 2 == 0]
    odds = [v for v in values if v % 2]
    assert list(ll) == evens + odds
    assert ll.tail.data == odds[-1]


def test_sum_of_lists():
    assert sum_of_lists([1, 2, 3], [4, 5]) == 168
    assert sum_of_lists([9, 9], [1]) == sum_of_lists([1], [9, 9])


def test_cycle_create_detect_and_break():
    values = [1, 2, 3, 4, 5, 6, 7]
    ll = LinkedList(values)
    assert has_cycle(ll.head) is False
    create_cycle(ll.head)
    assert has_cycle(ll.head) is True
    assert break_cycle(ll.head) is True
    assert has_cycle(ll.head) is False
    assert list(ll) == values


def test_break_cycle_without_cycle():
    ll = LinkedList([1, 2, 3])
    assert break_cycle(ll.head) is False
    assert list(ll) == [1, 2, 3]


def test_create_cycle_needs_three_nodes():
    with pytest.raises(ValueError):
        create_cycle(LinkedList([1, 2]).head)


def test_create_cycle_twice_rejected():
    ll = LinkedList([1, 2, 3, 4])
    create_cycle(ll.head)
    with pytest.raises(ValueError):
        create_cycle(ll.head)