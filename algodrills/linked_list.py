"""A singly linked list with the classic list drills: reversal, sorting, cycles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator


@dataclass(eq=False)
class Node:
    """One cell of a singly linked list."""

    data: Any
    next: Node | None = field(default=None, repr=False)


def _middle(head: Node) -> Node:
    """The middle node; for an even count, the first of the two middle nodes."""
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def _merge_nodes(first: Node | None, second: Node | None) -> Node | None:
    """Merge two sorted chains into one, taking from first on ties."""
    dummy = Node(None)
    last = dummy
    while first is not None and second is not None:
        if first.data <= second.data:
            last.next, first = first, first.next
        else:
            last.next, second = second, second.next
        last = last.next
    last.next = first if first is not None else second
    return dummy.next


def _sort_nodes(head: Node | None) -> Node | None:
    if head is None or head.next is None:
        return head
    mid = _middle(head)
    second = mid.next
    mid.next = None
    return _merge_nodes(_sort_nodes(head), _sort_nodes(second))


class LinkedList:
    """A singly linked list that keeps its head, its tail and its length."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self.tail: Node | None = None
        self._length = 0
        for value in values:
            self.insert_at_end(value)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def _fix_tail(self) -> None:
        node = self.head
        while node is not None and node.next is not None:
            node = node.next
        self.tail = node

    def insert_at_front(self, value: Any) -> None:
        """Put value before the first element."""
        node = Node(value, self.head)
        self.head = node
        if self.tail is None:
            self.tail = node
        self._length += 1

    def insert_at_end(self, value: Any) -> None:
        """Put value after the last element."""
        node = Node(value)
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        self._length += 1

    def delete_from_front(self) -> Any:
        """Remove the first element and return it; None when the list is empty."""
        if self.head is None:
            return None
        node = self.head
        self.head = node.next
        if self.head is None:
            self.tail = None
        self._length -= 1
        return node.data

    def delete_from_end(self) -> Any:
        """Remove the last element and return it; None when the list is empty."""
        if self.head is None:
            return None
        if self.head is self.tail:
            return self.delete_from_front()
        node = self.head
        while node.next is not self.tail:
            node = node.next
        removed = self.tail
        node.next = None
        self.tail = node
        self._length -= 1
        return removed.data

    def insert_at_pos(self, value: Any, pos: int) -> None:
        """Insert value so that it sits at index pos; past the end it is appended."""
        if pos < 0:
            raise ValueError("position must be non-negative")
        if pos == 0:
            self.insert_at_front(value)
            return
        if pos >= self._length:
            self.insert_at_end(value)
            return
        before = self.head
        for _ in range(pos - 1):
            before = before.next
        before.next = Node(value, before.next)
        self._length += 1

    def delete_from_pos(self, pos: int) -> Any:
        """Remove the element at index pos; at or past the last index the tail goes."""
        if pos < 0:
            raise ValueError("position must be non-negative")
        if pos == 0:
            return self.delete_from_front()
        if pos >= self._length - 1:
            return self.delete_from_end()
        before = self.head
        for _ in range(pos - 1):
            before = before.next
        removed = before.next
        before.next = removed.next
        self._length -= 1
        return removed.data

    def find(self, value: Any) -> Node | None:
        """The first node holding value, or None."""
        node = self.head
        while node is not None:
            if node.data == value:
                return node
            node = node.next
        return None

    def mid_point(self) -> Node | None:
        """The middle node (the earlier one for an even length), or None when empty."""
        if self.head is None:
            return None
        return _middle(self.head)

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous = None
        current = self.head
        self.tail = current
        while current is not None:
            current.next, previous, current = previous, current, current.next
        self.head = previous

    def reverse_sublist(self, start: int, finish: int) -> None:
        """Reverse the elements at 1-based positions start..finish inclusive."""
        if not 1 <= start <= finish <= self._length:
            raise ValueError(f"range {start}..{finish} outside 1..{self._length}")
        dummy = Node(None, self.head)
        before = dummy
        for _ in range(start - 1):
            before = before.next
        first = before.next
        previous = None
        current = first
        for _ in range(finish - start + 1):
            current.next, previous, current = previous, current, current.next
        before.next = previous
        first.next = current
        self.head = dummy.next
        self._fix_tail()

    def bubble_sort(self) -> None:
        """Sort in place by swapping adjacent nodes."""
        dummy = Node(None, self.head)
        for _ in range(self._length - 1):
            previous = dummy
            current = dummy.next
            swapped = False
            while current is not None and current.next is not None:
                following = current.next
                if current.data > following.data:
                    current.next = following.next
                    following.next = current
                    previous.next = following
                    previous = following
                    swapped = True
                else:
                    previous = current
                    current = following
            if not swapped:
                break
        self.head = dummy.next
        self._fix_tail()

    def merge_sort(self) -> None:
        """Sort in place by splitting at the middle and merging the halves."""
        self.head = _sort_nodes(self.head)
        self._fix_tail()

    def separate_odd_even(self) -> None:
        """Move odd values behind the even ones, keeping each group's order."""
        evens = Node(None)
        odds = Node(None)
        last_even, last_odd = evens, odds
        node = self.head
        while node is not None:
            if node.data % 2 == 0:
                last_even.next = node
                last_even = node
            else:
                last_odd.next = node
                last_odd = node
            node = node.next
        last_odd.next = None
        last_even.next = odds.next
        self.head = evens.next
        self._fix_tail()


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> LinkedList:
    """A new sorted list holding the elements of two sorted sequences."""
    left = LinkedList(first)
    right = LinkedList(second)
    merged = LinkedList()
    merged.head = _merge_nodes(left.head, right.head)
    merged._length = len(left) + len(right)
    merged._fix_tail()
    return merged


def _digits_value(digits: Iterable[int]) -> int:
    total = 0
    for digit in digits:
        total = total * 10 + digit
    return total


def sum_of_lists(first: Iterable[int], second: Iterable[int]) -> int:
    """Sum of two numbers whose decimal digits are given most significant first."""
    return _digits_value(first) + _digits_value(second)


def has_cycle(head: Node | None) -> bool:
    """Whether following next links from head ever returns to a visited node."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def create_cycle(head: Node | None) -> None:
    """Link the last node back to the third one, making the chain cyclic."""
    if head is None or head.next is None or head.next.next is None:
        raise ValueError("a cycle needs at least three nodes")
    if has_cycle(head):
        raise ValueError("the chain already has a cycle")
    node = head
    while node.next is not None:
        node = node.next
    node.next = head.next.next


def break_cycle(head: Node | None) -> bool:
    """Cut the link that closes a cycle; return whether there was one."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return False
    start = head
    while start is not fast:
        start = start.next
        fast = fast.next
    closing = start
    while closing.next is not start:
        closing = closing.next
    closing.next = None
    return True