"""Main SortedLinkedList implementation."""

import logging
from collections.abc import Iterable
from typing import Generic

from sortedlinkedlist.errors import (
    CorruptListError,
    EmptyListError,
    IndexOutOfBoundsError,
    NullActionError,
)
from sortedlinkedlist.iterator import SortedLinkedListIterator
from sortedlinkedlist.linkedlist import DoublyLinkedList, Node
from sortedlinkedlist.types import Action, T

logger = logging.getLogger(__name__)

# content_hash() arithmetic wraps like a signed 32-bit int
_HASH_MASK = 0xFFFFFFFF
_HASH_SIGN_BIT = 0x80000000


class SortedLinkedList(Generic[T]):
    """
    Doubly-linked list that keeps its values in non-decreasing order.

    Every insertion walks to the position that preserves the order, so the
    list never needs sorting. Values must support ``<`` and ``==`` against
    each other, and ``hash()`` for content_hash(). Not thread-safe.
    """

    def __init__(self, iterable: Iterable[T] | None = None, *, validate: bool = False) -> None:
        """
        Initialize the list.

        Args:
            iterable: Optional values to insert, in any order.
            validate: If True, check every structural invariant after each
                mutating operation and raise CorruptListError on a violation.
                O(n) per operation; meant for debugging and tests.
        """
        self._links: DoublyLinkedList[T] = DoublyLinkedList()
        self._mod_count = 0
        self._validate = validate
        if iterable is not None:
            self.add_all(iterable)

    @property
    def size(self) -> int:
        """Number of values in the list."""
        return len(self._links)

    def add(self, value: T) -> None:
        """
        Insert a value at the position that keeps the list ordered. O(n).

        A value equal to the current head goes in front of it; a value equal
        to any later value goes after the run of equal values.
        """
        self._insert(self._links.head, value)
        self._after_mutation("add")

    def add_all(self, source: Iterable[T] | None) -> None:
        """
        Insert every value from source, in iteration order.

        A None source is ignored. When source is itself a SortedLinkedList its
        values arrive in order, so each insert resumes from the previous one
        and the whole merge is O(n + m).
        """
        if source is None:
            return
        presorted = isinstance(source, SortedLinkedList)
        if source is self:
            # Iterating ourselves while inserting would trip the iterator check
            source = self.to_array()

        count = 0
        if presorted:
            cursor = self._links.head
            for value in source:
                cursor = self._insert(cursor, value)
                count += 1
        else:
            for value in source:
                self._insert(self._links.head, value)
                count += 1

        logger.debug(
            "add_all inserted %d values (presorted=%s), size now %d", count, presorted, self.size
        )
        self._after_mutation("add_all")

    def _insert(self, start: Node[T] | None, value: T) -> Node[T]:
        """
        Link a new node for value, searching forward from start.

        start must be the head, or a node whose value is <= value.
        """
        node = Node(value)
        head = self._links.head
        if head is None:
            self._links.append(node)
        elif start is head and not head.value < value:
            self._links.appendleft(node)
        else:
            current = start
            assert current is not None
            # Skip every successor that is <= value
            while current.next is not None and not value < current.next.value:
                current = current.next
            self._links.insert_after(current, node)
        self._mod_count += 1
        return node

    def get(self, index: int) -> T:
        """
        Return the value at a zero-based position.

        Raises:
            IndexOutOfBoundsError: If index < 0 or index >= size
        """
        self._check_bounds(index)
        return self._links.node_at(index).value

    def remove_at(self, index: int) -> T:
        """
        Remove and return the value at a zero-based position.

        Raises:
            IndexOutOfBoundsError: If index < 0 or index >= size
        """
        self._check_bounds(index)
        return self._unlink(self._links.node_at(index), "remove_at")

    def remove_first(self) -> T:
        """
        Remove and return the smallest value.

        Raises:
            EmptyListError: If the list is empty
        """
        head = self._links.head
        if head is None:
            raise EmptyListError("Cannot remove first value of an empty list")
        return self._unlink(head, "remove_first")

    def remove_last(self) -> T:
        """
        Remove and return the largest value.

        Raises:
            EmptyListError: If the list is empty
        """
        tail = self._links.tail
        if tail is None:
            raise EmptyListError("Cannot remove last value of an empty list")
        return self._unlink(tail, "remove_last")

    def remove(self, value: T) -> None:
        """
        Remove the first value equal to value.

        Raises:
            ValueError: If no value is equal
        """
        if not self.discard(value):
            raise ValueError(f"{value!r} not in list")

    def discard(self, value: T) -> bool:
        """Remove the first value equal to value. Return whether one was removed."""
        for node in self._links.nodes():
            if node.value == value:
                self._unlink(node, "discard")
                return True
        return False

    def _unlink(self, node: Node[T], operation: str) -> T:
        value = node.value
        self._links.remove(node)
        self._mod_count += 1
        self._after_mutation(operation)
        return value

    def clear(self) -> None:
        """Remove every value. Calling it on an empty list is a no-op."""
        released = self.size
        self._links.clear()
        self._mod_count += 1
        logger.debug("Cleared list, released %d nodes", released)
        self._after_mutation("clear")

    def first(self) -> T:
        """
        Return the smallest value without removing it.

        Raises:
            EmptyListError: If the list is empty
        """
        if self._links.head is None:
            raise EmptyListError("Empty list has no first value")
        return self._links.head.value

    def last(self) -> T:
        """
        Return the largest value without removing it.

        Raises:
            EmptyListError: If the list is empty
        """
        if self._links.tail is None:
            raise EmptyListError("Empty list has no last value")
        return self._links.tail.value

    def index_of(self, value: object) -> int:
        """Return the position of the first value equal to value, or -1."""
        for index, node in enumerate(self._links.nodes()):
            if node.value == value:
                return index
        return -1

    def last_index_of(self, value: object) -> int:
        """Return the position of the last value equal to value, or -1."""
        index = self.size - 1
        for node in self._links.nodes_reversed():
            if node.value == value:
                return index
            index -= 1
        return -1

    def contains(self, value: object) -> bool:
        """Return True if any value is equal to value."""
        return self.index_of(value) != -1

    def to_array(self) -> list[T]:
        """Return a new list holding the values in order."""
        return [node.value for node in self._links.nodes()]

    def copy(self) -> "SortedLinkedList[T]":
        """Return an independent list with the same values and options."""
        duplicate: SortedLinkedList[T] = SortedLinkedList(validate=self._validate)
        for node in self._links.nodes():
            duplicate._links.append(Node(node.value))
        return duplicate

    def for_each(self, action: Action) -> None:
        """
        Call action with every value, smallest first.

        Raises:
            NullActionError: If action is None or not callable
            ConcurrentModificationError: If action modifies the list
        """
        if action is None or not callable(action):
            raise NullActionError(f"for_each() needs a callable action, got {action!r}")
        for value in self:
            action(value)

    def content_hash(self) -> int:
        """
        Hash of the values in order: h = 31 * h + hash(value), starting at 1.

        None contributes 0. The result is wrapped to a signed 32-bit integer.
        """
        result = 1
        for node in self._links.nodes():
            element_hash = 0 if node.value is None else hash(node.value)
            result = (31 * result + element_hash) & _HASH_MASK
        if result & _HASH_SIGN_BIT:
            result -= _HASH_MASK + 1
        return result

    def check_invariants(self) -> None:
        """
        Verify the link structure and the ordering of adjacent values. O(n).

        Raises:
            CorruptListError: On the first violation found
        """
        self._links.check_invariants()
        for node in self._links.nodes():
            if node.next is not None and node.next.value < node.value:
                raise CorruptListError(f"{node.next!r} follows larger {node!r}")

    def _after_mutation(self, operation: str) -> None:
        if not self._validate:
            return
        try:
            self.check_invariants()
        except CorruptListError:
            logger.error("Invariant check failed after %s()", operation)
            raise

    def _check_bounds(self, index: int) -> None:
        if index < 0 or index >= self.size:
            raise IndexOutOfBoundsError(index, self.size)

    def __iter__(self) -> SortedLinkedListIterator[T]:
        """Return a fail-fast iterator from smallest to largest value."""
        return SortedLinkedListIterator(self)

    def __len__(self) -> int:
        """Return the number of values in the list."""
        return self.size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self.size > 0

    def __contains__(self, value: object) -> bool:
        return self.contains(value)

    def __getitem__(self, index: int) -> T:
        """Same as get(); negative indexes are out of bounds, slices are not supported."""
        return self.get(index)

    def __delitem__(self, index: int) -> None:
        self.remove_at(index)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortedLinkedList):
            return NotImplemented
        if self.size != other.size:
            return False
        return all(
            mine.value == theirs.value
            for mine, theirs in zip(self._links.nodes(), other._links.nodes())
        )

    def __hash__(self) -> int:
        return self.content_hash()

    def __repr__(self) -> str:
        return f"SortedLinkedList({self.to_array()!r})"
