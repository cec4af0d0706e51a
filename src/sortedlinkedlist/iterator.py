"""Fail-fast forward iterator over a SortedLinkedList."""

from typing import TYPE_CHECKING, Generic

from sortedlinkedlist.errors import ConcurrentModificationError
from sortedlinkedlist.linkedlist import Node
from sortedlinkedlist.types import T

if TYPE_CHECKING:
    from sortedlinkedlist.core import SortedLinkedList


class SortedLinkedListIterator(Generic[T]):
    """
    Single-pass iterator yielding values from head to tail.

    Holds a cursor to the next unvisited node and the list's modification
    count at creation. Any structural change to the list after that makes the
    next step raise ConcurrentModificationError.
    """

    __slots__ = ("_owner", "_cursor", "_expected_mod_count")

    def __init__(self, owner: "SortedLinkedList[T]") -> None:
        self._owner = owner
        self._cursor: Node[T] | None = owner._links.head
        self._expected_mod_count = owner._mod_count

    def _check_for_comodification(self) -> None:
        if self._owner._mod_count != self._expected_mod_count:
            raise ConcurrentModificationError(
                "List was modified after this iterator was created"
            )

    def has_next(self) -> bool:
        """Return True if another value remains."""
        self._check_for_comodification()
        return self._cursor is not None

    def __iter__(self) -> "SortedLinkedListIterator[T]":
        return self

    def __next__(self) -> T:
        self._check_for_comodification()
        node = self._cursor
        if node is None:
            raise StopIteration
        self._cursor = node.next
        return node.value
