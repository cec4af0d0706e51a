"""Doubly-linked node chain with head/tail anchors."""

from collections.abc import Iterator
from typing import Generic, TypeVar

from sortedlinkedlist.errors import CorruptListError

V = TypeVar("V")


class Node(Generic[V]):
    """A node in the doubly-linked list."""

    __slots__ = ("value", "prev", "next")

    def __init__(self, value: V) -> None:
        self.value = value
        self.prev: Node[V] | None = None
        self.next: Node[V] | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


class DoublyLinkedList(Generic[V]):
    """
    Doubly-linked chain of nodes anchored at ``head`` and ``tail``.

    No sentinels: ``head.prev`` and ``tail.next`` are always None and both
    anchors are None exactly when the list is empty. The chain knows nothing
    about ordering; callers decide where a node goes.
    """

    def __init__(self) -> None:
        self._head: Node[V] | None = None
        self._tail: Node[V] | None = None
        self._size = 0

    @property
    def head(self) -> Node[V] | None:
        """First node, or None when empty."""
        return self._head

    @property
    def tail(self) -> Node[V] | None:
        """Last node, or None when empty."""
        return self._tail

    def append(self, node: Node[V]) -> None:
        """Link node after the current tail. O(1)."""
        node.next = None
        node.prev = self._tail
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def appendleft(self, node: Node[V]) -> None:
        """Link node before the current head. O(1)."""
        node.prev = None
        node.next = self._head
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_after(self, anchor: Node[V], node: Node[V]) -> None:
        """Link node directly after anchor, which must belong to this list. O(1)."""
        successor = anchor.next
        node.prev = anchor
        node.next = successor
        anchor.next = node
        if successor is None:
            self._tail = node
        else:
            successor.prev = node
        self._size += 1

    def remove(self, node: Node[V]) -> None:
        """Unlink a node that belongs to this list. O(1)."""
        self._size -= 1
        if self._size == 0:
            self._head = None
            self._tail = None
        elif node is self._head:
            self._head = node.next
            if self._head is not None:
                self._head.prev = None
        elif node is self._tail:
            self._tail = node.prev
            if self._tail is not None:
                self._tail.next = None
        else:
            if node.next is not None:
                node.next.prev = node.prev
            if node.prev is not None:
                node.prev.next = node.next
        node.prev = None
        node.next = None

    def popleft(self) -> Node[V] | None:
        """Remove and return the first node, or None when empty. O(1)."""
        node = self._head
        if node is not None:
            self.remove(node)
        return node

    def pop(self) -> Node[V] | None:
        """Remove and return the last node, or None when empty. O(1)."""
        node = self._tail
        if node is not None:
            self.remove(node)
        return node

    def node_at(self, index: int) -> Node[V]:
        """
        Return the node at a zero-based position. O(min(index, size - index)).

        Walks forward from head for the first half and backward from tail for
        the second half. The caller is responsible for 0 <= index < size.
        """
        if index < self._size // 2:
            node = self._head
            for _ in range(index):
                node = node.next  # type: ignore[union-attr]
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                node = node.prev  # type: ignore[union-attr]
        assert node is not None
        return node

    def clear(self) -> None:
        """Unlink every node and reset the anchors. O(n)."""
        node = self._head
        while node is not None:
            following = node.next
            node.prev = None
            node.next = None
            node = following
        self._head = None
        self._tail = None
        self._size = 0

    def nodes(self) -> Iterator[Node[V]]:
        """Yield nodes from head to tail."""
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def nodes_reversed(self) -> Iterator[Node[V]]:
        """Yield nodes from tail to head."""
        node = self._tail
        while node is not None:
            yield node
            node = node.prev

    def check_invariants(self) -> None:
        """
        Verify anchors, size and link symmetry.

        Raises:
            CorruptListError: On the first violation found
        """
        if (self._head is None) != (self._tail is None) or (
            (self._head is None) != (self._size == 0)
        ):
            raise CorruptListError(
                f"Anchors disagree with size: head={self._head!r}, "
                f"tail={self._tail!r}, size={self._size}"
            )
        if self._head is None:
            return
        if self._head.prev is not None:
            raise CorruptListError(f"Head {self._head!r} has a previous node")
        if self._tail is not None and self._tail.next is not None:
            raise CorruptListError(f"Tail {self._tail!r} has a next node")

        forward = 0
        last: Node[V] | None = None
        for node in self.nodes():
            forward += 1
            if forward > self._size:
                raise CorruptListError(f"More than {self._size} nodes reachable from head")
            if node.prev is not last:
                raise CorruptListError(f"{node!r}.prev does not point back to {last!r}")
            last = node
        if last is not self._tail:
            raise CorruptListError(f"Forward walk ends at {last!r}, not at tail")

        backward = 0
        for _ in self.nodes_reversed():
            backward += 1
            if backward > self._size:
                raise CorruptListError(f"More than {self._size} nodes reachable from tail")
        if forward != self._size or backward != self._size:
            raise CorruptListError(
                f"Size is {self._size} but {forward} nodes reachable forward "
                f"and {backward} backward"
            )

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0
