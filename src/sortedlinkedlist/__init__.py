"""sortedlinkedlist - Doubly-linked list that keeps its values in sorted order."""

from sortedlinkedlist.core import SortedLinkedList
from sortedlinkedlist.errors import (
    ConcurrentModificationError,
    CorruptListError,
    EmptyListError,
    IndexOutOfBoundsError,
    NullActionError,
    SortedLinkedListError,
)
from sortedlinkedlist.iterator import SortedLinkedListIterator
from sortedlinkedlist.types import Comparable

__version__ = "0.0.1"

__all__ = [
    "SortedLinkedList",
    "SortedLinkedListIterator",
    "SortedLinkedListError",
    "IndexOutOfBoundsError",
    "EmptyListError",
    "NullActionError",
    "ConcurrentModificationError",
    "CorruptListError",
    "Comparable",
]
