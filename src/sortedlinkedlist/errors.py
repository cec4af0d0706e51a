"""Exception classes for sortedlinkedlist."""


class SortedLinkedListError(Exception):
    """Base exception for all sortedlinkedlist errors."""


class IndexOutOfBoundsError(SortedLinkedListError, IndexError):
    """Raised when a positional operation receives an index outside [0, size)."""

    def __init__(self, index: int, size: int) -> None:
        if index < 0:
            message = f"Index: {index} can not be negative number."
        else:
            message = f"Index: {index} exceeds the Size: {size}"
        super().__init__(message)
        self.index = index
        self.size = size


class EmptyListError(SortedLinkedListError, IndexError):
    """Raised when removing from or peeking into an empty list."""


class NullActionError(SortedLinkedListError, TypeError):
    """Raised when for_each() is given no action or a non-callable one."""


class ConcurrentModificationError(SortedLinkedListError, RuntimeError):
    """Raised by an iterator whose list was structurally modified after it was created."""


class CorruptListError(SortedLinkedListError, AssertionError):
    """Raised when the link structure violates one of its invariants. Always a bug."""
