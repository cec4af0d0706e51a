"""Type definitions for sortedlinkedlist."""

from typing import Any, Callable, Protocol, TypeAlias, TypeVar


class Comparable(Protocol):
    """Anything that supports the ``<`` operator against its own kind."""

    def __lt__(self, other: Any, /) -> bool: ...


# Element type, ordered by its natural ``<``
T = TypeVar("T", bound=Comparable)

# Action applied to every value by SortedLinkedList.for_each()
Action: TypeAlias = Callable[[Any], object]
