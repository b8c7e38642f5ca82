"""Filter abstraction for treewalker."""

from abc import ABC, abstractmethod
from typing import Any


class TreeWalkerFilter(ABC):
    """A predicate deciding whether a node or property is visited.

    Node filters receive nodes, property filters receive properties. For
    nodes, rejection also prunes the node's entire subtree.

    Filters are deduplicated by equality when registered on a walker, so
    parameterized filters should implement ``__eq__`` (and ``__hash__``).
    """

    @abstractmethod
    def must_visit(self, item: Any) -> bool:
        """Return True if the item should be visited."""
        pass


class CallableFilter(TreeWalkerFilter):
    """Adapts a plain ``func(item) -> bool`` to the filter interface.

    Two CallableFilters wrapping the same function compare equal, so
    registering the same function twice is deduplicated.
    """

    def __init__(self, func):
        if not callable(func):
            raise TypeError(f"CallableFilter expects a callable, got {func!r}")
        self.func = func

    def must_visit(self, item: Any) -> bool:
        return bool(self.func(item))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CallableFilter):
            return NotImplemented
        return self.func == other.func

    def __hash__(self) -> int:
        return hash(self.func)

    def __repr__(self) -> str:
        return f"CallableFilter({self.func!r})"
