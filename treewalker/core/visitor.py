"""Visitor abstractions for treewalker.

A visitor has two methods: ``set_level`` is called immediately before every
dispatch, and ``visit`` receives the item. The walker only relies on those
two names, so any object providing them can be used.
"""

from abc import ABC, abstractmethod
from typing import Any


class ItemVisitor(ABC):
    """Interface for node and property visitors."""

    @abstractmethod
    def set_level(self, level: int) -> None:
        """Receive the traversal level of the next dispatched item.

        Args:
            level: Number of edges between the traversal root and the
                node being visited (the owning node, for properties)
        """
        pass

    @abstractmethod
    def visit(self, item: Any) -> None:
        """Process a node or property delivered through ``accept``."""
        pass


class LevelAwareVisitor(ItemVisitor):
    """Convenience base that remembers the last level it was given."""

    def __init__(self):
        self.level = 0

    def set_level(self, level: int) -> None:
        self.level = level


def is_visitor(candidate: Any) -> bool:
    """Check that an object exposes the visitor methods.

    Args:
        candidate: Object to inspect

    Returns:
        True if ``set_level`` and ``visit`` are both callable
    """
    return (callable(getattr(candidate, 'set_level', None))
            and callable(getattr(candidate, 'visit', None)))
