"""Item abstractions for treewalker.

Nodes and properties belong to the host store, not to the walker. These base
classes document the small surface the walker reads: names, paths, property
and child enumeration, and ``accept`` for double dispatch to a visitor.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable


class Item(ABC):
    """Anything a visitor can be dispatched against.

    Subclasses provide ``name`` and ``path``. The default ``accept``
    implementation hands the item to ``visitor.visit``, which is all the
    double dispatch the walker needs.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the item's name within its parent."""
        pass

    @property
    @abstractmethod
    def path(self) -> str:
        """Return the absolute path of the item inside the host store."""
        pass

    def accept(self, visitor: Any) -> None:
        """Deliver this item to a visitor.

        Args:
            visitor: Object exposing ``visit(item)``
        """
        visitor.visit(self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={self.path!r})"


class Node(Item):
    """A tree entity with properties and child nodes.

    Both enumerations must have a stable order; the walker visits siblings
    and properties in exactly the order they are returned.
    """

    @abstractmethod
    def get_properties(self) -> Iterable['Property']:
        """Return the node's properties in stable order."""
        pass

    @abstractmethod
    def get_nodes(self) -> Iterable['Node']:
        """Return the node's children in stable order."""
        pass

    @property
    @abstractmethod
    def depth(self) -> int:
        """Return the depth of this node inside its host store.

        The store root is at depth 0. This is unrelated to the traversal
        level, which always starts at 0 on the node a walk begins from.
        """
        pass


class Property(Item):
    """A named leaf value attached to exactly one node."""

    @property
    @abstractmethod
    def value(self) -> Any:
        """Return the property value."""
        pass

    @property
    @abstractmethod
    def node(self) -> Node:
        """Return the node owning this property."""
        pass
