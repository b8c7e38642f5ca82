"""Core abstractions for treewalker.

This package contains the item, visitor and filter interfaces and the
TreeWalker engine that ties them together.
"""

from .item import Item, Node, Property
from .visitor import ItemVisitor, LevelAwareVisitor
from .filter import TreeWalkerFilter, CallableFilter
from .walker import TreeWalker

__all__ = [
    "Item",
    "Node",
    "Property",
    "ItemVisitor",
    "LevelAwareVisitor",
    "TreeWalkerFilter",
    "CallableFilter",
    "TreeWalker",
]
