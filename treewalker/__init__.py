"""treewalker - Depth-first walker for hierarchical, content-repository style trees.

treewalker separates *what is visited* from *what is selected*:

- Visitors are told the current level and receive each node or property.
- Filters form two AND-combined chains, one for nodes and one for
  properties. Rejecting a node prunes its whole subtree.

Quick start:
    from treewalker import TreeWalker, build_tree
    from treewalker.visitors import DumpNodeVisitor, DumpPropertyVisitor

    walker = TreeWalker(DumpNodeVisitor(), DumpPropertyVisitor())
    walker.traverse(build_tree({'cms': {'title': 'Site'}}))
"""

__version__ = "0.1.0"

from .exceptions import TreeWalkerError, ConfigurationError
from .core import (
    Item,
    Node,
    Property,
    ItemVisitor,
    LevelAwareVisitor,
    TreeWalkerFilter,
    CallableFilter,
    TreeWalker,
)
from .filters import NamePatternFilter, SystemItemFilter, MaxDepthFilter
from .visitors import CallableVisitor, CollectingVisitor, DumpNodeVisitor, DumpPropertyVisitor
from .adapters import MemoryNode, MemoryProperty, build_tree, FileSystemNode, FileSystemProperty
from .config import WalkerConfig
from .api import create_walker, walk_tree, dump_tree, collect_nodes, count_nodes, find_nodes

__all__ = [
    "__version__",
    # Errors
    "TreeWalkerError",
    "ConfigurationError",
    # Core
    "Item",
    "Node",
    "Property",
    "ItemVisitor",
    "LevelAwareVisitor",
    "TreeWalkerFilter",
    "CallableFilter",
    "TreeWalker",
    # Filters
    "NamePatternFilter",
    "SystemItemFilter",
    "MaxDepthFilter",
    # Visitors
    "CallableVisitor",
    "CollectingVisitor",
    "DumpNodeVisitor",
    "DumpPropertyVisitor",
    # Host stores
    "MemoryNode",
    "MemoryProperty",
    "build_tree",
    "FileSystemNode",
    "FileSystemProperty",
    # Config
    "WalkerConfig",
    # API
    "create_walker",
    "walk_tree",
    "dump_tree",
    "collect_nodes",
    "count_nodes",
    "find_nodes",
]
