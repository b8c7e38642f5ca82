"""High-level API for treewalker.

This module provides simple, functional interfaces for common walks. These
functions wrap TreeWalker and WalkerConfig for ease of use in simple cases.
"""

import logging
from typing import Callable, List, Optional, TextIO, Tuple

from .config import WalkerConfig
from .core.item import Node
from .core.visitor import ItemVisitor
from .core.walker import TreeWalker
from .exceptions import ConfigurationError
from .visitors import CallableVisitor, CollectingVisitor, DumpNodeVisitor, DumpPropertyVisitor


logger = logging.getLogger(__name__)


def create_walker(node_visitor: ItemVisitor,
                  property_visitor: Optional[ItemVisitor] = None,
                  config: Optional[WalkerConfig] = None) -> TreeWalker:
    """Create a TreeWalker configured from a WalkerConfig.

    Args:
        node_visitor: Visitor for nodes
        property_visitor: Visitor for properties (None = skip properties)
        config: Selection configuration (default: visit everything)

    Returns:
        A ready-to-use TreeWalker

    Raises:
        ConfigurationError: If the config does not validate

    Example:
        >>> walker = create_walker(DumpNodeVisitor(), config=WalkerConfig.content_only())
        >>> walker.traverse(root)
    """
    config = config or WalkerConfig()

    config_errors = config.validate()
    if config_errors:
        raise ConfigurationError(f"Invalid configuration: {'; '.join(config_errors)}")

    if not config.visit_properties:
        property_visitor = None

    walker = TreeWalker(node_visitor, property_visitor)
    config.apply(walker)
    return walker


def walk_tree(root: Node,
              node_visitor: ItemVisitor,
              property_visitor: Optional[ItemVisitor] = None,
              config: Optional[WalkerConfig] = None) -> None:
    """Walk a tree once with the given visitors.

    Args:
        root: Node the walk starts from (level 0)
        node_visitor: Visitor for nodes
        property_visitor: Visitor for properties (None = skip properties)
        config: Selection configuration
    """
    walker = create_walker(node_visitor, property_visitor, config)
    logger.debug("Walking tree from %r", root)
    walker.traverse(root)


def dump_tree(root: Node,
              stream: Optional[TextIO] = None,
              config: Optional[WalkerConfig] = None,
              show_path: bool = False) -> None:
    """Print a tree, one indented line per node and property.

    Args:
        root: Node the dump starts from
        stream: Text stream to write to (default: sys.stdout)
        config: Selection configuration
        show_path: Print node paths instead of names

    Example:
        >>> dump_tree(build_tree({'cms': {'title': 'Site'}}))
        /
          cms
            - title = Site
    """
    walk_tree(root,
              DumpNodeVisitor(stream, show_path=show_path),
              DumpPropertyVisitor(stream),
              config)


def collect_nodes(root: Node, config: Optional[WalkerConfig] = None) -> List[Tuple[int, Node]]:
    """Return ``(level, node)`` for every visited node, in pre-order.

    Args:
        root: Node the walk starts from
        config: Selection configuration

    Returns:
        Visited nodes with their traversal level
    """
    collector = CollectingVisitor()
    walk_tree(root, collector, config=config)
    return list(collector.visited)


def count_nodes(root: Node, config: Optional[WalkerConfig] = None) -> int:
    """Count the nodes a walk would visit.

    Args:
        root: Node the walk starts from
        config: Selection configuration

    Returns:
        Number of visited nodes
    """
    return len(collect_nodes(root, config))


def find_nodes(root: Node,
               predicate: Callable[[Node], bool],
               config: Optional[WalkerConfig] = None) -> List[Node]:
    """Find visited nodes matching a predicate.

    Unlike a filter, the predicate does not prune: descendants of a node
    that does not match are still searched.

    Args:
        root: Node the walk starts from
        predicate: Function returning True for matching nodes
        config: Selection configuration (its filters still prune)

    Returns:
        Matching nodes in pre-order
    """
    matches: List[Node] = []

    def _check(node: Node, level: int) -> None:
        if predicate(node):
            matches.append(node)

    walk_tree(root, CallableVisitor(_check), config=config)
    return matches
