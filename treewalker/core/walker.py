"""The depth-first tree walker.

TreeWalker pairs a node visitor (required) and a property visitor
(optional) with two ordered filter chains. ``traverse`` walks a subtree in
pre-order, telling each visitor the current level before dispatching to it.
"""

import logging
from typing import Any, List, Optional, Tuple

from ..exceptions import ConfigurationError
from .filter import CallableFilter, TreeWalkerFilter
from .item import Node, Property
from .visitor import ItemVisitor, is_visitor


logger = logging.getLogger(__name__)


class TreeWalker:
    """Pre-order traversal engine with pluggable visitors and filters.

    The walker holds no per-traversal state, so one instance can run any
    number of independent traversals. Filters and visitors must not be
    changed while a traversal is in progress.

    Example:
        >>> walker = TreeWalker(DumpNodeVisitor(), DumpPropertyVisitor())
        >>> walker.add_node_filter(SystemItemFilter())
        >>> walker.traverse(root)
    """

    def __init__(self,
                 node_visitor: ItemVisitor,
                 property_visitor: Optional[ItemVisitor] = None):
        """Initialize the walker.

        Args:
            node_visitor: Visitor dispatched against every visited node
            property_visitor: Visitor dispatched against every visited
                property. None disables property traversal.

        Raises:
            ConfigurationError: If the node visitor is missing or either
                visitor lacks ``set_level``/``visit``
        """
        if node_visitor is None:
            raise ConfigurationError("TreeWalker requires a node visitor")
        if not is_visitor(node_visitor):
            raise ConfigurationError(
                f"Node visitor {node_visitor!r} must provide set_level() and visit()"
            )
        if property_visitor is not None and not is_visitor(property_visitor):
            raise ConfigurationError(
                f"Property visitor {property_visitor!r} must provide set_level() and visit()"
            )

        self.node_visitor = node_visitor
        self.property_visitor = property_visitor
        self._node_filters: List[TreeWalkerFilter] = []
        self._property_filters: List[TreeWalkerFilter] = []

        logger.debug("Created TreeWalker(node_visitor=%r, property_visitor=%r)",
                     node_visitor, property_visitor)

    @property
    def node_filters(self) -> Tuple[TreeWalkerFilter, ...]:
        """Registered node filters, in evaluation order."""
        return tuple(self._node_filters)

    @property
    def property_filters(self) -> Tuple[TreeWalkerFilter, ...]:
        """Registered property filters, in evaluation order."""
        return tuple(self._property_filters)

    def add_node_filter(self, node_filter: Any) -> None:
        """Add a filter selecting the nodes that will be traversed.

        Args:
            node_filter: A TreeWalkerFilter, or a plain callable
                ``func(node) -> bool``. Ignored if an equal filter is
                already registered.
        """
        self._add_filter(self._node_filters, node_filter, 'node')

    def add_property_filter(self, property_filter: Any) -> None:
        """Add a filter selecting the properties that will be visited.

        Args:
            property_filter: A TreeWalkerFilter, or a plain callable
                ``func(prop) -> bool``. Ignored if an equal filter is
                already registered.
        """
        self._add_filter(self._property_filters, property_filter, 'property')

    def _add_filter(self, chain: List[TreeWalkerFilter], item_filter: Any, kind: str) -> None:
        if item_filter is None:
            raise ConfigurationError(f"Cannot register None as a {kind} filter")
        if not callable(getattr(item_filter, 'must_visit', None)):
            if not callable(item_filter):
                raise ConfigurationError(
                    f"{kind.capitalize()} filter {item_filter!r} must provide must_visit()"
                )
            item_filter = CallableFilter(item_filter)

        if item_filter in chain:
            logger.debug("Ignoring duplicate %s filter %r", kind, item_filter)
            return

        chain.append(item_filter)
        logger.debug("Registered %s filter %r (%d in chain)", kind, item_filter, len(chain))

    def must_visit_node(self, node: Node) -> bool:
        """Return whether a node must be traversed.

        Filters run in registration order; the first rejection wins.
        """
        for node_filter in self._node_filters:
            if not node_filter.must_visit(node):
                return False
        return True

    def must_visit_property(self, prop: Property) -> bool:
        """Return whether a node property must be visited.

        Filters run in registration order; the first rejection wins.
        """
        for property_filter in self._property_filters:
            if not property_filter.must_visit(prop):
                return False
        return True

    def traverse(self, node: Node, level: int = 0) -> None:
        """Traverse the subtree rooted at ``node``.

        A node rejected by the node filters is skipped together with its
        properties and all of its descendants. Anything raised by a filter,
        a visitor or the store aborts the whole traversal.

        Args:
            node: Root of the subtree to walk
            level: Level reported for ``node``; children get ``level + 1``
        """
        if not self.must_visit_node(node):
            return

        # Visit node
        self.node_visitor.set_level(level)
        node.accept(self.node_visitor)

        # Visit properties
        if self.property_visitor is not None:
            for prop in node.get_properties():
                if self.must_visit_property(prop):
                    self.property_visitor.set_level(level)
                    prop.accept(self.property_visitor)

        # Visit children
        for child in node.get_nodes():
            self.traverse(child, level + 1)

    def __repr__(self) -> str:
        return (f"TreeWalker(node_filters={len(self._node_filters)}, "
                f"property_filters={len(self._property_filters)}, "
                f"properties={'on' if self.property_visitor is not None else 'off'})")
