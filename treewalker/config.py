"""Configuration for treewalker.

WalkerConfig is the declarative way of describing which nodes and
properties a walk should cover. ``apply`` turns it into filters on a
TreeWalker; ``validate`` reports problems before anything is registered.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Set

from .filters import MaxDepthFilter, NamePatternFilter, SystemItemFilter


logger = logging.getLogger(__name__)


@dataclass
class WalkerConfig:
    """Complete selection configuration for a walk."""

    # Name-based filtering (glob patterns)
    node_include_patterns: Optional[Set[str]] = None
    node_exclude_patterns: Optional[Set[str]] = None
    property_include_patterns: Optional[Set[str]] = None
    property_exclude_patterns: Optional[Set[str]] = None

    # Repository-internal items
    skip_system_items: bool = False
    system_prefix: str = 'jcr:'

    # Store depth limit (None = unlimited)
    max_depth: Optional[int] = None

    # Disables the property visitor entirely when False
    visit_properties: bool = True

    # Additional filters, appended after the ones derived above
    node_filters: List[Any] = field(default_factory=list)
    property_filters: List[Any] = field(default_factory=list)

    @classmethod
    def show_all(cls) -> 'WalkerConfig':
        """Create a config visiting every node and property."""
        return cls()

    @classmethod
    def content_only(cls, prefix: str = 'jcr:') -> 'WalkerConfig':
        """Create a config hiding repository-internal nodes and properties.

        Args:
            prefix: Namespace prefix marking internal items
        """
        return cls(skip_system_items=True, system_prefix=prefix)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.max_depth is not None and self.max_depth < 0:
            errors.append("max_depth cannot be negative")

        if self.skip_system_items and not self.system_prefix:
            errors.append("system_prefix cannot be empty when skip_system_items is set")

        for attr in ('node_include_patterns', 'node_exclude_patterns',
                     'property_include_patterns', 'property_exclude_patterns'):
            patterns = getattr(self, attr)
            if patterns is not None and any(not p for p in patterns):
                errors.append(f"{attr} cannot contain empty patterns")

        return errors

    def build_node_filters(self) -> List[Any]:
        """Return the node filters this config describes, in order."""
        filters: List[Any] = []
        if self.skip_system_items:
            filters.append(SystemItemFilter(self.system_prefix))
        if self.node_include_patterns is not None or self.node_exclude_patterns:
            filters.append(NamePatternFilter(self.node_include_patterns,
                                             self.node_exclude_patterns))
        if self.max_depth is not None:
            filters.append(MaxDepthFilter(self.max_depth))
        filters.extend(self.node_filters)
        return filters

    def build_property_filters(self) -> List[Any]:
        """Return the property filters this config describes, in order."""
        filters: List[Any] = []
        if self.skip_system_items:
            filters.append(SystemItemFilter(self.system_prefix))
        if self.property_include_patterns is not None or self.property_exclude_patterns:
            filters.append(NamePatternFilter(self.property_include_patterns,
                                             self.property_exclude_patterns))
        filters.extend(self.property_filters)
        return filters

    def apply(self, walker) -> None:
        """Register this config's filters on a walker.

        Args:
            walker: TreeWalker to configure
        """
        node_filters = self.build_node_filters()
        property_filters = self.build_property_filters()

        for node_filter in node_filters:
            walker.add_node_filter(node_filter)
        for property_filter in property_filters:
            walker.add_property_filter(property_filter)

        logger.debug("Applied config: %d node filters, %d property filters",
                     len(node_filters), len(property_filters))
