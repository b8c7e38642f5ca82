"""Reference filters for treewalker.

Every filter here works on both nodes and properties unless noted, since
both expose a ``name``. Filters compare equal when they are configured the
same way, which lets the walker drop duplicate registrations.
"""

import fnmatch
from typing import Any, FrozenSet, Iterable, Optional

from .core.filter import CallableFilter, TreeWalkerFilter
from .exceptions import ConfigurationError


def _pattern_set(patterns: Optional[Iterable[str]]) -> Optional[FrozenSet[str]]:
    if patterns is None:
        return None
    if isinstance(patterns, str):
        patterns = [patterns]
    return frozenset(patterns)


class NamePatternFilter(TreeWalkerFilter):
    """Select items by glob patterns on their name.

    Exclusion takes precedence over inclusion. Without include patterns,
    every name that is not excluded passes.

    Example:
        >>> f = NamePatternFilter(include={'page*'}, exclude={'*-draft'})
        >>> f.must_visit(node_named('page-1'))
        True
    """

    def __init__(self,
                 include: Optional[Iterable[str]] = None,
                 exclude: Optional[Iterable[str]] = None):
        """Initialize the filter.

        Args:
            include: Glob patterns an item name must match (any of them)
            exclude: Glob patterns rejecting an item name (any of them)
        """
        self.include = _pattern_set(include)
        self.exclude = _pattern_set(exclude)

    def must_visit(self, item: Any) -> bool:
        name = item.name
        if self.exclude and any(fnmatch.fnmatchcase(name, p) for p in self.exclude):
            return False
        if self.include is not None:
            return any(fnmatch.fnmatchcase(name, p) for p in self.include)
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NamePatternFilter):
            return NotImplemented
        return self.include == other.include and self.exclude == other.exclude

    def __hash__(self) -> int:
        return hash((NamePatternFilter, self.include, self.exclude))

    def __repr__(self) -> str:
        return f"NamePatternFilter(include={self.include!r}, exclude={self.exclude!r})"


class SystemItemFilter(TreeWalkerFilter):
    """Reject repository-internal items, recognised by a name prefix.

    Content repositories keep their own bookkeeping under a reserved
    namespace (``jcr:`` by default), e.g. ``jcr:system`` nodes or
    ``jcr:primaryType`` properties.
    """

    def __init__(self, prefix: str = 'jcr:'):
        if not prefix:
            raise ConfigurationError("SystemItemFilter requires a non-empty prefix")
        self.prefix = prefix

    def must_visit(self, item: Any) -> bool:
        return not item.name.startswith(self.prefix)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SystemItemFilter):
            return NotImplemented
        return self.prefix == other.prefix

    def __hash__(self) -> int:
        return hash((SystemItemFilter, self.prefix))

    def __repr__(self) -> str:
        return f"SystemItemFilter(prefix={self.prefix!r})"


class MaxDepthFilter(TreeWalkerFilter):
    """Reject nodes deeper than ``max_depth`` in their host store.

    Node filter only: it reads ``node.depth``, the store depth, not the
    traversal level.
    """

    def __init__(self, max_depth: int):
        if max_depth < 0:
            raise ConfigurationError(f"max_depth cannot be negative, got {max_depth}")
        self.max_depth = max_depth

    def must_visit(self, item: Any) -> bool:
        return item.depth <= self.max_depth

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MaxDepthFilter):
            return NotImplemented
        return self.max_depth == other.max_depth

    def __hash__(self) -> int:
        return hash((MaxDepthFilter, self.max_depth))

    def __repr__(self) -> str:
        return f"MaxDepthFilter(max_depth={self.max_depth})"


__all__ = [
    "TreeWalkerFilter",
    "CallableFilter",
    "NamePatternFilter",
    "SystemItemFilter",
    "MaxDepthFilter",
]
