"""Exceptions raised by treewalker itself.

The walker never wraps failures coming from visitors, filters or the host
store. Those propagate unchanged out of ``TreeWalker.traverse``. The classes
here only cover mistakes made while *setting up* a walk.
"""


class TreeWalkerError(Exception):
    """Base class for all treewalker errors."""
    pass


class ConfigurationError(TreeWalkerError, ValueError):
    """Raised when a walker, filter or WalkerConfig is set up incorrectly."""
    pass
