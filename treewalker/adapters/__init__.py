"""Host stores for treewalker.

Adapters implement the Node/Property interfaces over concrete tree
structures so the walker can traverse them.
"""

from .memory import MemoryNode, MemoryProperty, build_tree
from .filesystem import FileSystemNode, FileSystemProperty

__all__ = [
    "MemoryNode",
    "MemoryProperty",
    "build_tree",
    "FileSystemNode",
    "FileSystemProperty",
]
