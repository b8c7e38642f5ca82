"""Filesystem host store for treewalker.

Exposes a directory tree as walker nodes: directories and files are nodes,
and a handful of ``stat`` fields are exposed as properties.
"""

import stat
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Union

from ..core.item import Node, Property


class FileSystemProperty(Property):
    """A stat-derived attribute of a filesystem entry."""

    def __init__(self, name: str, value: Any, node: 'FileSystemNode'):
        self._name = name
        self._value = value
        self._node = node

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> str:
        return f"{self._node.path.rstrip('/')}/{self._name}"

    @property
    def value(self) -> Any:
        return self._value

    @property
    def node(self) -> 'FileSystemNode':
        return self._node


class FileSystemNode(Node):
    """Node implementation for files and directories.

    Designed to be lightweight - stat data is fetched once, on the first
    property enumeration, and errors from the filesystem are not hidden.
    """

    def __init__(self,
                 path: Union[str, Path],
                 parent: Optional['FileSystemNode'] = None,
                 include_hidden: bool = True,
                 follow_symlinks: bool = False):
        """Initialize a filesystem node.

        Args:
            path: Path to the file or directory
            parent: Parent node (None for the walk root)
            include_hidden: Whether to list entries starting with '.'
            follow_symlinks: Whether to list symbolic links as children
        """
        self.fs_path = Path(path)
        self._parent = parent
        self.include_hidden = include_hidden
        self.follow_symlinks = follow_symlinks
        self._stat_result = None

    @property
    def name(self) -> str:
        return self.fs_path.name or str(self.fs_path)

    @property
    def path(self) -> str:
        return self.fs_path.as_posix()

    @property
    def parent(self) -> Optional['FileSystemNode']:
        return self._parent

    @property
    def depth(self) -> int:
        depth = 0
        current = self._parent
        while current is not None:
            depth += 1
            current = current._parent
        return depth

    def is_dir(self) -> bool:
        return self.fs_path.is_dir()

    def get_nodes(self) -> Iterator['FileSystemNode']:
        """Yield directory entries sorted by name (nothing for files)."""
        if not self.fs_path.is_dir():
            return

        for child_path in sorted(self.fs_path.iterdir()):
            # Skip hidden files if configured
            if not self.include_hidden and child_path.name.startswith('.'):
                continue

            # Skip symlinks if not following
            if not self.follow_symlinks and child_path.is_symlink():
                continue

            yield FileSystemNode(child_path,
                                 parent=self,
                                 include_hidden=self.include_hidden,
                                 follow_symlinks=self.follow_symlinks)

    def get_properties(self) -> Iterator[FileSystemProperty]:
        for name, value in self.metadata().items():
            yield FileSystemProperty(name, value, self)

    def metadata(self) -> Dict[str, Any]:
        """Return the stat-derived values exposed as properties."""
        if self._stat_result is None:
            self._stat_result = self.fs_path.stat()
        st = self._stat_result

        is_dir = stat.S_ISDIR(st.st_mode)
        metadata: Dict[str, Any] = {
            'type': 'directory' if is_dir else 'file',
            'size': st.st_size,
            'mtime': datetime.fromtimestamp(st.st_mtime),
            'mode': oct(stat.S_IMODE(st.st_mode)),
        }
        if not is_dir:
            metadata['extension'] = self.fs_path.suffix
        return metadata

    def __repr__(self) -> str:
        return f"FileSystemNode(path={self.fs_path!r})"
