"""Reference visitors for treewalker.

The dump visitors print a tree the way a repository console would: one
line per node, indented by level, with properties listed underneath. The
collecting visitor records what was visited, which is what most tests and
scripts actually want.
"""

import sys
from typing import Any, Callable, List, Optional, TextIO, Tuple

from .core.visitor import LevelAwareVisitor


class CallableVisitor(LevelAwareVisitor):
    """Visitor calling ``func(item, level)`` for every dispatch."""

    def __init__(self, func: Callable[[Any, int], None]):
        super().__init__()
        self.func = func

    def visit(self, item: Any) -> None:
        self.func(item, self.level)


class CollectingVisitor(LevelAwareVisitor):
    """Records ``(level, item)`` for every dispatched item, in order."""

    def __init__(self):
        super().__init__()
        self.visited: List[Tuple[int, Any]] = []

    def visit(self, item: Any) -> None:
        self.visited.append((self.level, item))

    @property
    def items(self) -> List[Any]:
        return [item for _, item in self.visited]

    @property
    def names(self) -> List[str]:
        return [item.name for _, item in self.visited]

    @property
    def levels(self) -> List[int]:
        return [level for level, _ in self.visited]

    def clear(self) -> None:
        self.visited.clear()

    def __len__(self) -> int:
        return len(self.visited)


class _StreamVisitor(LevelAwareVisitor):

    def __init__(self, stream: Optional[TextIO] = None, indent: str = '  '):
        super().__init__()
        self._stream = stream
        self.indent = indent

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so that redirected/captured stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def write_line(self, text: str) -> None:
        self.stream.write(text + '\n')


class DumpNodeVisitor(_StreamVisitor):
    """Writes one indented line per visited node.

    Example output for a small tree::

        /
          cms
            pages
    """

    def __init__(self,
                 stream: Optional[TextIO] = None,
                 indent: str = '  ',
                 show_path: bool = False):
        """Initialize the visitor.

        Args:
            stream: Text stream to write to (default: sys.stdout)
            indent: String repeated once per level
            show_path: Print the node path instead of its name
        """
        super().__init__(stream, indent)
        self.show_path = show_path

    def visit(self, item: Any) -> None:
        label = item.path if self.show_path else (item.name or '/')
        self.write_line(f"{self.indent * self.level}{label}")


class DumpPropertyVisitor(_StreamVisitor):
    """Writes ``- name = value`` lines, one level below the owning node."""

    def __init__(self,
                 stream: Optional[TextIO] = None,
                 indent: str = '  ',
                 max_value_length: Optional[int] = None):
        """Initialize the visitor.

        Args:
            stream: Text stream to write to (default: sys.stdout)
            indent: String repeated once per level
            max_value_length: Truncate longer values, appending '...'
        """
        super().__init__(stream, indent)
        self.max_value_length = max_value_length

    def format_value(self, value: Any) -> str:
        if isinstance(value, (list, tuple)):
            text = ', '.join(str(v) for v in value)
        else:
            text = str(value)
        if self.max_value_length is not None and len(text) > self.max_value_length:
            text = text[:self.max_value_length] + '...'
        return text

    def visit(self, item: Any) -> None:
        prefix = self.indent * (self.level + 1)
        self.write_line(f"{prefix}- {item.name} = {self.format_value(item.value)}")
