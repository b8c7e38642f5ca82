"""In-memory host store for treewalker.

MemoryNode and MemoryProperty implement the item interfaces on plain Python
objects. They are handy for tests, for building trees from parsed JSON/YAML
documents, and as a reference for writing adapters over real repositories.
"""

from typing import Any, Dict, Iterator, List, Optional

from ..core.item import Node, Property


PROPERTIES_KEY = '@properties'


class MemoryProperty(Property):
    """A property stored on a MemoryNode."""

    def __init__(self, name: str, value: Any, node: 'MemoryNode'):
        self._name = name
        self._value = value
        self._node = node

    @property
    def name(self) -> str:
        return self._name

    @property
    def path(self) -> str:
        parent_path = self._node.path
        if parent_path == '/':
            return f"/{self._name}"
        return f"{parent_path}/{self._name}"

    @property
    def value(self) -> Any:
        return self._value

    @property
    def node(self) -> 'MemoryNode':
        return self._node

    def __repr__(self) -> str:
        return f"MemoryProperty(path={self.path!r}, value={self._value!r})"


class MemoryNode(Node):
    """A node kept entirely in memory.

    Children and properties keep insertion order, which is the order the
    walker visits them in.

    Example:
        >>> root = MemoryNode('')
        >>> cms = root.add_node('cms', {'title': 'Site'})
        >>> cms.add_node('pages')
        >>> cms.path
        '/cms'
    """

    def __init__(self,
                 name: str,
                 properties: Optional[Dict[str, Any]] = None,
                 parent: Optional['MemoryNode'] = None):
        """Initialize a node.

        Args:
            name: Node name, unique among its siblings. Roots may be nameless.
            properties: Initial property values by name
            parent: Parent node (None for a root)
        """
        self._name = name
        self._parent = parent
        self._properties: Dict[str, MemoryProperty] = {}
        self._children: List[MemoryNode] = []
        self._index: Dict[str, MemoryNode] = {}

        for prop_name, value in (properties or {}).items():
            self.set_property(prop_name, value)

    @property
    def name(self) -> str:
        return self._name

    @property
    def parent(self) -> Optional['MemoryNode']:
        return self._parent

    @property
    def path(self) -> str:
        if self._parent is None:
            return f"/{self._name}" if self._name else '/'
        parent_path = self._parent.path
        if parent_path == '/':
            return f"/{self._name}"
        return f"{parent_path}/{self._name}"

    @property
    def depth(self) -> int:
        depth = 0
        current = self._parent
        while current is not None:
            depth += 1
            current = current._parent
        return depth

    def get_properties(self) -> Iterator[MemoryProperty]:
        return iter(list(self._properties.values()))

    def get_nodes(self) -> Iterator['MemoryNode']:
        return iter(list(self._children))

    def get_property(self, name: str) -> MemoryProperty:
        """Return a property by name.

        Raises:
            KeyError: If the node has no such property
        """
        return self._properties[name]

    def get_node(self, name: str) -> 'MemoryNode':
        """Return a direct child by name.

        Raises:
            KeyError: If the node has no such child
        """
        return self._index[name]

    def set_property(self, name: str, value: Any) -> MemoryProperty:
        """Create or replace a property.

        Replacing keeps the property's original position.
        """
        prop = MemoryProperty(name, value, self)
        self._properties[name] = prop
        return prop

    def add_node(self, name: str, properties: Optional[Dict[str, Any]] = None) -> 'MemoryNode':
        """Append a child node.

        Args:
            name: Child name
            properties: Initial property values for the child

        Returns:
            The new child

        Raises:
            ValueError: If a child with that name already exists
        """
        if name in self._index:
            raise ValueError(f"Node {self.path!r} already has a child named {name!r}")
        child = MemoryNode(name, properties, parent=self)
        self._children.append(child)
        self._index[name] = child
        return child

    def __len__(self) -> int:
        return len(self._children)

    def __repr__(self) -> str:
        return f"MemoryNode(path={self.path!r})"


def build_tree(data: Dict[str, Any], name: str = '') -> MemoryNode:
    """Build a MemoryNode tree from nested dictionaries.

    Dict values become child nodes, every other value becomes a property of
    the enclosing node. Properties whose value is itself a dict can be
    declared explicitly under the ``'@properties'`` key.

    Args:
        data: Nested mapping describing the tree
        name: Name of the returned root node

    Returns:
        The root MemoryNode

    Example:
        >>> root = build_tree({'cms': {'title': 'Site', 'pages': {}}})
        >>> [n.name for n in root.get_nodes()]
        ['cms']
    """
    root = MemoryNode(name)
    _populate(root, data)
    return root


def _populate(node: MemoryNode, data: Dict[str, Any]) -> None:
    for key, value in data.items():
        if key == PROPERTIES_KEY:
            for prop_name, prop_value in value.items():
                node.set_property(prop_name, prop_value)
        elif isinstance(value, dict):
            _populate(node.add_node(key), value)
        else:
            node.set_property(key, value)
