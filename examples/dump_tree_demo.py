#!/usr/bin/env python3
"""Demo script for treewalker.

Dumps an in-memory content tree and then a directory, showing how node
and property filters change what gets visited.
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from treewalker import (
    FileSystemNode,
    NamePatternFilter,
    TreeWalker,
    WalkerConfig,
    build_tree,
    count_nodes,
    dump_tree,
)
from treewalker.visitors import DumpNodeVisitor, DumpPropertyVisitor


def demo_content_tree():
    """Dump a repository-like tree with and without system items."""
    print("\n=== Content Tree ===")
    root = build_tree({
        'jcr:primaryType': 'rep:root',
        'cms': {
            'jcr:primaryType': 'nt:unstructured',
            'title': 'Example Site',
            'pages': {
                'home': {'title': 'Home', 'tags': ['start', 'welcome']},
                'contact': {'title': 'Contact'},
            },
        },
        'jcr:system': {'jcr:nodeTypes': {}},
    })

    print("\n-- everything --")
    dump_tree(root)

    print("\n-- content only --")
    dump_tree(root, config=WalkerConfig.content_only())

    print(f"\n{count_nodes(root)} nodes in total, "
          f"{count_nodes(root, WalkerConfig.content_only())} content nodes")


def demo_directory(path: Path):
    """Dump a directory, skipping hidden entries and caches."""
    print(f"\n=== Directory: {path} ===")
    walker = TreeWalker(DumpNodeVisitor(), DumpPropertyVisitor())
    walker.add_node_filter(NamePatternFilter(exclude={'.*', '__pycache__', '*.pyc'}))
    walker.add_property_filter(NamePatternFilter(include={'type', 'size'}))
    walker.traverse(FileSystemNode(path))


def main():
    logging.basicConfig(level=logging.DEBUG if '-v' in sys.argv else logging.WARNING)
    demo_content_tree()

    args = [a for a in sys.argv[1:] if a != '-v']
    target = Path(args[0]) if args else Path(__file__).parent.parent / 'treewalker'
    demo_directory(target)


if __name__ == "__main__":
    main()
