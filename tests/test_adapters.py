"""Tests for the in-memory and filesystem host stores."""

import os
import sys
import unittest
from datetime import datetime
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treewalker import (
    FileSystemNode,
    MemoryNode,
    Node,
    Property,
    TreeWalker,
    build_tree,
)
from treewalker.visitors import CollectingVisitor


class TestMemoryNode(unittest.TestCase):
    """Test the in-memory node implementation."""

    def setUp(self):
        self.root = MemoryNode('')
        self.cms = self.root.add_node('cms', {'title': 'Site'})
        self.pages = self.cms.add_node('pages')

    def test_implements_interfaces(self):
        self.assertIsInstance(self.root, Node)
        self.assertIsInstance(self.cms.get_property('title'), Property)

    def test_paths(self):
        self.assertEqual(self.root.path, '/')
        self.assertEqual(self.cms.path, '/cms')
        self.assertEqual(self.pages.path, '/cms/pages')
        self.assertEqual(self.cms.get_property('title').path, '/cms/title')

    def test_named_root_path(self):
        root = MemoryNode('content')
        self.assertEqual(root.path, '/content')
        self.assertEqual(root.add_node('a').path, '/content/a')

    def test_root_property_path(self):
        prop = self.root.set_property('jcr:primaryType', 'rep:root')
        self.assertEqual(prop.path, '/jcr:primaryType')

    def test_depth(self):
        self.assertEqual(self.root.depth, 0)
        self.assertEqual(self.cms.depth, 1)
        self.assertEqual(self.pages.depth, 2)

    def test_parent_links(self):
        self.assertIsNone(self.root.parent)
        self.assertIs(self.pages.parent, self.cms)
        self.assertIs(self.cms.get_property('title').node, self.cms)

    def test_children_keep_insertion_order(self):
        self.cms.add_node('menu')
        self.cms.add_node('assets')
        self.assertEqual([n.name for n in self.cms.get_nodes()], ['pages', 'menu', 'assets'])
        self.assertEqual(len(self.cms), 3)

    def test_duplicate_child_rejected(self):
        with self.assertRaises(ValueError):
            self.cms.add_node('pages')

    def test_set_property_replaces_in_place(self):
        self.cms.set_property('author', 'me')
        self.cms.set_property('title', 'New')
        props = [(p.name, p.value) for p in self.cms.get_properties()]
        self.assertEqual(props, [('title', 'New'), ('author', 'me')])

    def test_lookup_errors(self):
        with self.assertRaises(KeyError):
            self.cms.get_node('missing')
        with self.assertRaises(KeyError):
            self.cms.get_property('missing')

    def test_accept_dispatches_to_visitor(self):
        visitor = CollectingVisitor()
        self.cms.accept(visitor)
        self.cms.get_property('title').accept(visitor)
        self.assertEqual(visitor.items, [self.cms, self.cms.get_property('title')])


class TestBuildTree(unittest.TestCase):
    """Test building trees from nested dictionaries."""

    def test_dicts_become_nodes_and_scalars_properties(self):
        root = build_tree({'cms': {'title': 'Site', 'count': 3, 'pages': {}}})
        cms = root.get_node('cms')
        self.assertEqual([p.name for p in cms.get_properties()], ['title', 'count'])
        self.assertEqual([n.name for n in cms.get_nodes()], ['pages'])
        self.assertEqual(cms.get_property('count').value, 3)

    def test_explicit_properties_key(self):
        root = build_tree({'@properties': {'settings': {'debug': True}}, 'child': {}}, name='r')
        self.assertEqual(root.get_property('settings').value, {'debug': True})
        self.assertEqual([n.name for n in root.get_nodes()], ['child'])

    def test_root_name(self):
        self.assertEqual(build_tree({}, name='content').name, 'content')
        self.assertEqual(build_tree({}).path, '/')


@pytest.fixture
def fs_tree(tmp_path):
    """Create a test directory structure.

    Structure:
    tmp_path/
    ├── .hidden
    ├── b.txt
    ├── a_dir/
    │   └── nested.py
    └── c_dir/
    """
    (tmp_path / 'a_dir').mkdir()
    (tmp_path / 'c_dir').mkdir()
    (tmp_path / 'a_dir' / 'nested.py').write_text("# python file")
    (tmp_path / 'b.txt').write_text("content")
    (tmp_path / '.hidden').write_text("secret")
    return tmp_path


def test_filesystem_children_sorted(fs_tree):
    root = FileSystemNode(fs_tree)
    assert [n.name for n in root.get_nodes()] == ['.hidden', 'a_dir', 'b.txt', 'c_dir']


def test_filesystem_hidden_entries_skipped(fs_tree):
    root = FileSystemNode(fs_tree, include_hidden=False)
    assert [n.name for n in root.get_nodes()] == ['a_dir', 'b.txt', 'c_dir']


def test_filesystem_file_has_no_children(fs_tree):
    node = FileSystemNode(fs_tree / 'b.txt')
    assert list(node.get_nodes()) == []
    assert not node.is_dir()


def test_filesystem_file_properties(fs_tree):
    node = FileSystemNode(fs_tree / 'b.txt')
    props = {p.name: p.value for p in node.get_properties()}

    assert props['type'] == 'file'
    assert props['size'] == len("content")
    assert props['extension'] == '.txt'
    assert isinstance(props['mtime'], datetime)
    assert props['mode'].startswith('0o')


def test_filesystem_directory_properties(fs_tree):
    node = FileSystemNode(fs_tree / 'a_dir')
    props = [p.name for p in node.get_properties()]
    assert props == ['type', 'size', 'mtime', 'mode']
    assert next(iter(node.get_properties())).path == f"{node.path}/type"


def test_filesystem_depth_and_parent(fs_tree):
    root = FileSystemNode(fs_tree)
    a_dir = next(n for n in root.get_nodes() if n.name == 'a_dir')
    nested = next(iter(a_dir.get_nodes()))

    assert root.depth == 0
    assert a_dir.depth == 1
    assert nested.depth == 2
    assert nested.parent is a_dir
    assert nested.path == (fs_tree / 'a_dir' / 'nested.py').as_posix()


def test_filesystem_walk(fs_tree):
    visitor = CollectingVisitor()
    walker = TreeWalker(visitor)
    walker.add_node_filter(lambda node: not node.name.startswith('.'))
    walker.traverse(FileSystemNode(fs_tree))

    assert visitor.names[1:] == ['a_dir', 'nested.py', 'b.txt', 'c_dir']
    assert visitor.levels == [0, 1, 2, 1, 1]


def test_filesystem_missing_path_raises(tmp_path):
    node = FileSystemNode(tmp_path / 'missing')
    with pytest.raises(FileNotFoundError):
        list(node.get_properties())


@pytest.mark.skipif(not hasattr(os, 'symlink') or sys.platform.startswith('win'),
                    reason="symlinks not available")
def test_filesystem_symlinks(fs_tree):
    os.symlink(fs_tree / 'b.txt', fs_tree / 'link.txt')

    assert 'link.txt' not in [n.name for n in FileSystemNode(fs_tree).get_nodes()]
    assert 'link.txt' in [n.name for n in FileSystemNode(fs_tree, follow_symlinks=True).get_nodes()]
