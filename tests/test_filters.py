"""Tests for the reference filters."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treewalker import (
    CallableFilter,
    ConfigurationError,
    MaxDepthFilter,
    NamePatternFilter,
    SystemItemFilter,
    TreeWalker,
    build_tree,
)
from treewalker.visitors import CollectingVisitor


@pytest.fixture
def tree():
    return build_tree({
        'jcr:primaryType': 'rep:root',
        'cms': {
            'jcr:uuid': 'abc-123',
            'title': 'Site',
            'pages': {
                'page-1': {'title': 'One'},
                'page-1-draft': {'title': 'One (draft)'},
                'news': {},
            },
        },
        'jcr:system': {'jcr:versionStorage': {}},
    })


class TestCallableFilter:

    def test_wraps_function(self, tree):
        f = CallableFilter(lambda item: item.name == 'cms')
        assert f.must_visit(tree.get_node('cms'))
        assert not f.must_visit(tree)

    def test_coerces_result_to_bool(self, tree):
        f = CallableFilter(lambda item: item.name)
        assert f.must_visit(tree.get_node('cms')) is True
        assert f.must_visit(tree) is False

    def test_equality_follows_function(self):
        def keep(item):
            return True

        assert CallableFilter(keep) == CallableFilter(keep)
        assert hash(CallableFilter(keep)) == hash(CallableFilter(keep))
        assert CallableFilter(keep) != CallableFilter(lambda item: True)

    def test_rejects_non_callables(self):
        with pytest.raises(TypeError):
            CallableFilter("keep")


class TestNamePatternFilter:

    def test_no_patterns_accepts_everything(self, tree):
        f = NamePatternFilter()
        assert f.must_visit(tree)
        assert f.must_visit(tree.get_node('cms'))

    def test_include_patterns(self, tree):
        pages = tree.get_node('cms').get_node('pages')
        f = NamePatternFilter(include={'page-*'})
        assert f.must_visit(pages.get_node('page-1'))
        assert not f.must_visit(pages.get_node('news'))

    def test_exclude_wins_over_include(self, tree):
        pages = tree.get_node('cms').get_node('pages')
        f = NamePatternFilter(include={'page-*'}, exclude={'*-draft'})
        assert f.must_visit(pages.get_node('page-1'))
        assert not f.must_visit(pages.get_node('page-1-draft'))

    def test_single_string_pattern(self, tree):
        f = NamePatternFilter(exclude='jcr:*')
        assert f.exclude == frozenset({'jcr:*'})
        assert not f.must_visit(tree.get_node('jcr:system'))

    def test_matching_is_case_sensitive(self, tree):
        f = NamePatternFilter(include={'CMS'})
        assert not f.must_visit(tree.get_node('cms'))

    def test_works_on_properties(self, tree):
        cms = tree.get_node('cms')
        f = NamePatternFilter(exclude={'jcr:*'})
        assert not f.must_visit(cms.get_property('jcr:uuid'))
        assert f.must_visit(cms.get_property('title'))

    def test_equality(self):
        assert NamePatternFilter(include=['a', 'b']) == NamePatternFilter(include={'b', 'a'})
        assert NamePatternFilter(include={'a'}) != NamePatternFilter(exclude={'a'})
        assert len({NamePatternFilter(exclude={'x'}), NamePatternFilter(exclude={'x'})}) == 1


class TestSystemItemFilter:

    def test_rejects_prefixed_names(self, tree):
        f = SystemItemFilter()
        assert not f.must_visit(tree.get_node('jcr:system'))
        assert not f.must_visit(tree.get_property('jcr:primaryType'))
        assert f.must_visit(tree.get_node('cms'))

    def test_custom_prefix(self, tree):
        f = SystemItemFilter(prefix='page-')
        pages = tree.get_node('cms').get_node('pages')
        assert not f.must_visit(pages.get_node('page-1'))
        assert f.must_visit(pages.get_node('news'))

    def test_empty_prefix_is_rejected(self):
        with pytest.raises(ConfigurationError):
            SystemItemFilter(prefix='')

    def test_hides_system_subtree(self, tree):
        visitor = CollectingVisitor()
        props = CollectingVisitor()
        walker = TreeWalker(visitor, props)
        walker.add_node_filter(SystemItemFilter())
        walker.add_property_filter(SystemItemFilter())
        walker.traverse(tree)

        assert 'jcr:system' not in visitor.names
        assert 'jcr:versionStorage' not in visitor.names
        assert not any(name.startswith('jcr:') for name in props.names)


class TestMaxDepthFilter:

    def test_uses_store_depth(self, tree):
        f = MaxDepthFilter(1)
        cms = tree.get_node('cms')
        assert f.must_visit(tree)
        assert f.must_visit(cms)
        assert not f.must_visit(cms.get_node('pages'))

    def test_depth_is_absolute_not_relative_to_walk(self, tree):
        visitor = CollectingVisitor()
        walker = TreeWalker(visitor)
        walker.add_node_filter(MaxDepthFilter(2))
        walker.traverse(tree.get_node('cms'))

        assert visitor.names == ['cms', 'pages']

    def test_negative_depth_is_rejected(self):
        with pytest.raises(ConfigurationError):
            MaxDepthFilter(-1)

    def test_zero_keeps_only_store_root(self, tree):
        visitor = CollectingVisitor()
        walker = TreeWalker(visitor)
        walker.add_node_filter(MaxDepthFilter(0))
        walker.traverse(tree)
        assert visitor.names == ['']
