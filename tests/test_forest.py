# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for forest queries."""

import pytest

from collection_tree import (
    Collection,
    as_dict,
    build_tree,
    count_items,
    count_nodes,
    find_node,
    find_nodes,
    get_node,
    render_text,
    walk,
)


@pytest.fixture
def forest():
    """Forest with synthetic and real nodes."""
    return build_tree([
        Collection(id='c1', name='Engineering/Backend/Infra'),
        Collection(id='c2', name='Engineering/Frontend'),
        Collection(id='c3', name='Sales'),
        Collection(id='c4', name='Engineering/Backend'),
    ])


class TestWalk:
    """Tests for walk()."""

    def test_preorder_paths(self, forest):
        """Test walk yields parents before children in order."""
        assert [path for path, _ in walk(forest)] == [
            'Engineering',
            'Engineering/Backend',
            'Engineering/Backend/Infra',
            'Engineering/Frontend',
            'Sales',
        ]

    def test_paths_match_node_path(self, forest):
        """Test yielded paths equal node.path."""
        for path, node in walk(forest):
            assert path == node.path

    def test_empty(self):
        """Test walking an empty forest."""
        assert list(walk([])) == []


class TestLookup:
    """Tests for get_node(), find_node() and find_nodes()."""

    def test_get_node(self, forest):
        """Test lookup by path."""
        node = get_node(forest, 'Engineering/Backend')
        assert node.data.id == 'c4'
        assert get_node(forest, '/Engineering/Backend/Infra/').data.id == 'c1'

    def test_get_node_synthetic(self, forest):
        """Test lookup of a synthetic node."""
        assert get_node(forest, 'Engineering').is_synthetic

    def test_get_node_missing(self, forest):
        """Test missing paths raise KeyError."""
        with pytest.raises(KeyError, match="'Ops' not found"):
            get_node(forest, 'Engineering/Ops')
        with pytest.raises(KeyError):
            get_node(forest, 'Marketing')

    def test_find_node(self, forest):
        """Test lookup by item id."""
        node = find_node(forest, 'c2')
        assert node.path == 'Engineering/Frontend'
        assert find_node(forest, 'missing') is None
        assert find_node(forest, None) is None

    def test_find_node_mapping_items(self):
        """Test lookup by id on mapping items."""
        roots = build_tree([{'id': 1, 'name': 'A/B'}])
        assert find_node(roots, 1).name == 'B'

    def test_find_nodes(self, forest):
        """Test predicate search."""
        synthetic = find_nodes(forest, lambda n: n.is_synthetic)
        assert [n.name for n in synthetic] == ['Engineering']


class TestConversion:
    """Tests for counting, as_dict() and render_text()."""

    def test_counts(self, forest):
        """Test node and item counts."""
        assert count_nodes(forest) == 5
        assert count_items(forest) == 4

    def test_as_dict(self, forest):
        """Test nested dict keeps first-seen order."""
        result = as_dict(forest)
        assert result == {
            'Engineering': {'Backend': {'Infra': {}}, 'Frontend': {}},
            'Sales': {},
        }
        assert list(result['Engineering']) == ['Backend', 'Frontend']

    def test_render_text(self, forest):
        """Test ASCII rendering marks synthetic nodes."""
        assert render_text(forest) == "\n".join([
            ".",
            "|-- Engineering/",
            "|   |-- Backend",
            "|   |   `-- Infra",
            "|   `-- Frontend",
            "`-- Sales",
        ])

    def test_render_empty(self):
        """Test rendering an empty forest."""
        assert render_text([]) == "."

    def test_render_custom_delimiter(self):
        """Test synthetic nodes are marked with the forest's delimiter."""
        roots = build_tree([{'id': 1, 'name': 'a.b'}], delimiter='.')
        assert render_text(roots) == ".\n`-- a.\n    `-- b"


class TestDeepForest:
    """Tests for forests deeper than the interpreter recursion limit."""

    DEPTH = 3000

    @pytest.fixture
    def deep(self):
        """Single chain of DEPTH nodes."""
        name = '/'.join(str(i) for i in range(self.DEPTH))
        return build_tree([{'id': 'leaf', 'name': name}])

    def test_walk_and_counts(self, deep):
        """Test walking and counting a very deep forest."""
        assert count_nodes(deep) == self.DEPTH
        assert count_items(deep) == 1
        path, node = list(walk(deep))[-1]
        assert node.depth == self.DEPTH - 1
        assert path == node.path

    def test_find(self, deep):
        """Test id and predicate search on a very deep forest."""
        assert find_node(deep, 'leaf').name == str(self.DEPTH - 1)
        assert len(find_nodes(deep, lambda n: n.is_synthetic)) == self.DEPTH - 1

    def test_as_dict(self, deep):
        """Test dict conversion of a very deep forest."""
        level = as_dict(deep)
        for i in range(self.DEPTH):
            assert list(level) == [str(i)]
            level = level[str(i)]
        assert level == {}

    def test_render_text(self, deep):
        """Test rendering a very deep forest."""
        lines = render_text(deep).split("\n")
        assert len(lines) == self.DEPTH + 1
        assert lines[-1].endswith(f"`-- {self.DEPTH - 1}")
