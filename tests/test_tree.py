"""Tests for the Tree arena."""

import pytest

from rmqlca.tree import Tree

SAMPLE = ("a", [
    ("b", ["c", "d", "e"]),
    ("f", [("g", ["h"]), "i"]),
])


class TestTreeBuilding:

    def test_add_assigns_dense_ids(self):
        tree = Tree()
        root = tree.add("root")
        left = tree.add("left", root)
        right = tree.add("right", root)
        assert (root, left, right) == (0, 1, 2)
        assert tree.root == root
        assert tree.children[root] == [left, right]
        assert tree.value(right) == "right"
        assert len(tree) == 3

    def test_second_root_rejected(self):
        tree = Tree()
        tree.add("a")
        with pytest.raises(ValueError):
            tree.add("b")

    def test_unknown_parent_rejected(self):
        tree = Tree()
        tree.add("a")
        with pytest.raises(ValueError):
            tree.add("b", parent=5)


class TestFromNested:

    def test_pairs_and_leaves(self):
        tree = Tree.from_nested(SAMPLE)
        assert [tree.value(n) for n in tree.preorder()] == list("abcdefghi")
        # ids follow pre-order
        assert list(tree.preorder()) == list(range(9))
        assert [tree.value(c) for c in tree.children[tree.find("f")]] == ["g", "i"]

    def test_mappings(self):
        data = {
            "value": 1,
            "children": [
                {"value": 2},
                {"value": 3, "children": [4, 5]},
            ],
        }
        tree = Tree.from_nested(data)
        assert [tree.value(n) for n in tree.preorder()] == [1, 2, 3, 4, 5]
        assert tree.children[tree.find(3)] == [tree.find(4), tree.find(5)]

    def test_single_leaf(self):
        tree = Tree.from_nested("only")
        assert len(tree) == 1
        assert tree.children[tree.root] == []

    def test_find_missing(self):
        tree = Tree.from_nested(SAMPLE)
        with pytest.raises(KeyError):
            tree.find("z")

    def test_print_tree(self, capsys):
        Tree.from_nested(SAMPLE).print_tree()
        out = capsys.readouterr().out
        assert "├─ a (id=0)" in out
        assert "      ├─ h (id=7)" in out

    def test_empty_tree_preorder(self):
        assert list(Tree().preorder()) == []
