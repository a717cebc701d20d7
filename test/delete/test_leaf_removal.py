import numpy as np
import pytest

from ecotree.distances import path_length_matrix
from ecotree.topology_ops import remove_leaf
from ecotree.tree import Tree
from conftest import get_child


def test_remove_leaf_folds_parent(base_tree):
    expected = Tree.from_newick("(((C:0.1,D:0.1):0.2,B:0.3):0.3,E:0.5):0.0;")
    assert base_tree.remove_leaf("A")
    assert base_tree == expected
    # B keeps the position of the folded (A,B) node.
    assert get_child(base_tree, 0, 0).name == "B"
    assert base_tree.find("B").distance == pytest.approx(0.3)


def test_remove_outgroup_replaces_root(base_tree):
    expected = Tree.from_newick("((A:0.1,B:0.2):0.1,(C:0.1,D:0.1):0.2):0.3;")
    old_root = base_tree.root
    assert base_tree.remove_leaf("E")
    assert base_tree.root is not old_root
    assert base_tree.root.parent is None
    assert base_tree == expected


def test_remove_leaf_preserves_remaining_path_lengths(base_tree):
    names, before = path_length_matrix(base_tree)
    base_tree.remove_leaf("C")
    after_names, after = path_length_matrix(base_tree)
    keep = [names.index(name) for name in after_names]
    np.testing.assert_allclose(after, before[np.ix_(keep, keep)])


def test_remove_leaf_from_polytomy_keeps_parent():
    tree = Tree.from_newick("((A:1,B:1,C:1):1,D:1);")
    assert tree.remove_leaf("B")
    assert tree.to_newick() == "((A:1.00000,C:1.00000):1.00000,D:1.00000):0.00000;"


def test_remove_leaf_by_node(base_tree):
    leaf = base_tree.find("D")
    assert base_tree.remove_leaf(leaf)
    assert base_tree.find("D") is None
    assert base_tree.size() == 4


@pytest.mark.parametrize("target", ["Z", ""])
def test_remove_unknown_leaf_is_noop(base_tree, base_newick, target):
    assert not base_tree.remove_leaf(target)
    assert base_tree.to_newick() == base_newick


def test_remove_internal_node_is_noop(base_tree, base_newick):
    assert not base_tree.remove_leaf(get_child(base_tree, 0))
    assert base_tree.to_newick() == base_newick


def test_remove_leaf_keeps_two_leaves():
    tree = Tree.from_newick("(A:1,B:1);")
    assert not tree.remove_leaf("A")
    assert tree.size() == 2


def test_remove_leaf_function_rejects_foreign_leaf(base_tree, base_newick):
    other = Tree.from_newick(base_newick)
    assert remove_leaf(base_tree.root, other.find("A")) is None
    assert other.size() == 5
