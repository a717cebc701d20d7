from ecotree.topology_ops import make_binary, collapse_unary_nodes
from ecotree.tree import Node, Tree
from ecotree.distances import path_length_matrix

import numpy as np


def test_make_binary_resolves_polytomy():
    tree = Tree.from_newick("(A:1,B:2,C:3,D:4);")
    tree.make_binary()
    assert tree.to_newick() == (
        "(A:1.00000,(B:2.00000,(C:3.00000,D:4.00000):0.00000):0.00000):0.00000;"
    )
    assert all(len(node.children) in (0, 2) for node in tree.root.traverse())


def test_make_binary_nested_polytomies_keep_leaf_order():
    tree = Tree.from_newick("((A,B,C,D,E):1,F,G);")
    inserted = make_binary(tree.root)
    assert inserted == 4
    assert tree.root.get_current_order() == ("A", "B", "C", "D", "E", "F", "G")
    assert all(len(node.children) <= 2 for node in tree.root.traverse())


def test_make_binary_keeps_path_lengths():
    tree = Tree.from_newick("((A:1,B:2,C:3):1,D:1,E:2);")
    names, before = path_length_matrix(tree)
    tree.make_binary()
    after_names, after = path_length_matrix(tree)
    assert names == after_names
    np.testing.assert_allclose(after, before)


def test_make_binary_on_binary_tree_is_noop(base_tree, base_newick):
    assert make_binary(base_tree.root) == 0
    assert base_tree.to_newick() == base_newick


def test_collapse_unary_chain_sums_lengths():
    root = Node()
    top = Node(distance=1.0)
    middle = Node(distance=2.0)
    middle.append_child(Node("A", 3.0))
    top.append_child(middle)
    root.append_child(top)
    root.append_child(Node("B", 1.0))

    new_root = collapse_unary_nodes(root)
    assert new_root is root
    assert root.children[0].name == "A"
    assert root.children[0].distance == 6.0
    assert root.children[0].parent is root


def test_collapse_unary_root():
    root = Node()
    inner = Node(distance=0.5)
    inner.append_child(Node("A", 1.0))
    inner.append_child(Node("B", 1.0))
    root.append_child(inner)

    tree = Tree(root)
    tree.validate()
    assert tree.root is inner
    assert tree.root.parent is None
    assert tree.root.get_current_order() == ("A", "B")
