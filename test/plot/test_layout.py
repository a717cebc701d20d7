import pytest

from ecotree.plot.layout import calculate_layout
from conftest import get_child


def test_layout_coordinates(base_tree):
    result = base_tree.calculate_xy()
    expected = {"A": (0.5, 0), "B": (0.6, 1), "C": (0.6, 2), "D": (0.6, 3), "E": (0.5, 4)}
    for name, (x, y) in expected.items():
        leaf = base_tree.find(name)
        assert leaf.x == pytest.approx(x)
        assert leaf.y == y

    assert base_tree.root.x == 0.0
    assert get_child(base_tree, 0, 0).y == 0.5
    assert get_child(base_tree, 0, 1).y == 2.5
    assert get_child(base_tree, 0).y == 1.5
    assert base_tree.root.y == 2.75

    assert result.rows == 5
    assert result.width == pytest.approx(0.6)
    assert result.height == 5


def test_layout_scales(base_tree):
    result = calculate_layout(base_tree.root, x_scale=100, y_scale=12)
    assert base_tree.find("B").x == pytest.approx(60)
    assert base_tree.find("E").y == 48
    assert result.height == 60


def test_layout_collapsed_clade_takes_one_row(base_tree):
    clade = base_tree.collapse_clade(["C", "D"])
    result = base_tree.calculate_xy()
    assert clade.x == pytest.approx(0.6)
    assert clade.y == 2
    assert base_tree.find("E").y == 3
    assert result.rows == 4


def test_layout_collapsed_leaf_gets_minimum_width():
    from ecotree.tree import Tree

    tree = Tree.from_newick("(A:0.1,B:0.2);")
    tree.find("A").collapsed = True
    tree.calculate_xy()
    assert tree.find("A").x == pytest.approx(0.11)
