from typing import Dict, List, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from ecotree.tree import Node, Tree


def _root_of(tree: Union[Tree, Node]) -> Node:
    return tree.root if isinstance(tree, Tree) else tree


def depths_from_root(root: Node) -> Dict[int, float]:
    """Path length from ``root`` to every node below it, keyed by ``id(node)``."""
    depths: Dict[int, float] = {id(root): 0.0}
    for node in root.traverse():
        for child in node.children:
            depths[id(child)] = depths[id(node)] + child.distance
    return depths


def path_length_matrix(tree: Union[Tree, Node]) -> Tuple[List[str], NDArray[np.float64]]:
    """
    Patristic distances between every pair of leaves.

    The distance between two leaves is depth(a) + depth(b) - 2 * depth(lca).
    Nodes are visited in pre-order, so each deeper common ancestor overwrites
    the depth written by the ancestors above it.

    Args:
        tree: Tree or root node

    Returns:
        Tuple of (leaf names in storage order, symmetric distance matrix)
    """
    root = _root_of(tree)
    leaves = root.get_leaves()
    index: Dict[int, int] = {id(leaf): i for i, leaf in enumerate(leaves)}
    depths = depths_from_root(root)

    leaf_depths: NDArray[np.float64] = np.array(
        [depths[id(leaf)] for leaf in leaves], dtype=np.float64
    )
    lca_depths: NDArray[np.float64] = np.zeros((len(leaves), len(leaves)))
    for node in root.traverse():
        if node.children:
            below = [index[id(leaf)] for leaf in node.get_leaves()]
            lca_depths[np.ix_(below, below)] = depths[id(node)]

    matrix = leaf_depths[:, None] + leaf_depths[None, :] - 2.0 * lca_depths
    np.fill_diagonal(matrix, 0.0)
    return [leaf.name for leaf in leaves], matrix


def path_length(tree: Union[Tree, Node], name_a: str, name_b: str) -> float:
    """Patristic distance between the first leaves called ``name_a`` and ``name_b``."""
    root = _root_of(tree)
    leaf_a = root.find_leaf(name_a)
    leaf_b = root.find_leaf(name_b)
    if leaf_a is None or leaf_b is None:
        missing = name_a if leaf_a is None else name_b
        raise KeyError(f"No leaf named '{missing}'")
    ancestor = leaf_a.find_lowest_common_ancestor(leaf_b)
    if ancestor is None:
        raise ValueError(f"Leaves '{name_a}' and '{name_b}' share no ancestor")
    return (
        leaf_a.distance_from_root()
        + leaf_b.distance_from_root()
        - 2.0 * ancestor.distance_from_root()
    )


def total_branch_length(tree: Union[Tree, Node]) -> float:
    """Sum of all branch lengths below the root."""
    root = _root_of(tree)
    return sum(node.distance for node in root.traverse() if node is not root)
