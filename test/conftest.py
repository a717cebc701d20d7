import logging

import pytest

from ecotree.tree import Tree

# Branch lengths as printed by the serializer (five decimals).
BASE_NEWICK = (
    "(((A:0.10000,B:0.20000):0.10000,(C:0.10000,D:0.10000):0.20000):0.30000,"
    "E:0.50000):0.00000;"
)


def pytest_configure(config):
    """Set up test environment before tests run."""
    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@pytest.fixture
def base_newick() -> str:
    return BASE_NEWICK


@pytest.fixture
def base_tree() -> Tree:
    #            root
    #          /      \
    #        X         E
    #      /   \
    #    AB     CD
    #   /  \   /  \
    #  A    B C    D
    return Tree.from_newick(BASE_NEWICK)


def get_child(tree, *path):
    """Follow child indices from the root (accepts a Tree or a Node)."""
    node = tree.root if isinstance(tree, Tree) else tree
    for index in path:
        node = node.children[index]
    return node
