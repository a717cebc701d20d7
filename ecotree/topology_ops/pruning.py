import logging
from typing import Optional

from ecotree.tree import Node

logger = logging.getLogger(__name__)


def remove_leaf(root: Node, leaf: Node) -> Optional[Node]:
    """
    Detach ``leaf`` and fold away a parent that is left with a single child.

    The surviving sibling inherits the parent's branch length, so the path
    length between any two remaining leaves is unchanged.

    Args:
        root: Root of the tree holding the leaf
        leaf: Leaf node to remove

    Returns:
        The root after removal (a new node when the old root was folded away),
        or None when nothing was removed
    """
    if not leaf.is_leaf() or leaf.parent is None:
        logger.warning("Cannot remove %r: not a leaf of the tree.", leaf.name)
        return None
    if leaf.get_root() is not root:
        logger.warning("Cannot remove %r: leaf belongs to another tree.", leaf.name)
        return None
    if root.number_of_leaves() <= 2:
        logger.warning("Cannot remove %r: a tree needs two leaves.", leaf.name)
        return None

    parent = leaf.parent
    parent.remove_child(leaf)
    logger.debug("Removed leaf %r", leaf.name)

    if len(parent.children) != 1:
        return root

    sibling = parent.children[0]
    sibling.distance += parent.distance
    if parent.parent is None:
        parent.remove_child(sibling)
        return sibling

    parent.parent.replace_child(parent, sibling)
    return root
