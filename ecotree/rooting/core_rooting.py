"""
Core rerooting implementation for phylogenetic trees.

Rerooting inserts a fresh root on the edge above the chosen outgroup. The
outgroup's edge is split in half, every edge on the old path to the root is
reversed with its length shifted one position along the path, and the old
root's other children are hung below the last reversed node.
"""

import logging
from typing import Optional, List
from ecotree.tree import Node

logger = logging.getLogger(__name__)

# =============================================================================
# HELPER FUNCTIONS FOR TREE STRUCTURE MANIPULATION
# =============================================================================


def _collect_path_to_root(start_node: Node) -> List[Node]:
    """
    Collect all nodes from start_node up to the current root.

    Args:
        start_node: The node to start collecting from

    Returns:
        List of nodes from start_node to root (inclusive)
    """
    path: List[Node] = []
    node: Optional[Node] = start_node
    while node is not None:
        path.append(node)
        node = node.parent
    return path


def _mark_outgroup(root: Node, outgroup: Node) -> None:
    for node in root.traverse():
        node.outgroup = False
    outgroup.outgroup = True


# =============================================================================
# CORE REROOTING OPERATIONS
# =============================================================================


def reroot(root: Node, target: Node) -> Optional[Node]:
    """
    Reroot the tree so that ``target`` hangs directly below a new root.

    Args:
        root: Current root of the tree
        target: Node that becomes the outgroup

    Returns:
        The new root, or None when ``target`` is the root or not in the tree
    """
    if target is root or target.parent is None:
        logger.warning("Cannot reroot on the root node; tree left unchanged.")
        return None
    path = _collect_path_to_root(target)
    if path[-1] is not root:
        logger.warning("Cannot reroot on %r: node belongs to another tree.", target)
        return None

    new_root = Node()
    old_parent = target.parent
    new_root.append_child(target)

    # Split the outgroup edge between the outgroup and its old parent.
    distance = target.distance * 0.5
    old_distance = old_parent.distance
    target.distance = distance
    old_parent.distance = distance
    new_parent = new_root

    # Walk up to the old root, reversing each edge; every reversed node takes
    # over the length of the edge one step closer to the outgroup.
    while old_parent is not root:
        node = old_parent
        old_parent = node.parent
        new_parent.append_child(node)
        new_parent = node
        node.distance = distance
        distance = old_distance
        old_distance = old_parent.distance

    # The old root disappears; its remaining children extend the last edge.
    for child in list(old_parent.children):
        new_parent.append_child(child)
        child.distance += distance

    _mark_outgroup(new_root, target)
    logger.debug(
        "Rerooted on %r across %d reversed edges", target.name, len(path) - 2
    )
    return new_root
