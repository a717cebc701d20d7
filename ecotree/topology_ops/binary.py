import logging
from typing import List

from ecotree.tree import Node

logger = logging.getLogger(__name__)


def make_binary(root: Node) -> int:
    """
    Resolve polytomies in place.

    Every child after the first moves below a new zero-length internal node,
    repeated until no node has more than two children.

    Returns:
        Number of internal nodes inserted
    """
    inserted = 0
    stack: List[Node] = [root]
    while stack:
        node = stack.pop()
        if len(node.children) > 2:
            bridge = Node(distance=0.0)
            for child in node.children[1:]:
                bridge.append_child(child)
            node.append_child(bridge)
            inserted += 1
        stack.extend(node.children)

    if inserted:
        logger.debug("Inserted %d nodes to resolve polytomies", inserted)
    return inserted


def _skip_unary_chain(node: Node) -> Node:
    # Lengths accumulate down the chain onto the first node with != 1 child.
    while len(node.children) == 1:
        only_child = node.children[0]
        node.remove_child(only_child)
        only_child.distance += node.distance
        node = only_child
    return node


def collapse_unary_nodes(root: Node) -> Node:
    """
    Merge every single-child internal node into its child.

    Args:
        root: Root of the tree to normalize

    Returns:
        The root after normalization; a unary root is replaced by its child
    """
    root = _skip_unary_chain(root)

    stack: List[Node] = [root]
    while stack:
        node = stack.pop()
        for child in list(node.children):
            end = _skip_unary_chain(child)
            if end is not child:
                node.replace_child(child, end)
                logger.debug("Collapsed unary node above %r", end.name)
        stack.extend(node.children)
    return root
