"""
Structural comparison of trees.

Two nodes compare equal when their names match, they sit at the same depth
relative to the root, their branch lengths agree within ``EPSILON`` and their
children can be matched up. Direct children of the root are compared on the
summed length of the root's child edges, so that rerooting on different
sides of the same root edge yields equal trees.
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import Any, Generator, List, Optional, Tuple

from ecotree.config import EPSILON
from ecotree.tree import Node, Tree

logger = logging.getLogger(__name__)

Frame = Generator[Tuple[Node, Node], Optional[int], int]


class MatchStrategy(Enum):
    """How the children of two compared nodes are paired up."""

    GREEDY = "greedy"  # First match wins; may over-report equality.
    BIJECTIVE = "bijective"  # Every child used exactly once, with backtracking.


def _sign(mine: Any, theirs: Any) -> int:
    return (theirs > mine) - (theirs < mine)


def _compare_lengths(mine: float, theirs: float, epsilon: float) -> int:
    if theirs > mine + epsilon:
        return 1
    if mine > theirs + epsilon:
        return -1
    return 0


def _child_edge_total(node: Node) -> float:
    return sum(child.distance for child in node.children)


def compare_nodes(
    node: Node,
    other: Node,
    strategy: MatchStrategy = MatchStrategy.BIJECTIVE,
    epsilon: float = EPSILON,
) -> int:
    """
    Three-way structural comparison of two subtrees.

    Subtree comparisons run on an explicit stack of frames, so deeply
    nested trees do not hit the interpreter's recursion limit.

    Args:
        node: Left-hand node
        other: Right-hand node
        strategy: Child matching strategy
        epsilon: Tolerance for branch lengths

    Returns:
        0 when the subtrees are equal, otherwise a nonzero sign
    """
    frames: List[Frame] = [_compare_frame(node, other, strategy, epsilon)]
    result: Optional[int] = None
    while frames:
        try:
            request = frames[-1].send(result)
        except StopIteration as done:
            frames.pop()
            result = done.value
            continue
        frames.append(_compare_frame(request[0], request[1], strategy, epsilon))
        result = None
    return 0 if result is None else result


def _compare_frame(
    node: Node, other: Node, strategy: MatchStrategy, epsilon: float
) -> Frame:
    # Yields (node, other) pairs whose comparison result is sent back in.
    c = _sign(node.name, other.name)
    if c:
        return c

    c = _sign(node.is_root(), other.is_root())
    if c:
        return c

    if node.parent is not None and other.parent is not None:
        c = _sign(node.parent.is_root(), other.parent.is_root())
        if c:
            return c

        if node.parent.is_root():
            c = _compare_lengths(
                _child_edge_total(node.parent), _child_edge_total(other.parent), epsilon
            )
        else:
            c = _compare_lengths(node.distance, other.distance, epsilon)
        if c:
            return c

    if strategy is MatchStrategy.GREEDY:
        return (yield from _match_greedy(node, other))
    return (yield from _match_bijective(node, other))


def _match_greedy(node: Node, other: Node) -> Frame:
    # Every child of ``node`` needs some equal child in ``other``; a child of
    # ``other`` may be used more than once and extra children are ignored.
    c = 0
    for child in node.children:
        for candidate in other.children:
            c = yield (candidate, child)
            if c == 0:
                break
        if c:
            return c
    return 0


def _match_bijective(node: Node, other: Node) -> Frame:
    c = _sign(len(node.children), len(other.children))
    if c:
        return c
    return (yield from _assign_children(list(node.children), list(other.children)))


def _assign_children(children: List[Node], candidates: List[Node]) -> Frame:
    if not children:
        return 0

    first, rest = children[0], children[1:]
    c = 0
    for index, candidate in enumerate(candidates):
        c = yield (candidate, first)
        if c:
            continue
        remaining = candidates[:index] + candidates[index + 1 :]
        c = yield from _assign_children(rest, remaining)
        if c == 0:
            return 0
    return c


def compare_trees(
    tree: Tree,
    other: Tree,
    strategy: MatchStrategy = MatchStrategy.BIJECTIVE,
    epsilon: float = EPSILON,
) -> int:
    """Compare two trees root to root."""
    result = compare_nodes(tree.root, other.root, strategy, epsilon)
    logger.debug("Compared trees with %s matching: %d", strategy.value, result)
    return result


def trees_equal(
    tree: Tree, other: Tree, strategy: MatchStrategy = MatchStrategy.BIJECTIVE
) -> bool:
    return compare_trees(tree, other, strategy) == 0
