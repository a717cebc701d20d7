import math
import logging

from typing import List, Tuple
from ecotree.tree import Node
from ecotree.exceptions import MalformedTreeError

logger = logging.getLogger(__name__)


# ===================================================================
# 1. INPUT PREPARATION
# ===================================================================


def strip_tree_text(text: str) -> str:
    """
    Cut the input at the first ';' and drop every whitespace character.

    Args:
        text: Raw Newick text, possibly spread over several lines

    Returns:
        The compact tree description without the terminating semicolon
    """
    end = text.find(";")
    if end != -1:
        text = text[:end]
    return "".join(text.split())


# ===================================================================
# 2. STRUCTURE SCANNING
# ===================================================================


def find_closing_parenthesis(tokens: str, start: int, stop: int) -> int:
    """
    Find the parenthesis closing the one at ``start``.

    Args:
        tokens: Compact tree description
        start: Index of an opening parenthesis
        stop: Exclusive end of the segment being scanned

    Returns:
        Index of the matching closing parenthesis

    Raises:
        MalformedTreeError: If the parenthesis is never closed inside the segment
    """
    depth = 0
    for index in range(start, stop):
        char = tokens[index]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return index
    raise MalformedTreeError("unmatched parentheses")


def split_children(tokens: str, start: int, stop: int) -> List[Tuple[int, int]]:
    """
    Split the inside of a parenthesised group on its depth-zero commas.

    Args:
        tokens: Compact tree description
        start: First index inside the group
        stop: Index of the group's closing parenthesis

    Returns:
        List of (start, stop) ranges, one per child
    """
    ranges: List[Tuple[int, int]] = []
    depth = 0
    segment_start = start
    for index in range(start, stop):
        char = tokens[index]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif char == "," and depth == 0:
            ranges.append((segment_start, index))
            segment_start = index + 1
    ranges.append((segment_start, stop))
    return ranges


# ===================================================================
# 3. METADATA PROCESSING
# ===================================================================


def parse_distance(field: str, node_name: str = "") -> float:
    """
    Convert the text after a colon into a branch length.

    Raises:
        MalformedTreeError: For non-numeric, non-finite or negative values
    """
    try:
        value = float(field)
    except ValueError:
        MalformedTreeError.raise_bad_distance(field, node_name)
    if not math.isfinite(value) or value < 0:
        MalformedTreeError.raise_bad_distance(field, node_name)
    return value


def parse_metadata(meta: str) -> Tuple[str, float]:
    """
    Split a node's trailing ``name:distance`` text on its first colon.

    Args:
        meta: Text following a node's closing parenthesis, or a whole leaf

    Returns:
        Tuple of (name, distance); a missing distance reads as 0.0
    """
    if "(" in meta or ")" in meta:
        raise MalformedTreeError(f"unmatched parentheses near '{meta}'")
    name, _, field = meta.partition(":")
    distance = parse_distance(field, name) if field else 0.0
    return name, distance


# ===================================================================
# 4. MAIN PARSING
# ===================================================================


def parse_newick(text: str) -> Node:
    """
    Parse a Newick string into a tree and return its root node.

    The tree is built with an explicit stack of (node, start, stop) segments,
    so nesting depth is not limited by the interpreter's recursion limit.

    Args:
        text: Newick text; anything after the first ';' is ignored

    Returns:
        Root node of the parsed tree

    Raises:
        MalformedTreeError: On unbalanced parentheses, unnamed leaves, bad
            distances, or a root with fewer than two children
    """
    tokens = strip_tree_text(text)
    if not tokens:
        raise MalformedTreeError("no tree found")

    root = Node()
    stack: List[Tuple[Node, int, int]] = [(root, 0, len(tokens))]

    while stack:
        node, start, stop = stack.pop()
        meta_start = start

        if start < stop and tokens[start] == "(":
            close = find_closing_parenthesis(tokens, start, stop)
            for child_start, child_stop in split_children(tokens, start + 1, close):
                child = Node()
                node.append_child(child)
                stack.append((child, child_start, child_stop))
            meta_start = close + 1

        node.name, node.distance = parse_metadata(tokens[meta_start:stop])
        if not node.children and not node.name:
            raise MalformedTreeError("found a leaf without a name")

    if len(root.children) < 2:
        raise MalformedTreeError("not enough leaves")

    logger.debug("Parsed Newick tree with %d leaves", root.number_of_leaves())
    return root
