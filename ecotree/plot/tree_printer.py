"""
ASCII Tree Printer for Node objects.

This module provides functions to print tree structures in ASCII format,
including side-by-side comparison of two trees.
"""

from typing import List, Optional, Tuple, Union

from ecotree.config import DISTANCE_DECIMALS
from ecotree.tree import Node, Tree


def _label(node: Node, show_distances: bool) -> str:
    if node.name:
        label = node.name
    else:
        label = "●"  # Simple dot for internal nodes
    if node.collapsed:
        label += f" [{node.number_of_leaves()} collapsed]"
    if show_distances and node.parent is not None:
        label += f" ({node.distance:.{DISTANCE_DECIMALS}f})"
    return label


def render_tree_lines(
    node: Node, prefix: str = "", is_last: bool = True, show_distances: bool = True
) -> List[str]:
    """
    Render a tree as ASCII art lines.

    Args:
        node: Tree node to render
        prefix: Current line prefix for indentation
        is_last: Whether this is the last child at current level
        show_distances: Append each branch length to its node label

    Returns:
        List[str]: Lines representing the tree structure
    """
    lines: List[str] = []
    stack: List[Tuple[Node, str, bool]] = [(node, prefix, is_last)]
    while stack:
        current, current_prefix, current_is_last = stack.pop()
        label = _label(current, show_distances)

        # Add current node with proper tree structure
        if current_prefix == "":  # Root node
            lines.append(label)
        else:
            connector = "└── " if current_is_last else "├── "
            lines.append(f"{current_prefix}{connector}{label}")
        child_prefix: str = current_prefix + ("    " if current_is_last else "│   ")

        # Collapsed clades are drawn as a single line
        if current.collapsed:
            continue

        last_index = len(current.children) - 1
        for i in range(last_index, -1, -1):
            stack.append((current.children[i], child_prefix, i == last_index))

    return lines


def render_ascii(tree: Union[Tree, Node], show_distances: bool = True) -> str:
    """Return the ASCII drawing of a tree as one string."""
    root = tree.root if isinstance(tree, Tree) else tree
    return "\n".join(render_tree_lines(root, show_distances=show_distances))


def print_tree(tree: Union[Tree, Node], show_distances: bool = True) -> None:
    """
    Print a single tree in ASCII format.

    Args:
        tree: The tree or its root node
    """
    print(render_ascii(tree, show_distances))


def trees_to_string(
    tree1: Union[Tree, Node],
    tree2: Union[Tree, Node],
    labels: Optional[Tuple[str, str]] = None,
) -> str:
    """
    Return string representation of two trees side by side.

    Args:
        tree1: First tree
        tree2: Second tree
        labels: Optional headers printed above each tree

    Returns:
        String containing the side-by-side tree representation
    """
    lines1: List[str] = render_ascii(tree1).split("\n")
    lines2: List[str] = render_ascii(tree2).split("\n")

    max_width1: int = max(len(line) for line in lines1) if lines1 else 0
    max_lines: int = max(len(lines1), len(lines2))

    lines1.extend([" " * max_width1] * (max_lines - len(lines1)))
    lines2.extend([""] * (max_lines - len(lines2)))

    separator = " │ "
    result_lines: List[str] = []
    if labels:
        result_lines.append(f"{labels[0].ljust(max_width1)}{separator}{labels[1]}")
    for line1, line2 in zip(lines1, lines2):
        padded_line1 = line1.ljust(max_width1)
        result_lines.append(f"{padded_line1}{separator}{line2}")

    return "\n".join(result_lines)
