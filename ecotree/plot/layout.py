"""
Layout calculation for rectangular phylograms.

X grows with the branch lengths from the root, Y enumerates the leaves (and
collapsed clades) top to bottom in storage order. Internal nodes sit halfway
between their first and last child.
"""

from dataclasses import dataclass
from typing import List, Tuple
from ecotree.tree import Node
from ecotree.config import COLLAPSED_MINIMUM_WIDTH


@dataclass
class LayoutResult:
    """Summary of a layout pass."""

    width: float  # Largest X assigned to any node.
    height: float  # Number of rows times the vertical scale.
    rows: int  # Leaves plus collapsed clades.


def calculate_layout(root: Node, x_scale: float = 1.0, y_scale: float = 1.0) -> LayoutResult:
    """
    Write ``x`` and ``y`` onto every visible node of the tree.

    Args:
        root: The root node of the tree; it is placed at X = 0.
        x_scale: Multiplier applied to branch lengths.
        y_scale: Vertical distance between two consecutive rows.

    Returns:
        A LayoutResult with the overall extent of the drawing.
    """
    rows = 0
    width = 0.0
    # (node, x, children_placed); a node is revisited once its children have rows.
    stack: List[Tuple[Node, float, bool]] = [(root, 0.0, False)]
    while stack:
        node, x, children_placed = stack.pop()
        if children_placed:
            node.y = (node.children[0].y + node.children[-1].y) / 2
            continue

        if node.collapsed:
            x += max(node.max_distance_to_leaf(), COLLAPSED_MINIMUM_WIDTH) * x_scale
        node.x = x
        width = max(width, x)

        # Leaves and collapsed clades each take one row.
        if not node.children or node.collapsed:
            node.y = rows * y_scale
            rows += 1
            continue

        stack.append((node, x, True))
        for child in reversed(node.children):
            stack.append((child, x + child.distance * x_scale, False))
    return LayoutResult(width=width, height=rows * y_scale, rows=rows)
