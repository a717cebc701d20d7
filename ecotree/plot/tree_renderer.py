"""
Tree rendering through the Painter drawing capability.

The paint pass lays the tree out, sizes the canvas from the leaf labels and
then walks the tree depth-first, emitting the same sequence of drawing calls
for the same tree and painter metrics.
"""

import logging
from typing import List, Optional, Tuple, Union
from ecotree.tree import Node, Tree
from ecotree.config import RenderConfig
from ecotree.plot.layout import calculate_layout
from ecotree.plot.painter import Painter

# -------------------- Main Rendering Function --------------------


def paint_tree(
    tree: Union[Tree, Node],
    painter: Painter,
    config: Optional[RenderConfig] = None,
) -> Tuple[int, int]:
    """
    Render a tree onto ``painter``.

    Args:
        tree: Tree (or root node) to draw
        painter: Drawing surface, started and ended by this call
        config: Offsets, scale and stroke; defaults to RenderConfig()

    Returns:
        The (width, height) canvas size passed to ``painter.start``
    """
    config = config or RenderConfig()
    logger = logging.getLogger(config.logger_name)
    root = tree.root if isinstance(tree, Tree) else tree

    layout = calculate_layout(root, x_scale=1.0, y_scale=1.0)
    font_height = painter.font_height()
    width, height = _canvas_size(root, painter, config, layout.rows)
    logger.debug("Painting %d rows on a %dx%d canvas", layout.rows, width, height)

    painter.start(width, height)
    _paint_node(root, painter, config, font_height)
    painter.end()
    return width, height


# -------------------- Geometry Helpers --------------------


def _to_pixels(node: Node, config: RenderConfig, font_height: int) -> Tuple[int, int]:
    return (
        config.x_offset + round(node.x * config.x_modifier),
        config.y_offset + round(node.y * font_height),
    )


def _is_labelled(node: Node) -> bool:
    return not node.children or node.collapsed


def _visible_nodes(root: Node):
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        if not node.collapsed:
            stack.extend(node.children)


def _canvas_size(
    root: Node, painter: Painter, config: RenderConfig, rows: int
) -> Tuple[int, int]:
    font_height = painter.font_height()
    width = 0
    for node in _visible_nodes(root):
        x, _ = _to_pixels(node, config, font_height)
        if _is_labelled(node):
            x += config.label_x_offset + painter.string_width(node.name)
        width = max(width, x)
    height = rows * font_height + 2 * config.y_offset
    return width + config.x_offset, height


# -------------------- Drawing --------------------


def _paint_node(root: Node, painter: Painter, config: RenderConfig, font_height: int) -> None:
    # A parent's edge to a child is drawn right before that child's subtree.
    stack: List[Tuple[Node, Optional[Node]]] = [(root, None)]
    while stack:
        node, parent = stack.pop()
        x, y = _to_pixels(node, config, font_height)
        if parent is not None:
            _paint_edge(parent, node, painter, config, font_height)

        if _is_labelled(node):
            painter.draw_string(node.name, x + config.label_x_offset, y + config.label_y_offset)
            continue
        for child in reversed(node.children):
            stack.append((child, node))


def _paint_edge(
    parent: Node, child: Node, painter: Painter, config: RenderConfig, font_height: int
) -> None:
    x, y = _to_pixels(parent, config, font_height)
    child_x, child_y = _to_pixels(child, config, font_height)
    stroke = config.stroke_width
    if child.collapsed:
        # Triangle: apex at the parent's X, base spanning one row.
        top = child_y - font_height // 2 + 1
        bottom = child_y + font_height // 2 - 1
        painter.draw_line(x, child_y, child_x, top, stroke)
        painter.draw_line(x, child_y, child_x, bottom, stroke)
        painter.draw_line(child_x, top, child_x, bottom, stroke)
    else:
        painter.draw_line(x, child_y, child_x, child_y, stroke)
    painter.draw_line(x, y, x, child_y, stroke)
