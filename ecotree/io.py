import logging
from pathlib import Path
from typing import IO, Optional, Union

from ecotree.config import RenderConfig
from ecotree.exceptions import TreeIOError
from ecotree.tree import Tree

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_newick(f: IO[str]) -> Tree:
    """Parse the first tree found in an open text stream."""
    return Tree.from_newick(f.read())


def dump_newick(tree: Tree, f: IO[str]) -> None:
    f.write(tree.to_newick())
    f.write("\n")


def read_newick(path: PathLike) -> Tree:
    try:
        with open(path) as f:
            newick_string: str = f.read()
    except OSError as e:
        raise TreeIOError(f"Unable to read tree file '{path}': {e}") from e

    tree = Tree.from_newick(newick_string)
    logger.info("Read tree with %d leaves from %s", tree.size(), path)
    return tree


def write_newick(tree: Tree, path: PathLike) -> None:
    try:
        with open(path, "w") as f:
            dump_newick(tree, f)
    except OSError as e:
        raise TreeIOError(f"Unable to write tree file '{path}': {e}") from e


def write_svg(tree: Tree, path: PathLike, config: Optional[RenderConfig] = None) -> None:
    from ecotree.plot.svg_painter import SVGPainter

    config = config or RenderConfig()
    try:
        with open(path, "w") as f:
            painter = SVGPainter(
                f,
                stroke_width=config.stroke_width,
                stroke_color=config.stroke_color,
                font_color=config.font_color,
            )
            tree.paint(painter, config)
    except OSError as e:
        raise TreeIOError(f"Unable to write SVG file '{path}': {e}") from e


def write_image(
    tree: Tree, path: PathLike, config: Optional[RenderConfig] = None, dpi: int = 100
) -> None:
    """Render the tree with matplotlib; the format follows the file suffix."""
    from ecotree.plot.matplotlib_painter import MatplotlibPainter

    config = config or RenderConfig()
    painter = MatplotlibPainter(
        path, dpi=dpi, stroke_color=config.stroke_color, font_color=config.font_color
    )
    try:
        tree.paint(painter, config)
    except OSError as e:
        raise TreeIOError(f"Unable to write image file '{path}': {e}") from e
