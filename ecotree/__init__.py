"""Core ecotree package: Newick trees, rerooting, comparison and drawing."""

from .exceptions import EcotreeError, MalformedTreeError, TreeIOError
from .tree import Node, Tree
from .parser import parse_newick
from .comparison import MatchStrategy, compare_nodes, compare_trees

__all__ = [
    "Node",
    "Tree",
    "parse_newick",
    "MatchStrategy",
    "compare_nodes",
    "compare_trees",
    "EcotreeError",
    "MalformedTreeError",
    "TreeIOError",
    "RenderConfig",
    "SVGPainter",
    "MatplotlibPainter",
]


def __getattr__(name):
    if name == "RenderConfig":
        from .config import RenderConfig

        return RenderConfig
    if name == "SVGPainter":
        from .plot.svg_painter import SVGPainter

        return SVGPainter
    if name == "MatplotlibPainter":
        # matplotlib is only imported when this painter is asked for
        from .plot.matplotlib_painter import MatplotlibPainter

        return MatplotlibPainter
    raise AttributeError(name)
