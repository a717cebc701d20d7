"""
Ecotree plotting utilities (lazy import).

This package avoids importing matplotlib at package import time, so the
parser and topology code stay usable in environments without it.

Import concrete submodules directly, e.g.:
    from ecotree.plot.svg_painter import SVGPainter
    from ecotree.plot.matplotlib_painter import MatplotlibPainter
"""

# Expose submodule names for discoverability; classes are available via
# direct submodule imports to avoid eager loading.
__all__ = [
    "layout",
    "painter",
    "tree_renderer",
    "svg_painter",
    "matplotlib_painter",
    "tree_printer",
]
