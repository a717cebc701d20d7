"""
Painter backed by matplotlib, for raster and PDF output.

Pixel coordinates map one-to-one onto the axes data coordinates, with the
Y axis inverted so that row 0 is at the top like in the SVG output.
"""

from pathlib import Path
from typing import Optional, Union

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from ecotree.config import (
    DEFAULT_FONT_HEIGHT,
    DEFAULT_FONT_WIDTH,
    DEFAULT_STROKE_COLOR,
    DEFAULT_FONT_COLOR,
    FONT_MONOSPACE,
)

POINTS_PER_INCH = 72


class MatplotlibPainter:
    """Draws onto a matplotlib figure and saves it to ``path`` on ``end()``."""

    def __init__(
        self,
        path: Union[str, Path],
        dpi: int = 100,
        font_height: int = DEFAULT_FONT_HEIGHT,
        font_width: int = DEFAULT_FONT_WIDTH,
        stroke_color: str = DEFAULT_STROKE_COLOR,
        font_color: str = DEFAULT_FONT_COLOR,
    ):
        self.path = Path(path)
        self.dpi = dpi
        self._font_height = font_height
        self._font_width = font_width
        self.stroke_color = stroke_color
        self.font_color = font_color
        self.figure: Optional[Figure] = None
        self.ax: Optional[Axes] = None

    def start(self, width: int, height: int) -> None:
        self.figure = plt.figure(figsize=(width / self.dpi, height / self.dpi), dpi=self.dpi)
        ax = self.figure.add_axes((0.0, 0.0, 1.0, 1.0))
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)
        ax.set_axis_off()
        self.ax = ax

    def end(self) -> None:
        if self.figure is None:
            raise RuntimeError("MatplotlibPainter.end() called before start().")
        try:
            self.figure.savefig(self.path, dpi=self.dpi)
        finally:
            plt.close(self.figure)
            self.figure = None
            self.ax = None

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, stroke: int) -> None:
        self._axes().plot(
            [x1, x2],
            [y1, y2],
            color=self.stroke_color,
            linewidth=stroke * POINTS_PER_INCH / self.dpi,
            solid_capstyle="butt",
        )

    def draw_string(self, text: str, x: int, y: int) -> None:
        self._axes().text(
            x,
            y,
            text,
            color=self.font_color,
            family=FONT_MONOSPACE,
            fontsize=self._font_height * POINTS_PER_INCH / self.dpi,
            verticalalignment="baseline",
        )

    def font_width(self) -> int:
        return self._font_width

    def font_height(self) -> int:
        return self._font_height

    def string_width(self, text: str) -> int:
        return (len(text) + 1) * self._font_width

    def _axes(self) -> Axes:
        if self.ax is None:
            raise RuntimeError("MatplotlibPainter used before start().")
        return self.ax
