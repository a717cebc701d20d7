import xml.etree.ElementTree as ET
from typing import IO, Optional

from ecotree.config import (
    DEFAULT_FONT_HEIGHT,
    DEFAULT_FONT_WIDTH,
    DEFAULT_STROKE_COLOR,
    DEFAULT_FONT_COLOR,
    DEFAULT_STROKE_WIDTH,
    FONT_MONOSPACE,
)

###############################################################################
# Constants
###############################################################################
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>'
SVG_DOCTYPE = (
    '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
    '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">'
)


###############################################################################
# SVG Element Creation Utilities
###############################################################################
def get_svg_root(width: int, height: int) -> ET.Element:
    """
    Creates an SVG root element with the given pixel width/height.
    """
    data = {
        "width": str(width),
        "height": str(height),
        "version": "1.1",
        "xmlns": "http://www.w3.org/2000/svg",
    }
    return ET.Element("svg", data)


def add_stylesheet(
    parent: ET.Element,
    stroke_color: str,
    stroke_width: int,
    font_color: str,
    font_height: int,
) -> ET.Element:
    """Add a <defs><style> block styling every line and text element."""
    defs = ET.SubElement(parent, "defs")
    style = ET.SubElement(defs, "style", {"type": "text/css"})
    style.text = (
        f"line {{ stroke: {stroke_color}; stroke-width: {stroke_width}; }} "
        f"text {{ font-family: {FONT_MONOSPACE}; font-size: {font_height}px; "
        f"stroke-width: 0; fill: {font_color}; }}"
    )
    return style


###############################################################################
# Painter
###############################################################################
class SVGPainter:
    """
    Painter that collects lines and labels into an SVG document.

    The document is written to ``stream`` when ``end()`` is called; the
    stream stays open and belongs to the caller.
    """

    def __init__(
        self,
        stream: IO[str],
        font_height: int = DEFAULT_FONT_HEIGHT,
        font_width: int = DEFAULT_FONT_WIDTH,
        stroke_width: int = DEFAULT_STROKE_WIDTH,
        stroke_color: str = DEFAULT_STROKE_COLOR,
        font_color: str = DEFAULT_FONT_COLOR,
    ):
        self.stream = stream
        self._font_height = font_height
        self._font_width = font_width
        self.stroke_width = stroke_width
        self.stroke_color = stroke_color
        self.font_color = font_color
        self.svg_root: Optional[ET.Element] = None

    def start(self, width: int, height: int) -> None:
        self.svg_root = get_svg_root(width, height)
        add_stylesheet(
            self.svg_root,
            self.stroke_color,
            self.stroke_width,
            self.font_color,
            self._font_height,
        )

    def end(self) -> None:
        if self.svg_root is None:
            raise RuntimeError("SVGPainter.end() called before start().")
        ET.indent(self.svg_root)
        self.stream.write(XML_DECLARATION + "\n")
        self.stream.write(SVG_DOCTYPE + "\n")
        self.stream.write(ET.tostring(self.svg_root, encoding="unicode"))
        self.stream.write("\n")
        self.svg_root = None

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, stroke: int) -> None:
        attrs = {"x1": str(x1), "y1": str(y1), "x2": str(x2), "y2": str(y2)}
        # Only strokes that differ from the stylesheet get their own width.
        if stroke != self.stroke_width:
            attrs["stroke-width"] = str(stroke)
        ET.SubElement(self._canvas(), "line", attrs)

    def draw_string(self, text: str, x: int, y: int) -> None:
        attrs = {"x": str(x), "y": str(y), "textLength": str(len(text) * self._font_width)}
        text_el = ET.SubElement(self._canvas(), "text", attrs)
        text_el.text = text

    def font_width(self) -> int:
        return self._font_width

    def font_height(self) -> int:
        return self._font_height

    def string_width(self, text: str) -> int:
        return (len(text) + 1) * self._font_width

    def _canvas(self) -> ET.Element:
        if self.svg_root is None:
            raise RuntimeError("SVGPainter used before start().")
        return self.svg_root
