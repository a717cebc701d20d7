"""
Drawing capability the paint pass renders through.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Painter(Protocol):
    """A surface that accepts lines and strings in integer pixel coordinates."""

    def start(self, width: int, height: int) -> None: ...

    def end(self) -> None: ...

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, stroke: int) -> None: ...

    def draw_string(self, text: str, x: int, y: int) -> None: ...

    def font_width(self) -> int: ...

    def font_height(self) -> int: ...

    def string_width(self, text: str) -> int: ...
