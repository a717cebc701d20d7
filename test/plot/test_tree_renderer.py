from ecotree.config import RenderConfig
from ecotree.plot.painter import Painter
from ecotree.plot.tree_renderer import paint_tree
from ecotree.tree import Tree


class RecordingPainter:
    """Painter that keeps every call for inspection."""

    def __init__(self, font_height=12, font_width=7):
        self._font_height = font_height
        self._font_width = font_width
        self.calls = []

    def start(self, width, height):
        self.calls.append(("start", width, height))

    def end(self):
        self.calls.append(("end",))

    def draw_line(self, x1, y1, x2, y2, stroke):
        self.calls.append(("line", x1, y1, x2, y2, stroke))

    def draw_string(self, text, x, y):
        self.calls.append(("text", text, x, y))

    def font_width(self):
        return self._font_width

    def font_height(self):
        return self._font_height

    def string_width(self, text):
        return (len(text) + 1) * self._font_width


def test_recording_painter_satisfies_protocol():
    assert isinstance(RecordingPainter(), Painter)


def test_paint_call_sequence():
    tree = Tree.from_newick("(A:0.1,B:0.2);")
    painter = RecordingPainter()
    size = tree.paint(painter)
    assert size == (227, 34)
    assert painter.calls == [
        ("start", 227, 34),
        ("line", 5, 5, 105, 5, 1),
        ("line", 5, 11, 5, 5, 1),
        ("text", "A", 108, 10),
        ("line", 5, 17, 205, 17, 1),
        ("line", 5, 11, 5, 17, 1),
        ("text", "B", 208, 22),
        ("end",),
    ]


def test_paint_collapsed_child_draws_triangle():
    tree = Tree.from_newick("((A:0.1,B:0.2):0.1,C:0.3);")
    tree.collapse_clade(["A", "B"], label="AB")
    painter = RecordingPainter()
    paint_tree(tree, painter)
    assert painter.calls[1:-1] == [
        ("line", 5, 5, 305, 0, 1),
        ("line", 5, 5, 305, 10, 1),
        ("line", 305, 0, 305, 10, 1),
        ("line", 5, 11, 5, 5, 1),
        ("text", "AB", 308, 10),
        ("line", 5, 17, 305, 17, 1),
        ("line", 5, 11, 5, 17, 1),
        ("text", "C", 308, 22),
    ]


def test_paint_is_deterministic(base_tree):
    first, second = RecordingPainter(), RecordingPainter()
    paint_tree(base_tree, first)
    paint_tree(base_tree, second)
    assert first.calls == second.calls
    labels = [call[1] for call in first.calls if call[0] == "text"]
    assert labels == ["A", "B", "C", "D", "E"]


def test_paint_uses_config(base_tree):
    painter = RecordingPainter()
    config = RenderConfig(x_modifier=100, x_offset=0, y_offset=0, stroke_width=3)
    paint_tree(base_tree.root, painter, config)
    lines = [call for call in painter.calls if call[0] == "line"]
    assert all(call[-1] == 3 for call in lines)
    assert ("line", 40, 0, 50, 0, 3) in lines
    assert painter.calls[0] == ("start", 0 + 60 + 3 + 14, 5 * 12)
