import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from ecotree.plot.matplotlib_painter import MatplotlibPainter  # noqa: E402

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


def test_png_output(base_tree, tmp_path):
    out = tmp_path / "tree.png"
    base_tree.paint(MatplotlibPainter(out))
    assert out.read_bytes().startswith(PNG_SIGNATURE)


def test_pdf_output(base_tree, tmp_path):
    out = tmp_path / "tree.pdf"
    base_tree.paint(MatplotlibPainter(out))
    assert out.read_bytes().startswith(b"%PDF")


def test_figure_is_closed(base_tree, tmp_path):
    before = len(plt.get_fignums())
    painter = MatplotlibPainter(tmp_path / "tree.png")
    base_tree.paint(painter)
    assert painter.figure is None
    assert len(plt.get_fignums()) == before


def test_artists_match_drawing_calls(tmp_path):
    painter = MatplotlibPainter(tmp_path / "tree.png")
    painter.start(100, 50)
    painter.draw_line(0, 0, 10, 10, 1)
    painter.draw_string("A", 12, 10)
    assert len(painter.ax.lines) == 1
    assert [t.get_text() for t in painter.ax.texts] == ["A"]
    assert painter.ax.get_ylim() == (50, 0)
    painter.end()


def test_painter_requires_start(tmp_path):
    painter = MatplotlibPainter(tmp_path / "tree.png")
    with pytest.raises(RuntimeError):
        painter.draw_string("A", 0, 0)
