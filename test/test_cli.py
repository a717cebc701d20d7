import pytest
from click.testing import CliRunner

from ecotree.cli import main
from ecotree.tree import Tree


@pytest.fixture
def tree_file(tmp_path, base_newick):
    path = tmp_path / "tree.nwk"
    path.write_text(base_newick + "\n")
    return path


def run(*args):
    return CliRunner().invoke(main, [str(arg) for arg in args])


def test_show(tree_file):
    result = run("show", tree_file)
    assert result.exit_code == 0
    assert "A (0.10000)" in result.output
    assert "5 leaves" in result.output


def test_reroot_to_stdout(tree_file):
    result = run("reroot", tree_file, "B")
    assert result.exit_code == 0
    tree = Tree.from_newick(result.output)
    assert tree == Tree.from_newick("(B:0.1,(A:0.1,((C:0.1,D:0.1):0.2,E:0.8):0.1):0.1);")


def test_reroot_unknown_leaf(tree_file):
    result = run("reroot", tree_file, "Z")
    assert result.exit_code == 1
    assert "Cannot reroot on 'Z'" in result.output


def test_remove_to_file(tree_file, tmp_path):
    out = tmp_path / "pruned.nwk"
    result = run("remove", tree_file, "A", "E", "-o", out)
    assert result.exit_code == 0
    assert Tree.from_newick(out.read_text()).root.get_current_order() == ("B", "C", "D")


def test_binary(tmp_path):
    path = tmp_path / "star.nwk"
    path.write_text("(A:1,B:1,C:1);")
    result = run("binary", path)
    assert result.exit_code == 0
    assert result.output.strip() == "(A:1.00000,(B:1.00000,C:1.00000):0.00000):0.00000;"


def test_compare(tree_file, tmp_path):
    other = tmp_path / "other.nwk"
    other.write_text("(E:0.5,((B:0.2,A:0.1):0.1,(D:0.1,C:0.1):0.2):0.3);")
    assert run("compare", tree_file, other).exit_code == 0

    other.write_text("(E:0.5,((B:0.2,A:0.1):0.1,(D:0.1,C:0.3):0.2):0.3);")
    result = run("compare", tree_file, other)
    assert result.exit_code == 1
    assert "different" in result.output


def test_distances(tree_file):
    result = run("distances", tree_file)
    assert result.exit_code == 0
    assert "1.10000" in result.output


def test_render_svg_with_collapse(tree_file, tmp_path):
    out = tmp_path / "tree.svg"
    result = run("render", tree_file, out, "--collapse", "C,D")
    assert result.exit_code == 0
    assert ">C,D</text>" in out.read_text()


def test_render_png(tree_file, tmp_path):
    out = tmp_path / "tree.png"
    result = run("render", tree_file, out, "--dpi", 50)
    assert result.exit_code == 0
    assert out.exists()


def test_malformed_input(tmp_path):
    path = tmp_path / "bad.nwk"
    path.write_text("(A,B")
    result = run("show", path)
    assert result.exit_code == 1
    assert "Malformed Newick tree" in result.output


def test_missing_input(tmp_path):
    result = run("show", tmp_path / "missing.nwk")
    assert result.exit_code == 1
    assert "Unable to read tree file" in result.output
