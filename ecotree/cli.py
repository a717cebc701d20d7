import logging
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.table import Table

from ecotree.comparison import MatchStrategy, compare_trees
from ecotree.config import DISTANCE_DECIMALS, RenderConfig
from ecotree.distances import path_length_matrix
from ecotree.exceptions import EcotreeError
from ecotree.io import read_newick, write_newick, write_svg, write_image
from ecotree.plot.tree_printer import render_ascii
from ecotree.tree import Tree

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

console = Console()


def _load(path: str) -> Tree:
    try:
        return read_newick(path)
    except EcotreeError as e:
        raise click.ClickException(str(e)) from e


def _emit(tree: Tree, out: Optional[str]) -> None:
    if out is None:
        click.echo(tree.to_newick())
        return
    try:
        write_newick(tree, out)
    except EcotreeError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug messages.")
def main(verbose: bool) -> None:
    """Read, rearrange, compare and draw Newick trees."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT
    )


@main.command()
@click.argument("path")
@click.option("--no-distances", is_flag=True, help="Hide branch lengths.")
def show(path: str, no_distances: bool) -> None:
    """Print a tree as ASCII art."""
    tree = _load(path)
    console.print(
        render_ascii(tree, show_distances=not no_distances), markup=False, highlight=False
    )
    console.print(f"[bold]{tree.size()}[/bold] leaves")


@main.command()
@click.argument("path")
@click.argument("outgroup")
@click.option("-o", "--out", default=None, help="Write the tree here instead of stdout.")
def reroot(path: str, outgroup: str, out: Optional[str]) -> None:
    """Reroot a tree on the leaf OUTGROUP."""
    tree = _load(path)
    if not tree.reroot(outgroup):
        raise click.ClickException(f"Cannot reroot on '{outgroup}'.")
    _emit(tree, out)


@main.command()
@click.argument("path")
@click.argument("names", nargs=-1, required=True)
@click.option("-o", "--out", default=None, help="Write the tree here instead of stdout.")
def remove(path: str, names: Tuple[str, ...], out: Optional[str]) -> None:
    """Remove the leaves NAMES from a tree."""
    tree = _load(path)
    for name in names:
        if not tree.remove_leaf(name):
            raise click.ClickException(f"Cannot remove leaf '{name}'.")
    _emit(tree, out)


@main.command()
@click.argument("path")
@click.option("-o", "--out", default=None, help="Write the tree here instead of stdout.")
def binary(path: str, out: Optional[str]) -> None:
    """Resolve polytomies into a strictly binary tree."""
    tree = _load(path)
    tree.make_binary()
    _emit(tree, out)


@main.command()
@click.argument("first")
@click.argument("second")
@click.option(
    "--strategy",
    type=click.Choice([s.value for s in MatchStrategy]),
    default=MatchStrategy.BIJECTIVE.value,
    show_default=True,
    help="How children are matched up.",
)
def compare(first: str, second: str, strategy: str) -> None:
    """Compare two trees; exits with status 1 when they differ."""
    result = compare_trees(_load(first), _load(second), MatchStrategy(strategy))
    if result == 0:
        console.print("[green]equal[/green]")
    else:
        console.print("[red]different[/red]")
        raise SystemExit(1)


@main.command()
@click.argument("path")
def distances(path: str) -> None:
    """Print the leaf-to-leaf path length matrix."""
    names, matrix = path_length_matrix(_load(path))
    table = Table(show_lines=True)
    table.add_column("")
    for name in names:
        table.add_column(name, justify="right")
    for name, row in zip(names, matrix):
        table.add_row(name, *(f"{value:.{DISTANCE_DECIMALS}f}" for value in row))
    console.print(table)


@main.command()
@click.argument("path")
@click.argument("out")
@click.option(
    "--collapse",
    multiple=True,
    help="Comma separated leaf names whose clade is drawn collapsed.",
)
@click.option("--x-modifier", type=float, default=None, help="Pixels per branch length unit.")
@click.option("--dpi", type=int, default=100, show_default=True, help="Raster resolution.")
def render(
    path: str,
    out: str,
    collapse: Tuple[str, ...],
    x_modifier: Optional[float],
    dpi: int,
) -> None:
    """Draw a tree to OUT; .svg uses the SVG painter, other suffixes matplotlib."""
    tree = _load(path)
    for clade in collapse:
        names = [name for name in clade.split(",") if name]
        if tree.collapse_clade(names, label=clade) is None:
            raise click.ClickException(f"Cannot collapse clade '{clade}'.")

    config = RenderConfig()
    if x_modifier is not None:
        config.x_modifier = x_modifier
    try:
        if Path(out).suffix.lower() == ".svg":
            write_svg(tree, out, config)
        else:
            write_image(tree, out, config, dpi=dpi)
    except EcotreeError as e:
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    main()
