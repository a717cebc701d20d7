"""
Newick format parser module for phylogenetic trees.

This module provides functionality to parse Newick format strings into tree structures
and the scanning helpers the parser is built from.
"""

from .newick_parser import (
    parse_newick,
    strip_tree_text,
    find_closing_parenthesis,
    split_children,
    parse_metadata,
    parse_distance,
)

__all__ = [
    "parse_newick",
    "strip_tree_text",
    "find_closing_parenthesis",
    "split_children",
    "parse_metadata",
    "parse_distance",
]
