"""
Custom exceptions for the ecotree package.
"""

from __future__ import annotations
from typing import NoReturn


class EcotreeError(Exception):
    """Base exception for all tree engine errors."""

    pass


class MalformedTreeError(EcotreeError):
    """Raised when Newick text cannot be turned into a usable tree."""

    def __init__(self, reason: str):
        super().__init__(f"Malformed Newick tree, {reason}.")
        self.reason = reason

    @staticmethod
    def raise_bad_distance(field: str, node_name: str) -> NoReturn:
        """
        Raises a MalformedTreeError for a branch length that is not a usable number.

        Args:
            field: The raw text found after the colon
            node_name: Name of the node carrying the distance (may be empty)

        Raises:
            MalformedTreeError: Always raised with the offending field
        """
        label = f" for '{node_name}'" if node_name else ""
        raise MalformedTreeError(f"expected a number{label}, found '{field}'")


class TreeIOError(EcotreeError):
    """Raised when reading or writing a tree file fails."""

    pass
