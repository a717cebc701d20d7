"""
In-place topology operations on Node graphs.
"""

from .pruning import remove_leaf
from .binary import make_binary, collapse_unary_nodes

__all__ = ["remove_leaf", "make_binary", "collapse_unary_nodes"]
