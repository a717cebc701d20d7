"""
Rooting module for phylogenetic trees.

- core_rooting: outgroup rerooting and the path helpers it is built on
"""

from .core_rooting import reroot

__all__ = ["reroot"]
