from __future__ import annotations
import logging
from functools import cmp_to_key
from typing import Optional, Any, Dict, List, Tuple, Union, Iterable, TYPE_CHECKING

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self

from ecotree.config import DISTANCE_DECIMALS

if TYPE_CHECKING:
    from ecotree.comparison import MatchStrategy
    from ecotree.config import RenderConfig
    from ecotree.plot.layout import LayoutResult
    from ecotree.plot.painter import Painter

logger = logging.getLogger(__name__)


class Node:
    """
    Tree vertex owning its children.

    A node carries a name (meaningful on leaves), the branch length to its
    parent, a non-owning parent reference, the outgroup and collapsed flags,
    and the x/y coordinates written by the layout pass.
    """

    __slots__ = (
        "children",
        "parent",
        "name",
        "distance",
        "outgroup",
        "collapsed",
        "x",
        "y",
    )

    # Type annotations (for static analysis, not runtime)
    children: List[Self]
    parent: Optional[Self]
    name: str
    distance: float
    outgroup: bool
    collapsed: bool
    x: float
    y: float

    def __init__(
        self,
        name: str = "",
        distance: float = 0.0,
        children: Optional[List[Self]] = None,
    ):
        self.parent = None
        self.name = name
        self.distance = float(distance)
        self.outgroup = False
        self.collapsed = False
        self.x = 0.0
        self.y = 0.0
        self.children = []
        for child in children or []:
            self.append_child(child)

    def __repr__(self) -> str:
        return f"Node('{self.name}', {self.distance})"

    # ------------------------------------------------------------------------
    # Structural predicates
    # ------------------------------------------------------------------------
    def is_leaf(self) -> bool:
        return len(self.children) == 0

    def is_internal(self) -> bool:
        return bool(self.children)

    def is_root(self) -> bool:
        return self.parent is None

    def get_root(self) -> Self:
        cur = self
        while cur.parent is not None:
            cur = cur.parent
        return cur

    # ------------------------------------------------------------------------
    # append_child / remove_child keep the parent pointers in sync
    # ------------------------------------------------------------------------
    def append_child(self, node: Self) -> None:
        """Attach ``node`` as the last child, detaching it from any previous parent."""
        if node.parent is not None:
            node.parent.remove_child(node)
        node.parent = self
        self.children.append(node)

    def remove_child(self, node: Self) -> None:
        """Detach ``node`` if it is a child of this node (compared by identity)."""
        remaining = [c for c in self.children if c is not node]
        if len(remaining) == len(self.children):
            return
        self.children = remaining
        node.parent = None

    def replace_child(self, old_child: Self, new_child: Self) -> None:
        """Replaces an existing child node with a new one."""
        index = next(
            (i for i, c in enumerate(self.children) if c is old_child), None
        )
        if index is None:
            raise ValueError("old_child is not a child of this node.")

        if new_child.parent is not None:
            new_child.parent.remove_child(new_child)
        self.children[index] = new_child

        # Update parent pointers
        old_child.parent = None
        new_child.parent = self

    # ------------------------------------------------------------------------
    # traversal
    # ------------------------------------------------------------------------
    def traverse(self) -> List[Self]:
        """
        Return a list of all nodes in the subtree rooted at this node (Pre-order).
        Uses an iterative stack approach to avoid recursion depth issues.
        """
        nodes: List[Self] = []
        stack: List[Self] = [self]

        while stack:
            current = stack.pop()
            nodes.append(current)
            # Add children in reverse to maintain left-to-right visit order (pre-order)
            for child in reversed(current.children):
                stack.append(child)
        return nodes

    def get_leaves(self) -> List[Self]:
        """Return all leaf nodes in the subtree rooted at this node, left to right."""
        return [node for node in self.traverse() if not node.children]

    def get_current_order(self) -> Tuple[str, ...]:
        """
        Return the current order of taxa in the tree as a tuple.
        """
        return tuple(leaf.name for leaf in self.get_leaves())

    def number_of_leaves(self) -> int:
        return len(self.get_leaves())

    def find_leaf(self, name: str) -> Optional[Self]:
        """Return the first leaf (pre-order) called ``name``, or None."""
        for node in self.traverse():
            if not node.children and node.name == name:
                return node
        return None

    # ------------------------------------------------------------------------
    # distances
    # ------------------------------------------------------------------------
    def distance_from_root(self) -> float:
        total = 0.0
        cur = self
        while cur.parent is not None:
            total += cur.distance
            cur = cur.parent
        return total

    def _leaf_distances(self) -> Dict[int, Tuple[float, float]]:
        # (shortest, longest) path to a leaf for every node, children first.
        spans: Dict[int, Tuple[float, float]] = {}
        for node in reversed(self.traverse()):
            if not node.children:
                spans[id(node)] = (0.0, 0.0)
                continue
            below = [
                (spans[id(c)][0] + c.distance, spans[id(c)][1] + c.distance)
                for c in node.children
            ]
            spans[id(node)] = (min(b[0] for b in below), max(b[1] for b in below))
        return spans

    def max_distance_to_leaf(self) -> float:
        """Longest path length from this node down to one of its leaves."""
        return self._leaf_distances()[id(self)][1]

    def min_distance_to_leaf(self) -> float:
        """Shortest path length from this node down to one of its leaves."""
        return self._leaf_distances()[id(self)][0]

    def find_lowest_common_ancestor(self, other: "Node") -> Optional["Node"]:
        """
        Find the lowest common ancestor (LCA) of this node and another node.

        Args:
            other: The other node to find LCA with

        Returns:
            Node representing the LCA, or None if no common ancestor exists
        """
        if self is other:
            return self

        # Get paths to root for both nodes
        self_ancestors: set[int] = set()
        current: Optional[Node] = self
        while current is not None:
            self_ancestors.add(id(current))
            current = current.parent

        # Find first common ancestor in other's path to root
        current = other
        while current is not None:
            if id(current) in self_ancestors:
                return current
            current = current.parent

        return None

    # ------------------------------------------------------------------------
    # copying & ordering
    # ------------------------------------------------------------------------
    def _shallow_copy(self) -> Self:
        new_node = type(self)(name=self.name, distance=self.distance)
        new_node.outgroup = self.outgroup
        new_node.collapsed = self.collapsed
        return new_node

    def deep_copy(self) -> Self:
        new_root = self._shallow_copy()

        # Copy children level by level and set their parent references
        stack: List[Tuple[Self, Self]] = [(self, new_root)]
        while stack:
            source, target = stack.pop()
            for child in source.children:
                child_copy = child._shallow_copy()
                target.append_child(child_copy)
                stack.append((child, child_copy))
        return new_root

    def sort_children(self, strategy: Optional["MatchStrategy"] = None) -> None:
        """Sort every child list in this subtree, ordered by the tree comparator."""
        from ecotree.comparison import MatchStrategy, compare_nodes

        strategy = strategy or MatchStrategy.BIJECTIVE
        key = cmp_to_key(lambda a, b: compare_nodes(a, b, strategy=strategy))
        # Children before parents, so every subtree is ordered before it is compared.
        for node in reversed(self.traverse()):
            if len(node.children) > 1:
                node.children.sort(key=key)

    # ------------------------------------------------------------------------
    # Newick serialization
    # ------------------------------------------------------------------------
    def to_newick(self) -> str:
        """Return this subtree in Newick format; a root is terminated by ';'."""
        newick = self._to_newick()
        if self.parent is None:
            newick += ";"
        return newick

    def _to_newick(self) -> str:
        rendered: Dict[int, str] = {}
        stack: List[Tuple[Node, bool]] = [(self, False)]

        # Post-order: children are rendered before their parent is assembled.
        while stack:
            node, expanded = stack.pop()
            if node.children and not expanded:
                stack.append((node, True))
                for child in reversed(node.children):
                    stack.append((child, False))
                continue

            label = f"{node.name}:{node.distance:.{DISTANCE_DECIMALS}f}"
            if node.children:
                inner = ",".join(rendered.pop(id(child)) for child in node.children)
                label = f"({inner}){label}"
            rendered[id(node)] = label

        return rendered[id(self)]


NodeRef = Union[str, Node]


class Tree:
    """
    A rooted phylogenetic tree owning exactly one root Node.

    Topology operations replace ``root`` when the root moves. Operations whose
    preconditions are not met are no-ops and report ``False`` or ``None``.
    """

    __slots__ = ("root",)

    def __init__(self, root: Optional[Node] = None):
        self.root: Node = root if root is not None else Node()

    @classmethod
    def from_newick(cls, text: str) -> "Tree":
        from ecotree.parser import parse_newick

        return cls(parse_newick(text))

    def copy(self) -> "Tree":
        return Tree(self.root.deep_copy())

    # ------------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------------
    def get_leaves(self) -> List[Node]:
        return self.root.get_leaves()

    def find(self, name: str) -> Optional[Node]:
        """Return the first leaf called ``name``, or None when there is none."""
        return self.root.find_leaf(name)

    def size(self) -> int:
        """Number of leaves."""
        return self.root.number_of_leaves()

    def is_valid(self) -> bool:
        return self.root.is_internal() and self.size() > 1

    def _resolve(self, target: NodeRef) -> Optional[Node]:
        if isinstance(target, Node):
            return target if target.get_root() is self.root else None
        return self.find(target)

    # ------------------------------------------------------------------------
    # Topology operations
    # ------------------------------------------------------------------------
    def remove_leaf(self, target: NodeRef) -> bool:
        """Remove a leaf by name or node; returns False when nothing was removed."""
        from ecotree.topology_ops import remove_leaf

        leaf = self._resolve(target)
        if leaf is None:
            logger.warning("Cannot remove %r: no such leaf in this tree.", target)
            return False
        new_root = remove_leaf(self.root, leaf)
        if new_root is None:
            return False
        self.root = new_root
        return True

    def reroot(self, target: NodeRef) -> bool:
        """Reroot next to ``target`` (a name or node), flagging it as the outgroup."""
        from ecotree.rooting import reroot

        node = self._resolve(target)
        if node is None:
            logger.warning("Cannot reroot on %r: no such node in this tree.", target)
            return False
        new_root = reroot(self.root, node)
        if new_root is None:
            return False
        self.root = new_root
        return True

    def make_binary(self) -> None:
        from ecotree.topology_ops import make_binary

        make_binary(self.root)

    def validate(self) -> None:
        """Collapse internal nodes that were left with a single child."""
        from ecotree.topology_ops import collapse_unary_nodes

        self.root = collapse_unary_nodes(self.root)

    def sort_children(self) -> None:
        self.root.sort_children()

    def collapse_clade(
        self, names: Iterable[str], label: Optional[str] = None
    ) -> Optional[Node]:
        """
        Mark the smallest clade holding all ``names`` as collapsed.

        Args:
            names: Leaf names that must fall inside the clade
            label: Optional name given to the collapsed node

        Returns:
            The collapsed node, or None if a name is unknown
        """
        clade: Optional[Node] = None
        for name in names:
            leaf = self.find(name)
            if leaf is None:
                logger.warning("Cannot collapse clade: unknown leaf %r.", name)
                return None
            clade = leaf if clade is None else clade.find_lowest_common_ancestor(leaf)
        if clade is None:
            return None
        clade.collapsed = True
        if label is not None:
            clade.name = label
        return clade

    def expand_all(self) -> None:
        for node in self.root.traverse():
            node.collapsed = False

    # ------------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------------
    def compare(
        self, other: "Tree", strategy: Optional["MatchStrategy"] = None
    ) -> int:
        from ecotree.comparison import MatchStrategy, compare_nodes

        return compare_nodes(
            self.root, other.root, strategy=strategy or MatchStrategy.BIJECTIVE
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Tree):
            return NotImplemented
        return self.compare(other) == 0

    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------------
    def to_newick(self) -> str:
        self.validate()
        return self.root.to_newick()

    def __str__(self) -> str:
        return self.to_newick()

    def __repr__(self) -> str:
        return f"Tree({self.size()} leaves)"

    def calculate_xy(self, x_scale: float = 1.0, y_scale: float = 1.0) -> "LayoutResult":
        from ecotree.plot.layout import calculate_layout

        return calculate_layout(self.root, x_scale=x_scale, y_scale=y_scale)

    def paint(
        self, painter: "Painter", config: Optional["RenderConfig"] = None
    ) -> Tuple[int, int]:
        from ecotree.plot.tree_renderer import paint_tree

        return paint_tree(self.root, painter, config)
