"""Tree node data model and core tree operations."""

import logging
import weakref
from collections import deque
from typing import Any, Callable, Deque, Generic, Iterable, Iterator, List, Optional, TypeVar
from uuid import UUID, uuid4

import networkx as nx

from .config import DEFAULT_DEPTH_MARKER

T = TypeVar("T")

logger = logging.getLogger(__name__)


class TreeStructureError(ValueError):
    """Raised when an operation would break the tree invariants."""


class CycleError(TreeStructureError):
    """Raised when a node would become its own ancestor."""


class TreeNode(Generic[T]):
    """
    Single node in an N-ary tree.

    Owns an ordered list of children. The parent link is a weak
    back-reference used only for upward navigation.
    """

    def __init__(self, data: T, children: Optional[Iterable["TreeNode[T]"]] = None):
        """Create a node holding ``data``, optionally attaching ``children``."""
        self.id: UUID = uuid4()
        self.data = data
        self.children: List["TreeNode[T]"] = []
        self._parent: Optional["weakref.ReferenceType[TreeNode[T]]"] = None

        if children:
            self.add_children(children)

    @property
    def parent(self) -> Optional["TreeNode[T]"]:
        """The node holding this one as a child, if any."""
        if self._parent is None:
            return None
        return self._parent()

    def add_child(self, child: "TreeNode[T]") -> "TreeNode[T]":
        """Attach ``child`` as the last child, moving it from any previous parent."""
        if child is self or any(ancestor is child for ancestor in self.ancestors()):
            raise CycleError(f"Cannot attach {child} under {self}: it would become its own ancestor")

        previous = child.parent
        if previous is not None:
            logger.debug("Moving node %s from %s to %s", child, previous, self)
            previous._discard(child)

        child._parent = weakref.ref(self)
        self.children.append(child)
        logger.debug("Attached node %s under %s", child, self)
        return child

    def add_child_value(self, data: T) -> "TreeNode[T]":
        """Wrap ``data`` in a new leaf node and attach it."""
        return self.add_child(TreeNode(data))

    def add_children(self, children: Iterable["TreeNode[T]"]) -> None:
        """Attach several nodes, in order."""
        for child in children:
            self.add_child(child)

    def remove_child(self, target: "TreeNode[T]") -> bool:
        """
        Remove ``target`` from this subtree.

        Matches by identity. Immediate children are checked first, then each
        child's subtree in order; the search stops at the first removal.

        Returns:
            True if the node was found and removed.
        """
        return self._remove_where(lambda child: child is target)

    def remove_matching_child(self, target: "TreeNode[T]") -> bool:
        """Remove the first node structurally equal to ``target``."""
        return self._remove_where(lambda child: child == target)

    def detach(self) -> None:
        """Remove this node from its parent. No-op for a root."""
        parent = self.parent
        if parent is not None:
            parent._discard(self)

    def _remove_where(self, predicate: Callable[["TreeNode[T]"], bool]) -> bool:
        # Each node checks its own children before any deeper level is searched
        stack = [self]
        while stack:
            node = stack.pop()
            for child in node.children:
                if predicate(child):
                    node._discard(child)
                    return True
            stack.extend(reversed(node.children))
        return False

    def _discard(self, child: "TreeNode[T]") -> None:
        self.children = [c for c in self.children if c is not child]
        child._parent = None
        logger.debug("Detached node %s from %s", child, self)

    def is_root(self) -> bool:
        """Check if this node has no parent."""
        return self.parent is None

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return len(self.children) == 0

    def ancestors(self) -> Iterator["TreeNode[T]"]:
        """Yield the parent, grandparent and so on up to the root."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    def lineage(self) -> List["TreeNode[T]"]:
        """Get the path from the root to this node."""
        path = [self] + list(self.ancestors())
        return list(reversed(path))

    @property
    def depth(self) -> int:
        """Number of edges between this node and its root."""
        return sum(1 for _ in self.ancestors())

    def iter_subtree(self) -> Iterator["TreeNode[T]"]:
        """Yield this node and its descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def size(self) -> int:
        return sum(1 for _ in self.iter_subtree())

    def height(self) -> int:
        """Edges on the longest downward path; 0 for a leaf."""
        height = -1
        level = [self]
        while level:
            height += 1
            level = [child for node in level for child in node.children]
        return height

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeNode):
            return NotImplemented
        pairs = [(self, other)]
        while pairs:
            left, right = pairs.pop()
            if left is right:
                continue
            if not left.data == right.data or len(left.children) != len(right.children):
                return False
            pairs.extend(zip(left.children, right.children))
        return True

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self.data}"

    def __repr__(self) -> str:
        return f"TreeNode(data={self.data!r}, children={len(self.children)})"


class Tree(Generic[T]):
    """
    Tree rooted at a single node.

    Search and traversal are stateless, so every call starts fresh.
    """

    def __init__(self, root: TreeNode[T]):
        self.root = root

    def find(self, node: TreeNode[T]) -> Optional[TreeNode[T]]:
        """Return ``node`` itself if it is reachable from the root."""
        for candidate in self.root.iter_subtree():
            if candidate is node:
                return candidate
        return None

    def find_matching(self, node: TreeNode[T]) -> Optional[TreeNode[T]]:
        """Return the first node, in pre-order, structurally equal to ``node``."""
        for candidate in self.root.iter_subtree():
            if candidate == node:
                return candidate
        return None

    def find_value(self, value: Any) -> Optional[TreeNode[T]]:
        """Return the first node, in pre-order, whose data equals ``value``."""
        for candidate in self.root.iter_subtree():
            if candidate.data == value:
                return candidate
        return None

    def contains(self, node: TreeNode[T]) -> bool:
        return self.find(node) is not None

    def depth_first_traversal(self, starting_at: Optional[TreeNode[T]] = None) -> List[T]:
        """Collect values in pre-order, starting at ``starting_at`` or the root."""
        start = starting_at if starting_at is not None else self.root
        return [node.data for node in start.iter_subtree()]

    def breadth_first_traversal(self) -> List[T]:
        """Collect values level by level, left to right."""
        visited: List[T] = []
        queue: Deque[TreeNode[T]] = deque([self.root])
        while queue:
            current = queue.popleft()
            visited.append(current.data)
            queue.extend(current.children)
        return visited

    def print_from(
        self,
        node: Optional[TreeNode[T]] = None,
        depth: int = 0,
        marker: str = DEFAULT_DEPTH_MARKER,
    ) -> List[str]:
        """
        Build the indented lines for the subtree at ``node``.

        Each line is the marker repeated ``depth`` times followed by the
        node's value, e.g. ``--|--|NodeValue`` two levels down.
        """
        start = node if node is not None else self.root
        lines = []
        stack = [(start, depth)]
        while stack:
            current, level = stack.pop()
            lines.append(f"{marker * level}{current}")
            stack.extend((child, level + 1) for child in reversed(current.children))
        return lines

    def render(self, marker: str = DEFAULT_DEPTH_MARKER) -> str:
        """Full depth-marker rendering of the tree."""
        return "\n".join(self.print_from(self.root, 0, marker))

    def to_graph(self) -> nx.DiGraph:
        """Export parent->child edges as a directed graph keyed by node id."""
        graph = nx.DiGraph()
        for node in self.root.iter_subtree():
            graph.add_node(node.id, data=node.data)
            for child in node.children:
                graph.add_edge(node.id, child.id)
        return graph

    def validate(self) -> None:
        """
        Check the tree invariants.

        Raises:
            TreeStructureError: if the root has a parent, a child's parent
                link is inconsistent, or the structure is not a tree.
        """
        if self.root.parent is not None:
            raise TreeStructureError(f"Root {self.root} has a parent")

        seen = set()
        for node in self.root.iter_subtree():
            if node.id in seen:
                raise TreeStructureError(f"Node {node} is reachable more than once")
            seen.add(node.id)
            for child in node.children:
                if child.parent is not node:
                    raise TreeStructureError(f"Node {child} does not point back to its parent {node}")

        if not nx.is_arborescence(self.to_graph()):
            raise TreeStructureError("Parent-child graph is not a tree")

    def size(self) -> int:
        return self.root.size()

    def height(self) -> int:
        return self.root.height()

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[TreeNode[T]]:
        return self.root.iter_subtree()

    def __str__(self) -> str:
        return self.render()
