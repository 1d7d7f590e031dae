"""
Skew heap: a self-adjusting, mergeable priority queue.

Every mutating operation reduces to ``merge_nodes``, which walks the right
spines of two subtrees and swaps children on the way back up. The tree walks
below all use an explicit work list instead of recursion, so heavily skewed
trees are bounded by memory rather than by the interpreter's recursion limit.

The module exposes a function API (``skew``, ``skew_put``, ``skew_take``, ...)
and a thin ``SkewHeap`` class that forwards to it.
"""
import logging
from functools import cmp_to_key
from numbers import Integral
from typing import Any, Callable, List, NamedTuple, Optional

from skewheap.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

Comparator = Callable[[Any, Any], int]


def ascending(a, b) -> int: return (a > b) - (a < b)
def descending(a, b) -> int: return (a < b) - (a > b)


if 1: # Nodes
    class Node:
        """Tree node exclusively owned by one heap. Only the engine relinks it."""
        __slots__ = ("key", "left", "right")

        def __init__(self, key, left=None, right=None):
            self.key = key
            self.left = left
            self.right = right

        def __repr__(self): return f"Node({self.key!r})"

    class NodeSnapshot(NamedTuple):
        """Immutable copy of a subtree, safe to share and keep around."""
        key: Any
        left: Optional["NodeSnapshot"]
        right: Optional["NodeSnapshot"]

if 1: # Merge primitives
    def merge_nodes(cmp: Comparator, a: Optional[Node], b: Optional[Node]) -> Optional[Node]:
        """
        Destructively merges two subtrees and returns the new root.

        Nodes of ``a`` and ``b`` are relinked in place, no key is copied. On a
        tie (``cmp == 0``) the node from ``a`` stays on top.
        """
        if a is None: return b
        if b is None: return a
        # Winners along the merged right spine, top first
        spine = []
        while a is not None and b is not None:
            if cmp(a.key, b.key) > 0: a, b = b, a
            spine.append(a)
            # Loser goes first into the next round
            a, b = b, a.right
        rest = b if a is None else a
        # Relink bottom-up: old left moves right, merged subtree goes left
        for node in reversed(spine):
            node.right = node.left
            node.left = rest
            rest = node
        return rest

    def clone_node(node: Optional[Node]) -> Optional[Node]:
        if node is None: return None
        root = Node(node.key)
        work = [(node, root)]
        while len(work) > 0:
            src, dst = work.pop()
            if src.left is not None:
                dst.left = Node(src.left.key)
                work.append((src.left, dst.left))
            if src.right is not None:
                dst.right = Node(src.right.key)
                work.append((src.right, dst.right))
        return root

    def merge_nodes_non_destructive(cmp: Comparator, a: Optional[Node], b: Optional[Node]) -> Optional[Node]:
        """
        Merges two subtrees into a freshly allocated tree.

        Neither input is modified and no node of the result is shared with
        them. Produces the same shape ``merge_nodes`` would.
        """
        if a is None: return clone_node(b)
        if b is None: return clone_node(a)
        spine = []
        while a is not None and b is not None:
            if cmp(a.key, b.key) > 0: a, b = b, a
            spine.append(a)
            a, b = b, a.right
        rest = clone_node(b if a is None else a)
        for node in reversed(spine):
            rest = Node(node.key, rest, clone_node(node.left))
        return rest

if 1: # Heap handle and function API
    class SkewHeap:
        """
        Mergeable priority queue ordered by a three-way comparator.

        ``cmp(a, b)`` returns a negative number when ``a`` should come out
        first, zero for a tie and a positive number otherwise. The comparator
        is fixed for the lifetime of the heap. Not safe for concurrent use.
        """
        __slots__ = ("cmp", "size", "root")

        def __init__(self, cmp: Comparator):
            if not callable(cmp): raise InvalidArgumentError(f"comparator must be callable, got {type(cmp).__name__}")
            self.cmp = cmp
            self.size = 0
            self.root = None

        def count(self): return skew_count(self)
        def is_empty(self): return skew_is_empty(self)
        def peek(self): return skew_peek(self)
        def put(self, *keys): return skew_put(self, *keys)
        def take(self, n=None): return skew_take(self, n)
        def merge(self, *heaps): return skew_merge(self, *heaps)
        def explain(self): return skew_explain(self)
        def snapshot(self): return skew_snapshot(self)

        def merge_safe(self, *heaps):
            new = skew_merge_safe(self, *heaps)
            if type(self) is SkewHeap: return new
            other = type(self).__new__(type(self))
            other.cmp, other.size, other.root = new.cmp, new.size, new.root
            return other

        def __len__(self): return self.size
        def __bool__(self): return self.size > 0
        def __repr__(self): return f"{type(self).__name__}<size={self.size}>"

    def _check_heap(heap):
        if not isinstance(heap, SkewHeap):
            raise InvalidArgumentError(f"expected a SkewHeap, got {type(heap).__name__}")

    def skew(cmp: Comparator) -> SkewHeap:
        return SkewHeap(cmp)

    def skew_count(heap: SkewHeap) -> int:
        return heap.size

    def skew_is_empty(heap: SkewHeap) -> bool:
        return heap.size == 0

    def skew_peek(heap: SkewHeap):
        """Returns the top key without removing it, or None if the heap is empty."""
        if heap.size == 0: return None
        return heap.root.key

    def skew_put(heap: SkewHeap, *keys) -> int:
        """Adds one or more keys and returns the new number of keys in the heap."""
        cmp = heap.cmp
        if len(keys) > 1:
            # Highest priority last, so every insert lands on top of the root
            keys = sorted(keys, key=cmp_to_key(cmp), reverse=True)
        for key in keys:
            heap.root = merge_nodes(cmp, heap.root, Node(key))
            heap.size += 1
        return heap.size

    def skew_take(heap: SkewHeap, n: Optional[int] = None):
        """
        Removes and returns the top key, or None if the heap is empty.

        With ``n`` given, removes up to ``n`` keys and returns them as a list in
        comparator order. Fewer are returned when the heap runs out.
        """
        if n is None:
            if heap.size == 0: return None
            return _take_one(heap)
        if isinstance(n, bool) or not isinstance(n, Integral):
            raise InvalidArgumentError(f"take count must be an int, got {type(n).__name__}")
        taken = []
        while len(taken) < n and heap.size > 0:
            taken.append(_take_one(heap))
        logger.debug("took %d of %d requested keys, %d left", len(taken), n, heap.size)
        return taken

    def _take_one(heap):
        root = heap.root
        heap.root = merge_nodes(heap.cmp, root.left, root.right)
        heap.size -= 1
        root.left = root.right = None
        return root.key

    def skew_merge(heap: SkewHeap, *heaps: SkewHeap) -> SkewHeap:
        """
        Destructively merges ``heaps`` into ``heap``, left to right.

        The other heaps are left empty and ``heap``'s comparator orders the
        result. Returns ``heap``.
        """
        _check_heap(heap)
        for other in heaps:
            _check_heap(other)
            if other is heap: raise InvalidArgumentError("cannot merge a heap into itself")
        for other in heaps:
            heap.root = merge_nodes(heap.cmp, heap.root, other.root)
            heap.size += other.size
            other.root = None
            other.size = 0
        logger.debug("merged %d heap(s), size is now %d", len(heaps), heap.size)
        return heap

    def skew_merge_safe(*heaps: SkewHeap) -> SkewHeap:
        """
        Non-destructively merges ``heaps`` into a new heap using the first
        heap's comparator. The input heaps are not modified.
        """
        if len(heaps) == 0: raise InvalidArgumentError("at least one heap is required")
        for heap in heaps: _check_heap(heap)
        new = SkewHeap(heaps[0].cmp)
        for heap in heaps:
            new.root = merge_nodes_non_destructive(new.cmp, new.root, heap.root)
            new.size += heap.size
        logger.debug("copied %d heap(s) into a new heap of size %d", len(heaps), new.size)
        return new

if 1: # Introspection
    def skew_snapshot(heap: SkewHeap) -> Optional[NodeSnapshot]:
        if heap.root is None: return None
        # Post-order: children are built before their parent
        built = {}
        work = [(heap.root, False)]
        while len(work) > 0:
            node, expanded = work.pop()
            if expanded:
                built[id(node)] = NodeSnapshot(
                    node.key,
                    built.pop(id(node.left)) if node.left is not None else None,
                    built.pop(id(node.right)) if node.right is not None else None,
                )
                continue
            work.append((node, True))
            if node.right is not None: work.append((node.right, False))
            if node.left is not None: work.append((node.left, False))
        return built[id(heap.root)]

    def skew_explain(heap: SkewHeap) -> str:
        """
        Returns a text dump of the tree, one node per line, indented by depth.

            SkewHeap<size=3>
               - Node: 1
                  - Node: 2
                  - Node: 3
        """
        lines: List[str] = [f"SkewHeap<size={heap.size}>"]
        work = [] if heap.root is None else [(heap.root, 1)]
        while len(work) > 0:
            node, depth = work.pop()
            lines.append("   " * depth + f"- Node: {node.key}")
            if node.right is not None: work.append((node.right, depth + 1))
            if node.left is not None: work.append((node.left, depth + 1))
        return "\n".join(lines)
