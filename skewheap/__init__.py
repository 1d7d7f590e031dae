from skewheap.exceptions import InvalidArgumentError, SkewHeapError
from skewheap.heap import (
    Node,
    NodeSnapshot,
    SkewHeap,
    ascending,
    clone_node,
    descending,
    merge_nodes,
    merge_nodes_non_destructive,
    skew,
    skew_count,
    skew_explain,
    skew_is_empty,
    skew_merge,
    skew_merge_safe,
    skew_peek,
    skew_put,
    skew_snapshot,
    skew_take,
)

__all__ = [
    "InvalidArgumentError",
    "Node",
    "NodeSnapshot",
    "SkewHeap",
    "SkewHeapError",
    "ascending",
    "clone_node",
    "descending",
    "merge_nodes",
    "merge_nodes_non_destructive",
    "skew",
    "skew_count",
    "skew_explain",
    "skew_is_empty",
    "skew_merge",
    "skew_merge_safe",
    "skew_peek",
    "skew_put",
    "skew_snapshot",
    "skew_take",
]
