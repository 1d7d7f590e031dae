from skewheap import Node, SkewHeap, ascending


def tree_nodes(root):
    """All nodes reachable from ``root``, without recursion."""
    nodes = []
    work = [] if root is None else [root]
    while len(work) > 0:
        node = work.pop()
        nodes.append(node)
        if node.left is not None: work.append(node.left)
        if node.right is not None: work.append(node.right)
    return nodes


def heap_order_violations(root, cmp):
    return [
        (node.key, child.key)
        for node in tree_nodes(root)
        for child in (node.left, node.right)
        if child is not None and cmp(child.key, node.key) < 0
    ]


def right_chain(keys):
    """A degenerate heap whose nodes all hang off right links."""
    root = None
    for key in reversed(keys):
        root = Node(key, None, root)
    return root


def left_chain(keys):
    root = None
    for key in reversed(keys):
        root = Node(key, root, None)
    return root


def heap_with_root(root, cmp=ascending):
    heap = SkewHeap(cmp)
    heap.root = root
    heap.size = len(tree_nodes(root))
    return heap
