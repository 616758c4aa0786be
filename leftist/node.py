"""Node representation for leftist trees.

A node owns at most two children and records its null path length (npl):
the length of the shortest path down to a node with fewer than two children.
An absent node has npl -1, so a fresh leaf has npl 0.

Trees built from these nodes can be arbitrarily deep along the left spine,
so every whole-tree walk here uses an explicit stack rather than recursion.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from leftist.common import Clone, Compare, Impossible

__all__ = ["LNode", "check_tree", "clone_tree", "npl", "release_tree", "walk"]


@dataclass(eq=False)
class LNode[T]:
    """A mutable leftist tree node.

    Attributes:
        value: The stored element.
        left: Left child, never of smaller npl than the right child.
        right: Right child.
        npl: Null path length of this node.
    """

    value: T
    left: Optional[LNode[T]] = None
    right: Optional[LNode[T]] = None
    npl: int = 0


def npl[T](node: Optional[LNode[T]]) -> int:
    """Return the null path length of a possibly absent node."""
    return -1 if node is None else node.npl


def walk[T](node: Optional[LNode[T]]) -> Iterator[LNode[T]]:
    """Yield every node reachable from ``node`` in pre-order."""
    stack: List[LNode[T]] = [] if node is None else [node]
    while stack:
        cur = stack.pop()
        yield cur
        if cur.right is not None:
            stack.append(cur.right)
        if cur.left is not None:
            stack.append(cur.left)


def clone_tree[T](node: Optional[LNode[T]], clone: Clone[T]) -> Optional[LNode[T]]:
    """Build an independent copy of a tree, preserving shape and npl.

    Each element is passed through ``clone``. If that (or allocation) fails
    partway, the nodes built so far are released and the exception is
    re-raised; the source tree is never touched.

    Args:
        node: Root of the tree to copy.
        clone: Function copying one element.

    Returns:
        The root of the new tree, or None for an empty tree.
    """
    if node is None:
        return None
    root = LNode(clone(node.value), npl=node.npl)
    stack: List[Tuple[LNode[T], LNode[T]]] = [(node, root)]
    try:
        while stack:
            src, dst = stack.pop()
            if src.left is not None:
                dst.left = LNode(clone(src.left.value), npl=src.left.npl)
                stack.append((src.left, dst.left))
            if src.right is not None:
                dst.right = LNode(clone(src.right.value), npl=src.right.npl)
                stack.append((src.right, dst.right))
    except BaseException:
        release_tree(root)
        raise
    return root


def release_tree[T](node: Optional[LNode[T]]) -> int:
    """Unlink every node of a tree exactly once.

    Returns:
        The number of nodes released.
    """
    count = 0
    stack: List[LNode[T]] = [] if node is None else [node]
    while stack:
        cur = stack.pop()
        if cur.left is not None:
            stack.append(cur.left)
        if cur.right is not None:
            stack.append(cur.right)
        cur.left = None
        cur.right = None
        count += 1
    return count


def check_tree[T](node: Optional[LNode[T]], lt: Compare[T]) -> int:
    """Verify the heap-order and leftist invariants of a tree.

    Args:
        node: Root of the tree to check.
        lt: The ordering predicate the tree was built with.

    Returns:
        The number of nodes in the tree.

    Raises:
        Impossible: If any node breaks an invariant or the tree has a cycle.
    """
    count = 0
    seen = set()
    for cur in walk(node):
        if id(cur) in seen:
            raise Impossible(f"node {cur.value!r} is reachable twice")
        seen.add(id(cur))
        count += 1
        if npl(cur.left) < npl(cur.right):
            raise Impossible(f"leftist property broken at {cur.value!r}")
        if cur.npl != npl(cur.right) + 1:
            raise Impossible(f"stale npl {cur.npl} at {cur.value!r}")
        for child in (cur.left, cur.right):
            if child is not None and lt(cur.value, child.value):
                raise Impossible(
                    f"heap order broken: {child.value!r} above {cur.value!r}"
                )
    return count
