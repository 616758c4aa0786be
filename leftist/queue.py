"""Mergeable priority queue backed by a leftist tree.

Every mutating operation is a thin wrapper around ``merge_trees``. The
wrapper computes the new root first and only then writes it, together with
the new count, into the queue. Since the merge never mutates on a failing
path, a predicate failure leaves the queue (and for ``merge``, both queues)
unchanged without any snapshot or rollback.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Iterable, Optional, override

from leftist.common import (
    Clone,
    Compare,
    EmptyError,
    Impossible,
    PredicateError,
    Sized,
    identity,
    less,
)
from leftist.merge import merge_trees
from leftist.node import LNode, check_tree, clone_tree, release_tree

__all__ = ["LeftistQueue"]

logger = logging.getLogger(__name__)


class LeftistQueue[T](Sized):
    """A mutable priority queue supporting O(log n) merge.

    The predicate ``compare(a, b)`` returns True when ``a`` has lower priority
    than ``b``; the element with the highest priority is on top. With the
    default ``less`` this is a max-queue.

    Example:
        >>> q = LeftistQueue.mk([5, 3, 8, 1])
        >>> q.top()
        8
        >>> q.pop()
        8
        >>> q.size()
        3
    """

    def __init__(self, compare: Compare[T] = less, clone: Clone[T] = identity) -> None:
        """Create an empty queue.

        Args:
            compare: Strict weak ordering, "a has lower priority than b".
            clone: Copies one element when the queue is copied or assigned.
        """
        self._root: Optional[LNode[T]] = None
        self._count = 0
        self._compare = compare
        self._clone = clone

    @staticmethod
    def mk(
        values: Iterable[T], compare: Compare[T] = less, clone: Clone[T] = identity
    ) -> LeftistQueue[T]:
        """Create a queue holding the given values."""
        queue: LeftistQueue[T] = LeftistQueue(compare, clone)
        for value in values:
            queue.push(value)
        return queue

    @staticmethod
    def copy_of(other: LeftistQueue[T]) -> LeftistQueue[T]:
        """Create an independent deep copy of another queue.

        The node tree is cloned node by node and elements go through the
        source queue's clone function. The two queues share no nodes.
        """
        queue: LeftistQueue[T] = LeftistQueue(other._compare, other._clone)
        queue._root = clone_tree(other._root, other._clone)
        queue._count = other._count
        return queue

    @property
    def compare(self) -> Compare[T]:
        return self._compare

    @override
    def size(self) -> int:
        """Return the number of elements in the queue."""
        return self._count

    def empty(self) -> bool:
        """Return True if the queue holds no elements."""
        return self._count == 0

    def top(self) -> T:
        """Return the highest priority element without removing it.

        Raises:
            EmptyError: If the queue is empty.
        """
        if self._root is None:
            raise EmptyError("top")
        return self._root.value

    def push(self, value: T) -> None:
        """Insert an element.

        Time Complexity: O(log n)

        Raises:
            PredicateError: If the predicate fails; the queue is unchanged.
        """
        node = LNode(value)
        try:
            root = merge_trees(self._root, node, self._compare)
        except Exception as exc:
            logger.warning("push aborted, queue of %d unchanged: %r", self._count, exc)
            raise PredicateError("push", exc) from exc
        self._root = root
        self._count += 1

    def pop(self) -> T:
        """Remove and return the highest priority element.

        Time Complexity: O(log n)

        Raises:
            EmptyError: If the queue is empty.
            PredicateError: If the predicate fails; the queue is unchanged.
        """
        old = self._root
        if old is None:
            raise EmptyError("pop")
        try:
            root = merge_trees(old.left, old.right, self._compare)
        except Exception as exc:
            logger.warning("pop aborted, queue of %d unchanged: %r", self._count, exc)
            raise PredicateError("pop", exc) from exc
        old.left = None
        old.right = None
        self._root = root
        self._count -= 1
        return old.value

    def merge(self, other: LeftistQueue[T]) -> None:
        """Move every element of ``other`` into this queue.

        On success ``other`` is left empty; its nodes now belong to this
        queue. Merging a queue into itself does nothing. This queue's
        predicate orders the result.

        Time Complexity: O(log(m + n))

        Raises:
            PredicateError: If the predicate fails; both queues are unchanged.
        """
        if other is self:
            return
        try:
            root = merge_trees(self._root, other._root, self._compare)
        except Exception as exc:
            logger.warning(
                "merge aborted, queues of %d and %d unchanged: %r",
                self._count,
                other._count,
                exc,
            )
            raise PredicateError("merge", exc) from exc
        logger.debug("merged %d elements into %d", other._count, self._count)
        self._root = root
        self._count += other._count
        other._root = None
        other._count = 0

    def assign(self, other: LeftistQueue[T]) -> None:
        """Replace the contents of this queue with a deep copy of ``other``.

        The copy is built completely before this queue is touched, so if
        cloning fails this queue keeps its previous contents and the
        exception propagates unchanged. The predicate and clone function are
        taken from ``other`` as well.
        """
        if other is self:
            return
        root = clone_tree(other._root, other._clone)
        released = release_tree(self._root)
        logger.debug("assign replaced %d nodes with %d", released, other._count)
        self._root = root
        self._count = other._count
        self._compare = other._compare
        self._clone = other._clone

    def copy(self) -> LeftistQueue[T]:
        """Alias for copy_of(self)."""
        return LeftistQueue.copy_of(self)

    def clear(self) -> None:
        """Release every node and leave the queue empty."""
        released = release_tree(self._root)
        logger.debug("cleared %d nodes", released)
        self._root = None
        self._count = 0

    def check(self) -> None:
        """Verify the tree invariants and the element count.

        Raises:
            Impossible: If the tree or count is inconsistent.
        """
        count = check_tree(self._root, self._compare)
        if count != self._count:
            raise Impossible(f"count {self._count} but {count} reachable nodes")

    def __copy__(self) -> LeftistQueue[T]:
        return LeftistQueue.copy_of(self)

    def __deepcopy__(self, memo: Dict[int, Any]) -> LeftistQueue[T]:
        queue: LeftistQueue[T] = LeftistQueue(self._compare, self._clone)
        queue._root = clone_tree(self._root, lambda v: copy.deepcopy(v, memo))
        queue._count = self._count
        return queue

    def __repr__(self) -> str:
        if self._root is None:
            return "LeftistQueue(size=0)"
        return f"LeftistQueue(size={self._count}, top={self._root.value!r})"
