"""The leftist tree merge primitive.

``merge_trees`` is the only function that changes tree structure. Within
each frame the predicate is called before anything is touched, and the frame
only writes to its winning node after the recursive call has returned. A
predicate failure at any depth therefore unwinds through frames that have not
written anything yet, leaving both input trees exactly as they were.
"""

from __future__ import annotations

from typing import Optional

from leftist.common import Compare
from leftist.node import LNode, npl

__all__ = ["merge_trees"]


def merge_trees[T](
    first: Optional[LNode[T]], second: Optional[LNode[T]], lt: Compare[T]
) -> Optional[LNode[T]]:
    """Merge two heap-ordered leftist trees into one.

    Nodes are reused, not copied: on success both inputs are consumed and
    must only be reached through the returned root. If either input is
    absent the other is returned without calling ``lt``. Ties keep ``first``
    on top.

    Time Complexity: O(log m + log n), the combined right spine lengths

    Args:
        first: Root of the first tree.
        second: Root of the second tree.
        lt: Predicate returning True when its first argument has lower
            priority than its second.

    Returns:
        The root of the merged tree.
    """
    if first is None:
        return second
    if second is None:
        return first
    if lt(first.value, second.value):
        winner, loser = second, first
    else:
        winner, loser = first, second
    merged = merge_trees(winner.right, loser, lt)
    # Only reached once every deeper frame has returned
    winner.right = merged
    if npl(winner.right) > npl(winner.left):
        winner.left, winner.right = winner.right, winner.left
    winner.npl = npl(winner.right) + 1
    return winner
