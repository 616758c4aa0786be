"""Shared helpers for leftist queue tests."""

from typing import Any, List, Optional, Tuple

from leftist.node import LNode
from leftist.queue import LeftistQueue


class Boom(Exception):
    pass


class FlakyLess:
    """A ``<`` predicate that raises on its k-th call once armed."""

    def __init__(self) -> None:
        self.calls = 0
        self.fail_at: Optional[int] = None

    def arm(self, k: int) -> None:
        self.calls = 0
        self.fail_at = k

    def disarm(self) -> None:
        self.fail_at = None

    def __call__(self, a: Any, b: Any) -> bool:
        self.calls += 1
        if self.fail_at is not None and self.calls == self.fail_at:
            raise Boom(f"call {self.calls}")
        return a < b


class FlakyClone:
    """An element copier that raises on its k-th call once armed."""

    def __init__(self) -> None:
        self.calls = 0
        self.fail_at: Optional[int] = None

    def arm(self, k: int) -> None:
        self.calls = 0
        self.fail_at = k

    def __call__(self, value: Any) -> Any:
        self.calls += 1
        if self.fail_at is not None and self.calls == self.fail_at:
            raise Boom(f"clone {self.calls}")
        return value


type NodeShape = Tuple[int, Any, Optional[int], Optional[int], int]


def snapshot(root: Optional[LNode[Any]]) -> List[NodeShape]:
    """Record identity, value, links and npl of every node, in pre-order."""
    shape: List[NodeShape] = []
    stack = [] if root is None else [root]
    while stack:
        node = stack.pop()
        shape.append(
            (
                id(node),
                node.value,
                None if node.left is None else id(node.left),
                None if node.right is None else id(node.right),
                node.npl,
            )
        )
        for child in (node.right, node.left):
            if child is not None:
                stack.append(child)
    return shape


def queue_state(queue: LeftistQueue[Any]) -> Tuple[int, List[NodeShape]]:
    return (queue.size(), snapshot(queue._root))


def elements(queue: LeftistQueue[Any]) -> List[Any]:
    """Sorted multiset of the elements reachable from the root."""
    return sorted(shape[1] for shape in snapshot(queue._root))


def drain(queue: LeftistQueue[Any]) -> List[Any]:
    out = []
    while not queue.empty():
        out.append(queue.pop())
    return out
