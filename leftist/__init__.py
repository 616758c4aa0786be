from leftist.common import (
    EmptyError,
    Impossible,
    PredicateError,
    QueueError,
    greater,
    less,
)
from leftist.config import Order, QueueConfig, init_config
from leftist.merge import merge_trees
from leftist.node import LNode
from leftist.queue import LeftistQueue

__all__ = [
    "EmptyError",
    "Impossible",
    "LNode",
    "LeftistQueue",
    "Order",
    "PredicateError",
    "QueueConfig",
    "QueueError",
    "greater",
    "init_config",
    "less",
    "merge_trees",
]
