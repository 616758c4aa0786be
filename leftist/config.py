"""Configuration for building priority queues.

Maps user-facing options (priority order and element copy mode) onto the
predicate and clone function a ``LeftistQueue`` is constructed with.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import Enum, unique
from typing import Any

from leftist.common import Clone, Compare, greater, identity, less
from leftist.queue import LeftistQueue

__all__ = ["Order", "QueueConfig", "init_config"]


@unique
class Order(Enum):
    """Which end of the ordering is served first."""

    Max = "max"  # Largest element on top
    Min = "min"  # Smallest element on top

    @staticmethod
    def parse(name: str) -> Order:
        """Look up an order by name, case-insensitively.

        Raises:
            ValueError: If the name is not a known order.
        """
        try:
            return Order(name.lower())
        except ValueError:
            choices = ", ".join(o.value for o in Order)
            raise ValueError(
                f"Unknown order {name!r}, expected one of: {choices}"
            ) from None

    @property
    def compare(self) -> Compare[Any]:
        return less if self == Order.Max else greater


@dataclass(frozen=True)
class QueueConfig:
    """Settings shared by the queues an application creates."""

    order: Order
    deep_copy: bool  # Clone elements with copy.deepcopy when queues are copied

    @property
    def compare(self) -> Compare[Any]:
        return self.order.compare

    @property
    def clone(self) -> Clone[Any]:
        return copy.deepcopy if self.deep_copy else identity

    def new_queue(self) -> LeftistQueue[Any]:
        """Create an empty queue using these settings."""
        return LeftistQueue(self.compare, self.clone)


def init_config(order: str = "max", deep_copy: bool = False) -> QueueConfig:
    """Build a configuration from string options.

    Args:
        order: Either "max" or "min".
        deep_copy: Whether copies of a queue also copy its elements.

    Returns:
        The parsed configuration.
    """
    return QueueConfig(order=Order.parse(order), deep_copy=deep_copy)
