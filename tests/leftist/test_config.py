import copy

import pytest

from leftist.common import greater, identity, less
from leftist.config import Order, QueueConfig, init_config


def test_default_config():
    config = init_config()
    assert config == QueueConfig(order=Order.Max, deep_copy=False)
    assert config.compare is less
    assert config.clone is identity


def test_min_deep_config():
    config = init_config("MIN", deep_copy=True)
    assert config.order == Order.Min
    assert config.compare is greater
    assert config.clone is copy.deepcopy


def test_unknown_order():
    with pytest.raises(ValueError, match="Unknown order 'middle'"):
        Order.parse("middle")


def test_new_queue():
    queue = init_config("min").new_queue()
    for value in [4, 2, 9]:
        queue.push(value)
    assert queue.top() == 2


def test_new_queue_deep_copy():
    queue = init_config(deep_copy=True).new_queue()
    queue.push([1])
    copied = queue.copy()
    copied.top().append(2)
    assert queue.top() == [1]
