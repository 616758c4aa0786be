import pytest

from leftist.common import Impossible, less
from leftist.node import LNode, check_tree, clone_tree, npl, release_tree, walk
from tests.leftist.util import Boom, FlakyClone, snapshot


def sample_tree() -> LNode[int]:
    # 8(5(3), 1)
    three = LNode(3)
    five = LNode(5, left=three)
    one = LNode(1)
    return LNode(8, left=five, right=one, npl=1)


def test_npl_of_absent_node():
    assert npl(None) == -1
    assert npl(LNode(1)) == 0


def test_walk_preorder():
    assert [n.value for n in walk(sample_tree())] == [8, 5, 3, 1]
    assert list(walk(None)) == []


def test_check_tree_counts_nodes():
    assert check_tree(sample_tree(), less) == 4
    assert check_tree(None, less) == 0


def test_check_tree_heap_order():
    root = sample_tree()
    assert root.left is not None
    root.left.value = 9
    with pytest.raises(Impossible, match="heap order"):
        check_tree(root, less)


def test_check_tree_leftist():
    root = LNode(8, left=None, right=LNode(1))
    with pytest.raises(Impossible, match="leftist"):
        check_tree(root, less)


def test_check_tree_stale_npl():
    root = sample_tree()
    root.npl = 0
    with pytest.raises(Impossible, match="npl"):
        check_tree(root, less)


def test_check_tree_shared_node():
    leaf = LNode(1)
    root = LNode(8, left=leaf, right=leaf, npl=1)
    with pytest.raises(Impossible, match="twice"):
        check_tree(root, less)


def test_clone_tree_is_independent():
    root = sample_tree()
    before = snapshot(root)
    copied = clone_tree(root, lambda v: v)
    assert copied is not None
    assert [(n.value, n.npl) for n in walk(copied)] == [
        (n.value, n.npl) for n in walk(root)
    ]
    original_ids = {id(n) for n in walk(root)}
    assert not any(id(n) in original_ids for n in walk(copied))
    release_tree(copied)
    assert snapshot(root) == before


def test_clone_tree_failure_leaves_source():
    root = sample_tree()
    before = snapshot(root)
    clone = FlakyClone()
    clone.arm(3)
    with pytest.raises(Boom):
        clone_tree(root, clone)
    assert snapshot(root) == before


def test_clone_empty():
    assert clone_tree(None, lambda v: v) is None


def test_release_tree_unlinks():
    root = sample_tree()
    nodes = list(walk(root))
    assert release_tree(root) == 4
    assert all(n.left is None and n.right is None for n in nodes)
    assert release_tree(None) == 0


def test_deep_left_spine():
    # Deeper than the default recursion limit
    root = LNode(0)
    for i in range(1, 5000):
        root = LNode(i, left=root)
    assert check_tree(root, less) == 5000
    copied = clone_tree(root, lambda v: v)
    assert check_tree(copied, less) == 5000
    assert release_tree(copied) == 5000
