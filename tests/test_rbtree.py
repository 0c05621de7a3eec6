import io
import sys

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from algokit.rbtree import Color, RBNode, RedBlackTree, main


def _black_height(tree):
    """Check every red-black property; return the black height."""
    root = tree.root
    if root is None:
        return 0
    assert root.parent is None
    assert root.color is Color.BLACK

    def walk(node, low, high):
        if node is None:
            return 1
        assert low < node.key < high
        if node.color is Color.RED:
            assert node.left is None or node.left.color is Color.BLACK
            assert node.right is None or node.right.color is Color.BLACK
        for child in (node.left, node.right):
            if child is not None:
                assert child.parent is node
        left = walk(node.left, low, node.key)
        right = walk(node.right, node.key, high)
        assert left == right
        return left + (1 if node.color is Color.BLACK else 0)

    return walk(root, float("-inf"), float("inf"))


def test_ascending_inserts_keep_balance():
    tree = RedBlackTree()
    for key in range(1, 201):
        tree.insert(key)
        _black_height(tree)
    assert tree.keys() == list(range(1, 201))
    assert len(tree) == 200


def test_descending_inserts_keep_balance():
    tree = RedBlackTree(range(100, 0, -1))
    assert tree.keys() == list(range(1, 101))
    assert _black_height(tree) >= 2


def test_search_returns_node_with_key():
    tree = RedBlackTree([5, 3, 8, 1])
    node = tree.search(8)
    assert isinstance(node, RBNode)
    assert node.key == 8
    assert tree.search(7) is None
    assert 3 in tree
    assert 4 not in tree


def test_duplicate_insert_raises():
    tree = RedBlackTree([1, 2, 3])
    with pytest.raises(KeyError):
        tree.insert(2)
    assert tree.keys() == [1, 2, 3]
    assert len(tree) == 3


def test_remove_missing_raises():
    tree = RedBlackTree([1, 2, 3])
    with pytest.raises(KeyError):
        tree.remove(9)
    assert len(tree) == 3


def test_remove_everything():
    keys = list(range(1, 65))
    tree = RedBlackTree(keys)
    for key in keys:
        tree.remove(key)
        _black_height(tree)
        assert key not in tree
    assert tree.root is None
    assert len(tree) == 0


def test_remove_node_with_two_children():
    tree = RedBlackTree(range(1, 16))
    root_key = tree.root.key
    tree.remove(root_key)
    _black_height(tree)
    assert root_key not in tree
    assert tree.keys() == [k for k in range(1, 16) if k != root_key]


def test_clear():
    tree = RedBlackTree(range(10))
    tree.clear()
    assert tree.root is None
    assert tree.keys() == []
    assert len(tree) == 0


@settings(max_examples=150)
@given(st.lists(st.tuples(st.booleans(), st.integers(min_value=0, max_value=40)), max_size=120))
def test_matches_set_model(operations):
    tree = RedBlackTree()
    model = set()
    for is_insert, key in operations:
        if is_insert:
            if key in model:
                with pytest.raises(KeyError):
                    tree.insert(key)
            else:
                tree.insert(key)
                model.add(key)
        else:
            if key in model:
                tree.remove(key)
                model.discard(key)
            else:
                with pytest.raises(KeyError):
                    tree.remove(key)
        _black_height(tree)
    assert tree.keys() == sorted(model)
    assert len(tree) == len(model)


def _run(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    return main([])


def test_main_builds_and_searches(monkeypatch, capsys):
    assert _run(monkeypatch, "1\n3\ns\n2\nq\n") == 0
    out = capsys.readouterr().out
    assert "insert key:1" in out
    assert "insert key:3" in out
    assert "find the key:2" in out
    assert out.rstrip().endswith("bye.")


def test_main_reports_problems(monkeypatch, capsys):
    assert _run(monkeypatch, "1 2 i 2 r 9 r 1 s 1 x q") == 0
    out = capsys.readouterr().out
    assert "key 2 has exist." in out
    assert "key 9 has not exist." in out
    assert "can not find the key:1" in out
    assert "input operate error..." in out