"""A red-black tree of unique keys, with an interactive console driver."""

from __future__ import annotations

import sys
import time
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TextIO

__all__ = ["Color", "RBNode", "RedBlackTree", "main"]


class Color(Enum):
    """Colour of a tree node."""

    RED = 0
    BLACK = 1


@dataclass(eq=False)
class RBNode:
    """A node of a red-black tree."""

    key: Any
    color: Color = Color.RED
    parent: RBNode | None = field(default=None, repr=False)
    left: RBNode | None = field(default=None, repr=False)
    right: RBNode | None = field(default=None, repr=False)


def _is_black(node: RBNode | None) -> bool:
    return node is None or node.color is Color.BLACK


class RedBlackTree:
    """Balanced binary search tree holding each key at most once."""

    def __init__(self, keys: Iterable[Any] = ()) -> None:
        self.root: RBNode | None = None
        self._size = 0
        for key in keys:
            self.insert(key)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def __iter__(self) -> Iterator[Any]:
        stack: list[RBNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key
            node = node.right

    def keys(self) -> list[Any]:
        """All keys in ascending order."""
        return list(self)

    def search(self, key: Any) -> RBNode | None:
        """Return the node holding ``key``, or None."""
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node
        return None

    def insert(self, key: Any) -> None:
        """Insert ``key``; raise KeyError if it is already present."""
        node = RBNode(key)
        if self.root is None:
            self.root = node
        else:
            parent = self.root
            while True:
                if key < parent.key:
                    if parent.left is None:
                        parent.left = node
                        break
                    parent = parent.left
                elif key > parent.key:
                    if parent.right is None:
                        parent.right = node
                        break
                    parent = parent.right
                else:
                    raise KeyError(key)
            node.parent = parent
        self._size += 1
        self._insert_fixup(node)

    def remove(self, key: Any) -> None:
        """Remove ``key``; raise KeyError if it is absent."""
        node = self.search(key)
        if node is None:
            raise KeyError(key)

        if node.left is not None and node.right is not None:
            predecessor = node.left
            while predecessor.right is not None:
                predecessor = predecessor.right
            node.key = predecessor.key
            node = predecessor

        child = node.left if node.left is not None else node.right
        self._replace(child, node)

        if node.color is Color.BLACK:
            if child is not None and child.color is Color.RED:
                child.color = Color.BLACK
            else:
                self._remove_fixup(child, node.parent)
        self._size -= 1

    def clear(self) -> None:
        """Drop every node."""
        self.root = None
        self._size = 0

    def _insert_fixup(self, node: RBNode) -> None:
        while True:
            parent = node.parent
            if parent is None:
                node.color = Color.BLACK
                return
            if parent.color is Color.BLACK:
                return
            grandparent = parent.parent
            assert grandparent is not None
            uncle = grandparent.right if parent is grandparent.left else grandparent.left

            if uncle is not None and uncle.color is Color.RED:
                parent.color = Color.BLACK
                uncle.color = Color.BLACK
                grandparent.color = Color.RED
                node = grandparent
                continue

            if node is parent.right and parent is grandparent.left:
                self._rotate_left(parent)
                node = node.left  # type: ignore[assignment]
            elif node is parent.left and parent is grandparent.right:
                self._rotate_right(parent)
                node = node.right  # type: ignore[assignment]

            parent = node.parent
            assert parent is not None
            grandparent.color = Color.RED
            parent.color = Color.BLACK
            if node is parent.left and parent is grandparent.left:
                self._rotate_right(grandparent)
            else:
                self._rotate_left(grandparent)
            return

    def _remove_fixup(self, node: RBNode | None, parent: RBNode | None) -> None:
        while node is not self.root:
            assert parent is not None
            sibling = self._sibling(node, parent)
            if sibling is not None and sibling.color is Color.RED:
                sibling.color = Color.BLACK
                parent.color = Color.RED
                if node is parent.left:
                    self._rotate_left(parent)
                else:
                    self._rotate_right(parent)
                sibling = self._sibling(node, parent)

            plain_black_sibling = (
                sibling is not None
                and sibling.color is Color.BLACK
                and _is_black(sibling.left)
                and _is_black(sibling.right)
            )
            if plain_black_sibling and parent.color is Color.BLACK:
                assert sibling is not None
                sibling.color = Color.RED
                node, parent = parent, parent.parent
                continue
            if plain_black_sibling:
                assert sibling is not None
                sibling.color = Color.RED
                parent.color = Color.BLACK
                return

            assert sibling is not None
            if (
                node is parent.left
                and sibling.color is Color.BLACK
                and sibling.left is not None
                and sibling.left.color is Color.RED
                and _is_black(sibling.right)
            ):
                sibling.color = Color.RED
                sibling.left.color = Color.BLACK
                self._rotate_right(sibling)
            elif (
                node is parent.right
                and sibling.color is Color.BLACK
                and sibling.right is not None
                and sibling.right.color is Color.RED
                and _is_black(sibling.left)
            ):
                sibling.color = Color.RED
                sibling.right.color = Color.BLACK
                self._rotate_left(sibling)

            sibling = self._sibling(node, parent)
            assert sibling is not None
            sibling.color = parent.color
            parent.color = Color.BLACK
            if node is parent.left:
                assert sibling.right is not None
                sibling.right.color = Color.BLACK
                self._rotate_left(parent)
            else:
                assert sibling.left is not None
                sibling.left.color = Color.BLACK
                self._rotate_right(parent)
            return

    @staticmethod
    def _sibling(node: RBNode | None, parent: RBNode) -> RBNode | None:
        return parent.right if node is parent.left else parent.left

    def _rotate_left(self, node: RBNode) -> None:
        parent = node.parent
        right = node.right
        assert right is not None
        right_left = right.left

        if parent is not None:
            if node is parent.left:
                parent.left = right
            else:
                parent.right = right

        node.right = right_left
        node.parent = right
        right.left = node
        right.parent = parent
        if right_left is not None:
            right_left.parent = node
        if self.root is node:
            self.root = right

    def _rotate_right(self, node: RBNode) -> None:
        parent = node.parent
        left = node.left
        assert left is not None
        left_right = left.right

        if parent is not None:
            if node is parent.left:
                parent.left = left
            else:
                parent.right = left

        node.left = left_right
        node.parent = left
        left.right = node
        left.parent = parent
        if left_right is not None:
            left_right.parent = node
        if self.root is node:
            self.root = left

    def _replace(self, src: RBNode | None, dst: RBNode) -> None:
        """Put ``src`` where ``dst`` hangs in the tree."""
        if src is not None:
            src.parent = dst.parent
        if dst.parent is not None:
            if dst is dst.parent.left:
                dst.parent.left = src
            else:
                dst.parent.right = src
        if self.root is dst:
            self.root = src


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _to_int(token: str | None) -> int | None:
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def main(argv: list[str] | None = None) -> int:
    """Build a tree of a key range, then insert, remove and search interactively."""
    tokens = _tokens(sys.stdin)

    def ask(prompt: str) -> str | None:
        print(prompt, end="", flush=True)
        return next(tokens, None)

    tree = RedBlackTree()
    print("init tree...")
    begin = _to_int(ask("please input begin key:"))
    end = _to_int(ask("please input end key:"))
    begin = 1 if begin is None else begin
    end = 1000000 if end is None else end

    print("build tree...")
    for key in range(begin, end + 1):
        print(f"insert key:{key}")
        tree.insert(key)

    while True:
        operation = ask("please input operate:")
        if operation is None or operation == "q":
            break

        key: int | None = None
        if operation in ("i", "r", "s"):
            key = _to_int(ask("please input key:"))

        started = time.perf_counter()
        if key is None:
            print("input operate error...")
        elif operation == "i":
            try:
                tree.insert(key)
            except KeyError:
                print(f"key {key} has exist.")
        elif operation == "r":
            try:
                tree.remove(key)
            except KeyError:
                print(f"key {key} has not exist.")
        elif tree.search(key) is not None:
            print(f"find the key:{key}")
        else:
            print(f"can not find the key:{key}")
        elapsed = int((time.perf_counter() - started) * 1000)
        print(f"take time:{elapsed}ms\n")

    tree.clear()
    print("please input any key to exit...")
    print("bye.")
    return 0