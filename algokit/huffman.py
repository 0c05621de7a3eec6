"""Huffman coding of byte strings.

The tree is built with a binary min-heap ordered on symbol frequency. Leaves
are inserted in ascending symbol order, and each step merges the two cheapest
nodes, the first extracted becoming the left child. Left edges are coded 0 and
right edges 1. Bits are packed most significant first, and the last byte is
padded with zeros.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "HuffmanNode",
    "MinHeap",
    "HuffmanTree",
    "BitWriter",
    "BitReader",
    "count_frequencies",
    "encode",
    "decode",
]


@dataclass(eq=False)
class HuffmanNode:
    """A tree node; leaves carry a symbol, internal nodes have ``symbol`` None."""

    symbol: Any
    frequency: int
    parent: HuffmanNode | None = field(default=None, repr=False)
    left: HuffmanNode | None = field(default=None, repr=False)
    right: HuffmanNode | None = field(default=None, repr=False)

    @classmethod
    def merge(cls, left: HuffmanNode, right: HuffmanNode) -> HuffmanNode:
        """Create an internal node over ``left`` and ``right``."""
        node = cls(None, left.frequency + right.frequency, left=left, right=right)
        left.parent = node
        right.parent = node
        return node

    @property
    def is_leaf(self) -> bool:
        return self.left is None or self.right is None

    def __lt__(self, other: HuffmanNode) -> bool:
        return self.frequency < other.frequency


class MinHeap:
    """Priority queue of nodes keyed on frequency."""

    def __init__(self, nodes: Iterable[HuffmanNode] = ()) -> None:
        self._items: list[HuffmanNode] = []
        for node in nodes:
            self.insert(node)

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, node: HuffmanNode) -> None:
        """Add ``node``, moving it up past every strictly larger parent."""
        items = self._items
        items.append(node)
        i = len(items) - 1
        while i > 0:
            parent = (i - 1) // 2
            if items[i] < items[parent]:
                items[i], items[parent] = items[parent], items[i]
                i = parent
            else:
                break

    def extract_min(self) -> HuffmanNode:
        """Remove and return the node of smallest frequency; IndexError if empty."""
        items = self._items
        if not items:
            raise IndexError("extract from an empty heap")
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            size = len(items)
            i, j = 0, 1
            while j < size:
                if j + 1 < size and not items[j] < items[j + 1]:
                    j += 1
                if items[i] < items[j]:
                    break
                items[i], items[j] = items[j], items[i]
                i = j
                j = 2 * i + 1
        return top


def count_frequencies(data: bytes) -> dict[int, int]:
    """Occurrences of each byte value present in ``data``, in ascending byte order."""
    counts = Counter(data)
    return {symbol: counts[symbol] for symbol in sorted(counts)}


class HuffmanTree:
    """A Huffman code tree with direct access to its leaves."""

    def __init__(self, root: HuffmanNode | None, leaves: Mapping[Any, HuffmanNode]) -> None:
        self.root = root
        self.leaves = dict(leaves)
        self._codes: dict[Any, tuple[int, ...]] = {}

    @classmethod
    def from_frequencies(cls, frequencies: Mapping[Any, int]) -> HuffmanTree:
        """Build the tree for a mapping of symbol to frequency."""
        leaves = {symbol: HuffmanNode(symbol, frequencies[symbol]) for symbol in sorted(frequencies)}
        if not leaves:
            return cls(None, {})
        heap = MinHeap(leaves.values())
        for _ in range(len(leaves) - 1):
            left = heap.extract_min()
            right = heap.extract_min()
            heap.insert(HuffmanNode.merge(left, right))
        return cls(heap.extract_min(), leaves)

    def code_for(self, symbol: Any) -> tuple[int, ...]:
        """Bits from the root down to the leaf of ``symbol``; KeyError if unknown."""
        code = self._codes.get(symbol)
        if code is None:
            node = self.leaves[symbol]
            bits: list[int] = []
            while node.parent is not None:
                bits.append(0 if node is node.parent.left else 1)
                node = node.parent
            code = tuple(reversed(bits))
            self._codes[symbol] = code
        return code


class BitWriter:
    """Packs bits into bytes, most significant bit first."""

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._current = 0
        self._pending = 0

    def write_bit(self, bit: int) -> None:
        """Append one bit; any non-zero value counts as 1."""
        self._current = (self._current << 1) | (1 if bit else 0)
        self._pending += 1
        if self._pending == 8:
            self._buffer.append(self._current)
            self._current = 0
            self._pending = 0

    def getvalue(self) -> bytes:
        """The bytes written so far, the last one padded with zero bits."""
        if self._pending:
            return bytes(self._buffer) + bytes([self._current << (8 - self._pending)])
        return bytes(self._buffer)


class BitReader:
    """Reads bits from bytes, most significant bit first."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self._position = 0
        self._current = 0
        self._remaining = 0

    def read_bit(self) -> int:
        """Return the next bit; EOFError once the data is used up."""
        if self._remaining == 0:
            if self._position >= len(self._data):
                raise EOFError("no more bits to read")
            self._current = self._data[self._position]
            self._position += 1
            self._remaining = 8
        self._remaining -= 1
        return (self._current >> self._remaining) & 1


def encode(data: bytes, tree: HuffmanTree) -> bytes:
    """Encode every byte of ``data`` with the codes of ``tree``."""
    writer = BitWriter()
    for symbol in data:
        for bit in tree.code_for(symbol):
            writer.write_bit(bit)
    return writer.getvalue()


def decode(data: bytes, tree: HuffmanTree, count: int) -> bytes:
    """Decode ``count`` symbols from ``data`` by walking ``tree`` from its root."""
    if count and tree.root is None:
        raise ValueError("cannot decode with an empty tree")
    reader = BitReader(data)
    out = bytearray()
    for _ in range(count):
        node = tree.root
        assert node is not None
        while not node.is_leaf:
            node = node.left if reader.read_bit() == 0 else node.right
            assert node is not None
        out.append(node.symbol)
    return bytes(out)