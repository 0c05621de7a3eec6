"""Huffman compression of whole files, and measures of how well it did.

The compressed file holds only the packed code bits. Decoding needs the
``FileAnalysis`` of the original file, which gives the symbol frequencies
that rebuild the tree and the number of symbols to read back.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from algokit.huffman import HuffmanTree, count_frequencies, decode, encode

__all__ = [
    "FileAnalysis",
    "CompressionStats",
    "encode_file",
    "decode_file",
]

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class FileAnalysis:
    """Byte count and per-byte frequencies of a source file."""

    size: int
    frequencies: dict[int, int] = field(default_factory=dict)

    @classmethod
    def from_bytes(cls, data: bytes) -> FileAnalysis:
        """Analyse an in-memory byte string."""
        return cls(len(data), count_frequencies(data))

    @classmethod
    def from_file(cls, path: PathLike) -> FileAnalysis:
        """Read ``path`` and count how often each byte value occurs."""
        return cls.from_bytes(Path(path).read_bytes())

    @property
    def distinct(self) -> int:
        """Number of different byte values in the file."""
        return len(self.frequencies)

    @property
    def symbols(self) -> list[int]:
        """The byte values present, in ascending order."""
        return list(self.frequencies)

    def tree(self) -> HuffmanTree:
        """The Huffman tree for these frequencies."""
        return HuffmanTree.from_frequencies(self.frequencies)


def encode_file(source: PathLike, target: PathLike) -> FileAnalysis:
    """Compress ``source`` into ``target`` and return the analysis decoding needs."""
    data = Path(source).read_bytes()
    analysis = FileAnalysis.from_bytes(data)
    Path(target).write_bytes(encode(data, analysis.tree()))
    return analysis


def decode_file(source: PathLike, target: PathLike, analysis: FileAnalysis) -> int:
    """Decompress ``source`` into ``target``; return the number of bytes written.

    Raises EOFError when ``source`` holds fewer bits than ``analysis`` calls for.
    """
    packed = Path(source).read_bytes()
    data = decode(packed, analysis.tree(), analysis.size)
    Path(target).write_bytes(data)
    return len(data)


@dataclass(frozen=True)
class CompressionStats:
    """Sizes of an original file and of its compressed form."""

    original_size: int
    compressed_size: int

    @classmethod
    def from_files(cls, original: PathLike, compressed: PathLike) -> CompressionStats:
        """Measure both files on disk."""
        return cls(os.path.getsize(original), os.path.getsize(compressed))

    def compression_rate(self) -> float:
        """One minus the ratio of compressed to original size."""
        if self.original_size == 0:
            raise ValueError("original file is empty")
        return 1.0 - self.compressed_size / self.original_size

    def space_saving(self) -> float:
        """The compression rate as a percentage."""
        return self.compression_rate() * 100.0