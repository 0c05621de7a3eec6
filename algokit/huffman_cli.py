"""Interactive menu to compress files with Huffman coding and expand them again."""

from __future__ import annotations

import os
import sys
import time
from pathlib import Path
from typing import TextIO, Union

from algokit.huffman_files import CompressionStats, FileAnalysis, decode_file, encode_file

__all__ = ["Session", "main"]

PathLike = Union[str, "os.PathLike[str]"]

_RULE = "========================================================================="


class Session:
    """Compresses into a fixed file and expands it using the last analysis made."""

    ENCODED_NAME = "Encoded_File.huf"
    DECODED_NAME = "Decrypted_File.dhuf"

    def __init__(self, directory: PathLike = ".") -> None:
        self.directory = Path(directory)
        self.analysis = FileAnalysis(0, {})

    @property
    def encoded_path(self) -> Path:
        return self.directory / self.ENCODED_NAME

    @property
    def decoded_path(self) -> Path:
        return self.directory / self.DECODED_NAME

    def compress(self, source: PathLike) -> CompressionStats:
        """Encode ``source`` into the encoded file; return the size comparison."""
        path = Path(source)
        if not path.is_file():
            raise FileNotFoundError(f"file not found: {path}")
        self.analysis = encode_file(path, self.encoded_path)
        return CompressionStats.from_files(path, self.encoded_path)

    def decompress(self, source: PathLike) -> int:
        """Expand the encoded file into the decoded file; return the bytes written.

        ``source`` must exist but is only checked; the data always comes from
        the encoded file and the analysis of the last compression.
        """
        if not Path(source).is_file():
            raise FileNotFoundError(f"file not found: {source}")
        return decode_file(self.encoded_path, self.decoded_path, self.analysis)


class _Console:
    """Reads single characters and words from a text stream, skipping whitespace."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _fill(self) -> bool:
        while not self._buffer.strip():
            line = self._stream.readline()
            if not line:
                return False
            self._buffer += line
        self._buffer = self._buffer.lstrip()
        return True

    def char(self) -> str | None:
        if not self._fill():
            return None
        head, self._buffer = self._buffer[0], self._buffer[1:]
        return head

    def word(self) -> str | None:
        if not self._fill():
            return None
        parts = self._buffer.split(maxsplit=1)
        self._buffer = parts[1] if len(parts) > 1 else ""
        return parts[0]


def _banner() -> None:
    print()
    print(_RULE)
    print("======      Compression or decompression of files (txt, wav, bmp ...)  ======")
    print("=====                    Huffman encode and decode                  =====")
    print(_RULE)
    print("Do you want to compress or decompress a file?")


def _menu() -> None:
    print("=========================================")
    print("** 1. Compress")
    print("** 2. Decompress")
    print("** 3. Exit")
    print("** ---> ", end="", flush=True)


def _print_stats(name: str, stats: CompressionStats, elapsed: float, encoded: Path) -> None:
    print("\t==========================================================")
    print("\t=====              Compression Result            =====")
    print("\t==========================================================")
    print(f" file {name} has {stats.original_size} byte")
    try:
        rate = f"{stats.compression_rate():g}"
        saving = f"{stats.space_saving():g}"
    except ValueError:
        rate = saving = "n/a"
    print(f" Compression Rate: {rate}")
    print(f" save space : {saving} %\n")
    print(f" Compressed file : {encoded.name}")
    print("----------------------------------------------------------")
    print(f" duration :  {elapsed:g}sec")


def main(argv: list[str] | None = None) -> int:
    """Run the compress/decompress menu on standard input until told to exit."""
    console = _Console(sys.stdin)
    session = Session()
    _banner()
    while True:
        _menu()
        mode = console.char()
        print("=========================================")
        if mode is None or mode == "3":
            return 0

        if mode == "1":
            print("\n\t==                 Compression by Huffman code         ==\n")
            print("input filename with extension")
            print("--->", end="", flush=True)
            name = console.word()
            if name is None:
                return 0
            started = time.perf_counter()
            print("\nEncoding the source file, please wait...")
            try:
                stats = session.compress(name)
            except FileNotFoundError:
                print("file not exist!")
                return 1
            print("\n The file has been encoded!\n")
            _print_stats(name, stats, time.perf_counter() - started, session.encoded_path)
        elif mode == "2":
            print("\n\t==             decompression by Huffman decode            ==\n")
            print("input decompressed file with extension")
            print("---->", end="", flush=True)
            name = console.word()
            if name is None:
                return 0
            started = time.perf_counter()
            print("================================")
            print("Decoding, please wait...")
            try:
                session.decompress(name)
            except FileNotFoundError:
                print("file  not exist!")
                return 1
            except EOFError as error:
                print(f"cannot decode: {error}")
                return 1
            print("The file has been decoded!")
            print()
            print(f" decompressed file: {session.decoded_path.name} ")
            print("----------------------------------------------------------")
            print(f" duration: {time.perf_counter() - started:g}sec")
        else:
            print(" retry")