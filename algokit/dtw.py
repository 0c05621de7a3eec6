"""Dynamic time warping between two sequences of integer feature vectors."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Union

__all__ = [
    "FEATURE_WIDTH",
    "WarpingResult",
    "distance_measure",
    "local_distance_matrix",
    "global_distance_matrix",
    "warping_path",
    "dynamic_time_warping",
    "read_sequence",
    "main",
]

PathLike = Union[str, "os.PathLike[str]"]

FEATURE_WIDTH = 12
"""Number of values per row in a sequence file."""

Matrix = list[list[int]]


@dataclass(frozen=True)
class WarpingResult:
    """Distance matrices, optimal warping path and its cost."""

    local_distance: Matrix
    global_distance: Matrix
    path: list[tuple[int, int]]
    cost: int


def distance_measure(a: Sequence[int], b: Sequence[int]) -> int:
    """Squared Euclidean distance between two vectors of equal length."""
    if len(a) != len(b):
        raise ValueError(f"vectors differ in length: {len(a)} and {len(b)}")
    return sum((x - y) * (x - y) for x, y in zip(a, b))


def local_distance_matrix(
    seq1: Sequence[Sequence[int]], seq2: Sequence[Sequence[int]]
) -> Matrix:
    """Distance of every vector of ``seq1`` to every vector of ``seq2``."""
    return [[distance_measure(a, b) for b in seq2] for a in seq1]


def global_distance_matrix(local: Sequence[Sequence[int]]) -> Matrix:
    """Accumulated distances over the local distance matrix."""
    if not local or not local[0]:
        raise ValueError("local distance matrix is empty")
    rows, cols = len(local), len(local[0])
    acc = [[0] * cols for _ in range(rows)]
    acc[0][0] = local[0][0]
    for i in range(1, rows):
        acc[i][0] = local[i][0] + acc[i - 1][0]
    for k in range(1, cols):
        acc[0][k] = local[0][k] + acc[0][k - 1]
    for i in range(1, rows):
        for k in range(1, cols):
            acc[i][k] = local[i][k] + min(acc[i - 1][k], acc[i - 1][k - 1], acc[i][k - 1])
    return acc


def warping_path(global_distance: Sequence[Sequence[int]]) -> list[tuple[int, int]]:
    """Walk from (0, 0) to the far corner, always stepping to the cheapest neighbour.

    Ties prefer the next row, then the diagonal, then the next column.
    """
    if not global_distance or not global_distance[0]:
        raise ValueError("global distance matrix is empty")
    last_row = len(global_distance) - 1
    last_col = len(global_distance[0]) - 1
    i = k = 0
    path = [(0, 0)]
    while i != last_row or k != last_col:
        if i == last_row:
            k += 1
        elif k == last_col:
            i += 1
        else:
            down = global_distance[i + 1][k]
            diagonal = global_distance[i + 1][k + 1]
            right = global_distance[i][k + 1]
            best = min(down, diagonal, right)
            if down == best:
                i += 1
            elif diagonal == best:
                i += 1
                k += 1
            else:
                k += 1
        path.append((i, k))
    return path


def dynamic_time_warping(
    seq1: Sequence[Sequence[int]], seq2: Sequence[Sequence[int]]
) -> WarpingResult:
    """Align two sequences and return matrices, path and cost."""
    if not seq1 or not seq2:
        raise ValueError("both sequences must hold at least one vector")
    local = local_distance_matrix(seq1, seq2)
    acc = global_distance_matrix(local)
    return WarpingResult(local, acc, warping_path(acc), acc[-1][-1])


def read_sequence(path: PathLike, rows: int) -> list[list[int]]:
    """Read ``rows`` vectors of ``FEATURE_WIDTH`` whitespace-separated integers."""
    if rows < 0:
        raise ValueError(f"row count must not be negative, got {rows}")
    tokens = Path(path).read_text().split()
    needed = rows * FEATURE_WIDTH
    if len(tokens) < needed:
        raise ValueError(f"{path}: expected {needed} values, found {len(tokens)}")
    values = [int(token) for token in tokens[:needed]]
    return [values[start : start + FEATURE_WIDTH] for start in range(0, needed, FEATURE_WIDTH)]


def _row_text(row: Sequence[int], separator: str) -> str:
    return "".join(f"{value}{separator}" for value in row)


def main(argv: list[str] | None = None) -> int:
    """Read two sequence files, print the matrices, the warping path and its cost.

    ``argv`` may give the row count and file name of each input in turn;
    anything missing is asked for on standard input.
    """
    answers = iter(sys.argv[1:] if argv is None else argv)

    def ask(prompt: str) -> str:
        answer = next(answers, None)
        return answer if answer is not None else input(prompt)

    sequences = []
    for label, ordinal in (("input1", "First"), ("input2", "Second")):
        print(f"\n------------------------------------------ {label} -----------------------------")
        try:
            rows = int(ask(f"{ordinal} Input Text File => No. of Rows : "))
        except ValueError:
            print("invalid number of rows!")
            return 1
        name = ask(f"{ordinal} Input Text File Name : ")
        print()
        try:
            sequence = read_sequence(name, rows)
        except FileNotFoundError:
            print("file not found!")
            return 1
        except ValueError as error:
            print(error)
            return 1
        for row in sequence:
            print(_row_text(row, " "))
        sequences.append(sequence)

    try:
        result = dynamic_time_warping(sequences[0], sequences[1])
    except ValueError as error:
        print(error)
        return 1

    rule = "-------------------------------------------------------------------------------"
    print("\n----------------------------- Local Distance Matrix ---------------------------\n")
    for row in result.local_distance:
        print(_row_text(row, "\t "))
    print(rule + "\n")
    print("----------------------------- Global Distance Matrix --------------------------\n")
    for row in result.global_distance:
        print(_row_text(row, "\t "))
    print(rule + "\n")
    print("Optimal Warping Path : " + "".join(f"({i},{k}) " for i, k in result.path))
    print(f"Optimal Warping Path Cost : {result.cost}")
    print("\n" + rule + "\n")
    return 0