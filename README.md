# algokit

Classic algorithms and data structures in plain Python, with no runtime
dependencies.

## Contents

| Module | What it provides |
| --- | --- |
| `algokit.searching` | Binary search variants over sorted sequences |
| `algokit.rbtree` | A red-black tree with insert, remove and search, plus an interactive shell |
| `algokit.fft` | A real-input split-radix FFT of power-of-two size |
| `algokit.huffman` | Huffman trees, bit streams, encoding and decoding of bytes |
| `algokit.huffman_files` | File-level Huffman compression and size statistics |
| `algokit.huffman_cli` | An interactive compress/decompress menu |
| `algokit.mfcc` | MFCC feature extraction for sampled signals |
| `algokit.dtw` | Dynamic time warping between integer feature sequences |
| `algokit.astar` | A* path finding on a grid |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Searching

The functions work on sorted (non-decreasing) sequences and return an index,
or `-1` when there is none.

```python
from algokit.searching import binary_search, first_position, last_position, count_occurrences

data = [1, 3, 3, 4, 6, 8, 9]
binary_search(data, 4)          # 3
first_position(data, 3)         # 1
last_position(data, 3)          # 2
count_occurrences(data, 3)      # 2
```

Further variants: `binary_search_signed` (returns `-(insertion point + 1)`
when the key is absent), `find_first_invariant`, `search_first`,
`search_last`, `insertion_point`, `insertion_point_first`, `last_less_than`,
`first_greater_than` and `search_rotated` (for a rotated sorted sequence of
distinct items). `search_first`, `search_last` and `insertion_point_first`
raise `ValueError` for sequences shorter than two items, `insertion_point`
for an empty one.

## Red-black tree

```python
from algokit.rbtree import RedBlackTree

tree = RedBlackTree(range(1, 11))
tree.remove(5)
tree.search(7)       # the RBNode holding 7
tree.search(5)       # None
7 in tree            # True
tree.keys()          # keys in ascending order
len(tree)            # 9
tree.clear()
```

Keys are unique: `insert` raises `KeyError` for a key already present and
`remove` raises `KeyError` for one that is absent.

The interactive shell reads from standard input. It asks for a begin and an
end key, inserts that whole range, then accepts `i` (insert), `r` (remove),
`s` (search) followed by a key, and `q` to quit, printing the time each
operation took.

```
algokit-rbtree
```

## FFT

```python
from algokit.fft import RealFFT

fft = RealFFT(8)
spectrum = fft.transform([1, 0, 0, 0, 0, 0, 0, 0])
```

The size must be a power of two of at least 4. Input shorter than the size is
zero-padded. The result has the same length: index 0 is the DC term, index
`k` (for `1 <= k <= n/2`) the real part of bin `k`, and index `n - k` (for
`1 <= k < n/2`) its imaginary part.

## Huffman coding

```python
from algokit.huffman import HuffmanTree, count_frequencies, encode, decode

data = b"abracadabra"
tree = HuffmanTree.from_frequencies(count_frequencies(data))
packed = encode(data, tree)
assert decode(packed, tree, len(data)) == data
```

The packed bytes hold only the code bits, most significant bit first, with the
last byte padded with zeros; decoding needs the same tree and the number of
symbols. `BitWriter`, `BitReader` and `MinHeap` are available on their own.

`algokit.huffman_files` works on files:

```python
from algokit.huffman_files import CompressionStats, decode_file, encode_file

analysis = encode_file("notes.txt", "notes.huf")      # a FileAnalysis
decode_file("notes.huf", "notes.out", analysis)
stats = CompressionStats.from_files("notes.txt", "notes.huf")
stats.compression_rate()     # 1 - compressed / original
stats.space_saving()         # the same as a percentage
```

The compressed file stores no header, so keep the `FileAnalysis` (or build
one again from the original with `FileAnalysis.from_file`) to decode it.

### Interactive menu

```
algokit-huffman
```

Choose `1` to compress a file named at the prompt into `Encoded_File.huf` in
the current directory, with its size, compression rate and time printed;
`2` to expand `Encoded_File.huf` into `Decrypted_File.dhuf`; `3` to exit.
Because the compressed file carries no frequency table, option `2` only works
after a compression in the same session. The name asked for by option `2`
must be an existing file, but the data always comes from `Encoded_File.huf`.
The same steps are available from code through `algokit.huffman_cli.Session`.

## MFCC features

```python
import math
from algokit.mfcc import Parameters, mfcc, save_features, read_features

samples = [1000 * math.sin(2 * math.pi * 440 * t / 16000) for t in range(16000)]
params = Parameters.parse("-n 24 -p 13")
features = mfcc(samples, 16000, params)      # one 13-value vector per frame
save_features(features, "tone.mfcc")
assert len(read_features("tone.mfcc")) == len(features)
```

`Parameters.parse` starts from the defaults and understands `-k` pre-emphasis,
`-l` frame length (ms), `-d` frame shift (ms), `-w` window code (0
rectangular, 1 Hamming, 2 Hanning, 3 Blackman), `-n` filters, `-i` and `-u`
lower and upper frequency (Hz), `-b` FFT length, `-p` cepstral coefficients
and `-r` lifter. The stages are also exposed one by one: `pre_emphasis`,
`frame_signal`, `window_weights`, `mel_indices`, `filterbank`, `dct_matrix`
and `lifter_weights`, with `hz_to_mel`, `mel_to_hz` and `round_half`.

## Dynamic time warping

```python
from algokit.dtw import dynamic_time_warping

result = dynamic_time_warping([[1, 1], [2, 2], [3, 3]], [[1, 1], [3, 3]])
result.path     # list of (i, k) index pairs from (0, 0) to the far corner
result.cost     # accumulated distance at the far corner
```

Distances are squared Euclidean. `distance_measure`, `local_distance_matrix`,
`global_distance_matrix` and `warping_path` can be used separately, and
`read_sequence(path, rows)` loads `rows` vectors of 12 whitespace-separated
integers from a text file.

```
algokit-dtw 9 first.txt 6 second.txt
```

compares two such files and prints both inputs, the local and global
distance matrices, the optimal warping path and its cost. Any of the four
arguments left out is asked for on standard input.

## A* path finding

```python
from algokit.astar import AStar, SearchParams, Vec2

grid = [
    [0, 1, 0],
    [0, 0, 0],
    [1, 1, 0],
]
params = SearchParams(
    width=3,
    height=3,
    start=Vec2(0, 0),
    end=Vec2(2, 2),
    corner=True,
    can_reach=lambda pos: grid[pos.y][pos.x] == 0,
)
path = AStar().find(params)   # Vec2 cells from the first step to the end, [] if unreachable
```

Orthogonal steps cost 10 and diagonal ones 14 by default
(`AStar(step_value=..., oblique_value=...)`). `find` raises `ValueError` when
the grid is empty, an endpoint lies outside it or no `can_reach` test is
given. The search stops as soon as the end cell is first reached.

A demonstration on the fixed 10×10 grid `DEMO_MAP`:

```
algokit-astar
```

## What is not included

The package has no sorting routines (Python's `sorted` and `list.sort` cover
that) and no maze generator or maze solver. The MFCC code works on samples
already in memory: it does not record audio, read sound files or recognise
spoken words.