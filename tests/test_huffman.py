import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.huffman import (
    BitReader,
    BitWriter,
    HuffmanNode,
    HuffmanTree,
    MinHeap,
    count_frequencies,
    decode,
    encode,
)


def _tree_for(data: bytes) -> HuffmanTree:
    return HuffmanTree.from_frequencies(count_frequencies(data))


def test_count_frequencies_counts_each_byte_in_order():
    result = count_frequencies(b"cabca")
    assert result == {ord("a"): 2, ord("b"): 1, ord("c"): 2}
    assert list(result) == sorted(result)


def test_min_heap_extracts_in_frequency_order():
    heap = MinHeap(HuffmanNode(s, f) for s, f in enumerate([5, 1, 4, 2, 3, 9, 0]))
    extracted = [heap.extract_min().frequency for _ in range(7)]
    assert extracted == sorted(extracted)
    assert len(heap) == 0


def test_min_heap_empty_extract_raises():
    with pytest.raises(IndexError):
        MinHeap().extract_min()


def test_two_symbol_tree_encoding():
    data = b"aab"
    tree = _tree_for(data)
    assert len(tree.code_for(ord("a"))) == 1
    assert tree.code_for(ord("a")) != tree.code_for(ord("b"))
    assert encode(data, tree) == b"\xc0"


def test_bit_writer_pads_last_byte():
    writer = BitWriter()
    for bit in (1, 0, 1):
        writer.write_bit(bit)
    assert writer.getvalue() == b"\xa0"


def test_bit_reader_reads_msb_first_and_stops():
    reader = BitReader(bytes([0b10010110]))
    assert [reader.read_bit() for _ in range(8)] == [1, 0, 0, 1, 0, 1, 1, 0]
    with pytest.raises(EOFError):
        reader.read_bit()


@given(st.lists(st.integers(0, 1), max_size=64))
def test_bit_writer_reader_round_trip(bits):
    data = BitWriter()
    for bit in bits:
        data.write_bit(bit)
    value = data.getvalue()
    assert len(value) == (len(bits) + 7) // 8
    reader = BitReader(value)
    assert [reader.read_bit() for _ in bits] == bits


@given(st.binary(min_size=1, max_size=300))
def test_encode_decode_round_trip(data):
    tree = _tree_for(data)
    assert decode(encode(data, tree), tree, len(data)) == data


@given(st.binary(min_size=2, max_size=300))
def test_codes_are_prefix_free_and_complete(data):
    tree = _tree_for(data)
    codes = [tree.code_for(s) for s in tree.leaves]
    if len(codes) > 1:
        assert sum(2.0 ** -len(c) for c in codes) == pytest.approx(1.0)
        for a in codes:
            for b in codes:
                if a is not b:
                    assert a != b[: len(a)]


@given(st.binary(min_size=2, max_size=300))
def test_more_frequent_symbols_get_no_longer_codes(data):
    freqs = count_frequencies(data)
    tree = HuffmanTree.from_frequencies(freqs)
    for a in freqs:
        for b in freqs:
            if freqs[a] > freqs[b]:
                assert len(tree.code_for(a)) <= len(tree.code_for(b))


@given(st.binary(min_size=1, max_size=300))
def test_encoded_length_matches_code_lengths(data):
    freqs = count_frequencies(data)
    tree = HuffmanTree.from_frequencies(freqs)
    total_bits = sum(freqs[s] * len(tree.code_for(s)) for s in freqs)
    assert len(encode(data, tree)) == (total_bits + 7) // 8


def test_single_symbol_needs_no_bits():
    data = b"zzzz"
    tree = _tree_for(data)
    assert encode(data, tree) == b""
    assert decode(b"", tree, len(data)) == data


def test_empty_tree_handles_empty_data_only():
    tree = HuffmanTree.from_frequencies({})
    assert tree.root is None
    assert encode(b"", tree) == b""
    assert decode(b"", tree, 0) == b""
    with pytest.raises(ValueError):
        decode(b"\x00", tree, 1)


def test_unknown_symbol_cannot_be_encoded():
    tree = _tree_for(b"abc")
    with pytest.raises(KeyError):
        encode(b"abd", tree)


def test_decode_past_end_of_data_raises():
    data = b"abcabcabd"
    tree = _tree_for(data)
    with pytest.raises(EOFError):
        decode(b"", tree, 1)


def test_root_frequency_is_total_count():
    data = b"hello huffman"
    tree = _tree_for(data)
    assert tree.root is not None
    assert tree.root.frequency == len(data)