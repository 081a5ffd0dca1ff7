import pytest

from algokit.huffman import HuffmanTree

SAMPLE = "this is an example of a huffman tree"


def _bits(packed, length):
    return "".join(format(b, "08b") for b in packed)[:length]


def test_round_trip():
    tree = HuffmanTree(SAMPLE)
    packed, length = tree.encode(SAMPLE)
    assert tree.decode(packed, length) == SAMPLE.encode()


def test_frequencies_count_sample():
    tree = HuffmanTree("aab")
    freqs = tree.frequencies()
    assert len(freqs) == 256
    assert freqs[ord("a")] == 2
    assert freqs[ord("b")] == 1
    assert sum(freqs) == 3


def test_codes_are_prefix_free():
    tree = HuffmanTree(SAMPLE)
    codes = [tree.code_for(c) for c in set(SAMPLE)]
    for a in codes:
        for b in codes:
            if a is not b and a != b:
                assert not b.startswith(a)


def test_frequent_symbols_get_shorter_codes():
    tree = HuffmanTree("a" * 50 + "b" * 10 + "c" * 3 + "d")
    assert len(tree.code_for("a")) <= len(tree.code_for("b"))
    assert len(tree.code_for("b")) <= len(tree.code_for("d"))


def test_encoding_is_msb_first_concatenation():
    tree = HuffmanTree(SAMPLE)
    message = "a tree"
    packed, length = tree.encode(message)
    expected = "".join(tree.code_for(c) for c in message)
    assert length == len(expected)
    assert _bits(packed, length) == expected
    assert len(packed) == (length + 7) // 8


def test_single_symbol_sample():
    tree = HuffmanTree("zzzz")
    packed, length = tree.encode("zz")
    assert length == 2
    assert tree.decode(packed, length) == b"zz"


def test_code_for_accepts_int_and_bytes():
    tree = HuffmanTree(SAMPLE)
    assert tree.code_for(ord("e")) == tree.code_for("e") == tree.code_for(b"e")


def test_errors():
    with pytest.raises(ValueError):
        HuffmanTree("")
    tree = HuffmanTree("abc")
    with pytest.raises(KeyError):
        tree.code_for("q")
    with pytest.raises(KeyError):
        tree.encode("abq")
    with pytest.raises(ValueError):
        tree.decode(b"\x00", 9)
    with pytest.raises(ValueError):
        tree.code_for("ab")