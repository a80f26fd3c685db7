import pytest

from ltlr.bit_mask import BitMask


def test_new_mask_is_clear():
    mask = BitMask(5, 4)
    assert not any(mask.get(x, y) for x in range(5) for y in range(4))


def test_set_and_clear():
    mask = BitMask(5, 4)
    mask.set(2, 3, True)
    assert mask.get(2, 3)
    assert not mask.get(3, 2)
    mask.set(2, 3, False)
    assert not mask.get(2, 3)


def test_out_of_bounds_reads_false_and_writes_are_ignored():
    mask = BitMask(4, 4)
    mask.set(4, 0, True)
    mask.set(-1, 1, True)
    mask.set(0, 4, True)
    assert not mask.get(0, 1)
    assert not mask.get(3, 0)
    assert not mask.get(4, 0)
    assert not mask.get(-1, 0)


def test_checkerboard_across_word_boundary():
    mask = BitMask(10, 10)
    for y in range(10):
        for x in range(10):
            mask.set(x, y, (x + y) % 2 == 0)
    assert all(mask.get(x, y) == ((x + y) % 2 == 0) for x in range(10) for y in range(10))


def test_adjacent_bits_in_different_words():
    mask = BitMask(10, 10)
    mask.set(3, 6, True)
    assert mask.get(3, 6)
    assert not mask.get(4, 6)
    mask.set(4, 6, True)
    mask.set(3, 6, False)
    assert mask.get(4, 6) and not mask.get(3, 6)


def test_size_in_bytes():
    assert BitMask(8, 8).size == 8
    assert BitMask(9, 8).size == 16


def test_negative_dimension_rejected():
    with pytest.raises(ValueError):
        BitMask(-1, 3)