"""Canvas sizing and block slicing"""

import pytest

from binvis.blocks import BLOCK_SIZE, compute_geometry, get_block, get_block_count, get_side_length


@pytest.mark.parametrize("filelen,expected", [
    (1, 1), (10, 1), (15, 1),
    (16, 4),   # ratio exactly 1.0 -> needs a power of 4 strictly above it
    (17, 4), (63, 4),
    (64, 16), (65, 16),
    (1024, 256),
    (1025, 256),
    (4096, 1024),
])
def test_block_count(filelen, expected):
    assert get_block_count(filelen, 16) == expected


@pytest.mark.parametrize("filelen", [1, 7, 16, 100, 999, 12345, 1 << 20])
def test_block_count_is_minimal_power_of_four(filelen):
    count = get_block_count(filelen, BLOCK_SIZE)
    assert count & (count - 1) == 0 and (count.bit_length() - 1) % 2 == 0
    assert count > filelen / BLOCK_SIZE
    assert count == 1 or count // 4 <= filelen / BLOCK_SIZE


def test_geometry_literals():
    geo = compute_geometry(10, 16)
    assert (geo.blocksize, geo.blockcount, geo.sidelen) == (16, 1, 1)
    geo = compute_geometry(17, 16)
    assert (geo.blocksize, geo.blockcount, geo.sidelen) == (16, 4, 2)


def test_side_length_rejects_non_square():
    assert get_side_length(64) == 8
    with pytest.raises(ValueError):
        get_side_length(8)


def test_block_size_must_be_positive():
    with pytest.raises(ValueError):
        get_block_count(10, 0)
    with pytest.raises(ValueError):
        get_block(b"abc", 0, -1)


def test_short_buffer_is_not_padded():
    data = b"0123456789"
    assert get_block(data, 0, 16) == data


def test_block_past_end_is_zeros():
    data = bytes(range(20))
    assert get_block(data, 2, 16) == bytes(16)
    assert get_block(data, 100, 16) == bytes(16)


def test_full_blocks_and_tail():
    data = bytes(range(40))
    assert get_block(data, 0, 16) == bytes(range(16))
    assert get_block(data, 1, 16) == bytes(range(16, 32))
    assert get_block(data, 2, 16) == bytes(range(32, 40))


def test_block_ending_exactly_at_end():
    data = bytes(range(32))
    assert get_block(data, 1, 16) == bytes(range(16, 32))
    assert get_block(data, 2, 16) == bytes(16)


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        get_block(b"abc", -1)
