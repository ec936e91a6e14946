import pytest

from cryptolab.sbox import S1, s1_output


def test_corner_values_from_table():
    assert s1_output(0) == S1[0][0]
    assert s1_output(63) == S1[3][15]
    assert s1_output(1) == S1[1][0]


def test_known_entries():
    assert s1_output(0) == 14
    assert s1_output(63) == 13


@pytest.mark.parametrize("row", range(4))
def test_each_row_is_a_permutation(row):
    outputs = [s1_output(((row & 2) << 4) | (col << 1) | (row & 1)) for col in range(16)]
    assert sorted(outputs) == list(range(16))
    assert outputs == list(S1[row])


def test_every_output_is_four_bits():
    assert all(0 <= s1_output(v) <= 15 for v in range(64))


def test_each_output_appears_four_times():
    outputs = [s1_output(v) for v in range(64)]
    assert all(outputs.count(o) == 4 for o in range(16))


@pytest.mark.parametrize("value", [-1, 64, 1000])
def test_out_of_range_rejected(value):
    with pytest.raises(ValueError):
        s1_output(value)