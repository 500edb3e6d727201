import pytest

from ssca2bench.lcg_arith import (
    MASK48,
    MULTIPLIERS,
    add48,
    advance_seed,
    bit_reverse,
    mul48,
)


def test_bit_reverse_low_bit_goes_to_top():
    assert bit_reverse(1) == 1 << 30


def test_bit_reverse_of_zero():
    assert bit_reverse(0) == 0


@pytest.mark.parametrize("value", [1, 2, 12345, 0x7FFFFFFF, 0x55555555 & 0x7FFFFFFF])
def test_bit_reverse_is_involution_on_31_bits(value):
    assert bit_reverse(bit_reverse(value)) == value


def test_bit_reverse_ignores_bits_above_31():
    assert bit_reverse((1 << 31) | 5) == bit_reverse(5)


def test_add48_wraps():
    assert add48(MASK48, 1) == 0
    assert add48(3, 4) == 7


def test_mul48_stays_in_range_and_matches_small_products():
    assert mul48(6, 7) == 42
    big = mul48(MASK48, MASK48)
    assert 0 <= big <= MASK48
    assert big == 1


def test_advance_seed_constants_from_table():
    assert advance_seed(1, 0, 0) == 0xDADF0AC00001
    assert advance_seed(0, 0, 1) == 0xA42C22700000


@pytest.mark.parametrize("param", range(len(MULTIPLIERS)))
def test_advance_seed_is_affine(param):
    seed, prime = 0x123456789AB, 11863279
    combined = advance_seed(seed, param, prime)
    assert combined == add48(advance_seed(seed, param, 0), advance_seed(0, param, prime))
    assert 0 <= combined <= MASK48
    assert advance_seed(0, param, 0) == 0


@pytest.mark.parametrize("param", [-1, len(MULTIPLIERS)])
def test_advance_seed_rejects_unknown_param(param):
    with pytest.raises(ValueError):
        advance_seed(1, param, 1)