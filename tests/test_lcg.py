import pytest

from ssca2bench.lcg import GENTYPE, INIT_SEED, LCG_RUNUP, Lcg48
from ssca2bench.lcg_arith import MULTIPLIERS
from ssca2bench.registry import GeneratorRegistry

PRIMES = [11863279, 11863259, 11863253, 11863249, 11863237, 11863213]


def test_initial_state_for_seed_zero():
    gen = Lcg48(0, 1, 0, 0, PRIMES[0])
    assert gen.state == INIT_SEED


def test_initial_state_mixes_seed():
    gen = Lcg48(0, 1, 1, 0, PRIMES[0])
    assert gen.state == INIT_SEED ^ (1 << 16)


def test_seed_is_truncated_to_31_bits():
    a = Lcg48(0, 1, 5, 0, PRIMES[0])
    b = Lcg48(0, 1, 5 | (1 << 31), 0, PRIMES[0])
    assert a.init_seed == b.init_seed == 5
    assert a.state == b.state


def test_runup_matches_sequential_draws():
    base = Lcg48(0, 1, 7, 2, 11)
    for _ in range(LCG_RUNUP * 3):
        base.next_int()
    jumped = Lcg48(3, 4, 7, 2, 11)
    assert jumped.state == base.state


def test_int_and_double_agree():
    a = Lcg48(0, 1, 42, 1, PRIMES[1])
    b = Lcg48(0, 1, 42, 1, PRIMES[1])
    for _ in range(50):
        assert a.next_int() == int(b.next_double() * 2**31)


def test_doubles_in_unit_interval():
    gen = Lcg48(0, 1, 3, 0, PRIMES[0])
    values = [gen.next_double() for _ in range(500)]
    assert all(0.0 <= v < 1.0 for v in values)
    assert len(set(values)) == len(values)


def test_float_close_to_double():
    a = Lcg48(0, 1, 9, 0, PRIMES[0])
    b = Lcg48(0, 1, 9, 0, PRIMES[0])
    for _ in range(20):
        f, d = a.next_float(), b.next_double()
        assert abs(f - d) <= 2**-23


def test_gennum_out_of_range():
    with pytest.raises(ValueError):
        Lcg48(2, 2, 0, 0, PRIMES[0])
    with pytest.raises(ValueError):
        Lcg48(-1, 2, 0, 0, PRIMES[0])


def test_nonpositive_total_gen_defaults_to_one():
    with pytest.warns(RuntimeWarning):
        gen = Lcg48(0, 0, 0, 0, PRIMES[0])
    assert gen.prime_next == 1


def test_invalid_param_falls_back_to_default():
    with pytest.warns(RuntimeWarning):
        gen = Lcg48(0, 1, 0, 99, PRIMES[0])
    assert gen.parameter == 0
    assert gen.multiplier == MULTIPLIERS[0]


def test_pack_round_trip():
    gen = Lcg48(1, 4, 2387, 3, PRIMES[2], rng_type=1)
    gen.next_int()
    data = gen.pack()
    assert len(data) == 6 * 4 + 2 * 8 + len(GENTYPE) + 1
    assert data[:4] == b"\x00\x00\x00\x01"
    copy = Lcg48.unpack(data)
    assert copy.pack() == data
    assert [copy.next_int() for _ in range(10)] == [gen.next_int() for _ in range(10)]


def test_unpack_rejects_other_generator():
    data = bytearray(Lcg48(0, 1, 0, 0, PRIMES[0]).pack())
    data[4] = ord("9")
    with pytest.raises(ValueError):
        Lcg48.unpack(bytes(data))


def test_unpack_rejects_bad_parameter():
    data = bytearray(Lcg48(0, 1, 0, 0, PRIMES[0]).pack())
    # parameter is the fifth int after the 8-byte state
    offset = 4 + len(GENTYPE) + 1 + 8 + 4 * 4
    data[offset:offset + 4] = (50).to_bytes(4, "big")
    with pytest.raises(ValueError):
        Lcg48.unpack(bytes(data))


def test_unpack_rejects_truncated():
    data = Lcg48(0, 1, 0, 0, PRIMES[0]).pack()
    with pytest.raises(ValueError):
        Lcg48.unpack(data[:-5])


def test_spawn_positions_and_offsets():
    parent = Lcg48(0, 1, 11, 0, PRIMES[0])
    registry = GeneratorRegistry()
    children = parent.spawn(2, PRIMES, registry)
    assert [c.prime_position for c in children] == [1, 2]
    assert [c.prime for c in children] == [PRIMES[1], PRIMES[2]]
    assert all(c.prime_next == 3 for c in children)
    assert parent.prime_next == 3
    assert len(registry) == 2
    assert all(c in registry for c in children)


def test_spawned_child_matches_fresh_stream():
    parent = Lcg48(0, 1, 11, 1, PRIMES[0])
    (child,) = parent.spawn(1, PRIMES)
    fresh = Lcg48(1, 2, 11, 1, PRIMES[1])
    assert child.state == fresh.state
    assert [child.next_int() for _ in range(5)] == [fresh.next_int() for _ in range(5)]


def test_spawn_nonpositive_count_gives_one():
    parent = Lcg48(0, 1, 0, 0, PRIMES[0])
    with pytest.warns(RuntimeWarning):
        children = parent.spawn(0, PRIMES)
    assert len(children) == 1


def test_spawn_wraps_position():
    parent = Lcg48(0, 1, 0, 0, PRIMES[0])
    with pytest.warns(RuntimeWarning):
        children = parent.spawn(8, PRIMES)
    assert all(0 <= c.prime_position < len(PRIMES) for c in children)


def test_describe():
    text = Lcg48(2, 3, 5, 1, PRIMES[0]).describe()
    assert GENTYPE[2:] in text
    assert "seed = 5, stream_number = 2\tparameter = 1" in text