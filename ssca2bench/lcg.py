"""Parallel 48-bit linear congruential generator with a prime addend.

Each stream advances ``x -> a*x + p (mod 2^48)`` where ``a`` is one of a
fixed set of multipliers and ``p`` is a prime chosen by the stream's
position, so that distinct streams produce distinct sequences.
"""

from __future__ import annotations

import struct
import warnings
from collections.abc import Sequence

from ssca2bench.lcg_arith import MASK48, MULTIPLIERS
from ssca2bench.registry import GeneratorRegistry

GENTYPE = "00" "48 bit Linear Congruential Generator with Prime Addend"
MAX_STREAMS = 1 << 19
INIT_SEED = 0x2BC68CFE166D
LCG_RUNUP = 29
TWO_M48 = 3.5527136788005008e-15

_RNG_TYPE = struct.Struct(">i")
_BODY = struct.Struct(">QiiiiiQ")
_FLOAT = struct.Struct("f")


def _initial_state(init_seed: int, prime: int) -> int:
    state = (INIT_SEED ^ (init_seed << 16)) & MASK48
    if prime == 0:
        state |= 1
    return state


class Lcg48:
    """One stream of the 48-bit prime-addend linear congruential generator."""

    def __init__(
        self,
        gennum: int,
        total_gen: int,
        seed: int,
        param: int,
        prime: int,
        rng_type: int = 0,
    ) -> None:
        if total_gen <= 0:
            warnings.warn(
                "Total_gen <= 0. Default value of 1 used for total_gen",
                RuntimeWarning,
                stacklevel=2,
            )
            total_gen = 1
        if gennum >= MAX_STREAMS:
            warnings.warn(
                f"gennum: {gennum} > maximum number of independent streams: "
                f"{MAX_STREAMS}; independence of streams cannot be guaranteed",
                RuntimeWarning,
                stacklevel=2,
            )
        if gennum < 0 or gennum >= total_gen:
            raise ValueError(f"gennum {gennum} out of range [0,{total_gen})")
        if not 0 <= param < len(MULTIPLIERS):
            warnings.warn(
                "multiplier not valid. Using Default param",
                RuntimeWarning,
                stacklevel=2,
            )
            param = 0

        self.rng_type = rng_type
        self.init_seed = seed & 0x7FFFFFFF
        self.prime = prime
        self.prime_position = gennum
        self.prime_next = total_gen
        self.parameter = param
        self.multiplier = MULTIPLIERS[param]
        self.state = _initial_state(self.init_seed, prime)
        self._skip(LCG_RUNUP * gennum)

    def _step(self) -> None:
        self.state = (self.state * self.multiplier + self.prime) & MASK48

    def _skip(self, steps: int) -> None:
        """Advance the state by ``steps`` draws in logarithmic time."""
        mul, add = 1, 0
        base_mul, base_add = self.multiplier, self.prime
        while steps:
            if steps & 1:
                mul, add = (mul * base_mul) & MASK48, (add * base_mul + base_add) & MASK48
            base_mul, base_add = (
                (base_mul * base_mul) & MASK48,
                (base_add * base_mul + base_add) & MASK48,
            )
            steps >>= 1
        self.state = (self.state * mul + add) & MASK48

    def next_int(self) -> int:
        """Return the next 31-bit non-negative integer."""
        self._step()
        return self.state >> 17

    def next_double(self) -> float:
        """Return the next double in [0, 1)."""
        self._step()
        return self.state * TWO_M48

    def next_float(self) -> float:
        """Return the next value in [0, 1) rounded to single precision."""
        return _FLOAT.unpack(_FLOAT.pack(self.next_double()))[0]

    def spawn(
        self,
        count: int,
        primes: Sequence[int],
        registry: GeneratorRegistry | None = None,
    ) -> list["Lcg48"]:
        """Create ``count`` new independent streams from this one.

        ``primes`` maps a stream position to its prime addend; positions past
        its last index wrap around. New streams are added to ``registry`` when
        one is given.
        """
        if count <= 0:
            warnings.warn(
                "nspawned <= 0. Default value of 1 used for nspawned",
                RuntimeWarning,
                stacklevel=2,
            )
            count = 1
        if not primes:
            raise ValueError("primes must not be empty")
        max_offset = len(primes) - 1

        children = []
        for i in range(1, count + 1):
            position = self.prime_position + self.prime_next * i
            if position > max_offset:
                warnings.warn(
                    f"gennum: {position} > maximum number of independent streams: "
                    f"{MAX_STREAMS}; independence of streams cannot be guaranteed",
                    RuntimeWarning,
                    stacklevel=2,
                )
                position = position % max_offset if max_offset else 0
            child = self._from_fields(
                rng_type=self.rng_type,
                state=0,
                init_seed=self.init_seed,
                prime=primes[position],
                prime_position=position,
                prime_next=(count + 1) * self.prime_next,
                parameter=self.parameter,
            )
            child.multiplier = self.multiplier
            child.state = _initial_state(child.init_seed, child.prime)
            child._skip(LCG_RUNUP * position)
            children.append(child)

        self.prime_next *= count + 1
        if registry is not None:
            for child in children:
                registry.add(child)
        return children

    def pack(self) -> bytes:
        """Serialise the stream into a portable big-endian byte string."""
        return b"".join(
            (
                _RNG_TYPE.pack(self.rng_type),
                GENTYPE.encode("ascii") + b"\0",
                _BODY.pack(
                    self.state,
                    self.init_seed,
                    self.prime,
                    self.prime_position,
                    self.prime_next,
                    self.parameter,
                    self.multiplier,
                ),
            )
        )

    @classmethod
    def unpack(cls, data: bytes) -> "Lcg48":
        """Rebuild a stream from the output of :meth:`pack`."""
        try:
            (rng_type,) = _RNG_TYPE.unpack_from(data, 0)
            end = data.index(b"\0", _RNG_TYPE.size)
        except (struct.error, ValueError) as exc:
            raise ValueError("packed generator data is truncated") from exc
        name = data[_RNG_TYPE.size:end]
        if name != GENTYPE.encode("ascii"):
            raise ValueError(
                f"Unpacked {name[:24].decode('ascii', 'replace')!r} "
                f"instead of {GENTYPE!r}"
            )
        try:
            state, init_seed, prime, position, prime_next, parameter, _ = (
                _BODY.unpack_from(data, end + 1)
            )
        except struct.error as exc:
            raise ValueError("packed generator data is truncated") from exc
        if not 0 <= parameter < len(MULTIPLIERS):
            raise ValueError("Unpacked parameters not acceptable.")
        return cls._from_fields(
            rng_type=rng_type,
            state=state,
            init_seed=init_seed,
            prime=prime,
            prime_position=position,
            prime_next=prime_next,
            parameter=parameter,
        )

    @classmethod
    def _from_fields(
        cls,
        *,
        rng_type: int,
        state: int,
        init_seed: int,
        prime: int,
        prime_position: int,
        prime_next: int,
        parameter: int,
    ) -> "Lcg48":
        gen = cls.__new__(cls)
        gen.rng_type = rng_type
        gen.state = state
        gen.init_seed = init_seed
        gen.prime = prime
        gen.prime_position = prime_position
        gen.prime_next = prime_next
        gen.parameter = parameter
        gen.multiplier = MULTIPLIERS[parameter]
        return gen

    def describe(self) -> str:
        """Return a human-readable summary of the stream."""
        return (
            f"\n{GENTYPE[2:]}\n"
            f"\n \tseed = {self.init_seed}, stream_number = {self.prime_position}"
            f"\tparameter = {self.parameter}\n\n"
        )