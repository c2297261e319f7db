"""
- Random pegs with a replaceable source of bytes
Each peg is one random byte (0..255) reduced with `% peg_range`. That reduction
is slightly uneven when peg_range does not divide 256, but every value in
[0, peg_range) can still come up.

The default source is the secure generator from `secrets`. Tests (or anyone
wanting a replayable game) can pass a seeded source instead.
"""

import random
from secrets import randbits
from typing import Callable, List, Optional

ByteSource = Callable[[], int]


def secure_byte() -> int:
    # randbits(8) gives us a number between 0 and 255
    return randbits(8)


def seeded_source(seed) -> ByteSource:
    """Deterministic byte source; same seed, same pegs."""
    rng = random.Random(seed)

    def next_byte() -> int:
        return rng.getrandbits(8)

    return next_byte


def fetch_pegs(count: int, peg_range: int, byte_source: Optional[ByteSource] = None) -> List[int]:
    # peg_range must be >= 1; the builder validates it before we get here
    if peg_range < 1:
        raise ValueError(f"peg_range must be at least 1, got {peg_range}.")

    source = byte_source or secure_byte

    pegs = []
    k = 0
    while k < count:
        value = source()
        # Check the source kept its promise of a single byte
        if value < 0 or value > 255:
            raise ValueError(f"Byte source returned {value}, expected 0..255.")
        pegs.append(value % peg_range)
        k += 1
    return pegs
