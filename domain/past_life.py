"""Deterministic name -> past life mapping.

Names hash exactly like the JavaScript version of the page, so a name keeps
the same past life it always had:

- 32-bit signed accumulator, `acc * 31 + unit`, wrapped after every step.
- Units are UTF-16 code units. Outside the Basic Multilingual Plane a
  character counts as its surrogate pair.
- The magnitude of -2**31 is 2**31. It does not wrap back to negative.
"""

from typing import Sequence

from domain.errors import ConfigurationError
from domain.models import PastLife


HASH_MULTIPLIER = 31
INT32_MIN = -(2**31)
UINT32_MASK = 0xFFFFFFFF

YEAR_RANGE = 32000
YEAR_OFFSET = 30000
MIN_YEAR = -YEAR_OFFSET
MAX_YEAR = YEAR_RANGE - YEAR_OFFSET - 1


def to_int32(n: int) -> int:
    n &= UINT32_MASK
    return n - 2**32 if n & 0x80000000 else n


def utf16_units(s: str) -> list[int]:
    data = s.encode("utf-16-le", errors="surrogatepass")
    return [int.from_bytes(data[i : i + 2], "little") for i in range(0, len(data), 2)]


def name_hash(name: str) -> int:
    """32-bit signed hash of `name`."""
    acc = 0
    for unit in utf16_units(name):
        acc = to_int32(acc * HASH_MULTIPLIER + unit)
    return acc


def hash_magnitude(h: int) -> int:
    # abs(INT32_MIN) does not fit in int32; keep it as 2**31.
    return 2**31 if h == INT32_MIN else abs(h)


def resolve(name: str, catalog: Sequence[str]) -> PastLife:
    """Map a name to its past life.

    Pure: the same name and catalog always give the same `PastLife`. Raises
    `ConfigurationError` when the catalog is empty.
    """
    if len(catalog) == 0:
        raise ConfigurationError("Cannot resolve a past life against an empty catalog.")

    magnitude = hash_magnitude(name_hash(name))
    title = catalog[magnitude % len(catalog)]
    year = (magnitude % YEAR_RANGE) - YEAR_OFFSET
    return PastLife(title=title, year=year)
