"""Symbol-name hashing: the multiply-by-33 XOR hash, its inverse and XOR folding.

All arithmetic is done on unsigned 32-bit values. Characters are treated as
signed 8-bit values, so bytes 0x80-0xFF are sign-extended before they are
mixed in. Characters of a ``str`` beyond Latin-1 count as zero.
"""

from __future__ import annotations

from collections.abc import Iterator
from functools import reduce
from operator import xor

MASK = 0xFFFFFFFF
DEFAULT_SEED = 0x1505
MULTIPLIER = 33
# Multiplicative inverse of 33 modulo 2**32.
INVERSE_MULTIPLIER = 1041204193


def _char_codes(text: str | bytes) -> Iterator[int]:
    """Yield each character of ``text`` as a sign-extended 32-bit value."""
    if isinstance(text, (bytes, bytearray)):
        codes = iter(text)
    else:
        codes = (code if code <= 0xFF else 0 for code in map(ord, text))
    for code in codes:
        yield (code | 0xFFFFFF00) if code & 0x80 else code


def hash_string(text: str | bytes, seed: int = DEFAULT_SEED) -> int:
    """Hash ``text`` starting from ``seed``."""
    value = seed & MASK
    for code in _char_codes(text):
        value = ((MULTIPLIER * value) ^ code) & MASK
    return value


def inverse_hash(value: int, text: str | bytes) -> int:
    """Undo the effect of hashing ``text`` onto a state, returning the prior state."""
    value &= MASK
    for code in reversed(list(_char_codes(text))):
        value = (INVERSE_MULTIPLIER * (code ^ value)) & MASK
    return value


def xor_string(text: str | bytes) -> int:
    """XOR all characters of ``text`` together."""
    return reduce(xor, _char_codes(text), 0)