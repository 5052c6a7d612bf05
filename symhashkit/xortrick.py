"""XOR trick: guess the digits of a class-name length from XOR-folded hashes.

The low five bits of a hash XOR-ed with other hashes and known characters
leave only the length digits of a mangled class name; this lists the lengths
below 100 whose digits cancel those bits.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import reduce
from operator import xor

from .hashing import xor_string
from .tools import parse_hex

NO_SOLUTIONS = "(no solutions for 0 < len(className) < 100)"
NONE_NEEDED = "(none)"

_SEPARATORS = re.compile(r"[_ ,]")
_LEADING_DIGITS = "123456789"
_DIGITS = "0123456789"


@dataclass(frozen=True)
class XorAnalysis:
    """Result of folding one line: the XOR value and the length candidates."""

    xor_value: int
    candidates: list[str] = field(default_factory=list)

    @property
    def low_bits(self) -> int:
        return self.xor_value & 0b11111

    def __str__(self) -> str:
        found = ", ".join(self.candidates) if self.candidates else NO_SOLUTIONS
        return f"XOR = {self.low_bits} -> {found}"


def _candidates(value: int) -> list[str]:
    results: list[str] = []
    if value % 32 == 0:
        results.append(NONE_NEEDED)
    results.extend(d for d in _LEADING_DIGITS if (value ^ ord(d)) % 32 == 0)
    results.extend(
        d0 + d1
        for d0 in _LEADING_DIGITS
        for d1 in _DIGITS
        if (value ^ ord(d0) ^ ord(d1)) % 32 == 0
    )
    return results


def analyze_xor(hashes: str | Iterable[int], xor_chars: str) -> XorAnalysis:
    """Fold ``hashes`` and ``xor_chars`` together and list matching lengths.

    ``hashes`` is either a line of hex values separated by ``_``, space or
    comma, or an iterable of integers.
    """
    values = (
        map(parse_hex, _SEPARATORS.split(hashes)) if isinstance(hashes, str) else hashes
    )
    running = reduce(xor, values, 0) ^ xor_string(xor_chars)
    running &= 0xFFFFFFFF
    return XorAnalysis(running, _candidates(running))


def xor_report(hash_text: str, char_text: str) -> str:
    """Analyse each line pair; empty hash lines stay empty in the report."""
    lines = zip(hash_text.split("\n"), char_text.split("\n"))
    return "".join(
        (str(analyze_xor(hashes, chars)) if hashes else "") + "\n"
        for hashes, chars in lines
    )