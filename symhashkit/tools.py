"""Small helpers: hex parsing, batch inverse hashing and attack summaries."""

from __future__ import annotations

import re

from .hashing import MASK, inverse_hash

_HEX = re.compile(r"\+?(?:0[xX])?([0-9a-fA-F]+)")


def parse_hex(text: str) -> int:
    """Parse an unsigned 32-bit hexadecimal value; anything invalid gives 0."""
    match = _HEX.fullmatch(text.strip())
    if match is None:
        return 0
    value = int(match.group(1), 16)
    return value if value <= MASK else 0


def inverse_hash_report(hash_text: str, char_text: str) -> str:
    """Undo the characters on each line of ``char_text`` from the matching hash line."""
    lines = zip(hash_text.split("\n"), char_text.split("\n"))
    return "".join(
        f"0x{inverse_hash(parse_hex(value), chars):x}\n" for value, chars in lines
    )


def kmp_summary(prefix: str, suffix: str) -> str:
    """Describe a symbol with a known prefix and suffix around an unknown part."""
    return f"(...){prefix}<unknown>{suffix}"